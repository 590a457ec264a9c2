import gradio as gr

from bootstrap_user_diff.config import DEFAULT_INPUT, IGNORED_PATHS
from bootstrap_user_diff.formatting import DIFF_TABLE_HEADERS
from bootstrap_user_diff.handlers import analyze_text_handler, load_payload_file
from bootstrap_user_diff.logging_config import setup_logging

# --- UI Definition ---
with gr.Blocks(title="Bootstrap Debugger") as demo:
    gr.Markdown("# Client vs bootstrapped user diff")
    gr.Markdown("Paste a user payload to automatically compare the client user fields against the bootstrap metadata.")

    with gr.Row():
        # Left Panel: Input
        with gr.Column(scale=1):
            gr.Markdown("### 1. Paste the raw JSON payload")
            gr.Markdown("Backslashes are stripped from `bootstrapMetadata` before it is parsed.")
            payload_input = gr.Textbox(
                label="Payload",
                value=DEFAULT_INPUT,
                lines=24,
                max_lines=60,
                placeholder="Paste the user JSON blob here...",
            )
            payload_file = gr.File(label="Or load a JSON file", file_types=[".json", ".txt"])
            upload_status = gr.Textbox(label="Upload Status", interactive=False)

            with gr.Row():
                parse_status = gr.Textbox(label="Payload Status", interactive=False)
                bootstrap_status = gr.Textbox(label="Bootstrap Status", interactive=False)

        # Right Panel: Users
        with gr.Column(scale=1):
            gr.Markdown("### 2. Client user")
            gr.Markdown("Pulled from `user`/`clientUser` or likely user fields.")
            client_panel = gr.Markdown()

            gr.Markdown("### 3. Bootstrapped user")
            gr.Markdown("Parsed from `bootstrapMetadata` fields.")
            bootstrap_panel = gr.Markdown()
            with gr.Accordion("See full bootstrap metadata", open=False):
                metadata_panel = gr.Code(language="json", interactive=False)

    gr.Markdown("### 4. Bootstrap vs client values")
    gr.Markdown(
        "Showing fields that exist in bootstrap metadata but are missing on the client user. "
        f"Ignoring {', '.join(f'`{p}`' for p in IGNORED_PATHS)}. "
        "Stable ID mismatches are listed as `changed` rows."
    )
    stable_ids = gr.Textbox(label="Resolved Stable IDs", interactive=False)
    diff_status = gr.Textbox(label="Diff Status", interactive=False)
    diff_table = gr.Dataframe(
        headers=DIFF_TABLE_HEADERS,
        datatype=["str", "str", "str", "str"],
        col_count=(4, "fixed"),
        interactive=False,
        label="Differences",
    )

    analysis_outputs = [
        parse_status,
        bootstrap_status,
        client_panel,
        bootstrap_panel,
        metadata_panel,
        stable_ids,
        diff_status,
        diff_table,
    ]

    payload_input.change(
        fn=analyze_text_handler,
        inputs=[payload_input],
        outputs=analysis_outputs,
    )

    payload_file.upload(
        fn=load_payload_file,
        inputs=[payload_file],
        outputs=[payload_input, upload_status],
    )

    demo.load(
        fn=analyze_text_handler,
        inputs=[payload_input],
        outputs=analysis_outputs,
    )

if __name__ == "__main__":
    setup_logging()
    demo.launch()

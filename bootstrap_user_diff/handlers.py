from __future__ import annotations

import logging
from typing import List, Optional

import gradio as gr

from .analysis import AnalysisResult, analyze_payload_cached
from .formatting import diff_rows_table, format_json
from .io_utils import read_text_content

logger = logging.getLogger(__name__)

CLIENT_USER_HINT = (
    "No client user fields detected yet. We look for a `user` or `clientUser` object, "
    "or top-level identifiers like `userID` and `customIDs`."
)
BOOTSTRAP_USER_HINT = "Add a bootstrapMetadata field to extract the bootstrapped user."
DIFF_NEEDS_BOTH = "We need both a client user and a parsed bootstrap user to compute the diff."
DIFF_CLEAN = "No bootstrap-only fields or stable ID mismatches detected."


def describe_parse_status(result: AnalysisResult) -> str:
    if result.parse.error:
        return result.parse.error
    if result.parse.data is not None:
        return "JSON parsed successfully"
    return "Waiting for JSON"


def describe_bootstrap_status(result: AnalysisResult) -> str:
    bootstrap = result.bootstrap
    if bootstrap.error:
        return bootstrap.error
    if bootstrap.bootstrap_user is not None:
        suffix = " (slashes stripped)" if bootstrap.was_cleaned else ""
        return f"Bootstrap metadata parsed{suffix}"
    return ""


def describe_diff_status(result: AnalysisResult) -> str:
    if not result.can_diff:
        return DIFF_NEEDS_BOTH
    if not result.display_rows:
        return DIFF_CLEAN
    return f"{len(result.display_rows)} difference(s) found."


def describe_stable_ids(result: AnalysisResult) -> str:
    client = result.client_stable_id or "∅"
    bootstrap = result.bootstrap_stable_id or "∅"
    return f"Client: {client} | Bootstrap: {bootstrap}"


def client_user_panel(result: AnalysisResult) -> str:
    if result.client_user is None:
        return CLIENT_USER_HINT
    return f"```json\n{format_json(result.client_user)}\n```"


def bootstrap_user_panel(result: AnalysisResult) -> str:
    bootstrap = result.bootstrap
    if bootstrap.bootstrap_user is None:
        return bootstrap.error or BOOTSTRAP_USER_HINT
    return f"```json\n{format_json(bootstrap.bootstrap_user)}\n```"


def analyze_text_handler(raw_text: Optional[str]):
    """Recompute every panel from the current input text."""
    result = analyze_payload_cached(raw_text or "")
    metadata = result.bootstrap.metadata
    rows: List[List[str]] = diff_rows_table(result.display_rows)

    return (
        describe_parse_status(result),
        describe_bootstrap_status(result),
        client_user_panel(result),
        bootstrap_user_panel(result),
        gr.update(value=format_json(metadata) if metadata is not None else "", visible=metadata is not None),
        describe_stable_ids(result),
        describe_diff_status(result),
        rows,
    )


def load_payload_file(file_obj):
    """Load payload text from an uploaded file into the input box."""
    if file_obj is None:
        return gr.update(), "No file uploaded."

    try:
        text = read_text_content(file_obj)
    except (OSError, UnicodeDecodeError, ValueError) as e:
        logger.info("Could not read uploaded payload: %s", e)
        return gr.update(), f"Error reading file: {str(e)}"

    return text, f"Loaded {len(text)} characters."

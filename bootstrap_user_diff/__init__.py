"""Core logic for the bootstrap user diff tool.

The Gradio UI lives in `app.py`. This package contains pure functions that:
- parse the pasted event payload
- extract the client user and the bootstrapped user
- resolve stable IDs for both sides
- diff the two users and pick the rows worth showing
"""
from __future__ import annotations

from .analysis import AnalysisResult, ParseResult, analyze_payload, analyze_payload_cached, parse_payload_text
from .classification import build_display_rows
from .diffing import DiffEntry, DiffStatus, diff_objects
from .extraction import extract_user
from .json_model import MISSING, JSONKind, json_kind
from .metadata import BootstrapResult, parse_bootstrap_metadata, sanitize_metadata_string
from .stable_id import resolve_stable_id

__all__ = [
    "AnalysisResult",
    "BootstrapResult",
    "DiffEntry",
    "DiffStatus",
    "JSONKind",
    "MISSING",
    "ParseResult",
    "analyze_payload",
    "analyze_payload_cached",
    "build_display_rows",
    "diff_objects",
    "extract_user",
    "json_kind",
    "parse_bootstrap_metadata",
    "parse_payload_text",
    "resolve_stable_id",
    "sanitize_metadata_string",
]

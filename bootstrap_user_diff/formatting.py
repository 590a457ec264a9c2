from __future__ import annotations

import json
from typing import Any, Iterable, List

from .config import INLINE_PREVIEW_LIMIT
from .diffing import DiffEntry
from .json_model import MISSING

ABSENT_MARKER = '∅'

DIFF_TABLE_HEADERS = ["Path", "Status", "Client", "Bootstrap"]


def _truncate(text: str, limit: int) -> str:
    return f"{text[:limit]}…" if len(text) > limit else text


def format_inline(value: Any, limit: int = INLINE_PREVIEW_LIMIT) -> str:
    """One-line rendering of a diff value for the table."""
    if value is MISSING:
        return ABSENT_MARKER
    if value is None:
        return 'null'
    if isinstance(value, str):
        return _truncate(value, limit)

    try:
        text = json.dumps(value, ensure_ascii=False, separators=(',', ':'))
    except TypeError:
        text = str(value)
    return _truncate(text, limit)


def format_json(value: Any) -> str:
    if value is MISSING:
        return ''
    try:
        return json.dumps(value, indent=2, ensure_ascii=False)
    except TypeError:
        return str(value)


def diff_rows_table(rows: Iterable[DiffEntry]) -> List[List[str]]:
    return [
        [row.path, row.status.value, format_inline(row.client_value), format_inline(row.bootstrap_value)]
        for row in rows
    ]

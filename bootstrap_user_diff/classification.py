"""Reduce the full diff to the rows shown to the user.

Two kinds of rows are kept: fields the bootstrapped user has but the client
user lacks, and one synthesized row when the resolved stable IDs disagree.
"""
from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from .config import CUSTOM_IDS_FIELD, IGNORED_PATHS, STABLE_ID_FIELD
from .diffing import DiffEntry, DiffStatus
from .json_model import JSONKind, json_kind
from .paths import is_ignored_path, join_path

logger = logging.getLogger(__name__)


def bootstrap_only_entries(
    entries: Iterable[DiffEntry],
    ignored_paths: Iterable[str] = IGNORED_PATHS,
) -> List[DiffEntry]:
    ignored_paths = tuple(ignored_paths)
    return [
        entry for entry in entries
        if entry.status is DiffStatus.ADDED and not is_ignored_path(entry.path, ignored_paths)
    ]


def _carries_value(value) -> bool:
    """Empty strings, zero, false and null do not count; empty objects do."""
    if value is None or value is False or value == "":
        return False
    if json_kind(value) is JSONKind.NUMBER:
        return value != 0
    return True


def stable_id_label(client_user: Optional[dict], bootstrap_user: Optional[dict]) -> str:
    has_custom_ids = any(
        user is not None and _carries_value(user.get(CUSTOM_IDS_FIELD))
        for user in (client_user, bootstrap_user)
    )
    if has_custom_ids:
        return join_path(CUSTOM_IDS_FIELD, STABLE_ID_FIELD)
    return STABLE_ID_FIELD


def stable_id_mismatch_entry(
    client_stable_id: Optional[str],
    bootstrap_stable_id: Optional[str],
    client_user: Optional[dict] = None,
    bootstrap_user: Optional[dict] = None,
) -> Optional[DiffEntry]:
    """Build the mismatch row, or None when the IDs agree or both are unset."""
    if client_stable_id == bootstrap_stable_id:
        return None
    if client_stable_id is None and bootstrap_stable_id is None:
        return None

    label = stable_id_label(client_user, bootstrap_user)
    logger.debug("Stable ID mismatch at %s: %r vs %r", label, client_stable_id, bootstrap_stable_id)
    return DiffEntry(
        path=label,
        status=DiffStatus.CHANGED,
        client_value=client_stable_id,
        bootstrap_value=bootstrap_stable_id,
    )


def build_display_rows(
    entries: Iterable[DiffEntry],
    client_stable_id: Optional[str],
    bootstrap_stable_id: Optional[str],
    client_user: Optional[dict] = None,
    bootstrap_user: Optional[dict] = None,
    ignored_paths: Iterable[str] = IGNORED_PATHS,
) -> List[DiffEntry]:
    rows = bootstrap_only_entries(entries, ignored_paths)
    mismatch = stable_id_mismatch_entry(client_stable_id, bootstrap_stable_id, client_user, bootstrap_user)
    if mismatch is not None:
        rows.append(mismatch)
    return rows

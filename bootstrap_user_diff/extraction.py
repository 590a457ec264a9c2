"""Locate the user object inside an arbitrarily shaped payload.

Extraction is a best-effort heuristic. Probes run in order and the first
one that yields a user wins, so reordering or adding a probe only touches
`USER_PROBES`.
"""
from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Optional, Tuple

from .config import DIRECT_USER_KEYS, USER_FIELD_ALLOWLIST
from .json_model import JSONKind, UserRecord, json_kind

logger = logging.getLogger(__name__)

UserProbe = Callable[[Dict[str, Any]], Optional[UserRecord]]


def probe_direct_user(record: Dict[str, Any]) -> Optional[UserRecord]:
    """Return the first of clientUser / user / statsigUser holding an object."""
    for key in DIRECT_USER_KEYS:
        if key in record and json_kind(record[key]) is JSONKind.MAPPING:
            logger.debug("User found under direct key %r", key)
            return record[key]
    return None


def probe_known_fields(record: Dict[str, Any]) -> Optional[UserRecord]:
    """Collect allow-listed identity fields that sit at the top level.

    A JSON null counts as present; only missing keys are skipped.
    """
    candidate: UserRecord = {}
    for key in USER_FIELD_ALLOWLIST:
        if key in record:
            candidate[key] = record[key]

    if candidate:
        logger.debug("User assembled from %d known fields", len(candidate))
        return candidate
    return None


USER_PROBES: Tuple[UserProbe, ...] = (probe_direct_user, probe_known_fields)


def extract_user(data: Any, probes: Tuple[UserProbe, ...] = USER_PROBES) -> Optional[UserRecord]:
    if data is None or json_kind(data) is not JSONKind.MAPPING:
        return None

    for probe in probes:
        user = probe(data)
        if user is not None:
            return user
    return None

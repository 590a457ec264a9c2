"""Recover the bootstrapped user from the escaped metadata string.

The metadata arrives as a JSON document serialized into a string field,
usually with an extra layer of backslash escaping. Cleaning removes every
backslash, which also corrupts legitimately escaped characters inside the
document; a document that only parses with its escapes intact is reported
as a parse error.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional

from .config import BOOTSTRAP_METADATA_FIELD, METADATA_USER_KEY
from .extraction import extract_user
from .json_model import JSONKind, UserRecord, json_kind, loads_strict

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BootstrapResult:
    metadata: Any = None
    bootstrap_user: Optional[UserRecord] = None
    cleaned_string: Optional[str] = None
    raw_string: Optional[str] = None
    was_cleaned: bool = False
    error: Optional[str] = None


def sanitize_metadata_string(raw: str) -> str:
    """Strip every backslash. Applying it twice changes nothing."""
    return raw.replace('\\', '')


def user_from_metadata(metadata: Any) -> Optional[UserRecord]:
    """Prefer a nested `user` object, otherwise scan the metadata like a payload."""
    if json_kind(metadata) is JSONKind.MAPPING:
        nested = metadata.get(METADATA_USER_KEY)
        if nested is not None and json_kind(nested) is JSONKind.MAPPING:
            return nested
    return extract_user(metadata)


def parse_bootstrap_metadata(data: Any, field: str = BOOTSTRAP_METADATA_FIELD) -> BootstrapResult:
    if data is None or json_kind(data) is not JSONKind.MAPPING:
        return BootstrapResult()

    if field not in data:
        return BootstrapResult(error=f"No {field} field found on this payload.")

    raw_value = data[field]
    if json_kind(raw_value) is not JSONKind.STRING:
        return BootstrapResult(error=f"{field} exists but is not a string.")

    cleaned = sanitize_metadata_string(raw_value)
    was_cleaned = cleaned != raw_value

    try:
        metadata = loads_strict(cleaned)
    except (ValueError, RecursionError) as exc:
        logger.debug("Metadata did not parse after cleaning: %s", exc)
        return BootstrapResult(
            cleaned_string=cleaned,
            raw_string=raw_value,
            was_cleaned=was_cleaned,
            error=f"Unable to parse {field}: {exc}",
        )

    return BootstrapResult(
        metadata=metadata,
        bootstrap_user=user_from_metadata(metadata),
        cleaned_string=cleaned,
        raw_string=raw_value,
        was_cleaned=was_cleaned,
    )

from __future__ import annotations

from typing import Any, Optional

from .config import CUSTOM_IDS_FIELD, STABLE_ID_FIELD
from .json_model import JSONKind, json_kind


def _non_blank(value: Any) -> Optional[str]:
    if json_kind(value) is JSONKind.STRING and value.strip():
        return value.strip()
    return None


def resolve_stable_id(user: Optional[dict]) -> Optional[str]:
    """Return the user's stable ID, trimmed.

    A top-level `stableID` wins over `customIDs.stableID`; blank strings and
    non-string values are skipped.
    """
    if not user:
        return None

    direct = _non_blank(user.get(STABLE_ID_FIELD))
    if direct is not None:
        return direct

    custom_ids = user.get(CUSTOM_IDS_FIELD)
    if custom_ids is not None and json_kind(custom_ids) is JSONKind.MAPPING:
        return _non_blank(custom_ids.get(STABLE_ID_FIELD))
    return None

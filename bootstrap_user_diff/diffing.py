"""Path-qualified structural diff between the client and bootstrapped users.

Only leaves are reported: when both sides hold an object at a key the diff
descends into it, and each differing descendant becomes one `DiffEntry`
whose path is the dot-joined chain of keys. Anything else is compared as a
whole, with sequences compared by their serialized JSON (so element order
matters and elements are never aligned).
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional

from .config import IGNORED_PATHS
from .json_model import MISSING, JSONKind, json_kind, serialize_sequence
from .paths import is_ignored_path, join_path


class DiffStatus(str, Enum):
    ADDED = 'added'
    REMOVED = 'removed'
    CHANGED = 'changed'


@dataclass(frozen=True)
class DiffEntry:
    path: str
    status: DiffStatus
    client_value: Any = MISSING
    bootstrap_value: Any = MISSING

    def as_dict(self) -> Dict[str, Any]:
        return {
            'path': self.path,
            'status': self.status.value,
            'clientValue': self.client_value,
            'bootstrapValue': self.bootstrap_value,
        }


def values_equal(left: Any, right: Any) -> bool:
    left_kind = json_kind(left)
    right_kind = json_kind(right)

    if JSONKind.SEQUENCE in (left_kind, right_kind):
        if left_kind is not right_kind:
            return False
        return serialize_sequence(left) == serialize_sequence(right)

    # Objects only match through recursion in diff_objects.
    if JSONKind.MAPPING in (left_kind, right_kind):
        return False

    if left_kind is not right_kind:
        return False
    return left == right


def classify_status(client_value: Any, bootstrap_value: Any) -> DiffStatus:
    if client_value is MISSING:
        return DiffStatus.ADDED
    if bootstrap_value is MISSING:
        return DiffStatus.REMOVED
    return DiffStatus.CHANGED


def _union_keys(client: Dict[str, Any], bootstrap: Dict[str, Any]) -> List[str]:
    keys = list(client)
    keys.extend(k for k in bootstrap if k not in client)
    return keys


def diff_objects(
    client: Optional[Dict[str, Any]],
    bootstrap: Optional[Dict[str, Any]],
    path: str = '',
    ignored_paths: Iterable[str] = IGNORED_PATHS,
) -> List[DiffEntry]:
    """Diff two user objects, skipping ignored paths and their subtrees.

    Keys are visited client-first, then bootstrap-only keys, each in
    insertion order.
    """
    client = client or {}
    bootstrap = bootstrap or {}
    ignored_paths = tuple(ignored_paths)

    rows: List[DiffEntry] = []
    for key in _union_keys(client, bootstrap):
        next_path = join_path(path, key)
        if is_ignored_path(next_path, ignored_paths):
            continue

        client_value = client.get(key, MISSING)
        bootstrap_value = bootstrap.get(key, MISSING)

        if json_kind(client_value) is JSONKind.MAPPING and json_kind(bootstrap_value) is JSONKind.MAPPING:
            rows.extend(diff_objects(client_value, bootstrap_value, next_path, ignored_paths))
        elif not values_equal(client_value, bootstrap_value):
            rows.append(DiffEntry(
                path=next_path,
                status=classify_status(client_value, bootstrap_value),
                client_value=client_value,
                bootstrap_value=bootstrap_value,
            ))

    return rows

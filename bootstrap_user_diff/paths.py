from __future__ import annotations

from typing import Iterable


def join_path(prefix: str, key: str) -> str:
    """Append a key to a dot path. Keys are used verbatim, dots included."""
    return f"{prefix}.{key}" if prefix else key


def matches_ignored_prefix(path: str, ignored: str) -> bool:
    return path == ignored or path.startswith(f"{ignored}.")


def is_ignored_path(path: str, ignored_paths: Iterable[str]) -> bool:
    """True when `path` is an ignored path or sits underneath one."""
    return any(matches_ignored_prefix(path, ignored) for ignored in ignored_paths)

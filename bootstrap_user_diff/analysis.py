"""Run the whole pipeline over the raw text of one event payload.

raw text -> payload -> client user / bootstrap result -> stable IDs ->
diff -> display rows. Every value is recomputed from the text; nothing is
kept between calls apart from the optional memo in `analyze_payload_cached`.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Any, Iterable, List, Optional

from .classification import build_display_rows
from .config import BOOTSTRAP_METADATA_FIELD, IGNORED_PATHS
from .diffing import DiffEntry, diff_objects
from .extraction import extract_user
from .json_model import UserRecord, loads_strict
from .metadata import BootstrapResult, parse_bootstrap_metadata
from .stable_id import resolve_stable_id

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ParseResult:
    data: Any = None
    error: Optional[str] = None


@dataclass(frozen=True)
class AnalysisResult:
    parse: ParseResult
    client_user: Optional[UserRecord] = None
    bootstrap: BootstrapResult = field(default_factory=BootstrapResult)
    client_stable_id: Optional[str] = None
    bootstrap_stable_id: Optional[str] = None
    diff: List[DiffEntry] = field(default_factory=list)
    display_rows: List[DiffEntry] = field(default_factory=list)

    @property
    def error(self) -> Optional[str]:
        return self.parse.error

    @property
    def can_diff(self) -> bool:
        return self.client_user is not None and self.bootstrap.bootstrap_user is not None


def parse_payload_text(raw_text: Optional[str]) -> ParseResult:
    """Parse the pasted text. Blank input is a waiting state, not an error."""
    if raw_text is None or not raw_text.strip():
        return ParseResult()

    try:
        return ParseResult(data=loads_strict(raw_text))
    except (ValueError, RecursionError) as exc:
        return ParseResult(error=f"Unable to parse JSON: {exc}")


def analyze_payload(
    raw_text: Optional[str],
    ignored_paths: Iterable[str] = IGNORED_PATHS,
    metadata_field: str = BOOTSTRAP_METADATA_FIELD,
) -> AnalysisResult:
    ignored_paths = tuple(ignored_paths)
    parsed = parse_payload_text(raw_text)
    if parsed.error:
        logger.debug("Payload rejected: %s", parsed.error)

    client_user = extract_user(parsed.data)
    bootstrap = parse_bootstrap_metadata(parsed.data, field=metadata_field)
    bootstrap_user = bootstrap.bootstrap_user

    client_stable_id = resolve_stable_id(client_user)
    bootstrap_stable_id = resolve_stable_id(bootstrap_user)

    diff: List[DiffEntry] = []
    display_rows: List[DiffEntry] = []
    if client_user is not None and bootstrap_user is not None:
        diff = diff_objects(client_user, bootstrap_user, ignored_paths=ignored_paths)
        display_rows = build_display_rows(
            diff,
            client_stable_id,
            bootstrap_stable_id,
            client_user,
            bootstrap_user,
            ignored_paths=ignored_paths,
        )
        logger.debug("Diff produced %d rows, %d shown", len(diff), len(display_rows))

    return AnalysisResult(
        parse=parsed,
        client_user=client_user,
        bootstrap=bootstrap,
        client_stable_id=client_stable_id,
        bootstrap_stable_id=bootstrap_stable_id,
        diff=diff,
        display_rows=display_rows,
    )


@lru_cache(maxsize=32)
def analyze_payload_cached(raw_text: Optional[str]) -> AnalysisResult:
    """Memoized `analyze_payload` with the default configuration.

    Results are shared between callers, so treat them as read-only.
    """
    return analyze_payload(raw_text)

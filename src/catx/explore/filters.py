"""
Filter engine: compose independent filter dimensions into one predicate.

Dimensions (AND across dimensions):
    - genres: conjunctive; a Record must carry every selected genre. Empty selection
      matches everything (vacuous conjunction).
    - status: exact match; "all" disables the dimension.
    - episode_buckets: disjunctive; a Record matches iff its episode count falls in any
      selected bucket. Malformed labels never match and never raise.
    - year: a Record matches iff its aired range spans the year. Records without an
      aired range fail when this dimension is enabled.
    - episode_limit: episodes <= limit.

All functions are pure and never mutate their inputs.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable

from catx.core.constants import STATUS_ALL
from catx.core.errors import BucketFormatError
from catx.core.schema import EpisodeBucket, FilterState, Record

__all__ = [
    "Predicate",
    "match_genres",
    "match_status",
    "match_episode_buckets",
    "match_year",
    "match_episode_limit",
    "compile_buckets",
    "build_predicate",
    "apply_filter",
]

logger = logging.getLogger(__name__)

Predicate = Callable[[Record], bool]


def match_genres(record: Record, selected: Iterable[str]) -> bool:
    return set(selected).issubset(record.genres)


def match_status(record: Record, status: str) -> bool:
    return status == STATUS_ALL or record.status == status


def match_episode_buckets(record: Record, buckets: Iterable[EpisodeBucket]) -> bool:
    """True iff episodes fall in any bucket (an empty bucket list matches nothing)."""
    return any(b.contains(record.episodes) for b in buckets)


def match_year(record: Record, year: int | None) -> bool:
    if year is None:
        return True
    return record.aired is not None and record.aired.contains(year)


def match_episode_limit(record: Record, limit: int | None) -> bool:
    return limit is None or record.episodes <= limit


def compile_buckets(labels: Iterable[str]) -> tuple[EpisodeBucket, ...]:
    """Parse bucket labels, dropping malformed ones (logged at DEBUG)."""
    out: list[EpisodeBucket] = []
    for label in sorted(labels):
        try:
            out.append(EpisodeBucket.from_label(label))
        except BucketFormatError as exc:
            logger.debug("ignoring episode bucket: %s", exc)
    return tuple(out)


def build_predicate(state: FilterState) -> Predicate:
    """
    Compile a FilterState into a single Record predicate.

    Disabled dimensions are left out of the composed predicate entirely.

    Args:
        state: Filter selection snapshot.

    Returns:
        Predicate: Callable returning True iff a Record passes every enabled dimension.
    """
    checks: list[Predicate] = []

    if state.genres:
        selected = frozenset(state.genres)
        checks.append(lambda r: match_genres(r, selected))
    if state.status != STATUS_ALL:
        status = state.status
        checks.append(lambda r: match_status(r, status))
    if state.episode_buckets:
        # Selection is non-empty, so a selection made only of malformed labels matches nothing.
        buckets = compile_buckets(state.episode_buckets)
        checks.append(lambda r: match_episode_buckets(r, buckets))
    if state.year is not None:
        year = state.year
        checks.append(lambda r: match_year(r, year))
    if state.episode_limit is not None:
        limit = state.episode_limit
        checks.append(lambda r: match_episode_limit(r, limit))

    def predicate(record: Record) -> bool:
        return all(check(record) for check in checks)

    return predicate


def apply_filter(records: Iterable[Record], state: FilterState) -> tuple[Record, ...]:
    """
    Return the Records passing ``state``, in input order.

    Args:
        records: Record collection.
        state: Filter selection snapshot.

    Returns:
        tuple[Record, ...]: Order-preserving filtered subset.
    """
    predicate = build_predicate(state)
    return tuple(r for r in records if predicate(r))

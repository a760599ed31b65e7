"""Universe deriver: distinct genres and statuses for populating filter options."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from catx.core.constants import GENRE_HEADER_SENTINEL, STATUS_ALL
from catx.core.schema import Record

__all__ = ["Universe", "derive_universe"]


@dataclass(frozen=True)
class Universe:
    """Filter option domains.

    Attributes:
        genres: Distinct genres in first-seen order, header sentinel excluded.
        statuses: "all" followed by distinct statuses in first-seen order.
    """

    genres: tuple[str, ...]
    statuses: tuple[str, ...]


def _dedupe_preserving_order(items: Iterable[str]) -> tuple[str, ...]:
    seen: set[str] = set()
    out: list[str] = []
    for item in items:
        if item in seen:
            continue
        seen.add(item)
        out.append(item)
    return tuple(out)


def derive_universe(records: Iterable[Record]) -> Universe:
    """
    Compute the genre and status universes of a Record collection.

    Args:
        records: Record collection (any iterable; consumed once).

    Returns:
        Universe: genres without GENRE_HEADER_SENTINEL; statuses always led by "all".
    """
    recs = tuple(records)
    genres = _dedupe_preserving_order(
        g for r in recs for g in r.genres if g != GENRE_HEADER_SENTINEL
    )
    statuses = _dedupe_preserving_order(r.status for r in recs if r.status != STATUS_ALL)
    return Universe(genres=genres, statuses=(STATUS_ALL, *statuses))

"""
Normalizer: raw positional rows -> immutable Records.

A row is rejected (RowRejected) only when its name is blank or missing. Every other
field degrades to its documented default instead of discarding the row; the names of
defaulted fields are recorded on Record.defaulted and logged at DEBUG.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from catx.core.constants import DEFAULT_STATUS, DEFAULT_SYNOPSIS, ROW_COLUMNS
from catx.core.errors import RowRejected
from catx.core.grammar import (
    clean_text,
    parse_aired_range,
    parse_episodes,
    parse_rating,
    split_genres,
)
from catx.core.schema import AiredRange, Record
from catx.core.typing import RawRow

__all__ = [
    "NormalizeResult",
    "parse_row",
    "normalize_row",
    "normalize_rows",
]

logger = logging.getLogger(__name__)

_N_COLUMNS = len(ROW_COLUMNS)


@dataclass(frozen=True)
class NormalizeResult:
    """Outcome of normalizing a row collection.

    Attributes:
        records: Accepted Records in input order.
        rejected: Number of rows dropped for a missing name.
    """

    records: tuple[Record, ...]
    rejected: int = 0

    @property
    def total(self) -> int:
        return len(self.records) + self.rejected


def _cells(row: RawRow) -> list[str | None]:
    # Ragged rows are padded with missing cells; surplus cells are ignored.
    cells = list(row)[:_N_COLUMNS]
    cells.extend([None] * (_N_COLUMNS - len(cells)))
    return cells


def parse_row(row: RawRow) -> Record:
    """
    Parse one raw row into a Record.

    Args:
        row: Cells in ROW_COLUMNS order (name, rating, genres, synopsis, episodes,
            aired, status).

    Returns:
        Record: Normalized record.

    Raises:
        RowRejected: If the name cell is blank or missing.
    """
    name_cell, rating_cell, genres_cell, synopsis_cell, episodes_cell, aired_cell, status_cell = (
        _cells(row)
    )

    name = clean_text(name_cell)
    if name is None:
        raise RowRejected("row has no name")

    defaulted: set[str] = set()

    rating, rating_defaulted = parse_rating(rating_cell)
    if rating_defaulted:
        defaulted.add("rating")

    episodes, episodes_defaulted = parse_episodes(episodes_cell)
    if episodes_defaulted:
        defaulted.add("episodes")

    years = parse_aired_range(aired_cell)
    aired = None if years is None else AiredRange(start_year=years[0], end_year=years[1])
    if aired is None:
        defaulted.add("aired")

    status = clean_text(status_cell)
    if status is None:
        status = DEFAULT_STATUS
        defaulted.add("status")

    synopsis = clean_text(synopsis_cell)
    if synopsis is None:
        synopsis = DEFAULT_SYNOPSIS
        defaulted.add("synopsis")

    if defaulted:
        logger.debug("record %r defaulted fields: %s", name, sorted(defaulted))

    return Record(
        name=name,
        rating=rating,
        genres=split_genres(genres_cell),
        status=status,
        episodes=episodes,
        aired=aired,
        synopsis=synopsis,
        defaulted=frozenset(defaulted),
    )


def normalize_row(row: RawRow) -> Record | None:
    """Parse one row; return None (rejection signal) instead of raising."""
    try:
        return parse_row(row)
    except RowRejected as exc:
        logger.debug("row rejected: %s (cells=%r)", exc, list(row)[:2])
        return None


def normalize_rows(rows: Iterable[RawRow]) -> NormalizeResult:
    """Normalize a fully materialized row collection, preserving input order."""
    records: list[Record] = []
    rejected = 0
    for row in rows:
        rec = normalize_row(row)
        if rec is None:
            rejected += 1
        else:
            records.append(rec)
    if rejected:
        logger.info("normalized %d rows: %d rejected (missing name)", len(records) + rejected, rejected)
    return NormalizeResult(records=tuple(records), rejected=rejected)

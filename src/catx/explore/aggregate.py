"""
Aggregator: genre x year average-rating matrix.

Every retained Record contributes its rating to each (year, genre) bucket in the cross
product of its inclusive aired range and its genre list, so a Record airing 1999-2001 in
genre G adds one sample to each of (1999, G), (2000, G), (2001, G).

Notes:
    - Records with no genres or no aired range are skipped (logged at DEBUG).
    - The header-artifact genre token never becomes a matrix row.
    - Bucket means use math.fsum, so the matrix does not depend on Record order.
    - Absent (year, genre) pairs carry no value; they are never reported as 0.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from catx.core.constants import GENRE_HEADER_SENTINEL
from catx.core.schema import MatrixCell, Record

__all__ = ["GenreYearMatrix", "accumulate", "build_matrix"]

logger = logging.getLogger(__name__)

BucketKey = tuple[int, str]


@dataclass(frozen=True)
class GenreYearMatrix:
    """
    Immutable (year, genre) -> average rating mapping.

    Attributes:
        values: Populated buckets only.
        counts: Sample count per populated bucket.
        genres: Contributing genre domain, sorted.

    Examples:
        >>> from catx.core.schema import AiredRange, Record
        >>> r = Record(name="A", rating=8.0, genres=("Action",), status="x", episodes=1,
        ...            aired=AiredRange(start_year=1999, end_year=2000), synopsis="s")
        >>> m = build_matrix([r])
        >>> m.get(2000, "Action"), m.get(2001, "Action")
        (8.0, None)
    """

    values: dict[BucketKey, float] = field(default_factory=dict)
    counts: dict[BucketKey, int] = field(default_factory=dict)
    genres: tuple[str, ...] = ()

    @property
    def years(self) -> tuple[int, ...]:
        """Full contiguous year domain [min, max]; empty when the matrix is empty."""
        if not self.values:
            return ()
        ys = [y for y, _ in self.values]
        return tuple(range(min(ys), max(ys) + 1))

    @property
    def year_bounds(self) -> tuple[int, int] | None:
        ys = self.years
        return (ys[0], ys[-1]) if ys else None

    def get(self, year: int, genre: str) -> float | None:
        return self.values.get((year, genre))

    def count(self, year: int, genre: str) -> int:
        return self.counts.get((year, genre), 0)

    def cells(self) -> Iterator[MatrixCell]:
        """Populated cells ordered by year, then genre domain order."""
        order = {g: i for i, g in enumerate(self.genres)}
        for year, genre in sorted(self.values, key=lambda k: (k[0], order[k[1]])):
            yield MatrixCell(
                year=year,
                genre=genre,
                value=self.values[(year, genre)],
                count=self.counts[(year, genre)],
            )

    def __getitem__(self, key: BucketKey) -> float:
        return self.values[key]

    def __contains__(self, key: object) -> bool:
        return key in self.values

    def __len__(self) -> int:
        return len(self.values)


def accumulate(records: Iterable[Record]) -> tuple[dict[BucketKey, list[float]], tuple[str, ...]]:
    """Collect per-bucket rating samples and the contributing genre domain."""
    buckets: dict[BucketKey, list[float]] = {}
    genres: set[str] = set()
    for record in records:
        if not record.genres:
            logger.debug("matrix skips %r: no genres", record.name)
            continue
        if record.aired is None:
            logger.debug("matrix skips %r: no aired range", record.name)
            continue
        for year in record.aired.years():
            # One sample per Record-year-genre triple, even if a genre is listed twice.
            for genre in dict.fromkeys(record.genres):
                if genre == GENRE_HEADER_SENTINEL:
                    continue
                buckets.setdefault((year, genre), []).append(record.rating)
                genres.add(genre)
    return buckets, tuple(sorted(genres))


def build_matrix(records: Iterable[Record]) -> GenreYearMatrix:
    """
    Build the genre x year matrix from a Record collection.

    Args:
        records: Record collection (not necessarily genre-filtered).

    Returns:
        GenreYearMatrix: Unweighted mean rating per populated (year, genre) bucket.
    """
    buckets, genres = accumulate(records)
    values = {key: math.fsum(samples) / len(samples) for key, samples in buckets.items()}
    counts = {key: len(samples) for key, samples in buckets.items()}
    return GenreYearMatrix(values=values, counts=counts, genres=genres)

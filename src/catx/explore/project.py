"""
Point projector: Records -> (release year, rating) scatter points.

Records without an aired range, or whose rating was defaulted from a non-numeric cell,
are skipped rather than plotted at a made-up position. Skips are silent to the caller and
reported on this module's logger at DEBUG.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Sequence

from catx.core.schema import Record, ScatterPoint

__all__ = ["PointSequence", "to_point", "project_points", "series_label"]

logger = logging.getLogger(__name__)


def to_point(record: Record) -> ScatterPoint | None:
    """Map one Record to a point, or None when it has no genuine temporal anchor/rating."""
    if record.aired is None:
        logger.debug("skipping %r: no aired range", record.name)
        return None
    if record.is_defaulted("rating"):
        logger.debug("skipping %r: rating is not numeric", record.name)
        return None
    return ScatterPoint(
        x=record.aired.start_year,
        y=record.rating,
        label=record.name,
        status=record.status,
        episodes=record.episodes,
    )


class PointSequence:
    """Restartable lazy view of the points projected from a Record snapshot.

    Each iteration walks the snapshot afresh; nothing is cached between passes.
    """

    def __init__(self, records: Sequence[Record], genre: str | None = None) -> None:
        self._records = tuple(records)
        self._genre = genre

    @property
    def genre(self) -> str | None:
        return self._genre

    def __iter__(self) -> Iterator[ScatterPoint]:
        for record in self._records:
            if self._genre is not None and self._genre not in record.genres:
                continue
            point = to_point(record)
            if point is not None:
                yield point

    def __repr__(self) -> str:
        return f"PointSequence(records={len(self._records)}, genre={self._genre!r})"


def project_points(records: Iterable[Record], *, genre: str | None = None) -> PointSequence:
    """
    Project filtered Records onto scatter points.

    Args:
        records: Filtered Record collection.
        genre: Optional genre context; when given, only Records carrying it are projected.

    Returns:
        PointSequence: Finite, restartable iterable of ScatterPoint.
    """
    return PointSequence(tuple(records), genre=genre)


def series_label(genres: Iterable[str]) -> str:
    """Chart series label for the selected genre context."""
    names = sorted(genres)
    if not names:
        return "Ratings (all genres)"
    return f"Ratings ({', '.join(names)})"

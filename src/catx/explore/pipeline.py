"""
Explorer snapshot: records + filter state + every derived view.

The Explorer is immutable. Changing the filter publishes a new snapshot; the filtered
collection and points are always recomputed, the matrix only when its own input changed
(with matrix_source="all" the matrix is built once per load and carried forward).
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, replace
from typing import Literal

from catx.core.schema import FilterState, Record

from .aggregate import GenreYearMatrix, build_matrix
from .filters import apply_filter
from .project import PointSequence, project_points
from .universe import Universe, derive_universe

__all__ = ["MatrixSource", "Explorer"]

logger = logging.getLogger(__name__)

MatrixSource = Literal["all", "filtered"]


@dataclass(frozen=True)
class Explorer:
    """
    Immutable snapshot of the exploration pipeline.

    Attributes:
        records: Full normalized Record collection for the current load.
        universe: Genre/status option domains (computed once per load).
        state: Current filter selection.
        filtered: Records passing ``state``, in input order.
        matrix: Genre x year matrix over ``records`` or ``filtered`` per matrix_source.
        matrix_source: Which collection feeds the matrix.
        genre_context: Optional single genre the scatter view is restricted to.

    Examples:
        >>> from catx.explore import Explorer
        >>> ex = Explorer.load([])
        >>> ex.universe.statuses
        ('all',)
    """

    records: tuple[Record, ...]
    universe: Universe
    state: FilterState
    filtered: tuple[Record, ...]
    matrix: GenreYearMatrix
    matrix_source: MatrixSource = "all"
    genre_context: str | None = None

    @classmethod
    def load(
        cls,
        records: Iterable[Record],
        *,
        state: FilterState | None = None,
        matrix_source: MatrixSource = "all",
        genre_context: str | None = None,
    ) -> Explorer:
        """Build the initial snapshot for a freshly loaded Record collection."""
        recs = tuple(records)
        current = state or FilterState()
        filtered = apply_filter(recs, current)
        matrix = build_matrix(recs if matrix_source == "all" else filtered)
        logger.debug(
            "loaded %d records (%d after filter, %d matrix cells)",
            len(recs),
            len(filtered),
            len(matrix),
        )
        return cls(
            records=recs,
            universe=derive_universe(recs),
            state=current,
            filtered=filtered,
            matrix=matrix,
            matrix_source=matrix_source,
            genre_context=genre_context,
        )

    def with_filter(self, state: FilterState) -> Explorer:
        """Return a new snapshot for ``state`` (self is returned when nothing changed)."""
        if state == self.state:
            return self
        filtered = apply_filter(self.records, state)
        if self.matrix_source == "all":
            matrix = self.matrix
        else:
            matrix = build_matrix(filtered)
        return replace(self, state=state, filtered=filtered, matrix=matrix)

    def with_genre_context(self, genre: str | None) -> Explorer:
        return replace(self, genre_context=genre)

    @property
    def points(self) -> PointSequence:
        return project_points(self.filtered, genre=self.genre_context)

    @property
    def is_empty(self) -> bool:
        """True when no Record passes the current filter."""
        return not self.filtered

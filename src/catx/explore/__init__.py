"""
catx.explore — Normalization, filtering, projection, and aggregation over Records.

## Public API
- normalize_row / normalize_rows — raw rows -> Records (RowRejected recovered locally).
- derive_universe — genre/status option domains.
- apply_filter / build_predicate — composable filter dimensions.
- project_points — restartable (year, rating) point sequence.
- build_matrix — genre x year average-rating matrix.
- top_rated — highest-rated Records for the bar view.
- Explorer — immutable snapshot wiring the stages together.

## Notes
- Every stage is a pure function of its inputs; recomputation is wholesale.
- Diagnostics (rejected rows, defaulted fields, skipped Records) go to the module loggers.
"""

from __future__ import annotations

from .aggregate import GenreYearMatrix, build_matrix
from .filters import apply_filter, build_predicate
from .normalize import NormalizeResult, normalize_row, normalize_rows
from .pipeline import Explorer
from .project import PointSequence, project_points, series_label
from .ranking import top_rated
from .universe import Universe, derive_universe

__all__ = [
    "NormalizeResult",
    "normalize_row",
    "normalize_rows",
    "Universe",
    "derive_universe",
    "build_predicate",
    "apply_filter",
    "PointSequence",
    "project_points",
    "series_label",
    "GenreYearMatrix",
    "build_matrix",
    "top_rated",
    "Explorer",
]

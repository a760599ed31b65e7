"""
Polars frames for chart builders and tabular views.

Each builder emits a frame with an explicit schema (so empty inputs still carry the right
dtypes) and validates it against its catx.core.tables descriptor.
"""

from __future__ import annotations

from collections.abc import Iterable

import polars as pl

from catx.core.schema import Record, ScatterPoint
from catx.core.tables import MATRIX_DESC, POINTS_DESC, RECORDS_DESC
from catx.explore.aggregate import GenreYearMatrix

from .validate import validate_frame_against_descriptor

__all__ = ["records_to_frame", "points_to_frame", "matrix_to_frame"]

_RECORDS_SCHEMA = {
    "name": pl.Utf8,
    "rating": pl.Float64,
    "genres": pl.List(pl.Utf8),
    "status": pl.Utf8,
    "episodes": pl.Int64,
    "start_year": pl.Int64,
    "end_year": pl.Int64,
    "synopsis": pl.Utf8,
}
_POINTS_SCHEMA = {
    "x": pl.Int64,
    "y": pl.Float64,
    "label": pl.Utf8,
    "status": pl.Utf8,
    "episodes": pl.Int64,
}
_MATRIX_SCHEMA = {
    "year": pl.Int64,
    "genre": pl.Utf8,
    "value": pl.Float64,
    "count": pl.Int64,
}


def records_to_frame(records: Iterable[Record]) -> pl.DataFrame:
    """One row per Record; start_year/end_year are null without an aired range."""
    rows = [
        {
            "name": r.name,
            "rating": r.rating,
            "genres": list(r.genres),
            "status": r.status,
            "episodes": r.episodes,
            "start_year": r.aired.start_year if r.aired else None,
            "end_year": r.aired.end_year if r.aired else None,
            "synopsis": r.synopsis,
        }
        for r in records
    ]
    df = pl.DataFrame(rows, schema=_RECORDS_SCHEMA)
    return validate_frame_against_descriptor(df, RECORDS_DESC)


def points_to_frame(points: Iterable[ScatterPoint]) -> pl.DataFrame:
    df = pl.DataFrame([p.model_dump() for p in points], schema=_POINTS_SCHEMA)
    return validate_frame_against_descriptor(df, POINTS_DESC)


def matrix_to_frame(matrix: GenreYearMatrix, *, fill_empty: bool = True) -> pl.DataFrame:
    """
    Long-form matrix frame.

    Args:
        matrix: Aggregated genre x year matrix.
        fill_empty: When True, emit the full year x genre grid with null value/count for
            empty cells so renderers can draw them distinctly from a rating of 0.

    Returns:
        pl.DataFrame: Columns year, genre, value, count ordered by year then genre.
    """
    if fill_empty:
        rows = [
            {
                "year": year,
                "genre": genre,
                "value": matrix.get(year, genre),
                "count": matrix.count(year, genre) or None,
            }
            for year in matrix.years
            for genre in matrix.genres
        ]
    else:
        rows = [c.model_dump() for c in matrix.cells()]
    df = pl.DataFrame(rows, schema=_MATRIX_SCHEMA)
    return validate_frame_against_descriptor(df, MATRIX_DESC)

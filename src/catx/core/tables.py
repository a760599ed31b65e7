"""
Frozen frame descriptors for the polars tables handed to chart builders.

Notes:
    - Descriptors declare column names/dtypes and required/nullable columns.
    - dtype is one of {"i64", "f64", "str", "list[str]"}.
    - Core is zero-IO (stdlib only); catx.io materializes and validates frames.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

__all__ = [
    "FrameName",
    "FrameDescriptor",
    "RECORDS_DESC",
    "POINTS_DESC",
    "MATRIX_DESC",
    "get_frame",
    "list_frames",
]


class FrameName(Enum):
    RECORDS = "records"
    POINTS = "points"
    MATRIX = "matrix"


@dataclass(frozen=True)
class FrameDescriptor:
    """
    Frozen descriptor for one of the catalog frames.

    Attributes:
        name (FrameName): Frame identifier.
        columns (dict[str, str]): Mapping of column_name -> dtype.
        required (list[str]): Columns that must exist and be populated (non-null).
        nullable (list[str]): Columns permitted to contain nulls.

    Examples:
        >>> from catx.core.tables import get_frame, FrameName
        >>> "value" in get_frame(FrameName.MATRIX).nullable
        True

    Notes:
        - required ⊆ columns; (required ∪ nullable) == columns; required ∩ nullable = ∅.
    """

    name: FrameName
    columns: dict[str, str]
    required: list[str]
    nullable: list[str]


RECORDS_DESC = FrameDescriptor(
    name=FrameName.RECORDS,
    columns={
        "name": "str",
        "rating": "f64",
        "genres": "list[str]",
        "status": "str",
        "episodes": "i64",
        "start_year": "i64",
        "end_year": "i64",
        "synopsis": "str",
    },
    required=["name", "rating", "genres", "status", "episodes", "synopsis"],
    nullable=["start_year", "end_year"],
)

POINTS_DESC = FrameDescriptor(
    name=FrameName.POINTS,
    columns={
        "x": "i64",
        "y": "f64",
        "label": "str",
        "status": "str",
        "episodes": "i64",
    },
    required=["x", "y", "label", "status", "episodes"],
    nullable=[],
)

# Full year x genre grid; empty cells carry null value/count, never 0.
MATRIX_DESC = FrameDescriptor(
    name=FrameName.MATRIX,
    columns={
        "year": "i64",
        "genre": "str",
        "value": "f64",
        "count": "i64",
    },
    required=["year", "genre"],
    nullable=["value", "count"],
)

_FRAMES: dict[FrameName, FrameDescriptor] = {
    FrameName.RECORDS: RECORDS_DESC,
    FrameName.POINTS: POINTS_DESC,
    FrameName.MATRIX: MATRIX_DESC,
}


def get_frame(name: FrameName | str) -> FrameDescriptor:
    """Return the descriptor for a frame name (enum or its string value)."""
    key = name if isinstance(name, FrameName) else FrameName(str(name))
    return _FRAMES[key]


def list_frames() -> list[FrameDescriptor]:
    return list(_FRAMES.values())

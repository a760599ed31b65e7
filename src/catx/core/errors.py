"""
Core exception types raised while normalizing rows and validating catalog models.

Provides typed exceptions for core-domain failures:
- RowRejected for raw rows that cannot become a Record (missing name).
- SchemaError for model-level constraints (e.g., an aired range that runs backwards).
- BucketFormatError for episode bucket labels that are not "min-max" or "min+".

Notes:
    - This module uses only the Python standard library and has no side effects.
    - The public pipeline queries (derive_universe, apply_filter, project_points,
      build_matrix) recover from these locally; they are raised by the lower-level
      parsers in catx.core.grammar and catx.explore.normalize.

Examples:
    Catch a malformed bucket.

    >>> from catx.core.errors import BucketFormatError
    >>> from catx.core.grammar import parse_bucket
    >>> try:
    ...     parse_bucket("lots")
    ... except BucketFormatError as e:
    ...     msg = str(e)
    >>> "lots" in msg
    True
"""

from __future__ import annotations

__all__ = [
    "CatalogError",
    "RowRejected",
    "SchemaError",
    "BucketFormatError",
]


class CatalogError(Exception):
    """Base class for catalog core errors."""


class RowRejected(CatalogError, ValueError):
    """Raw row cannot be normalized into a Record (e.g., blank name)."""


class SchemaError(CatalogError, ValueError):
    """Model-level validation failure (shape, ranges, cross-field rules)."""


class BucketFormatError(CatalogError, ValueError):
    """Episode bucket label is not of the form "min-max" or "min+"."""

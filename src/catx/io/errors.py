"""
Custom exceptions for the catx.io module.

Purpose
- Provide IO-layer specific error types that map cleanly to responsibilities in catx.io.
- Keep catx.core as the source of truth for row/schema errors (see catx.core.errors).

Boundaries
- catx.core.errors.RowRejected / SchemaError are raised by core parsers and models.
- catx.io raises Io* errors for source and frame concerns:
  - IoConfigError: invalid or unsupported configuration.
  - IoReadError: catalog source missing, unreadable, or not tabular.
  - IoSchemaError: DataFrame failed validation against catx.core.tables descriptors.
"""

from __future__ import annotations

__all__ = [
    "IoError",
    "IoConfigError",
    "IoReadError",
    "IoSchemaError",
]


class IoError(Exception):
    """
    Base class for IO-related errors in catx.io.

    Notes:
        Use this as a catch-all for IO-layer failures, distinct from catx.core errors.
    """


class IoConfigError(IoError):
    """
    Raised when IO configuration is invalid or unsupported.

    Examples:
        - No catalog path configured when one is required
    """


class IoReadError(IoError):
    """
    Raised when a catalog source cannot be read.

    Notes:
        Wraps FileNotFoundError and polars parse errors so callers handle a single type.
    """


class IoSchemaError(IoError):
    """
    Raised when a DataFrame fails validation against catx.core.tables descriptors.

    Notes:
        Scalar columns (i64, f64, str) may be safely cast prior to raising.
    """

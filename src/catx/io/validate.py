"""
Schema validation utilities for catx.io.

Purpose
- Validate Polars DataFrames against frame descriptors from catx.core.tables.
- Apply pragmatic checks with safe casting for scalar dtypes.

Checks performed
- Required columns present.
- No columns outside the descriptor when strict=True.
- Required columns hold no nulls.
- Dtype compatibility:
  - Scalar types ("i64","f64","str") are safely cast when possible.
  - "list[str]" accepts pl.List (inner type cast to Utf8).
"""

from __future__ import annotations

from collections.abc import Iterable

import polars as pl

from catx.core.tables import FrameDescriptor

from .errors import IoSchemaError

__all__ = ["validate_frame_against_descriptor"]

# Polars exposes dtype singletons/classes (e.g., pl.Int64); keep this mapping loosely typed.
_DTYPE_MAP: dict[str, object] = {
    "i64": pl.Int64,
    "f64": pl.Float64,
    "str": pl.Utf8,
}


def _safe_cast(df: pl.DataFrame, col: str, target: object) -> pl.DataFrame:
    try:
        return df.with_columns(pl.col(col).cast(target, strict=True))  # type: ignore[arg-type]
    except pl.exceptions.PolarsError as exc:
        raise IoSchemaError(f"failed to cast column {col!r} to {target}: {exc}") from exc


def _ensure_columns_present(df: pl.DataFrame, needed: Iterable[str]) -> None:
    missing = [c for c in needed if c not in df.columns]
    if missing:
        raise IoSchemaError(f"missing required columns: {missing!r}")


def _ensure_no_extra_columns(df: pl.DataFrame, allowed: set[str]) -> None:
    extras = [c for c in df.columns if c not in allowed]
    if extras:
        raise IoSchemaError(f"unexpected columns present: {extras!r} (allowed={sorted(allowed)!r})")


def _ensure_not_null(df: pl.DataFrame, cols: Iterable[str]) -> None:
    nulls = [c for c in cols if c in df.columns and df.get_column(c).null_count() > 0]
    if nulls:
        raise IoSchemaError(f"required columns contain nulls: {nulls!r}")


def validate_frame_against_descriptor(
    df: pl.DataFrame,
    desc: FrameDescriptor,
    *,
    strict: bool = True,
) -> pl.DataFrame:
    """
    Validate a Polars DataFrame against a FrameDescriptor.

    Args:
        df (pl.DataFrame): Frame to validate.
        desc (FrameDescriptor): Descriptor from catx.core.tables.
        strict (bool): Enforce exact column set (no extras) when True.

    Returns:
        pl.DataFrame: Columns ordered as in the descriptor, with safe casts applied.

    Raises:
        IoSchemaError: If required columns are missing or null, extras are present under
            strict mode, or dtypes are incompatible and cannot be cast.
    """
    _ensure_columns_present(df, desc.required)
    if strict:
        _ensure_no_extra_columns(df, set(desc.columns))
    _ensure_not_null(df, desc.required)

    for col, dtype_name in desc.columns.items():
        if col not in df.columns:
            df = df.with_columns(pl.lit(None).alias(col))
        actual = df.schema[col]
        if dtype_name in _DTYPE_MAP:
            expected = _DTYPE_MAP[dtype_name]
            if actual != expected:
                df = _safe_cast(df, col, expected)
        elif dtype_name == "list[str]":
            if not isinstance(actual, pl.List):
                raise IoSchemaError(f"column {col!r} expected list-like dtype; got {actual}")
            if actual.inner != pl.Utf8:
                df = _safe_cast(df, col, pl.List(pl.Utf8))
        else:  # pragma: no cover - defensive
            raise IoSchemaError(f"unknown descriptor dtype {dtype_name!r} for column {col!r}")

    return df.select(list(desc.columns))

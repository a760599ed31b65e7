"""
Catalog source readers (CSV via polars).

Purpose
- Turn a tabular catalog source into fully materialized positional rows for the
  normalizer (catx.explore.normalize).

Behavior
- All columns are read as strings; typing happens in the normalizer.
- When the header carries the known column names (case-insensitive, "Score" or "Rating"),
  columns are mapped by name and may appear in any order; absent columns read as None.
- Otherwise the file is treated as headerless and mapped by fixed position
  (name, rating, genres, synopsis, episodes, aired, status).

Notes
- Sources may be a filesystem path or in-memory bytes (e.g., a Streamlit upload).
"""

from __future__ import annotations

import io
import logging
from pathlib import Path

import polars as pl

from catx.core.constants import HEADER_ALIASES, ROW_COLUMNS
from catx.core.typing import RawRow
from catx.explore.normalize import NormalizeResult, normalize_rows

from .errors import IoReadError

__all__ = ["CatalogSource", "header_mapping", "read_rows", "read_records"]

logger = logging.getLogger(__name__)

CatalogSource = str | Path | bytes


def header_mapping(columns: list[str]) -> dict[str, str]:
    """Map canonical column -> source column for recognised header tokens (first wins)."""
    out: dict[str, str] = {}
    for col in columns:
        canonical = HEADER_ALIASES.get(col.strip().casefold())
        if canonical is not None and canonical not in out:
            out[canonical] = col
    return out


def _read_frame(source: CatalogSource, *, has_header: bool) -> pl.DataFrame:
    data: str | Path | io.BytesIO
    data = io.BytesIO(source) if isinstance(source, bytes) else source
    return pl.read_csv(
        data,
        has_header=has_header,
        infer_schema_length=0,
        truncate_ragged_lines=True,
    )


def read_rows(source: CatalogSource) -> tuple[RawRow, ...]:
    """
    Read a CSV catalog into positional rows.

    Args:
        source: Path to a CSV file, or the file's bytes.

    Returns:
        tuple[RawRow, ...]: Rows in ROW_COLUMNS order; an empty source yields ().

    Raises:
        IoReadError: If the path does not exist or the content cannot be parsed as CSV.
    """
    if not isinstance(source, bytes):
        path = Path(source)
        if not path.is_file():
            raise IoReadError(f"catalog not found: {path}")
        source = path

    try:
        df = _read_frame(source, has_header=True)
    except pl.exceptions.NoDataError:
        return ()
    except (pl.exceptions.PolarsError, OSError) as exc:
        raise IoReadError(f"failed to read catalog {source!r:.80}: {exc}") from exc

    mapping = header_mapping(df.columns)
    if "name" not in mapping:
        logger.debug("no recognised header; mapping columns by position")
        try:
            df = _read_frame(source, has_header=False)
        except (pl.exceptions.PolarsError, OSError) as exc:
            raise IoReadError(f"failed to read catalog {source!r:.80}: {exc}") from exc
        mapping = {
            canonical: df.columns[i]
            for i, canonical in enumerate(ROW_COLUMNS)
            if i < len(df.columns)
        }

    exprs = [
        pl.col(mapping[c]).alias(c) if c in mapping else pl.lit(None, dtype=pl.Utf8).alias(c)
        for c in ROW_COLUMNS
    ]
    rows = tuple(df.select(exprs).iter_rows())
    logger.info("read %d catalog rows", len(rows))
    return rows


def read_records(source: CatalogSource) -> NormalizeResult:
    """Read and normalize a catalog source (see read_rows for errors)."""
    return normalize_rows(read_rows(source))

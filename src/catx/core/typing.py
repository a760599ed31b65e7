"""
Lightweight typing aliases used across core and the exploration pipeline.

Notes:
    - Intended for annotations only; no runtime logic.
    - RawRow is the positional row handed over by the IO boundary (see
      catx.core.constants.ROW_COLUMNS for the column order).
"""

from __future__ import annotations

from collections.abc import Sequence

__all__ = ["RawRow"]

# One raw tabular row; cells may be missing (None) when the source is ragged.
RawRow = Sequence[str | None]

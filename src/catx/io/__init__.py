"""
catx.io — Source boundary for catalog data.

## Responsibilities
- Read tabular catalog sources (CSV via polars) into positional rows for the normalizer.
- Load ExplorerSettings with env > TOML > defaults precedence.
- Materialize validated polars frames (records, points, matrix) for chart builders.

## Public API
- ExplorerSettings — runtime configuration.
- read_rows / read_records — CSV catalog readers.
- records_to_frame / points_to_frame / matrix_to_frame — frame builders.

## Import DAG discipline
- Depends on stdlib, polars, catx.core, and catx.explore (normalizer and matrix type).
- MUST NOT import catx.viz or app.

## Examples
```python
from catx.io import ExplorerSettings, read_records
settings = ExplorerSettings.load()  # doctest: +SKIP
result = read_records("data/anime.csv")  # doctest: +SKIP
len(result.records), result.rejected  # doctest: +SKIP
```
"""

from __future__ import annotations

from .config import ExplorerSettings
from .errors import IoConfigError, IoError, IoReadError, IoSchemaError
from .frames import matrix_to_frame, points_to_frame, records_to_frame
from .read import read_records, read_rows

__all__ = [
    "ExplorerSettings",
    "IoError",
    "IoConfigError",
    "IoReadError",
    "IoSchemaError",
    "read_rows",
    "read_records",
    "records_to_frame",
    "points_to_frame",
    "matrix_to_frame",
]

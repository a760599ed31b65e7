"""
Core package aggregator for catalog contracts (constants, grammar, schemas, frame descriptors).

## Contracts (single source of truth)
- Constants — raw row layout, field defaults, filter sentinels, chart defaults.
- Grammar — best-effort cell parsers (rating, episodes, genres, aired range, buckets).
- Schemas — frozen Pydantic models (Record, AiredRange, FilterState, ScatterPoint, MatrixCell).
- Tables — frame descriptors for the polars frames consumed by catx.viz.

## Notes
- Zero-IO policy: stdlib + pydantic only; no file/network IO.
- Records are immutable; filter selections are immutable snapshots.

## Downstream usage
- catx.io — reads raw rows and validates frames against `tables`.
- catx.explore — normalizes rows into `schema.Record` and derives views.
- catx.viz / app — import row models and descriptors for charts and dashboards.

## Examples
```python
from catx.core.grammar import parse_aired_range
parse_aired_range("Apr 3, 1998 to Apr 24, 1999")  # (1998, 1999)

from catx.core.schema import FilterState
FilterState(genres={"Action"}, episode_buckets={"0-50"}).status  # 'all'
```
"""

from __future__ import annotations

from .errors import BucketFormatError, CatalogError, RowRejected, SchemaError
from .schema import AiredRange, EpisodeBucket, FilterState, MatrixCell, Record, ScatterPoint

__all__ = [
    "CatalogError",
    "RowRejected",
    "SchemaError",
    "BucketFormatError",
    "AiredRange",
    "Record",
    "EpisodeBucket",
    "FilterState",
    "ScatterPoint",
    "MatrixCell",
]

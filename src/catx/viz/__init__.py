"""
catx.viz — Read-only Altair chart builders over catalog frames.

## Public API
- scatter_chart — rating vs. release year.
- heatmap_chart — genre x year average rating, empty cells drawn grey.
- top_rated_chart — ratings by name.
- placeholder_chart / apply_chart_defaults — shared helpers.

## Import DAG discipline
- Depends on: polars, altair, catx.core (constants only).
- Consumes frames produced by catx.io.frames; never reads sources itself.
"""

from __future__ import annotations

from .charts import (
    NO_MATCHES,
    apply_chart_defaults,
    heatmap_chart,
    placeholder_chart,
    scatter_chart,
    top_rated_chart,
)

__all__ = [
    "NO_MATCHES",
    "apply_chart_defaults",
    "placeholder_chart",
    "scatter_chart",
    "heatmap_chart",
    "top_rated_chart",
]

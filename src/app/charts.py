from __future__ import annotations

import altair as alt
import polars as pl

from catx.explore import Explorer, series_label, top_rated
from catx.io import ExplorerSettings, matrix_to_frame, points_to_frame, records_to_frame
from catx.viz import apply_chart_defaults, heatmap_chart, scatter_chart, top_rated_chart

# ----------------------------
# Scatter (filtered records, optional genre context)
# ----------------------------


def scatter_view(explorer: Explorer, settings: ExplorerSettings) -> alt.TopLevelMixin:
    """Rating vs. release year for the filtered records."""
    context = [explorer.genre_context] if explorer.genre_context else sorted(explorer.state.genres)
    points = points_to_frame(explorer.points)
    return apply_chart_defaults(
        scatter_chart(points, title=series_label(context), year_domain=settings.year_domain)
    )


# ----------------------------
# Heatmap (matrix over all or filtered records per settings)
# ----------------------------


def heatmap_view(explorer: Explorer) -> alt.TopLevelMixin:
    """Genre x year average rating; empty cells drawn distinctly from zero."""
    return apply_chart_defaults(heatmap_chart(matrix_to_frame(explorer.matrix, fill_empty=True)))


# ----------------------------
# Top rated bar chart
# ----------------------------


def top_rated_view(explorer: Explorer, n: int) -> alt.TopLevelMixin:
    frame = records_to_frame(top_rated(explorer.filtered, n))
    return apply_chart_defaults(top_rated_chart(frame))


# ----------------------------
# Records table
# ----------------------------


def records_table(explorer: Explorer) -> pl.DataFrame:
    """Filtered records with genres joined for display."""
    return records_to_frame(explorer.filtered).with_columns(
        pl.col("genres").list.join(", ").alias("genres")
    )

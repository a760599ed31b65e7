"""
Altair chart builders for the catalog views.

Each builder takes a validated polars frame (see catx.io.frames) and returns an Altair
chart. Empty frames produce a text placeholder instead of an empty plot.
"""

from __future__ import annotations

import altair as alt
import polars as pl

from catx.core.constants import (
    HEATMAP_COLORS,
    HEATMAP_EMPTY_COLOR,
    HEATMAP_THRESHOLDS,
    RATING_DOMAIN,
    YEAR_AXIS_DOMAIN,
)

__all__ = [
    "NO_MATCHES",
    "apply_chart_defaults",
    "placeholder_chart",
    "scatter_chart",
    "heatmap_chart",
    "top_rated_chart",
]

NO_MATCHES = "No matching records"


def apply_chart_defaults(ch: alt.TopLevelMixin) -> alt.TopLevelMixin:
    """Uniform axis/legend/title styling."""
    try:
        return (
            ch.configure_axis(labelFontSize=12, titleFontSize=12, grid=True)
            .configure_legend(labelFontSize=12, titleFontSize=12)
            .configure_title(fontSize=14)
            .configure_view(strokeOpacity=0)
        )
    except Exception:
        # If configuration fails (e.g., non-top-level), return chart as-is
        return ch


def placeholder_chart(message: str = NO_MATCHES) -> alt.Chart:
    return alt.Chart(alt.Data(values=[{}])).mark_text(size=14).encode(text=alt.value(message))


def scatter_chart(
    points: pl.DataFrame,
    *,
    title: str = "Ratings",
    year_domain: tuple[int, int] = YEAR_AXIS_DOMAIN,
) -> alt.Chart:
    """
    Rating vs. release year scatter.

    Args:
        points: Frame with columns x, y, label, status, episodes.
        title: Chart title (e.g., series_label of the selected genres).
        year_domain: Fixed x-axis bounds; points outside are clipped.

    Returns:
        alt.Chart: Circle marks with a name/year/rating/status/episodes tooltip.
    """
    if points.height == 0:
        return placeholder_chart()
    return (
        alt.Chart(alt.Data(values=points.to_dicts()))
        .mark_circle(size=60, opacity=0.6, color="#ff6384", clip=True)
        .encode(
            x=alt.X(
                "x:Q",
                title="Year Released",
                scale=alt.Scale(domain=list(year_domain)),
                axis=alt.Axis(format="d"),
            ),
            y=alt.Y(
                "y:Q",
                title="Rating (0 - 10)",
                scale=alt.Scale(domain=list(RATING_DOMAIN)),
            ),
            tooltip=[
                alt.Tooltip("label:N", title="Name"),
                alt.Tooltip("x:Q", title="Year Released", format="d"),
                alt.Tooltip("y:Q", title="Rating"),
                alt.Tooltip("status:N", title="Status"),
                alt.Tooltip("episodes:Q", title="Episodes"),
            ],
        )
        .properties(title=title)
    )


def heatmap_chart(matrix: pl.DataFrame, *, title: str = "Average Rating for Genres Per Year") -> alt.TopLevelMixin:
    """
    Year x genre heatmap.

    Args:
        matrix: Full-grid matrix frame (year, genre, value, count); null value marks an
            empty cell.
        title: Chart title.

    Returns:
        alt.LayerChart: Grey rects for empty cells layered under threshold-coloured rects
        for populated cells.
    """
    if matrix.height == 0:
        return placeholder_chart()
    base = alt.Chart(alt.Data(values=matrix.to_dicts())).encode(
        x=alt.X("year:O", title="Year"),
        y=alt.Y("genre:N", title="Genre"),
    )
    empty = base.transform_filter("datum.value === null").mark_rect(
        color=HEATMAP_EMPTY_COLOR, opacity=0.8
    ).encode(tooltip=[alt.Tooltip("year:O"), alt.Tooltip("genre:N")])
    filled = base.transform_filter("datum.value !== null").mark_rect(opacity=0.8).encode(
        color=alt.Color(
            "value:Q",
            title="Avg rating",
            scale=alt.Scale(
                type="threshold",
                domain=list(HEATMAP_THRESHOLDS),
                range=list(HEATMAP_COLORS),
            ),
        ),
        tooltip=[
            alt.Tooltip("year:O", title="Year"),
            alt.Tooltip("genre:N", title="Genre"),
            alt.Tooltip("value:Q", title="Avg rating", format=".2f"),
            alt.Tooltip("count:Q", title="Samples"),
        ],
    )
    return alt.layer(empty, filled).properties(title=title)


def top_rated_chart(records: pl.DataFrame, *, title: str = "Ratings by Name") -> alt.Chart:
    """Horizontal bar chart of rating by name, highest first."""
    if records.height == 0:
        return placeholder_chart()
    return (
        alt.Chart(alt.Data(values=records.select(["name", "rating", "status"]).to_dicts()))
        .mark_bar(color="#4bc0c0")
        .encode(
            x=alt.X("rating:Q", title="Rating", scale=alt.Scale(domain=list(RATING_DOMAIN))),
            y=alt.Y("name:N", title=None, sort="-x"),
            tooltip=["name:N", "rating:Q", "status:N"],
        )
        .properties(title=title)
    )

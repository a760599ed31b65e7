"""
Catalog-level defaults consumed by the exploration pipeline and its IO boundary.

Defines the raw row layout, field defaults, filter sentinels, and chart defaults. This
module is zero-IO and uses only the Python standard library.

Notes:
    - Raw rows are positional: ROW_COLUMNS gives the fixed column order.
    - HEADER_ALIASES maps case-folded header tokens onto ROW_COLUMNS entries.
    - GENRE_HEADER_SENTINEL is the literal header token that leaks into genre lists when a
      stray header-like row is present in a source file.
"""

from __future__ import annotations

__all__ = [
    "ROW_COLUMNS",
    "HEADER_ALIASES",
    "GENRE_HEADER_SENTINEL",
    "STATUS_ALL",
    "DEFAULT_STATUS",
    "DEFAULT_SYNOPSIS",
    "DEFAULT_RATING",
    "DEFAULT_EPISODES",
    "AIRED_RANGE_SEPARATOR",
    "GENRE_SEPARATOR",
    "EPISODE_BUCKET_OPTIONS",
    "RATING_DOMAIN",
    "YEAR_AXIS_DOMAIN",
    "HEATMAP_EMPTY_COLOR",
    "HEATMAP_THRESHOLDS",
    "HEATMAP_COLORS",
]

# Fixed positional layout of a raw catalog row.
ROW_COLUMNS: tuple[str, ...] = (
    "name",
    "rating",
    "genres",
    "synopsis",
    "episodes",
    "aired",
    "status",
)

# Case-folded header token -> canonical column.
HEADER_ALIASES: dict[str, str] = {
    "name": "name",
    "score": "rating",
    "rating": "rating",
    "genres": "genres",
    "synopsis": "synopsis",
    "episodes": "episodes",
    "aired": "aired",
    "status": "status",
}

GENRE_HEADER_SENTINEL: str = "Genres"

# Status option that disables the status dimension.
STATUS_ALL: str = "all"

DEFAULT_STATUS: str = "Unknown"
DEFAULT_SYNOPSIS: str = "No synopsis available"
DEFAULT_RATING: float = 0.0
DEFAULT_EPISODES: int = 0

AIRED_RANGE_SEPARATOR: str = " to "
GENRE_SEPARATOR: str = ","

# Episode buckets offered by the filter bar ("min-max" inclusive or open-ended "min+").
EPISODE_BUCKET_OPTIONS: tuple[str, ...] = (
    "0-50",
    "51-100",
    "101-500",
    "501-1000",
    "1001+",
)

RATING_DOMAIN: tuple[float, float] = (0.0, 10.0)
YEAR_AXIS_DOMAIN: tuple[int, int] = (1960, 2024)

# Heatmap palette: empty cells are grey and never share a colour with a rating.
HEATMAP_EMPTY_COLOR: str = "#dddfe2"
HEATMAP_THRESHOLDS: tuple[float, ...] = (2.5, 5.0, 7.5)
HEATMAP_COLORS: tuple[str, ...] = ("#A1E7CC", "#50D2A0", "#31BE88", "#26966B")

"""
Shared UI helper utilities for the catalog explorer Streamlit application.

This module centralizes small cross-cutting helpers (time formatting, quick KPI
computations, option domains) used by multiple UI components.

Notes:
    - Contains no Streamlit state manipulation itself.
"""

from __future__ import annotations

import math
from collections.abc import Iterable
from datetime import UTC, datetime

from catx.core.schema import Record


def humanize_ago(ts: float) -> str:
    """Convert a UNIX timestamp into a short humanized age string ("5m ago", "n/a")."""
    try:
        dt = datetime.fromtimestamp(ts, tz=UTC)
        now = datetime.now(tz=UTC)
        delta = (now - dt).total_seconds()
        if delta < 60:
            return f"{int(delta)}s ago"
        if delta < 3600:
            return f"{int(delta // 60)}m ago"
        if delta < 86400:
            return f"{int(delta // 3600)}h ago"
        return f"{int(delta // 86400)}d ago"
    except (OverflowError, OSError, ValueError):
        return "n/a"


def format_ts(ts: float) -> str:
    """Format a UNIX timestamp as "YYYY-MM-DD HH:MM:SS", or "n/a" on failure."""
    try:
        dt = datetime.fromtimestamp(ts)
        return dt.strftime("%Y-%m-%d %H:%M:%S")
    except (OverflowError, OSError, ValueError):
        return "n/a"


def year_options(records: Iterable[Record]) -> list[int]:
    """Every year spanned by at least one Record's aired range, ascending."""
    years: set[int] = set()
    for r in records:
        if r.aired is not None:
            years.update(r.aired.years())
    return sorted(years)


def compute_overview_kpis(records: Iterable[Record]) -> dict[str, float]:
    """Compute quick KPI metrics over a Record collection.

    Computes:
        - count: Number of Records.
        - mean_rating: Mean rating over Records whose rating was parsed (0.0 if none).
        - temporal_share: Share of Records with an aired range (0.0 for no Records).

    Args:
        records: Record collection (typically the filtered one).

    Returns:
        dict[str, float]: KPI dictionary.
    """
    recs = list(records)
    if not recs:
        return {"count": 0.0, "mean_rating": 0.0, "temporal_share": 0.0}
    rated = [r.rating for r in recs if not r.is_defaulted("rating")]
    mean_rating = math.fsum(rated) / len(rated) if rated else 0.0
    temporal = sum(1 for r in recs if r.has_temporal_anchor)
    return {
        "count": float(len(recs)),
        "mean_rating": mean_rating,
        "temporal_share": temporal / len(recs),
    }

"""
Filter bar for the catalog explorer.

Renders one widget per filter dimension and returns the resulting FilterState snapshot.
The returned state is a new immutable value on every rerun; the caller hands it to
Explorer.with_filter.
"""

from __future__ import annotations

import streamlit as st

from catx.core.constants import EPISODE_BUCKET_OPTIONS, STATUS_ALL
from catx.core.schema import FilterState
from catx.explore import Universe

_ANY_YEAR = "Any year"


def render_filter_bar(
    universe: Universe,
    *,
    years: list[int],
    key_prefix: str = "flt",
) -> FilterState:
    """Render the filter widgets and return the selected FilterState.

    Args:
        universe (Universe): Genre/status option domains.
        years (list[int]): Year options for the year dimension.
        key_prefix (str): Streamlit widget key prefix.

    Returns:
        FilterState: Current selection.
    """
    c1, c2 = st.columns([1, 1])
    with c1:
        genres = st.multiselect(
            "Genres (all selected must match)",
            options=list(universe.genres),
            default=[],
            key=f"{key_prefix}_genres",
        )
    with c2:
        status = st.selectbox(
            "Status",
            options=list(universe.statuses),
            index=0,
            key=f"{key_prefix}_status",
        )

    c3, c4, c5 = st.columns([2, 1, 1])
    with c3:
        buckets = st.multiselect(
            "Episodes (any selected range)",
            options=list(EPISODE_BUCKET_OPTIONS),
            default=[],
            key=f"{key_prefix}_buckets",
        )
    with c4:
        year_choice = st.selectbox(
            "Year on air",
            options=[_ANY_YEAR, *years],
            index=0,
            key=f"{key_prefix}_year",
        )
    with c5:
        limit = st.number_input(
            "Max episodes (0 = no limit)",
            min_value=0,
            value=0,
            step=1,
            key=f"{key_prefix}_limit",
        )

    return FilterState(
        genres=genres,
        status=status or STATUS_ALL,
        episode_buckets=buckets,
        year=None if year_choice == _ANY_YEAR else int(year_choice),
        episode_limit=int(limit) or None,
    )

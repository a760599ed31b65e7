"""
Streamlit application orchestrator for the catalog explorer.

This module composes the global header, the filter bar, and the view tabs while
delegating supporting concerns to focused modules under app.ui.* (header, filters,
sources, helpers).

Responsibilities:
    - Configure the Streamlit page and logging.
    - Render the global header (catalog selection, cache prefs).
    - Load and normalize the catalog via app.data with configurable caching.
    - Hold the Explorer snapshot in session state and publish a new one per filter change.
    - Mount tab content (Overview, Scatter, Heatmap, Top rated, Records).

Notes:
    - Charts are produced by app.charts and catx.viz.
    - An empty filtered collection renders "No matching records", never an error.
"""

from __future__ import annotations

import streamlit as st

import catx
from app import charts as app_charts
from app.data import load_catalog, load_catalog_bytes
from catx.core.schema import Record
from catx.explore import Explorer
from catx.io import ExplorerSettings, IoError
from catx.viz import NO_MATCHES

from .filters import render_filter_bar
from .header import render_header
from .helpers import compute_overview_kpis, year_options

_SNAPSHOT_KEY = "explorer_snapshot"
_SOURCE_KEY = "explorer_source"


def _explorer_for(
    source: str | bytes, records: tuple[Record, ...], settings: ExplorerSettings
) -> Explorer:
    """Reuse the session snapshot while the loaded records are unchanged; reload otherwise."""
    key = (
        source if isinstance(source, str) else hash(source),
        hash(records),
        settings.matrix_source,
    )
    if st.session_state.get(_SOURCE_KEY) != key:
        st.session_state[_SOURCE_KEY] = key
        st.session_state[_SNAPSHOT_KEY] = Explorer.load(
            records, matrix_source=settings.matrix_source
        )
    return st.session_state[_SNAPSHOT_KEY]


def streamlit_app(
    default_data: str | None = None,
    default_watch_ttl: int = 10,
) -> None:
    """Render the catalog explorer application.

    Args:
        default_data (str | None): Optional preselected catalog path.
        default_watch_ttl (int): Cache TTL (seconds) for catalog discovery (0 disables).
    """
    st.set_page_config(page_title="Catalog Explorer", layout="wide")

    settings = ExplorerSettings.load()
    catx.configure_logging(settings.log_level)

    source, cache_cfg = render_header(
        settings=settings, default_data=default_data, watch_ttl=default_watch_ttl
    )
    if not source:
        st.error("Select or upload a catalog CSV from the header.")
        return

    try:
        with st.spinner("Loading catalog ..."):
            if isinstance(source, bytes):
                result = load_catalog_bytes(source, cfg=cache_cfg)
            else:
                result = load_catalog(source, cfg=cache_cfg)
    except IoError as e:
        st.error(str(e))
        return

    explorer = _explorer_for(source, result.records, settings)

    st.caption(
        f"{len(result.records)} records loaded; {result.rejected} of {result.total} rows "
        "rejected (no name)."
    )

    state = render_filter_bar(explorer.universe, years=year_options(explorer.records))
    explorer = explorer.with_filter(state)
    st.session_state[_SNAPSHOT_KEY] = explorer

    tab_overview, tab_scatter, tab_heat, tab_top, tab_data = st.tabs(
        ["Overview", "Scatter", "Heatmap", "Top rated", "Records"]
    )

    with tab_overview:
        kpi = compute_overview_kpis(explorer.filtered)
        c1, c2, c3 = st.columns(3)
        with c1:
            st.metric("Matching records", f"{int(kpi['count'])} / {len(explorer.records)}")
        with c2:
            st.metric("Mean rating", f"{kpi['mean_rating']:.2f}")
        with c3:
            st.metric("With aired dates", f"{100.0 * kpi['temporal_share']:.1f}%")
        if explorer.is_empty:
            st.info(NO_MATCHES)

    with tab_scatter:
        genres = list(explorer.universe.genres)
        default = settings.default_genre if settings.default_genre in genres else None
        options = ["(selected genres)", *genres]
        choice = st.selectbox(
            "Genre context",
            options=options,
            index=options.index(default) if default else 0,
            key="scatter_genre",
        )
        explorer = explorer.with_genre_context(None if choice == options[0] else choice)
        st.altair_chart(app_charts.scatter_view(explorer, settings), use_container_width=True)

    with tab_heat:
        source_note = "all records" if settings.matrix_source == "all" else "filtered records"
        st.caption(f"Average rating per genre and year over {source_note}; grey cells have no data.")
        st.altair_chart(app_charts.heatmap_view(explorer), use_container_width=True)

    with tab_top:
        st.altair_chart(
            app_charts.top_rated_view(explorer, settings.top_n), use_container_width=True
        )

    with tab_data:
        if explorer.is_empty:
            st.info(NO_MATCHES)
        else:
            st.dataframe(app_charts.records_table(explorer), use_container_width=True)

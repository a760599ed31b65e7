"""
Header (global controls) for the catalog explorer Streamlit application.

This module renders the top-of-page controls, including:
- Catalog selection from discovered CSV files, or an uploaded CSV.
- Manual refresh button and demo-catalog creation on empty trees.
- Cache preferences panel and construction of a CacheConfig used by data loaders.

Notes:
    - Avoids performing heavy IO directly; uses ui.sources for scanning and caching.
"""

from __future__ import annotations

from pathlib import Path

import streamlit as st

from app.data import CacheConfig
from catx.io import ExplorerSettings

from .helpers import format_ts, humanize_ago
from .sources import cached_list_catalogs, clear_catalog_listing, create_demo_catalog

DEMO_CATALOG = Path("data") / "demo_catalog.csv"


def render_header(
    *,
    settings: ExplorerSettings,
    default_data: str | None,
    watch_ttl: int = 10,
) -> tuple[str | bytes, CacheConfig]:
    """Render the global header and return the selected catalog source and cache config.

    Args:
        settings (ExplorerSettings): Loaded settings (data roots, configured data path).
        default_data (str | None): Optional preselected catalog path (CLI --data).
        watch_ttl (int): Cache TTL (seconds) for catalog discovery; 0 rescans every rerun.

    Returns:
        tuple[str | bytes, CacheConfig]: (catalog path, uploaded bytes, or "" when none,
        cache_config)

    Notes:
        - When no catalogs are found under the data roots and none is configured, a demo
          catalog is written to data/demo_catalog.csv.
    """
    st.markdown("### Catalog Explorer")

    if "cache_ttl" not in st.session_state:
        st.session_state["cache_ttl"] = 600
    if "cache_persist" not in st.session_state:
        st.session_state["cache_persist"] = False

    roots = tuple(sorted(set(settings.data_roots)))
    catalogs = cached_list_catalogs(roots, 200, ttl=watch_ttl)
    preferred = default_data or settings.data_path

    if not catalogs and not preferred:
        try:
            create_demo_catalog(DEMO_CATALOG)
            st.success(f"No catalogs found. Created demo catalog at {DEMO_CATALOG}")
            clear_catalog_listing()
            catalogs = cached_list_catalogs(roots, 200, ttl=watch_ttl)
        except OSError as e:  # pragma: no cover - defensive UX
            st.error(f"Failed to create demo catalog: {e}")

    option_to_path: dict[str, str] = {}
    options: list[str] = []
    if preferred:
        label = f"{Path(preferred).name} (configured)"
        option_to_path[label] = preferred
        options.append(label)
    for item in catalogs:
        label = f"{item['name']} (updated {humanize_ago(item['mtime'])})"
        option_to_path[label] = item["path"]
        options.append(label)

    c1, c2, c3 = st.columns([0.45, 0.35, 0.20])

    with c1:
        selected_label = st.selectbox(
            "Catalog",
            options=options or ["(no catalogs found)"],
            index=0,
            key="catalog_selector_header",
        )
        selected_path = option_to_path.get(selected_label, "") if options else ""
        if selected_path and Path(selected_path).exists():
            mtime = Path(selected_path).stat().st_mtime
            st.caption(f"Updated: {format_ts(mtime)} ({humanize_ago(mtime)})")

    with c2:
        uploaded = st.file_uploader("Or upload a CSV", type=["csv"], key="catalog_upload")
        if st.button("Refresh"):
            clear_catalog_listing()
            st.rerun()

    with c3:
        with st.expander("Cache", expanded=False):
            ttl = st.number_input(
                "Cache TTL (seconds)",
                min_value=0,
                value=int(st.session_state["cache_ttl"]),
                step=60,
                help="0 disables TTL",
                key="cache_ttl_header",
            )
            persist = st.checkbox(
                "Persist to disk",
                value=bool(st.session_state["cache_persist"]),
                key="cache_persist_header",
            )
            st.session_state["cache_ttl"] = int(ttl)
            st.session_state["cache_persist"] = bool(persist)

    cache_cfg = CacheConfig(
        ttl=int(st.session_state["cache_ttl"]) if int(st.session_state["cache_ttl"]) > 0 else None,
        persist=bool(st.session_state["cache_persist"]),
    )

    source: str | bytes = uploaded.getvalue() if uploaded is not None else selected_path
    return source, cache_cfg

"""
Catalog explorer UI package.

This package contains the decomposed Streamlit UI. It exposes the high-level
orchestration and focused modules for separate concerns.

Modules:
    - app: Streamlit application orchestrator (streamlit_app).
    - header: Global header (catalog picker, upload, cache preferences).
    - filters: Filter bar producing a FilterState snapshot.
    - sources: Catalog discovery and demo-catalog creation.
    - helpers: Small cross-cutting helpers (accelerators, time formatting, KPIs).

Usage:
    from app.ui import streamlit_app
    streamlit_app(default_data="data/anime.csv")
"""

from __future__ import annotations

from .app import streamlit_app
from .header import render_header

__all__ = [
    "streamlit_app",
    "render_header",
]

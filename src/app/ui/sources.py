"""
Catalog discovery and demo-catalog utilities for the Streamlit UI.

This module encapsulates:
- CSV catalog scanning under one or more roots.
- Demo catalog creation to bootstrap the UI when no catalog exists.
- A cached wrapper around catalog listing suitable for Streamlit usage.

Notes:
    - File-system operations are localized here.
    - Streamlit caching is provided via `cached_list_catalogs`.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path
from typing import Any

import polars as pl

from app.data import CacheConfig, clear_cached, get_cached

# Public constants
IGNORED_DIRS: set[str] = {".venv", "site", ".git", "node_modules", "__pycache__"}

DEMO_ROWS: list[dict[str, str]] = [
    {
        "Name": "Cowboy Bebop",
        "Score": "8.75",
        "Genres": "Action, Award Winning, Sci-Fi",
        "Synopsis": "Bounty hunters travel the solar system.",
        "Episodes": "26",
        "Aired": "Apr 3, 1998 to Apr 24, 1999",
        "Status": "Finished Airing",
    },
    {
        "Name": "Monster",
        "Score": "8.88",
        "Genres": "Drama, Mystery, Suspense",
        "Synopsis": "A surgeon pursues a former patient.",
        "Episodes": "74",
        "Aired": "Apr 7, 2004 to Sep 28, 2005",
        "Status": "Finished Airing",
    },
    {
        "Name": "One Piece",
        "Score": "8.69",
        "Genres": "Action, Adventure, Fantasy",
        "Synopsis": "A pirate crew searches for a legendary treasure.",
        "Episodes": "1100",
        "Aired": "Oct 20, 1999 to ?",
        "Status": "Currently Airing",
    },
    {
        "Name": "Mushishi",
        "Score": "8.66",
        "Genres": "Adventure, Mystery, Slice of Life",
        "Synopsis": "",
        "Episodes": "26",
        "Aired": "Oct 23, 2005 to Jun 19, 2006",
        "Status": "Finished Airing",
    },
    {
        "Name": "Untitled Project",
        "Score": "UNKNOWN",
        "Genres": "Action",
        "Synopsis": "Announced.",
        "Episodes": "Unknown",
        "Aired": "Not available",
        "Status": "Not yet aired",
    },
]


def list_catalogs_under(base: Path) -> Iterable[Path]:
    """Yield CSV catalog files under a base folder (recursive).

    Args:
        base (Path): Base directory to scan recursively.

    Yields:
        Path: Paths to *.csv files outside IGNORED_DIRS.
    """
    if not base.exists() or not base.is_dir():
        return []
    for p in base.rglob("*.csv"):
        if not p.is_file():
            continue
        if any(seg in IGNORED_DIRS for seg in p.parts):
            continue
        yield p


def list_catalogs_impl(roots: Iterable[str], limit: int = 200) -> list[dict[str, Any]]:
    """Return catalog files with minimal metadata for the header selector.

    Args:
        roots (Iterable[str]): Root directories to scan (absolute or relative paths).
        limit (int): Maximum number of catalogs to return.

    Returns:
        list[dict[str, Any]]: Dicts with keys "path", "name", "mtime", newest first.
    """
    seen: set[str] = set()
    items: list[dict[str, Any]] = []
    for root in roots:
        for p in list_catalogs_under(Path(root)):
            sp = str(p.resolve())
            if sp in seen:
                continue
            seen.add(sp)
            try:
                mtime = p.stat().st_mtime
            except OSError:
                mtime = 0.0
            items.append({"path": sp, "name": p.name, "mtime": mtime})

    items.sort(key=lambda d: d["mtime"], reverse=True)
    return items[:limit]


def cached_list_catalogs(
    roots: tuple[str, ...], limit: int = 200, *, ttl: int = 10
) -> list[dict[str, Any]]:
    """Streamlit-cached wrapper for listing catalogs.

    Notes:
        ttl <= 0 bypasses the cache so every rerun rescans the roots.
    """
    if ttl <= 0:
        return list_catalogs_impl(roots, limit)
    fn = get_cached("list_catalogs", CacheConfig(ttl=ttl), list_catalogs_impl)
    return fn(roots, limit)  # type: ignore[no-any-return]


def clear_catalog_listing() -> None:
    """Drop cached catalog listings so the next call rescans the roots."""
    clear_cached("list_catalogs")


def create_demo_catalog(path: Path) -> Path:
    """Write a small demo catalog CSV (including rows with unparseable fields).

    Args:
        path (Path): Target CSV file; parent directories are created.

    Returns:
        Path: The written file.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    pl.DataFrame(DEMO_ROWS).write_csv(path)
    return path

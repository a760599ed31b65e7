from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import streamlit as st

from catx.explore import NormalizeResult
from catx.io import read_records

__all__ = [
    "CacheConfig",
    "get_cached",
    "clear_cached",
    "load_catalog",
    "load_catalog_bytes",
]

# ---------- Cache configuration (factory of cached callables) ----------


@dataclass(frozen=True)
class CacheConfig:
    """Hashable cache configuration for Streamlit @st.cache_data.

    Note: Streamlit's decorator parameters (ttl, persist) are fixed at decoration
    time. We build and memoize decorated callables per (name, ttl, persist) so the
    app can switch these at runtime while still benefiting from caching.
    """

    ttl: int | None = None
    persist: bool = False


# Registry of decorated functions by (loader_name, CacheConfig)
_CACHE_REGISTRY: dict[tuple[str, CacheConfig], Callable[..., Any]] = {}


def get_cached(loader_name: str, cfg: CacheConfig, fn: Callable[..., Any]) -> Callable[..., Any]:
    key = (loader_name, cfg)
    if key in _CACHE_REGISTRY:
        return _CACHE_REGISTRY[key]
    if cfg.persist:
        wrapped = st.cache_data(persist="disk", ttl=cfg.ttl)(fn)
    else:
        wrapped = st.cache_data(ttl=cfg.ttl)(fn)
    _CACHE_REGISTRY[key] = wrapped
    return wrapped


def clear_cached(loader_name: str) -> None:
    """Clear every cached variant registered under ``loader_name``."""
    for (name, _), fn in _CACHE_REGISTRY.items():
        if name == loader_name:
            fn.clear()  # type: ignore[attr-defined]


# ---------- Loaders (internal implementations) ----------


def _load_catalog_impl(path: str) -> NormalizeResult:
    return read_records(Path(path))


def _load_catalog_bytes_impl(data: bytes) -> NormalizeResult:
    return read_records(data)


# ---------- Public loader APIs (dispatch to cached implementations) ----------


def load_catalog(path: str, *, cfg: CacheConfig = CacheConfig()) -> NormalizeResult:
    """Read and normalize a CSV catalog (raises catx.io.IoReadError)."""
    fn = get_cached("load_catalog", cfg, _load_catalog_impl)
    return fn(path)  # type: ignore[no-any-return]


def load_catalog_bytes(data: bytes, *, cfg: CacheConfig = CacheConfig()) -> NormalizeResult:
    """Read and normalize an uploaded CSV catalog."""
    fn = get_cached("load_catalog_bytes", cfg, _load_catalog_bytes_impl)
    return fn(data)  # type: ignore[no-any-return]


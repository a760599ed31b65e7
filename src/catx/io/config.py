"""
Configuration for the catalog explorer.

Defines ExplorerSettings, a frozen dataclass carrying runtime configuration for loading a
catalog and shaping its views. Defaults are sourced from catx.core.constants.

Source of truth
- catx.core.constants.YEAR_AXIS_DOMAIN for the scatter year axis.

Import DAG discipline
- Depends only on stdlib and catx.core.constants.
- Does not import higher layers (explore, viz, app).

Notes
- Precedence: environment (CATX_*) > TOML > defaults.
- Invalid values are ignored and the previous layer's value is kept.
"""

from __future__ import annotations

import logging
import os
import tomllib
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Literal

from catx.core.constants import YEAR_AXIS_DOMAIN

from .errors import IoConfigError

MatrixSource = Literal["all", "filtered"]

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


@dataclass(frozen=True)
class ExplorerSettings:
    """
    Runtime settings for the catalog explorer.

    Attributes:
        data_path (str | None): CSV catalog to load at startup (None: pick from data_roots).
        data_roots (tuple[str, ...]): Directories scanned for *.csv catalogs.
        default_genre (str | None): Genre context preselected for the scatter view.
        matrix_source (Literal["all","filtered"]): Whether the heatmap aggregates the full
            catalog or the filtered subset.
        year_axis_min (int): Lower bound of the scatter year axis.
        year_axis_max (int): Upper bound of the scatter year axis.
        top_n (int): Number of bars in the top-rated view (>= 1).
        log_level (str): Root logging level applied by catx.configure_logging.

    Examples:
        >>> from catx.io import ExplorerSettings
        >>> ExplorerSettings(matrix_source="filtered")  # doctest: +ELLIPSIS
        ExplorerSettings(...)
    """

    data_path: str | None = None
    data_roots: tuple[str, ...] = ("data",)
    default_genre: str | None = "Action"
    matrix_source: MatrixSource = "all"
    year_axis_min: int = YEAR_AXIS_DOMAIN[0]
    year_axis_max: int = YEAR_AXIS_DOMAIN[1]
    top_n: int = 20
    log_level: str = "WARNING"

    @property
    def year_domain(self) -> tuple[int, int]:
        return (self.year_axis_min, self.year_axis_max)

    @property
    def log_level_value(self) -> int:
        return getattr(logging, self.log_level, logging.WARNING)

    # Configuration loaders (env/TOML) with precedence: env > TOML > defaults.

    @classmethod
    def _apply_mapping(cls, base: ExplorerSettings, cfg: dict[str, Any] | None) -> ExplorerSettings:
        """Apply a loose config mapping onto ExplorerSettings, returning a new instance."""
        if not isinstance(cfg, dict):
            return base

        s = base

        def _int(v: Any) -> int | None:
            try:
                return int(v)
            except (TypeError, ValueError):
                return None

        if "data_path" in cfg and isinstance(cfg["data_path"], str) and cfg["data_path"].strip():
            s = replace(s, data_path=cfg["data_path"].strip())

        if "data_roots" in cfg:
            roots = cfg["data_roots"]
            if isinstance(roots, str):
                roots = [r for r in roots.split(os.pathsep) if r.strip()]
            if isinstance(roots, (list, tuple)) and roots:
                s = replace(s, data_roots=tuple(str(r).strip() for r in roots))

        if "default_genre" in cfg and isinstance(cfg["default_genre"], str):
            genre = cfg["default_genre"].strip()
            s = replace(s, default_genre=genre or None)

        if "matrix_source" in cfg and isinstance(cfg["matrix_source"], str):
            source = cfg["matrix_source"].strip().lower()
            if source in ("all", "filtered"):
                s = replace(s, matrix_source=source)  # type: ignore[arg-type]

        # Year axis bounds are applied together so min <= max always holds.
        lo = _int(cfg.get("year_axis_min", s.year_axis_min))
        hi = _int(cfg.get("year_axis_max", s.year_axis_max))
        if lo is not None and hi is not None and lo <= hi:
            s = replace(s, year_axis_min=lo, year_axis_max=hi)

        if "top_n" in cfg:
            n = _int(cfg["top_n"])
            if n is not None and n >= 1:
                s = replace(s, top_n=n)

        if "log_level" in cfg and isinstance(cfg["log_level"], str):
            level = cfg["log_level"].strip().upper()
            if level in _LOG_LEVELS:
                s = replace(s, log_level=level)

        return s

    @classmethod
    def from_env(
        cls, base: ExplorerSettings | None = None, prefix: str = "CATX_"
    ) -> ExplorerSettings:
        """
        Build ExplorerSettings from environment variables. Precedence is env > base > defaults.

        Recognized variables:
            - CATX_DATA_PATH
            - CATX_DATA_ROOTS (os.pathsep-separated)
            - CATX_DEFAULT_GENRE (empty string is ignored)
            - CATX_MATRIX_SOURCE ("all" | "filtered")
            - CATX_YEAR_AXIS_MIN / CATX_YEAR_AXIS_MAX
            - CATX_TOP_N
            - CATX_LOG_LEVEL
        """
        s = base or cls()
        mapping: dict[str, Any] = {}
        for key in (
            "data_path",
            "data_roots",
            "default_genre",
            "matrix_source",
            "year_axis_min",
            "year_axis_max",
            "top_n",
            "log_level",
        ):
            v = os.getenv(prefix + key.upper())
            if v:
                mapping[key] = v
        return cls._apply_mapping(s, mapping)

    @classmethod
    def from_toml(cls, path: str | os.PathLike[str] | None = None) -> ExplorerSettings:
        """
        Build ExplorerSettings from a TOML file.

        Search order when `path` is None:
            1) ./catx.toml (with either an [explorer] table or direct keys)
            2) ./pyproject.toml under [tool.catx]

        Returns defaults if no file is present.

        Raises:
            IoConfigError: If an explicit `path` is given and does not exist.
        """
        if path is not None and not Path(path).is_file():
            raise IoConfigError(f"config file not found: {path}")
        s = cls()

        def _load_toml(p: Path) -> dict[str, Any] | None:
            try:
                with p.open("rb") as fh:
                    return tomllib.load(fh)
            except (OSError, tomllib.TOMLDecodeError):
                return None

        cfg: dict[str, Any] | None = None

        cand: list[Path] = []
        if path is not None:
            cand.append(Path(path))
        else:
            cand.append(Path.cwd() / "catx.toml")
            cand.append(Path.cwd() / "pyproject.toml")

        for p in cand:
            if not p.exists():
                continue
            data = _load_toml(p)
            if not isinstance(data, dict):
                continue
            if p.name == "pyproject.toml":
                tool = data.get("tool", {})
                cfg = tool.get("catx", {}) if isinstance(tool, dict) else None
            else:
                top = data
                if "explorer" in top and isinstance(top["explorer"], dict):
                    cfg = top["explorer"]
                else:
                    cfg = top
            if cfg:
                break

        return cls._apply_mapping(s, cfg)

    @classmethod
    def load(cls, path: str | os.PathLike[str] | None = None) -> ExplorerSettings:
        """
        Load ExplorerSettings applying precedence: environment > TOML > defaults.

        Args:
            path: Optional explicit TOML path. If None, search defaults (catx.toml, pyproject.toml).

        Returns:
            ExplorerSettings
        """
        s = cls.from_toml(path)
        s = cls.from_env(base=s)
        return s

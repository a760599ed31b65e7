from __future__ import annotations

import logging
import os
from pathlib import Path

import pytest

from catx.io import ExplorerSettings, IoConfigError

_ENV_KEYS = [
    "CATX_DATA_PATH",
    "CATX_DATA_ROOTS",
    "CATX_DEFAULT_GENRE",
    "CATX_MATRIX_SOURCE",
    "CATX_YEAR_AXIS_MIN",
    "CATX_YEAR_AXIS_MAX",
    "CATX_TOP_N",
    "CATX_LOG_LEVEL",
]


def _clear_env(monkeypatch) -> None:
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


def _write_catx_toml(tmp: Path, content: str) -> Path:
    p = tmp / "catx.toml"
    p.write_text(content)
    return p


def test_settings_precedence_env_over_toml(tmp_path: Path, monkeypatch) -> None:
    _clear_env(monkeypatch)
    _write_catx_toml(
        tmp_path,
        """
        [explorer]
        data_path = "toml.csv"
        matrix_source = "filtered"
        top_n = 5
        """.strip(),
    )
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("CATX_DATA_PATH", "env.csv")
    monkeypatch.setenv("CATX_TOP_N", "7")

    s = ExplorerSettings.load()

    assert s.data_path == "env.csv"
    assert s.top_n == 7
    assert s.matrix_source == "filtered"  # TOML survives where env is silent


def test_settings_from_toml_when_no_env(tmp_path: Path, monkeypatch) -> None:
    _clear_env(monkeypatch)
    _write_catx_toml(
        tmp_path,
        """
        [explorer]
        data_roots = ["catalogs", "more"]
        default_genre = "Drama"
        year_axis_min = 1980
        year_axis_max = 2010
        log_level = "debug"
        """.strip(),
    )
    monkeypatch.chdir(tmp_path)

    s = ExplorerSettings.load()

    assert s.data_roots == ("catalogs", "more")
    assert s.default_genre == "Drama"
    assert s.year_domain == (1980, 2010)
    assert s.log_level == "DEBUG"
    assert s.log_level_value == logging.DEBUG


def test_settings_from_pyproject_tool_table(tmp_path: Path, monkeypatch) -> None:
    _clear_env(monkeypatch)
    (tmp_path / "pyproject.toml").write_text('[tool.catx]\nmatrix_source = "filtered"\n')
    monkeypatch.chdir(tmp_path)
    assert ExplorerSettings.load().matrix_source == "filtered"


def test_settings_defaults_without_files(tmp_path: Path, monkeypatch) -> None:
    _clear_env(monkeypatch)
    monkeypatch.chdir(tmp_path)
    s = ExplorerSettings.load()
    assert s == ExplorerSettings()
    assert s.year_domain == (1960, 2024)
    assert s.matrix_source == "all"


def test_invalid_values_keep_previous_layer(tmp_path: Path, monkeypatch) -> None:
    _clear_env(monkeypatch)
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("CATX_MATRIX_SOURCE", "sometimes")
    monkeypatch.setenv("CATX_TOP_N", "0")
    monkeypatch.setenv("CATX_YEAR_AXIS_MIN", "2030")
    monkeypatch.setenv("CATX_LOG_LEVEL", "chatty")
    s = ExplorerSettings.load()
    assert s.matrix_source == "all"
    assert s.top_n == 20
    assert s.year_domain == (1960, 2024)
    assert s.log_level == "WARNING"


def test_env_data_roots_split_on_pathsep(monkeypatch) -> None:
    _clear_env(monkeypatch)
    monkeypatch.setenv("CATX_DATA_ROOTS", os.pathsep.join(["a", "b"]))
    assert ExplorerSettings.from_env().data_roots == ("a", "b")


def test_explicit_missing_config_path_raises(tmp_path: Path) -> None:
    with pytest.raises(IoConfigError):
        ExplorerSettings.from_toml(tmp_path / "missing.toml")


def test_explicit_toml_path_is_read(tmp_path: Path) -> None:
    p = _write_catx_toml(tmp_path, 'top_n = 3\nmatrix_source = "filtered"\n')
    s = ExplorerSettings.from_toml(p)
    assert s.top_n == 3
    assert s.matrix_source == "filtered"


def test_malformed_toml_falls_back_to_defaults(tmp_path: Path) -> None:
    p = _write_catx_toml(tmp_path, "[explorer\ntop_n = ")
    assert ExplorerSettings.from_toml(p) == ExplorerSettings()

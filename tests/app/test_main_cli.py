from __future__ import annotations

import os
from pathlib import Path

import pytest

from app import main as app_main


def test_main_renders_inline(monkeypatch, tmp_path) -> None:
    called = {}

    def fake_streamlit_app(*, default_data=None, default_watch_ttl=None):
        called["default_data"] = default_data
        called["default_watch_ttl"] = default_watch_ttl

    monkeypatch.setenv("STREAMLIT_SERVER_PORT", "1")
    # Patch the imported symbol used inside app.main (not the package attribute)
    monkeypatch.setattr(app_main, "streamlit_app", fake_streamlit_app, raising=True)

    csv = tmp_path / "anime.csv"
    app_main.main(["--data", str(csv), "--watch-ttl", "7"])

    assert called["default_data"] == str(csv)
    assert called["default_watch_ttl"] == 7


def test_main_execs_streamlit(monkeypatch, tmp_path) -> None:
    monkeypatch.delenv("STREAMLIT_SERVER_PORT", raising=False)

    captured = {}

    def fake_execv(exe: str, cmd: list[str]) -> None:
        captured["exe"] = exe
        captured["cmd"] = cmd
        # Prevent process handoff
        raise SystemExit

    monkeypatch.setattr(os, "execv", fake_execv, raising=True)

    csv = tmp_path / "anime.csv"
    with pytest.raises(SystemExit):
        app_main.main(["--data", str(csv), "--watch-ttl", "3"])

    assert captured["cmd"][0] == captured["exe"]
    assert captured["cmd"][1:4] == ["-m", "streamlit", "run"]
    assert captured["cmd"][4] == str(Path(app_main.__file__).resolve())
    dashdash_idx = captured["cmd"].index("--")
    assert captured["cmd"][dashdash_idx + 1 :] == ["--data", str(csv), "--watch-ttl", "3"]


def test_streamlit_command_omits_data_when_unset() -> None:
    ns = app_main.build_parser().parse_args(["--watch-ttl", "0"])
    cmd = app_main.streamlit_command(ns)
    assert cmd[cmd.index("--") + 1 :] == ["--watch-ttl", "0"]


def test_streamlit_run_parser_ignores_unknown_options() -> None:
    ns, rest = app_main.build_parser(add_help=False).parse_known_args(["--data", "x.csv", "--other"])
    assert ns.data == "x.csv"
    assert ns.watch_ttl == 10
    assert rest == ["--other"]

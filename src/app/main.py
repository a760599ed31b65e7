"""
Catalog explorer app entrypoint.

This module provides the CLI entrypoint to launch the Streamlit UI. It defers all UI
composition to the app.ui package and exists solely to start Streamlit
programmatically or render directly when already running under Streamlit.

Usage:
    - Python execution (hands process to Streamlit):
        python -m app.main --data data/anime.csv

    - Streamlit direct:
        streamlit run src/app/main.py -- --data data/anime.csv
"""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path

from app.ui import streamlit_app


def build_parser(*, add_help: bool = True) -> argparse.ArgumentParser:
    """Return the parser shared by the console entrypoint and `streamlit run`."""
    parser = argparse.ArgumentParser(description="Catalog Explorer Streamlit App", add_help=add_help)
    parser.add_argument("--data", default=None, help="CSV catalog to load")
    parser.add_argument(
        "--watch-ttl",
        type=int,
        default=10,
        help="Cache TTL (seconds) for catalog discovery (0 rescans on every rerun).",
    )
    return parser


def streamlit_command(ns: argparse.Namespace) -> list[str]:
    """Build the `python -m streamlit run` command forwarding the parsed options."""
    cmd = [sys.executable, "-m", "streamlit", "run", str(Path(__file__).resolve())]
    forwarded = ["--watch-ttl", str(ns.watch_ttl)]
    if ns.data:
        forwarded = ["--data", ns.data, *forwarded]
    return [*cmd, "--", *forwarded]


def main(argv: list[str] | None = None) -> None:
    """Console entrypoint that launches Streamlit with the explorer UI.

    Under a running Streamlit server (STREAMLIT_SERVER_PORT set) the app renders in
    place; otherwise the process is handed to `streamlit run` on this module.

    Args:
        argv (list[str] | None): CLI arguments; sys.argv[1:] when None.
    """
    ns = build_parser().parse_args(sys.argv[1:] if argv is None else argv)

    if os.environ.get("STREAMLIT_SERVER_PORT"):
        streamlit_app(default_data=ns.data, default_watch_ttl=ns.watch_ttl)
        return

    cmd = streamlit_command(ns)
    try:
        os.execv(sys.executable, cmd)
    except OSError:
        import subprocess

        subprocess.run(cmd, check=False)


if __name__ == "__main__":
    # `streamlit run` passes our options after '--'; unknown ones are ignored.
    ns, _ = build_parser(add_help=False).parse_known_args(sys.argv[1:])
    streamlit_app(default_data=ns.data, default_watch_ttl=ns.watch_ttl)

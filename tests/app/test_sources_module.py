from __future__ import annotations

import os
from pathlib import Path

from app.ui.sources import DEMO_ROWS, cached_list_catalogs, create_demo_catalog, list_catalogs_impl
from catx.io import read_records


def test_create_demo_catalog_is_readable(tmp_path: Path) -> None:
    path = create_demo_catalog(tmp_path / "data" / "demo_catalog.csv")
    assert path.exists()

    result = read_records(path)
    assert len(result.records) == len(DEMO_ROWS)
    assert result.rejected == 0
    by_name = {r.name: r for r in result.records}
    one_piece = by_name["One Piece"].aired
    assert one_piece is not None and (one_piece.start_year, one_piece.end_year) == (1999, 1999)
    assert by_name["Untitled Project"].is_defaulted("rating")
    assert by_name["Mushishi"].is_defaulted("synopsis")


def test_list_catalogs_impl_newest_first_and_ignored_dirs(tmp_path: Path) -> None:
    old = tmp_path / "a" / "old.csv"
    new = tmp_path / "b" / "new.csv"
    hidden = tmp_path / ".venv" / "skip.csv"
    for p in (old, new, hidden):
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text("Name\nx\n")
    os.utime(old, (1_000_000, 1_000_000))
    os.utime(new, (2_000_000, 2_000_000))
    (tmp_path / "notes.txt").write_text("not a catalog")

    items = list_catalogs_impl([str(tmp_path), str(tmp_path)], 200)
    assert [i["name"] for i in items] == ["new.csv", "old.csv"]
    assert list_catalogs_impl([str(tmp_path)], 1)[0]["path"] == str(new.resolve())


def test_list_catalogs_missing_root_is_empty(tmp_path: Path) -> None:
    assert list_catalogs_impl([str(tmp_path / "missing")]) == []


def test_cached_list_catalogs_without_ttl_rescans(tmp_path: Path) -> None:
    assert cached_list_catalogs((str(tmp_path),), ttl=0) == []
    (tmp_path / "late.csv").write_text("Name\nx\n")
    assert [i["name"] for i in cached_list_catalogs((str(tmp_path),), ttl=0)] == ["late.csv"]

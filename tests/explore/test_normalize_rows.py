from __future__ import annotations

import logging

import pytest

from catx.core.constants import DEFAULT_STATUS, DEFAULT_SYNOPSIS
from catx.core.errors import RowRejected
from catx.explore.normalize import normalize_row, normalize_rows, parse_row

_FULL = [
    "Cowboy Bebop",
    "8.75",
    "Action, Adventure, Sci-Fi",
    "Space bounty hunters.",
    "26",
    "Apr 3, 1998 to Apr 24, 1999",
    "Finished Airing",
]


def test_parse_row_full_record() -> None:
    rec = parse_row(_FULL)
    assert rec.name == "Cowboy Bebop"
    assert rec.rating == 8.75
    assert rec.genres == ("Action", "Adventure", "Sci-Fi")
    assert rec.synopsis == "Space bounty hunters."
    assert rec.episodes == 26
    assert rec.aired is not None
    assert (rec.aired.start_year, rec.aired.end_year) == (1998, 1999)
    assert rec.status == "Finished Airing"
    assert rec.defaulted == frozenset()


def test_parse_row_defaults_unparseable_fields_and_records_them() -> None:
    rec = parse_row(["X", "UNKNOWN", "Action", "", "Unknown", "Not available", ""])
    assert rec.rating == 0.0
    assert rec.episodes == 0
    assert rec.aired is None
    assert rec.status == DEFAULT_STATUS
    assert rec.synopsis == DEFAULT_SYNOPSIS
    assert rec.defaulted == frozenset({"rating", "episodes", "aired", "status", "synopsis"})


def test_parse_row_open_ended_airing_collapses_to_start_year() -> None:
    row = list(_FULL)
    row[5] = "Oct 20, 1999 to ?"
    rec = parse_row(row)
    assert rec.aired is not None
    assert (rec.aired.start_year, rec.aired.end_year) == (1999, 1999)
    assert not rec.is_defaulted("aired")


def test_parse_row_pads_short_rows_and_ignores_surplus_cells() -> None:
    short = parse_row(["Only Name", "7.0"])
    assert short.rating == 7.0
    assert short.genres == ()
    assert short.is_defaulted("episodes")
    long = parse_row([*_FULL, "extra", "cells"])
    assert long == parse_row(_FULL)


@pytest.mark.parametrize("name", ["", "   ", None])
def test_parse_row_rejects_missing_name(name) -> None:
    row = list(_FULL)
    row[0] = name
    with pytest.raises(RowRejected):
        parse_row(row)
    assert normalize_row(row) is None


def test_normalize_rows_counts_rejections_and_keeps_order(caplog) -> None:
    rows = [
        ["B", "6", "Drama", "s", "12", "2000", "Finished Airing"],
        ["", "9", "Drama", "s", "12", "2000", "Finished Airing"],
        ["A", "8", "Action", "s", "24", "1999", "Currently Airing"],
    ]
    with caplog.at_level(logging.INFO, logger="catx.explore.normalize"):
        result = normalize_rows(rows)
    assert [r.name for r in result.records] == ["B", "A"]
    assert result.rejected == 1
    assert result.total == 3
    assert any("1 rejected" in m for m in caplog.messages)


def test_normalize_rows_empty_input() -> None:
    result = normalize_rows([])
    assert result.records == ()
    assert result.rejected == 0

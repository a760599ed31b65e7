from __future__ import annotations

from catx.core.constants import GENRE_HEADER_SENTINEL, STATUS_ALL
from catx.core.schema import Record
from catx.explore.universe import derive_universe


def _rec(name: str, genres: tuple[str, ...], status: str) -> Record:
    return Record(
        name=name, rating=5.0, genres=genres, status=status, episodes=1, synopsis="s"
    )


def test_universe_first_seen_order_and_dedupe() -> None:
    records = [
        _rec("a", ("Drama", "Action"), "Finished Airing"),
        _rec("b", ("Action", "Comedy"), "Currently Airing"),
        _rec("c", ("Drama",), "Finished Airing"),
    ]
    u = derive_universe(records)
    assert u.genres == ("Drama", "Action", "Comedy")
    assert u.statuses == (STATUS_ALL, "Finished Airing", "Currently Airing")


def test_universe_excludes_header_sentinel_genre() -> None:
    u = derive_universe([_rec("a", (GENRE_HEADER_SENTINEL, "Action"), "x")])
    assert GENRE_HEADER_SENTINEL not in u.genres
    assert u.genres == ("Action",)


def test_universe_all_leads_exactly_once() -> None:
    u = derive_universe([_rec("a", (), STATUS_ALL), _rec("b", (), "Finished Airing")])
    assert u.statuses == (STATUS_ALL, "Finished Airing")


def test_universe_of_empty_collection() -> None:
    u = derive_universe([])
    assert u.genres == ()
    assert u.statuses == (STATUS_ALL,)

from __future__ import annotations

import pytest
from pydantic import ValidationError

from catx.core.constants import STATUS_ALL
from catx.core.schema import AiredRange, EpisodeBucket, FilterState, MatrixCell, Record


def _rec(**overrides) -> Record:
    base = dict(
        name="Trigun",
        rating=8.2,
        genres=("Action", "Sci-Fi"),
        status="Finished Airing",
        episodes=26,
        aired=AiredRange(start_year=1998, end_year=1998),
        synopsis="Vash.",
    )
    base.update(overrides)
    return Record(**base)


def test_aired_range_years_inclusive_and_contains() -> None:
    r = AiredRange(start_year=1999, end_year=2001)
    assert list(r.years()) == [1999, 2000, 2001]
    assert r.contains(1999) and r.contains(2001)
    assert not r.contains(1998)
    assert not r.contains(2002)


def test_aired_range_rejects_backwards_interval() -> None:
    with pytest.raises(ValidationError):
        AiredRange(start_year=2001, end_year=1999)


def test_record_requires_non_blank_name() -> None:
    with pytest.raises(ValidationError):
        _rec(name="   ")


def test_record_rejects_negative_episodes_and_extra_fields() -> None:
    with pytest.raises(ValidationError):
        _rec(episodes=-1)
    with pytest.raises(ValidationError):
        _rec(unknown_field=1)


def test_record_is_frozen_and_hashable() -> None:
    rec = _rec()
    with pytest.raises(ValidationError):
        rec.rating = 1.0  # type: ignore[misc]
    assert hash(rec) == hash(_rec())
    assert rec == _rec()


def test_record_defaulted_and_temporal_anchor() -> None:
    rec = _rec(aired=None, defaulted=frozenset({"aired"}))
    assert not rec.has_temporal_anchor
    assert rec.is_defaulted("aired")
    assert not rec.is_defaulted("rating")


def test_episode_bucket_contains_bounds() -> None:
    closed = EpisodeBucket.from_label("51-100")
    assert closed.contains(51) and closed.contains(100)
    assert not closed.contains(50)
    assert not closed.contains(101)
    open_ended = EpisodeBucket.from_label("1001+")
    assert open_ended.contains(1001) and open_ended.contains(10_000)
    assert not open_ended.contains(1000)


def test_filter_state_defaults_are_empty() -> None:
    s = FilterState()
    assert s.status == STATUS_ALL
    assert s.genres == frozenset()
    assert s.episode_buckets == frozenset()
    assert s.year is None
    assert s.episode_limit is None
    assert s.is_empty


def test_filter_state_normalizes_labels_and_status() -> None:
    s = FilterState(genres=["Action ", "", "Drama"], episode_buckets="0-50", status="  ")
    assert s.genres == frozenset({"Action", "Drama"})
    assert s.episode_buckets == frozenset({"0-50"})
    assert s.status == STATUS_ALL


def test_filter_state_with_methods_return_new_snapshots() -> None:
    s0 = FilterState()
    s1 = s0.with_genres(["Action"]).with_status("Currently Airing").with_year(2001)
    s2 = s1.with_episode_buckets(["0-50"]).with_episode_limit(100)
    assert s0.is_empty
    assert s1.genres == frozenset({"Action"})
    assert s1.status == "Currently Airing"
    assert s1.year == 2001
    assert s1.episode_buckets == frozenset()
    assert s2.episode_buckets == frozenset({"0-50"})
    assert s2.episode_limit == 100
    assert s2.with_status(None).status == STATUS_ALL
    assert not s2.is_empty


def test_filter_state_rejects_negative_episode_limit() -> None:
    with pytest.raises(ValidationError):
        FilterState().with_episode_limit(-1)


def test_matrix_cell_count_must_be_positive() -> None:
    with pytest.raises(ValidationError):
        MatrixCell(year=2000, genre="Action", value=5.0, count=0)

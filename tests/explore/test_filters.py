from __future__ import annotations

from catx.core.schema import AiredRange, FilterState, Record
from catx.explore.filters import apply_filter, build_predicate, compile_buckets


def _rec(
    name: str,
    *,
    genres: tuple[str, ...] = ("Action",),
    status: str = "Finished Airing",
    episodes: int = 12,
    aired: tuple[int, int] | None = (2000, 2000),
) -> Record:
    return Record(
        name=name,
        rating=7.0,
        genres=genres,
        status=status,
        episodes=episodes,
        aired=None if aired is None else AiredRange(start_year=aired[0], end_year=aired[1]),
        synopsis="s",
    )


_RECORDS = (
    _rec("a", genres=("Action", "Drama"), episodes=600, aired=(1999, 2001)),
    _rec("b", genres=("Action",), status="Currently Airing", episodes=75),
    _rec("c", genres=("Comedy",), episodes=12, aired=None),
    _rec("d", genres=("Drama", "Action", "Comedy"), episodes=1500, aired=(2005, 2006)),
)


def _names(records) -> list[str]:
    return [r.name for r in records]


def test_empty_state_is_identity() -> None:
    assert apply_filter(_RECORDS, FilterState()) == _RECORDS


def test_genre_dimension_requires_all_selected_genres() -> None:
    state = FilterState(genres={"Action", "Drama"})
    assert _names(apply_filter(_RECORDS, state)) == ["a", "d"]


def test_status_dimension_exact_match() -> None:
    state = FilterState(status="Currently Airing")
    assert _names(apply_filter(_RECORDS, state)) == ["b"]


def test_bucket_dimension_is_disjunctive() -> None:
    state = FilterState(episode_buckets={"0-50", "501-1000"})
    assert _names(apply_filter(_RECORDS, state)) == ["a", "c"]
    assert not build_predicate(state)(_RECORDS[1])


def test_open_ended_bucket() -> None:
    state = FilterState(episode_buckets={"1001+"})
    assert _names(apply_filter(_RECORDS, state)) == ["d"]


def test_malformed_bucket_never_matches_and_never_raises() -> None:
    assert _names(apply_filter(_RECORDS, FilterState(episode_buckets={"bogus"}))) == []
    mixed = FilterState(episode_buckets={"bogus", "0-50"})
    assert _names(apply_filter(_RECORDS, mixed)) == ["c"]
    assert compile_buckets(["bogus", "100-10"]) == ()


def test_year_dimension_uses_aired_range_and_drops_unanchored() -> None:
    assert _names(apply_filter(_RECORDS, FilterState(year=2000))) == ["a", "b"]
    assert _names(apply_filter(_RECORDS, FilterState(year=2006))) == ["d"]
    assert _names(apply_filter(_RECORDS, FilterState(year=1990))) == []


def test_episode_limit_dimension() -> None:
    assert _names(apply_filter(_RECORDS, FilterState(episode_limit=75))) == ["b", "c"]
    assert _names(apply_filter(_RECORDS, FilterState(episode_limit=0))) == []


def test_dimensions_combine_with_and() -> None:
    state = FilterState(genres={"Action"}, episode_buckets={"51-100", "501-1000"}, year=2000)
    assert _names(apply_filter(_RECORDS, state)) == ["a", "b"]
    assert _names(apply_filter(_RECORDS, state.with_status("Finished Airing"))) == ["a"]


def test_filter_result_is_subset_in_input_order() -> None:
    state = FilterState(genres={"Comedy"})
    out = apply_filter(reversed(_RECORDS), state)
    assert _names(out) == ["d", "c"]
    assert set(out) <= set(_RECORDS)


def test_filter_does_not_mutate_input() -> None:
    records = list(_RECORDS)
    apply_filter(records, FilterState(genres={"Drama"}))
    assert records == list(_RECORDS)


def test_apply_filter_is_idempotent() -> None:
    state = FilterState(genres={"Action"}, episode_buckets={"501-1000", "1001+"})
    once = apply_filter(_RECORDS, state)
    assert apply_filter(once, state) == once

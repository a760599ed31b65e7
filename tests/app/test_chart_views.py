from __future__ import annotations

from app.charts import heatmap_view, records_table, scatter_view, top_rated_view
from catx.core.schema import AiredRange, FilterState, Record
from catx.explore import Explorer
from catx.io import ExplorerSettings


def _rec(name: str, genres: tuple[str, ...], year: int, rating: float) -> Record:
    return Record(
        name=name,
        rating=rating,
        genres=genres,
        status="Finished Airing",
        episodes=12,
        aired=AiredRange(start_year=year, end_year=year),
        synopsis="s",
    )


_EXPLORER = Explorer.load(
    [
        _rec("a", ("Action",), 2000, 8.0),
        _rec("b", ("Drama", "Action"), 2001, 6.0),
        _rec("c", ("Drama",), 2002, 7.0),
    ]
)


def test_scatter_view_title_follows_genre_selection() -> None:
    settings = ExplorerSettings(year_axis_min=1995, year_axis_max=2005)
    spec = scatter_view(_EXPLORER.with_filter(FilterState(genres={"Drama"})), settings).to_dict()
    assert spec["title"] == "Ratings (Drama)"
    assert spec["encoding"]["x"]["scale"]["domain"] == [1995, 2005]
    context = scatter_view(_EXPLORER.with_genre_context("Action"), settings).to_dict()
    assert context["title"] == "Ratings (Action)"


def test_heatmap_view_is_layered() -> None:
    spec = heatmap_view(_EXPLORER).to_dict()
    assert len(spec["layer"]) == 2


def test_top_rated_view_and_empty_placeholder() -> None:
    spec = top_rated_view(_EXPLORER, 2).to_dict()
    assert spec["mark"]["type"] == "bar"
    empty = _EXPLORER.with_filter(FilterState(year=1900))
    assert top_rated_view(empty, 2).to_dict()["mark"]["type"] == "text"


def test_records_table_joins_genres() -> None:
    df = records_table(_EXPLORER)
    assert df.get_column("genres").to_list() == ["Action", "Drama, Action", "Drama"]
    assert df.get_column("name").to_list() == ["a", "b", "c"]

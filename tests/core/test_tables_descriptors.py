from __future__ import annotations

import pytest

from catx.core.tables import FrameName, get_frame, list_frames

_DTYPES = {"i64", "f64", "str", "list[str]"}


def test_descriptors_contract() -> None:
    for desc in list_frames():
        assert set(desc.columns.values()) <= _DTYPES, f"unknown dtype in {desc.name.value}"
        assert set(desc.required).issubset(desc.columns.keys()), (
            f"required not subset of columns for {desc.name.value}"
        )
        assert set(desc.required).isdisjoint(desc.nullable), (
            f"required/nullable not disjoint for {desc.name.value}"
        )
        assert set(desc.required).union(desc.nullable) == set(desc.columns.keys()), (
            f"required∪nullable does not cover columns for {desc.name.value}"
        )


def test_get_frame_roundtrip() -> None:
    for name in FrameName:
        assert get_frame(name).name == name
        assert get_frame(name.value).name == name


def test_matrix_value_is_nullable_for_empty_cells() -> None:
    desc = get_frame(FrameName.MATRIX)
    assert "value" in desc.nullable
    assert "count" in desc.nullable
    assert desc.required == ["year", "genre"]


def test_get_frame_unknown_name_raises() -> None:
    with pytest.raises(ValueError):
        get_frame("nope")

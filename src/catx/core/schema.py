"""
Pydantic v2 models for catalog records, filter selections, and derived view rows.

Responsibilities
- Define the immutable Record produced by the normalizer and its AiredRange.
- Define FilterState, the snapshot of the user's selection passed by value into the
  filter engine.
- Define the row models emitted by the projector (ScatterPoint) and aggregator
  (MatrixCell).

Style
- Zero-IO (stdlib + pydantic only).
- All models are frozen; "mutation" returns a new validated instance.
- Validators raise catx.core.errors.SchemaError, surfaced by pydantic as ValidationError.

References
- grammar: src/catx/core/grammar.py (cell parsers)
- errors: src/catx/core/errors.py
- tests: tests/core/*
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .constants import STATUS_ALL
from .errors import SchemaError
from .grammar import parse_bucket

__all__ = [
    "AiredRange",
    "Record",
    "EpisodeBucket",
    "FilterState",
    "ScatterPoint",
    "MatrixCell",
]


class AiredRange(BaseModel):
    """
    Inclusive integer year interval during which a Record was airing.

    Attributes:
        start_year (int): First year on air.
        end_year (int): Last year on air (equal to start_year for single dates).

    Raises:
        pydantic.ValidationError: If start_year > end_year.

    Examples:
        >>> from catx.core.schema import AiredRange
        >>> list(AiredRange(start_year=1999, end_year=2001).years())
        [1999, 2000, 2001]
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    start_year: int
    end_year: int

    @model_validator(mode="after")
    def _check_order(self) -> AiredRange:
        if self.start_year > self.end_year:
            raise SchemaError(
                f"aired range runs backwards: {self.start_year} > {self.end_year}"
            )
        return self

    def years(self) -> Iterator[int]:
        """Iterate every year in the range, inclusive."""
        return iter(range(self.start_year, self.end_year + 1))

    def contains(self, year: int) -> bool:
        return self.start_year <= year <= self.end_year


class Record(BaseModel):
    """
    One normalized catalog entry.

    Attributes:
        name (str): Required, non-blank display name.
        rating (float): Nominally in [0, 10]; 0 when the source cell was unparseable.
        genres (tuple[str, ...]): Ordered, trimmed genre labels (may be empty).
        status (str): Free-form airing status (e.g., "Finished Airing").
        episodes (int): Episode count >= 0; 0 when unparseable.
        aired (AiredRange | None): Temporal anchor; None when the aired cell had no year.
        synopsis (str): Free text.
        defaulted (frozenset[str]): Names of fields that were filled with a default
            because the source cell was missing or unparseable.

    Notes:
        Records are immutable and hashable; equality is by value.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str
    rating: float
    genres: tuple[str, ...] = ()
    status: str
    episodes: int = Field(..., ge=0)
    aired: AiredRange | None = None
    synopsis: str
    defaulted: frozenset[str] = frozenset()

    @field_validator("name")
    @classmethod
    def _non_blank_name(cls, v: str) -> str:
        if not v.strip():
            raise SchemaError("name must be non-blank")
        return v

    @property
    def has_temporal_anchor(self) -> bool:
        return self.aired is not None

    def is_defaulted(self, field: str) -> bool:
        return field in self.defaulted


class EpisodeBucket(BaseModel):
    """
    Episode-count interval used by the episode filter dimension.

    Attributes:
        low (int): Inclusive lower bound.
        high (int | None): Inclusive upper bound, or None for open-ended ("min+").
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    low: int = Field(..., ge=0)
    high: int | None = None

    @classmethod
    def from_label(cls, label: str) -> EpisodeBucket:
        """Build from a "min-max" / "min+" label (raises BucketFormatError)."""
        low, high = parse_bucket(label)
        return cls(low=low, high=high)

    def contains(self, episodes: int) -> bool:
        if episodes < self.low:
            return False
        return self.high is None or episodes <= self.high


def _as_label_set(v: Any) -> frozenset[str]:
    if v is None:
        return frozenset()
    if isinstance(v, str):
        v = [v]
    return frozenset(str(x).strip() for x in v if str(x).strip())


class FilterState(BaseModel):
    """
    Snapshot of the current filter selection.

    Attributes:
        genres (frozenset[str]): A Record matches iff it carries every selected genre.
            Empty selection disables the dimension.
        status (str): Exact status match; "all" disables the dimension.
        episode_buckets (frozenset[str]): "min-max"/"min+" labels; a Record matches iff its
            episode count falls in any selected bucket. Empty selection disables it.
        year (int | None): A Record matches iff its aired range spans this year.
        episode_limit (int | None): A Record matches iff episodes <= limit.

    Examples:
        >>> from catx.core.schema import FilterState
        >>> s = FilterState().with_genres(["Action", "Drama"])
        >>> sorted(s.genres)
        ['Action', 'Drama']
        >>> s.is_empty
        False
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    genres: frozenset[str] = frozenset()
    status: str = STATUS_ALL
    episode_buckets: frozenset[str] = frozenset()
    year: int | None = None
    episode_limit: int | None = Field(default=None, ge=0)

    @field_validator("genres", "episode_buckets", mode="before")
    @classmethod
    def _normalize_labels(cls, v: Any) -> frozenset[str]:
        return _as_label_set(v)

    @field_validator("status", mode="before")
    @classmethod
    def _normalize_status(cls, v: Any) -> str:
        if v is None:
            return STATUS_ALL
        text = str(v).strip()
        return text or STATUS_ALL

    def _replace(self, **changes: Any) -> FilterState:
        data = self.model_dump()
        data.update(changes)
        return FilterState.model_validate(data)

    def with_genres(self, genres: Iterable[str]) -> FilterState:
        return self._replace(genres=list(genres))

    def with_status(self, status: str | None) -> FilterState:
        return self._replace(status=status)

    def with_episode_buckets(self, buckets: Iterable[str]) -> FilterState:
        return self._replace(episode_buckets=list(buckets))

    def with_year(self, year: int | None) -> FilterState:
        return self._replace(year=year)

    def with_episode_limit(self, limit: int | None) -> FilterState:
        return self._replace(episode_limit=limit)

    @property
    def is_empty(self) -> bool:
        """True when every dimension is disabled."""
        return (
            not self.genres
            and self.status == STATUS_ALL
            and not self.episode_buckets
            and self.year is None
            and self.episode_limit is None
        )


class ScatterPoint(BaseModel):
    """
    One point of the rating-vs-release-year projection.

    Attributes:
        x (int): Release (start) year.
        y (float): Rating.
        label (str): Record name.
        status (str): Record status.
        episodes (int): Record episode count.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    x: int
    y: float
    label: str
    status: str
    episodes: int


class MatrixCell(BaseModel):
    """
    One populated (year, genre) bucket of the genre x year matrix.

    Attributes:
        year (int): Calendar year.
        genre (str): Genre label.
        value (float): Unweighted mean rating of all contributing samples.
        count (int): Number of contributing Record-year-genre samples (>= 1).
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    year: int
    genre: str
    value: float
    count: int = Field(..., ge=1)

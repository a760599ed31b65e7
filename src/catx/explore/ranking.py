"""Top-rated view: highest-rated Records for the ratings-by-name bar chart."""

from __future__ import annotations

from collections.abc import Iterable

from catx.core.schema import Record

__all__ = ["top_rated"]


def top_rated(records: Iterable[Record], n: int) -> tuple[Record, ...]:
    """
    Return up to ``n`` Records ordered by rating, highest first.

    Records whose rating was defaulted are left out. Ties keep input order.
    """
    if n <= 0:
        return ()
    rated = [r for r in records if not r.is_defaulted("rating")]
    return tuple(sorted(rated, key=lambda r: r.rating, reverse=True)[:n])

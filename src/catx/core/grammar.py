"""
Parsing grammar for raw catalog cells.

Responsibilities
- Best-effort conversion of numeric cells (rating, episodes) with documented defaults.
- Genre list splitting and trimming.
- Year extraction and aired-range parsing ("<date> to <date>" or a single date).
- Episode bucket labels ("min-max" inclusive, "min+" open-ended).

Notes
- Numeric parsers never raise; they return ``(value, defaulted)`` so callers can record
  which fields fell back to a default.
- parse_bucket raises BucketFormatError; the filter engine treats that bucket as
  non-matching.
- Zero-IO, stdlib only.

Examples:
    >>> from catx.core.grammar import parse_aired_range, parse_bucket
    >>> parse_aired_range("Apr 3, 1998 to Apr 24, 1999")
    (1998, 1999)
    >>> parse_aired_range("Oct 20, 1999 to ?")
    (1999, 1999)
    >>> parse_bucket("1001+")
    (1001, None)
"""

from __future__ import annotations

import math
import re

from .constants import (
    AIRED_RANGE_SEPARATOR,
    DEFAULT_EPISODES,
    DEFAULT_RATING,
    GENRE_SEPARATOR,
)
from .errors import BucketFormatError

__all__ = [
    "clean_text",
    "parse_rating",
    "parse_episodes",
    "split_genres",
    "extract_year",
    "parse_aired_range",
    "parse_bucket",
]

_YEAR_RE = re.compile(r"(?<!\d)(\d{4})(?!\d)")
_RANGE_BUCKET_RE = re.compile(r"^\s*(\d+)\s*-\s*(\d+)\s*$")
_OPEN_BUCKET_RE = re.compile(r"^\s*(\d+)\s*\+\s*$")


def clean_text(value: object) -> str | None:
    """Return the stripped string form of a cell, or None when blank/missing."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def parse_rating(value: object) -> tuple[float, bool]:
    """
    Parse a rating cell.

    Args:
        value (object): Raw cell (e.g., "8.75", "N/A", None).

    Returns:
        tuple[float, bool]: (rating, defaulted). Unparseable or non-finite input yields
        (DEFAULT_RATING, True).
    """
    text = clean_text(value)
    if text is None:
        return DEFAULT_RATING, True
    try:
        rating = float(text)
    except ValueError:
        return DEFAULT_RATING, True
    if not math.isfinite(rating):
        return DEFAULT_RATING, True
    return rating, False


def parse_episodes(value: object) -> tuple[int, bool]:
    """
    Parse an episode-count cell.

    Accepts integer strings and integral decimals ("12", "12.0"). Negative, fractional,
    or non-numeric input (e.g., "Unknown") yields (DEFAULT_EPISODES, True).
    """
    text = clean_text(value)
    if text is None:
        return DEFAULT_EPISODES, True
    try:
        episodes = int(text)
    except ValueError:
        try:
            as_float = float(text)
        except ValueError:
            return DEFAULT_EPISODES, True
        if not math.isfinite(as_float) or not as_float.is_integer():
            return DEFAULT_EPISODES, True
        episodes = int(as_float)
    if episodes < 0:
        return DEFAULT_EPISODES, True
    return episodes, False


def split_genres(value: object) -> tuple[str, ...]:
    """Split a comma-joined genre cell into trimmed, non-empty entries (order kept)."""
    text = clean_text(value)
    if text is None:
        return ()
    return tuple(g.strip() for g in text.split(GENRE_SEPARATOR) if g.strip())


def extract_year(text: str | None) -> int | None:
    """Return the first standalone 4-digit year token in ``text``, if any."""
    if not text:
        return None
    match = _YEAR_RE.search(text)
    if match is None:
        return None
    return int(match.group(1))


def parse_aired_range(value: object) -> tuple[int, int] | None:
    """
    Parse an aired cell into an inclusive (start_year, end_year) pair.

    Rules:
        - "<date> to <date>" is a range; anything else is a single date.
        - A missing or year-less end side ("?", "") collapses to start_year.
        - A year-less start side, or an end year before the start year, yields None.

    Returns:
        tuple[int, int] | None: Year interval, or None when no temporal anchor exists.
    """
    text = clean_text(value)
    if text is None:
        return None
    if AIRED_RANGE_SEPARATOR in text:
        start_text, end_text = text.split(AIRED_RANGE_SEPARATOR, 1)
    else:
        start_text, end_text = text, None

    start = extract_year(start_text)
    if start is None:
        return None
    end = extract_year(end_text)
    if end is None:
        end = start
    if end < start:
        return None
    return start, end


def parse_bucket(label: str) -> tuple[int, int | None]:
    """
    Parse an episode bucket label.

    Args:
        label (str): "min-max" (inclusive) or "min+" (open-ended).

    Returns:
        tuple[int, int | None]: (low, high); high is None for open-ended buckets.

    Raises:
        BucketFormatError: If the label is malformed or low > high.
    """
    text = str(label)
    m = _RANGE_BUCKET_RE.match(text)
    if m:
        low, high = int(m.group(1)), int(m.group(2))
        if low > high:
            raise BucketFormatError(f"bucket {label!r} has min greater than max")
        return low, high
    m = _OPEN_BUCKET_RE.match(text)
    if m:
        return int(m.group(1)), None
    raise BucketFormatError(f"bucket {label!r} is not of the form 'min-max' or 'min+'")

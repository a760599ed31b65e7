"""
catx — Media catalog explorer.

Normalizes raw catalog rows into immutable Records, filters them across independent
dimensions, and derives two views: a rating-vs-year point projection and a genre x year
average-rating matrix.

Subpackages:
    - catx.core: contracts (constants, grammar, schemas, frame descriptors).
    - catx.explore: the normalization/filter/projection/aggregation pipeline.
    - catx.io: catalog readers, settings, polars frames.
    - catx.viz: Altair chart builders.
"""

from __future__ import annotations

import logging

__all__ = ["configure_logging"]

_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: int | str = logging.WARNING) -> None:
    """Configure root logging once and set the catx logger level."""
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.WARNING)
    logging.basicConfig(level=level, format=_LOG_FORMAT)
    logging.getLogger("catx").setLevel(level)

"""Preference ordering shared by accepted media ranges and available types."""

from __future__ import annotations

from functools import cmp_to_key
from typing import Iterable, TypeVar, Union

from fastapi_conneg.schemas.media_range import (
    WILDCARD,
    MediaRange,
    ScoredContentType,
    quality_rank,
)

Rankable = Union[MediaRange, ScoredContentType]
T = TypeVar("T", MediaRange, ScoredContentType)


def _compare_part(a: str, b: str, a_order: int, b_order: int) -> int:
    if a == WILDCARD:
        return 1
    if b == WILDCARD:
        return -1
    return a_order - b_order


def compare_descriptors(a: Rankable, b: Rankable) -> int:
    """Order ``a`` and ``b``; a negative result means ``a`` is preferred.

    Higher quality first, then concrete types before wildcards, then concrete
    subtypes before wildcards, then earlier declaration.
    """
    a_rank = quality_rank(a.quality)
    b_rank = quality_rank(b.quality)
    if a_rank != b_rank:
        return -1 if a_rank > b_rank else 1
    if a.type != b.type:
        return _compare_part(a.type, b.type, a.order, b.order)
    if a.subtype != b.subtype:
        return _compare_part(a.subtype, b.subtype, a.order, b.order)
    return a.order - b.order


def rank_descriptors(items: Iterable[T]) -> list[T]:
    """Return ``items`` sorted from most to least preferred."""
    return sorted(items, key=cmp_to_key(compare_descriptors))

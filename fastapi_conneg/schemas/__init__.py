"""Pydantic schemas for content negotiation."""

from .media_range import (
    DEFAULT_QUALITY,
    NOT_ACCEPTABLE,
    WILDCARD,
    AcceptableQuality,
    AvailableContentType,
    MediaRange,
    NotAcceptable,
    Quality,
    ScoredContentType,
    quality_rank,
)

__all__ = [
    "DEFAULT_QUALITY",
    "NOT_ACCEPTABLE",
    "WILDCARD",
    "AcceptableQuality",
    "AvailableContentType",
    "MediaRange",
    "NotAcceptable",
    "Quality",
    "ScoredContentType",
    "quality_rank",
]

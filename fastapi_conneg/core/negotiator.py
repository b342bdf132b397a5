"""Select the best available content type for an Accept header."""

from __future__ import annotations

from typing import Optional, Sequence

from loguru import logger

from fastapi_conneg.core.parser import parse_accept_header, split_media_type
from fastapi_conneg.core.ranking import rank_descriptors
from fastapi_conneg.schemas.media_range import (
    WILDCARD,
    AvailableContentType,
    MediaRange,
    Quality,
    ScoredContentType,
)
from fastapi_conneg.utils.text import strip_whitespace, to_lower


def parse_available_types(available: Sequence[str]) -> list[AvailableContentType]:
    """Split the server's content types, skipping entries without a slash."""
    content_types: list[AvailableContentType] = []
    for position, raw in enumerate(available):
        parts = split_media_type(to_lower(strip_whitespace(raw)))
        if parts is None:
            logger.debug("Skipping malformed available content type {!r}", raw)
            continue
        type_, subtype = parts
        content_types.append(
            AvailableContentType(raw_range=raw, type=type_, subtype=subtype, order=position)
        )
    return content_types


def score_content_type(
    content_type: AvailableContentType, media_ranges: Sequence[MediaRange]
) -> ScoredContentType:
    """Assign ``content_type`` a quality from the ranked ``media_ranges``.

    Every exact ``type/subtype`` match overwrites the quality, so the last one
    in ranked order sticks. ``type/*`` only applies while no type match has
    been recorded and ``*/*`` only fills in until one is.
    """
    quality: Optional[Quality] = None
    matched = False
    for media_range in media_ranges:
        if media_range.type == content_type.type and (
            media_range.subtype == content_type.subtype
            or (media_range.subtype == WILDCARD and not matched)
        ):
            quality = media_range.quality
            matched = True
        elif media_range.type == WILDCARD and not matched:
            quality = media_range.quality
    return ScoredContentType(**content_type.model_dump(), quality=quality)


def score_available_types(
    media_ranges: Sequence[MediaRange], available: Sequence[str]
) -> list[ScoredContentType]:
    """Score every well-formed available type and rank the results."""
    scored = [
        score_content_type(content_type, media_ranges)
        for content_type in parse_available_types(available)
    ]
    return rank_descriptors(scored)


def _default(available: Sequence[str]) -> str:
    return available[0] if available else ""


def negotiate(accept: str, available: Sequence[str]) -> str:
    """Return the entry of ``available`` that best satisfies ``accept``.

    ``available`` is ordered by server preference. The first entry is returned
    for an empty header, when no header element can be parsed, and when no
    available entry is well formed. The empty string is returned only when
    ``available`` is empty.
    """
    if not accept:
        return _default(available)

    media_ranges = parse_accept_header(accept)
    if not media_ranges:
        logger.debug("No valid media range in Accept {!r}; using server default", accept)
        return _default(available)

    scored = score_available_types(media_ranges, available)
    if not scored:
        return _default(available)

    selected = scored[0].raw_range
    logger.debug("Negotiated {!r} for Accept {!r}", selected, accept)
    return selected

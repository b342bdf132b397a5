"""Parser for the HTTP ``Accept`` header (RFC 7231 section 5.3.2)."""

from __future__ import annotations

from loguru import logger

from fastapi_conneg.core.ranking import rank_descriptors
from fastapi_conneg.schemas.media_range import (
    DEFAULT_QUALITY,
    NOT_ACCEPTABLE,
    WILDCARD,
    AcceptableQuality,
    MediaRange,
    Quality,
)
from fastapi_conneg.utils.text import parse_float, strip_whitespace, to_lower

MIN_QUALITY = 0.001
MAX_QUALITY = 1.0


def split_media_type(value: str) -> tuple[str, str] | None:
    """Split ``type/subtype`` on the first slash, or return None without one."""
    if "/" not in value:
        return None
    type_, subtype = value.split("/", 1)
    return type_, subtype


def parse_media_range(value: str) -> tuple[str, str, str] | None:
    """Normalize a media range and return ``(range, type, subtype)``.

    Returns None when there is no slash or when a wildcard type is combined
    with a concrete subtype (``*/html``).
    """
    media_range = to_lower(strip_whitespace(value))
    parts = split_media_type(media_range)
    if parts is None:
        return None
    type_, subtype = parts
    if type_ == WILDCARD and subtype != WILDCARD:
        return None
    return media_range, type_, subtype


def parse_quality(value: str) -> Quality | None:
    """Convert a ``q`` parameter value, or return None if it is not a number.

    Zero means "not acceptable". Any other value outside [0.001, 1] falls back
    to the default quality instead of rejecting the media range.
    """
    number = parse_float(value)
    if number is None:
        return None
    if number == 0:
        return NOT_ACCEPTABLE
    if number < MIN_QUALITY or number > MAX_QUALITY:
        return DEFAULT_QUALITY
    return AcceptableQuality(weight=number)


def _parameters(token: str) -> list[str]:
    params = token.split(";")
    # "text/html;" carries no empty parameter
    if len(params) > 1 and not strip_whitespace(params[-1]):
        params.pop()
    return params


def parse_accept_token(token: str, order: int) -> MediaRange | None:
    """Parse one comma-separated element of an Accept header."""
    params = _parameters(token)
    parsed = parse_media_range(params[0])
    if parsed is None:
        logger.debug("Discarding Accept token {!r}: invalid media range", token)
        return None
    raw_range, type_, subtype = parsed

    quality: Quality = DEFAULT_QUALITY
    for param in params[1:]:
        if "=" not in param:
            logger.debug("Discarding Accept token {!r}: parameter without '='", token)
            return None
        key, value = param.split("=", 1)
        if to_lower(strip_whitespace(key)) != "q":
            continue
        parsed_quality = parse_quality(value)
        if parsed_quality is None:
            logger.debug("Discarding Accept token {!r}: invalid quality {!r}", token, value)
            return None
        quality = parsed_quality

    return MediaRange(
        raw_range=raw_range,
        type=type_,
        subtype=subtype,
        quality=quality,
        order=order,
    )


def parse_accept_header(header_value: str) -> list[MediaRange]:
    """Parse an Accept header into media ranges, most preferred first.

    Malformed elements are dropped; the index of each element in the header is
    kept as its ``order`` whether or not earlier elements survived.
    """
    media_ranges: list[MediaRange] = []
    for order, token in enumerate(header_value.split(",")):
        media_range = parse_accept_token(token, order)
        if media_range is not None:
            media_ranges.append(media_range)
    return rank_descriptors(media_ranges)

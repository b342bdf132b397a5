"""Pydantic value types for Accept header negotiation."""

from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator

WILDCARD = "*"


class AcceptableQuality(BaseModel):
    """Relative preference in the range (0, 1]."""

    model_config = ConfigDict(frozen=True)

    weight: float = Field(default=1.0, gt=0, le=1)


class NotAcceptable(BaseModel):
    """Explicit ``q=0``: the media range must never be selected."""

    model_config = ConfigDict(frozen=True)


Quality = Union[AcceptableQuality, NotAcceptable]

DEFAULT_QUALITY = AcceptableQuality()
NOT_ACCEPTABLE = NotAcceptable()


def quality_rank(quality: Optional[Quality]) -> float:
    """Return a sortable weight; unmatched is 0, not acceptable sorts below it."""
    if quality is None:
        return 0.0
    if isinstance(quality, NotAcceptable):
        return -1.0
    return quality.weight


class MediaRange(BaseModel):
    """One media range accepted by the client."""

    model_config = ConfigDict(frozen=True)

    raw_range: str
    type: str
    subtype: str
    quality: Quality = DEFAULT_QUALITY
    order: int = Field(default=0, ge=0)

    @model_validator(mode="after")
    def _check_wildcards(self) -> "MediaRange":
        if self.type == WILDCARD and self.subtype != WILDCARD:
            raise ValueError("A wildcard type requires a wildcard subtype.")
        return self

    @property
    def media_type(self) -> str:
        return f"{self.type}/{self.subtype}"


class AvailableContentType(BaseModel):
    """A content type the server can produce, at its preference position."""

    model_config = ConfigDict(frozen=True)

    raw_range: str
    type: str
    subtype: str
    order: int = Field(default=0, ge=0)


class ScoredContentType(AvailableContentType):
    """Available content type with the quality the Accept header assigns it.

    ``quality`` is None when no accepted media range matched the type.
    """

    quality: Optional[Quality] = None

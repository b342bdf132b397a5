"""Accept header parsing, ranking and negotiation."""

from .errors import ConfigurationError, ContentNegotiationError, error_document
from .negotiator import negotiate, parse_available_types, score_available_types
from .parser import parse_accept_header, parse_media_range, parse_quality
from .ranking import compare_descriptors, rank_descriptors

__all__ = [
    "ConfigurationError",
    "ContentNegotiationError",
    "compare_descriptors",
    "error_document",
    "negotiate",
    "parse_accept_header",
    "parse_available_types",
    "parse_media_range",
    "parse_quality",
    "rank_descriptors",
    "score_available_types",
]

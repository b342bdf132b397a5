"""HTTP Accept header content negotiation for FastAPI and plain Python."""

from loguru import logger

from .core.errors import ConfigurationError, ContentNegotiationError
from .core.negotiator import negotiate, score_available_types
from .core.parser import parse_accept_header
from .core.ranking import compare_descriptors
from .dependencies import AcceptNegotiator
from .middleware import ContentNegotiationMiddleware, ErrorHandlerMiddleware
from .schemas.media_range import AcceptableQuality, MediaRange, NotAcceptable

logger.disable("fastapi_conneg")

__all__ = [
    "AcceptNegotiator",
    "AcceptableQuality",
    "ConfigurationError",
    "ContentNegotiationError",
    "ContentNegotiationMiddleware",
    "ErrorHandlerMiddleware",
    "MediaRange",
    "NotAcceptable",
    "compare_descriptors",
    "negotiate",
    "parse_accept_header",
    "score_available_types",
]

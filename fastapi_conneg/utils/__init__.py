"""Text helpers for header parsing."""

from .text import parse_float, strip_whitespace, to_lower

__all__ = ["parse_float", "strip_whitespace", "to_lower"]

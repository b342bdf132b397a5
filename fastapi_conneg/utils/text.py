"""String and number helpers used while parsing media ranges."""

from __future__ import annotations

import re
import string

WHITESPACE = " \t\n\r\f\v"

_DECIMAL_RE = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)
_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def strip_whitespace(value: str) -> str:
    """Strip ASCII whitespace from both ends of ``value``."""
    return value.strip(WHITESPACE)


def to_lower(value: str) -> str:
    """Fold A-Z to lowercase, leaving every other character untouched."""
    return value.translate(_ASCII_LOWER)


def parse_float(value: str) -> float | None:
    """Parse a plain decimal number, returning None on anything else.

    Only ``.`` is accepted as the decimal separator. Special values such as
    ``inf`` or ``nan``, digit separators and trailing garbage are rejected.
    """
    candidate = strip_whitespace(value)
    if not _DECIMAL_RE.fullmatch(candidate):
        return None
    return float(candidate)

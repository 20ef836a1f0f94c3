"""Content-type compressibility classifier.

Matching order:
1. Exact essence listed in mime-db as compressible
2. Known already-compressed types (and audio/*, video/*) are never compressible
3. text/* is compressible
4. +xml and +json structured syntax suffixes are compressible
5. Everything else is NOT compressible

The final fallback is a policy choice: compressing unknown, probably binary
content wastes CPU for little or negative gain, so unrecognized types stay
uncompressed.
"""

import re
from dataclasses import dataclass
from enum import Enum

from .mime_db import (
    COMPRESSIBLE_PREFIXES,
    COMPRESSIBLE_SUFFIXES,
    COMPRESSIBLE_TYPES,
    INCOMPRESSIBLE_PREFIXES,
    INCOMPRESSIBLE_TYPES,
)

# type "/" subtype, both RFC 7230 tokens
ESSENCE_PATTERN = re.compile(r"^[!#$%&'*+.^_`|~0-9a-z-]+/[!#$%&'*+.^_`|~0-9a-z-]+$")


class MatchReason(str, Enum):
    """Which rule decided a classification."""

    EXACT = "exact"
    INCOMPRESSIBLE = "incompressible"
    PREFIX = "prefix"
    SUFFIX = "suffix"
    UNKNOWN = "unknown"
    INVALID = "invalid"


@dataclass(frozen=True)
class Classification:
    """Result of classifying a single content type."""

    content_type: str
    essence: str | None
    compressible: bool
    reason: MatchReason


def parse_essence(content_type: str) -> str | None:
    """Reduce a content type to its lower-cased ``type/subtype``.

    Parameters after ``;`` are dropped. Returns None when what is left is not
    a syntactically valid media type.
    """
    if not isinstance(content_type, str):
        return None
    essence = content_type.split(";", 1)[0].strip().lower()
    if not ESSENCE_PATTERN.match(essence):
        return None
    return essence


def classify(content_type: str) -> Classification:
    """Classify a content type and report which rule matched."""
    essence = parse_essence(content_type)
    if essence is None:
        return Classification(content_type, None, False, MatchReason.INVALID)

    if essence in COMPRESSIBLE_TYPES:
        return Classification(content_type, essence, True, MatchReason.EXACT)

    if essence in INCOMPRESSIBLE_TYPES or essence.startswith(INCOMPRESSIBLE_PREFIXES):
        return Classification(content_type, essence, False, MatchReason.INCOMPRESSIBLE)

    if essence.startswith(COMPRESSIBLE_PREFIXES):
        return Classification(content_type, essence, True, MatchReason.PREFIX)

    if essence.endswith(COMPRESSIBLE_SUFFIXES):
        return Classification(content_type, essence, True, MatchReason.SUFFIX)

    return Classification(content_type, essence, False, MatchReason.UNKNOWN)


def is_compressible(content_type: str) -> bool:
    """Return True if content of this type is worth compressing with gzip/brotli/deflate.

    Never raises: malformed, empty or unknown types return False.

    Example:
        >>> is_compressible("text/html; charset=utf-8")
        True
        >>> is_compressible("image/jpeg")
        False
    """
    return classify(content_type).compressible

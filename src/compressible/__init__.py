"""Compressible: decide whether a content type is worth compressing."""

__version__ = "0.1.0"

from .classifier import (
    Classification,
    MatchReason,
    classify,
    is_compressible,
    parse_essence,
)
from .mime_db import (
    COMPRESSIBLE_TYPES,
    INCOMPRESSIBLE_TYPES,
)

__all__ = [
    # Core
    "is_compressible",
    "classify",
    "parse_essence",
    "Classification",
    "MatchReason",
    # Tables
    "COMPRESSIBLE_TYPES",
    "INCOMPRESSIBLE_TYPES",
]

"""arnlike - IAM ArnLike wildcard matching for ARNs."""

from __future__ import annotations

# Parsing
from arnlike.arn import Arn, parse

# Matching
from arnlike.matcher import (
    ArnPattern,
    arn_like,
    arn_like_any,
    arn_not_like,
    compile_arn_pattern,
)

# Errors
from arnlike.errors import (
    ArnError,
    ArnParseError,
    ErrorCodes,
    InvalidPrefixError,
    InvalidSectionCountError,
    PatternCompilationError,
)

__version__ = "0.1.0"

__all__ = [
    # Parsing
    "Arn",
    "parse",
    # Matching
    "ArnPattern",
    "arn_like",
    "arn_not_like",
    "arn_like_any",
    "compile_arn_pattern",
    # Errors
    "ErrorCodes",
    "ArnError",
    "ArnParseError",
    "InvalidPrefixError",
    "InvalidSectionCountError",
    "PatternCompilationError",
]

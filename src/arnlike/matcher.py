"""ArnLike matching of ARNs against wildcard patterns.

Each section of the ARN is matched individually against the corresponding
section of the pattern, as the IAM ``ArnLike`` condition operator does.
Sections are split before wildcards are expanded, so ``*`` and ``?`` never
match across a ``:`` that separates two sections.
"""

from __future__ import annotations

import functools
import logging
import re
from typing import Iterable

from arnlike.arn import ARN_DELIMITER, ARN_SECTIONS_EXPECTED, parse
from arnlike.errors import InvalidSectionCountError, PatternCompilationError
from arnlike.utils.pattern import prepare_pattern_sections

__all__ = [
    "ArnPattern",
    "compile_arn_pattern",
    "arn_like",
    "arn_not_like",
    "arn_like_any",
]

_logger = logging.getLogger("arnlike.matcher")

VALUE_CONTEXT = "could not parse input value"
PATTERN_CONTEXT = "could not parse pattern"


class ArnPattern:
    """An ArnLike pattern compiled into one regular expression per section.

    Instances are immutable after construction and safe to share between
    threads.
    """

    def __init__(self, pattern: str) -> None:
        """Parse, sanitize and compile a pattern.

        Args:
            pattern: An ARN pattern, e.g. ``arn:aws:iam::*:role/*``.

        Raises:
            InvalidPrefixError: If the pattern does not start with ``arn:``.
            InvalidSectionCountError: If the pattern has fewer than six sections.
            PatternCompilationError: If a sanitized section is not a valid regex.
        """
        self._pattern = pattern
        sections = prepare_pattern_sections(parse(pattern, context=PATTERN_CONTEXT))
        compiled: list[re.Pattern[str]] = []
        for section in sections:
            try:
                compiled.append(re.compile(section, re.DOTALL))
            except re.error as e:
                raise PatternCompilationError(section, str(e), cause=e) from e
        self._sections = tuple(compiled)

    @property
    def pattern(self) -> str:
        """The pattern as given."""
        return self._pattern

    def matches(self, value: str) -> bool:
        """Return True if every section of ``value`` matches this pattern.

        Raises:
            InvalidPrefixError: If value does not start with ``arn:``.
            InvalidSectionCountError: If value has fewer than six sections.
        """
        return self.matches_sections(parse(value, context=VALUE_CONTEXT))

    def matches_sections(self, sections: list[str]) -> bool:
        """Match already-split ARN sections against this pattern.

        Raises:
            InvalidSectionCountError: If ``sections`` does not hold exactly
                six entries.
        """
        if len(sections) != ARN_SECTIONS_EXPECTED:
            raise InvalidSectionCountError(
                ARN_DELIMITER.join(sections), len(sections), context=VALUE_CONTEXT
            )
        for index, (regex, section) in enumerate(zip(self._sections, sections)):
            if regex.match(section) is None:
                _logger.debug(
                    "ArnLike: section %d %r does not match %r",
                    index,
                    section,
                    regex.pattern,
                )
                return False
        return True

    def __repr__(self) -> str:
        return f"ArnPattern({self._pattern!r})"


@functools.lru_cache(maxsize=256)
def compile_arn_pattern(pattern: str) -> ArnPattern:
    """Return a cached ArnPattern for ``pattern``."""
    return ArnPattern(pattern)


def arn_like(value: str, pattern: str) -> bool:
    """Check whether an ARN is matched by an ArnLike pattern.

    The value is parsed before the pattern, so when both are malformed the
    error names the value.

    Args:
        value: The ARN to test.
        pattern: The pattern; ``*`` matches any run of characters within a
            section and ``?`` matches exactly one character.

    Returns:
        True if all six sections match, False otherwise. A non-match is not
        an error.

    Raises:
        InvalidPrefixError: If value or pattern lacks the ``arn:`` prefix.
        InvalidSectionCountError: If value or pattern has fewer than six sections.
        PatternCompilationError: If a sanitized pattern section fails to compile.
    """
    value_sections = parse(value, context=VALUE_CONTEXT)
    return compile_arn_pattern(pattern).matches_sections(value_sections)


def arn_not_like(value: str, pattern: str) -> bool:
    """Negation of arn_like, raising the same errors."""
    return not arn_like(value, pattern)


def arn_like_any(value: str, patterns: Iterable[str]) -> bool:
    """Return True if any of ``patterns`` matches ``value``.

    Mirrors a multi-valued IAM condition, where the values are ORed.
    Every pattern up to the first match must be well formed.
    """
    value_sections = parse(value, context=VALUE_CONTEXT)
    return any(
        compile_arn_pattern(p).matches_sections(value_sections) for p in patterns
    )

"""Error hierarchy for arnlike."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

__all__ = [
    "ArnError",
    "ArnParseError",
    "InvalidPrefixError",
    "InvalidSectionCountError",
    "PatternCompilationError",
    "ErrorCodes",
]


class ArnError(Exception):
    """Base error for all arnlike errors."""

    def __init__(
        self,
        code: str,
        message: str,
        details: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details: dict[str, Any] = details or {}
        self.cause = cause
        self.timestamp = datetime.now(timezone.utc).isoformat()

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class ArnParseError(ArnError):
    """Raised when a string cannot be split into the six ARN sections.

    When ``context`` is given it names the input being parsed and is
    prefixed to the message, e.g. ``could not parse pattern: invalid prefix``.
    """

    def __init__(
        self,
        code: str,
        reason: str,
        value: str,
        context: str | None = None,
        **kwargs: Any,
    ) -> None:
        message = f"{context}: {reason}" if context else reason
        super().__init__(
            code=code,
            message=message,
            details={"value": value, "reason": reason, "context": context},
            **kwargs,
        )

    @property
    def value(self) -> str:
        """The string that failed to parse."""
        return self.details["value"]

    @property
    def reason(self) -> str:
        """The parse failure without the context prefix."""
        return self.details["reason"]

    @property
    def context(self) -> str | None:
        """Which input failed, if the caller said."""
        return self.details["context"]


class InvalidPrefixError(ArnParseError):
    """Raised when a string does not start with the ``arn:`` prefix."""

    def __init__(self, value: str, context: str | None = None, **kwargs: Any) -> None:
        super().__init__(
            code="ARN_INVALID_PREFIX",
            reason="invalid prefix",
            value=value,
            context=context,
            **kwargs,
        )


class InvalidSectionCountError(ArnParseError):
    """Raised when a string does not split into exactly six sections."""

    def __init__(
        self, value: str, section_count: int, context: str | None = None, **kwargs: Any
    ) -> None:
        super().__init__(
            code="ARN_INVALID_SECTION_COUNT",
            reason="not enough sections",
            value=value,
            context=context,
            **kwargs,
        )
        self.details["section_count"] = section_count

    @property
    def section_count(self) -> int:
        """How many sections the string actually split into."""
        return self.details["section_count"]


class PatternCompilationError(ArnError):
    """Raised when a sanitized pattern section is rejected by the regex engine."""

    def __init__(self, section: str, reason: str, **kwargs: Any) -> None:
        super().__init__(
            code="ARN_PATTERN_COMPILATION",
            message=f"Could not compile {section}: {reason}",
            details={"section": section, "reason": reason},
            **kwargs,
        )

    @property
    def section(self) -> str:
        """The sanitized section that failed to compile."""
        return self.details["section"]


class ErrorCodes:
    """All arnlike error codes as constants.

    Use these instead of hardcoding error code strings.

    Example:
        if error.code == ErrorCodes.ARN_INVALID_PREFIX:
            handle_bad_prefix()
    """

    ARN_INVALID_PREFIX = "ARN_INVALID_PREFIX"
    ARN_INVALID_SECTION_COUNT = "ARN_INVALID_SECTION_COUNT"
    ARN_PATTERN_COMPILATION = "ARN_PATTERN_COMPILATION"

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("ErrorCodes is immutable")

"""Splitting ARNs into their six sections."""

from __future__ import annotations

from dataclasses import dataclass

from arnlike.errors import InvalidPrefixError, InvalidSectionCountError

__all__ = [
    "ARN_DELIMITER",
    "ARN_PREFIX",
    "ARN_SECTIONS_EXPECTED",
    "SECTION_PARTITION",
    "SECTION_SERVICE",
    "SECTION_REGION",
    "SECTION_ACCOUNT_ID",
    "SECTION_RESOURCE",
    "Arn",
    "parse",
]

ARN_DELIMITER = ":"
ARN_PREFIX = "arn:"
ARN_SECTIONS_EXPECTED = 6

# zero-indexed; section 0 is always the literal "arn"
SECTION_PARTITION = 1
SECTION_SERVICE = 2
SECTION_REGION = 3
SECTION_ACCOUNT_ID = 4
SECTION_RESOURCE = 5


def parse(value: str, context: str | None = None) -> list[str]:
    """Split an ARN (or ARN pattern) into its six sections.

    The resource section is not split further, so it may itself contain
    the delimiter.

    Args:
        value: The string to split.
        context: Optional description of the input, prefixed to error messages.

    Returns:
        A new list of exactly six strings.

    Raises:
        InvalidPrefixError: If value does not start with ``arn:``.
        InvalidSectionCountError: If value has fewer than six sections.
    """
    if not value.startswith(ARN_PREFIX):
        raise InvalidPrefixError(value, context=context)
    sections = value.split(ARN_DELIMITER, ARN_SECTIONS_EXPECTED - 1)
    if len(sections) != ARN_SECTIONS_EXPECTED:
        raise InvalidSectionCountError(value, len(sections), context=context)
    return sections


@dataclass(frozen=True)
class Arn:
    """A parsed ARN with named access to its sections."""

    partition: str
    service: str
    region: str
    account_id: str
    resource: str

    @classmethod
    def parse(cls, value: str) -> Arn:
        sections = parse(value)
        return cls(
            partition=sections[SECTION_PARTITION],
            service=sections[SECTION_SERVICE],
            region=sections[SECTION_REGION],
            account_id=sections[SECTION_ACCOUNT_ID],
            resource=sections[SECTION_RESOURCE],
        )

    @property
    def sections(self) -> list[str]:
        """All six sections in order, starting with the literal ``arn``."""
        return [
            ARN_PREFIX[:-1],
            self.partition,
            self.service,
            self.region,
            self.account_id,
            self.resource,
        ]

    def __str__(self) -> str:
        return ARN_DELIMITER.join(self.sections)

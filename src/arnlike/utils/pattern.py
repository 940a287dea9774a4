"""Translating ArnLike wildcard sections into anchored regular expressions."""

from __future__ import annotations

__all__ = ["SPECIAL_CHARACTERS", "quote_meta", "prepare_pattern_sections"]

# Characters with a meaning to ``re`` outside of a character class. Wildcards
# are handled separately.
SPECIAL_CHARACTERS: frozenset[str] = frozenset("\\.+()|[]{}^$")

_WILDCARDS = frozenset("*?")


def quote_meta(section: str) -> str:
    """Escape regex metacharacters in a pattern section, keeping wildcards.

    ``*`` becomes ``.*`` and ``?`` becomes ``.``; every character in
    SPECIAL_CHARACTERS is backslash-escaped so it matches itself. A run of
    ``*`` collapses to a single ``.*``. There is no way to quote a wildcard.

    Args:
        section: One section of an ArnLike pattern.

    Returns:
        A regular expression (unanchored) matching the section.
    """
    if not any(c in SPECIAL_CHARACTERS or c in _WILDCARDS for c in section):
        return section

    out: list[str] = []
    previous = ""
    for c in section:
        if c == "*":
            if previous != "*":
                out.append(".*")
        elif c == "?":
            out.append(".")
        elif c in SPECIAL_CHARACTERS:
            out.append("\\" + c)
        else:
            out.append(c)
        previous = c
    return "".join(out)


def prepare_pattern_sections(sections: list[str]) -> list[str]:
    """Quote every section and anchor it so it must match a whole section.

    Returns a new list; ``sections`` is not modified.
    """
    return [r"\A" + quote_meta(section) + r"\Z" for section in sections]

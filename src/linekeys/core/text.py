"""
Quote detection and value sanitization for source lines.

These helpers only look at the characters of a single string and never
raise, so they are safe to call on any line read from an input file.
"""

from __future__ import annotations

import regex

# Opening character -> closing character
QUOTE_PAIRS: dict[str, str] = {
    '"': '"',
    "'": "'",
    "«": "»",
}

_QUOTE_CHARS_RE = regex.compile(r"['\"«»]")

# Characters removed from both ends by trim(): tab, line feed, vertical tab,
# form feed, carriage return, the Unicode space separators, the line and
# paragraph separators and the byte-order mark. The ASCII information
# separators \x1c-\x1f and NEL (\x85) are not whitespace here.
WHITESPACE_CHARS = (
    "\t\n\x0b\x0c\r \xa0\u1680"
    + "".join(chr(code) for code in range(0x2000, 0x200B))
    + "\u2028\u2029\u202f\u205f\u3000\ufeff"
)


def trim(text: str | None) -> str:
    """Remove WHITESPACE_CHARS from both ends of text; None becomes ""."""
    return (text or "").strip(WHITESPACE_CHARS)


def is_wrapped_in_quotes(text: str | None) -> bool:
    """
    Check whether a string is wrapped in a matching quote pair.

    Recognized pairs are "...", '...' and «...».

    Args:
        text: String to inspect; None is treated as empty

    Returns:
        True if the trimmed string starts and ends with a matching pair
    """
    trimmed = trim(text)
    if len(trimmed) < 2:
        return False

    first, last = trimmed[0], trimmed[-1]
    return first in QUOTE_PAIRS and QUOTE_PAIRS[first] == last


def sanitize_value(text: str | None, remove_quotes: bool) -> str:
    """
    Trim a value and optionally strip quote characters from it.

    When remove_quotes is enabled every ' " « » is removed, wherever it
    appears in the string, not only at the ends.

    Args:
        text: Raw value; None is treated as empty
        remove_quotes: Whether to strip quote characters

    Returns:
        The sanitized value, or "" when nothing is left after trimming
    """
    trimmed = trim(text)
    if not trimmed:
        return ""
    if not remove_quotes:
        return trimmed
    return _QUOTE_CHARS_RE.sub("", trimmed)

"""
Key derivation for dictionary entries.

Keys are either slugified from a cleaned value (auto mode) or normalized from
a key the user wrote explicitly as "key: value" / "key = value" (parsed mode).
Both paths are Unicode aware: letters and digits of any script survive, while
punctuation and symbols are dropped or replaced.
"""

from __future__ import annotations

import unicodedata
from typing import NamedTuple

import regex

from .text import WHITESPACE_CHARS, trim

FALLBACK_KEY = "key"
KEY_VALUE_SEPARATORS = (":", "=")

_WHITESPACE_CLASS = regex.escape(WHITESPACE_CHARS)

_NON_WORD_RUN_RE = regex.compile(rf"[^\p{{L}}\p{{N}}{_WHITESPACE_CLASS}]+")
_PROVIDED_KEY_INVALID_RE = regex.compile(r"[^\p{L}\p{N}_.]+")
_WHITESPACE_RUN_RE = regex.compile(rf"[{_WHITESPACE_CLASS}]+")
_UNDERSCORE_RUN_RE = regex.compile(r"_+")


class KeyValuePair(NamedTuple):
    """Raw key and value split out of a "key: value" line."""

    key: str
    value: str


def _normalize(text: str) -> str:
    return unicodedata.normalize("NFKD", text).lower()


def slugify_key_from_value(clean_value: str | None) -> str:
    """
    Generate a key from an already sanitized value.

    The value is NFKD-normalized and lowercased, every run of characters
    that is not a letter, digit or whitespace becomes a single space, and
    whitespace is then joined with underscores.

    Args:
        clean_value: Sanitized value to derive the key from

    Returns:
        The slug, or FALLBACK_KEY when nothing usable is left

    Example:
        >>> slugify_key_from_value("Order completed!")
        'order_completed'
    """
    normalized = _normalize(clean_value or "")
    cleaned = _NON_WORD_RUN_RE.sub(" ", normalized)

    slug = _WHITESPACE_RUN_RE.sub("_", trim(cleaned))
    slug = _UNDERSCORE_RUN_RE.sub("_", slug).strip("_")

    return slug or FALLBACK_KEY


def normalize_provided_key(raw_key: str | None) -> str:
    """
    Normalize a key that the user provided explicitly.

    Dots are kept inside the key so dotted namespaces such as
    "user.profile.title" survive; they are only stripped from the ends.

    Args:
        raw_key: Key text as written on the left side of the separator

    Returns:
        The normalized key, or "" if nothing usable is left
    """
    key = _normalize(trim(raw_key))
    if not key:
        return ""

    key = _WHITESPACE_RUN_RE.sub("_", key)
    key = _PROVIDED_KEY_INVALID_RE.sub("_", key)
    key = _UNDERSCORE_RUN_RE.sub("_", key)

    return key.strip(".").strip("_")


def try_parse_key_value(line: str | None) -> KeyValuePair | None:
    """
    Split a "key: value" or "key = value" line.

    The line is split at the first separator found, whichever of ':' and
    '=' comes first. Key format is not validated here.

    Args:
        line: Line to split

    Returns:
        The trimmed key and value, or None if there is no separator or
        either side is empty
    """
    trimmed = trim(line)
    if not trimmed:
        return None

    positions = [
        index
        for index in (trimmed.find(separator) for separator in KEY_VALUE_SEPARATORS)
        if index != -1
    ]
    if not positions:
        return None

    split_at = min(positions)
    left = trim(trimmed[:split_at])
    right = trim(trimmed[split_at + 1 :])

    if not left or not right:
        return None

    return KeyValuePair(key=left, value=right)

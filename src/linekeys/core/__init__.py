"""
Line conversion core for linekeys.

This package turns single source lines into key/value entries and keeps
track of the keys issued during a run.
"""

from .converter import Entry, EntryMode, convert_line_to_entry
from .keys import (
    FALLBACK_KEY,
    KeyValuePair,
    normalize_provided_key,
    slugify_key_from_value,
    try_parse_key_value,
)
from .registry import KeyRegistry
from .text import QUOTE_PAIRS, WHITESPACE_CHARS, is_wrapped_in_quotes, sanitize_value, trim

__all__ = [
    "Entry",
    "EntryMode",
    "convert_line_to_entry",
    "FALLBACK_KEY",
    "KeyValuePair",
    "normalize_provided_key",
    "slugify_key_from_value",
    "try_parse_key_value",
    "KeyRegistry",
    "QUOTE_PAIRS",
    "is_wrapped_in_quotes",
    "sanitize_value",
    "trim",
    "WHITESPACE_CHARS",
]

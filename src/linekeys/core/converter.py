"""
Line to dictionary entry conversion.

This is the decision logic of linekeys. A line that is not wrapped in quotes
is first tried as "key: value" / "key = value"; if that fails, or if the key
or value turns out empty after cleanup, the whole line becomes the value and
its key is slugified from it. Nothing here raises: a line that cannot
produce an entry simply yields None.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from ..config.schema import ConversionOptions
from .keys import normalize_provided_key, slugify_key_from_value, try_parse_key_value
from .registry import KeyRegistry
from .text import is_wrapped_in_quotes, sanitize_value, trim


class EntryMode(str, Enum):
    """How the key of an entry was obtained."""

    PARSED = "parsed"
    AUTO = "auto"


@dataclass(frozen=True)
class Entry:
    """A single key/value pair ready to be written to a translation file."""

    key: str
    value: str
    mode: EntryMode

    def as_dict(self) -> dict[str, str]:
        """Return the entry as a plain dictionary."""
        return {"key": self.key, "value": self.value, "mode": self.mode.value}


_DEFAULT_OPTIONS = ConversionOptions()


def convert_line_to_entry(
    line: str | None,
    options: ConversionOptions | None,
    registry: KeyRegistry,
) -> Entry | None:
    """
    Convert one source line into a dictionary entry.

    The registry is updated only when an entry is returned.

    Args:
        line: Raw line; None is treated as empty
        options: Conversion options, or None for the defaults
        registry: Keys already issued in this run

    Returns:
        The entry, or None when the line yields nothing (empty line or a
        value that is empty after sanitizing)
    """
    remove_quotes = (options or _DEFAULT_OPTIONS).remove_quotes
    raw = trim(line)
    if not raw:
        return None

    if not is_wrapped_in_quotes(raw):
        parsed = try_parse_key_value(raw)
        if parsed is not None:
            provided_key = normalize_provided_key(parsed.key)
            cleaned_value = sanitize_value(parsed.value, remove_quotes)

            if provided_key and cleaned_value:
                return Entry(
                    key=registry.ensure_unique(provided_key),
                    value=cleaned_value,
                    mode=EntryMode.PARSED,
                )
            # Empty key or value after cleanup: fall through to auto mode

    cleaned_whole_value = sanitize_value(raw, remove_quotes)
    if not cleaned_whole_value:
        return None

    base_key = slugify_key_from_value(cleaned_whole_value)
    return Entry(
        key=registry.ensure_unique(base_key),
        value=cleaned_whole_value,
        mode=EntryMode.AUTO,
    )

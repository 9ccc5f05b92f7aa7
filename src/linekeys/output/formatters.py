"""
Serializers for converted entries.

The "lines" format writes one '"key": "value",' per line, verbatim, with a
comma after every entry including the last. The result is a fragment meant to be pasted
into a dictionary literal, not a valid JSON document on its own. Use the
"json" format when a complete document is needed.
"""

from __future__ import annotations

import json
from collections.abc import Iterable

from ..core.converter import Entry

OUTPUT_FORMATS = ("lines", "json")


def format_entry_line(entry: Entry) -> str:
    """Format an entry as '"key": "value",' followed by a newline."""
    return f'"{entry.key}": "{entry.value}",\n'


def format_entries_json(entries: Iterable[Entry]) -> str:
    """
    Format entries as a JSON object mapping keys to values.

    Args:
        entries: Entries in output order; keys are expected to be unique

    Returns:
        Pretty-printed JSON text with a trailing newline
    """
    mapping = {entry.key: entry.value for entry in entries}
    return json.dumps(mapping, ensure_ascii=False, indent=2) + "\n"


def validate_output_format(output_format: str) -> None:
    """Raise ValueError if output_format is not one of OUTPUT_FORMATS."""
    if output_format not in OUTPUT_FORMATS:
        raise ValueError(
            f"Unknown output format '{output_format}', expected one of: {', '.join(OUTPUT_FORMATS)}"
        )


def format_entries(entries: Iterable[Entry], output_format: str = "lines") -> str:
    """
    Serialize entries in one of OUTPUT_FORMATS.

    Raises:
        ValueError: If output_format is not supported
    """
    validate_output_format(output_format)
    if output_format == "json":
        return format_entries_json(entries)
    return "".join(format_entry_line(entry) for entry in entries)

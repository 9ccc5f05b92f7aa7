"""
linekeys - Generate translation dictionary entries from plain-text string lists.
"""

from .config.schema import ConversionOptions
from .core import Entry, EntryMode, KeyRegistry, convert_line_to_entry

__all__ = [
    "ConversionOptions",
    "Entry",
    "EntryMode",
    "KeyRegistry",
    "convert_line_to_entry",
]

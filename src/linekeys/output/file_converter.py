"""
File-level conversion of source lines into dictionary entries.

This module wires the conversion core to the filesystem: it reads a text
file line by line, converts every line in order against one registry, and
writes the entries in the requested output format. Output is written to a
temporary file next to the target and moved into place once complete.
"""

from __future__ import annotations

import codecs
import io
import logging
import tempfile
from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import override

from ..config.schema import ConversionOptions
from ..core.converter import Entry, EntryMode, convert_line_to_entry
from ..core.registry import KeyRegistry
from ..utils.exceptions import InputFileError, OutputFileError
from .formatters import (
    format_entries,
    format_entries_json,
    format_entry_line,
    validate_output_format,
)

logger = logging.getLogger(__name__)


class ConversionResult:
    """Result of converting a sequence of lines."""

    def __init__(self) -> None:
        self.entries: list[Entry] = []
        self.skipped_lines: list[int] = []
        self.total_lines: int = 0
        self.parsed_count: int = 0
        self.auto_count: int = 0

    def record(self, line_number: int, entry: Entry | None) -> None:
        """
        Record the outcome of one line.

        Args:
            line_number: 1-based line number in the input
            entry: Entry produced for the line, or None if it was skipped
        """
        self.total_lines += 1
        if entry is None:
            self.skipped_lines.append(line_number)
            return

        self.entries.append(entry)
        if entry.mode is EntryMode.PARSED:
            self.parsed_count += 1
        else:
            self.auto_count += 1

    @property
    def entry_count(self) -> int:
        """Number of entries produced."""
        return len(self.entries)

    @property
    def skip_count(self) -> int:
        """Number of lines that produced no entry."""
        return len(self.skipped_lines)

    @override
    def __str__(self) -> str:
        return (
            f"Conversion Results: "
            f"{self.entry_count} entries "
            f"({self.parsed_count} parsed, {self.auto_count} auto), "
            f"{self.skip_count} skipped of {self.total_lines} lines"
        )


def iter_entries(
    lines: Iterable[str | None],
    options: ConversionOptions | None = None,
    registry: KeyRegistry | None = None,
) -> Iterator[Entry]:
    """
    Convert lines in order and yield the entries they produce.

    Args:
        lines: Source lines
        options: Conversion options, or None for the defaults
        registry: Registry to deduplicate against; a fresh one if omitted

    Yields:
        Entries for lines that produce one, in input order
    """
    registry = registry if registry is not None else KeyRegistry()
    for line in lines:
        entry = convert_line_to_entry(line, options, registry)
        if entry is not None:
            yield entry


def _convert_tracked(
    lines: Iterable[str | None],
    options: ConversionOptions | None,
    result: ConversionResult,
) -> Iterator[Entry]:
    registry = KeyRegistry()
    for line_number, line in enumerate(lines, start=1):
        entry = convert_line_to_entry(line, options, registry)
        result.record(line_number, entry)
        if entry is None:
            logger.debug(f"Skipping line {line_number}: no entry produced")
            continue
        yield entry


def convert_lines(
    lines: Iterable[str | None],
    options: ConversionOptions | None = None,
) -> ConversionResult:
    """
    Convert lines in order and collect the entries with per-line bookkeeping.

    Args:
        lines: Source lines
        options: Conversion options, or None for the defaults

    Returns:
        ConversionResult holding the entries and the skipped line numbers
    """
    result = ConversionResult()
    for _ in _convert_tracked(lines, options, result):
        pass
    return result


def _read_encoding(encoding: str) -> str:
    # A UTF-8 byte-order mark is dropped rather than read into the first line
    if codecs.lookup(encoding).name == "utf-8":
        return "utf-8-sig"
    return encoding


def _iter_file_lines(input_path: Path, encoding: str) -> Iterator[str]:
    try:
        with input_path.open("r", encoding=_read_encoding(encoding)) as f:
            for line in f:
                yield line.rstrip("\r\n")
    except UnicodeDecodeError as e:
        raise InputFileError(
            f"Failed to decode {input_path} as {encoding}: {e}",
            user_message=f"Input file is not valid {encoding} text: {input_path}",
            context=input_path,
        ) from e
    except OSError as e:
        raise InputFileError(
            f"Failed to read input file {input_path}: {e}",
            context=input_path,
        ) from e


def read_lines(input_path: Path, encoding: str = "utf-8") -> Iterator[str]:
    """
    Read a text file one line at a time, without line terminators.

    The path is checked immediately; the file itself is read lazily.

    Args:
        input_path: File to read
        encoding: Text encoding of the file

    Returns:
        Iterator over the lines of the file

    Raises:
        InputFileError: If the file is missing or is not a regular file.
            Read and decode failures raise it during iteration.
    """
    if not input_path.exists():
        raise InputFileError(
            f"Input file not found: {input_path}",
            user_message=f"Input file does not exist: {input_path}",
            context=input_path,
        )
    if not input_path.is_file():
        raise InputFileError(
            f"Input path is not a file: {input_path}",
            context=input_path,
        )

    return _iter_file_lines(input_path, encoding)


def _write_atomically(output_path: Path, chunks: Iterable[str], encoding: str) -> None:
    temp_path: Path | None = None
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with tempfile.NamedTemporaryFile(
            mode="w",
            encoding=encoding,
            newline="",
            dir=output_path.parent,
            prefix=f".{output_path.name}.",
            suffix=".tmp",
            delete=False,
        ) as temp_file:
            temp_path = Path(temp_file.name)
            for chunk in chunks:
                _ = temp_file.write(chunk)
            temp_file.flush()

        _ = temp_path.replace(output_path)
        temp_path = None

    except (OSError, UnicodeEncodeError) as e:
        raise OutputFileError(
            f"Failed to write output file {output_path}: {e}",
            user_message=f"Could not write output file: {output_path}",
            context=output_path,
        ) from e
    finally:
        if temp_path is not None:
            temp_path.unlink(missing_ok=True)


def convert_file(
    input_path: Path,
    output_path: Path,
    options: ConversionOptions | None = None,
    encoding: str = "utf-8",
    output_format: str = "lines",
    dry_run: bool = False,
) -> ConversionResult:
    """
    Convert a text file of source lines into a file of entries.

    Args:
        input_path: Plain-text file, one source string per line
        output_path: Destination file; parent directories are created
        options: Conversion options, or None for the defaults
        encoding: Text encoding for both files
        output_format: "lines" or "json"
        dry_run: Convert and report without writing the output file

    Returns:
        ConversionResult describing what was produced and skipped

    Raises:
        InputFileError: If the input cannot be read
        OutputFileError: If the output cannot be written
        ValueError: If output_format is not supported
    """
    validate_output_format(output_format)

    result = ConversionResult()
    entries = _convert_tracked(read_lines(input_path, encoding), options, result)

    logger.info(f"Converting {input_path} -> {output_path} ({output_format})")

    if dry_run:
        for _ in entries:
            pass
        logger.info(f"DRY RUN: Would write {result.entry_count} entries to {output_path}")
    elif output_format == "json":
        materialized = list(entries)
        _write_atomically(output_path, [format_entries_json(materialized)], encoding)
    else:
        _write_atomically(output_path, (format_entry_line(e) for e in entries), encoding)

    logger.info(str(result))
    return result


def convert_text(
    text: str,
    options: ConversionOptions | None = None,
    output_format: str = "lines",
) -> str:
    """
    Convert in-memory text and return the serialized entries.

    Lines are split on "\n", "\r\n" and "\r" only, as read_lines does.

    Args:
        text: Source text, one string per line
        options: Conversion options, or None for the defaults
        output_format: "lines" or "json"

    Returns:
        Serialized entries in the requested format
    """
    lines = (line.rstrip("\n") for line in io.StringIO(text, newline=None))
    return format_entries(iter_entries(lines, options), output_format)

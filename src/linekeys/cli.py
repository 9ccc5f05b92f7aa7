#!/usr/bin/env python3
"""
Command-line interface for converting string lists into translation entries.

Every line of the input file becomes one '"key": "value",' entry. Lines
written as "key: value" or "key = value" keep their key; other lines get a
key generated from their text. Duplicate keys get a _2, _3, ... suffix.

Usage Examples:
    Convert translates.txt into new_translates.txt:
        linekeys

    Convert specific files:
        linekeys strings.txt locale/en.txt

    Keep quote characters in values:
        linekeys strings.txt --keep-quotes

    Write a JSON object instead of entry lines:
        linekeys strings.txt en.json --format json

    Create a sample configuration file:
        linekeys --init-config linekeys.yaml
"""

from __future__ import annotations

import argparse
import logging
import logging.handlers
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import NamedTuple

import yaml
from pydantic import ValidationError

from .config.manager import ConfigManager
from .config.schema import ConversionOptions, IOConfig, LineKeysConfig, LoggingConfig
from .output.file_converter import convert_file, convert_lines, read_lines
from .output.formatters import OUTPUT_FORMATS, format_entries
from .utils.exceptions import ConfigurationError, LineKeysError

logger = logging.getLogger(__name__)

CONSOLE_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"
DETAILED_FORMAT = (
    "%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s"
)
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class CliArgs(NamedTuple):
    """Type-safe container for command-line arguments."""

    input: Path | None
    output: Path | None
    config: Path | None
    keep_quotes: bool
    output_format: str | None
    encoding: str | None
    stdout: bool
    dry_run: bool
    verbose: bool
    log_file: Path | None
    init_config: Path | None


def setup_logging(
    verbose: bool = False, level: str = "INFO", log_file: Path | None = None
) -> None:
    """
    Set up logging configuration.

    Console output goes to stderr so that --stdout output stays clean.

    Args:
        verbose: Enable debug logging on the console
        level: Console log level when not verbose
        log_file: Optional file that receives all records at DEBUG level
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(logging.DEBUG if verbose else getattr(logging, level))
    console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT, datefmt=DATE_FORMAT))
    root_logger.addHandler(console_handler)

    if log_file is not None:
        _ = log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=5 * 1024 * 1024,  # 5MB
            backupCount=3,
            encoding="utf-8",
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(DETAILED_FORMAT))
        root_logger.addHandler(file_handler)


def build_parser() -> argparse.ArgumentParser:
    """
    Build the argument parser for the CLI.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        prog="linekeys",
        description="Convert a plain-text list of strings into translation dictionary entries",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s                                  # translates.txt -> new_translates.txt
  %(prog)s strings.txt en.txt               # Custom input and output files
  %(prog)s strings.txt --keep-quotes        # Keep ' " « » in values
  %(prog)s strings.txt en.json --format json
  %(prog)s strings.txt --stdout             # Print entries instead of writing
  %(prog)s --init-config linekeys.yaml      # Write a sample config file
        """,
    )

    _ = parser.add_argument(
        "input",
        nargs="?",
        type=Path,
        help="Input file with one string per line (default: translates.txt)",
    )
    _ = parser.add_argument(
        "output",
        nargs="?",
        type=Path,
        help="Output file for the generated entries (default: new_translates.txt)",
    )
    _ = parser.add_argument(
        "--config",
        type=Path,
        help="YAML configuration file",
    )
    _ = parser.add_argument(
        "--keep-quotes",
        action="store_true",
        help="Do not strip quote characters from values",
    )
    _ = parser.add_argument(
        "--format",
        dest="output_format",
        choices=OUTPUT_FORMATS,
        help="Output format (default: lines)",
    )
    _ = parser.add_argument(
        "--encoding",
        help="Text encoding of input and output files (default: utf-8)",
    )
    destination = parser.add_mutually_exclusive_group()
    _ = destination.add_argument(
        "--stdout",
        action="store_true",
        help="Print the entries to stdout instead of writing the output file",
    )
    _ = destination.add_argument(
        "--dry-run",
        action="store_true",
        help="Convert and report without writing the output file",
    )
    _ = parser.add_argument(
        "--verbose", action="store_true", help="Enable verbose logging"
    )
    _ = parser.add_argument(
        "--log-file",
        type=Path,
        help="Also write logs to this file",
    )
    _ = parser.add_argument(
        "--init-config",
        type=Path,
        metavar="PATH",
        help="Write a sample configuration file to PATH and exit",
    )

    return parser


def parse_arguments(argv: Sequence[str] | None = None) -> CliArgs:
    """
    Parse command-line arguments.

    Args:
        argv: Arguments to parse; uses sys.argv if None

    Returns:
        Parsed arguments in a type-safe container
    """
    args = build_parser().parse_args(argv)

    # Convert to type-safe container - argparse returns Any types
    return CliArgs(
        input=args.input,  # pyright: ignore[reportAny]
        output=args.output,  # pyright: ignore[reportAny]
        config=args.config,  # pyright: ignore[reportAny]
        keep_quotes=args.keep_quotes,  # pyright: ignore[reportAny]
        output_format=args.output_format,  # pyright: ignore[reportAny]
        encoding=args.encoding,  # pyright: ignore[reportAny]
        stdout=args.stdout,  # pyright: ignore[reportAny]
        dry_run=args.dry_run,  # pyright: ignore[reportAny]
        verbose=args.verbose,  # pyright: ignore[reportAny]
        log_file=args.log_file,  # pyright: ignore[reportAny]
        init_config=args.init_config,  # pyright: ignore[reportAny]
    )


def build_config(args: CliArgs) -> LineKeysConfig:
    """
    Combine defaults, the optional config file and command-line flags.

    Command-line flags take precedence over the config file, which takes
    precedence over the built-in defaults.

    Args:
        args: Parsed command-line arguments

    Returns:
        The effective configuration

    Raises:
        ConfigurationError: If the config file cannot be loaded or the
            combined settings are invalid
    """
    if args.config is not None:
        try:
            config = ConfigManager.load_config(args.config)
        except FileNotFoundError as e:
            raise ConfigurationError(str(e), context=args.config) from e
        except (yaml.YAMLError, ValueError) as e:
            raise ConfigurationError(
                f"Invalid configuration in {args.config}: {e}",
                user_message=f"Configuration file {args.config} is invalid: {e}",
                context=args.config,
            ) from e
    else:
        config = ConfigManager.get_default_config()

    io_overrides: dict[str, object] = {}
    if args.input is not None:
        io_overrides["input_file"] = args.input
    if args.output is not None:
        io_overrides["output_file"] = args.output
    if args.encoding is not None:
        io_overrides["encoding"] = args.encoding
    if args.output_format is not None:
        io_overrides["output_format"] = args.output_format

    try:
        return LineKeysConfig(
            conversion=ConversionOptions(
                remove_quotes=config.conversion.remove_quotes and not args.keep_quotes
            ),
            io=IOConfig(**{**config.io.model_dump(), **io_overrides}),  # pyright: ignore[reportArgumentType]
            logging=LoggingConfig(
                level=config.logging.level,
                file=args.log_file if args.log_file is not None else config.logging.file,
            ),
        )
    except ValidationError as e:
        raise ConfigurationError(
            f"Invalid settings: {e}",
            user_message=f"Invalid command-line settings: {e}",
        ) from e


def init_config(path: Path) -> int:
    """
    Write a sample configuration file.

    Args:
        path: Where to create the file

    Returns:
        Exit code (0 for success, 1 if the file already exists)
    """
    if path.exists():
        logger.error(f"Refusing to overwrite existing file: {path}")
        return 1

    ConfigManager.create_sample_config(path)
    logger.info(f"Sample configuration written to {path}")
    return 0


def run(config: LineKeysConfig, to_stdout: bool = False, dry_run: bool = False) -> int:
    """
    Run one conversion with the given configuration.

    Args:
        config: Effective configuration
        to_stdout: Print entries instead of writing the output file
        dry_run: Convert without writing anything

    Returns:
        Exit code (0 for success)

    Raises:
        ValueError: If both to_stdout and dry_run are set
        LineKeysError: If the input or output file cannot be used
    """
    if to_stdout and dry_run:
        raise ValueError("to_stdout and dry_run cannot be combined")

    io = config.io

    if to_stdout:
        result = convert_lines(read_lines(io.input_file, io.encoding), config.conversion)
        _ = sys.stdout.write(format_entries(result.entries, io.output_format))
        logger.info(str(result))
    else:
        result = convert_file(
            io.input_file,
            io.output_file,
            options=config.conversion,
            encoding=io.encoding,
            output_format=io.output_format,
            dry_run=dry_run,
        )

    if result.skip_count:
        logger.debug(f"Skipped lines: {', '.join(map(str, result.skipped_lines))}")
    if not (to_stdout or dry_run):
        logger.info(f"Wrote {result.entry_count} entries to {io.output_file}")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """
    Main entry point for the conversion CLI.

    Args:
        argv: Command-line arguments; uses sys.argv if None

    Returns:
        Exit code (0 for success, 1 for error, 130 if interrupted)
    """
    args = parse_arguments(argv)

    if args.init_config is not None:
        setup_logging(args.verbose)
        return init_config(args.init_config)

    try:
        config = build_config(args)
    except ConfigurationError as e:
        setup_logging(args.verbose)
        logger.error(e.describe())
        return 1

    setup_logging(args.verbose, config.logging.level, config.logging.file)

    try:
        return run(config, to_stdout=args.stdout, dry_run=args.dry_run)
    except LineKeysError as e:
        logger.error(e.describe())
        logger.debug("Conversion failed", exc_info=True)
        return 1
    except KeyboardInterrupt:
        logger.warning("Conversion interrupted by user")
        return 130


if __name__ == "__main__":
    sys.exit(main())

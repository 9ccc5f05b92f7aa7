"""
Global test configuration fixtures for linekeys tests.

Provides fresh registries, conversion options and helpers for writing
input files, plus cleanup of logging handlers installed by the CLI.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Generator
from pathlib import Path

import pytest

from linekeys.config.schema import ConversionOptions, LineKeysConfig
from linekeys.core.registry import KeyRegistry


@pytest.fixture
def registry() -> KeyRegistry:
    """Create an empty key registry for one conversion run."""
    return KeyRegistry()


@pytest.fixture
def default_options() -> ConversionOptions:
    """Create conversion options with quote removal enabled."""
    return ConversionOptions()


@pytest.fixture
def keep_quotes_options() -> ConversionOptions:
    """Create conversion options with quote removal disabled."""
    return ConversionOptions(remove_quotes=False)


@pytest.fixture
def default_config() -> LineKeysConfig:
    """Create a configuration with all default values."""
    return LineKeysConfig()


@pytest.fixture
def write_input(tmp_path: Path) -> Callable[..., Path]:
    """
    Return a helper that writes lines to an input file under tmp_path.

    The helper joins the given lines with newlines and returns the path.
    """

    def _write(lines: list[str], name: str = "translates.txt", encoding: str = "utf-8") -> Path:
        path = tmp_path / name
        _ = path.write_text("\n".join(lines) + "\n", encoding=encoding)
        return path

    return _write


@pytest.fixture(autouse=True)
def restore_root_logging() -> Generator[None, None, None]:
    """Restore root logger handlers and level changed by setup_logging."""
    root_logger = logging.getLogger()
    saved_handlers = root_logger.handlers[:]
    saved_level = root_logger.level
    yield
    for handler in root_logger.handlers:
        if handler not in saved_handlers:
            handler.close()
    root_logger.handlers[:] = saved_handlers
    root_logger.setLevel(saved_level)

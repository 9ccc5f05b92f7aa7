"""Tests for the linekeys exception hierarchy."""

from __future__ import annotations

from pathlib import Path

import pytest

from linekeys.utils.exceptions import (
    ConfigurationError,
    ErrorCategory,
    InputFileError,
    LineKeysError,
    OutputFileError,
)


class TestLineKeysError:
    """Test cases for the base exception."""

    def test_defaults(self) -> None:
        """Test that the user message falls back to the technical message."""
        error = LineKeysError("something broke")

        assert str(error) == "something broke"
        assert error.category == ErrorCategory.UNKNOWN
        assert error.user_message == "something broke"
        assert error.context is None

    def test_describe(self) -> None:
        """Test that describe prefixes the user message with the category."""
        error = LineKeysError("internal detail", user_message="Please retry")

        assert error.describe() == "Unknown error: Please retry"


class TestSubclasses:
    """Test cases for the concrete exception types."""

    @pytest.mark.parametrize(
        ("error_type", "category", "prefix"),
        [
            (ConfigurationError, ErrorCategory.CONFIGURATION, "Configuration error: "),
            (InputFileError, ErrorCategory.RESOURCE, "Resource error: "),
            (OutputFileError, ErrorCategory.RESOURCE, "Resource error: "),
        ],
    )
    def test_category(
        self, error_type: type[LineKeysError], category: ErrorCategory, prefix: str
    ) -> None:
        """Test the category each exception type carries."""
        error = error_type("detail", user_message="Shown to the user", context=Path("x.txt"))

        assert isinstance(error, LineKeysError)
        assert error.category == category
        assert error.context == Path("x.txt")
        assert error.describe() == f"{prefix}Shown to the user"

"""
Exception classes for linekeys.

The conversion core never raises; these exceptions cover the file handling,
configuration and command-line layers around it.
"""

from __future__ import annotations

from enum import Enum


class ErrorCategory(Enum):
    """Categories of errors, used to label failures reported to the user."""

    CONFIGURATION = "configuration"
    RESOURCE = "resource"
    UNKNOWN = "unknown"


class LineKeysError(Exception):
    """Base exception class for linekeys specific errors."""

    def __init__(
        self,
        message: str,
        category: ErrorCategory = ErrorCategory.UNKNOWN,
        user_message: str | None = None,
        context: object | None = None,
    ) -> None:
        super().__init__(message)
        self.category: ErrorCategory = category
        self.user_message: str = user_message or message
        self.context: object | None = context

    def describe(self) -> str:
        """Return the user message prefixed with the error category."""
        return f"{self.category.value.capitalize()} error: {self.user_message}"


class ConfigurationError(LineKeysError):
    """Configuration file could not be read or failed validation."""

    def __init__(
        self,
        message: str,
        user_message: str | None = None,
        context: object | None = None,
    ) -> None:
        super().__init__(
            message,
            category=ErrorCategory.CONFIGURATION,
            user_message=user_message,
            context=context,
        )


class InputFileError(LineKeysError):
    """Input file is missing, not a regular file, or cannot be decoded."""

    def __init__(
        self,
        message: str,
        user_message: str | None = None,
        context: object | None = None,
    ) -> None:
        super().__init__(
            message,
            category=ErrorCategory.RESOURCE,
            user_message=user_message,
            context=context,
        )


class OutputFileError(LineKeysError):
    """Output file cannot be created or written."""

    def __init__(
        self,
        message: str,
        user_message: str | None = None,
        context: object | None = None,
    ) -> None:
        super().__init__(
            message,
            category=ErrorCategory.RESOURCE,
            user_message=user_message,
            context=context,
        )

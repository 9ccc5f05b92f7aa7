"""Configuration schema for linekeys using nested Pydantic models."""

import codecs
from pathlib import Path
from typing import ClassVar, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
OutputFormat = Literal["lines", "json"]


class ConversionOptions(BaseModel):
    """Options that control how a single line is converted."""

    remove_quotes: bool = Field(
        default=True,
        description="Strip ' \" « » characters from values",
    )

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="forbid")


class IOConfig(BaseModel):
    """Input and output file configuration."""

    input_file: Path = Field(
        default=Path("translates.txt"),
        description="Plain-text file with one source string per line",
    )
    output_file: Path = Field(
        default=Path("new_translates.txt"),
        description="File the generated entries are written to",
    )
    encoding: str = Field(
        default="utf-8",
        description="Text encoding used for both input and output files",
        min_length=1,
    )
    output_format: OutputFormat = Field(
        default="lines",
        description="lines: one '\"key\": \"value\",' per line; json: a JSON object",
    )

    model_config: ClassVar[ConfigDict] = ConfigDict(str_strip_whitespace=True)

    @field_validator("encoding")
    @classmethod
    def validate_encoding(cls, v: str) -> str:
        """Validate that the encoding is known to Python's codec registry."""
        try:
            _ = codecs.lookup(v)
        except LookupError as e:
            raise ValueError(f"Unknown text encoding: {v}") from e
        return v


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: LogLevel = Field(
        default="INFO",
        description="Console log level when --verbose is not given",
    )
    file: Path | None = Field(
        default=None,
        description="Optional log file (rotated at 5MB)",
    )

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v: object) -> object:
        """Accept log level names in any case."""
        if isinstance(v, str):
            return v.strip().upper()
        return v


class LineKeysConfig(BaseModel):
    """
    Configuration model for linekeys with nested structure.

    Every section has defaults, so an empty configuration file is valid.
    """

    conversion: ConversionOptions = Field(default_factory=ConversionOptions)
    io: IOConfig = Field(default_factory=IOConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config: ClassVar[ConfigDict] = ConfigDict(
        validate_assignment=True,
        extra="forbid",
        frozen=False,
    )

"""Configuration manager for linekeys.

This module provides functionality for loading and saving
YAML configuration files with Pydantic model validation.
"""

import logging
import tempfile
from pathlib import Path

import yaml

from .schema import LineKeysConfig


logger = logging.getLogger(__name__)


class ConfigManager:
    """
    Configuration manager for handling YAML config files with Pydantic validation.

    All methods are static; a run loads its configuration once at startup.
    """

    @staticmethod
    def load_config(config_path: Path) -> LineKeysConfig:
        """
        Load and validate configuration from a YAML file.

        Args:
            config_path: Path to the YAML configuration file

        Returns:
            LineKeysConfig: Validated configuration object

        Raises:
            FileNotFoundError: If the config file doesn't exist
            yaml.YAMLError: If the YAML syntax is invalid
            ValueError: If the document is not a YAML mapping
            ValidationError: If the configuration fails Pydantic validation
        """
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        try:
            with config_path.open("r", encoding="utf-8") as f:
                raw_config_data: object = yaml.safe_load(f)  # pyright: ignore[reportAny]
        except yaml.YAMLError as e:
            raise yaml.YAMLError(f"Invalid YAML syntax in {config_path}: {e}") from e

        if raw_config_data is None:
            config_data: dict[str, object] = {}
        elif isinstance(raw_config_data, dict):
            config_data = raw_config_data  # pyright: ignore[reportUnknownVariableType]
        else:
            raise ValueError(
                f"Configuration file must contain a YAML dictionary, got {type(raw_config_data).__name__}"
            )

        logger.debug(f"Loaded configuration sections from {config_path}: {sorted(config_data)}")
        return LineKeysConfig(**config_data)  # pyright: ignore[reportArgumentType]

    @staticmethod
    def save_config(config: LineKeysConfig, config_path: Path) -> None:
        """
        Save configuration to a YAML file with atomic operation.

        Args:
            config: Configuration object to save
            config_path: Path where to save the configuration

        Raises:
            OSError: If file operations fail
        """
        content_to_write = yaml.dump(
            config.model_dump(mode="json"),
            default_flow_style=False,
            sort_keys=False,
            allow_unicode=True,
            indent=2,
        )

        temp_file = None
        try:
            with tempfile.NamedTemporaryFile(
                mode="w",
                encoding="utf-8",
                dir=config_path.parent,
                prefix=f".{config_path.name}.",
                suffix=".tmp",
                delete=False,
            ) as temp_file:
                _ = temp_file.write(content_to_write)
                temp_file.flush()
                temp_path = Path(temp_file.name)

            # Atomic move
            _ = temp_path.replace(config_path)

        except Exception as e:
            if temp_file and Path(temp_file.name).exists():
                Path(temp_file.name).unlink(missing_ok=True)
            raise OSError(f"Failed to save configuration to {config_path}: {e}") from e

    @staticmethod
    def get_default_config() -> LineKeysConfig:
        """
        Get a configuration object with default values.

        Returns:
            LineKeysConfig: Configuration with default values
        """
        return LineKeysConfig()

    @staticmethod
    def create_sample_config(sample_path: Path) -> None:
        """
        Create a sample configuration file with all options and documentation.

        Args:
            sample_path: Path where to create the sample configuration file
        """
        sample_content = ConfigManager._generate_sample_content()

        _ = sample_path.parent.mkdir(parents=True, exist_ok=True)
        _ = sample_path.write_text(sample_content, encoding="utf-8")

    @staticmethod
    def _generate_sample_content() -> str:
        """
        Generate sample configuration file content with documentation.

        Returns:
            str: Sample configuration file content
        """
        return """# linekeys Configuration File
# All settings are optional; the values below are the defaults.
# Command-line flags override anything set here.

conversion:
  # Strip ' " « » characters from values
  remove_quotes: true

io:
  # Plain-text file with one source string per line
  input_file: translates.txt
  # File the generated entries are written to
  output_file: new_translates.txt
  # Text encoding for both files
  encoding: utf-8
  # lines: one '"key": "value",' per line (trailing comma on every entry)
  # json:  a complete JSON object
  output_format: lines

logging:
  # DEBUG, INFO, WARNING, ERROR or CRITICAL
  level: INFO
  # Optional log file, rotated at 5MB
  file: null
"""

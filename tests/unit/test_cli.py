"""Unit tests for the command-line interface."""

from __future__ import annotations

import json
import logging
import logging.handlers
from collections.abc import Callable
from pathlib import Path

import pytest

from linekeys.cli import build_config, main, parse_arguments, run, setup_logging
from linekeys.config.schema import LineKeysConfig
from linekeys.utils.exceptions import ConfigurationError


class TestParseArguments:
    """Test command-line argument parsing."""

    def test_defaults(self) -> None:
        """Test that nothing is set when no arguments are given."""
        args = parse_arguments([])

        assert args.input is None
        assert args.output is None
        assert args.config is None
        assert args.keep_quotes is False
        assert args.output_format is None
        assert args.encoding is None
        assert args.stdout is False
        assert args.dry_run is False
        assert args.verbose is False
        assert args.log_file is None
        assert args.init_config is None

    def test_all_arguments(self) -> None:
        """Test parsing every option."""
        args = parse_arguments(
            [
                "in.txt",
                "out.txt",
                "--config",
                "c.yaml",
                "--keep-quotes",
                "--format",
                "json",
                "--encoding",
                "utf-16",
                "--stdout",
                "--verbose",
                "--log-file",
                "run.log",
            ]
        )

        assert args.input == Path("in.txt")
        assert args.output == Path("out.txt")
        assert args.config == Path("c.yaml")
        assert args.keep_quotes is True
        assert args.output_format == "json"
        assert args.encoding == "utf-16"
        assert args.stdout is True
        assert args.dry_run is False
        assert args.verbose is True
        assert args.log_file == Path("run.log")

    def test_invalid_format(self) -> None:
        """Test that argparse rejects unknown formats."""
        with pytest.raises(SystemExit):
            _ = parse_arguments(["--format", "xml"])

    def test_stdout_and_dry_run_are_exclusive(self) -> None:
        """Test that --stdout cannot be combined with --dry-run."""
        with pytest.raises(SystemExit):
            _ = parse_arguments(["--stdout", "--dry-run"])


class TestBuildConfig:
    """Test merging of defaults, config file and flags."""

    def test_defaults(self) -> None:
        """Test the configuration without a file or flags."""
        config = build_config(parse_arguments([]))

        assert config.conversion.remove_quotes is True
        assert config.io.input_file == Path("translates.txt")
        assert config.io.output_file == Path("new_translates.txt")

    def test_keep_quotes_flag(self) -> None:
        """Test that --keep-quotes disables quote removal."""
        config = build_config(parse_arguments(["--keep-quotes"]))

        assert config.conversion.remove_quotes is False

    def test_flags_override_config_file(self, tmp_path: Path) -> None:
        """Test precedence of command-line flags over the file."""
        config_file = tmp_path / "linekeys.yaml"
        _ = config_file.write_text(
            "io:\n  input_file: from_file.txt\n  output_format: json\n"
            "logging:\n  level: warning\n",
            encoding="utf-8",
        )

        config = build_config(
            parse_arguments(["cli.txt", "--config", str(config_file), "--format", "lines"])
        )

        assert config.io.input_file == Path("cli.txt")
        assert config.io.output_format == "lines"
        assert config.io.output_file == Path("new_translates.txt")
        assert config.logging.level == "WARNING"

    def test_config_file_disables_quote_removal(self, tmp_path: Path) -> None:
        """Test that the file setting applies when no flag is given."""
        config_file = tmp_path / "linekeys.yaml"
        _ = config_file.write_text("conversion:\n  remove_quotes: false\n", encoding="utf-8")

        config = build_config(parse_arguments(["--config", str(config_file)]))

        assert config.conversion.remove_quotes is False

    def test_missing_config_file(self, tmp_path: Path) -> None:
        """Test that a missing config file is a configuration error."""
        with pytest.raises(ConfigurationError, match="Configuration file not found"):
            _ = build_config(parse_arguments(["--config", str(tmp_path / "none.yaml")]))

    def test_invalid_config_file(self, tmp_path: Path) -> None:
        """Test that an invalid config file is a configuration error."""
        config_file = tmp_path / "bad.yaml"
        _ = config_file.write_text("io:\n  output_format: xml\n", encoding="utf-8")

        with pytest.raises(ConfigurationError) as exc_info:
            _ = build_config(parse_arguments(["--config", str(config_file)]))

        assert str(config_file) in exc_info.value.user_message

    def test_invalid_encoding_flag(self) -> None:
        """Test that an unknown encoding on the command line is rejected."""
        with pytest.raises(ConfigurationError, match="Invalid settings"):
            _ = build_config(parse_arguments(["--encoding", "not-a-codec"]))


class TestSetupLogging:
    """Test logging configuration."""

    def test_console_level(self) -> None:
        """Test the console handler level with and without --verbose."""
        setup_logging(verbose=False, level="WARNING")
        assert logging.getLogger().handlers[0].level == logging.WARNING

        setup_logging(verbose=True, level="WARNING")
        handlers = logging.getLogger().handlers
        assert len(handlers) == 1
        assert handlers[0].level == logging.DEBUG

    def test_log_file(self, tmp_path: Path) -> None:
        """Test that a rotating file handler is added for a log file."""
        log_file = tmp_path / "logs" / "linekeys.log"

        setup_logging(log_file=log_file)

        handlers = logging.getLogger().handlers
        assert any(isinstance(h, logging.handlers.RotatingFileHandler) for h in handlers)
        assert log_file.parent.exists()


class TestMain:
    """Test the main entry point."""

    def test_default_file_names(
        self,
        tmp_path: Path,
        write_input: Callable[..., Path],
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        """Test translates.txt -> new_translates.txt in the working directory."""
        _ = write_input(["Hello World", "Hello World"])
        monkeypatch.chdir(tmp_path)

        assert main([]) == 0
        assert (tmp_path / "new_translates.txt").read_text(encoding="utf-8") == (
            '"hello_world": "Hello World",\n"hello_world_2": "Hello World",\n'
        )

    def test_explicit_files_and_json(
        self, tmp_path: Path, write_input: Callable[..., Path]
    ) -> None:
        """Test explicit paths with JSON output."""
        input_path = write_input(["greeting: Hello"], name="strings.txt")
        output_path = tmp_path / "en.json"

        assert main([str(input_path), str(output_path), "--format", "json"]) == 0
        assert json.loads(output_path.read_text(encoding="utf-8")) == {"greeting": "Hello"}

    def test_stdout(
        self,
        tmp_path: Path,
        write_input: Callable[..., Path],
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        """Test printing entries instead of writing a file."""
        input_path = write_input(['"Order completed!"'])

        assert main([str(input_path), "--stdout", "--keep-quotes"]) == 0

        captured = capsys.readouterr()
        assert captured.out == '"order_completed": ""Order completed!"",\n'
        assert not (tmp_path / "new_translates.txt").exists()

    def test_stdout_logs_summary(
        self, write_input: Callable[..., Path], capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test that --stdout reports the conversion result on stderr."""
        input_path = write_input(["Hello", ""])

        assert main([str(input_path), "--stdout"]) == 0

        captured = capsys.readouterr()
        assert captured.out == '"hello": "Hello",\n'
        assert "1 entries (0 parsed, 1 auto), 1 skipped of 2 lines" in captured.err
        assert "Wrote" not in captured.err

    def test_stdout_with_dry_run_exits(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test that main rejects --stdout together with --dry-run."""
        with pytest.raises(SystemExit) as exc_info:
            _ = main(["--stdout", "--dry-run"])

        assert exc_info.value.code == 2
        assert "not allowed with argument" in capsys.readouterr().err

    def test_run_rejects_stdout_with_dry_run(self) -> None:
        """Test that run refuses to combine stdout output with a dry run."""
        with pytest.raises(ValueError, match="cannot be combined"):
            _ = run(LineKeysConfig(), to_stdout=True, dry_run=True)

    def test_dry_run(self, tmp_path: Path, write_input: Callable[..., Path]) -> None:
        """Test that --dry-run writes nothing."""
        input_path = write_input(["Hello"])
        output_path = tmp_path / "out.txt"

        assert main([str(input_path), str(output_path), "--dry-run"]) == 0
        assert not output_path.exists()

    def test_missing_input(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test that a missing input file is reported with exit code 1."""
        assert main([str(tmp_path / "missing.txt"), str(tmp_path / "out.txt")]) == 1

        err = capsys.readouterr().err
        assert "Resource error: Input file does not exist" in err

    def test_missing_input_stdout(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test that --stdout also reports a missing input file."""
        assert main([str(tmp_path / "missing.txt"), "--stdout"]) == 1

        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Input file does not exist" in captured.err

    def test_invalid_config(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """Test that configuration errors give exit code 1."""
        assert main(["--config", str(tmp_path / "none.yaml")]) == 1

        err = capsys.readouterr().err
        assert "Configuration error: Configuration file not found" in err

    def test_init_config(self, tmp_path: Path) -> None:
        """Test writing a sample configuration file."""
        sample_path = tmp_path / "linekeys.yaml"

        assert main(["--init-config", str(sample_path)]) == 0
        assert "remove_quotes: true" in sample_path.read_text(encoding="utf-8")

    def test_init_config_refuses_overwrite(self, tmp_path: Path) -> None:
        """Test that an existing file is not overwritten."""
        sample_path = tmp_path / "linekeys.yaml"
        _ = sample_path.write_text("keep me", encoding="utf-8")

        assert main(["--init-config", str(sample_path)]) == 1
        assert sample_path.read_text(encoding="utf-8") == "keep me"

    def test_log_file(self, tmp_path: Path, write_input: Callable[..., Path]) -> None:
        """Test that --log-file receives the run summary."""
        input_path = write_input(["Hello", ""])
        log_file = tmp_path / "run.log"

        assert main([str(input_path), str(tmp_path / "out.txt"), "--log-file", str(log_file)]) == 0

        for handler in logging.getLogger().handlers:
            handler.flush()
        log_text = log_file.read_text(encoding="utf-8")
        assert "1 entries (0 parsed, 1 auto), 1 skipped of 2 lines" in log_text
        assert "Skipping line 2" in log_text

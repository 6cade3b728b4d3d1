"""Tests for the hardware-checker CLI using Click testing."""

from __future__ import annotations

from unittest.mock import patch

import pytest
from argon2.exceptions import HashingError
from click.testing import CliRunner
from hardware_checker.cli import main


def test_cli_help() -> None:
    """``hardware-checker --help`` should succeed and describe the benchmark."""
    runner = CliRunner()
    result = runner.invoke(main, ["--help"])
    assert result.exit_code == 0
    assert "Argon2id" in result.output


def test_cli_rejects_arguments() -> None:
    """The benchmark takes no arguments."""
    runner = CliRunner()
    result = runner.invoke(main, ["--parallelism", "2"])
    assert result.exit_code != 0


def test_cli_runs_benchmark(hasher, fake_clock, monkeypatch: pytest.MonkeyPatch) -> None:
    """Full run with a stub primitive exits cleanly and prints both phases."""
    monkeypatch.setattr("hardware_checker.checker.os.cpu_count", lambda: 4)
    fake_clock([0.0, 1.0, 1.0, 3.0])
    with patch("hardware_checker.checker.Argon2Hasher", return_value=hasher):
        runner = CliRunner()
        result = runner.invoke(main, [])

    assert result.exit_code == 0, result.output
    assert result.output.count("Took ") == 2
    assert "Result: 1000.00 hashes/s" in result.output
    assert "Result: 500.00 hashes/s" in result.output
    assert "Checking CPU over 4 cores..." in result.output


def test_cli_hashing_failure() -> None:
    """A hashing error is reported and exits with status 1."""
    with patch("hardware_checker.cli.run", side_effect=HashingError("memory cost too small")):
        runner = CliRunner()
        result = runner.invoke(main, [])
    assert result.exit_code == 1
    assert "hashing failed" in result.output


def test_cli_other_errors_propagate() -> None:
    """Errors other than hashing failures are not swallowed."""
    with patch("hardware_checker.cli.run", side_effect=TypeError("not all arguments converted")):
        runner = CliRunner()
        result = runner.invoke(main, [])
    assert result.exit_code != 0
    assert isinstance(result.exception, TypeError)

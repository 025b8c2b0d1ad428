"""Tests for the root folioctl CLI."""

import pytest
from click.testing import CliRunner

from folioctl import __version__
from folioctl.cli import cli


def test_cli_help(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--help"])
    assert result.exit_code == 0
    assert "folioctl" in result.output


def test_cli_version(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


@pytest.mark.usefixtures("_isolated_cwd")
def test_cli_no_args(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, [])
    assert result.exit_code == 0
    assert "Usage" in result.output


@pytest.mark.parametrize("flag", ["--json", "-q", "-v", "--log-json"])
def test_global_flags_accepted(cli_runner: CliRunner, flag: str) -> None:
    result = cli_runner.invoke(cli, [flag, "--version"])
    assert result.exit_code == 0


def test_config_option_accepted(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["-c", "/tmp/missing-folioctl.toml", "--version"])
    assert result.exit_code == 0


@pytest.mark.usefixtures("_isolated_cwd")
def test_invalid_config_reports_error(cli_runner: CliRunner, tmp_path) -> None:
    (tmp_path / "folioctl.toml").write_text("[site\n")
    result = cli_runner.invoke(cli, ["query", "techs"])
    assert result.exit_code == 1
    assert "Invalid TOML" in result.output


@pytest.mark.usefixtures("_isolated_cwd")
def test_missing_config_file_is_usage_error(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["-c", "/tmp/missing-folioctl.toml", "query", "techs"])
    assert result.exit_code == 2
    assert "does not exist" in result.output


@pytest.mark.usefixtures("_isolated_cwd")
def test_invalid_config_value_reports_error(cli_runner: CliRunner, tmp_path) -> None:
    (tmp_path / "folioctl.toml").write_text("[detail]\nrelated_limit = -1\n")
    result = cli_runner.invoke(cli, ["query", "techs"])
    assert result.exit_code == 1
    assert "Invalid config" in result.output

"""Tests for the url command group."""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from folioctl.cli import cli


@pytest.mark.usefixtures("_isolated_cwd")
class TestEncode:
    def test_encode(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli,
            ["--json", "url", "encode", "--tech", "kotlin", "--tech", "java", "--sort", "alpha"],
        )
        assert result.exit_code == 0
        data = json.loads(result.output)["data"]
        assert data["query"] == "tech=java,kotlin&sort=alpha"
        assert data["url"] == "domains.html?tech=java,kotlin&sort=alpha"

    def test_quiet_prints_query(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "url", "encode", "--search", " sso "])
        assert result.output.strip() == "q=sso"


@pytest.mark.usefixtures("_isolated_cwd")
class TestDecode:
    def test_decode_url(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli, ["--json", "url", "decode", "domains.html?tech=java,cobol&sort=bogus&q=x"]
        )
        assert result.exit_code == 0
        state = json.loads(result.output)["data"]["state"]
        assert state == {"techs": ["java"], "sort": "commits", "search": "x"}

    def test_human(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["url", "decode", "sort=recent"])
        assert "sort: recent" in result.output

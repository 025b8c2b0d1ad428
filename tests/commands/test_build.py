"""Tests for the build command."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from folioctl.cli import cli
from folioctl.data.portfolio import DOMAINS


@pytest.mark.usefixtures("_isolated_cwd")
class TestBuild:
    def test_builds_site(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        out = tmp_path / "site"
        result = cli_runner.invoke(cli, ["--json", "build", "--output", str(out)])
        assert result.exit_code == 0, result.output
        data = json.loads(result.output)["data"]
        assert data["count"] == len(DOMAINS) + 1
        assert (out / "domains.html").is_file()
        assert (out / "domain" / f"{DOMAINS[0]['id']}.html").is_file()

    def test_url_seeds_listing(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        out = tmp_path / "site"
        result = cli_runner.invoke(
            cli, ["--json", "build", "--output", str(out), "--url", "?sort=alpha"]
        )
        assert json.loads(result.output)["data"]["listing_url"] == "domains.html?sort=alpha"

    def test_template_override(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        (tmp_path / "folioctl.toml").write_text('[site]\ntitle = "My Work"\n')
        override = tmp_path / ".folioctl" / "templates" / "site"
        override.mkdir(parents=True)
        (override / "_highlights.html").write_text("<p>custom highlights</p>\n")
        out = tmp_path / "site"
        result = cli_runner.invoke(cli, ["build", "--output", str(out)])
        assert result.exit_code == 0, result.output
        page = (out / "domain" / f"{DOMAINS[0]['id']}.html").read_text(encoding="utf-8")
        assert "custom highlights" in page

    def test_output_required(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["build"])
        assert result.exit_code == 2

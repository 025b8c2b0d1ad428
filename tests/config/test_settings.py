"""Tests for FolioSettings — unified settings with TOML source."""

from pathlib import Path

import click
import pytest

from folioctl.config.settings import FolioSettings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("FOLIOCTL_CONFIG", raising=False)


class TestDefaults:
    def test_all_defaults(self, tmp_path: Path) -> None:
        settings = FolioSettings.from_cli(project_root=tmp_path)
        assert settings.project_root == tmp_path
        assert settings.config_path is None
        assert settings.json_output is False
        assert settings.quiet is False
        assert settings.site.listing_page == "domains.html"
        assert settings.listing.debounce_ms == 150

    def test_frozen(self, tmp_path: Path) -> None:
        settings = FolioSettings.from_cli(project_root=tmp_path)
        with pytest.raises(Exception):
            settings.quiet = True  # type: ignore[misc]


class TestTomlSource:
    def test_loads_from_toml(self, tmp_path: Path) -> None:
        (tmp_path / "folioctl.toml").write_text(
            '[site]\nauthor = "Ada"\n[detail]\nrelated_limit = 5\n'
        )
        settings = FolioSettings.from_cli(project_root=tmp_path)
        assert settings.site.author == "Ada"
        assert settings.detail.related_limit == 5
        assert settings.detail.snippet_length == 80  # default preserved
        assert settings.config_path == tmp_path / "folioctl.toml"

    def test_project_root_from_discovered_file(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        (tmp_path / "folioctl.toml").write_text("")
        child = tmp_path / "nested"
        child.mkdir()
        monkeypatch.chdir(child)
        settings = FolioSettings.from_cli()
        assert settings.project_root.resolve() == tmp_path.resolve()

    def test_explicit_config_path(self, tmp_path: Path) -> None:
        custom = tmp_path / "custom" / "my.toml"
        custom.parent.mkdir(parents=True)
        custom.write_text('[site]\ntitle = "Custom"\n')
        settings = FolioSettings.from_cli(config_path=str(custom), project_root=tmp_path)
        assert settings.site.title == "Custom"
        assert settings.config_path == custom

    def test_invalid_toml(self, tmp_path: Path) -> None:
        (tmp_path / "folioctl.toml").write_text("[site\n")
        with pytest.raises(click.ClickException, match="Invalid TOML"):
            FolioSettings.from_cli(project_root=tmp_path)

    def test_invalid_section_value(self, tmp_path: Path) -> None:
        (tmp_path / "folioctl.toml").write_text("[listing]\ndebounce_ms = -5\n")
        with pytest.raises(click.ClickException, match="Invalid config") as exc_info:
            FolioSettings.from_cli(project_root=tmp_path)
        assert "folioctl.toml" in exc_info.value.message
        assert "debounce_ms" in exc_info.value.message

    def test_section_must_be_a_table(self, tmp_path: Path) -> None:
        (tmp_path / "folioctl.toml").write_text('detail = "short"\n')
        with pytest.raises(click.ClickException, match="Invalid config"):
            FolioSettings.from_cli(project_root=tmp_path)

    def test_unknown_section_keys_ignored(self, tmp_path: Path) -> None:
        (tmp_path / "folioctl.toml").write_text('[site]\ntheme = "dark"\ntitle = "T"\n')
        settings = FolioSettings.from_cli(project_root=tmp_path)
        assert settings.site.title == "T"


class TestPriority:
    def test_env_overrides_toml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "folioctl.toml").write_text('[site]\nauthor = "Toml"\n')
        monkeypatch.setenv("FOLIOCTL_SITE__AUTHOR", "Env")
        settings = FolioSettings.from_cli(project_root=tmp_path)
        assert settings.site.author == "Env"

    def test_env_field_keeps_rest_of_toml_section(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        (tmp_path / "folioctl.toml").write_text(
            '[site]\ntitle = "Toml title"\nauthor = "Toml"\n'
        )
        monkeypatch.setenv("FOLIOCTL_SITE__AUTHOR", "Env")
        settings = FolioSettings.from_cli(project_root=tmp_path)
        assert settings.site.author == "Env"
        assert settings.site.title == "Toml title"

    def test_cli_flags_override(self, tmp_path: Path) -> None:
        settings = FolioSettings.from_cli(
            project_root=tmp_path, json_output=True, quiet=True, verbose=True
        )
        assert settings.json_output is True
        assert settings.quiet is True
        assert settings.verbose is True

    def test_cli_flags_override_toml(self, tmp_path: Path) -> None:
        (tmp_path / "folioctl.toml").write_text("verbose = true\n")
        settings = FolioSettings.from_cli(project_root=tmp_path, verbose=False)
        assert settings.verbose is False

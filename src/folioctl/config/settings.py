"""Unified settings — CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``FOLIOCTL_*`` prefix, ``__`` for nested sections
  3. TOML file    — ``folioctl.toml`` discovered via walk-up
  4. Code defaults — baked into the section models
"""

from __future__ import annotations

import threading
import tomllib
from pathlib import Path
from typing import Any

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from folioctl.config.discovery import find_config
from folioctl.config.models import DetailConfig, FolioConfig, ListingConfig, SiteConfig


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from a ``folioctl.toml`` file.

    The ``[site]``, ``[listing]`` and ``[detail]`` tables are validated as a
    :class:`FolioConfig` up front, so a bad value names the file it came
    from. Only keys present in the file are passed on, which lets env vars
    override single fields of a section without masking the rest.
    """

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path and toml_path.is_file():
            self._data = _read_toml(toml_path)

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        return self._data.get(field_name), field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        return self._data


def _read_toml(toml_path: Path) -> dict[str, Any]:
    import click

    try:
        data = tomllib.loads(toml_path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as exc:
        msg = f"Invalid TOML in {toml_path}: {exc}"
        raise click.ClickException(msg) from exc

    try:
        sections = FolioConfig.model_validate(data)
    except ValidationError as exc:
        msg = f"Invalid config in {toml_path}: {exc}"
        raise click.ClickException(msg) from exc
    return {**data, **sections.model_dump(exclude_unset=True)}


# Thread-local storage for the TOML path during construction.
_tls = threading.local()


class FolioSettings(BaseSettings):
    """Unified settings for the folioctl CLI and site builder.

    Frozen after construction and stored on the CLI's ``AppContext``.

    Attributes:
        project_root: Directory holding ``folioctl.toml`` (or CWD if none).
        config_path: The TOML file in effect, if any.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "FOLIOCTL_",
        "env_nested_delimiter": "__",
    }

    project_root: Path = Field(default_factory=Path.cwd)
    config_path: Path | None = None

    # --- CLI flags ---
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    # --- TOML sections ---
    site: SiteConfig = Field(default_factory=SiteConfig)
    listing: ListingConfig = Field(default_factory=ListingConfig)
    detail: DetailConfig = Field(default_factory=DetailConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert TOML source between env vars and defaults."""
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, getattr(_tls, "toml_path", None)),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        project_root: Path | None = None,
        **cli_flags: Any,
    ) -> FolioSettings:
        """Construct settings from a CLI invocation.

        Discovers ``folioctl.toml`` via walk-up (or explicit *config_path*)
        and merges CLI flags as highest-priority overrides.
        """
        toml_path: Path | None = None
        if config_path:
            p = Path(config_path)
            if p.is_file():
                toml_path = p
        else:
            toml_path = find_config(project_root)

        resolved_root = project_root
        if resolved_root is None:
            resolved_root = toml_path.parent if toml_path else Path.cwd()

        _tls.toml_path = toml_path
        try:
            return cls(project_root=resolved_root, config_path=toml_path, **cli_flags)
        finally:
            _tls.toml_path = None

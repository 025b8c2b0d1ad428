"""AppContext — shared Click context for all commands.

Created once by the root CLI group and handed to subcommands via
``@click.pass_obj``. Loads the catalog lazily and centralizes result
emission (stdout/stderr routing and exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from folioctl.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from folioctl.config.settings import FolioSettings
    from folioctl.data.catalog import Catalog
    from folioctl.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    The catalog is built on first use so ``--help`` and ``--version``
    never validate the dataset.
    """

    def __init__(self, settings: FolioSettings) -> None:
        self.settings = settings
        self._catalog: Catalog | None = None

        from folioctl.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def catalog(self) -> Catalog:
        """The portfolio catalog (created lazily on first access)."""
        if self._catalog is None:
            from folioctl.data.catalog import load_catalog

            self._catalog = load_catalog(self.settings.site.repo_base)
        return self._catalog

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success: writes to stdout. Warnings go to stderr so they stay
          out of piped output.
        * Failure: writes to stderr and exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            # JSON payloads already carry their warnings.
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)

"""Click base classes for folioctl command groups.

Every ``query``, ``url`` and ``build`` command ships a block of sample
invocations (listing URLs, tag combinations, output paths) that would
crowd ``--help``. :class:`FolioGroup` and :class:`FolioCommand` take that
block as ``examples=`` and expose it behind an eager ``--examples`` flag,
which prints it under the command path and exits 0 before the catalog is
loaded.
"""

from __future__ import annotations

from typing import Any

import click


def _add_examples_option(cmd: click.Command, examples: str) -> None:
    """Append the ``--examples`` option to *cmd*; it never reaches the callback."""

    def show_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(examples)
        ctx.exit(0)

    cmd.params.append(
        click.Option(
            ["--examples"],
            is_flag=True,
            expose_value=False,
            is_eager=True,
            callback=show_examples,
            help="Show usage examples.",
        )
    )


class FolioCommand(click.Command):
    """A folioctl leaf command; ``examples`` is optional."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            _add_examples_option(self, examples)


class FolioGroup(click.Group):
    """A folioctl command group with its own ``--examples``.

    Subcommands default to :class:`FolioCommand`, so they take ``examples``
    without an explicit ``cls=``.
    """

    command_class = FolioCommand

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            _add_examples_option(self, examples)

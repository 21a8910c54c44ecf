"""Subcommand modules for lemonctl.

Provides register_commands(), which imports command modules lazily so
``lemonctl --help`` stays fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register every standalone command on the root CLI group."""
    from lemonctl.commands.init_cmd import init_cmd
    from lemonctl.commands.process import process
    from lemonctl.commands.report import report
    from lemonctl.commands.reset import reset
    from lemonctl.commands.serve import serve

    cli.add_command(init_cmd)
    cli.add_command(process)
    cli.add_command(report)
    cli.add_command(reset)
    cli.add_command(serve)

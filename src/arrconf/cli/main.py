"""Main CLI entry point for arrconf."""

import click
from .commands.apply import apply
from .commands.import_ import import_
from .commands.kinds import kinds
from .commands.list import list_
from .commands.plan import plan
from .commands.schema import schema
from .commands.version import version
from .. import __version__


@click.group()
@click.version_option(version=__version__, prog_name="arrconf", message="%(prog)s version %(version)s")
def cli():
    """arrconf - Declarative configuration for Lidarr settings."""
    pass


cli.add_command(plan)
cli.add_command(apply)
cli.add_command(import_)
cli.add_command(list_)
cli.add_command(schema)
cli.add_command(kinds)
cli.add_command(version)

"""Version command - show arrconf version."""

import click
from ... import __version__


@click.command()
def version():
    """Show arrconf version."""
    click.echo(f"arrconf version {__version__}")

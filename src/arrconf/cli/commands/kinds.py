"""Kinds command - list the resource kinds that can be declared."""

import click
from ...lifecycle import CUSTOM_FORMAT_KIND, declarable_kinds
from ...records import FAMILIES
from ...variants.registry import list_kinds


@click.command()
@click.option('--family', type=click.Choice(sorted(FAMILIES) + [CUSTOM_FORMAT_KIND]), default=None,
              help='Only kinds of this family')
def kinds(family):
    """List every declarable resource kind."""
    if family == CUSTOM_FORMAT_KIND:
        names = [CUSTOM_FORMAT_KIND]
    elif family:
        names = list_kinds(family)
    else:
        names = declarable_kinds()
    for name in names:
        click.echo(name)

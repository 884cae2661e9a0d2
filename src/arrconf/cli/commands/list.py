"""List command - show every resource of a family on the server."""

import json
import sys
import click
from ...lifecycle import CUSTOM_FORMAT_KIND
from ...lifecycle.collection import list_collection, list_custom_formats
from ...records import FAMILIES
from ...utils.errors import ArrconfError
from ...utils.logging import get_logger
from ..utils import build_client, format_error, server_options

logger = get_logger("cli.list")


@click.command(name="list")
@click.argument('family', type=click.Choice(sorted(FAMILIES) + [CUSTOM_FORMAT_KIND]))
@click.option('--json', 'as_json', is_flag=True, help='Output structured JSON')
@server_options
def list_(family, as_json, url, api_key, timeout):
    """List every FAMILY resource on the server, whatever its implementation."""
    try:
        client = build_client(url, api_key, timeout)
        if family == CUSTOM_FORMAT_KIND:
            collection = list_custom_formats(client)
        else:
            collection = list_collection(FAMILIES[family], client)

        if as_json:
            click.echo(json.dumps(collection.model_dump(mode="json", exclude_none=True, warnings=False), indent=2))
            return
        if not collection.items:
            click.echo(f"No {family} resources found")
            return
        for item in collection.items:
            implementation = getattr(item, "implementation", None) or ""
            click.echo(f"{item.id:>5}  {item.name}  {implementation}".rstrip())

    except ArrconfError as e:
        click.echo(format_error(str(e)), err=True)
        sys.exit(1)

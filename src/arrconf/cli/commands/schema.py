"""Schema command - describe the attributes of a resource kind."""

import json
import sys
import click
from ...lifecycle import CUSTOM_FORMAT_KIND
from ...records import CustomFormat
from ...utils.errors import ArrconfError
from ...variants.registry import get_adapter
from ..utils import format_error


@click.command()
@click.argument('kind')
@click.option('--json', 'as_json', is_flag=True, help='Output structured JSON')
def schema(kind, as_json):
    """Show the attributes KIND accepts, their types and modes."""
    try:
        if kind == CUSTOM_FORMAT_KIND:
            click.echo(json.dumps(CustomFormat.model_json_schema(), indent=2))
            return

        variant = get_adapter(kind).schema()
        if as_json:
            click.echo(json.dumps(variant.model_dump(mode="json", exclude_none=True), indent=2))
            return

        click.echo(f"{variant.resource_name} ({variant.implementation})")
        if variant.description:
            click.echo(variant.description)
        click.echo("")
        for attribute in variant.attributes:
            details = [attribute.type, attribute.mode]
            if attribute.sensitive:
                details.append("sensitive")
            if attribute.one_of:
                details.append(f"one of {attribute.one_of}")
            click.echo(f"  {attribute.name}: {', '.join(details)}")

    except ArrconfError as e:
        click.echo(format_error(str(e)), err=True)
        sys.exit(1)

"""Import command - adopt an existing server resource into the state file."""

import json
import sys
import click
from ...apply.engine import state_entry
from ...apply.state import load_state, save_state
from ...lifecycle import lifecycle_for, parse_import_id
from ...utils.errors import ArrconfError, InputValidationError
from ...utils.logging import get_logger
from ..utils import STATE_FILE, build_client, format_error, server_options

logger = get_logger("cli.import")


@click.command(name="import")
@click.argument('kind')
@click.argument('identifier')
@click.argument('address')
@click.option('--state', 'state_path', type=click.Path(), default=STATE_FILE, show_default=True,
              help='State file recording applied resources')
@click.option('--json', 'as_json', is_flag=True, help='Output the imported attributes as JSON')
@server_options
def import_(kind, identifier, address, state_path, as_json, url, api_key, timeout):
    """
    Import the KIND resource with ID IDENTIFIER as ADDRESS.

    Example: arrconf import notification_gotify 3 gotify
    """
    try:
        state = load_state(state_path)
        if address in state.resources:
            raise InputValidationError(f"Address '{address}' is already managed (id {state.resources[address].id})")

        lifecycle = lifecycle_for(kind)
        parse_import_id(identifier)
        lifecycle.client = build_client(url, api_key, timeout)
        imported = lifecycle.import_state(identifier)
        entry = state_entry(lifecycle, imported)
        state.resources[address] = entry
        save_state(state, state_path)

        if as_json:
            click.echo(json.dumps(entry.model_dump(mode="json"), indent=2))
        else:
            click.echo(f"Imported {kind} {entry.id} as {address}")

    except ArrconfError as e:
        click.echo(format_error(str(e)), err=True)
        sys.exit(1)

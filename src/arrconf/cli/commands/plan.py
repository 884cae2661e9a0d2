"""Plan command - show what apply would change, without changing anything."""

import json
import sys
import click
from ...apply.declarations import load_declarations
from ...apply.engine import Reconciler
from ...apply.state import load_state
from ...config.manager import get_parallelism, load_config
from ...utils.errors import ArrconfError
from ...utils.logging import get_logger
from ..utils import STATE_FILE, build_client, format_error, format_report, report_to_dict, server_options

logger = get_logger("cli.plan")


@click.command()
@click.argument('declarations', type=click.Path(exists=False))
@click.option('--state', 'state_path', type=click.Path(), default=STATE_FILE, show_default=True,
              help='State file recording applied resources')
@click.option('--parallelism', type=click.IntRange(min=1), default=None,
              help='Resources read concurrently (default: apply.parallelism or 4)')
@click.option('--detailed-exitcode', is_flag=True, help='Exit with 2 when the plan has changes')
@click.option('--json', 'as_json', is_flag=True, help='Output structured JSON')
@server_options
def plan(declarations, state_path, parallelism, detailed_exitcode, as_json, url, api_key, timeout):
    """Show the changes needed to make the server match DECLARATIONS."""
    try:
        config = load_config()
        declared = load_declarations(declarations)
        state = load_state(state_path)
        client = build_client(url, api_key, timeout)
        report = Reconciler(client, parallelism=parallelism or get_parallelism(config)).run(
            declared, state, dry_run=True
        )

        if as_json:
            click.echo(json.dumps(report_to_dict(report), indent=2))
        else:
            click.echo(format_report(report, dry_run=True))
        if report.failures:
            sys.exit(1)
        if detailed_exitcode and report.has_changes:
            sys.exit(2)

    except ArrconfError as e:
        click.echo(format_error(str(e)), err=True)
        sys.exit(1)

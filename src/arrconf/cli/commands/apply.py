"""Apply command - reconcile the server with the declarations file."""

import json
import sys
import click
from ...apply.declarations import load_declarations
from ...apply.engine import Reconciler
from ...apply.state import load_state, save_state
from ...config.manager import get_parallelism, load_config
from ...lifecycle.deadline import Deadline
from ...utils.errors import ArrconfError
from ...utils.logging import get_logger
from ..utils import STATE_FILE, build_client, format_error, format_report, report_to_dict, server_options

logger = get_logger("cli.apply")


@click.command()
@click.argument('declarations', type=click.Path(exists=False))
@click.option('--state', 'state_path', type=click.Path(), default=STATE_FILE, show_default=True,
              help='State file recording applied resources')
@click.option('--parallelism', type=click.IntRange(min=1), default=None,
              help='Resources reconciled concurrently (default: apply.parallelism or 4)')
@click.option('--deadline', type=float, default=None, help='Give up on remote calls after this many seconds')
@click.option('--json', 'as_json', is_flag=True, help='Output structured JSON')
@server_options
def apply(declarations, state_path, parallelism, deadline, as_json, url, api_key, timeout):
    """Create, update and delete resources so the server matches DECLARATIONS."""
    try:
        config = load_config()
        declared = load_declarations(declarations)
        state = load_state(state_path)
        client = build_client(url, api_key, timeout)
        reconciler = Reconciler(
            client,
            parallelism=parallelism or get_parallelism(config),
            deadline=Deadline.after(deadline) if deadline else None,
        )
        report = reconciler.run(declared, state)
        save_state(report.state, state_path)

        if as_json:
            click.echo(json.dumps(report_to_dict(report), indent=2))
        else:
            click.echo(format_report(report, dry_run=False))
        if report.failures:
            sys.exit(1)

    except ArrconfError as e:
        click.echo(format_error(str(e)), err=True)
        sys.exit(1)

"""CLI utilities package."""

from typing import Any, Callable, Dict, Optional
import click
from ...apply.engine import Action, ApplyReport
from ...client.api import ArrClient
from ...config.manager import load_server_settings
from ...utils.logging import get_logger

logger = get_logger("cli.utils")

STATE_FILE = "arrconf.state.json"


def server_options(func: Callable) -> Callable:
    """Add the connection options shared by every command that talks to the server."""
    func = click.option('--timeout', type=float, default=None, help='Per-call HTTP timeout in seconds')(func)
    func = click.option('--api-key', default=None, help='API key (overrides LIDARR_API_KEY and config files)')(func)
    func = click.option('--url', default=None, help='Server URL (overrides LIDARR_URL and config files)')(func)
    return func


def build_client(url: Optional[str], api_key: Optional[str], timeout: Optional[float]) -> ArrClient:
    """
    Build an API client from CLI values, environment and config files.

    Raises:
        ConfigError: If the URL or API key cannot be resolved
    """
    settings = load_server_settings(url=url, api_key=api_key, timeout=timeout)
    logger.debug(f"Using server {settings.url}")
    return ArrClient(settings.url, settings.api_key, timeout=settings.timeout)


def format_error(message: str, suggestion: Optional[str] = None) -> str:
    """
    Format error message with optional suggestion.

    Args:
        message: Error message
        suggestion: Optional suggestion or help text

    Returns:
        Formatted error string
    """
    error = f"Error: {message}"
    if suggestion:
        error += f"\nTip: {suggestion}"
    return error


_SYMBOLS = {
    Action.CREATE: "+",
    Action.UPDATE: "~",
    Action.DELETE: "-",
    Action.REPLACE: "-/+",
    Action.NO_OP: " ",
}


def format_report(report: ApplyReport, dry_run: bool) -> str:
    """Render a plan or apply report for humans."""
    lines = []
    for change in report.changes:
        line = f"  {_SYMBOLS[change.action]:>3} {change.address} ({change.kind})"
        if change.id is not None:
            line += f" id={change.id}"
        if change.changed:
            line += f": {', '.join(change.changed)}"
        lines.append(line)
    for address, error in sorted(report.failures.items()):
        lines.append(f"  !!! {address}: {error}")

    counts = report.counts()
    verb = "Plan" if dry_run else "Applied"
    lines.append("")
    lines.append(
        f"{verb}: {counts['create']} to create, {counts['update']} to update, "
        f"{counts['replace']} to replace, {counts['delete']} to delete, {counts['no-op']} unchanged"
        if dry_run else
        f"{verb}: {counts['create']} created, {counts['update']} updated, "
        f"{counts['replace']} replaced, {counts['delete']} deleted, {counts['no-op']} unchanged"
    )
    if report.failures:
        lines.append(f"{len(report.failures)} resource(s) failed")
    return "\n".join(lines)


def report_to_dict(report: ApplyReport) -> Dict[str, Any]:
    return {
        "changes": [change.model_dump(mode="json") for change in report.changes],
        "failures": {address: str(error) for address, error in sorted(report.failures.items())},
    }


__all__ = ["STATE_FILE", "build_client", "format_error", "format_report", "report_to_dict", "server_options"]

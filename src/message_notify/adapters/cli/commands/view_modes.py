"""List the view modes the email notifier renders."""

from __future__ import annotations

import logging

import lib_log_rich.runtime
import orjson
import rich_click as click

from message_notify.application.notifier import EmailNotifier
from message_notify.domain.enums import OutputFormat

from ..constants import CLICK_CONTEXT_SETTINGS

logger = logging.getLogger(__name__)


@click.command("view-modes", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option(
    "--format",
    "output_format",
    type=click.Choice([f.value for f in OutputFormat], case_sensitive=False),
    default=OutputFormat.HUMAN.value,
    help="Output format (human-readable or JSON)",
)
def cli_view_modes(output_format: str) -> None:
    """Show the subject and body view modes a renderer must produce.

    Example:
        >>> from click.testing import CliRunner
        >>> result = CliRunner().invoke(cli_view_modes, ["--format", "json"])
        >>> '"message_notify_email_body"' in result.output
        True
    """
    fmt = OutputFormat(output_format.lower())
    modes = EmailNotifier.view_modes()
    with lib_log_rich.runtime.bind(job_id="cli-view-modes", extra={"command": "view-modes", "format": fmt.value}):
        logger.info("Listing view modes")
        if fmt is OutputFormat.JSON:
            click.echo(orjson.dumps(modes, option=orjson.OPT_INDENT_2).decode())
            return
        width = max(len(key) for key in modes)
        for key, info in modes.items():
            click.echo(f"{key:<{width}}  {info['label']}")


__all__ = ["cli_view_modes"]

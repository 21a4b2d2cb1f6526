"""Configuration display CLI command.

Contents:
    * :func:`cli_config` - Display merged configuration.
"""

from __future__ import annotations

import logging

import lib_log_rich.runtime
import rich_click as click

from algebra.domain.enums import OutputFormat

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import get_cli_context
from ..exit_codes import ExitCode

logger = logging.getLogger(__name__)


@click.command("config", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option(
    "--format",
    "output_format",
    type=click.Choice([f.value for f in OutputFormat], case_sensitive=False),
    default=OutputFormat.HUMAN.value,
    help="Output format (human-readable or JSON)",
)
@click.option(
    "--section",
    type=str,
    default=None,
    help="Show only one configuration section (e.g., 'algebra')",
)
@click.pass_context
def cli_config(ctx: click.Context, output_format: str, section: str | None) -> None:
    """Display the merged configuration from all sources.

    Precedence: defaults -> app -> host -> user -> dotenv -> env -> --set.
    Select a profile with the root option: ``algebra --profile NAME config``.
    """
    cli_ctx = get_cli_context(ctx)
    fmt = OutputFormat(output_format.lower())

    extra = {"command": "config", "format": fmt.value, "profile": cli_ctx.profile}
    with lib_log_rich.runtime.bind(job_id="cli-config", extra=extra):
        logger.info("Displaying configuration", extra={"section": section})
        click.echo()
        try:
            cli_ctx.services.display_config(cli_ctx.config, output_format=fmt, section=section, profile=cli_ctx.profile)
        except ValueError as exc:
            click.echo(f"\nError: {exc}", err=True)
            raise SystemExit(ExitCode.INVALID_ARGUMENT) from exc


__all__ = ["cli_config"]

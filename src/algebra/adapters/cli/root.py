"""Root CLI command group and global option handling.

Defines the top-level Click group. Handles the global ``--traceback``,
``--profile`` and ``--set`` flags, loads configuration once and initializes
logging before any subcommand runs.

Contents:
    * :func:`cli` - Root command group with global options.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import rich_click as click
from lib_layered_config import Config

from algebra import __init__conf__
from algebra.adapters.config.overrides import apply_overrides

from .constants import CLICK_CONTEXT_SETTINGS
from .context import CLIContext, apply_traceback_preferences, store_cli_context

if TYPE_CHECKING:
    from algebra.composition import AppServices


def _apply_cli_overrides(config: Config, set_overrides: tuple[str, ...]) -> Config:
    """Apply ``--set`` overrides, reporting malformed ones as a usage error.

    Raises:
        click.UsageError: If an override is malformed or targets a non-table key.
    """
    try:
        return apply_overrides(config, set_overrides)
    except (ValueError, TypeError) as exc:
        raise click.UsageError(str(exc)) from exc


@click.group(
    help=__init__conf__.title,
    context_settings=CLICK_CONTEXT_SETTINGS,
    invoke_without_command=True,
)
@click.version_option(
    version=__init__conf__.version,
    prog_name=__init__conf__.shell_command,
    message=f"{__init__conf__.shell_command} version {__init__conf__.version}",
)
@click.option(
    "--traceback/--no-traceback",
    is_flag=True,
    default=False,
    help="Show full Python traceback on errors",
)
@click.option(
    "--profile",
    type=str,
    default=None,
    help="Load configuration from a named profile (e.g., 'wrap32', 'test')",
)
@click.option(
    "--set",
    "set_overrides",
    multiple=True,
    default=(),
    metavar="SECTION.KEY=VALUE",
    help="Override a configuration setting, e.g. algebra.overflow=checked (repeatable).",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool, profile: str | None, set_overrides: tuple[str, ...]) -> None:
    """Load configuration, start logging and store shared state for subcommands.

    ``ctx.obj`` arrives as the services factory (production or testing) and
    leaves as a :class:`~algebra.adapters.cli.context.CLIContext`.

    Example:
        >>> from click.testing import CliRunner
        >>> from algebra.composition import build_production
        >>> result = CliRunner().invoke(cli, ["cubes"], obj=build_production)
        >>> result.exit_code
        0
        >>> "The cube of 9 is 729" in result.output
        True
    """
    if not callable(ctx.obj):
        raise RuntimeError("Services factory not provided. This is a bug.")
    services: AppServices = ctx.obj()  # type: ignore[assignment]  # Click's obj is typed as Any
    config = services.get_config(profile=profile)
    config = _apply_cli_overrides(config, set_overrides)
    services.init_logging(config)
    store_cli_context(ctx, CLIContext(traceback=traceback, config=config, services=services, profile=profile))
    apply_traceback_preferences(traceback)

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


# Commands import from this package, so they are registered after ``cli`` exists.
def _register_commands() -> None:
    from .commands import (
        cli_config,
        cli_cube,
        cli_cubes,
        cli_info,
        cli_square,
    )

    for cmd in (cli_info, cli_square, cli_cube, cli_cubes, cli_config):
        cli.add_command(cmd)


_register_commands()


__all__ = ["cli"]

"""CLI entry point and execution wrapper.

Provides the main entry point used by console scripts and ``python -m``
execution, ensuring consistent error handling and traceback restoration.

Contents:
    * :func:`main` - Primary entry point for CLI execution.
"""

from __future__ import annotations

import sys
import threading
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING

import click
import lib_cli_exit_tools
import lib_log_rich.runtime

from algebra import __init__conf__

from .constants import TRACEBACK_SUMMARY_LIMIT, TRACEBACK_VERBOSE_LIMIT
from .context import (
    apply_traceback_preferences,
    restore_traceback_state,
    snapshot_traceback_state,
)

if TYPE_CHECKING:
    from algebra.composition import AppServices


def _run_cli(argv: Sequence[str] | None, *, services_factory: Callable[[], AppServices]) -> int:
    """Invoke the root group and translate every outcome into an exit code.

    ``lib_cli_exit_tools.run_cli`` cannot pass ``obj`` to Click, so its
    behaviour is reproduced here with the services factory as ``obj``.

    Args:
        argv: CLI arguments without the program name. None uses ``sys.argv``.
        services_factory: Factory returning AppServices, handed to the root command.

    Returns:
        Exit code produced by the command.
    """
    from .root import cli

    try:
        cli.main(
            args=list(argv) if argv is not None else sys.argv[1:],
            prog_name=__init__conf__.shell_command,
            obj=services_factory,
            standalone_mode=False,
        )
    except click.exceptions.Exit as exc:
        return exc.exit_code
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except SystemExit as exc:
        # Commands print their own message before exiting with a specific code.
        return lib_cli_exit_tools.get_system_exit_code(exc)
    except BaseException as exc:
        return _report_unexpected(exc)
    return 0


def _report_unexpected(exc: BaseException) -> int:
    """Print ``exc`` through lib_cli_exit_tools and return its exit code.

    The summary is truncated unless ``--traceback`` enabled full output.
    """
    verbose = snapshot_traceback_state()[0]
    apply_traceback_preferences(verbose)
    limit = TRACEBACK_VERBOSE_LIMIT if verbose else TRACEBACK_SUMMARY_LIMIT
    lib_cli_exit_tools.print_exception_message(trace_back=verbose, length_limit=limit)
    return lib_cli_exit_tools.get_system_exit_code(exc)


def main(
    argv: Sequence[str] | None = None,
    *,
    restore_traceback: bool = True,
    services_factory: Callable[[], AppServices] | None = None,
) -> int:
    """Execute the CLI with error handling and return the exit code.

    Args:
        argv: Optional sequence of CLI arguments. None uses sys.argv.
        restore_traceback: Restore the previous traceback configuration afterwards.
        services_factory: Factory returning AppServices. Callers outside the
            adapters layer pass ``build_production``.

    Returns:
        Exit code reported by the CLI run.

    Raises:
        ValueError: If services_factory is not provided.

    Example:
        >>> from algebra.composition import build_production
        >>> main(["cubes"], services_factory=build_production)  # doctest: +SKIP
        The cube of 5 is 125
        The cube of 3 is 27
        The cube of 9 is 729
        0
    """
    if services_factory is None:
        raise ValueError("services_factory is required. Pass build_production from composition layer.")

    previous_state = snapshot_traceback_state()
    try:
        return _run_cli(argv, services_factory=services_factory)
    finally:
        if restore_traceback:
            restore_traceback_state(previous_state)
        # Worker threads must not tear down the process-wide logging runtime.
        if threading.current_thread() is threading.main_thread() and lib_log_rich.runtime.is_initialised():
            lib_log_rich.runtime.shutdown()


__all__ = ["main"]

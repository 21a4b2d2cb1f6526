"""Click context helpers for CLI state management.

The root command swaps the services factory in ``ctx.obj`` for a
:class:`CLIContext`; subcommands read it back with :func:`get_cli_context`.
``lib_cli_exit_tools.config`` holds the process-wide traceback flags, which
the helpers below set, capture and restore as one pair.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import lib_cli_exit_tools
import rich_click as click
from lib_layered_config import Config

if TYPE_CHECKING:
    from algebra.composition import AppServices

TracebackState = tuple[bool, bool]
"""Captured traceback configuration: (traceback_enabled, force_color)."""


@dataclass(frozen=True, slots=True)
class CLIContext:
    """What the root command hands to every subcommand.

    Attributes:
        traceback: ``--traceback`` was given.
        config: Layered configuration with ``--set`` overrides applied.
        services: Wired application services.
        profile: Configuration profile selected with ``--profile``.
    """

    traceback: bool
    config: Config
    services: AppServices
    profile: str | None = None


def store_cli_context(ctx: click.Context, cli_ctx: CLIContext) -> None:
    """Replace the services factory in ``ctx.obj`` with ``cli_ctx``.

    Example:
        >>> from unittest.mock import MagicMock
        >>> from algebra.composition import build_testing
        >>> ctx = MagicMock()
        >>> store_cli_context(ctx, CLIContext(False, MagicMock(), build_testing(), profile="wrap32"))
        >>> ctx.obj.profile
        'wrap32'
    """
    ctx.obj = cli_ctx


def get_cli_context(ctx: click.Context) -> CLIContext:
    """Return the CLIContext stored by the root command.

    Raises:
        RuntimeError: If the root command has not run for this invocation.
    """
    if not isinstance(ctx.obj, CLIContext):
        raise RuntimeError("CLI context not initialized. Call store_cli_context first.")
    return ctx.obj


def apply_traceback_preferences(enabled: bool) -> None:
    """Turn full, coloured tracebacks on or off.

    Example:
        >>> apply_traceback_preferences(False)
        >>> lib_cli_exit_tools.config.traceback
        False
    """
    restore_traceback_state((enabled, enabled))


def snapshot_traceback_state() -> TracebackState:
    """Capture the current ``(traceback, traceback_force_color)`` pair."""
    config = lib_cli_exit_tools.config
    return bool(getattr(config, "traceback", False)), bool(getattr(config, "traceback_force_color", False))


def restore_traceback_state(state: TracebackState) -> None:
    """Write a captured pair back to ``lib_cli_exit_tools.config``.

    Example:
        >>> saved = snapshot_traceback_state()
        >>> apply_traceback_preferences(True)
        >>> restore_traceback_state(saved)
        >>> snapshot_traceback_state() == saved
        True
    """
    enabled, force_color = state
    lib_cli_exit_tools.config.traceback = bool(enabled)
    lib_cli_exit_tools.config.traceback_force_color = bool(force_color)


__all__ = [
    "CLIContext",
    "TracebackState",
    "apply_traceback_preferences",
    "get_cli_context",
    "restore_traceback_state",
    "snapshot_traceback_state",
    "store_cli_context",
]

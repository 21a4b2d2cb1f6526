"""Shared helpers for the arithmetic CLI commands.

Contains the ``--overflow``/``--bits`` option decorator, settings resolution
from configuration plus CLI flags, and the mapping of arithmetic failures to
exit codes.
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Callable, Mapping
from typing import Any, TypeVar

import rich_click as click
from pydantic import ValidationError

from algebra import __init__conf__
from algebra.adapters.arithmetic.config import SECTION, ArithmeticConfig
from algebra.domain.arithmetic import MIN_BITS
from algebra.domain.enums import IntegerPolicy
from algebra.domain.errors import ConfigurationError, IntegerOverflowError

from ..context import CLIContext
from ..exit_codes import ExitCode

logger = logging.getLogger(__name__)

T = TypeVar("T")


def integer_policy_options(func: Callable[..., Any]) -> Callable[..., Any]:
    """Add ``--overflow`` and ``--bits`` to an arithmetic command.

    Both default to ``None`` so unset flags fall through to configuration.
    """
    options = [
        click.option(
            "--overflow",
            type=click.Choice([p.value for p in IntegerPolicy], case_sensitive=False),
            default=None,
            help="Integer policy for results (overrides algebra.overflow)",
        ),
        click.option(
            "--bits",
            type=click.IntRange(min=MIN_BITS),
            default=None,
            help="Width of the emulated signed integer (overrides algebra.bits)",
        ),
    ]
    return functools.reduce(lambda f, opt: opt(f), reversed(options), func)


def resolve_arithmetic_config(cli_ctx: CLIContext, *, overflow: str | None, bits: int | None) -> ArithmeticConfig:
    """Validate ``[algebra]`` settings with the command-line flags layered on top.

    Flags replace the configured keys before validation, so a valid flag
    wins over an invalid configured value.

    Args:
        cli_ctx: CLI context with the merged configuration and services.
        overflow: ``--overflow`` value, or None when not given.
        bits: ``--bits`` value, or None when not given.

    Returns:
        Validated arithmetic settings.

    Raises:
        SystemExit: With CONFIG_ERROR (78) when the merged section is invalid.
    """
    flags: dict[str, Any] = {}
    if overflow is not None:
        flags["overflow"] = overflow.lower()
    if bits is not None:
        flags["bits"] = bits

    config_dict = cli_ctx.config.as_dict()
    section = config_dict.get(SECTION) or {}
    if flags and isinstance(section, Mapping):
        config_dict = {**config_dict, SECTION: {**section, **flags}}

    try:
        return cli_ctx.services.load_arithmetic_config_from_dict(config_dict)
    except ValidationError as exc:
        logger.error("Invalid arithmetic configuration", extra={"error": str(exc)})
        click.echo(f"\nError: Invalid [algebra] configuration:\n{exc}", err=True)
        click.echo(f"Inspect it with: {__init__conf__.shell_command} config --section algebra", err=True)
        raise SystemExit(ExitCode.CONFIG_ERROR) from exc


def run_arithmetic(operation: Callable[[], T]) -> T:
    """Run ``operation``, mapping arithmetic failures to exit codes.

    Any other exception propagates to the CLI boundary, where
    lib_cli_exit_tools formats it.

    Raises:
        SystemExit: With DATA_ERROR (65) on :class:`IntegerOverflowError`,
            CONFIG_ERROR (78) on :class:`ConfigurationError`.
    """
    try:
        return operation()
    except ConfigurationError as exc:
        logger.error("Configuration error", extra={"error": str(exc)})
        click.echo(f"Error: {exc}", err=True)
        raise SystemExit(ExitCode.CONFIG_ERROR) from exc
    except IntegerOverflowError as exc:
        logger.error("Integer overflow", extra={"value": str(exc.value), "bits": exc.bits})
        click.echo(f"Error: {exc}", err=True)
        raise SystemExit(ExitCode.DATA_ERROR) from exc


__all__ = [
    "integer_policy_options",
    "resolve_arithmetic_config",
    "run_arithmetic",
]

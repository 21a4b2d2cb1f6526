"""Arithmetic CLI commands.

Contents:
    * :func:`cli_square` - Print the square of one integer.
    * :func:`cli_cube` - Print the cube of one integer.
    * :func:`cli_cubes` - The console driver: one "The cube of N is M" line per input.
"""

from __future__ import annotations

import functools
import logging

import lib_log_rich.runtime
import rich_click as click

from algebra.adapters.arithmetic.config import ArithmeticConfig
from algebra.domain.arithmetic import describe_cubes, evaluate
from algebra.domain.enums import Operation
from algebra.domain.errors import ConfigurationError

from ..constants import NUMERIC_ARGS_CONTEXT_SETTINGS
from ..context import get_cli_context
from ._arithmetic_common import integer_policy_options, resolve_arithmetic_config, run_arithmetic

logger = logging.getLogger(__name__)


def _echo_single(ctx: click.Context, operation: Operation, number: int, overflow: str | None, bits: int | None) -> None:
    cli_ctx = get_cli_context(ctx)
    settings = resolve_arithmetic_config(cli_ctx, overflow=overflow, bits=bits)
    extra = {"command": operation.value, "number": number, "overflow": settings.overflow.value, "bits": settings.bits}

    with lib_log_rich.runtime.bind(job_id=f"cli-{operation.value}", extra=extra):
        logger.info("Evaluating %s", operation.value, extra={"number": number})
        result = run_arithmetic(
            functools.partial(evaluate, operation, number, policy=settings.overflow, bits=settings.bits)
        )
        click.echo(result)


def _cube_lines(inputs: list[int], settings: ArithmeticConfig) -> list[str]:
    if not inputs:
        raise ConfigurationError("No numbers given and algebra.inputs is empty")
    return describe_cubes(inputs, policy=settings.overflow, bits=settings.bits)


@click.command("square", context_settings=NUMERIC_ARGS_CONTEXT_SETTINGS)
@integer_policy_options
@click.argument("number", type=int)
@click.pass_context
def cli_square(ctx: click.Context, overflow: str | None, bits: int | None, number: int) -> None:
    """Print NUMBER multiplied by itself."""
    _echo_single(ctx, Operation.SQUARE, number, overflow, bits)


@click.command("cube", context_settings=NUMERIC_ARGS_CONTEXT_SETTINGS)
@integer_policy_options
@click.argument("number", type=int)
@click.pass_context
def cli_cube(ctx: click.Context, overflow: str | None, bits: int | None, number: int) -> None:
    """Print NUMBER raised to the third power."""
    _echo_single(ctx, Operation.CUBE, number, overflow, bits)


@click.command("cubes", context_settings=NUMERIC_ARGS_CONTEXT_SETTINGS)
@integer_policy_options
@click.argument("numbers", type=int, nargs=-1)
@click.pass_context
def cli_cubes(ctx: click.Context, overflow: str | None, bits: int | None, numbers: tuple[int, ...]) -> None:
    r"""Print "The cube of N is M" for every NUMBER, one per line.

    Without arguments the numbers come from ``algebra.inputs``
    (5, 3 and 9 unless configured otherwise):

    \b
        The cube of 5 is 125
        The cube of 3 is 27
        The cube of 9 is 729
    """
    cli_ctx = get_cli_context(ctx)
    settings = resolve_arithmetic_config(cli_ctx, overflow=overflow, bits=bits)
    inputs = list(numbers) if numbers else list(settings.inputs)
    extra = {"command": "cubes", "inputs": inputs, "overflow": settings.overflow.value, "bits": settings.bits}

    with lib_log_rich.runtime.bind(job_id="cli-cubes", extra=extra):
        logger.info("Cubing %d number(s)", len(inputs), extra={"inputs": inputs})
        lines = run_arithmetic(functools.partial(_cube_lines, inputs, settings))
        for line in lines:
            click.echo(line)


__all__ = ["cli_cube", "cli_cubes", "cli_square"]

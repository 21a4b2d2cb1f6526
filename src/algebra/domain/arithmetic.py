"""Pure arithmetic functions with no I/O or framework dependencies.

``square`` and ``cube`` are the whole computational contract of the
package. They work on Python's arbitrary-precision ``int`` and therefore
never overflow. :func:`evaluate` layers an explicit :class:`IntegerPolicy`
on top so callers can reproduce fixed-width machine-integer behaviour.
"""

from __future__ import annotations

import operator
from collections.abc import Callable, Iterable
from typing import Final

from .enums import IntegerPolicy, Operation
from .errors import IntegerOverflowError

#: Inputs printed by the console driver when none are given.
DEFAULT_CUBE_INPUTS: Final[tuple[int, ...]] = (5, 3, 9)

#: Width of the signed integer emulated by bounded policies (a C ``int``).
DEFAULT_BITS: Final[int] = 32

#: Smallest width that still has a sign bit and a value bit.
MIN_BITS: Final[int] = 2


def square(number: int) -> int:
    """Return ``number`` multiplied by itself.

    Example:
        >>> square(4)
        16
        >>> square(-3)
        9
    """
    return number * number


def cube(number: int) -> int:
    """Return ``number`` raised to the third power.

    Example:
        >>> cube(5)
        125
        >>> cube(-3)
        -27
    """
    return number * number * number


_OPERATIONS: Final[dict[Operation, Callable[[int], int]]] = {
    Operation.SQUARE: square,
    Operation.CUBE: cube,
}


def integer_bounds(bits: int) -> tuple[int, int]:
    """Return the inclusive ``(min, max)`` range of a signed ``bits``-wide integer.

    Raises:
        ValueError: If ``bits`` is smaller than :data:`MIN_BITS`.

    Example:
        >>> integer_bounds(8)
        (-128, 127)
        >>> integer_bounds(32)
        (-2147483648, 2147483647)
    """
    if bits < MIN_BITS:
        raise ValueError(f"bits must be at least {MIN_BITS}, got {bits}")
    half = 1 << (bits - 1)
    return -half, half - 1


def apply_integer_policy(value: int, *, policy: IntegerPolicy, bits: int = DEFAULT_BITS) -> int:
    """Fit ``value`` into a signed ``bits``-wide integer according to ``policy``.

    Args:
        value: Exact result of an arithmetic operation.
        policy: How out-of-range values are treated.
        bits: Width of the emulated signed integer. Ignored for ``UNBOUNDED``.

    Returns:
        The value as the emulated integer type would hold it.

    Raises:
        IntegerOverflowError: Under ``CHECKED`` when ``value`` is out of range.
        ValueError: If ``bits`` is smaller than :data:`MIN_BITS`.

    Example:
        >>> apply_integer_policy(200, policy=IntegerPolicy.WRAP, bits=8)
        -56
        >>> apply_integer_policy(200, policy=IntegerPolicy.SATURATE, bits=8)
        127
        >>> apply_integer_policy(200, policy=IntegerPolicy.UNBOUNDED, bits=8)
        200
    """
    if policy is IntegerPolicy.UNBOUNDED:
        return value

    lowest, highest = integer_bounds(bits)
    if lowest <= value <= highest:
        return value

    if policy is IntegerPolicy.WRAP:
        return (value - lowest) % (1 << bits) + lowest
    if policy is IntegerPolicy.SATURATE:
        return highest if value > highest else lowest
    raise IntegerOverflowError(value, bits=bits)


def evaluate(
    operation: Operation,
    number: int,
    *,
    policy: IntegerPolicy = IntegerPolicy.UNBOUNDED,
    bits: int = DEFAULT_BITS,
) -> int:
    r"""Apply ``operation`` to ``number`` under an integer policy.

    Bounded policies model a machine integer, so the input itself has to be
    representable before the operation runs; the exact result is then fitted
    with :func:`apply_integer_policy`.

    Args:
        operation: Which arithmetic function to apply.
        number: Integer input. Anything accepted by :func:`operator.index`.
        policy: Integer policy for the result. Defaults to ``UNBOUNDED``.
        bits: Width of the emulated signed integer.

    Returns:
        The (possibly wrapped or clamped) result.

    Raises:
        TypeError: If ``number`` is not an integer.
        IntegerOverflowError: If a bounded policy receives an input outside
            the range, or ``CHECKED`` sees an out-of-range result.

    Example:
        >>> evaluate(Operation.CUBE, 9)
        729
        >>> evaluate(Operation.CUBE, 1291, policy=IntegerPolicy.WRAP)
        -2143282125
        >>> evaluate(Operation.CUBE, 1291, policy=IntegerPolicy.SATURATE)
        2147483647
    """
    value = operator.index(number)
    if policy is not IntegerPolicy.UNBOUNDED:
        lowest, highest = integer_bounds(bits)
        if not lowest <= value <= highest:
            raise IntegerOverflowError(value, bits=bits)
    return apply_integer_policy(_OPERATIONS[operation](value), policy=policy, bits=bits)


def format_cube_line(number: int, result: int) -> str:
    """Render one line of driver output.

    Example:
        >>> format_cube_line(5, 125)
        'The cube of 5 is 125'
    """
    return f"The cube of {number} is {result}"


def describe_cubes(
    numbers: Iterable[int],
    *,
    policy: IntegerPolicy = IntegerPolicy.UNBOUNDED,
    bits: int = DEFAULT_BITS,
) -> list[str]:
    """Return one driver line per input, preserving input order.

    Example:
        >>> describe_cubes(DEFAULT_CUBE_INPUTS)
        ['The cube of 5 is 125', 'The cube of 3 is 27', 'The cube of 9 is 729']
    """
    return [format_cube_line(n, evaluate(Operation.CUBE, n, policy=policy, bits=bits)) for n in numbers]


__all__ = [
    "DEFAULT_BITS",
    "DEFAULT_CUBE_INPUTS",
    "MIN_BITS",
    "apply_integer_policy",
    "cube",
    "describe_cubes",
    "evaluate",
    "format_cube_line",
    "integer_bounds",
    "square",
]

"""Type-safe domain enums for arithmetic operations, integer policies, and output formats."""

from __future__ import annotations

from enum import Enum


class Operation(str, Enum):
    """Arithmetic operations exposed by the package.

    Inherits from str to allow direct string comparison and Click integration.

    Attributes:
        SQUARE: ``n * n``.
        CUBE: ``n * n * n``.

    Example:
        >>> Operation.CUBE.value
        'cube'
        >>> Operation.SQUARE == "square"
        True
    """

    SQUARE = "square"
    CUBE = "cube"


class IntegerPolicy(str, Enum):
    """Behaviour applied when a result leaves a fixed-width signed range.

    Python integers never overflow, so ``UNBOUNDED`` is the default. The
    other policies emulate a machine integer of a configured bit width.

    Attributes:
        UNBOUNDED: Arbitrary precision; the width is ignored.
        WRAP: Two's-complement wraparound, as a C ``int`` behaves in practice.
        SATURATE: Clamp to the nearest representable bound.
        CHECKED: Raise :class:`~algebra.domain.errors.IntegerOverflowError`.

    Example:
        >>> IntegerPolicy("wrap") is IntegerPolicy.WRAP
        True
        >>> IntegerPolicy.CHECKED == "checked"
        True
    """

    UNBOUNDED = "unbounded"
    WRAP = "wrap"
    SATURATE = "saturate"
    CHECKED = "checked"


class OutputFormat(str, Enum):
    """Output format options for configuration display.

    Attributes:
        HUMAN: Human-readable TOML-like output format.
        JSON: Machine-readable JSON output format.

    Example:
        >>> OutputFormat.HUMAN.value
        'human'
        >>> OutputFormat.JSON == "json"
        True
    """

    HUMAN = "human"
    JSON = "json"


__all__ = [
    "IntegerPolicy",
    "Operation",
    "OutputFormat",
]

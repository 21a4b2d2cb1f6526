"""Domain layer - pure business logic with no I/O or framework dependencies.

Contents:
    * :mod:`.arithmetic` - ``square``, ``cube`` and integer-policy evaluation
    * :mod:`.enums` - Domain enumerations (Operation, IntegerPolicy, OutputFormat)
    * :mod:`.errors` - Domain exception types
"""

from __future__ import annotations

from .arithmetic import (
    DEFAULT_BITS,
    DEFAULT_CUBE_INPUTS,
    apply_integer_policy,
    cube,
    describe_cubes,
    evaluate,
    format_cube_line,
    integer_bounds,
    square,
)
from .enums import IntegerPolicy, Operation, OutputFormat
from .errors import ConfigurationError, IntegerOverflowError

__all__ = [
    # Arithmetic
    "DEFAULT_BITS",
    "DEFAULT_CUBE_INPUTS",
    "apply_integer_policy",
    "cube",
    "describe_cubes",
    "evaluate",
    "format_cube_line",
    "integer_bounds",
    "square",
    # Enums
    "IntegerPolicy",
    "Operation",
    "OutputFormat",
    # Errors
    "ConfigurationError",
    "IntegerOverflowError",
]

"""Domain-specific exceptions for typed error handling at boundaries."""

from __future__ import annotations


class ConfigurationError(Exception):
    """Missing, invalid, or inconsistent configuration.

    Raised when the ``[algebra]`` settings cannot be turned into a valid
    arithmetic configuration. Caught at CLI boundaries to provide
    user-friendly error messages.

    Example:
        >>> from algebra.domain.errors import ConfigurationError
        >>> err = ConfigurationError("bits must be at least 2")
        >>> str(err)
        'bits must be at least 2'
    """


class IntegerOverflowError(ArithmeticError):
    """A value does not fit the configured fixed-width signed integer.

    Raised under the ``checked`` policy when a result leaves the range, and
    under every bounded policy when the input itself is not representable.
    Inherits from ArithmeticError so generic ``except ArithmeticError``
    handlers (``OverflowError`` style) catch it too.

    Attributes:
        value: The offending integer.
        bits: Width of the signed integer the value had to fit.

    Example:
        >>> err = IntegerOverflowError(2**40, bits=32)
        >>> err.value == 2**40
        True
        >>> str(err)
        '1099511627776 does not fit in a signed 32-bit integer'
        >>> isinstance(err, ArithmeticError)
        True
    """

    def __init__(self, value: int, *, bits: int) -> None:
        self.value = value
        self.bits = bits
        super().__init__(f"{value} does not fit in a signed {bits}-bit integer")


__all__ = [
    "ConfigurationError",
    "IntegerOverflowError",
]

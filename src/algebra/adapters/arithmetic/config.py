"""Arithmetic configuration model and loader.

Provides the ArithmeticConfig Pydantic model for validated, immutable
arithmetic settings and the loader function to create it from
configuration dictionaries.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, cast

from pydantic import BaseModel, ConfigDict, Field, field_validator

from algebra.domain.arithmetic import DEFAULT_BITS, DEFAULT_CUBE_INPUTS, MIN_BITS
from algebra.domain.enums import IntegerPolicy

#: Configuration section holding the arithmetic settings.
SECTION = "algebra"


class ArithmeticConfig(BaseModel):
    """Validated, immutable arithmetic settings.

    Attributes:
        overflow: Integer policy applied to every result.
        bits: Width of the emulated signed integer for bounded policies.
        inputs: Numbers cubed by the driver when none are given on the CLI.

    Example:
        >>> config = ArithmeticConfig(overflow="wrap", bits=16)
        >>> config.overflow
        <IntegerPolicy.WRAP: 'wrap'>
        >>> config.inputs
        [5, 3, 9]
    """

    model_config = ConfigDict(frozen=True)

    overflow: IntegerPolicy = IntegerPolicy.UNBOUNDED
    bits: int = Field(default=DEFAULT_BITS, ge=MIN_BITS)
    inputs: list[int] = Field(default_factory=lambda: list(DEFAULT_CUBE_INPUTS))

    @field_validator("overflow", mode="before")
    @classmethod
    def _normalise_policy(cls, v: Any) -> Any:
        """Accept policy names regardless of case or surrounding whitespace.

        Examples:
            >>> ArithmeticConfig._normalise_policy(" Checked ")
            'checked'
            >>> ArithmeticConfig._normalise_policy(IntegerPolicy.WRAP)
            <IntegerPolicy.WRAP: 'wrap'>
        """
        if isinstance(v, str) and not isinstance(v, IntegerPolicy):
            return v.strip().lower()
        return v

    @field_validator("inputs", mode="before")
    @classmethod
    def _coerce_scalar_to_list(cls, v: Any) -> Any:
        """Coerce a single integer to a one-element list.

        Environment variables and ``--set`` overrides frequently provide a
        bare number instead of a TOML array.

        Examples:
            >>> ArithmeticConfig._coerce_scalar_to_list(7)
            [7]
            >>> ArithmeticConfig._coerce_scalar_to_list([1, 2])
            [1, 2]
        """
        if isinstance(v, int) and not isinstance(v, bool):
            return [v]
        return v


def load_arithmetic_config_from_dict(config_dict: Mapping[str, Any]) -> ArithmeticConfig:
    """Load ArithmeticConfig from a configuration dictionary.

    Bridges lib_layered_config's dictionary output with the typed
    ArithmeticConfig model. Missing sections and keys fall back to the
    defaults that reproduce the classic ``5, 3, 9`` driver run.

    Args:
        config_dict: Configuration dictionary typically from lib_layered_config.
            Expected to have an ``algebra`` section.

    Returns:
        Validated arithmetic settings.

    Raises:
        pydantic.ValidationError: When the section holds invalid values.

    Example:
        >>> load_arithmetic_config_from_dict({"algebra": {"overflow": "checked"}}).overflow
        <IntegerPolicy.CHECKED: 'checked'>
        >>> load_arithmetic_config_from_dict({}).bits
        32
    """
    section: Any = config_dict.get(SECTION, {})

    # Non-dict section (e.g. "algebra": "oops") is left to pydantic to reject
    if not isinstance(section, Mapping):
        return ArithmeticConfig.model_validate(section)

    return ArithmeticConfig.model_validate(dict(cast(Mapping[str, Any], section)))


__all__ = [
    "SECTION",
    "ArithmeticConfig",
    "load_arithmetic_config_from_dict",
]

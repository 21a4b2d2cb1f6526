"""In-memory arithmetic settings adapter for testing."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ..arithmetic.config import SECTION, ArithmeticConfig


def load_arithmetic_config_from_dict_in_memory(config_dict: Mapping[str, Any]) -> ArithmeticConfig:
    """Parse the ``[algebra]`` section with the real Pydantic model.

    Example:
        >>> load_arithmetic_config_from_dict_in_memory({"algebra": {"bits": 8}}).bits
        8
        >>> load_arithmetic_config_from_dict_in_memory({}).inputs
        [5, 3, 9]
    """
    section = config_dict.get(SECTION, {})
    return ArithmeticConfig.model_validate(section if section else {})


__all__ = ["load_arithmetic_config_from_dict_in_memory"]

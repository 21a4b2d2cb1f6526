"""Arithmetic settings adapter.

Turns the ``[algebra]`` configuration section into a validated
:class:`ArithmeticConfig` that CLI commands hand to the domain layer.

Contents:
    * :class:`.config.ArithmeticConfig` - Validated arithmetic settings
    * :func:`.config.load_arithmetic_config_from_dict` - Config dict loader
"""

from __future__ import annotations

from .config import ArithmeticConfig, load_arithmetic_config_from_dict

__all__ = [
    "ArithmeticConfig",
    "load_arithmetic_config_from_dict",
]

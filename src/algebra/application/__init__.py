"""Application layer - port definitions.

Contains the port protocols that define the interfaces for adapter
implementations wired together by :mod:`algebra.composition`.

Contents:
    * :mod:`.ports` - Callable Protocol definitions for adapter functions
"""

from __future__ import annotations

from .ports import (
    DisplayConfig,
    GetConfig,
    GetDefaultConfigPath,
    InitLogging,
    LoadArithmeticConfigFromDict,
)

__all__ = [
    "DisplayConfig",
    "GetConfig",
    "GetDefaultConfigPath",
    "InitLogging",
    "LoadArithmeticConfigFromDict",
]

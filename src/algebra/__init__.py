"""Public package surface exposing arithmetic, metadata, and configuration.

This module provides the stable public API for the package, routing imports
through the proper architectural layers:
- Domain exports: ``square``, ``cube`` and policy-aware ``evaluate``
- Composition exports: Wired adapter services (configuration)
- Metadata: Package information
"""

from __future__ import annotations

# Metadata
from .__init__conf__ import print_info

# Composition exports (wired adapters)
from .composition import get_config

# Domain exports
from .domain.arithmetic import (
    DEFAULT_CUBE_INPUTS,
    cube,
    describe_cubes,
    evaluate,
    square,
)
from .domain.enums import IntegerPolicy, Operation
from .domain.errors import IntegerOverflowError

__all__ = [
    "DEFAULT_CUBE_INPUTS",
    "IntegerOverflowError",
    "IntegerPolicy",
    "Operation",
    "cube",
    "describe_cubes",
    "evaluate",
    "get_config",
    "print_info",
    "square",
]

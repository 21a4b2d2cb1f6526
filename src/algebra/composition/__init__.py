"""Composition root wiring adapters to application ports."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

# Arithmetic settings
from ..adapters.arithmetic.config import load_arithmetic_config_from_dict
from ..adapters.config.display import display_config

# Configuration services
from ..adapters.config.loader import get_config, get_default_config_path

# Logging services
from ..adapters.logging.setup import init_logging

# Static conformance assertions: pyright verifies that each adapter function
# structurally satisfies its corresponding Protocol at type-check time.
if TYPE_CHECKING:
    from ..application.ports import (
        DisplayConfig,
        GetConfig,
        GetDefaultConfigPath,
        InitLogging,
        LoadArithmeticConfigFromDict,
    )

    _assert_get_config: GetConfig = get_config
    _assert_get_default_config_path: GetDefaultConfigPath = get_default_config_path
    _assert_display_config: DisplayConfig = display_config
    _assert_load_arithmetic_config_from_dict: LoadArithmeticConfigFromDict = load_arithmetic_config_from_dict
    _assert_init_logging: InitLogging = init_logging


@dataclass(frozen=True, slots=True)
class AppServices:
    """Frozen container holding all application port implementations."""

    get_config: GetConfig
    get_default_config_path: GetDefaultConfigPath
    display_config: DisplayConfig
    load_arithmetic_config_from_dict: LoadArithmeticConfigFromDict
    init_logging: InitLogging


def build_production() -> AppServices:
    """Wire production adapters into an AppServices container."""
    return AppServices(
        get_config=get_config,
        get_default_config_path=get_default_config_path,
        display_config=display_config,
        load_arithmetic_config_from_dict=load_arithmetic_config_from_dict,
        init_logging=init_logging,
    )


def build_testing() -> AppServices:
    """Wire in-memory adapters into an AppServices container.

    Configuration is empty, display and logging are no-ops, and the
    arithmetic loader yields the defaults, so commands behave exactly as a
    fresh installation without touching the filesystem.

    Returns:
        AppServices container with in-memory adapters.
    """
    from ..adapters.memory import (
        display_config_in_memory,
        get_config_in_memory,
        get_default_config_path_in_memory,
        init_logging_in_memory,
        load_arithmetic_config_from_dict_in_memory,
    )

    return AppServices(
        get_config=get_config_in_memory,
        get_default_config_path=get_default_config_path_in_memory,
        display_config=display_config_in_memory,
        load_arithmetic_config_from_dict=load_arithmetic_config_from_dict_in_memory,
        init_logging=init_logging_in_memory,
    )


__all__ = [
    # Configuration
    "get_config",
    "get_default_config_path",
    "display_config",
    # Arithmetic
    "load_arithmetic_config_from_dict",
    # Logging
    "init_logging",
    # Composition
    "AppServices",
    "build_production",
    "build_testing",
]

"""Shared CLI constants.

Contents:
    * :data:`CLICK_CONTEXT_SETTINGS` - Shared Click settings for help display.
    * :data:`NUMERIC_ARGS_CONTEXT_SETTINGS` - Settings for commands taking signed integers.
    * :data:`TRACEBACK_SUMMARY_LIMIT` - Character budget for truncated tracebacks.
    * :data:`TRACEBACK_VERBOSE_LIMIT` - Character budget for verbose tracebacks.
"""

from __future__ import annotations

from typing import Any, Final

#: Shared Click context flags so help output stays consistent across commands.
CLICK_CONTEXT_SETTINGS: Final[dict[str, list[str]]] = {"help_option_names": ["-h", "--help"]}

#: Negative numbers such as ``-3`` would otherwise be parsed as unknown short
#: options; with ignore_unknown_options they stay positional arguments.
NUMERIC_ARGS_CONTEXT_SETTINGS: Final[dict[str, Any]] = {
    **CLICK_CONTEXT_SETTINGS,
    "ignore_unknown_options": True,
}

#: Character budget used when printing truncated tracebacks.
TRACEBACK_SUMMARY_LIMIT: Final[int] = 500

#: Character budget used when verbose tracebacks are enabled.
TRACEBACK_VERBOSE_LIMIT: Final[int] = 10_000

__all__ = [
    "CLICK_CONTEXT_SETTINGS",
    "NUMERIC_ARGS_CONTEXT_SETTINGS",
    "TRACEBACK_SUMMARY_LIMIT",
    "TRACEBACK_VERBOSE_LIMIT",
]

"""CLI command implementations.

Collects all subcommand functions and re-exports them for registration
with the root CLI group.

Contents:
    * Arithmetic commands from :mod:`.arithmetic`
    * Info command from :mod:`.info`
    * Config command from :mod:`.config`
"""

from __future__ import annotations

from .arithmetic import cli_cube, cli_cubes, cli_square
from .config import cli_config
from .info import cli_info

__all__ = [
    "cli_config",
    "cli_cube",
    "cli_cubes",
    "cli_info",
    "cli_square",
]

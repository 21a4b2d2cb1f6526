"""In-memory configuration adapters for testing.

Provides configuration functions that satisfy the same Protocols as
production adapters but operate entirely in memory -- no filesystem,
no layered file discovery.
"""

from __future__ import annotations

import tempfile
from pathlib import Path

from lib_layered_config import Config

from ...domain.enums import OutputFormat


def get_config_in_memory(
    *,
    profile: str | None = None,
    start_dir: str | None = None,
) -> Config:
    """Return an empty in-memory Config."""
    return Config({}, {})


def get_default_config_path_in_memory() -> Path:
    """Return a synthetic path (not a real file)."""
    return Path(tempfile.gettempdir()) / "algebra" / "defaultconfig.toml"


def display_config_in_memory(
    config: Config,
    *,
    output_format: OutputFormat = OutputFormat.HUMAN,
    section: str | None = None,
    profile: str | None = None,
) -> None:
    """No-op display -- satisfies the DisplayConfig protocol."""


__all__ = [
    "display_config_in_memory",
    "get_config_in_memory",
    "get_default_config_path_in_memory",
]

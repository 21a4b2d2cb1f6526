"""Adapters layer - infrastructure and framework integrations.

Contains adapter implementations that connect the pure arithmetic core to
the outside world.

Contents:
    * :mod:`.arithmetic` - Validated arithmetic settings from configuration
    * :mod:`.config` - Configuration loading, display, and overrides
    * :mod:`.logging` - Logging setup with lib_log_rich
    * :mod:`.memory` - In-memory adapters for tests
    * :mod:`.cli` - Click CLI framework integration
"""

from __future__ import annotations

__all__: list[str] = []

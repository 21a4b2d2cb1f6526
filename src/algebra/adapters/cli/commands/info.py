"""Package metadata CLI command.

Contents:
    * :func:`cli_info` - Display package metadata.
"""

from __future__ import annotations

import logging

import lib_log_rich.runtime
import rich_click as click

from algebra import __init__conf__

from ..constants import CLICK_CONTEXT_SETTINGS

logger = logging.getLogger(__name__)


@click.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_info() -> None:
    """Print name, version and homepage of the installed package."""
    with lib_log_rich.runtime.bind(job_id="cli-info", extra={"command": "info"}):
        logger.info("Displaying package information")
        __init__conf__.print_info()


__all__ = ["cli_info"]

"""POSIX-conventional exit codes for CLI error paths.

Every ``SystemExit`` raised by a command carries one of these values.
Signal codes are informational only: ``lib_cli_exit_tools`` translates
signals on its own.

Contents:
    * :class:`ExitCode` - IntEnum of all exit codes used by this application.
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    """POSIX-conventional exit codes for CLI error paths.

    Values follow sysexits.h and errno conventions where applicable:

    * 0–1: generic success / failure
    * 2: usage error (Click)
    * 22: EINVAL
    * 65: EX_DATAERR (sysexits.h) - integer overflow under a bounded policy
    * 78: EX_CONFIG (sysexits.h)
    * 128+N: signal N (informational only)

    Example:
        >>> ExitCode.SUCCESS
        <ExitCode.SUCCESS: 0>
        >>> int(ExitCode.DATA_ERROR)
        65
    """

    SUCCESS = 0
    GENERAL_ERROR = 1
    USAGE_ERROR = 2
    INVALID_ARGUMENT = 22
    DATA_ERROR = 65
    CONFIG_ERROR = 78
    SIGNAL_INT = 130
    BROKEN_PIPE = 141
    SIGNAL_TERM = 143


__all__ = ["ExitCode"]

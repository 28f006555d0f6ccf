"""POSIX-conventional exit codes for CLI error paths.

Signal codes (130, 141, 143) are informational only; ``lib_cli_exit_tools``
performs the signal-to-exit-code translation itself.
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    """Exit codes raised via ``SystemExit`` by greeter commands.

    Values follow sysexits.h and errno conventions where applicable.

    Example:
        >>> int(ExitCode.CONFIG_ERROR)
        78
    """

    SUCCESS = 0
    GENERAL_ERROR = 1
    INVALID_ARGUMENT = 22
    CONFIG_ERROR = 78
    SIGNAL_INT = 130
    BROKEN_PIPE = 141
    SIGNAL_TERM = 143


__all__ = ["ExitCode"]

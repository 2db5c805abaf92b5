"""POSIX-conventional exit codes for CLI error paths."""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    """Exit codes raised via ``SystemExit`` by greeter commands.

    Values follow errno and sysexits.h: 22 is EINVAL, 78 is EX_CONFIG.
    Usage errors detected by Click exit with 2 on their own.

    Example:
        >>> int(ExitCode.CONFIG_ERROR)
        78
    """

    SUCCESS = 0
    GENERAL_ERROR = 1
    INVALID_ARGUMENT = 22
    CONFIG_ERROR = 78


__all__ = ["ExitCode"]

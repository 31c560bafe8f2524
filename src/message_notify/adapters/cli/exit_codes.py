"""POSIX-conventional exit codes for CLI error paths.

Every ``SystemExit`` raised by a command carries one of these values so
scripts wrapping ``message-notify deliver`` can branch on the failure kind.

Signal codes are informational only; ``lib_cli_exit_tools`` translates
signals itself.
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    """Exit codes following sysexits.h and errno conventions.

    * 0-1: generic success / failure
    * 22: EINVAL (missing or malformed recipient, unknown language)
    * 67: EX_NOUSER (no account with the given uid)
    * 69: EX_UNAVAILABLE (SMTP transport failed)
    * 78: EX_CONFIG (incomplete or invalid configuration)
    * 128+N: signal N

    Example:
        >>> int(ExitCode.NO_USER)
        67
    """

    SUCCESS = 0
    GENERAL_ERROR = 1
    INVALID_ARGUMENT = 22
    NO_USER = 67
    SMTP_FAILURE = 69
    CONFIG_ERROR = 78
    SIGNAL_INT = 130
    SIGNAL_TERM = 143


__all__ = ["ExitCode"]

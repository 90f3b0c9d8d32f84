"""POSIX-conventional exit codes for CLI error paths.

Every ``SystemExit`` raised by a command carries one of these values
instead of a bare ``1``.

Contents:
    * :class:`ExitCode`: IntEnum of all exit codes used by this application.
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    """Exit codes following sysexits.h and errno conventions.

    * 0–1: generic success / failure
    * 2: ENOENT (content file not found)
    * 22: EINVAL (request failed validation)
    * 69: EX_UNAVAILABLE (provider or store unavailable)
    * 78: EX_CONFIG (missing or invalid configuration)

    Example:
        >>> int(ExitCode.SEND_FAILURE)
        69
    """

    SUCCESS = 0
    GENERAL_ERROR = 1
    FILE_NOT_FOUND = 2
    INVALID_ARGUMENT = 22
    SEND_FAILURE = 69
    CONFIG_ERROR = 78


__all__ = ["ExitCode"]

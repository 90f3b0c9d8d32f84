"""Type-safe domain enums for output formats and store backends."""

from __future__ import annotations

from enum import Enum


class OutputFormat(str, Enum):
    """Output format options for configuration display.

    Inherits from str to allow direct string comparison and Click integration.

    Attributes:
        HUMAN: Human-readable TOML-like output format.
        JSON: Machine-readable JSON output format.

    Example:
        >>> OutputFormat.HUMAN.value
        'human'
        >>> OutputFormat.JSON == "json"
        True
    """

    HUMAN = "human"
    JSON = "json"


class StoreBackend(str, Enum):
    """Ephemeral store implementations selectable from configuration.

    Attributes:
        REDIS: Shared Redis instance (production).
        MEMORY: Process-local dictionary (tests, dry runs).

    Example:
        >>> StoreBackend("redis") is StoreBackend.REDIS
        True
    """

    REDIS = "redis"
    MEMORY = "memory"


class LookupStatus(str, Enum):
    """Outcome of a one-time content lookup in the ephemeral store."""

    FOUND = "found"
    MISSING = "missing"
    FAILED = "failed"


__all__ = [
    "LookupStatus",
    "OutputFormat",
    "StoreBackend",
]

"""In-memory logging adapter for testing.

Leaves lib_log_rich uninitialised so records flow through stdlib logging
only, where pytest's ``caplog`` can assert on them.
"""

from __future__ import annotations

from lib_layered_config import Config


def init_logging_in_memory(config: Config) -> None:
    """Skip lib_log_rich runtime setup; satisfies the InitLogging protocol."""


__all__ = ["init_logging_in_memory"]

"""Ephemeral store adapter - one-time content passed by reference.

Structure:
    * :mod:`.config` - StoreConfig model and loader
    * :mod:`.redis_store` - Redis implementation
    * :mod:`.factory` - ``open_store`` backend selection
"""

from __future__ import annotations

from .config import StoreConfig, load_store_config_from_dict
from .factory import open_store
from .redis_store import RedisStore

__all__ = [
    "RedisStore",
    "StoreConfig",
    "load_store_config_from_dict",
    "open_store",
]

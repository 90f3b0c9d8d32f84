"""Build the configured ephemeral store."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from brevo_relay.domain.enums import StoreBackend

from .config import load_store_config_from_dict
from .redis_store import RedisStore

if TYPE_CHECKING:
    from brevo_relay.application.ports import EphemeralStore

logger = logging.getLogger(__name__)


def open_store(config_dict: Mapping[str, Any]) -> EphemeralStore:
    """Create the store selected by the ``[store]`` configuration section.

    Args:
        config_dict: Configuration dictionary typically from lib_layered_config.

    Returns:
        A RedisStore, or a process-local InMemoryStore for ``backend = "memory"``.

    Example:
        >>> type(open_store({"store": {"backend": "memory"}})).__name__
        'InMemoryStore'
    """
    store_config = load_store_config_from_dict(config_dict)
    logger.debug("Opening ephemeral store", extra={"backend": store_config.backend.value})

    if store_config.backend is StoreBackend.MEMORY:
        from ..memory.store import InMemoryStore

        return InMemoryStore(default_ttl_seconds=store_config.default_ttl_seconds)

    return RedisStore.from_url(
        store_config.url,
        key_prefix=store_config.key_prefix,
        default_ttl_seconds=store_config.default_ttl_seconds,
    )


__all__ = ["open_store"]

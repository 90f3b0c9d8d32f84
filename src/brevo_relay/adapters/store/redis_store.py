"""Redis-backed ephemeral store.

Content is written by producers (or ``brevo-relay stash-content``) with a
TTL and consumed once by the relay. Redis errors surface as
:class:`~brevo_relay.domain.errors.StoreError`.
"""

from __future__ import annotations

import logging

import redis

from brevo_relay.domain.errors import StoreError

logger = logging.getLogger(__name__)


class RedisStore:
    """Ephemeral store over a single Redis database.

    The client connects lazily, so building a store for a request that
    carries no references costs no round trip.

    Args:
        client: Redis client created with ``decode_responses=True``.
        key_prefix: Prepended to every key (namespacing on a shared instance).
        default_ttl_seconds: Expiry applied by :meth:`put` when the caller
            gives none; None stores without expiry.
    """

    def __init__(self, client: redis.Redis, *, key_prefix: str = "", default_ttl_seconds: int | None = None) -> None:
        self._client = client
        self._key_prefix = key_prefix
        self._default_ttl_seconds = default_ttl_seconds

    @classmethod
    def from_url(cls, url: str, *, key_prefix: str = "", default_ttl_seconds: int | None = None) -> RedisStore:
        """Create a store from a ``redis://`` URL."""
        client = redis.Redis.from_url(url, decode_responses=True)
        return cls(client, key_prefix=key_prefix, default_ttl_seconds=default_ttl_seconds)

    def _full_key(self, key: str) -> str:
        return f"{self._key_prefix}{key}"

    def get(self, key: str) -> object | None:
        try:
            return self._client.get(self._full_key(key))
        except redis.RedisError as exc:
            raise StoreError(f"get {key!r} failed: {exc}") from exc

    def delete(self, key: str) -> None:
        try:
            self._client.delete(self._full_key(key))
        except redis.RedisError as exc:
            raise StoreError(f"delete {key!r} failed: {exc}") from exc

    def put(self, key: str, value: str, *, ttl_seconds: int | None = None) -> None:
        ttl = ttl_seconds if ttl_seconds is not None else self._default_ttl_seconds
        try:
            self._client.set(self._full_key(key), value, ex=ttl)
        except redis.RedisError as exc:
            raise StoreError(f"put {key!r} failed: {exc}") from exc
        logger.debug("Stored ephemeral content", extra={"key": key, "ttl_seconds": ttl})


__all__ = ["RedisStore"]

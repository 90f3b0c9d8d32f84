"""In-memory ephemeral store.

Satisfies the EphemeralStore protocol with a plain dict. Used by tests and
by ``backend = "memory"`` for dry runs. Expiry is recorded but not enforced.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from brevo_relay.domain.errors import StoreError


def _empty_values() -> dict[str, object]:
    return {}


def _empty_ttls() -> dict[str, int | None]:
    return {}


@dataclass
class InMemoryStore:
    """Dict-backed store with switchable failure modes.

    Attributes:
        values: Stored content by key.
        ttls: TTL recorded by :meth:`put` for each key.
        default_ttl_seconds: TTL recorded when :meth:`put` receives none.
        fail_on_get: When True, :meth:`get` raises StoreError.
        fail_on_delete: When True, :meth:`delete` raises StoreError.
        fail_on_put: When True, :meth:`put` raises StoreError.

    Example:
        >>> store = InMemoryStore()
        >>> store.put("k1", "<p>hi</p>")
        >>> store.get("k1")
        '<p>hi</p>'
        >>> store.delete("k1")
        >>> store.get("k1") is None
        True
    """

    values: dict[str, object] = field(default_factory=_empty_values)
    ttls: dict[str, int | None] = field(default_factory=_empty_ttls)
    default_ttl_seconds: int | None = None
    fail_on_get: bool = False
    fail_on_delete: bool = False
    fail_on_put: bool = False

    def get(self, key: str) -> object | None:
        if self.fail_on_get:
            raise StoreError(f"get {key!r} failed: simulated outage")
        return self.values.get(key)

    def delete(self, key: str) -> None:
        if self.fail_on_delete:
            raise StoreError(f"delete {key!r} failed: simulated outage")
        self.values.pop(key, None)
        self.ttls.pop(key, None)

    def put(self, key: str, value: str, *, ttl_seconds: int | None = None) -> None:
        if self.fail_on_put:
            raise StoreError(f"put {key!r} failed: simulated outage")
        self.values[key] = value
        self.ttls[key] = ttl_seconds if ttl_seconds is not None else self.default_ttl_seconds


__all__ = ["InMemoryStore"]

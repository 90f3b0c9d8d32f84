"""Ephemeral store configuration model and loader."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, cast

from pydantic import BaseModel, ConfigDict, field_validator

from brevo_relay.domain.enums import StoreBackend


def mask_url_credentials(url: str) -> str:
    """Replace the userinfo part of a connection URL.

    Examples:
        >>> mask_url_credentials("redis://:hunter2@cache:6379/0")
        'redis://[REDACTED]@cache:6379/0'
        >>> mask_url_credentials("redis://localhost:6379/0")
        'redis://localhost:6379/0'
    """
    scheme, separator, rest = url.partition("://")
    if not separator or "@" not in rest:
        return url
    return f"{scheme}://[REDACTED]@{rest.rsplit('@', 1)[1]}"


class StoreConfig(BaseModel):
    """Validated, immutable settings for the ephemeral content store.

    Example:
        >>> StoreConfig().backend
        <StoreBackend.REDIS: 'redis'>
        >>> StoreConfig(backend="memory", default_ttl_seconds=0).default_ttl_seconds is None
        True
    """

    model_config = ConfigDict(frozen=True)

    backend: StoreBackend = StoreBackend.REDIS
    url: str = "redis://localhost:6379/0"
    key_prefix: str = ""
    default_ttl_seconds: int | None = 3600

    @field_validator("backend", mode="before")
    @classmethod
    def _normalize_backend(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @field_validator("default_ttl_seconds", mode="before")
    @classmethod
    def _coerce_zero_ttl_to_none(cls, v: Any) -> Any:
        """Convert 0 to None (keys never expire on their own)."""
        if v == 0:
            return None
        return v

    def __repr__(self) -> str:
        """Return string representation with any URL password masked.

        Example:
            >>> "hunter2" in repr(StoreConfig(url="redis://:hunter2@cache:6379/0"))
            False
        """
        return (
            f"StoreConfig(backend={self.backend.value!r}, url={mask_url_credentials(self.url)!r}, "
            f"key_prefix={self.key_prefix!r}, default_ttl_seconds={self.default_ttl_seconds!r})"
        )

    def __str__(self) -> str:
        return repr(self)


def load_store_config_from_dict(config_dict: Mapping[str, Any]) -> StoreConfig:
    """Load StoreConfig from the ``[store]`` section of a configuration dictionary.

    Example:
        >>> load_store_config_from_dict({"store": {"backend": "Memory"}}).backend.value
        'memory'
    """
    section: Any = config_dict.get("store", {})
    if not isinstance(section, Mapping):
        return StoreConfig.model_validate(section)
    return StoreConfig.model_validate(dict(cast(Mapping[str, Any], section)))


__all__ = [
    "StoreConfig",
    "load_store_config_from_dict",
    "mask_url_credentials",
]

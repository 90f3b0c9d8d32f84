"""Application ports: Protocol definitions for adapter implementations.

Callable Protocols define a ``__call__`` whose signature matches the
corresponding adapter function, so module-level functions satisfy them via
structural subtyping (PEP 544). :class:`EphemeralStore` is an object
protocol because stores carry a connection.

System Role:
    Sits between domain and adapters. Infrastructure types (``Config``,
    ``BrevoConfig``) are imported under ``TYPE_CHECKING`` only so that
    import-linter layer contracts remain satisfied at runtime.
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import TYPE_CHECKING, Any, Protocol

from ..domain.enums import OutputFormat

if TYPE_CHECKING:
    from lib_layered_config import Config

    from ..adapters.brevo.config import BrevoConfig


class EphemeralStore(Protocol):
    """Transient key-value store holding content passed by reference."""

    def get(self, key: str) -> object | None: ...

    def delete(self, key: str) -> None: ...

    def put(self, key: str, value: str, *, ttl_seconds: int | None = ...) -> None: ...


class DispatchEnvelope(Protocol):
    """Send one envelope to the email provider; True on a 2xx response."""

    def __call__(self, envelope: Mapping[str, Any], *, config: BrevoConfig) -> bool: ...


class OpenStore(Protocol):
    """Build the configured ephemeral store from a configuration dictionary."""

    def __call__(self, config_dict: Mapping[str, Any]) -> EphemeralStore: ...


class LoadBrevoConfigFromDict(Protocol):
    """Load BrevoConfig from a configuration dictionary."""

    def __call__(self, config_dict: Mapping[str, Any]) -> BrevoConfig: ...


class GetConfig(Protocol):
    """Load layered configuration with application defaults."""

    def __call__(self, *, profile: str | None = ..., start_dir: str | None = ...) -> Config: ...


class GetDefaultConfigPath(Protocol):
    """Return the path to the bundled default configuration file."""

    def __call__(self) -> Path: ...


class DisplayConfig(Protocol):
    """Display the provided configuration in the requested format."""

    def __call__(
        self, config: Config, *, output_format: OutputFormat = ..., section: str | None = ..., profile: str | None = ...
    ) -> None: ...


class InitLogging(Protocol):
    """Initialize lib_log_rich runtime with the provided configuration."""

    def __call__(self, config: Config) -> None: ...


__all__ = [
    "DispatchEnvelope",
    "DisplayConfig",
    "EphemeralStore",
    "GetConfig",
    "GetDefaultConfigPath",
    "InitLogging",
    "LoadBrevoConfigFromDict",
    "OpenStore",
]

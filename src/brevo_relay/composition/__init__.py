"""Composition root wiring adapters to application ports."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from ..adapters.brevo import dispatch_envelope, load_brevo_config_from_dict

# Configuration services
from ..adapters.config.display import display_config
from ..adapters.config.loader import get_config, get_default_config_path

# Logging services
from ..adapters.logging.setup import init_logging

# Store services
from ..adapters.store import open_store
from ..application.relay import EmailRelay

# Static conformance assertions: pyright verifies that each adapter function
# structurally satisfies its corresponding Protocol at type-check time.
if TYPE_CHECKING:
    from ..adapters.memory import DispatchSpy, InMemoryStore
    from ..application.ports import (
        DispatchEnvelope,
        DisplayConfig,
        GetConfig,
        GetDefaultConfigPath,
        InitLogging,
        LoadBrevoConfigFromDict,
        OpenStore,
    )

    _assert_get_config: GetConfig = get_config
    _assert_get_default_config_path: GetDefaultConfigPath = get_default_config_path
    _assert_display_config: DisplayConfig = display_config
    _assert_init_logging: InitLogging = init_logging
    _assert_load_brevo_config: LoadBrevoConfigFromDict = load_brevo_config_from_dict
    _assert_open_store: OpenStore = open_store
    _assert_dispatch: DispatchEnvelope = dispatch_envelope


@dataclass(frozen=True, slots=True)
class AppServices:
    """Frozen container holding all application port implementations."""

    get_config: GetConfig
    get_default_config_path: GetDefaultConfigPath
    display_config: DisplayConfig
    init_logging: InitLogging
    load_brevo_config_from_dict: LoadBrevoConfigFromDict
    open_store: OpenStore
    dispatch_envelope: DispatchEnvelope

    def build_relay(self, config_dict: Mapping[str, Any]) -> EmailRelay:
        """Create an EmailRelay from a configuration dictionary.

        Raises:
            pydantic.ValidationError: When the ``[brevo]`` or ``[store]``
                section holds invalid values.
        """
        return EmailRelay(
            config=self.load_brevo_config_from_dict(config_dict),
            store=self.open_store(config_dict),
            dispatch=self.dispatch_envelope,
        )


def build_production() -> AppServices:
    """Wire production adapters into an AppServices container."""
    return AppServices(
        get_config=get_config,
        get_default_config_path=get_default_config_path,
        display_config=display_config,
        init_logging=init_logging,
        load_brevo_config_from_dict=load_brevo_config_from_dict,
        open_store=open_store,
        dispatch_envelope=dispatch_envelope,
    )


def build_testing(*, spy: DispatchSpy | None = None, store: InMemoryStore | None = None) -> AppServices:
    """Wire in-memory adapters into an AppServices container.

    Args:
        spy: Optional DispatchSpy capturing envelopes. A fresh one is created
            when None; pass your own to assert on what was sent.
        store: Optional InMemoryStore shared by every relay built from the
            container; pass your own to seed referenced content.

    Returns:
        AppServices container with in-memory adapters.
    """
    from ..adapters.memory import (
        DispatchSpy,
        InMemoryStore,
        display_config_in_memory,
        get_config_in_memory,
        get_default_config_path_in_memory,
        init_logging_in_memory,
    )

    dispatch_spy = spy if spy is not None else DispatchSpy()
    memory_store = store if store is not None else InMemoryStore()

    def _open_store_in_memory(config_dict: Mapping[str, Any]) -> InMemoryStore:
        return memory_store

    return AppServices(
        get_config=get_config_in_memory,
        get_default_config_path=get_default_config_path_in_memory,
        display_config=display_config_in_memory,
        init_logging=init_logging_in_memory,
        load_brevo_config_from_dict=load_brevo_config_from_dict,
        open_store=_open_store_in_memory,
        dispatch_envelope=dispatch_spy.dispatch,
    )


__all__ = [
    # Configuration
    "get_config",
    "get_default_config_path",
    "display_config",
    # Logging
    "init_logging",
    # Brevo and store
    "dispatch_envelope",
    "load_brevo_config_from_dict",
    "open_store",
    # Composition
    "AppServices",
    "build_production",
    "build_testing",
]

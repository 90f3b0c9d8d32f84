"""In-memory dispatch adapter for testing.

Provides a transport that satisfies the DispatchEnvelope protocol but
performs no HTTP request.

Contents:
    * :class:`DispatchSpy` - Captures envelopes for test assertions.
"""

from __future__ import annotations

import copy
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from ..brevo.config import BrevoConfig


def _empty_envelope_list() -> list[dict[str, Any]]:
    """Create an empty typed list for envelope records."""
    return []


def _empty_config_list() -> list[BrevoConfig]:
    return []


@dataclass
class DispatchSpy:
    """Captures dispatched envelopes for test assertions.

    Each test should create its own DispatchSpy instance to avoid cross-test
    pollution. :meth:`dispatch` matches the DispatchEnvelope protocol.

    Attributes:
        envelopes: Deep copies of every envelope passed to :meth:`dispatch`.
        configs: Provider configuration received with each call.
        should_fail: When True, dispatch returns False (non-2xx response).
        raise_exception: When set, dispatch raises this exception after recording.

    Example:
        >>> spy = DispatchSpy()
        >>> spy.dispatch({"subject": "Hi"}, config=BrevoConfig(api_key="k"))
        True
        >>> spy.envelopes
        [{'subject': 'Hi'}]
    """

    envelopes: list[dict[str, Any]] = field(default_factory=_empty_envelope_list)
    configs: list[BrevoConfig] = field(default_factory=_empty_config_list)
    should_fail: bool = False
    raise_exception: Exception | None = None

    def clear(self) -> None:
        """Reset captured data for next test."""
        self.envelopes.clear()
        self.configs.clear()
        self.raise_exception = None

    def dispatch(self, envelope: Mapping[str, Any], *, config: BrevoConfig) -> bool:
        """Record the call and return success/failure based on spy state.

        Raises:
            Exception: If raise_exception is set, raises that exception.
        """
        self.envelopes.append(copy.deepcopy(dict(envelope)))
        self.configs.append(config)
        if self.raise_exception is not None:
            raise self.raise_exception
        return not self.should_fail


__all__ = ["DispatchSpy"]

"""Per-invocation CLI state and lib_cli_exit_tools traceback switches.

The root group loads configuration once and parks a :class:`CLIContext` on
``ctx.obj``; the send and stash commands read the config and the service
container from there instead of reloading anything.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, NamedTuple

import lib_cli_exit_tools
import rich_click as click
from lib_layered_config import Config

if TYPE_CHECKING:
    from brevo_relay.composition import AppServices


class TracebackState(NamedTuple):
    """lib_cli_exit_tools flags as they were before a CLI run."""

    enabled: bool
    force_color: bool


@dataclass(slots=True)
class CLIContext:
    """State shared by every subcommand of one ``brevo-relay`` run.

    Attributes:
        traceback: ``--traceback`` was given.
        config: Merged layered configuration.
        services: Adapter container chosen by the entry point.
        profile: ``--profile`` value, shown in config provenance.
    """

    traceback: bool
    config: Config
    services: AppServices
    profile: str | None = None
    _config_dict: dict[str, Any] | None = field(default=None, repr=False)

    def config_dict(self) -> dict[str, Any]:
        """Plain-dict view of :attr:`config`, as the relay and store factories expect it."""
        if self._config_dict is None:
            self._config_dict = self.config.as_dict()
        return self._config_dict


def store_cli_context(
    ctx: click.Context,
    *,
    traceback: bool,
    config: Config,
    services: AppServices,
    profile: str | None = None,
) -> None:
    """Replace the services factory on ``ctx.obj`` with the loaded :class:`CLIContext`."""
    ctx.obj = CLIContext(traceback=traceback, config=config, services=services, profile=profile)


def get_cli_context(ctx: click.Context) -> CLIContext:
    """Return the :class:`CLIContext` stored by the root group.

    Raises:
        RuntimeError: When a command runs without the root group, e.g. invoked directly.

    Example:
        >>> from unittest.mock import MagicMock
        >>> ctx = MagicMock()
        >>> ctx.obj = CLIContext(traceback=False, config=MagicMock(), services=MagicMock(), profile="staging")
        >>> get_cli_context(ctx).profile
        'staging'
    """
    state = ctx.obj
    if isinstance(state, CLIContext):
        return state
    raise RuntimeError("brevo-relay commands must run under the root group; CLI context missing.")


def apply_traceback_preferences(enabled: bool) -> None:
    """Turn full (colourised) tracebacks on or off for lib_cli_exit_tools.

    Example:
        >>> apply_traceback_preferences(False)
        >>> lib_cli_exit_tools.config.traceback
        False
    """
    flag = bool(enabled)
    lib_cli_exit_tools.config.traceback = flag
    lib_cli_exit_tools.config.traceback_force_color = flag


def snapshot_traceback_state() -> TracebackState:
    """Read the current lib_cli_exit_tools traceback flags."""
    settings = lib_cli_exit_tools.config
    return TracebackState(
        enabled=bool(getattr(settings, "traceback", False)),
        force_color=bool(getattr(settings, "traceback_force_color", False)),
    )


def restore_traceback_state(state: TracebackState) -> None:
    """Put back flags captured by :func:`snapshot_traceback_state`."""
    enabled, force_color = state
    lib_cli_exit_tools.config.traceback = enabled
    lib_cli_exit_tools.config.traceback_force_color = force_color


__all__ = [
    "CLIContext",
    "TracebackState",
    "apply_traceback_preferences",
    "get_cli_context",
    "restore_traceback_state",
    "snapshot_traceback_state",
    "store_cli_context",
]

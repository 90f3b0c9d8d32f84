"""Shared pytest fixtures for relay, adapter, and CLI tests.

Centralizes test infrastructure:
- All shared fixtures live here
- Tests import fixtures implicitly via pytest's conftest discovery
- Fixtures use descriptive names that read as plain English
"""

from __future__ import annotations

import contextlib
import dataclasses
import os
import re
import tempfile
from collections.abc import Callable, Iterator
from dataclasses import dataclass, fields
from pathlib import Path
from typing import TYPE_CHECKING, Any

import lib_cli_exit_tools
import pytest
from click.testing import CliRunner
from lib_layered_config import Config

if TYPE_CHECKING:
    from brevo_relay.adapters.memory import DispatchSpy, InMemoryStore
    from brevo_relay.application.relay import EmailRelay
    from brevo_relay.composition import AppServices

_COVERAGE_BASENAME = ".coverage.brevo_relay"


def _purge_stale_coverage_files(cov_path: Path) -> None:
    """Delete leftover SQLite database and journal files from crashed runs."""
    for suffix in ("", "-journal", "-wal", "-shm"):
        with contextlib.suppress(FileNotFoundError):
            Path(str(cov_path) + suffix).unlink()


def pytest_configure(config: pytest.Config) -> None:
    """Redirect the coverage database to a local temp directory.

    Runs before ``pytest-cov`` creates its ``Coverage()`` object, so the
    ``COVERAGE_FILE`` value applies however pytest is invoked.
    """
    if "COVERAGE_FILE" not in os.environ:
        cov_path = Path(tempfile.gettempdir()) / _COVERAGE_BASENAME
        _purge_stale_coverage_files(cov_path)
        os.environ["COVERAGE_FILE"] = str(cov_path)


def _load_dotenv() -> None:
    """Load .env file when it exists for integration test configuration."""
    from dotenv import load_dotenv

    env_file = Path(__file__).parent.parent / ".env"
    if env_file.exists():
        load_dotenv(env_file)


_load_dotenv()

ANSI_ESCAPE_PATTERN = re.compile(r"\x1B\[[0-?]*[ -/]*[@-~]")
CONFIG_FIELDS: tuple[str, ...] = tuple(field.name for field in fields(type(lib_cli_exit_tools.config)))


def _remove_ansi_codes(text: str) -> str:
    """Return *text* stripped of ANSI escape sequences."""
    return ANSI_ESCAPE_PATTERN.sub("", text)


def _snapshot_cli_config() -> dict[str, object]:
    """Capture every attribute from ``lib_cli_exit_tools.config``."""
    return {name: getattr(lib_cli_exit_tools.config, name) for name in CONFIG_FIELDS}


def _restore_cli_config(snapshot: dict[str, object]) -> None:
    """Reapply a configuration snapshot captured by ``_snapshot_cli_config``."""
    for name, value in snapshot.items():
        setattr(lib_cli_exit_tools.config, name, value)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a fresh CliRunner per test.

    Use ``result.stdout`` for JSON parsing so log lines on stderr do not
    contaminate the output.
    """
    return CliRunner()


@pytest.fixture
def strip_ansi() -> Callable[[str], str]:
    """Return a helper that strips ANSI escape sequences from a string."""

    def _strip(value: str) -> str:
        return _remove_ansi_codes(value)

    return _strip


@pytest.fixture
def managed_traceback_state() -> Iterator[None]:
    """Reset traceback flags to a known baseline and restore after the test."""
    lib_cli_exit_tools.reset_config()
    lib_cli_exit_tools.config.traceback = False
    lib_cli_exit_tools.config.traceback_force_color = False
    snapshot = _snapshot_cli_config()
    try:
        yield
    finally:
        _restore_cli_config(snapshot)


@pytest.fixture
def clear_config_cache() -> Iterator[None]:
    """Clear the get_config lru_cache before each test.

    Only clears before, not after, because a test may have monkeypatched
    the function away.
    """
    from brevo_relay.adapters.config import loader as config_mod

    config_mod.get_config.cache_clear()
    yield


@pytest.fixture
def config_factory() -> Callable[[dict[str, Any]], Config]:
    """Create real Config instances from test data dicts without filesystem I/O.

    Example:
        def test_brevo_section(config_factory: Callable[[dict[str, Any]], Config]) -> None:
            config = config_factory({"brevo": {"api_key": "k"}})
            assert config.get("brevo.api_key") == "k"
    """

    def _factory(data: dict[str, Any]) -> Config:
        return Config(data, {})

    return _factory


@pytest.fixture
def dispatch_spy() -> DispatchSpy:
    """Provide a fresh DispatchSpy that accepts every envelope."""
    from brevo_relay.adapters.memory import DispatchSpy

    return DispatchSpy()


@pytest.fixture
def memory_store() -> InMemoryStore:
    """Provide an empty in-memory ephemeral store."""
    from brevo_relay.adapters.memory import InMemoryStore

    return InMemoryStore()


@pytest.fixture
def relay(dispatch_spy: DispatchSpy, memory_store: InMemoryStore) -> EmailRelay:
    """Provide an EmailRelay wired to the spy and the in-memory store.

    Example:
        def test_send(relay: EmailRelay, dispatch_spy: DispatchSpy) -> None:
            relay.send_email(sender, [recipient], None, "Hi", text_content="Hello")
            assert len(dispatch_spy.envelopes) == 1
    """
    from brevo_relay.adapters.brevo import BrevoConfig
    from brevo_relay.application.relay import EmailRelay

    return EmailRelay(config=BrevoConfig(api_key="test-api-key"), store=memory_store, dispatch=dispatch_spy.dispatch)


@dataclass
class RelayCliContext:
    """Container for send-command test setup.

    Attributes:
        factory: Callable that returns wired AppServices for CLI invocation.
        spy: DispatchSpy capturing every envelope the relay dispatched.
        store: InMemoryStore shared by every relay the factory builds.
    """

    factory: Callable[[], Any]
    spy: DispatchSpy
    store: InMemoryStore


@pytest.fixture
def relay_cli_context(
    clear_config_cache: None,
) -> Callable[..., RelayCliContext]:
    """Create a CLI test context with in-memory transport and store.

    Called without arguments, the in-memory configuration (test API key,
    memory store) applies. Pass a config dict to replace it entirely.

    Example:
        def test_send_email(cli_runner: CliRunner, relay_cli_context: Callable[..., RelayCliContext]) -> None:
            ctx = relay_cli_context()
            result = cli_runner.invoke(cli, ["send-email", ...], obj=ctx.factory)
            assert ctx.spy.envelopes[0]["subject"] == "Hi"
    """
    from brevo_relay.adapters.memory import DispatchSpy as DispatchSpyImpl
    from brevo_relay.adapters.memory import InMemoryStore as InMemoryStoreImpl
    from brevo_relay.composition import build_testing

    def _create(config_data: dict[str, Any] | None = None) -> RelayCliContext:
        spy = DispatchSpyImpl()
        store = InMemoryStoreImpl()
        services = build_testing(spy=spy, store=store)
        if config_data is not None:
            config = Config(config_data, {})

            def _fake_get_config(**_kwargs: Any) -> Config:
                return config

            services = dataclasses.replace(services, get_config=_fake_get_config)
        return RelayCliContext(factory=lambda: services, spy=spy, store=store)

    return _create


@pytest.fixture
def config_cli_context(
    clear_config_cache: None,
) -> Callable[[dict[str, Any]], Callable[[], AppServices]]:
    """Create a CLI test context with injected config and the real display.

    Example:
        def test_config_display(cli_runner: CliRunner, config_cli_context: ...) -> None:
            factory = config_cli_context({"store": {"backend": "memory"}})
            result = cli_runner.invoke(cli, ["config"], obj=factory)
            assert "memory" in result.output
    """
    from brevo_relay.adapters.memory import init_logging_in_memory
    from brevo_relay.composition import build_production

    def _create(config_data: dict[str, Any]) -> Callable[[], AppServices]:
        config = Config(config_data, {})

        def _fake_get_config(**_kwargs: Any) -> Config:
            return config

        test_services = dataclasses.replace(
            build_production(),
            get_config=_fake_get_config,
            init_logging=init_logging_in_memory,
        )
        return lambda: test_services

    return _create

"""Config and stash-content command stories."""

from __future__ import annotations

import dataclasses
from collections.abc import Callable
from pathlib import Path
from typing import TYPE_CHECKING, Any

import pytest
from click.testing import CliRunner

from brevo_relay.adapters import cli as cli_mod

if TYPE_CHECKING:
    from conftest import RelayCliContext

    from brevo_relay.composition import AppServices

SAMPLE_CONFIG: dict[str, Any] = {
    "brevo": {"api_key": "xkeysib-top-secret", "api_url": "https://api.brevo.com/v3/smtp/email", "timeout": 30.0},
    "store": {"backend": "memory", "key_prefix": "relay:"},
}

# ======================== config ========================


@pytest.mark.os_agnostic
def test_config_displays_sections_without_the_api_key(
    cli_runner: CliRunner,
    config_cli_context: Callable[[dict[str, Any]], Callable[[], AppServices]],
) -> None:
    factory = config_cli_context(SAMPLE_CONFIG)

    result = cli_runner.invoke(cli_mod.cli, ["config"], obj=factory)

    assert result.exit_code == 0
    assert "brevo" in result.output
    assert "relay:" in result.output
    assert "xkeysib-top-secret" not in result.output


@pytest.mark.os_agnostic
def test_config_json_section_shows_only_store_values(
    cli_runner: CliRunner,
    config_cli_context: Callable[[dict[str, Any]], Callable[[], AppServices]],
) -> None:
    factory = config_cli_context(SAMPLE_CONFIG)

    result = cli_runner.invoke(cli_mod.cli, ["config", "--format", "json", "--section", "store"], obj=factory)

    assert result.exit_code == 0
    assert "relay:" in result.stdout
    assert "xkeysib-top-secret" not in result.stdout


@pytest.mark.os_agnostic
def test_config_unknown_section_exits_invalid_argument(
    cli_runner: CliRunner,
    config_cli_context: Callable[[dict[str, Any]], Callable[[], AppServices]],
) -> None:
    factory = config_cli_context(SAMPLE_CONFIG)

    result = cli_runner.invoke(cli_mod.cli, ["config", "--section", "nonexistent"], obj=factory)

    assert result.exit_code == 22
    assert "not found" in result.output


@pytest.mark.os_agnostic
def test_config_rejects_unknown_format(
    cli_runner: CliRunner,
    config_cli_context: Callable[[dict[str, Any]], Callable[[], AppServices]],
) -> None:
    factory = config_cli_context(SAMPLE_CONFIG)

    result = cli_runner.invoke(cli_mod.cli, ["config", "--format", "yaml"], obj=factory)

    assert result.exit_code == 2


# ======================== stash-content ========================


@pytest.mark.os_agnostic
def test_stash_content_stores_inline_value(
    cli_runner: CliRunner,
    relay_cli_context: Callable[..., RelayCliContext],
) -> None:
    ctx = relay_cli_context()

    result = cli_runner.invoke(cli_mod.cli, ["stash-content", "k1", "--value", "<p>hi</p>"], obj=ctx.factory)

    assert result.exit_code == 0
    assert "Stored 9 characters under 'k1'" in result.output
    assert ctx.store.values == {"k1": "<p>hi</p>"}
    assert ctx.store.ttls == {"k1": None}


@pytest.mark.os_agnostic
def test_stash_content_reads_file_and_applies_ttl(
    cli_runner: CliRunner,
    relay_cli_context: Callable[..., RelayCliContext],
    tmp_path: Path,
) -> None:
    ctx = relay_cli_context()
    body = tmp_path / "body.html"
    body.write_text("<h1>Report</h1>", encoding="utf-8")

    args = ["stash-content", "report", "--file", str(body), "--ttl", "120"]
    result = cli_runner.invoke(cli_mod.cli, args, obj=ctx.factory)

    assert result.exit_code == 0
    assert ctx.store.values == {"report": "<h1>Report</h1>"}
    assert ctx.store.ttls == {"report": 120}


@pytest.mark.os_agnostic
def test_stash_content_then_send_consumes_the_key(
    cli_runner: CliRunner,
    relay_cli_context: Callable[..., RelayCliContext],
) -> None:
    ctx = relay_cli_context()
    envelope = ["--from", "Ada <ada@example.com>", "--to", "Grace <grace@example.org>", "--subject", "Hi"]

    cli_runner.invoke(cli_mod.cli, ["stash-content", "k1", "--value", "Plain body"], obj=ctx.factory)
    result = cli_runner.invoke(cli_mod.cli, ["send-email", *envelope, "--text-key", "k1"], obj=ctx.factory)

    assert result.exit_code == 0
    assert ctx.spy.envelopes[0]["textContent"] == "Plain body"
    assert ctx.store.values == {}


@pytest.mark.os_agnostic
def test_stash_content_missing_file_exits_file_not_found(
    cli_runner: CliRunner,
    relay_cli_context: Callable[..., RelayCliContext],
    tmp_path: Path,
) -> None:
    ctx = relay_cli_context()

    args = ["stash-content", "k1", "--file", str(tmp_path / "absent.html")]
    result = cli_runner.invoke(cli_mod.cli, args, obj=ctx.factory)

    assert result.exit_code == 2
    assert "Content file not found" in result.output
    assert ctx.store.values == {}


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    "extra_args",
    [[], ["--value", "a", "--file", "b.html"]],
    ids=["neither", "both"],
)
def test_stash_content_needs_exactly_one_source(
    cli_runner: CliRunner,
    relay_cli_context: Callable[..., RelayCliContext],
    extra_args: list[str],
) -> None:
    ctx = relay_cli_context()

    result = cli_runner.invoke(cli_mod.cli, ["stash-content", "k1", *extra_args], obj=ctx.factory)

    assert result.exit_code == 2
    assert "exactly one of --value or --file" in result.output
    assert ctx.store.values == {}


@pytest.mark.os_agnostic
def test_stash_content_rejects_non_positive_ttl(
    cli_runner: CliRunner,
    relay_cli_context: Callable[..., RelayCliContext],
) -> None:
    ctx = relay_cli_context()

    result = cli_runner.invoke(cli_mod.cli, ["stash-content", "k1", "--value", "x", "--ttl", "0"], obj=ctx.factory)

    assert result.exit_code == 2
    assert ctx.store.values == {}


@pytest.mark.os_agnostic
def test_stash_content_store_outage_exits_send_failure(
    cli_runner: CliRunner,
    relay_cli_context: Callable[..., RelayCliContext],
) -> None:
    ctx = relay_cli_context()
    ctx.store.fail_on_put = True

    result = cli_runner.invoke(cli_mod.cli, ["stash-content", "k1", "--value", "x"], obj=ctx.factory)

    assert result.exit_code == 69
    assert "Could not store content" in result.output


@pytest.mark.os_agnostic
def test_stash_content_invalid_store_config_exits_invalid_argument(
    cli_runner: CliRunner,
    relay_cli_context: Callable[..., RelayCliContext],
) -> None:
    from brevo_relay.adapters.store import open_store

    ctx = relay_cli_context({"store": {"backend": "memcached"}})
    services = dataclasses.replace(ctx.factory(), open_store=open_store)

    result = cli_runner.invoke(cli_mod.cli, ["stash-content", "k1", "--value", "x"], obj=lambda: services)

    assert result.exit_code == 22
    assert "Invalid configuration" in result.output

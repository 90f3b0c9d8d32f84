"""Configuration stories: bundled defaults, profile validation, secret redaction, display wrapper."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest
from lib_layered_config import Config

from brevo_relay.adapters.config.display import REDACTED, display_config, redact_secrets
from brevo_relay.adapters.config.loader import get_config, get_default_config_path, validate_profile
from brevo_relay.domain.enums import OutputFormat

# ======================== Bundled defaults ========================


@pytest.mark.os_agnostic
def test_default_config_file_ships_with_the_package() -> None:
    path = get_default_config_path()

    assert path.is_file()
    text = path.read_text(encoding="utf-8")
    assert "[brevo]" in text
    assert "[store]" in text
    assert "[lib_log_rich]" in text


@pytest.mark.os_agnostic
def test_get_config_exposes_bundled_defaults(clear_config_cache: None) -> None:
    config = get_config()

    assert config.get("brevo.api_url") == "https://api.brevo.com/v3/smtp/email"
    assert config.get("store.backend") in {"redis", "memory"}


@pytest.mark.os_agnostic
def test_get_config_is_cached_per_arguments(clear_config_cache: None) -> None:
    assert get_config() is get_config()


# ======================== Profiles ========================


@pytest.mark.os_agnostic
@pytest.mark.parametrize("profile", ["production", "staging-eu", "test_1"])
def test_safe_profile_names_are_accepted(profile: str) -> None:
    validate_profile(profile)


@pytest.mark.os_agnostic
@pytest.mark.parametrize("profile", ["../etc", "a/b"])
def test_unsafe_profile_names_are_rejected(profile: str) -> None:
    with pytest.raises(ValueError):
        validate_profile(profile)


@pytest.mark.os_agnostic
def test_get_config_rejects_path_traversal_profiles(clear_config_cache: None) -> None:
    with pytest.raises(ValueError):
        get_config(profile="../../secrets")


# ======================== redact_secrets ========================


@pytest.mark.os_agnostic
def test_api_key_is_redacted(config_factory: Callable[[dict[str, Any]], Config]) -> None:
    config = config_factory({"brevo": {"api_key": "xkeysib-secret", "timeout": 30.0}})

    redacted = redact_secrets(config)

    assert redacted.get("brevo.api_key") == REDACTED
    assert redacted.get("brevo.timeout") == 30.0
    assert config.get("brevo.api_key") == "xkeysib-secret"


@pytest.mark.os_agnostic
def test_store_url_password_is_redacted(config_factory: Callable[[dict[str, Any]], Config]) -> None:
    config = config_factory({"store": {"url": "redis://:hunter2@cache:6379/0", "backend": "redis"}})

    redacted = redact_secrets(config)

    assert redacted.get("store.url") == "redis://[REDACTED]@cache:6379/0"
    assert redacted.get("store.backend") == "redis"


@pytest.mark.os_agnostic
def test_config_without_secrets_is_returned_unchanged(config_factory: Callable[[dict[str, Any]], Config]) -> None:
    config = config_factory({"brevo": {"api_key": ""}, "store": {"url": "redis://localhost:6379/0"}})

    assert redact_secrets(config) is config


# ======================== display_config ========================


@pytest.mark.os_agnostic
def test_display_config_raises_for_nonexistent_section(
    config_factory: Callable[[dict[str, Any]], Config],
) -> None:
    config = config_factory({"brevo": {"api_url": "https://api.brevo.com/v3/smtp/email"}})

    with pytest.raises(ValueError, match="not found"):
        display_config(config, output_format=OutputFormat.HUMAN, section="nonexistent")


@pytest.mark.os_agnostic
def test_display_human_renders_sections_without_the_api_key(capsys: pytest.CaptureFixture[str]) -> None:
    config = Config({"brevo": {"api_key": "xkeysib-secret", "timeout": 30.0}}, {})

    display_config(config, output_format=OutputFormat.HUMAN)

    output = capsys.readouterr().out
    assert "[brevo]" in output
    assert "xkeysib-secret" not in output


@pytest.mark.os_agnostic
def test_display_json_renders_sections_without_the_api_key(capsys: pytest.CaptureFixture[str]) -> None:
    config = Config({"brevo": {"api_key": "xkeysib-secret"}, "store": {"backend": "memory"}}, {})

    display_config(config, output_format=OutputFormat.JSON, section="store")

    output = capsys.readouterr().out
    assert '"backend": "memory"' in output
    assert "xkeysib-secret" not in output

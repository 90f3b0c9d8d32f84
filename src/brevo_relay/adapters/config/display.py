"""Display configuration with secrets masked.

Wraps lib_layered_config's Rich-styled display. The Brevo API key and any
password in the store URL are replaced before rendering, and pending log
output is flushed first so the two never interleave.
"""

from __future__ import annotations

from typing import Any, Final

import lib_log_rich.runtime
from lib_layered_config import Config
from lib_layered_config import OutputFormat as LibOutputFormat
from lib_layered_config import display_config as _lib_display
from rich.console import Console

from brevo_relay.domain.enums import OutputFormat

from ..store.config import mask_url_credentials

REDACTED: Final[str] = "[REDACTED]"


def redact_secrets(config: Config) -> Config:
    """Return a Config whose secret values are masked.

    Example:
        >>> cfg = Config({"brevo": {"api_key": "xkeysib-1"}}, {})
        >>> redact_secrets(cfg)["brevo"]["api_key"]
        '[REDACTED]'
        >>> redact_secrets(Config({}, {})).as_dict()
        {}
    """
    overrides: dict[str, dict[str, Any]] = {}
    if config.get("brevo.api_key"):
        overrides["brevo"] = {"api_key": REDACTED}
    store_url = config.get("store.url")
    if isinstance(store_url, str) and "@" in store_url:
        overrides["store"] = {"url": mask_url_credentials(store_url)}
    if not overrides:
        return config
    return config.with_overrides(overrides)


def display_config(
    config: Config,
    *,
    output_format: OutputFormat = OutputFormat.HUMAN,
    section: str | None = None,
    console: Console | None = None,
    profile: str | None = None,
) -> None:
    """Render configuration using lib_layered_config's Rich display.

    Args:
        config: Already-loaded layered configuration object to display.
        output_format: HUMAN for TOML-like display or JSON.
        section: Only display this section when given.
        console: Optional Rich Console for output, mainly for tests.
        profile: Optional profile name to include in provenance comments.

    Raises:
        ValueError: If a section was requested that doesn't exist.
    """
    if lib_log_rich.runtime.is_initialised():
        lib_log_rich.runtime.flush()

    lib_format = LibOutputFormat(output_format.value)
    _lib_display(redact_secrets(config), output_format=lib_format, section=section, profile=profile, console=console)


__all__ = ["display_config", "redact_secrets"]

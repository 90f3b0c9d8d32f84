"""Read the relay's layered configuration once per process.

Sections used by the relay:

* ``[brevo]`` - API key, endpoint and request timeout.
* ``[store]`` - ephemeral store backend, URL, key prefix and default TTL.
* ``[lib_log_rich]`` - logging runtime options.

Layers are merged by lib_layered_config in the order defaults, app, host,
user, dotenv, environment. Environment variables take the form
``BREVO_RELAY___<SECTION>__<KEY>``, e.g. ``BREVO_RELAY___BREVO__API_KEY``.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Final

from lib_layered_config import DEFAULT_MAX_PROFILE_LENGTH, Config, read_config, validate_profile_name

from brevo_relay import __init__conf__

DEFAULT_CONFIG_FILENAME: Final[str] = "defaultconfig.toml"


def validate_profile(profile: str, max_length: int = DEFAULT_MAX_PROFILE_LENGTH) -> None:
    """Refuse profile names that could escape the config directories.

    Raises:
        ValueError: For path separators, traversal or over-long names.

    Example:
        >>> validate_profile("production")
    """
    validate_profile_name(profile, max_length=max_length)


def get_default_config_path() -> Path:
    """Location of the defaults shipped inside the wheel.

    Example:
        >>> get_default_config_path().name
        'defaultconfig.toml'
    """
    return Path(__file__).with_name(DEFAULT_CONFIG_FILENAME)


@lru_cache(maxsize=4)
def get_config(*, profile: str | None = None, start_dir: str | None = None) -> Config:
    """Merge every configuration layer; the result is reused for identical arguments.

    Args:
        profile: Adds ``profile/<name>/`` to every searched directory.
        start_dir: Where ``.env`` discovery starts; the cwd when None.

    Raises:
        ValueError: When ``profile`` is not a safe name.
    """
    if profile is not None:
        validate_profile(profile)
    return read_config(
        vendor=__init__conf__.LAYEREDCONF_VENDOR,
        app=__init__conf__.LAYEREDCONF_APP,
        slug=__init__conf__.LAYEREDCONF_SLUG,
        profile=profile,
        default_file=get_default_config_path(),
        start_dir=start_dir,
    )


__all__ = [
    "DEFAULT_CONFIG_FILENAME",
    "get_config",
    "get_default_config_path",
    "validate_profile",
]

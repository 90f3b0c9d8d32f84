"""Brevo API configuration model and loader.

Provides the BrevoConfig Pydantic model for validated, immutable provider
settings and the loader function to create it from configuration dictionaries.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Final, cast

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

DEFAULT_API_URL: Final[str] = "https://api.brevo.com/v3/smtp/email"


class BrevoConfig(BaseModel):
    """Validated, immutable Brevo transactional email settings.

    Example:
        >>> config = BrevoConfig(api_key="xkeysib-123")
        >>> config.api_url
        'https://api.brevo.com/v3/smtp/email'
        >>> config.timeout
        30.0
    """

    model_config = ConfigDict(frozen=True)

    api_key: str | None = None
    api_url: str = DEFAULT_API_URL
    timeout: float = 30.0

    @field_validator("api_key", mode="before")
    @classmethod
    def _coerce_empty_string_to_none(cls, v: str | None) -> str | None:
        """Treat empty or whitespace-only keys from config files as "not configured"."""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @model_validator(mode="after")
    def _validate_config(self) -> BrevoConfig:
        """Catch common configuration mistakes early.

        Raises:
            ValueError: When configuration values are invalid.

        Example:
            >>> BrevoConfig(timeout=0)  # doctest: +IGNORE_EXCEPTION_DETAIL
            Traceback (most recent call last):
            ...
            ValidationError: ...
        """
        if self.timeout <= 0:
            raise ValueError(f"timeout must be positive, got {self.timeout}")
        if not self.api_url.startswith(("https://", "http://")):
            raise ValueError(f"api_url must be an http(s) URL, got {self.api_url!r}")
        return self

    def __repr__(self) -> str:
        """Return string representation with api_key redacted.

        Example:
            >>> config = BrevoConfig(api_key="xkeysib-secret")
            >>> "xkeysib-secret" in repr(config)
            False
            >>> "[REDACTED]" in repr(config)
            True
        """
        fields: list[str] = []
        for name, value in self:
            if name == "api_key" and value is not None:
                fields.append(f"{name}='[REDACTED]'")
            else:
                fields.append(f"{name}={value!r}")
        return f"BrevoConfig({', '.join(fields)})"

    def __str__(self) -> str:
        return repr(self)


def load_brevo_config_from_dict(config_dict: Mapping[str, Any]) -> BrevoConfig:
    """Load BrevoConfig from the ``[brevo]`` section of a configuration dictionary.

    Args:
        config_dict: Configuration dictionary typically from lib_layered_config.

    Returns:
        Provider settings with defaults for missing values.

    Example:
        >>> load_brevo_config_from_dict({"brevo": {"api_key": "k", "timeout": 5}}).timeout
        5.0
        >>> load_brevo_config_from_dict({}).api_key is None
        True
    """
    section: Any = config_dict.get("brevo", {})
    if not isinstance(section, Mapping):
        return BrevoConfig.model_validate(section)
    return BrevoConfig.model_validate(dict(cast(Mapping[str, Any], section)))


__all__ = [
    "DEFAULT_API_URL",
    "BrevoConfig",
    "load_brevo_config_from_dict",
]

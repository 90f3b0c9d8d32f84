"""HTTP transport posting envelopes to the Brevo transactional email API.

One request per send, no retry, and the response body is never inspected:
a 2xx status is success, anything else is failure.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

import httpx
import orjson

from brevo_relay.domain.errors import ConfigurationError, DeliveryError

from .config import BrevoConfig

logger = logging.getLogger(__name__)


def _build_headers(api_key: str) -> dict[str, str]:
    return {
        "accept": "application/json",
        "api-key": api_key,
        "content-type": "application/json",
    }


def _require_api_key(config: BrevoConfig) -> str:
    """Return the configured API key.

    Raises:
        ConfigurationError: When no API key is configured.
    """
    if config.api_key is None:
        raise ConfigurationError("No Brevo API key configured (brevo.api_key is empty)")
    return config.api_key


def dispatch_envelope(envelope: Mapping[str, Any], *, config: BrevoConfig) -> bool:
    """POST one envelope to the Brevo API.

    Args:
        envelope: JSON-serialisable provider payload.
        config: Provider settings with API key, endpoint, and timeout.

    Returns:
        True for a 2xx response, False for any other status.

    Raises:
        ConfigurationError: No API key configured.
        DeliveryError: The HTTP request itself failed (connection, timeout).

    Side Effects:
        Network I/O. Logs the response status at INFO, failures at WARNING.
    """
    api_key = _require_api_key(config)
    body = orjson.dumps(envelope)

    try:
        response = httpx.post(
            config.api_url,
            content=body,
            headers=_build_headers(api_key),
            timeout=config.timeout,
        )
    except httpx.HTTPError as exc:
        logger.debug("Brevo request failed", exc_info=True)
        raise DeliveryError(f"Request to {config.api_url} failed: {type(exc).__name__}") from exc

    if response.is_success:
        logger.info("Brevo accepted email", extra={"status_code": response.status_code})
        return True

    logger.warning("Brevo rejected email", extra={"status_code": response.status_code})
    return False


__all__ = ["dispatch_envelope"]

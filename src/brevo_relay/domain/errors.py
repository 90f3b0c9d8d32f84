"""Domain-specific exceptions for typed error handling at boundaries.

None of these escape the relay's entry operations: the relay converts them
into result data. They are raised by adapters and caught by the application
layer or the CLI.
"""

from __future__ import annotations


class ConfigurationError(Exception):
    """Missing, invalid, or incomplete configuration.

    Raised when required configuration values are absent, malformed, or
    logically inconsistent (for example, no Brevo API key). Typically caught
    at CLI boundaries to provide user-friendly error messages.

    Example:
        >>> from brevo_relay.domain.errors import ConfigurationError
        >>> err = ConfigurationError("No Brevo API key configured")
        >>> str(err)
        'No Brevo API key configured'
    """


class DeliveryError(Exception):
    """The outbound call to the email provider could not be completed.

    Raised by the transport when the HTTP request itself fails (connection
    refused, timeout, protocol error). A non-2xx response is not a
    DeliveryError; the transport reports it as an unsuccessful send.

    Example:
        >>> from brevo_relay.domain.errors import DeliveryError
        >>> err = DeliveryError("Connection refused by api.brevo.com")
        >>> str(err)
        'Connection refused by api.brevo.com'
    """


class StoreError(Exception):
    """The ephemeral key-value store failed a get, put, or delete.

    Example:
        >>> from brevo_relay.domain.errors import StoreError
        >>> str(StoreError("store unreachable"))
        'store unreachable'
    """


__all__ = [
    "ConfigurationError",
    "DeliveryError",
    "StoreError",
]

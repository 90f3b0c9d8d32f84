"""One-time retrieval of body content passed by reference.

Large bodies do not travel inline: the caller stores them in the ephemeral
store and sends ``{"key": "<store key>"}`` instead. A key is consumed on
first read. :func:`fetch_once` keeps "missing" and "failed" apart for
logging and tests; :func:`resolve_content` collapses both to ``""`` at the
validator boundary.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, cast

from ..domain.enums import LookupStatus
from .ports import EphemeralStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ContentLookup:
    """Outcome of a single get-then-delete against the store."""

    key: str
    status: LookupStatus
    value: object = None
    detail: str | None = None

    @property
    def found(self) -> bool:
        return self.status is LookupStatus.FOUND


def content_reference(value: object) -> str | None:
    """Return the store key when ``value`` is a ``{"key": ...}`` reference.

    Examples:
        >>> content_reference({"key": "k1"})
        'k1'
        >>> content_reference({"key": ""}) is None
        True
        >>> content_reference("<p>inline</p>") is None
        True
    """
    if not isinstance(value, Mapping):
        return None
    key = cast(Mapping[str, Any], value).get("key")
    if not key:
        return None
    return str(key)


def fetch_once(store: EphemeralStore, key: str) -> ContentLookup:
    """Read ``key`` from the store and delete it.

    The delete is best effort: when it fails the retrieved value is still
    returned and the failure is only logged.

    Args:
        store: Ephemeral store to consume from.
        key: Store key carried by the request.

    Returns:
        Lookup outcome. Never raises.
    """
    try:
        value = store.get(key)
    except Exception as exc:  # any store failure downgrades to "no content"
        logger.warning(
            "Ephemeral content fetch failed",
            extra={"key": key, "error": str(exc), "error_type": type(exc).__name__},
        )
        return ContentLookup(key=key, status=LookupStatus.FAILED, detail=str(exc))

    if value is None:
        logger.info("Ephemeral content key not found", extra={"key": key})
        return ContentLookup(key=key, status=LookupStatus.MISSING)

    try:
        store.delete(key)
    except Exception as exc:  # delete outcome is not surfaced
        logger.warning(
            "Ephemeral content delete failed",
            extra={"key": key, "error": str(exc), "error_type": type(exc).__name__},
        )

    logger.debug("Ephemeral content consumed", extra={"key": key})
    return ContentLookup(key=key, status=LookupStatus.FOUND, value=value)


def resolve_content(store: EphemeralStore, key: str) -> object:
    """Return the referenced content, or ``""`` when it cannot be retrieved."""
    lookup = fetch_once(store, key)
    return lookup.value if lookup.found else ""


__all__ = [
    "ContentLookup",
    "content_reference",
    "fetch_once",
    "resolve_content",
]

"""Project validated request fields into the provider's JSON envelope."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from .validation import as_contact_mapping


def _project_contact(value: object) -> dict[str, Any]:
    """Reduce a contact to exactly ``{name, email}``, dropping extra keys."""
    mapping = as_contact_mapping(value)
    if mapping is None:
        raise TypeError(f"contact must be a mapping, got {type(value).__name__}")
    return {"name": mapping.get("name"), "email": mapping.get("email")}


def build_envelope(
    sender: object,
    recipients: Sequence[object],
    reply_to: object,
    subject: str,
) -> dict[str, Any]:
    """Assemble the base envelope shared by raw and template sends.

    Only call this on input that passed validation; recipient order is the
    send order and duplicates are kept.

    Example:
        >>> ada = {"name": "Ada", "email": "ada@example.com", "id": 7}
        >>> envelope = build_envelope(ada, [ada, ada], ada, "Hi")
        >>> envelope["sender"]
        {'name': 'Ada', 'email': 'ada@example.com'}
        >>> len(envelope["to"])
        2
    """
    return {
        "sender": _project_contact(sender),
        "to": [_project_contact(recipient) for recipient in recipients],
        "replyTo": _project_contact(reply_to),
        "subject": subject,
    }


__all__ = ["build_envelope"]

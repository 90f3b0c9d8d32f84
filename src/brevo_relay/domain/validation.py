"""Structural validation of email-send requests.

Every rule runs independently and all violations are collected; nothing here
raises. The order of the returned errors is fixed: sender, recipients in
ascending index, reply-to, subject. Content and template rules append after
these in the relay.

Contents:
    * :func:`is_valid_email` - conservative ``local@domain.tld`` syntax check.
    * :func:`is_empty` - falsy test matching the wire payload semantics.
    * :func:`as_recipient_list` - coerce a single recipient to a sequence.
    * :func:`default_reply_to` - ``noreply@<sender domain>`` fallback.
    * :func:`validate_request` - sender/to/replyTo/subject rules.
    * :func:`validate_content` - htmlContent/textContent presence and type.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import asdict
from typing import Any, Final, cast

from .models import Contact, FieldError

_EMAIL_PATTERN: Final = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")

#: Domain used for the derived reply-to when the sender address has none.
UNKNOWN_DOMAIN: Final[str] = "undefined"

NOREPLY_NAME: Final[str] = "noreply"


def is_valid_email(value: object) -> bool:
    """Return True when ``value`` looks like ``local@domain.tld``.

    Local and domain parts may not contain whitespace or ``@`` and the domain
    needs at least one dot. Exotic but legal addresses may be rejected.

    Examples:
        >>> is_valid_email("ada@example.com")
        True
        >>> is_valid_email("ada@localhost")
        False
        >>> is_valid_email("ada lovelace@example.com")
        False
        >>> is_valid_email("ada@example.com\\n")
        False
        >>> is_valid_email(None)
        False
    """
    return isinstance(value, str) and _EMAIL_PATTERN.fullmatch(value) is not None


def is_empty(value: object) -> bool:
    """Return True for values the provider payload treats as absent.

    ``None``, ``""``, ``False`` and numeric zero are empty. Mappings and
    sequences always count as present, even when they hold nothing.

    Examples:
        >>> is_empty(None), is_empty(""), is_empty(0)
        (True, True, True)
        >>> is_empty(" "), is_empty({}), is_empty([])
        (False, False, False)
    """
    if value is None:
        return True
    if isinstance(value, str):
        return value == ""
    if isinstance(value, (bool, int, float)):
        return not value
    return False


def as_contact_mapping(value: object) -> Mapping[str, Any] | None:
    """Return ``value`` as a mapping, or None when it is not contact-shaped."""
    if isinstance(value, Contact):
        return asdict(value)
    if isinstance(value, Mapping):
        return cast(Mapping[str, Any], value)
    return None


def as_recipient_list(recipients: object) -> list[Any]:
    """Coerce a single recipient into a one-element list.

    Examples:
        >>> as_recipient_list({"name": "A", "email": "a@example.com"})
        [{'name': 'A', 'email': 'a@example.com'}]
        >>> as_recipient_list([1, 2])
        [1, 2]
    """
    if isinstance(recipients, (list, tuple)):
        return list(cast("list[Any] | tuple[Any, ...]", recipients))
    return [recipients]


def default_reply_to(sender: object) -> dict[str, str]:
    """Build the reply-to used when the caller gives none.

    The domain is everything after the first ``@`` of the sender address. A
    missing or malformed sender address degrades to ``noreply@undefined``,
    which then fails reply-to validation.

    Examples:
        >>> default_reply_to({"name": "Ada", "email": "ada@example.com"})
        {'name': 'noreply', 'email': 'noreply@example.com'}
        >>> default_reply_to(None)
        {'name': 'noreply', 'email': 'noreply@undefined'}
    """
    domain = UNKNOWN_DOMAIN
    mapping = as_contact_mapping(sender)
    email = mapping.get("email") if mapping is not None else None
    if isinstance(email, str):
        parts = email.split("@", 2)
        if len(parts) > 1:
            domain = parts[1]
    return {"name": NOREPLY_NAME, "email": f"{NOREPLY_NAME}@{domain}"}


def _is_non_empty_string(value: object) -> bool:
    return isinstance(value, str) and value.strip() != ""


def _validate_contact(value: object, path: str, label: str, errors: list[FieldError]) -> None:
    mapping = as_contact_mapping(value)
    if mapping is None:
        errors.append(
            FieldError(path, f"{label} must be an object with properties {{ name, email }} (Received: {value!r})")
        )
        return
    name = mapping.get("name")
    email = mapping.get("email")
    if not _is_non_empty_string(name):
        errors.append(FieldError(f"{path}.name", f"{label}.name must be a non-empty string (Received: {name!r})"))
    if not is_valid_email(email):
        errors.append(FieldError(f"{path}.email", f"{label}.email must be a valid email address (Received: {email!r})"))


def validate_request(sender: object, recipients: object, reply_to: object, subject: object) -> list[FieldError]:
    """Collect every structural violation of an email request.

    Args:
        sender: Contact mapping (or :class:`Contact`) of the sender.
        recipients: Sequence of contacts. Callers coerce a single contact
            with :func:`as_recipient_list` first.
        reply_to: Contact mapping of the reply-to address.
        subject: Subject line.

    Returns:
        Errors in declaration order; empty when the request is well formed.

    Examples:
        >>> ada = {"name": "Ada", "email": "ada@example.com"}
        >>> validate_request(ada, [ada], ada, "Hello")
        []
        >>> [e.field for e in validate_request(ada, [ada, {"name": "", "email": "x"}], ada, " ")]
        ['to[1].name', 'to[1].email', 'subject']
    """
    errors: list[FieldError] = []

    _validate_contact(sender, "sender", "sender", errors)

    if isinstance(recipients, (list, tuple)):
        recipient_list = cast("list[Any] | tuple[Any, ...]", recipients)
        if not recipient_list:
            errors.append(FieldError("to", "to must contain at least one recipient"))
        for index, recipient in enumerate(recipient_list):
            path = f"to[{index}]"
            if as_contact_mapping(recipient) is None:
                errors.append(
                    FieldError(
                        path,
                        f"Each recipient should be an object with properties {{ name, email }} (Received: {recipient!r})",
                    )
                )
            else:
                _validate_contact(recipient, path, "to[i]", errors)
    else:
        errors.append(
            FieldError(
                "to",
                f"to should be an array of objects or a single object with properties {{ name, email }} "
                f"(Received: {recipients!r})",
            )
        )

    _validate_contact(reply_to, "replyTo", "replyTo", errors)

    if not _is_non_empty_string(subject):
        errors.append(FieldError("subject", f"subject must be a non-empty string (Received: {subject!r})"))

    return errors


def validate_content(html_content: object, text_content: object) -> list[FieldError]:
    """Check that resolved body content is present and textual.

    Examples:
        >>> validate_content("<p>hi</p>", None)
        []
        >>> [e.field for e in validate_content("", None)]
        ['content']
        >>> [e.field for e in validate_content({"nope": 1}, 42)]
        ['htmlContent', 'textContent']
    """
    if is_empty(html_content) and is_empty(text_content):
        return [FieldError("content", "Either htmlContent or textContent must be provided and be non-empty")]
    errors: list[FieldError] = []
    if not is_empty(html_content) and not isinstance(html_content, str):
        errors.append(
            FieldError("htmlContent", f"htmlContent must be a string if provided (Received: {html_content!r})")
        )
    if not is_empty(text_content) and not isinstance(text_content, str):
        errors.append(
            FieldError("textContent", f"textContent must be a string if provided (Received: {text_content!r})")
        )
    return errors


__all__ = [
    "NOREPLY_NAME",
    "UNKNOWN_DOMAIN",
    "as_contact_mapping",
    "as_recipient_list",
    "default_reply_to",
    "is_empty",
    "is_valid_email",
    "validate_content",
    "validate_request",
]

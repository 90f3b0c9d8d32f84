"""Request-scoped value objects shared by the validator, relay, and CLI."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class Contact:
    """A name and email pair used for the sender, a recipient, or reply-to.

    Example:
        >>> Contact(name="Ada", email="ada@example.com").to_dict()
        {'name': 'Ada', 'email': 'ada@example.com'}
    """

    name: str
    email: str

    def to_dict(self) -> dict[str, str]:
        """Return the wire shape ``{name, email}``."""
        return {"name": self.name, "email": self.email}


@dataclass(frozen=True, slots=True)
class FieldError:
    """A single field-level violation, addressed by dotted/indexed path."""

    field: str
    message: str

    def to_dict(self) -> dict[str, str]:
        return {"field": self.field, "message": self.message}


@dataclass(frozen=True, slots=True)
class FieldWarning:
    """A non-fatal notice that never blocks sending."""

    field: str
    message: str

    def to_dict(self) -> dict[str, str]:
        return {"field": self.field, "message": self.message}


def _empty_errors() -> list[FieldError]:
    return []


def _empty_warnings() -> list[FieldWarning]:
    return []


@dataclass(slots=True)
class SendResult:
    """Uniform return shape of both entry operations.

    A non-empty ``errors`` list means either no network call was made or the
    call failed. Warnings are informational only.

    Example:
        >>> result = SendResult(warnings=[FieldWarning("templateId", "templateId not recognized")])
        >>> result.ok
        True
        >>> result.to_dict()["errors"]
        []
    """

    errors: list[FieldError] = field(default_factory=_empty_errors)
    warnings: list[FieldWarning] = field(default_factory=_empty_warnings)

    @property
    def ok(self) -> bool:
        return not self.errors

    def to_dict(self) -> dict[str, list[dict[str, str]]]:
        return {
            "errors": [error.to_dict() for error in self.errors],
            "warnings": [warning.to_dict() for warning in self.warnings],
        }


__all__ = [
    "Contact",
    "FieldError",
    "FieldWarning",
    "SendResult",
]

"""Registry of provider templates whose parameters this service validates.

Templates missing from the registry are still sent: the relay raises a
warning and forwards the template id and params untouched.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Final, cast

from .models import FieldError

_NUMERIC_PATTERN: Final = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)\s*")


@dataclass(frozen=True, slots=True)
class TemplateSchema:
    """Parameter schema of one known provider template.

    Attributes:
        template_id: Provider-side template identifier.
        name: Human-readable label used in logs.
        required_fields: Param names that must be non-empty strings.
        resolvable_fields: Param names that may carry an ephemeral store
            reference (``{"key": ...}``) instead of inline content.
    """

    template_id: int
    name: str
    required_fields: tuple[str, ...]
    resolvable_fields: tuple[str, ...] = ()

    def validate(self, params: object) -> list[FieldError]:
        """Return the violations of ``params`` against this schema.

        Examples:
            >>> schema = KNOWN_TEMPLATES[1]
            >>> schema.validate({"htmlContent": "<p>x</p>", "title": "T"})
            []
            >>> [e.field for e in schema.validate({"htmlContent": "", "title": "T"})]
            ['params.htmlContent']
            >>> [e.field for e in schema.validate(None)]
            ['params']
        """
        if not isinstance(params, Mapping):
            expected = ", ".join(self.required_fields)
            return [
                FieldError(
                    "params",
                    f"params must be an object with properties {{ {expected} }} on template "
                    f"{self.template_id} (Received: {params!r})",
                )
            ]
        mapping = cast(Mapping[str, Any], params)
        errors: list[FieldError] = []
        for name in self.required_fields:
            value = mapping.get(name)
            if not isinstance(value, str) or value.strip() == "":
                errors.append(
                    FieldError(
                        f"params.{name}",
                        f"params.{name} must be a non-empty string on template {self.template_id} "
                        f"(Received: {value!r})",
                    )
                )
        return errors

    def narrow(self, params: Mapping[str, Any]) -> dict[str, Any]:
        """Keep only the schema's required fields.

        Example:
            >>> KNOWN_TEMPLATES[1].narrow({"htmlContent": "h", "title": "t", "extra": 1})
            {'htmlContent': 'h', 'title': 't'}
        """
        return {name: params.get(name) for name in self.required_fields}


#: Templates this service knows how to validate, keyed by provider id.
KNOWN_TEMPLATES: Final[Mapping[int, TemplateSchema]] = {
    1: TemplateSchema(
        template_id=1,
        name="html-with-title",
        required_fields=("htmlContent", "title"),
        resolvable_fields=("htmlContent",),
    ),
}


def coerce_template_id(value: object) -> int | None:
    """Interpret a template id the way the wire payload compares it.

    Integers, integral floats and decimal strings with an integral value
    (surrounding whitespace allowed) map to an int. Anything else, booleans
    included, is None.

    Examples:
        >>> coerce_template_id(1), coerce_template_id("1"), coerce_template_id(" 7 "), coerce_template_id(3.0)
        (1, 1, 7, 3)
        >>> coerce_template_id("welcome") is None, coerce_template_id(True) is None
        (True, True)
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    if isinstance(value, str):
        match = _NUMERIC_PATTERN.fullmatch(value)
        if match is None:
            return None
        number = float(match.group(1))
        return int(number) if number.is_integer() else None
    return None


def lookup_template(
    template_id: object,
    registry: Mapping[int, TemplateSchema] = KNOWN_TEMPLATES,
) -> TemplateSchema | None:
    """Return the schema registered for ``template_id``, or None when unknown.

    Examples:
        >>> lookup_template("1").name
        'html-with-title'
        >>> lookup_template(999) is None
        True
    """
    normalized = coerce_template_id(template_id)
    if normalized is None:
        return None
    return registry.get(normalized)


__all__ = [
    "KNOWN_TEMPLATES",
    "TemplateSchema",
    "coerce_template_id",
    "lookup_template",
]

"""Entry operations: validate an email request and forward it to Brevo.

Each call is a linear pipeline: coerce recipients, default the reply-to,
validate structure, resolve referenced content, validate content or template
params, build the envelope, dispatch. Failures of every kind come back as
data in :class:`~brevo_relay.domain.models.SendResult`; nothing raises past
these operations.

Contents:
    * :class:`EmailRelay` - ``send_email`` and ``send_email_from_template``.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Final, cast

from ..domain.envelope import build_envelope
from ..domain.errors import ConfigurationError, DeliveryError
from ..domain.models import FieldError, FieldWarning, SendResult
from ..domain.templates import KNOWN_TEMPLATES, TemplateSchema, lookup_template
from ..domain.validation import (
    as_recipient_list,
    default_reply_to,
    is_empty,
    validate_content,
    validate_request,
)
from .content import content_reference, resolve_content
from .ports import DispatchEnvelope, EphemeralStore

if TYPE_CHECKING:
    from ..adapters.brevo.config import BrevoConfig

logger = logging.getLogger(__name__)

SENDING_FIELD: Final[str] = "sending"
SENDING_MESSAGE: Final[str] = "Error sending the email"


class EmailRelay:
    """Validation-and-forward shim in front of the Brevo transactional API.

    The configuration, store, and transport are injected once at startup and
    are read-only afterwards; a relay holds no per-request state.

    Args:
        config: Provider settings (API key, endpoint, timeout).
        store: Ephemeral store used to resolve ``{"key": ...}`` content.
        dispatch: Transport sending one envelope; True on success.
        templates: Known template schemas keyed by provider id.

    Example:
        >>> from brevo_relay.adapters.brevo.config import BrevoConfig
        >>> from brevo_relay.adapters.memory import DispatchSpy, InMemoryStore
        >>> spy = DispatchSpy()
        >>> relay = EmailRelay(config=BrevoConfig(api_key="k"), store=InMemoryStore(), dispatch=spy.dispatch)
        >>> ada = {"name": "Ada", "email": "ada@example.com"}
        >>> relay.send_email(ada, ada, None, "Hi", text_content="Hello").to_dict()
        {'errors': [], 'warnings': []}
        >>> spy.envelopes[0]["replyTo"]
        {'name': 'noreply', 'email': 'noreply@example.com'}
    """

    def __init__(
        self,
        *,
        config: BrevoConfig,
        store: EphemeralStore,
        dispatch: DispatchEnvelope,
        templates: Mapping[int, TemplateSchema] = KNOWN_TEMPLATES,
    ) -> None:
        self._config = config
        self._store = store
        self._dispatch_envelope = dispatch
        self._templates = templates

    def send_email(
        self,
        sender: object,
        to: object,
        reply_to: object,
        subject: object,
        html_content: object = None,
        text_content: object = None,
    ) -> SendResult:
        """Send an email with inline or referenced HTML/text content.

        Args:
            sender: ``{name, email}`` of the sender.
            to: One recipient or a sequence of recipients.
            reply_to: ``{name, email}``; defaults to ``noreply@<sender domain>``.
            subject: Non-empty subject line.
            html_content: HTML body, or ``{"key": ...}`` store reference.
            text_content: Plain-text body, or ``{"key": ...}`` store reference.

        Returns:
            Errors from validation or sending, and an empty warning list.
        """
        recipients = as_recipient_list(to)
        if is_empty(reply_to):
            reply_to = default_reply_to(sender)
        errors = validate_request(sender, recipients, reply_to, subject)

        html_content = self._resolve(html_content)
        text_content = self._resolve(text_content)
        errors.extend(validate_content(html_content, text_content))

        if errors:
            logger.info("Email request rejected", extra={"error_fields": [error.field for error in errors]})
            return SendResult(errors=errors)

        envelope = build_envelope(sender, recipients, reply_to, cast(str, subject))
        if not is_empty(text_content):
            envelope["textContent"] = text_content
        if not is_empty(html_content):
            envelope["htmlContent"] = html_content

        return SendResult(errors=self._dispatch(envelope), warnings=[])

    def send_email_from_template(
        self,
        template_id: object,
        sender: object,
        to: object,
        reply_to: object,
        subject: object,
        params: object = None,
    ) -> SendResult:
        """Send an email rendered by a provider-side template.

        Known templates have their params validated and narrowed to the
        schema's fields, and the id is sent as an integer. Unknown ids produce
        a ``templateId`` warning and are forwarded as received together with
        unvalidated params.

        Args:
            template_id: Provider template identifier.
            sender: ``{name, email}`` of the sender.
            to: One recipient or a sequence of recipients.
            reply_to: ``{name, email}``; defaults to ``noreply@<sender domain>``.
            subject: Non-empty subject line.
            params: Template parameters.

        Returns:
            Errors from validation or sending, plus any warnings.
        """
        recipients = as_recipient_list(to)
        if is_empty(reply_to):
            reply_to = default_reply_to(sender)
        errors = validate_request(sender, recipients, reply_to, subject)
        warnings: list[FieldWarning] = []

        schema = lookup_template(template_id, self._templates)
        outgoing_id: object
        if schema is None:
            warnings.append(FieldWarning("templateId", f"templateId not recognized (Received: {template_id!r})"))
            if errors:
                logger.info(
                    "Template email request rejected",
                    extra={"template_id": template_id, "error_fields": [error.field for error in errors]},
                )
                return SendResult(errors=errors, warnings=warnings)
            outgoing_id = template_id
        else:
            if isinstance(params, Mapping):
                params = self._resolve_params(schema, cast(Mapping[str, Any], params))
            errors.extend(schema.validate(params))
            if errors:
                logger.info(
                    "Template email request rejected",
                    extra={"template_id": schema.template_id, "error_fields": [error.field for error in errors]},
                )
                return SendResult(errors=errors)
            params = schema.narrow(cast(Mapping[str, Any], params))
            outgoing_id = schema.template_id

        envelope = build_envelope(sender, recipients, reply_to, cast(str, subject))
        envelope["templateId"] = outgoing_id
        if not is_empty(params):
            envelope["params"] = params

        return SendResult(errors=self._dispatch(envelope), warnings=warnings)

    def _resolve(self, value: object) -> object:
        key = content_reference(value)
        if key is None:
            return value
        return resolve_content(self._store, key)

    def _resolve_params(self, schema: TemplateSchema, params: Mapping[str, Any]) -> dict[str, Any]:
        resolved = dict(params)
        for name in schema.resolvable_fields:
            if name in resolved:
                resolved[name] = self._resolve(resolved[name])
        return resolved

    def _dispatch(self, envelope: dict[str, Any]) -> list[FieldError]:
        logger.info(
            "Dispatching email",
            extra={
                "recipient_count": len(envelope["to"]),
                "subject": envelope["subject"],
                "template_id": envelope.get("templateId"),
            },
        )
        try:
            delivered = self._dispatch_envelope(envelope, config=self._config)
        except (ConfigurationError, DeliveryError) as exc:
            logger.error("Email dispatch failed", extra={"error": str(exc), "error_type": type(exc).__name__})
            delivered = False
        except Exception as exc:
            logger.error(
                "Unexpected error dispatching email",
                extra={"error": str(exc), "error_type": type(exc).__name__},
                exc_info=True,
            )
            delivered = False

        if not delivered:
            return [FieldError(SENDING_FIELD, SENDING_MESSAGE)]
        return []


__all__ = [
    "SENDING_FIELD",
    "SENDING_MESSAGE",
    "EmailRelay",
]

"""Send commands: raw content and provider templates.

Both commands print the :class:`~brevo_relay.domain.models.SendResult` as
JSON on stdout. Content and template params may be given inline or as a
reference to a key in the ephemeral store (``--html-key``, ``--param-key``),
which the relay reads and deletes.
"""

from __future__ import annotations

import functools
import logging
from typing import Any

import lib_log_rich.runtime
import rich_click as click

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import get_cli_context
from ._common import contact_option, content_argument, parse_assignment, run_send

logger = logging.getLogger(__name__)


def _envelope_options(func: Any) -> Any:
    """Apply the sender, recipient, reply-to and subject options shared by both commands."""
    options = [
        click.option(
            "--from",
            "sender",
            required=True,
            callback=contact_option,
            help='Sender as "Name <address>"',
        ),
        click.option(
            "--to",
            "recipients",
            multiple=True,
            required=True,
            callback=contact_option,
            help='Recipient as "Name <address>" (can specify multiple)',
        ),
        click.option(
            "--reply-to",
            "reply_to",
            default=None,
            callback=contact_option,
            help='Reply-to as "Name <address>" (default: noreply@<sender domain>)',
        ),
        click.option("--subject", required=True, help="Email subject line"),
    ]
    return functools.reduce(lambda f, opt: opt(f), reversed(options), func)


@click.command("send-email", context_settings=CLICK_CONTEXT_SETTINGS)
@_envelope_options
@click.option("--html", "html", default=None, help="HTML body")
@click.option("--html-key", default=None, help="Ephemeral store key holding the HTML body")
@click.option("--text", "text", default=None, help="Plain-text body")
@click.option("--text-key", default=None, help="Ephemeral store key holding the plain-text body")
@click.pass_context
def cli_send_email(
    ctx: click.Context,
    sender: dict[str, str],
    recipients: list[dict[str, str]],
    reply_to: dict[str, str] | None,
    subject: str,
    html: str | None,
    html_key: str | None,
    text: str | None,
    text_key: str | None,
) -> None:
    """Validate an email with explicit content and send it through Brevo.

    Exit codes: 0 sent, 22 validation errors, 69 provider rejected or
    unreachable, 78 no API key configured.
    """
    cli_ctx = get_cli_context(ctx)
    html_content = content_argument(html, html_key, option="html")
    text_content = content_argument(text, text_key, option="text")
    extra = {"command": "send-email", "recipient_count": len(recipients), "subject": subject}

    with lib_log_rich.runtime.bind(job_id="cli-send-email", extra=extra):
        logger.info(
            "Sending email",
            extra={"has_html": html_content is not None, "has_text": text_content is not None},
        )
        run_send(
            cli_ctx,
            lambda relay: relay.send_email(
                sender,
                recipients,
                reply_to,
                subject,
                html_content=html_content,
                text_content=text_content,
            ),
            command="send-email",
        )


@click.command("send-template", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option("--template-id", required=True, help="Brevo template id")
@_envelope_options
@click.option("--param", "params", multiple=True, help="Template parameter as KEY=VALUE (can specify multiple)")
@click.option(
    "--param-key",
    "param_keys",
    multiple=True,
    help="Template parameter read from the ephemeral store as KEY=STOREKEY (can specify multiple)",
)
@click.pass_context
def cli_send_template(
    ctx: click.Context,
    template_id: str,
    sender: dict[str, str],
    recipients: list[dict[str, str]],
    reply_to: dict[str, str] | None,
    subject: str,
    params: tuple[str, ...],
    param_keys: tuple[str, ...],
) -> None:
    """Validate a template email and send it through Brevo.

    Unknown template ids are forwarded unchanged with a warning.
    """
    cli_ctx = get_cli_context(ctx)
    parsed_id = _parse_template_id(template_id)
    template_params = _collect_params(params, param_keys)
    extra = {"command": "send-template", "template_id": template_id, "recipient_count": len(recipients)}

    with lib_log_rich.runtime.bind(job_id="cli-send-template", extra=extra):
        logger.info("Sending template email", extra={"param_names": sorted(template_params or {})})
        run_send(
            cli_ctx,
            lambda relay: relay.send_email_from_template(
                parsed_id,
                sender,
                recipients,
                reply_to,
                subject,
                params=template_params,
            ),
            command="send-template",
        )


def _parse_template_id(raw: str) -> int | str:
    """Send numeric ids as integers; anything else is forwarded as typed.

    Example:
        >>> _parse_template_id(" 12 "), _parse_template_id("welcome")
        (12, 'welcome')
    """
    stripped = raw.strip()
    return int(stripped) if stripped.isdecimal() else raw


def _collect_params(params: tuple[str, ...], param_keys: tuple[str, ...]) -> dict[str, Any] | None:
    """Merge inline and store-referenced params; later options win.

    Example:
        >>> _collect_params(("title=Hi",), ("htmlContent=k1",))
        {'title': 'Hi', 'htmlContent': {'key': 'k1'}}
        >>> _collect_params((), ()) is None
        True
    """
    if not params and not param_keys:
        return None
    collected: dict[str, Any] = {}
    for raw in params:
        name, value = parse_assignment(raw)
        collected[name] = value
    for raw in param_keys:
        name, store_key = parse_assignment(raw)
        collected[name] = {"key": store_key}
    return collected


__all__ = ["cli_send_email", "cli_send_template"]

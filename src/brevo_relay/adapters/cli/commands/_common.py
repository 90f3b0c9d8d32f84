"""Shared utilities for the send commands.

Contains option parsing, relay construction with configuration checks, and
the mapping from a :class:`~brevo_relay.domain.models.SendResult` to the
process exit code.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from email.utils import parseaddr
from typing import TYPE_CHECKING, Any

import orjson
import rich_click as click
from pydantic import ValidationError

from brevo_relay import __init__conf__
from brevo_relay.application.relay import SENDING_FIELD
from brevo_relay.domain.models import SendResult

from ..exit_codes import ExitCode

if TYPE_CHECKING:
    from brevo_relay.application.relay import EmailRelay

    from ..context import CLIContext

logger = logging.getLogger(__name__)


def parse_contact(value: str) -> dict[str, str]:
    """Split ``"Name <addr>"`` into a contact mapping.

    A bare address yields an empty name, which the relay reports as a
    validation error on the corresponding ``name`` field.

    Example:
        >>> parse_contact("Ada Lovelace <ada@example.com>")
        {'name': 'Ada Lovelace', 'email': 'ada@example.com'}
        >>> parse_contact("ada@example.com")
        {'name': '', 'email': 'ada@example.com'}
    """
    name, address = parseaddr(value)
    return {"name": name, "email": address}


def contact_option(ctx: click.Context, param: click.Parameter, value: Any) -> Any:
    """Click callback turning one or many ``"Name <addr>"`` strings into contacts."""
    if value is None:
        return None
    if isinstance(value, tuple):
        return [parse_contact(item) for item in value]
    return parse_contact(value)


def parse_assignment(raw: str) -> tuple[str, str]:
    """Split ``KEY=VALUE`` on the first ``=``.

    Raises:
        click.BadParameter: When no ``=`` is present or the key is empty.

    Example:
        >>> parse_assignment("title=a=b")
        ('title', 'a=b')
    """
    key, sep, value = raw.partition("=")
    key = key.strip()
    if not sep or not key:
        raise click.BadParameter(f"expected KEY=VALUE, got {raw!r}")
    return key, value


def content_argument(inline: str | None, store_key: str | None, *, option: str) -> object | None:
    """Combine an inline value and a store reference into one content argument.

    Raises:
        click.UsageError: When both forms are given for the same content.
    """
    if inline is not None and store_key is not None:
        raise click.UsageError(f"--{option} and --{option}-key are mutually exclusive")
    if store_key is not None:
        return {"key": store_key}
    return inline


def _env_prefix() -> str:
    return __init__conf__.LAYEREDCONF_SLUG.upper().replace("-", "_")


def build_relay_or_exit(cli_ctx: CLIContext) -> EmailRelay:
    """Create the relay from the loaded configuration.

    Raises:
        SystemExit: CONFIG_ERROR (78) when no API key is configured,
            INVALID_ARGUMENT (22) when a config section fails validation.
    """
    config_dict = cli_ctx.config_dict()
    try:
        brevo_config = cli_ctx.services.load_brevo_config_from_dict(config_dict)
        if not brevo_config.api_key:
            logger.error("No Brevo API key configured")
            click.echo("\nError: No Brevo API key configured. Please set brevo.api_key in your config file", err=True)
            click.echo(f"or export {_env_prefix()}___BREVO__API_KEY.", err=True)
            raise SystemExit(ExitCode.CONFIG_ERROR)
        return cli_ctx.services.build_relay(config_dict)
    except ValidationError as exc:
        logger.error("Invalid configuration", extra={"error": str(exc), "error_type": type(exc).__name__})
        click.echo(f"\nError: Invalid configuration - {exc}", err=True)
        raise SystemExit(ExitCode.INVALID_ARGUMENT) from exc


def exit_code_for(result: SendResult) -> ExitCode:
    """Map a send result to the process exit code.

    Example:
        >>> from brevo_relay.domain.models import FieldError
        >>> exit_code_for(SendResult())
        <ExitCode.SUCCESS: 0>
        >>> exit_code_for(SendResult(errors=[FieldError("sending", "x")]))
        <ExitCode.SEND_FAILURE: 69>
        >>> exit_code_for(SendResult(errors=[FieldError("subject", "x")]))
        <ExitCode.INVALID_ARGUMENT: 22>
    """
    if result.ok:
        return ExitCode.SUCCESS
    if any(error.field == SENDING_FIELD for error in result.errors):
        return ExitCode.SEND_FAILURE
    return ExitCode.INVALID_ARGUMENT


def report_result(result: SendResult, *, command: str) -> None:
    """Print the result as JSON and exit non-zero on errors.

    Raises:
        SystemExit: When the result carries errors.
    """
    click.echo(orjson.dumps(result.to_dict(), option=orjson.OPT_INDENT_2).decode())
    for warning in result.warnings:
        logger.warning("Send warning", extra={"field": warning.field, "warning": warning.message})

    code = exit_code_for(result)
    if code is ExitCode.SUCCESS:
        logger.info("Email accepted by provider", extra={"command": command})
        return
    logger.error(
        "Email not sent",
        extra={"command": command, "fields": [error.field for error in result.errors], "exit_code": int(code)},
    )
    raise SystemExit(code)


def run_send(cli_ctx: CLIContext, operation: Callable[[EmailRelay], SendResult], *, command: str) -> None:
    """Build the relay, run one entry operation and report its outcome."""
    relay = build_relay_or_exit(cli_ctx)
    result = operation(relay)
    report_result(result, command=command)


__all__ = [
    "build_relay_or_exit",
    "contact_option",
    "content_argument",
    "exit_code_for",
    "parse_assignment",
    "parse_contact",
    "report_result",
    "run_send",
]

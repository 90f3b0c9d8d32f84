"""Put content into the ephemeral store for one-time retrieval.

Producers normally write these keys themselves; the command exists for
operators and for trying ``--html-key`` / ``--param-key`` end to end.
"""

from __future__ import annotations

import logging
from pathlib import Path

import lib_log_rich.runtime
import rich_click as click
from pydantic import ValidationError

from brevo_relay.domain.errors import StoreError

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import get_cli_context
from ..exit_codes import ExitCode

logger = logging.getLogger(__name__)


@click.command("stash-content", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("key")
@click.option("--value", default=None, help="Content to store")
@click.option(
    "--file",
    "file_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Read the content from a UTF-8 file",
)
@click.option(
    "--ttl",
    type=click.IntRange(min=1),
    default=None,
    help="Expiry in seconds (default: store.default_ttl_seconds)",
)
@click.pass_context
def cli_stash_content(
    ctx: click.Context,
    key: str,
    value: str | None,
    file_path: Path | None,
    ttl: int | None,
) -> None:
    """Store content under KEY in the configured ephemeral store."""
    cli_ctx = get_cli_context(ctx)
    extra = {"command": "stash-content", "key": key, "ttl_seconds": ttl}
    with lib_log_rich.runtime.bind(job_id="cli-stash-content", extra=extra):
        try:
            content = _read_content(value, file_path)
            store = cli_ctx.services.open_store(cli_ctx.config_dict())
            store.put(key, content, ttl_seconds=ttl)
        except FileNotFoundError as exc:
            logger.error("Content file not found", extra={"error": str(exc)})
            click.echo(f"\nError: Content file not found - {exc}", err=True)
            raise SystemExit(ExitCode.FILE_NOT_FOUND) from exc
        except ValidationError as exc:
            logger.error("Invalid store configuration", extra={"error": str(exc)})
            click.echo(f"\nError: Invalid configuration - {exc}", err=True)
            raise SystemExit(ExitCode.INVALID_ARGUMENT) from exc
        except StoreError as exc:
            logger.error("Ephemeral store unavailable", extra={"error": str(exc)})
            click.echo(f"\nError: Could not store content - {exc}", err=True)
            raise SystemExit(ExitCode.SEND_FAILURE) from exc

        logger.info("Content stored", extra={"length": len(content)})
        click.echo(f"Stored {len(content)} characters under {key!r}")


def _read_content(value: str | None, file_path: Path | None) -> str:
    if (value is None) == (file_path is None):
        raise click.UsageError("exactly one of --value or --file is required")
    if file_path is None:
        return value or ""
    return file_path.read_text(encoding="utf-8")


__all__ = ["cli_stash_content"]

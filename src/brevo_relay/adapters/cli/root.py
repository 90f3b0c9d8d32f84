"""The ``brevo-relay`` command group.

The group callback turns the services factory on ``ctx.obj`` into a loaded
:class:`~.context.CLIContext`: configuration (optionally for a profile) is
read once, logging is started from its ``[lib_log_rich]`` section, and the
traceback preference is handed to lib_cli_exit_tools.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import rich_click as click

from brevo_relay import __init__conf__

from .constants import CLICK_CONTEXT_SETTINGS
from .context import apply_traceback_preferences, store_cli_context

if TYPE_CHECKING:
    from brevo_relay.composition import AppServices

_VERSION_MESSAGE = f"{__init__conf__.shell_command} version {__init__conf__.version}"


@click.group(help=__init__conf__.title, context_settings=CLICK_CONTEXT_SETTINGS, invoke_without_command=True)
@click.version_option(__init__conf__.version, prog_name=__init__conf__.shell_command, message=_VERSION_MESSAGE)
@click.option("--traceback/--no-traceback", default=False, help="Print the full Python traceback on unexpected errors")
@click.option(
    "--profile",
    default=None,
    help="Configuration profile to load, e.g. 'production' or 'staging'",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool, profile: str | None) -> None:
    """Load configuration, start logging and share both with the subcommand.

    Example:
        >>> from click.testing import CliRunner
        >>> from brevo_relay.composition import build_testing
        >>> CliRunner().invoke(cli, ["info"], obj=build_testing).exit_code
        0
    """
    factory = ctx.obj
    if not callable(factory):
        raise RuntimeError("Services factory not provided. This is a bug.")
    services: AppServices = factory()
    config = services.get_config(profile=profile)
    services.init_logging(config)
    store_cli_context(ctx, traceback=traceback, config=config, services=services, profile=profile)
    apply_traceback_preferences(traceback)

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


def _register_commands() -> None:
    # Imported here: the command modules import from this package.
    from .commands import cli_config, cli_info, cli_send_email, cli_send_template, cli_stash_content

    for command in (cli_info, cli_config, cli_send_email, cli_send_template, cli_stash_content):
        cli.add_command(command)


_register_commands()


__all__ = ["cli"]

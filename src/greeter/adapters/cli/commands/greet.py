"""Greeting command.

Contents:
    * :func:`cli_hello` - Greet a name, abbreviating it to the configured width.
"""

from __future__ import annotations

import logging

import lib_log_rich.runtime
import rich_click as click

from greeter.domain.behaviors import build_greeting, greet
from greeter.domain.errors import ConfigurationError, InvalidWidthError

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import CLIContext, get_cli_context
from ..exit_codes import ExitCode

logger = logging.getLogger(__name__)


def _configured_width(cli_ctx: CLIContext) -> int:
    """Read ``greeter.max_width`` from the loaded configuration.

    Raises:
        SystemExit: With ``CONFIG_ERROR`` when the ``[greeter]`` section is invalid.
    """
    try:
        settings = cli_ctx.services.load_greeter_settings(cli_ctx.config.as_dict())
    except ConfigurationError as exc:
        logger.error("Invalid greeter configuration", extra={"error": str(exc)})
        click.echo(f"\nError: Invalid configuration: {exc}", err=True)
        raise SystemExit(ExitCode.CONFIG_ERROR) from exc
    return settings.max_width


@click.command("hello", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("name", required=False)
@click.option(
    "--width",
    type=int,
    default=None,
    help="Maximum characters shown for NAME, '...' included (default: greeter.max_width)",
)
@click.pass_context
def cli_hello(ctx: click.Context, name: str | None, width: int | None) -> None:
    r"""Greet NAME, or print a plain greeting when NAME is omitted.

    Names longer than the width keep their first (width - 3) characters
    followed by "...".

    \b
    Examples:
      greeter hello                             -> Hello!
      greeter hello John                        -> Hello, John!
      greeter hello "John Williams Smith, Jr."  -> Hello, John Wi...!
    """
    cli_ctx = get_cli_context(ctx)

    with lib_log_rich.runtime.bind(job_id="cli-hello", extra={"command": "hello"}):
        if name is None:
            logger.debug("No name given, printing static greeting")
            click.echo(build_greeting())
            return

        max_width = width if width is not None else _configured_width(cli_ctx)
        logger.info("Greeting name", extra={"name_length": len(name), "max_width": max_width})
        try:
            greeting = greet(name, max_width)
        except InvalidWidthError as exc:
            click.echo(f"\nError: {exc}", err=True)
            raise SystemExit(ExitCode.INVALID_ARGUMENT) from exc
        click.echo(greeting)


__all__ = ["cli_hello"]

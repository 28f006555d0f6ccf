"""Greeting CLI commands.

Contents:
    * :func:`cli_greet` - Greet NAME with the chosen or configured greeting.
    * :func:`cli_hello` - Shorthand for ``greet --greeting hello``.
    * :func:`cli_goodbye` - Shorthand for ``greet --greeting goodbye``.

Omitting NAME passes no person to the greet service, which prints nothing.
"""

from __future__ import annotations

import logging

import lib_log_rich.runtime
import rich_click as click

from greeter.adapters.config.settings import load_greeter_settings
from greeter.domain.enums import Greeting
from greeter.domain.errors import ConfigurationError
from greeter.domain.models import Person

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import CLIContext, get_cli_context
from ..exit_codes import ExitCode

logger = logging.getLogger(__name__)


def _configured_greeting(cli_ctx: CLIContext) -> Greeting:
    """Return ``greeter.default_greeting``, exiting with CONFIG_ERROR when invalid."""
    try:
        return load_greeter_settings(cli_ctx.config).default_greeting
    except ConfigurationError as exc:
        click.echo(f"Error: {exc}", err=True)
        raise SystemExit(ExitCode.CONFIG_ERROR) from exc


def _emit(cli_ctx: CLIContext, command: str, greeting: Greeting, name: str | None) -> None:
    person = Person(name) if name is not None else None
    extra = {"command": command, "greeting": greeting.value}
    with lib_log_rich.runtime.bind(job_id=f"cli-{command}", extra=extra):
        logger.info("Greeting", extra={"greeting": greeting.value, "has_person": person is not None})
        cli_ctx.services.greet(greeting, person)


@click.command("greet", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("name", required=False)
@click.option(
    "--greeting",
    "greeting_value",
    type=click.Choice([g.value for g in Greeting], case_sensitive=False),
    default=None,
    help="Salutation to use. Default: greeter.default_greeting from configuration.",
)
@click.pass_context
def cli_greet(ctx: click.Context, name: str | None, greeting_value: str | None) -> None:
    """Print a salutation for NAME; print nothing when NAME is omitted."""
    cli_ctx = get_cli_context(ctx)
    greeting = Greeting(greeting_value.lower()) if greeting_value else _configured_greeting(cli_ctx)
    _emit(cli_ctx, "greet", greeting, name)


@click.command("hello", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("name", required=False)
@click.pass_context
def cli_hello(ctx: click.Context, name: str | None) -> None:
    """Print "Hello, NAME!"."""
    _emit(get_cli_context(ctx), "hello", Greeting.HELLO, name)


@click.command("goodbye", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("name", required=False)
@click.pass_context
def cli_goodbye(ctx: click.Context, name: str | None) -> None:
    """Print "Goodbye, NAME!"."""
    _emit(get_cli_context(ctx), "goodbye", Greeting.GOODBYE, name)


__all__ = ["cli_goodbye", "cli_greet", "cli_hello"]

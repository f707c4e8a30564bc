"""Click command group exposing metadata and a logging demo.

Contents
--------
* :func:`cli` - root group with ``--version`` and the ``.env`` toggle.
* ``info`` - print the metadata banner.
* ``logdemo`` - emit one entry per level through a freshly built logger.
* :func:`main` - test-friendly runner returning an exit code.
* :func:`summary_info` - banner text shared by the CLI and tests.
"""

from __future__ import annotations

import os
from typing import Sequence

import click

from . import __init__conf__
from . import config as log_config
from .domain import EVENT_NAMES, EventRegistry
from .logger import create_logger


CLICK_CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


def summary_info() -> str:
    """Return the metadata banner printed by ``info``.

    Examples
    --------
    >>> banner = summary_info()
    >>> "version" in banner
    True
    """

    lines: list[str] = []
    __init__conf__.print_info(writer=lines.append)
    return "".join(lines)


@click.group(invoke_without_command=True, context_settings=CLICK_CONTEXT_SETTINGS)
@click.option("--version", "-V", is_flag=True, help="Print the installed version and exit.")
@click.option(
    "--use-dotenv/--no-use-dotenv",
    default=False,
    help=f"Load environment variables from a nearby .env (default taken from {log_config.DOTENV_ENV_VAR}).",
)
@click.pass_context
def cli(ctx: click.Context, version: bool, use_dotenv: bool) -> None:
    """Leveled console logger utilities."""

    if version:
        click.echo(__init__conf__.version)
        ctx.exit(0)

    explicit: bool | None = None
    if ctx.get_parameter_source("use_dotenv") is not click.core.ParameterSource.DEFAULT:
        explicit = use_dotenv
    if log_config.should_use_dotenv(explicit=explicit, env_value=os.getenv(log_config.DOTENV_ENV_VAR)):
        log_config.enable_dotenv()

    if ctx.invoked_subcommand is None:
        click.echo(summary_info(), nl=False)


def _explicit(ctx: click.Context, name: str, value: bool) -> bool | None:
    """Return ``value`` when given on the command line, else ``None`` so configuration decides."""

    if ctx.get_parameter_source(name) is click.core.ParameterSource.DEFAULT:
        return None
    return value


@cli.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_info() -> None:
    """Print the metadata banner."""

    click.echo(summary_info(), nl=False)


@cli.command("logdemo", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option("--id", "logger_id", default=None, help="Logger identity (defaults to LOG_ID or the process id).")
@click.option("--debug/--no-debug", "debug_enabled", default=True, help="Emit the debug entry (default from LOG_DEBUG).")
@click.option("--colours/--no-colours", "colours", default=True, help="Colour level labels (default from LOG_COLOURS).")
@click.pass_context
def cli_logdemo(ctx: click.Context, logger_id: str | None, debug_enabled: bool, colours: bool) -> None:
    """Emit one entry per level and report how many events were published."""

    debug_option = _explicit(ctx, "debug_enabled", debug_enabled)
    colours_option = _explicit(ctx, "colours", colours)

    registry = EventRegistry()
    published: list[str] = []
    for event in EVENT_NAMES:
        registry.subscribe(event, lambda entry: published.append(entry.level.event))

    logger = create_logger(debug_enabled=debug_option, id=logger_id, colours=colours_option, registry=registry)
    logger.debug("debug output", {"enabled": logger.debug_enabled})
    logger.info("service started")
    logger.warning("disk almost full", {"mount": "/var", "free_percent": 4})
    try:
        raise RuntimeError("demo failure")
    except RuntimeError as exc:
        logger.error(exc)
    logger.error(
        {
            "isAxiosError": True,
            "message": "Request failed with status code 404",
            "config": {"url": "https://example.invalid/items", "method": "GET"},
            "response": {"status": 404, "data": "not found"},
        }
    )
    click.echo(f"published {len(published)} events: {', '.join(published)}")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the Click group without exiting the interpreter.

    Parameters
    ----------
    argv:
        Optional sequence of argument strings (defaults to ``sys.argv[1:]``).

    Returns
    -------
    int
        Exit code; zero on success.
    """

    args = list(argv) if argv is not None else None
    try:
        result = cli.main(args=args, prog_name=__init__conf__.shell_command, standalone_mode=False)
    except click.ClickException as error:
        error.show()
        return error.exit_code
    except click.exceptions.Abort:
        click.echo("Aborted!", err=True)
        return 1
    return result if isinstance(result, int) else 0


__all__ = ["cli", "main", "summary_info"]

"""Root CLI group for rosterctl with global flags and command registration."""

from __future__ import annotations

import click

from rosterctl import __version__
from rosterctl.commands import register_commands
from rosterctl.commands._context import AppContext
from rosterctl.config.settings import RosterSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="rosterctl")
@click.option("--json", "json_output", is_flag=True, help="One JSON result per line.")
@click.option("-q", "--quiet", is_flag=True, help="No prompt or acknowledgments.")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging to stderr.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """rosterctl — interactive employee and department registry."""
    settings = RosterSettings.from_cli(
        config_path=config_path,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        from rosterctl.commands.shell import shell

        ctx.invoke(shell)


register_commands(cli)

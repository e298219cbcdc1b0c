"""Command: the interactive read-parse-apply loop."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, TextIO

import click

from rosterctl.commands._base import RosterCommand

if TYPE_CHECKING:
    from rosterctl.commands._context import AppContext

logger = logging.getLogger(__name__)


class InputClosedError(click.ClickException):
    """The input stream ended or could not be read. Always fatal."""

    exit_code = 1

    def __init__(self, message: str = "Failed to read command") -> None:
        super().__init__(message)


def read_command(stream: TextIO) -> str:
    """Read one line from *stream*.

    Raises:
        InputClosedError: on end of input or an unreadable stream.
    """
    try:
        line = stream.readline()
    except (OSError, UnicodeDecodeError) as exc:
        raise InputClosedError() from exc
    if not line:
        raise InputClosedError()
    return line


def run_shell(app: AppContext, stream: TextIO) -> None:
    """Read commands from *stream* until ``exit``.

    Each line is parsed and applied before the next is read.
    """
    service = app.service
    while True:
        if app.interactive:
            click.echo(app.settings.shell.prompt)
        line = read_command(stream)
        result = service.run_line(line)
        app.emit(result)
        if result.op == "exit":
            logger.debug("Shell finished")
            return


@click.command(
    cls=RosterCommand,
    examples="""\
  rosterctl shell
  > add Jane Doe to Engineering
  > add John Smith to Research and Development
  > list
  > list Engineering
  > remove Jane Doe from Engineering
  > exit""",
)
@click.pass_obj
def shell(app: AppContext) -> None:
    """Start the interactive registry shell (the default command)."""
    run_shell(app, sys.stdin)

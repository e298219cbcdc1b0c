"""AppContext — shared Click context for all commands.

Created once by the root CLI group and handed to subcommands via
``@click.pass_obj``.  Owns the single :class:`Registry` for the process
and centralizes result emission.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from rosterctl.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from rosterctl.config.settings import RosterSettings
    from rosterctl.services.result import ServiceResult
    from rosterctl.services.roster import RosterService


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    The roster service (and the registry behind it) is created lazily so
    ``--help`` and ``--version`` never build one.
    """

    def __init__(self, settings: RosterSettings) -> None:
        self.settings = settings
        self._service: RosterService | None = None

        from rosterctl.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def service(self) -> RosterService:
        """The roster service bound to this process's registry."""
        if self._service is None:
            from rosterctl.domain.registry import Registry
            from rosterctl.services.roster import RosterService

            self._service = RosterService(Registry())
        return self._service

    @property
    def output_settings(self) -> OutputSettings:
        return OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
        )

    @property
    def interactive(self) -> bool:
        """Whether the prompt should be shown before each read."""
        return not (self.settings.quiet or self.settings.json_output)

    def emit(self, result: ServiceResult) -> None:
        """Format and write a ServiceResult to stdout.

        Parse errors are part of the protocol and do not end the session,
        so failures are written to stdout as well.  Quiet mode may render
        nothing, in which case no line is written.
        """
        output = format_result(result, settings=self.output_settings, shell=self.settings.shell)
        if output:
            click.echo(output)

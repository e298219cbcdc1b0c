"""Human/JSON output selection.

The shell renders ServiceResult for humans (Rich text following the
interactive protocol) or machines (``--json``, one JSON document per
line).  The formatter layer picks the mode.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel

from rosterctl.output.renderers import render_quiet, render_result

if TYPE_CHECKING:
    from rosterctl.config.models import ShellConfig
    from rosterctl.services.result import ServiceResult


class OutputSettings(BaseModel):
    """Output mode flags, frozen after construction."""

    model_config = {"frozen": True}

    json_output: bool = False
    quiet: bool = False


def format_result(
    result: ServiceResult,
    *,
    settings: OutputSettings | None = None,
    shell: ShellConfig | None = None,
) -> str:
    """Format a ServiceResult for display.

    Args:
        result: The service result to format.
        settings: Output mode; defaults to human-readable output.
        shell: Protocol strings used by the human renderer.
    """
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json()
    if settings.quiet:
        return render_quiet(result, shell=shell)
    return render_result(result, shell=shell)

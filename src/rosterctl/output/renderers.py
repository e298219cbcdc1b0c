"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes the human protocol text for one op to a Rich
Console (backed by StringIO).  Renderers are dispatched by ``result.op``
in :func:`render_result`; unknown ops fall back to the acknowledgment.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.text import Text

from rosterctl.config.models import ShellConfig
from rosterctl.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from rosterctl.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, shell: ShellConfig | None = None) -> str:
    """Render a ServiceResult to the interactive protocol text.

    Returns plain text (no ANSI) when Rich detects no terminal, which is
    the case inside Click's CliRunner and piped output.
    """
    shell = shell or ShellConfig()
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_ack)
        renderer(result, console, shell)
    else:
        _render_error(result, console, shell)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult, *, shell: ShellConfig | None = None) -> str:
    """Render minimal output for ``--quiet`` mode.

    Acknowledgments are dropped; listings print bare names; errors and
    the not-found messages are kept.
    """
    shell = shell or ShellConfig()
    if not result.ok:
        return result.error.message if result.error else "Unknown error"
    if result.op != "list":
        return ""
    names: list[str] = result.data.get("names", [])
    if result.data.get("all") and not names:
        return shell.no_employees
    if not result.data.get("found"):
        return shell.no_department
    return "\n".join(names)


# ── Renderers ─────────────────────────────────────────────────────────


def _render_ack(result: ServiceResult, console: Console, shell: ShellConfig) -> None:
    console.print(Text(shell.ack, style="roster.ok"))


def _render_exit(result: ServiceResult, console: Console, shell: ShellConfig) -> None:
    console.print(Text(shell.farewell))


def _render_error(result: ServiceResult, console: Console, shell: ShellConfig) -> None:
    msg = result.error.message if result.error else "Unknown error"
    console.print(Text(msg, style="roster.error"))


def _render_list(result: ServiceResult, console: Console, shell: ShellConfig) -> None:
    """Render a listing: header, separator, one name per line, separator."""
    d = result.data
    names: list[str] = d.get("names", [])

    if d.get("all"):
        if not names:
            console.print(Text(shell.no_employees, style="roster.empty"))
            return
        header = shell.all_header
    else:
        if not d.get("found"):
            console.print(Text(shell.no_department, style="roster.empty"))
            return
        header = f"{d['selector']} department"

    console.print(Text(header, style="roster.header"))
    console.print(Text(shell.separator, style="roster.separator"))
    for name in names:
        console.print(Text(name, style="roster.name"))
    console.print(Text(shell.separator, style="roster.separator"))


_OP_RENDERERS: dict[str, Any] = {
    "add": _render_ack,
    "remove": _render_ack,
    "list": _render_list,
    "exit": _render_exit,
}

"""Tests for the human protocol renderers."""

from __future__ import annotations

from rosterctl.config.models import ShellConfig
from rosterctl.output.renderers import render_quiet, render_result
from rosterctl.services.result import ServiceError, ServiceResult

SEP = "-------------"


def _list(names: list[str], *, selector: str = "all", found: bool = True) -> ServiceResult:
    return ServiceResult(
        ok=True,
        op="list",
        data={
            "selector": selector,
            "all": selector == "all",
            "found": found,
            "names": names,
            "count": len(names),
        },
    )


def _err(msg: str) -> ServiceResult:
    return ServiceResult(ok=False, op="parse", error=ServiceError(code="PARSE_ERROR", message=msg))


class TestRenderResult:
    def test_add_acknowledged(self) -> None:
        assert render_result(ServiceResult(ok=True, op="add")) == "OK"

    def test_remove_acknowledged(self) -> None:
        assert render_result(ServiceResult(ok=True, op="remove")) == "OK"

    def test_exit(self) -> None:
        assert render_result(ServiceResult(ok=True, op="exit")) == "Exiting"

    def test_error_message_only(self) -> None:
        assert render_result(_err("Invalid command")) == "Invalid command"

    def test_error_without_payload(self) -> None:
        assert render_result(ServiceResult(ok=False, op="parse")) == "Unknown error"

    def test_list_all(self) -> None:
        output = render_result(_list(["Alice", "Bob"]))
        assert output.splitlines() == ["All Employees", SEP, "Alice", "Bob", SEP]

    def test_list_all_empty(self) -> None:
        assert render_result(_list([])) == "No Employees"

    def test_list_department(self) -> None:
        output = render_result(_list(["Jane Doe"], selector="Engineering"))
        assert output.splitlines() == ["Engineering department", SEP, "Jane Doe", SEP]

    def test_list_department_not_found(self) -> None:
        output = render_result(_list([], selector="Engineering", found=False))
        assert output == "No Department found"

    def test_unknown_op_falls_back_to_ack(self) -> None:
        assert render_result(ServiceResult(ok=True, op="something_new")) == "OK"

    def test_custom_shell_strings(self) -> None:
        shell = ShellConfig(ack="done", separator="===", all_header="Everyone")
        assert render_result(ServiceResult(ok=True, op="add"), shell=shell) == "done"
        output = render_result(_list(["Alice"]), shell=shell)
        assert output.splitlines() == ["Everyone", "===", "Alice", "==="]


class TestRenderQuiet:
    def test_ack_is_silent(self) -> None:
        assert render_quiet(ServiceResult(ok=True, op="add")) == ""

    def test_list_bare_names(self) -> None:
        assert render_quiet(_list(["Alice", "Bob"])) == "Alice\nBob"

    def test_empty_roster(self) -> None:
        assert render_quiet(_list([])) == "No Employees"

    def test_not_found(self) -> None:
        assert render_quiet(_list([], selector="X", found=False)) == "No Department found"

    def test_error(self) -> None:
        assert render_quiet(_err("No name provided")) == "No name provided"

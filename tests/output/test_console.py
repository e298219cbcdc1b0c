"""Tests for the Rich Console factory."""

from io import StringIO

from rosterctl.output.console import ROSTER_THEME, create_console, get_output


class TestCreateConsole:
    def test_returns_console_with_stringio(self) -> None:
        console = create_console()
        assert isinstance(console.file, StringIO)

    def test_no_color_disables_ansi(self) -> None:
        console = create_console(no_color=True)
        console.print("hello", style="roster.error")
        output = get_output(console)
        assert "\x1b" not in output
        assert "hello" in output

    def test_markup_is_not_interpreted(self) -> None:
        console = create_console()
        console.print("[bold]Eve[/bold]")
        assert get_output(console) == "[bold]Eve[/bold]\n"

    def test_long_lines_are_not_wrapped(self) -> None:
        console = create_console(width=20)
        name = " ".join(["Bartholomew"] * 5)
        console.print(name)
        assert get_output(console) == name + "\n"

    def test_default_width(self) -> None:
        assert create_console().width == 120

    def test_theme_styles(self) -> None:
        assert "roster.ok" in ROSTER_THEME.styles
        assert "roster.separator" in ROSTER_THEME.styles

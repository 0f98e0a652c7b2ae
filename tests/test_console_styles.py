import io

import pytest
from rich.console import Console

from smg_cli.cli_utils.console_styles import ConsoleStyles


def make_console() -> Console:
    return Console(file=io.StringIO(), force_terminal=False, width=120)


@pytest.mark.parametrize(
    "printer, glyph",
    [
        (ConsoleStyles.print_success, "✔"),
        (ConsoleStyles.print_warning, "⚠"),
        (ConsoleStyles.print_error, "✖"),
        (ConsoleStyles.print_info, "ℹ"),
    ],
)
def test_status_lines_carry_glyph(printer, glyph):
    console = make_console()
    printer(console, "Configuration saved")
    assert console.file.getvalue() == f"{glyph} Configuration saved\n"


def test_leading_blank_lines_stay_before_glyph():
    console = make_console()
    ConsoleStyles.print_error(console, "\nError from Java process:\nSchema not found")
    assert console.file.getvalue() == "\n✖ Error from Java process:\nSchema not found\n"


def test_status_text_keeps_style():
    text = ConsoleStyles.status_text("⚠", "\n\nCancelled.", ConsoleStyles.WARNING)
    assert text.plain == "\n\n⚠ Cancelled."
    assert text.style == ConsoleStyles.WARNING


def test_engine_flag_shows_dash_prefix():
    assert ConsoleStyles.engine_flag("model", "HR") == "[cyan]-model:[/cyan] HR"

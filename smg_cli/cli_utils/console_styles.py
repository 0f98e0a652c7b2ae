from __future__ import annotations

from rich.console import Console
from rich.panel import Panel
from rich.style import Style
from rich.text import Text


class ConsoleStyles:
    """
    Status line styles for the SMG console.

    Each status kind has a style and a leading glyph so results stay readable
    when colour is stripped (logs, CI, ``NO_COLOR``).
    """

    SUCCESS = Style(color="green", bold=True)
    WARNING = Style(color="yellow", bold=True)
    ERROR = Style(color="red", bold=True)
    INFO = Style(color="cyan", italic=True)

    SUCCESS_GLYPH = "✔"
    WARNING_GLYPH = "⚠"
    ERROR_GLYPH = "✖"
    INFO_GLYPH = "ℹ"

    @staticmethod
    def status_text(glyph: str, message: str, style: Style) -> Text:
        """Prefix ``message`` with ``glyph``, keeping any leading blank lines first."""
        body = message.lstrip("\n")
        breaks = message[: len(message) - len(body)]
        return Text(f"{breaks}{glyph} {body}", style=style)

    @staticmethod
    def print_success(console: Console, message: str) -> None:
        console.print(
            ConsoleStyles.status_text(ConsoleStyles.SUCCESS_GLYPH, message, ConsoleStyles.SUCCESS)
        )

    @staticmethod
    def print_warning(console: Console, message: str) -> None:
        console.print(
            ConsoleStyles.status_text(ConsoleStyles.WARNING_GLYPH, message, ConsoleStyles.WARNING)
        )

    @staticmethod
    def print_error(console: Console, message: str) -> None:
        console.print(
            ConsoleStyles.status_text(ConsoleStyles.ERROR_GLYPH, message, ConsoleStyles.ERROR)
        )

    @staticmethod
    def print_info(console: Console, message: str) -> None:
        console.print(
            ConsoleStyles.status_text(ConsoleStyles.INFO_GLYPH, message, ConsoleStyles.INFO)
        )

    @staticmethod
    def print_panel(console: Console, content: str, title: str) -> None:
        console.print(Panel.fit(content, title=f"[bold]{title}[/bold]", border_style="cyan"))

    @staticmethod
    def engine_flag(flag: str, value: str) -> str:
        """Markup for one engine parameter, shown as it is passed (``-model: HR``)."""
        return f"[cyan]-{flag}:[/cyan] {value}"

from __future__ import annotations

from typing import Optional

from rich.console import Console
from rich.status import Status
from rich.text import Text

from smg_cli.cli_utils.console_styles import ConsoleStyles


class ProgressIndicator:
    """
    Single-line spinner that mirrors the latest progress text from the engine.

    Each ``update`` replaces the displayed text. ``succeed``, ``fail`` and
    ``stop`` end the spinner; only the first of them has any effect.
    When no console is given the indicator is silent.
    """

    def __init__(
        self,
        console: Optional[Console] = None,
        text: str = "Generating synthetic data...",
        spinner_name: str = "dots",
    ):
        self.console = console
        self.text = text
        self.spinner_name = spinner_name
        self._status: Optional[Status] = None
        self._active = False

    @property
    def active(self) -> bool:
        return self._active

    def start(self) -> "ProgressIndicator":
        if self._active:
            return self
        self._active = True
        if self.console:
            self._status = Status(
                self.text, console=self.console, spinner=self.spinner_name
            )
            self._status.start()
        return self

    def update(self, text: str) -> None:
        """Replace the displayed progress line."""
        if not self._active:
            return
        self.text = text
        if self._status:
            self._status.update(Text(text))

    def stop(self) -> None:
        if not self._active:
            return
        self._active = False
        if self._status:
            self._status.stop()
            self._status = None

    def succeed(self, message: str) -> None:
        if not self._active:
            return
        self.stop()
        if self.console:
            ConsoleStyles.print_success(self.console, message)

    def fail(self, message: str) -> None:
        if not self._active:
            return
        self.stop()
        if self.console:
            ConsoleStyles.print_error(self.console, message)

    def __enter__(self):
        return self.start()

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.stop()
        return False

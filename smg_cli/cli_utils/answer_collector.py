from __future__ import annotations

from typing import List, Optional

from rich.console import Console
from rich.prompt import Confirm, Prompt

from smg_cli.config_utils.smg_config import SmgConfig
from smg_cli.engine.invocation_options import InvocationOptions

MODEL_CHOICES: List[str] = ["HR", "OE", "Invest"]


class AnswerCollector:
    """Asks the interactive questions, pre-filled from the saved configuration."""

    def __init__(self, config: SmgConfig, console: Optional[Console] = None):
        self.config = config
        self.console = console or Console()

    def collect(self) -> InvocationOptions:
        self.console.print("[bold magenta]Welcome to the SMG Interactive CLI![/bold magenta]")

        model = Prompt.ask(
            "Which database model do you want to use?",
            choices=MODEL_CHOICES,
            default=self.config.model,
            console=self.console,
        )
        tables = Prompt.ask(
            "Enter tables to generate (comma-separated)",
            default=",".join(self.config.tables),
            console=self.console,
        )
        data_output = Prompt.ask(
            "Enter output file path for data",
            default=self.config.data_output,
            console=self.console,
        )
        synthetic_generate = Prompt.ask(
            "Enter tables and row counts (e.g., employees(100),departments(50))",
            default=self.config.synthetic_generate,
            console=self.console,
        )

        return InvocationOptions(
            model=model,
            tables=tables,
            data_output=data_output,
            synthetic_generate=synthetic_generate,
        )

    def confirm_save(self) -> bool:
        return Confirm.ask(
            "Remember these answers as defaults?", default=False, console=self.console
        )


def answers_to_config(options: InvocationOptions, base: SmgConfig) -> SmgConfig:
    """Fold prompt answers into a configuration; blank answers keep ``base``."""
    tables = base.tables
    if options.tables:
        tables = [t.strip() for t in options.tables.split(",") if t.strip()]
    return SmgConfig(
        model=options.model or base.model,
        tables=tables,
        data_output=options.data_output or base.data_output,
        synthetic_generate=options.synthetic_generate or base.synthetic_generate,
    )

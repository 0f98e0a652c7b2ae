from __future__ import annotations

import sys
from enum import Enum
from typing import List, Optional, Sequence

import typer
from rich.console import Console
from typing_extensions import Annotated

from smg_cli import __version__
from smg_cli.cli_utils import generate_commands
from smg_cli.config_utils.smg_config import ConfigStore
from smg_cli.engine.invocation_options import InvocationOptions
from smg_cli.logging_utils import configure_logging

console = Console()

BANNER = (
    " ▄█▀▀▀█▄█████▄     ▄███▀ ▄▄█▀▀▀█▄█ \n"
    "▄██    ▀█ ████    ████ ▄██▀     ▀█ \n"
    "▀███▄     █ ██   ▄█ ██ ██▀       ▀ \n"
    "  ▀█████▄ █  ██  █▀ ██ ██          \n"
    "▄     ▀██ █  ██▄█▀  ██ ██▄    ▀████\n"
    "██     ██ █  ▀██▀   ██ ▀██▄     ██ \n"
    "█▀█████▀▄███▄ ▀▀  ▄████▄ ▀▀███████ \n"
)

app = typer.Typer(
    help=BANNER + "\nSynthetic data generation front end for the SMG engine.",
    pretty_exceptions_show_locals=False,
    add_completion=False,
)


class RunMode(str, Enum):
    INTERACTIVE = "interactive"
    DIRECT = "direct"


def select_mode(argv: Sequence[str]) -> RunMode:
    """Interactive when nothing follows the program name, direct otherwise."""
    return RunMode.DIRECT if len(argv) > 1 else RunMode.INTERACTIVE


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"smg {__version__}")
        raise typer.Exit()


@app.command()
def generate(
    model: Annotated[
        Optional[str],
        typer.Option(
            "-model", "--model", "-m", help="Database model to use (e.g., HR, OE)"
        ),
    ] = None,
    tables: Annotated[
        Optional[str],
        typer.Option(
            "-tables",
            "--tables",
            "-t",
            help="Comma-separated list of tables to generate (e.g., employees,departments)",
        ),
    ] = None,
    diagram: Annotated[
        Optional[str],
        typer.Option(
            "-diagram", "--diagram", "-d", help="Write a Mermaid ERD diagram to this path"
        ),
    ] = None,
    schema_output: Annotated[
        Optional[str],
        typer.Option(
            "-schemaOutput",
            "--schemaOutput",
            "-s",
            help="Write the DDL schema to this path",
        ),
    ] = None,
    data_output: Annotated[
        Optional[str],
        typer.Option(
            "-dataOutput",
            "--dataOutput",
            "-o",
            help="Write the synthetic data to this path",
        ),
    ] = None,
    synthetic_generate: Annotated[
        Optional[str],
        typer.Option(
            "-syntheticGenerate",
            "--syntheticGenerate",
            "-g",
            help="Tables and row counts (e.g., employees(100),departments(50))",
        ),
    ] = None,
    mock_api_key: Annotated[
        Optional[str],
        typer.Option("-mockApiKey", "--mockApiKey", "-k", help="Mockaroo API key"),
    ] = None,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Show debug logging")
    ] = False,
    version: Annotated[
        Optional[bool],
        typer.Option(
            "--version",
            "-V",
            callback=_version_callback,
            is_eager=True,
            help="Show the version and exit",
        ),
    ] = None,
):
    """Run the SMG engine with the given options.

    Run without any options to be asked for them interactively.
    """
    configure_logging(verbose=verbose)
    options = InvocationOptions(
        model=model,
        tables=tables,
        diagram=diagram,
        schema_output=schema_output,
        data_output=data_output,
        synthetic_generate=synthetic_generate,
        mock_api_key=mock_api_key,
    )
    generate_commands.generate_from_options(options)


def run_interactive_mode(store: Optional[ConfigStore] = None) -> int:
    configure_logging()
    try:
        generate_commands.generate_interactive(store or ConfigStore())
    except typer.Exit as e:
        return e.exit_code
    return 0


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``smg`` console script."""
    argv = list(sys.argv if argv is None else argv)
    if select_mode(argv) is RunMode.INTERACTIVE:
        sys.exit(run_interactive_mode())
    app(args=argv[1:], prog_name="smg")


if __name__ == "__main__":
    main()

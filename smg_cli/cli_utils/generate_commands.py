"""
Synthetic Data Generation CLI Commands

This module contains the command implementations behind the ``smg`` entry
point, following the pattern of keeping CLI wiring in ``cli.py`` and the
actual work here. Both modes end in ``run_engine``, which hands the canonical
argument vector to the engine and turns its outcome into an exit code.
"""

from __future__ import annotations

import asyncio
import logging
from typing import List, Optional

import typer
from rich.console import Console

from smg_cli.cli_utils.answer_collector import AnswerCollector, answers_to_config
from smg_cli.cli_utils.console_styles import ConsoleStyles
from smg_cli.config_utils.smg_config import ConfigStore
from smg_cli.engine.argument_builder import build_direct_args, build_interactive_args
from smg_cli.engine.engine_executor import EngineExecutor, EngineSettings, ProcessOutcome
from smg_cli.engine.invocation_options import InvocationOptions

logger = logging.getLogger(__name__)

console = Console()
console_styles = ConsoleStyles()

_MASKED_FLAGS = {"mockApiKey"}


def describe_options(options: InvocationOptions) -> str:
    """Render requested parameters for display, hiding secrets."""
    lines = []
    for flag, value in options.present():
        shown = "****" if flag in _MASKED_FLAGS else value
        lines.append(console_styles.engine_flag(flag, shown))
    return "\n".join(lines) if lines else "[dim]No parameters; engine defaults apply[/dim]"


def exit_code_for(outcome: ProcessOutcome) -> int:
    if outcome.success:
        return 0
    if outcome.exit_code is None or outcome.exit_code == 0:
        return 1
    # Killed by a signal: report 128 + signal number, as shells do.
    if outcome.exit_code < 0:
        return 128 - outcome.exit_code
    return outcome.exit_code


async def run_engine(
    args: List[str],
    settings: Optional[EngineSettings] = None,
    out: Optional[Console] = None,
) -> ProcessOutcome:
    """Run the engine and wait for it to exit before returning the outcome."""
    executor = EngineExecutor(settings=settings or EngineSettings.from_env(), console=out or console)
    outcome = await executor.execute(args)
    await executor.wait_closed()
    return outcome


async def run_direct(
    options: InvocationOptions,
    settings: Optional[EngineSettings] = None,
    out: Optional[Console] = None,
) -> ProcessOutcome:
    args = build_direct_args(options)
    logger.info("Direct mode with %d engine arguments", len(args))
    return await run_engine(args, settings=settings, out=out)


async def run_interactive(
    store: ConfigStore,
    settings: Optional[EngineSettings] = None,
    out: Optional[Console] = None,
) -> ProcessOutcome:
    out = out or console
    config = store.load()
    collector = AnswerCollector(config, console=out)

    options = await asyncio.to_thread(collector.collect)
    if await asyncio.to_thread(collector.confirm_save):
        if store.save(answers_to_config(options, config)):
            console_styles.print_info(out, f"Configuration saved to {store.path}")

    args = build_interactive_args(options)
    logger.info("Interactive mode with %d engine arguments", len(args))
    return await run_engine(args, settings=settings, out=out)


def generate_from_options(options: InvocationOptions) -> None:
    """Direct mode: flags were given on the command line."""
    console_styles.print_panel(console, describe_options(options), "SMG generation")
    try:
        outcome = asyncio.run(run_direct(options))
    except Exception as e:
        logger.debug("Command-line execution failed", exc_info=True)
        console_styles.print_error(
            console, f"An error occurred during command-line execution: {e}"
        )
        raise typer.Exit(code=1)
    _finish(outcome)


def generate_interactive(store: ConfigStore) -> None:
    """Interactive mode: no flags, ask for everything."""
    try:
        outcome = asyncio.run(run_interactive(store))
    except (KeyboardInterrupt, EOFError):
        console_styles.print_warning(console, "\nCancelled.")
        raise typer.Exit(code=130)
    except Exception as e:
        logger.debug("Interactive execution failed", exc_info=True)
        console_styles.print_error(
            console, f"An error occurred during interactive execution: {e}"
        )
        raise typer.Exit(code=1)
    _finish(outcome)


def _finish(outcome: ProcessOutcome) -> None:
    if outcome.success:
        return
    # Diagnostics and exit codes were already shown by the progress indicator.
    logger.info("Generation failed: %s", (outcome.reason or "").strip())
    raise typer.Exit(code=exit_code_for(outcome))

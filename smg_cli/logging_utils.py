from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

LOG_FILE_NAME = "smg-cli.log"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s - %(message)s"


def configure_logging(
    verbose: bool = False,
    log_file: Optional[Path] = None,
    console: Optional[Console] = None,
) -> logging.Logger:
    """Send package logs to the console and to ``smg-cli.log``.

    The console shows warnings and above (everything with ``verbose``); the
    file keeps everything. Calling it again replaces the handlers.
    """
    root = logging.getLogger("smg_cli")
    root.setLevel(logging.DEBUG)
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()

    console_handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    console_handler.setLevel(logging.DEBUG if verbose else logging.WARNING)
    root.addHandler(console_handler)

    log_path = Path(log_file) if log_file else Path.cwd() / LOG_FILE_NAME
    try:
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
    except OSError as e:
        root.warning("Could not open log file %s: %s", log_path, e)
    else:
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(file_handler)

    root.propagate = False
    return root

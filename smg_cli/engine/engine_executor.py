"""
Engine process supervision.

The generation engine is an external ``java -jar`` process. Its standard output
carries human-readable progress lines, its error stream carries fatal
diagnostics, and its exit status reports success or failure. ``EngineExecutor``
launches it, mirrors progress on a ``ProgressIndicator`` and resolves exactly
one ``ProcessOutcome`` per run.

Resolution rules:

* the first chunk on the error stream resolves a failure immediately, without
  waiting for the process to exit (a later exit status of 0 does not change it);
* otherwise, once both output streams are closed, exit status 0 is a success
  and anything else is a failure carrying the code;
* a process that cannot be started is a failure carrying the OS error.
"""

from __future__ import annotations

import asyncio
import logging
import os
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence

from rich.console import Console

from smg_cli.cli_utils.console_styles import ConsoleStyles
from smg_cli.cli_utils.progress_utils import ProgressIndicator

logger = logging.getLogger(__name__)

DEFAULT_JAVA_RUNTIME = "java"
DEFAULT_ENGINE_JAR = "../core/target/smg-core-1.0.0.jar"
SUMMARY_LOG = "summary.log"
ERROR_LOG = "error.log"

READ_CHUNK_SIZE = 4096


class EngineState(str, Enum):
    NOT_STARTED = "not_started"
    RUNNING = "running"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclass(frozen=True)
class ProcessOutcome:
    """Terminal result of one engine run."""

    success: bool
    reason: Optional[str] = None
    exit_code: Optional[int] = None

    @classmethod
    def succeeded(cls) -> "ProcessOutcome":
        return cls(success=True)

    @classmethod
    def failed(cls, reason: str, exit_code: Optional[int] = None) -> "ProcessOutcome":
        return cls(success=False, reason=reason, exit_code=exit_code)


@dataclass(frozen=True)
class EngineSettings:
    """Where to find the Java runtime and the engine jar."""

    runtime: str = DEFAULT_JAVA_RUNTIME
    engine_jar: str = DEFAULT_ENGINE_JAR

    @classmethod
    def from_env(cls) -> "EngineSettings":
        """Defaults, overridden by ``SMG_JAVA`` and ``SMG_ENGINE_JAR`` when set."""
        return cls(
            runtime=os.environ.get("SMG_JAVA") or DEFAULT_JAVA_RUNTIME,
            engine_jar=os.environ.get("SMG_ENGINE_JAR") or DEFAULT_ENGINE_JAR,
        )

    def command(self, args: Sequence[str]) -> List[str]:
        return [self.runtime, "-jar", self.engine_jar, *args]


class EngineExecutor:
    """Runs the engine once per ``execute`` call; callers must not overlap runs."""

    def __init__(
        self,
        settings: Optional[EngineSettings] = None,
        console: Optional[Console] = None,
        indicator: Optional[ProgressIndicator] = None,
    ):
        self.settings = settings or EngineSettings()
        self.console = console
        self.indicator = indicator or ProgressIndicator(console)
        self.state = EngineState.NOT_STARTED
        self._outcome: Optional[asyncio.Future] = None
        self._process: Optional[asyncio.subprocess.Process] = None
        self._tasks: List[asyncio.Task] = []

    async def execute(self, args: Sequence[str]) -> ProcessOutcome:
        """Launch the engine with ``args`` and wait for the first terminal event."""
        loop = asyncio.get_running_loop()
        self._outcome = loop.create_future()
        self._process = None
        self._tasks = []
        self.state = EngineState.NOT_STARTED

        command = self.settings.command(args)
        logger.info("Starting engine: %s", " ".join(command))
        self.indicator.start()

        try:
            self._process = await asyncio.create_subprocess_exec(
                *command,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except OSError as e:
            logger.info("Could not start engine %s: %s", command[0], e)
            self.indicator.fail(f"Could not start the engine: {e}")
            self._resolve(ProcessOutcome.failed(str(e)))
            return self._outcome.result()

        self.state = EngineState.RUNNING
        stdout_task = asyncio.create_task(self._relay_progress(self._process.stdout))
        stderr_task = asyncio.create_task(self._watch_errors(self._process.stderr))
        exit_task = asyncio.create_task(
            self._watch_exit(self._process, stdout_task, stderr_task)
        )
        self._tasks = [stdout_task, stderr_task, exit_task]

        return await asyncio.shield(self._outcome)

    async def wait_closed(self) -> Optional[int]:
        """Wait for the engine to exit after an early resolution.

        Output seen while waiting is consumed and ignored. Returns the exit
        status, or ``None`` when no process was started.
        """
        if self._tasks:
            await asyncio.gather(*self._tasks, return_exceptions=True)
        if self._process is None:
            return None
        return await self._process.wait()

    def _resolve(self, outcome: ProcessOutcome) -> bool:
        if self._outcome is None or self._outcome.done():
            logger.debug("Ignoring late engine event: %s", outcome)
            return False
        self.state = EngineState.SUCCEEDED if outcome.success else EngineState.FAILED
        self._outcome.set_result(outcome)
        return True

    async def _relay_progress(self, stream: asyncio.StreamReader) -> None:
        while True:
            chunk = await stream.read(READ_CHUNK_SIZE)
            if not chunk:
                break
            text = chunk.decode(errors="replace").strip()
            logger.debug("engine: %s", text)
            if not self._outcome.done():
                self.indicator.update(text)

    async def _watch_errors(self, stream: asyncio.StreamReader) -> None:
        while True:
            chunk = await stream.read(READ_CHUNK_SIZE)
            if not chunk:
                break
            text = chunk.decode(errors="replace")
            if self._outcome.done():
                logger.debug("engine stderr after resolution: %s", text.strip())
                continue
            self.indicator.stop()
            if self.console:
                ConsoleStyles.print_error(
                    self.console, f"\nError from Java process:\n{text}"
                )
            logger.info("Engine stderr: %s", text.strip())
            self._resolve(ProcessOutcome.failed(text))

    async def _watch_exit(
        self,
        process: asyncio.subprocess.Process,
        stdout_task: asyncio.Task,
        stderr_task: asyncio.Task,
    ) -> None:
        # Exit is only judged once both pipes are closed.
        await asyncio.gather(stdout_task, stderr_task, return_exceptions=True)
        try:
            code = await process.wait()
        except Exception as e:
            logger.exception("Lost track of the engine process")
            self.indicator.fail(f"Lost track of the engine process: {e}")
            self._resolve(ProcessOutcome.failed(str(e)))
            return
        logger.info("Engine exited with code %s", code)
        if self._outcome.done():
            return
        if code == 0:
            self.indicator.succeed("Generation completed successfully!")
            if self.console:
                ConsoleStyles.print_info(
                    self.console,
                    f"Check the {SUMMARY_LOG} and {ERROR_LOG} for details.",
                )
            self._resolve(ProcessOutcome.succeeded())
        else:
            self.indicator.fail(f"Generation failed with exit code {code}.")
            self._resolve(
                ProcessOutcome.failed(
                    f"Java process exited with code {code}", exit_code=code
                )
            )

import logging
import os
import sys
import textwrap
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from smg_cli.engine.engine_executor import EngineSettings


@pytest.fixture(autouse=True)
def isolated_cwd(tmp_path, monkeypatch):
    """Keep smg-config.json and smg-cli.log out of the source tree."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("SMG_CONFIG", raising=False)
    monkeypatch.delenv("SMG_JAVA", raising=False)
    monkeypatch.delenv("SMG_ENGINE_JAR", raising=False)
    # Unbuffered children split print() into text and newline writes.
    monkeypatch.delenv("PYTHONUNBUFFERED", raising=False)
    yield tmp_path
    package_logger = logging.getLogger("smg_cli")
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()
    package_logger.propagate = True


@pytest.fixture
def fake_engine(tmp_path):
    """Write an executable script that plays the part of ``java``.

    The body is plain Python; ``sys``, ``time`` and ``json`` are imported.
    Returns ``EngineSettings`` pointing at the script.
    """

    def _make(body: str, name: str = "fake-java") -> EngineSettings:
        script = tmp_path / name
        script.write_text(
            f"#!{sys.executable}\n"
            "import json, sys, time\n" + textwrap.dedent(body),
            encoding="utf-8",
        )
        os.chmod(script, 0o755)
        return EngineSettings(runtime=str(script), engine_jar="smg-core.jar")

    return _make

"""
Persisted defaults for the interactive prompts.

The settings live in a small JSON file (``smg-config.json`` in the working
directory unless ``SMG_CONFIG`` points elsewhere). Reading never fails: a
missing or unreadable file yields the built-in defaults. Writing is best
effort: failures are logged and reported through the return value.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = "smg-config.json"
CONFIG_ENV_VAR = "SMG_CONFIG"

DEFAULT_MODEL = "HR"
DEFAULT_TABLES = ["employees", "departments", "jobs"]
DEFAULT_DATA_OUTPUT = "data/synthetic_data.sql"
DEFAULT_SYNTHETIC_GENERATE = "employees(100),departments(50),jobs(10)"

# attribute name -> JSON key
_STRING_KEYS = {
    "model": "model",
    "data_output": "dataOutput",
    "synthetic_generate": "syntheticGenerate",
}


@dataclass
class SmgConfig:
    model: str = DEFAULT_MODEL
    tables: List[str] = field(default_factory=lambda: list(DEFAULT_TABLES))
    data_output: str = DEFAULT_DATA_OUTPUT
    synthetic_generate: str = DEFAULT_SYNTHETIC_GENERATE

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SmgConfig":
        """Create SmgConfig from a dictionary loaded from JSON.

        Missing keys fall back to the defaults. Values of the wrong type raise
        ``TypeError``.
        """
        if not isinstance(data, dict):
            raise TypeError(f"Expected a JSON object, got {type(data).__name__}")

        defaults = cls()
        tables = data.get("tables", defaults.tables)
        if not isinstance(tables, list) or not all(isinstance(t, str) for t in tables):
            raise TypeError("'tables' must be a list of strings")

        values = {}
        for attr, key in _STRING_KEYS.items():
            value = data.get(key, getattr(defaults, attr))
            if not isinstance(value, str):
                raise TypeError(f"'{key}' must be a string")
            values[attr] = value

        return cls(tables=list(tables), **values)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "model": self.model,
            "tables": list(self.tables),
            "dataOutput": self.data_output,
            "syntheticGenerate": self.synthetic_generate,
        }


def resolve_config_path(config_path: Optional[Path] = None) -> Path:
    """Work out which settings file to use.

    The search order is:
    1. The ``config_path`` parameter if provided.
    2. The path in the ``SMG_CONFIG`` environment variable.
    3. ``smg-config.json`` in the current working directory.
    A directory in 1 or 2 means ``smg-config.json`` inside it.
    """
    if config_path is None:
        env_path = os.getenv(CONFIG_ENV_VAR)
        config_path = Path(env_path) if env_path else Path.cwd() / CONFIG_FILE_NAME
    config_path = Path(config_path)
    if config_path.is_dir():
        config_path = config_path / CONFIG_FILE_NAME
    return config_path


class ConfigStore:
    """Handle on the settings file, passed to whoever needs the defaults."""

    def __init__(self, path: Optional[Path] = None):
        self.path = resolve_config_path(path)

    def load(self) -> SmgConfig:
        try:
            with self.path.open("r", encoding="utf-8") as f:
                data = json.load(f)
            return SmgConfig.from_dict(data)
        except (OSError, UnicodeDecodeError, ValueError, TypeError) as e:
            logger.debug("Using default configuration (%s): %s", self.path, e)
            return SmgConfig()

    def save(self, config: SmgConfig) -> bool:
        """Overwrite the settings file. Returns ``False`` if it could not be written."""
        try:
            self.path.write_text(
                json.dumps(config.to_dict(), indent=2), encoding="utf-8"
            )
        except (OSError, TypeError, ValueError) as e:
            logger.error("Failed to save configuration to %s: %s", self.path, e)
            return False
        logger.info("Configuration saved to %s", self.path)
        return True

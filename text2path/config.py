"""Configuration for text2path.

Settings come from a YAML file::

    precision: 3        # digits after the decimal point, omit for shortest
    script: Arab        # ISO 15924 tag used for every run, or "auto"
    advance: bounds     # "bounds" (ink extent) or "metric" (font advance)
    log_level: INFO
"""

from __future__ import annotations

import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

import yaml

from text2path.exceptions import ConfigError

CONFIG_ENV_VAR = "TEXT2PATH_CONFIG"
DEFAULT_CONFIG_PATH = Path.home() / ".config" / "text2path" / "config.yaml"

ADVANCE_MODES = ("bounds", "metric")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class Config:
    """Conversion settings shared by the API and the CLI."""

    precision: int | None = None
    script: str = "Arab"
    advance: str = "bounds"
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        if self.precision is not None:
            if isinstance(self.precision, bool) or not isinstance(self.precision, int):
                raise ConfigError(f"precision must be an integer, got {self.precision!r}")
            if self.precision < 0:
                raise ConfigError(f"precision must be >= 0, got {self.precision}")
        if not isinstance(self.script, str) or (
            self.script != "auto" and len(self.script) != 4
        ):
            raise ConfigError(
                f"script must be a four-letter ISO 15924 tag or 'auto', got {self.script!r}"
            )
        if self.advance not in ADVANCE_MODES:
            raise ConfigError(
                f"advance must be one of {', '.join(ADVANCE_MODES)}, got {self.advance!r}"
            )
        if str(self.log_level).upper() not in LOG_LEVELS:
            raise ConfigError(f"Unknown log level: {self.log_level!r}")
        self.log_level = str(self.log_level).upper()

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Config:
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigError(f"Unknown config keys: {', '.join(unknown)}")
        return cls(**data)

    @classmethod
    def load(cls, path: Path | str | None = None) -> Config:
        """Load config from ``path``, ``$TEXT2PATH_CONFIG`` or the user config file.

        Falls back to defaults when no file is configured.
        """
        if path is None:
            env_path = os.environ.get(CONFIG_ENV_VAR)
            if env_path:
                path = Path(env_path)
            elif DEFAULT_CONFIG_PATH.is_file():
                path = DEFAULT_CONFIG_PATH
            else:
                return cls()

        path = Path(path)
        if not path.is_file():
            raise ConfigError(f"Config file not found: {path}")
        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {path}: {e}") from e

        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise ConfigError(f"Config root must be a mapping in {path}")
        return cls.from_dict(data)

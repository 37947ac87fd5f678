"""
Settings for the tasklist command.

Values are resolved from, in increasing order of precedence: built-in
defaults, a YAML configuration file, ``TASKLIST_*`` environment variables,
and finally command-line options (applied by :mod:`tasklist.cli`).
"""
import os
from pathlib import Path
from typing import Optional, Union

from pydantic import BaseModel, Field, ValidationError, field_validator

from .io import load_yaml_file
from .logs import get_logger
from .recovery import ConfigError, CorruptionError

log = get_logger("config")

DEFAULT_CONFIG_FILE = Path.home() / ".config" / "tasklist" / "config.yml"

class Settings(BaseModel):
    data_file: Path = Field(default=Path("tasklist.json"), description="Where the task list is stored")
    color: bool = Field(default=True, description="Paint priority and due cells with ANSI colors")
    log_level: str = Field(default="WARNING", description="Console log level")

    @field_validator('data_file')
    @classmethod
    def expand_user(cls, v):
        return Path(v).expanduser()

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v):
        v = str(v).upper()
        if v not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Invalid log level: {v}")
        return v

def _env_bool(raw: str) -> bool:
    return raw.strip().lower() in ("1", "true", "yes", "y", "on")

def _env_overrides() -> dict:
    overrides = {}
    if os.getenv("TASKLIST_FILE"):
        overrides["data_file"] = Path(os.environ["TASKLIST_FILE"]).expanduser()
    if os.getenv("TASKLIST_COLOR"):
        overrides["color"] = _env_bool(os.environ["TASKLIST_COLOR"])
    if os.getenv("TASKLIST_LOG_LEVEL"):
        overrides["log_level"] = os.environ["TASKLIST_LOG_LEVEL"]
    return overrides

def load_settings(config_file: Optional[Union[Path, str]] = None) -> Settings:
    """Resolve settings from the config file and environment.

    An explicitly named config file (argument or ``TASKLIST_CONFIG``) must
    exist; the default location is optional.
    """
    explicit = config_file or os.getenv("TASKLIST_CONFIG")
    path = Path(explicit).expanduser() if explicit else DEFAULT_CONFIG_FILE

    if explicit and not path.exists():
        raise ConfigError(f"Config file not found: {path}")

    try:
        data = load_yaml_file(path)
    except CorruptionError as e:
        raise ConfigError(str(e)) from e

    if data is None:
        data = {}
    elif not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a mapping")
    else:
        log.debug(f"Loaded configuration from {path}")

    data.update(_env_overrides())
    try:
        return Settings(**data)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration: {e}") from e

"""Configuration file loading (taskplan_config.yaml)."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict
from pydantic import ValidationError as PydanticValidationError

from .scheduler import SchedulingConfig

CONFIG_FILE_NAME = "taskplan_config.yaml"

# Set from the CLI --config option; overrides config discovery
_config_path: Path | None = None


def get_config_path() -> Path | None:
    """Get the config path given on the command line."""
    return _config_path


def set_config_path(path: Path | None) -> None:
    """Set the config path used by discover_config()."""
    global _config_path  # noqa: PLW0603
    _config_path = path


class UnifiedConfig(BaseModel):
    """Top-level configuration file contents."""

    model_config = ConfigDict(extra="forbid")

    scheduling: SchedulingConfig = SchedulingConfig()


def load_unified_config(config_path: Path | str) -> UnifiedConfig:
    """Load configuration from a YAML file.

    Args:
        config_path: Path to taskplan_config.yaml

    Returns:
        UnifiedConfig with scheduling settings

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValueError: If config is invalid
    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with config_path.open(encoding="utf-8") as f:
        data: Any = yaml.safe_load(f)

    if not data:
        return UnifiedConfig()
    if not isinstance(data, dict):
        raise ValueError(f"Invalid config file format: expected dict, got {type(data)}")

    try:
        return UnifiedConfig.model_validate(data)
    except PydanticValidationError as e:
        raise ValueError(f"Invalid config file {config_path}: {e}") from e


def discover_config(
    task_file_path: Path | None = None,
    config_path: Path | None = None,
) -> UnifiedConfig:
    """Find and load configuration, falling back to defaults.

    Search order:
    1. Explicit config_path argument
    2. Path from set_config_path() (CLI --config)
    3. Task file directory / taskplan_config.yaml
    4. Current directory / taskplan_config.yaml
    """
    if config_path is not None:
        return load_unified_config(config_path)

    if _config_path is not None:
        return load_unified_config(_config_path)

    candidates: list[Path] = []
    if task_file_path is not None:
        candidates.append(Path(task_file_path).parent / CONFIG_FILE_NAME)
    candidates.append(Path(CONFIG_FILE_NAME))

    for candidate in candidates:
        if candidate.exists():
            return load_unified_config(candidate)

    return UnifiedConfig()

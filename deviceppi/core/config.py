"""
Configuration for deviceppi.

Settings come from three layers, highest precedence first:

    1. DEVICEPPI_* environment variables
    2. deviceppi.yaml in the base path (or an explicit config_path)
    3. Field defaults

String values in the YAML file may reference the environment with
``${VAR_NAME}`` or ``${VAR_NAME:default}``:

    hardware_identifier: ${SIMULATOR_MODEL_IDENTIFIER:}
    device_class: tablet
    logical_scale: 2

Environment Variables
---------------------
    DEVICEPPI_PLACEHOLDER      placeholder_identifier
    DEVICEPPI_HARDWARE_ID      hardware_identifier
    DEVICEPPI_DEVICE_CLASS     device_class (phone, tablet, unspecified)
    DEVICEPPI_LOGICAL_SCALE    logical_scale
    DEVICEPPI_NATIVE_SCALE     native_scale
    DEVICEPPI_LOG_LEVEL        log_level
"""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import Any, Dict, Literal, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from deviceppi.core.env import (
    DEVICE_CLASSES,
    LOG_LEVELS,
    get_env_float,
    get_env_str,
    get_env_whitelist,
)
from deviceppi.core.exceptions import ConfigValidationError

CONFIG_FILENAME = "deviceppi.yaml"

MIN_SCALE = 0.5
MAX_SCALE = 10.0


class DevicePpiConfig(BaseModel):
    """Settings for PPI resolution and its default collaborators."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    placeholder_identifier: str = Field(
        default="n/a",
        description="Identifier looked up when the platform reports none",
    )
    hardware_identifier: Optional[str] = Field(
        default=None,
        description="Overrides the identifier reported by the platform",
    )
    device_class: Literal["phone", "tablet", "unspecified"] = Field(default="phone")
    logical_scale: float = Field(default=2.0, ge=MIN_SCALE, le=MAX_SCALE)
    native_scale: float = Field(default=2.0, ge=MIN_SCALE, le=MAX_SCALE)
    log_unknown: bool = Field(
        default=True,
        description="Log a warning when the PPI had to be guessed",
    )
    log_level: str = Field(default="INFO")

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {sorted(LOG_LEVELS)}")
        return level

    @field_validator("hardware_identifier")
    @classmethod
    def _blank_identifier_is_none(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and not value.strip():
            return None
        return value


def expand_env_vars(value: Any) -> Any:
    """Recursively expand ${VAR_NAME} and ${VAR_NAME:default} in config values."""
    if isinstance(value, str):
        pattern = r"\$\{([^}:]+)(?::([^}]*))?\}"

        def replace_env_var(match: re.Match) -> str:
            var_name = match.group(1)
            default_value = match.group(2) if match.group(2) is not None else ""
            return os.environ.get(var_name, default_value)

        return re.sub(pattern, replace_env_var, value)
    if isinstance(value, dict):
        return {k: expand_env_vars(v) for k, v in value.items()}
    if isinstance(value, list):
        return [expand_env_vars(item) for item in value]
    return value


def _env_overrides() -> Dict[str, Any]:
    """Collect the DEVICEPPI_* values that are set and valid."""
    candidates: Dict[str, Any] = {
        "placeholder_identifier": get_env_str("DEVICEPPI_PLACEHOLDER"),
        "hardware_identifier": get_env_str("DEVICEPPI_HARDWARE_ID"),
        "device_class": get_env_whitelist("DEVICEPPI_DEVICE_CLASS", DEVICE_CLASSES),
        "logical_scale": get_env_float(
            "DEVICEPPI_LOGICAL_SCALE", min_value=MIN_SCALE, max_value=MAX_SCALE
        ),
        "native_scale": get_env_float(
            "DEVICEPPI_NATIVE_SCALE", min_value=MIN_SCALE, max_value=MAX_SCALE
        ),
        "log_level": get_env_whitelist("DEVICEPPI_LOG_LEVEL", LOG_LEVELS),
    }
    return {key: value for key, value in candidates.items() if value is not None}


def _apply_env_overrides(config: DevicePpiConfig) -> DevicePpiConfig:
    overrides = _env_overrides()
    if not overrides:
        return config
    return DevicePpiConfig.model_validate({**config.model_dump(), **overrides})


def _read_yaml(config_path: Path) -> Dict[str, Any]:
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise ConfigValidationError(
            f"Could not read config from {config_path}: {e}"
        ) from e

    if not isinstance(data, dict):
        raise ConfigValidationError(
            f"Config file {config_path} must contain a mapping at the top level"
        )
    return expand_env_vars(data)


def load_config(
    config_path: Optional[Path] = None, base_path: Optional[Path] = None
) -> DevicePpiConfig:
    """
    Load configuration from YAML file with environment variable overrides.

    Args:
        config_path: Path to config file. Defaults to deviceppi.yaml in base_path.
        base_path: Directory searched for the default file. Defaults to cwd.

    Returns:
        Validated DevicePpiConfig.

    Raises:
        ConfigValidationError: The file exists but cannot be read or validated.
    """
    base_path = base_path or Path.cwd()
    if config_path is None:
        config_path = base_path / CONFIG_FILENAME

    if not config_path.exists():
        return _apply_env_overrides(DevicePpiConfig())

    data = _read_yaml(config_path)
    try:
        config = DevicePpiConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigValidationError(
            f"Invalid configuration in {config_path}: {e}"
        ) from e

    return _apply_env_overrides(config)

"""
Safe environment variable parsing with validation.

Instead of unsafe direct environment access:

    scale = float(os.environ.get("DEVICEPPI_LOGICAL_SCALE", "2"))

use the bounded getters, which log and fall back to the default on bad input:

    from deviceppi.core.env import get_env_float
    scale = get_env_float("DEVICEPPI_LOGICAL_SCALE", default=2.0, min_value=0.5)
"""

from __future__ import annotations

import logging
import os
from typing import FrozenSet, Optional

logger = logging.getLogger(__name__)


DEVICE_CLASSES: FrozenSet[str] = frozenset(["phone", "tablet", "unspecified"])

LOG_LEVELS: FrozenSet[str] = frozenset(
    ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
)

# Longest identifier accepted from the environment
MAX_IDENTIFIER_LENGTH = 64


def get_env_str(
    name: str,
    default: Optional[str] = None,
    max_length: int = MAX_IDENTIFIER_LENGTH,
) -> Optional[str]:
    """
    Get a stripped string from an environment variable.

    Empty values and values longer than max_length return the default.
    """
    value = os.environ.get(name)
    if value is None:
        return default

    value = value.strip()
    if not value:
        return default
    if len(value) > max_length:
        logger.warning(
            f"Value for {name} exceeds {max_length} characters: Returning default"
        )
        return default
    return value


def get_env_float(
    name: str,
    default: Optional[float] = None,
    min_value: Optional[float] = None,
    max_value: Optional[float] = None,
) -> Optional[float]:
    """
    Get float from environment variable with bounds validation.

    Args:
        name: Environment variable name.
        default: Default value if not set or invalid.
        min_value: Minimum allowed value (clamped if exceeded).
        max_value: Maximum allowed value (clamped if exceeded).

    Returns:
        Validated float or default.

    Example:
        >>> get_env_float("DEVICEPPI_LOGICAL_SCALE", default=2.0, min_value=1.0)
        2.0
    """
    value = os.environ.get(name)
    if value is None:
        return default

    try:
        float_value = float(value)
    except ValueError:
        logger.warning(
            f"Invalid float value for {name}={value}: Returning default {default}"
        )
        return default

    if float_value != float_value:  # NaN check
        return default

    if min_value is not None and float_value < min_value:
        return min_value
    if max_value is not None and float_value > max_value:
        return max_value

    return float_value


def get_env_whitelist(
    name: str,
    allowed: FrozenSet[str],
    default: Optional[str] = None,
    case_sensitive: bool = False,
) -> Optional[str]:
    """
    Get string from environment variable with whitelist validation.

    Only returns value if it matches one of the allowed values.

    Example:
        >>> # With DEVICEPPI_DEVICE_CLASS="Tablet"
        >>> get_env_whitelist("DEVICEPPI_DEVICE_CLASS", DEVICE_CLASSES, default="phone")
        'tablet'
    """
    value = os.environ.get(name)
    if value is None:
        return default

    if case_sensitive:
        if value in allowed:
            return value
    else:
        normalized = value.lower()
        for allowed_value in allowed:
            if normalized == allowed_value.lower():
                return allowed_value

    logger.warning(f"Value for {name}={value} is not allowed: Returning default")
    return default

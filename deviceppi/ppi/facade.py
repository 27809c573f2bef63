"""
PPI resolution entry point.

resolve_ppi() tries an exact table lookup for the device's hardware
identifier and falls back to the estimator when the device is unknown.
It always returns a usable PPI:

    outcome = resolve_ppi()
    if not outcome.is_exact:
        crash_reporter.record_non_fatal(outcome.reason)
    points_per_mm = outcome.ppi / 25.4
"""

from __future__ import annotations

from typing import Optional

from deviceppi.core.config import DevicePpiConfig
from deviceppi.core.logging import get_logger
from deviceppi.ppi.catalog import DEFAULT_TABLE
from deviceppi.ppi.estimator import guess
from deviceppi.ppi.resolver import lookup
from deviceppi.ppi.table import ClassificationTable
from deviceppi.ppi.types import BestGuess, Exact, Found, ResolutionOutcome
from deviceppi.shared.platform import (
    ConfiguredDisplaySignals,
    DisplaySignalProvider,
    IdentityProvider,
    PlatformIdentityProvider,
)

logger = get_logger(__name__)


def resolve_ppi(
    identity: Optional[IdentityProvider] = None,
    display: Optional[DisplaySignalProvider] = None,
    config: Optional[DevicePpiConfig] = None,
    table: ClassificationTable = DEFAULT_TABLE,
) -> ResolutionOutcome:
    """
    Determine the PPI of the current device's display.

    Args:
        identity: Source of the hardware identifier. Defaults to
            PlatformIdentityProvider.
        display: Source of device class and scale. Only consulted when the
            identifier is unknown. Defaults to ConfiguredDisplaySignals.
        config: Settings for the defaults and the placeholder identifier.
        table: Classification table to search.

    Returns:
        Exact when the identifier is in the table, otherwise BestGuess with
        the estimator's value and an UnknownHardwareIdentifierError reason.
    """
    if config is None:
        config = DevicePpiConfig()
    if identity is None:
        identity = PlatformIdentityProvider(config)

    identifier = identity.current_hardware_identifier()
    if identifier is None:
        identifier = config.placeholder_identifier

    result = lookup(identifier, table)
    if isinstance(result, Found):
        logger.debug("Resolved exact PPI", identifier=identifier, ppi=result.ppi)
        return Exact(
            ppi=result.ppi,
            identifier=result.identifier,
            model_name=result.model_name,
        )

    if display is None:
        display = ConfiguredDisplaySignals(config)
    device_class = display.current_device_class()
    scale = display.current_scale()
    ppi = guess(device_class, scale)

    if config.log_unknown:
        logger.warning(
            "Unknown hardware identifier, using best-guess PPI",
            identifier=identifier,
            ppi=ppi,
            device_class=device_class.value,
            logical_scale=scale.logical_scale,
            native_scale=scale.native_scale,
            error_code=result.error.error_code,
        )
    return BestGuess(ppi=ppi, identifier=identifier)

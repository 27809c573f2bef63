"""
Value types crossing the resolver, estimator and facade.

LookupResult and ResolutionOutcome are two-case unions; callers branch on
them with isinstance (or the ``is_exact`` flag):

    outcome = resolve_ppi()
    if isinstance(outcome, BestGuess):
        logger.warning("Guessed PPI", identifier=outcome.reason.identifier)
    render(outcome.ppi)
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from deviceppi.core.exceptions import (
    InvalidSignalError,
    UnknownHardwareIdentifierError,
)


class DeviceClass(str, Enum):
    """Form-factor class reported by the host platform."""

    PHONE = "phone"
    TABLET = "tablet"
    UNSPECIFIED = "unspecified"


@dataclass(frozen=True)
class ScaleSignal:
    """Logical and native display scale factors.

    native_scale differs from logical_scale when the OS renders into a
    buffer that is resampled to the panel (e.g. 3x logical on a 2.608x panel).
    """

    logical_scale: float
    native_scale: float

    def __post_init__(self) -> None:
        for name in ("logical_scale", "native_scale"):
            value = getattr(self, name)
            if not value > 0:
                raise InvalidSignalError(f"{name} must be positive, got {value!r}")

    @classmethod
    def uniform(cls, scale: float) -> "ScaleSignal":
        """A signal whose native scale equals its logical scale."""
        return cls(logical_scale=scale, native_scale=scale)

    @property
    def is_native(self) -> bool:
        return self.logical_scale == self.native_scale


# ============================================================================
# Lookup results
# ============================================================================


@dataclass(frozen=True)
class Found:
    """The identifier is in the classification table."""

    ppi: float
    identifier: str
    model_name: Optional[str] = None

    is_found = True


@dataclass(frozen=True)
class NotFound:
    """The identifier is not in the classification table."""

    identifier: str

    is_found = False

    @property
    def error(self) -> UnknownHardwareIdentifierError:
        return UnknownHardwareIdentifierError(self.identifier)


LookupResult = Union[Found, NotFound]


# ============================================================================
# Resolution outcomes
# ============================================================================


@dataclass(frozen=True)
class Exact:
    """PPI taken from the classification table."""

    ppi: float
    identifier: str
    model_name: Optional[str] = None

    is_exact = True


@dataclass(frozen=True)
class BestGuess:
    """PPI estimated from display signals because the device was not recognised.

    ``reason`` is never raised; it is there to be logged or reported.
    """

    ppi: float
    identifier: str

    is_exact = False

    @property
    def reason(self) -> UnknownHardwareIdentifierError:
        return UnknownHardwareIdentifierError(self.identifier)


ResolutionOutcome = Union[Exact, BestGuess]

"""
Host platform collaborators.

The resolver needs two things from the host: the raw hardware identifier and
the current display signals (form factor and scale factors). Both are
expressed as protocols so an app embedding deviceppi can pass its own
implementation, for example one backed by UIKit through a bridge:

    class UIKitDisplay:
        def current_device_class(self) -> DeviceClass: ...
        def current_scale(self) -> ScaleSignal: ...

    resolve_ppi(display=UIKitDisplay())

The defaults here read the identifier from the interpreter's platform module
and the display signals from configuration.
"""

from __future__ import annotations

import os
import platform
import sys
from dataclasses import dataclass
from typing import Optional, Protocol, runtime_checkable

from deviceppi.core.config import DevicePpiConfig
from deviceppi.core.logging import get_logger
from deviceppi.ppi.types import DeviceClass, ScaleSignal

logger = get_logger(__name__)

# Set by the iOS simulator, where the machine name is the host CPU
SIMULATOR_MODEL_ENV = "SIMULATOR_MODEL_IDENTIFIER"

_MODEL_PREFIXES = ("iPhone", "iPad", "iPod")


@runtime_checkable
class IdentityProvider(Protocol):
    """Supplies the platform's hardware model identifier."""

    def current_hardware_identifier(self) -> Optional[str]: ...


@runtime_checkable
class DisplaySignalProvider(Protocol):
    """Supplies the device form factor and display scale factors."""

    def current_device_class(self) -> DeviceClass: ...

    def current_scale(self) -> ScaleSignal: ...


@dataclass(frozen=True)
class PlatformInfo:
    """Detected platform information."""

    system: str
    machine: str
    is_ios: bool
    simulator_model: Optional[str] = None

    @property
    def is_simulator(self) -> bool:
        return self.simulator_model is not None

    @property
    def hardware_identifier(self) -> Optional[str]:
        """The device model string, if this platform reports one."""
        if not self.is_ios:
            return None
        if self.simulator_model:
            return self.simulator_model
        if self.machine.startswith(_MODEL_PREFIXES):
            return self.machine
        return None


def detect_platform() -> PlatformInfo:
    """
    Detect the current runtime platform.

    On iOS and iPadOS the machine name is the hardware model identifier
    (e.g. "iPhone14,5"). Simulators report the host CPU instead and expose
    the simulated model through SIMULATOR_MODEL_IDENTIFIER.
    """
    system = platform.system()
    is_ios = sys.platform == "ios" or system in ("iOS", "iPadOS")
    simulator_model = os.environ.get(SIMULATOR_MODEL_ENV) or None

    return PlatformInfo(
        system=system,
        machine=platform.machine(),
        is_ios=is_ios,
        simulator_model=simulator_model if is_ios else None,
    )


class PlatformIdentityProvider:
    """
    Identity from configuration override, then from the running platform.

    Returns None off iOS, so the resolver falls back to its placeholder.
    """

    def __init__(self, config: Optional[DevicePpiConfig] = None) -> None:
        self._config = config or DevicePpiConfig()

    def current_hardware_identifier(self) -> Optional[str]:
        if self._config.hardware_identifier is not None:
            return self._config.hardware_identifier

        info = detect_platform()
        identifier = info.hardware_identifier
        if identifier is None:
            logger.debug(
                "Platform reports no hardware identifier",
                system=info.system,
                machine=info.machine,
            )
        return identifier


@dataclass(frozen=True)
class StaticDisplaySignals:
    """Display signals known up front by the host."""

    device_class: DeviceClass
    scale: ScaleSignal

    def current_device_class(self) -> DeviceClass:
        return self.device_class

    def current_scale(self) -> ScaleSignal:
        return self.scale


class ConfiguredDisplaySignals:
    """Display signals taken from DevicePpiConfig."""

    def __init__(self, config: Optional[DevicePpiConfig] = None) -> None:
        self._config = config or DevicePpiConfig()

    def current_device_class(self) -> DeviceClass:
        return DeviceClass(self._config.device_class)

    def current_scale(self) -> ScaleSignal:
        return ScaleSignal(
            logical_scale=self._config.logical_scale,
            native_scale=self._config.native_scale,
        )

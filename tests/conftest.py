"""
Shared pytest fixtures for deviceppi tests.

Fixture Organization
--------------------
- **clean_env**: Removes DEVICEPPI_* and simulator variables
- **restore_logging**: Resets logging to the INFO default after each test
- **identity_of**: Builds an IdentityProvider returning a fixed identifier
- **phone_display / tablet_display**: Display signal factories
- **temp_dir**: Temporary directory for config files
"""

import os
import tempfile
from pathlib import Path
from typing import Callable, Generator, Optional

import pytest

from deviceppi.core.logging import configure_logging
from deviceppi.ppi.types import DeviceClass, ScaleSignal
from deviceppi.shared.platform import StaticDisplaySignals


class FixedIdentity:
    """IdentityProvider returning a fixed value."""

    def __init__(self, identifier: Optional[str]) -> None:
        self.identifier = identifier
        self.calls = 0

    def current_hardware_identifier(self) -> Optional[str]:
        self.calls += 1
        return self.identifier


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's environment out of every test."""
    for name in list(os.environ):
        if name.startswith("DEVICEPPI_") or name == "SIMULATOR_MODEL_IDENTIFIER":
            monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def restore_logging() -> Generator[None, None, None]:
    """Undo logging levels set by a test (the CLI sets its own)."""
    yield
    configure_logging(level="INFO")


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def identity_of() -> Callable[[Optional[str]], FixedIdentity]:
    """Factory for identity providers.

    Example:
        def test_known(identity_of):
            outcome = resolve_ppi(identity=identity_of("iPhone14,5"))
    """
    return FixedIdentity


@pytest.fixture
def phone_display() -> Callable[..., StaticDisplaySignals]:
    """Phone-class display signals with the given scales."""

    def _make(logical: float = 2.0, native: Optional[float] = None) -> StaticDisplaySignals:
        return StaticDisplaySignals(
            device_class=DeviceClass.PHONE,
            scale=ScaleSignal(logical, native if native is not None else logical),
        )

    return _make


@pytest.fixture
def tablet_display() -> Callable[..., StaticDisplaySignals]:
    """Tablet-class display signals with the given scales."""

    def _make(logical: float = 2.0, native: Optional[float] = None) -> StaticDisplaySignals:
        return StaticDisplaySignals(
            device_class=DeviceClass.TABLET,
            scale=ScaleSignal(logical, native if native is not None else logical),
        )

    return _make

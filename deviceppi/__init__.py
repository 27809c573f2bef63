"""deviceppi - physical pixel density of the current device's display.

    from deviceppi import resolve_ppi

    outcome = resolve_ppi()
    outcome.ppi        # always usable
    outcome.is_exact   # False when the model is not in the table
"""

__version__ = "1.0.0"

from deviceppi.ppi.facade import resolve_ppi
from deviceppi.ppi.types import BestGuess, DeviceClass, Exact, ScaleSignal

__all__ = [
    "__version__",
    "resolve_ppi",
    "Exact",
    "BestGuess",
    "DeviceClass",
    "ScaleSignal",
]

"""
PPI resolution.

    catalog.py    # bundled classification table data
    table.py      # ClassificationEntry, ClassificationTable
    resolver.py   # exact identifier lookup
    estimator.py  # fallback heuristic
    facade.py     # resolve_ppi()
    physical.py   # pixel/length conversions

The facade is imported from the package root (deviceppi.resolve_ppi).
"""

from deviceppi.ppi.catalog import DEFAULT_TABLE
from deviceppi.ppi.estimator import guess
from deviceppi.ppi.resolver import lookup
from deviceppi.ppi.table import ClassificationEntry, ClassificationTable
from deviceppi.ppi.types import (
    BestGuess,
    DeviceClass,
    Exact,
    Found,
    LookupResult,
    NotFound,
    ResolutionOutcome,
    ScaleSignal,
)

__all__ = [
    "DEFAULT_TABLE",
    "ClassificationEntry",
    "ClassificationTable",
    "lookup",
    "guess",
    "DeviceClass",
    "ScaleSignal",
    "Found",
    "NotFound",
    "LookupResult",
    "Exact",
    "BestGuess",
    "ResolutionOutcome",
]

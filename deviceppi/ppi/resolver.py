"""Exact hardware identifier lookup against the classification table."""

from __future__ import annotations

from deviceppi.ppi.catalog import DEFAULT_TABLE
from deviceppi.ppi.table import ClassificationTable
from deviceppi.ppi.types import Found, LookupResult, NotFound


def lookup(identifier: str, table: ClassificationTable = DEFAULT_TABLE) -> LookupResult:
    """
    Look up the panel PPI for a hardware identifier.

    Matching is exact and case-sensitive. An empty or unrecognised
    identifier is a normal input and yields NotFound.

    Args:
        identifier: Raw hardware model string, e.g. "iPhone14,5".
        table: Table to search. Defaults to the bundled catalog.

    Returns:
        Found with the entry's PPI, or NotFound carrying the identifier.
    """
    entry = table.entry_for(identifier)
    if entry is None:
        return NotFound(identifier=identifier)
    return Found(
        ppi=entry.ppi,
        identifier=identifier,
        model_name=entry.name_for(identifier),
    )

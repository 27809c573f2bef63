"""
Centralized Exception Hierarchy for deviceppi.

All exceptions inherit from DevicePpiError for easy catching.

Each exception includes:
- error_code: Unique identifier for documentation lookup (e.g., "DPPI-LOOKUP-001")
- why_it_happened: Explanation of the cause
- how_to_fix: Actionable steps to resolve the issue

Exception Hierarchy
-------------------
    DevicePpiError (base)
    ├── LookupFailure
    │   └── UnknownHardwareIdentifierError
    ├── TableIntegrityError
    │   └── DuplicateIdentifierError
    ├── InvalidSignalError
    └── ConfigValidationError

Unknown hardware is an expected condition: the resolver never raises
UnknownHardwareIdentifierError, it hands it back inside a BestGuess so the
caller can log it.
"""

from typing import List, Optional, Sequence


class DevicePpiError(Exception):
    """
    Base exception for all deviceppi errors.

    Example
    -------
        try:
            table = ClassificationTable(entries)
        except DevicePpiError as e:
            logger.error(f"Table rejected: {e}")
            print(f"Fix: {e.how_to_fix}")
    """

    error_code: str = "DPPI-ERR-000"
    why_it_happened: str = "An unexpected error occurred"
    how_to_fix: List[str] = ["Check the error message for details"]

    def __init__(
        self,
        message: str,
        *,
        error_code: Optional[str] = None,
        why_it_happened: Optional[str] = None,
        how_to_fix: Optional[List[str]] = None,
    ) -> None:
        """Initialize DevicePpiError with helpful information.

        Args:
            message: Human-readable error message
            error_code: Unique identifier (e.g., "DPPI-TABLE-001")
            why_it_happened: Explanation of the cause
            how_to_fix: List of actionable fix suggestions
        """
        super().__init__(message)

        if error_code is not None:
            self.error_code = error_code
        if why_it_happened is not None:
            self.why_it_happened = why_it_happened
        if how_to_fix is not None:
            self.how_to_fix = how_to_fix

    @property
    def user_message(self) -> str:
        """Get the user-friendly error message."""
        return str(self)


# ============================================================================
# Lookup Exceptions
# ============================================================================


class LookupFailure(DevicePpiError):
    """Base exception for hardware identifier lookups that did not match."""

    error_code = "DPPI-LOOKUP-000"
    why_it_happened = "The hardware identifier could not be matched"
    how_to_fix = ["Check the identifier reported by the platform"]


class UnknownHardwareIdentifierError(LookupFailure):
    """
    The hardware identifier is not in the classification table.

    Usually a device released after the table was last updated. The
    identifier is kept on the exception so it can be reported.

    Example
    -------
        outcome = resolve_ppi()
        if isinstance(outcome, BestGuess):
            telemetry.record(outcome.reason.identifier)
    """

    error_code = "DPPI-LOOKUP-001"
    why_it_happened = (
        "The device model is newer than the classification table, or the "
        "platform did not report a hardware identifier"
    )
    how_to_fix = [
        "Add the identifier to the classification table with its panel PPI",
        "Upgrade deviceppi to a release that knows this model",
    ]

    def __init__(self, identifier: str) -> None:
        self.identifier = identifier
        super().__init__(f"Unknown hardware identifier: {identifier!r}")


# ============================================================================
# Table Exceptions
# ============================================================================


class TableIntegrityError(DevicePpiError):
    """Raised when classification table data is malformed."""

    error_code = "DPPI-TABLE-000"
    why_it_happened = "The classification table data is inconsistent"
    how_to_fix = ["Review the table rows that were added or edited last"]


class DuplicateIdentifierError(TableIntegrityError):
    """
    Raised when one identifier appears in more than one table entry.

    Each hardware identifier must map to exactly one PPI value.
    """

    error_code = "DPPI-TABLE-001"
    why_it_happened = "An identifier was listed under two different panels"
    how_to_fix = [
        "Remove the identifier from every entry but the correct one",
        "Build the table with strict=False to keep the first entry",
    ]

    def __init__(self, identifier: str, ppi_values: Sequence[float]) -> None:
        self.identifier = identifier
        self.ppi_values = tuple(ppi_values)
        values = ", ".join(f"{value:g}" for value in self.ppi_values)
        super().__init__(
            f"Identifier {identifier!r} appears in several entries (ppi: {values})"
        )


# ============================================================================
# Signal and Configuration Exceptions
# ============================================================================


class InvalidSignalError(DevicePpiError):
    """Raised when a display signal carries an impossible value."""

    error_code = "DPPI-SIGNAL-001"
    why_it_happened = "Display scale factors must be positive numbers"
    how_to_fix = [
        "Pass the scale reported by the operating system unchanged",
        "Check the logical_scale/native_scale configuration values",
    ]


class ConfigValidationError(DevicePpiError):
    """Raised when a configuration file cannot be read or validated."""

    error_code = "DPPI-CONFIG-001"
    why_it_happened = "The configuration file is unreadable or has invalid values"
    how_to_fix = [
        "Validate the YAML syntax of deviceppi.yaml",
        "Check field names and value ranges against the documentation",
    ]

"""Tests for exact identifier lookup."""

import pytest

from deviceppi.core.exceptions import UnknownHardwareIdentifierError
from deviceppi.ppi.catalog import DEFAULT_TABLE
from deviceppi.ppi.resolver import lookup
from deviceppi.ppi.table import ClassificationEntry, ClassificationTable
from deviceppi.ppi.types import Found, NotFound


class TestLookupKnown:
    """Tests for identifiers present in the table."""

    @pytest.mark.parametrize(
        "identifier, ppi, model",
        [
            ("iPhone14,5", 460, "iPhone 13"),
            ("iPad2,1", 132, "iPad 2"),
            ("iPhone14,4", 476, "iPhone 13 mini"),
            ("iPad2,6", 163, "iPad mini"),
            ("iPhone10,6", 458, "iPhone X"),
            ("iPhone7,1", 401, "iPhone 6 Plus"),
            ("iPod9,1", 326, "iPod touch (7th generation)"),
            ("iPad13,16", 264, "iPad Air (5th generation)"),
        ],
    )
    def test_found(self, identifier, ppi, model):
        """Test known identifiers return their entry's PPI and model."""
        result = lookup(identifier)

        assert result == Found(ppi=ppi, identifier=identifier, model_name=model)
        assert result.is_found

    def test_every_table_identifier_resolves(self):
        """Test each identifier resolves to the PPI of its own entry."""
        for entry in DEFAULT_TABLE:
            for identifier in entry.model_identifiers:
                result = lookup(identifier)
                assert isinstance(result, Found)
                assert result.ppi == entry.ppi

    def test_deterministic(self):
        """Test repeated lookups give equal results."""
        assert lookup("iPhone15,3") == lookup("iPhone15,3")


class TestLookupUnknown:
    """Tests for identifiers missing from the table."""

    @pytest.mark.parametrize(
        "identifier", ["iPhone99,9", "iPad99,9", "", "n/a", "iphone14,5", "iPhone14,5 "]
    )
    def test_not_found(self, identifier):
        """Test unknown, empty and near-miss identifiers yield NotFound."""
        result = lookup(identifier)

        assert result == NotFound(identifier=identifier)
        assert not result.is_found

    def test_not_found_error(self):
        """Test NotFound exposes an UnknownHardwareIdentifierError."""
        error = lookup("iPhone99,9").error

        assert isinstance(error, UnknownHardwareIdentifierError)
        assert error.identifier == "iPhone99,9"


class TestLookupCustomTable:
    """Tests for lookups against a caller-supplied table."""

    def test_custom_table(self):
        """Test the table argument replaces the catalog."""
        table = ClassificationTable(
            [ClassificationEntry.from_models(500, [("Future Phone", ["iPhone99,9"])])]
        )

        assert lookup("iPhone99,9", table).ppi == 500
        assert isinstance(lookup("iPhone14,5", table), NotFound)

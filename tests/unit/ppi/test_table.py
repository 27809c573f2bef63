"""
Tests for the classification table and the bundled catalog.

Organization
------------
- TestClassificationEntry: entry construction and validation
- TestClassificationTable: indexing, strict and first-match modes
- TestCatalog: well-formedness of the bundled data
"""

import pytest

from deviceppi.core.exceptions import DuplicateIdentifierError, TableIntegrityError
from deviceppi.ppi.catalog import DEFAULT_TABLE
from deviceppi.ppi.estimator import GUESS_VALUES
from deviceppi.ppi.table import ClassificationEntry, ClassificationTable


class TestClassificationEntry:
    """Tests for ClassificationEntry."""

    def test_from_models(self):
        """Test identifiers and names are collected from model rows."""
        entry = ClassificationEntry.from_models(
            401, [("iPhone 8 Plus", ["iPhone10,2", "iPhone10,5"]), ("iPhone 6 Plus", ["iPhone7,1"])]
        )

        assert entry.ppi == 401.0
        assert entry.model_identifiers == frozenset(["iPhone10,2", "iPhone10,5", "iPhone7,1"])
        assert entry.name_for("iPhone10,5") == "iPhone 8 Plus"
        assert entry.name_for("iPhone99,9") is None
        assert "iPhone7,1" in entry

    def test_names_are_read_only(self):
        """Test the name mapping cannot be mutated."""
        entry = ClassificationEntry.from_models(132, [("iPad 2", ["iPad2,1"])])

        with pytest.raises(TypeError):
            entry.model_names["iPad2,2"] = "iPad 2"

    @pytest.mark.parametrize("ppi", [0, -1.0])
    def test_non_positive_ppi_rejected(self, ppi):
        """Test a PPI must be positive."""
        with pytest.raises(TableIntegrityError):
            ClassificationEntry(ppi=ppi, model_identifiers=frozenset(["a"]))

    def test_empty_identifiers_rejected(self):
        """Test an entry needs at least one identifier."""
        with pytest.raises(TableIntegrityError):
            ClassificationEntry.from_models(326, [])


class TestClassificationTable:
    """Tests for ClassificationTable."""

    def _overlapping(self):
        return [
            ClassificationEntry(ppi=460, model_identifiers=frozenset(["A1", "shared"])),
            ClassificationEntry(ppi=458, model_identifiers=frozenset(["B1", "shared"])),
        ]

    def test_entry_for(self):
        """Test identifiers map to their entry."""
        entries = [
            ClassificationEntry(ppi=460, model_identifiers=frozenset(["A1"])),
            ClassificationEntry(ppi=458, model_identifiers=frozenset(["B1", "B2"])),
        ]
        table = ClassificationTable(entries)

        assert table.entry_for("B2") is entries[1]
        assert table.entry_for("C1") is None
        assert "A1" in table
        assert len(table) == 2
        assert list(table) == entries
        assert table.identifiers() == frozenset(["A1", "B1", "B2"])

    def test_strict_rejects_duplicates(self):
        """Test overlapping entries are rejected at construction."""
        with pytest.raises(DuplicateIdentifierError) as exc_info:
            ClassificationTable(self._overlapping())

        assert exc_info.value.identifier == "shared"
        assert exc_info.value.ppi_values == (460.0, 458.0)

    def test_non_strict_first_match_wins(self):
        """Test the earlier entry wins when strict checking is off."""
        table = ClassificationTable(self._overlapping(), strict=False)

        assert table.entry_for("shared").ppi == 460
        assert table.entry_for("B1").ppi == 458

    def test_matching_is_exact(self):
        """Test no case folding or trimming is applied."""
        table = ClassificationTable(
            [ClassificationEntry(ppi=460, model_identifiers=frozenset(["iPhone14,5"]))]
        )

        assert "iphone14,5" not in table
        assert " iPhone14,5" not in table
        assert "" not in table

    def test_ppi_values_in_order(self):
        """Test distinct PPI values keep table order."""
        table = ClassificationTable(
            [
                ClassificationEntry(ppi=264, model_identifiers=frozenset(["a"])),
                ClassificationEntry(ppi=132, model_identifiers=frozenset(["b"])),
                ClassificationEntry(ppi=264, model_identifiers=frozenset(["c"])),
            ]
        )

        assert table.ppi_values() == [264, 132]


class TestCatalog:
    """Tests for the bundled DEFAULT_TABLE."""

    def test_identifier_sets_pairwise_disjoint(self):
        """Test no identifier appears in two entries."""
        seen = set()
        for entry in DEFAULT_TABLE:
            overlap = seen & entry.model_identifiers
            assert not overlap, f"duplicated identifiers: {sorted(overlap)}"
            seen |= entry.model_identifiers

        assert seen == DEFAULT_TABLE.identifiers()

    def test_known_densities(self):
        """Test the catalog carries every panel density."""
        assert DEFAULT_TABLE.ppi_values() == [476, 460, 458, 401, 326, 264, 163, 132]

    def test_table_only_densities(self):
        """Test 476 and 163 come only from the table, never from the estimator."""
        assert 476 not in GUESS_VALUES
        assert 163 not in GUESS_VALUES

    def test_every_identifier_has_a_model_name(self):
        """Test every identifier carries its marketing name."""
        for entry in DEFAULT_TABLE:
            for identifier in entry.model_identifiers:
                assert entry.name_for(identifier)

    def test_identifiers_look_like_models(self):
        """Test identifiers follow the <family><major>,<minor> form."""
        for identifier in DEFAULT_TABLE.identifiers():
            family, _, minor = identifier.partition(",")
            assert family.startswith(("iPhone", "iPad", "iPod"))
            assert family[-1].isdigit()
            assert minor.isdigit()

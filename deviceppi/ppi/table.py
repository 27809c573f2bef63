"""
Classification table: groups of hardware identifiers sharing a panel PPI.

The table is built once from an ordered sequence of entries and flattened
into a read-only identifier index, so lookups are a single dict access and
nothing can mutate it afterwards. In strict mode an identifier listed under
two entries is rejected at construction; otherwise the earlier entry wins,
which is what a first-match scan over the same rows would return.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import (
    Dict,
    FrozenSet,
    Iterable,
    Iterator,
    List,
    Mapping,
    Optional,
    Sequence,
    Tuple,
)

from deviceppi.core.exceptions import DuplicateIdentifierError, TableIntegrityError

# (marketing name, identifiers of its hardware revisions)
ModelRow = Tuple[str, Sequence[str]]


@dataclass(frozen=True)
class ClassificationEntry:
    """Every identifier in ``model_identifiers`` has a panel of ``ppi``."""

    ppi: float
    model_identifiers: FrozenSet[str]
    model_names: Mapping[str, str] = field(
        default_factory=lambda: MappingProxyType({}), compare=False
    )

    def __post_init__(self) -> None:
        if not self.ppi > 0:
            raise TableIntegrityError(f"Entry PPI must be positive, got {self.ppi!r}")
        if not self.model_identifiers:
            raise TableIntegrityError(f"Entry with ppi {self.ppi:g} has no identifiers")

    @classmethod
    def from_models(cls, ppi: float, models: Iterable[ModelRow]) -> "ClassificationEntry":
        """Build an entry from (model name, identifiers) rows."""
        names: Dict[str, str] = {}
        for model_name, identifiers in models:
            for identifier in identifiers:
                names[identifier] = model_name
        return cls(
            ppi=float(ppi),
            model_identifiers=frozenset(names),
            model_names=MappingProxyType(names),
        )

    def __contains__(self, identifier: object) -> bool:
        return identifier in self.model_identifiers

    def name_for(self, identifier: str) -> Optional[str]:
        return self.model_names.get(identifier)


class ClassificationTable:
    """
    Immutable identifier to PPI classification.

    Args:
        entries: Entries in priority order.
        strict: Reject identifiers that appear in more than one entry.

    Raises:
        DuplicateIdentifierError: strict is set and the entries overlap.
    """

    def __init__(
        self, entries: Iterable[ClassificationEntry], strict: bool = True
    ) -> None:
        self._entries: Tuple[ClassificationEntry, ...] = tuple(entries)
        self._index: Mapping[str, ClassificationEntry] = MappingProxyType(
            self._build_index(self._entries, strict)
        )

    @staticmethod
    def _build_index(
        entries: Sequence[ClassificationEntry], strict: bool
    ) -> Dict[str, ClassificationEntry]:
        index: Dict[str, ClassificationEntry] = {}
        for entry in entries:
            for identifier in entry.model_identifiers:
                existing = index.get(identifier)
                if existing is None:
                    index[identifier] = entry
                elif strict:
                    raise DuplicateIdentifierError(
                        identifier, [existing.ppi, entry.ppi]
                    )
        return index

    def entry_for(self, identifier: str) -> Optional[ClassificationEntry]:
        """Return the entry listing ``identifier``, or None."""
        return self._index.get(identifier)

    def identifiers(self) -> FrozenSet[str]:
        return frozenset(self._index)

    def ppi_values(self) -> List[float]:
        """Distinct PPI values in table order."""
        seen: List[float] = []
        for entry in self._entries:
            if entry.ppi not in seen:
                seen.append(entry.ppi)
        return seen

    @property
    def entries(self) -> Tuple[ClassificationEntry, ...]:
        return self._entries

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._index

    def __iter__(self) -> Iterator[ClassificationEntry]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return (
            f"ClassificationTable(entries={len(self._entries)}, "
            f"identifiers={len(self._index)})"
        )

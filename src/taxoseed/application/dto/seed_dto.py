"""Seed import and verification DTOs."""

from dataclasses import dataclass, field

from taxoseed.domain.value_objects import EntityKind


@dataclass
class ImportResult:
    """Outcome of one importer invocation."""

    kind: EntityKind
    created: int = 0
    replaced: int = 0
    verticals: int = 0

    @property
    def total(self) -> int:
        return self.created + self.replaced


@dataclass
class SeedSummary:
    """Outcome of a full seed run."""

    properties: ImportResult
    categories: ImportResult
    reset: bool = False


@dataclass
class RecordMismatch:
    """Stored record that differs from its definition."""

    kind: EntityKind
    identifier: int | str
    fields: list[str]


@dataclass
class VerificationReport:
    """Result of comparing the stored catalog against its definitions."""

    expected_property_count: int
    property_count: int
    expected_vertical_count: int
    vertical_count: int
    expected_category_count: int
    category_count: int
    missing: list[tuple[EntityKind, int | str]] = field(default_factory=list)
    mismatches: list[RecordMismatch] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return (
            self.property_count == self.expected_property_count
            and self.vertical_count == self.expected_vertical_count
            and self.category_count == self.expected_category_count
            and not self.missing
            and not self.mismatches
        )

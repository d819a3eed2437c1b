"""Verify seed use case - stored catalog vs. its raw definitions."""

from collections.abc import Sequence
from dataclasses import fields

import structlog

from taxoseed.application.dto.seed_dto import RecordMismatch, VerificationReport
from taxoseed.application.serializers import CategorySerializer, PropertySerializer
from taxoseed.domain.entities import Category, Property
from taxoseed.domain.value_objects import EntityKind

logger = structlog.get_logger(__name__)

ROUND_TRIP = "<round-trip>"


def differing_fields(expected: Property | Category, stored: Property | Category) -> list[str]:
    """Names of compared dataclass fields whose values differ."""
    return [
        f.name
        for f in fields(expected)
        if f.compare and getattr(expected, f.name) != getattr(stored, f.name)
    ]


class VerifySeedUseCase:
    """Check counts and field-for-field equality of every imported record.

    A stored record passes when it equals the deserialized definition and
    when serializing and deserializing it again yields the same value.
    """

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(
        self,
        raw_properties: Sequence[object],
        raw_category_files: Sequence[Sequence[object]],
    ) -> VerificationReport:
        expected_properties = [PropertySerializer.deserialize(raw) for raw in raw_properties]
        expected_categories = [
            CategorySerializer.deserialize(raw)
            for records in raw_category_files
            for raw in records
        ]

        async with self._uow_factory() as uow:
            report = VerificationReport(
                expected_property_count=len(expected_properties),
                property_count=await uow.properties.count(),
                expected_vertical_count=len(raw_category_files),
                vertical_count=await uow.categories.count(verticals_only=True),
                expected_category_count=len(expected_categories),
                category_count=await uow.categories.count(),
            )

            for expected in expected_properties:
                stored = await uow.properties.get_by_id(expected.id)
                if stored is None:
                    report.missing.append((EntityKind.PROPERTY, expected.id))
                    continue
                diff = differing_fields(expected, stored)
                if PropertySerializer.deserialize(PropertySerializer.serialize(stored)) != stored:
                    diff.append(ROUND_TRIP)
                if diff:
                    report.mismatches.append(RecordMismatch(EntityKind.PROPERTY, expected.id, diff))

            for expected in expected_categories:
                stored = await uow.categories.get_by_id(expected.id)
                if stored is None:
                    report.missing.append((EntityKind.CATEGORY, expected.id))
                    continue
                diff = differing_fields(expected, stored)
                if CategorySerializer.deserialize(CategorySerializer.serialize(stored)) != stored:
                    diff.append(ROUND_TRIP)
                if diff:
                    report.mismatches.append(RecordMismatch(EntityKind.CATEGORY, expected.id, diff))

        if report.ok:
            logger.info(
                "seed_verified",
                properties=report.property_count,
                categories=report.category_count,
            )
        else:
            logger.warning(
                "seed_verification_failed",
                missing=len(report.missing),
                mismatches=len(report.mismatches),
            )
        return report

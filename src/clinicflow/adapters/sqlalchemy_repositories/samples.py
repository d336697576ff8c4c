"""SQLAlchemy implementation of the SampleRepository port."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from clinicflow.adapters.db.schema import samples
from clinicflow.domain.aggregates import Sample, SampleStatus
from clinicflow.interfaces.repositories import SampleRepository

from .base import SqlAlchemyRepositoryBase

if TYPE_CHECKING:
    from sqlalchemy.engine import Row


class SqlAlchemySampleRepository(SqlAlchemyRepositoryBase[Sample], SampleRepository):
    """Samples stored in the ``samples`` table."""

    TABLE = samples
    TYPE_NAME = Sample.TYPE_NAME

    def list_by_patient(self, patient_id: str) -> list[Sample]:
        return self._select(samples.c.patient_id == patient_id)

    def list_by_clinic(self, clinic_id: str) -> list[Sample]:
        return self._select(samples.c.clinic_id == clinic_id)

    def _to_row(self, aggregate: Sample) -> dict[str, Any]:
        return {
            "id": aggregate.aggregate_id,
            "patient_id": aggregate.patient_id,
            "clinic_id": aggregate.clinic_id,
            "sample_type": aggregate.sample_type,
            "status": aggregate.status.value,
            "collection_date": aggregate.collection_date,
            "notes": aggregate.notes,
            "created_at": aggregate.created_at,
            "updated_at": aggregate.updated_at,
        }

    def _from_row(self, row: Row) -> Sample:
        return Sample(
            row.id,
            patient_id=row.patient_id,
            clinic_id=row.clinic_id,
            sample_type=row.sample_type,
            collection_date=row.collection_date,
            status=SampleStatus(row.status),
            notes=row.notes,
            created_at=row.created_at,
            updated_at=row.updated_at,
        )

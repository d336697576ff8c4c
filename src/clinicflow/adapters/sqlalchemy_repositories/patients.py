"""SQLAlchemy implementation of the PatientRepository port."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from clinicflow.adapters.db.schema import patients
from clinicflow.domain.aggregates import Patient
from clinicflow.domain.value_objects import (
    DateOfBirth,
    Email,
    FirstName,
    LastName,
    PhoneNumber,
)
from clinicflow.interfaces.repositories import PatientRepository

from .base import SqlAlchemyRepositoryBase

if TYPE_CHECKING:
    from sqlalchemy.engine import Row


class SqlAlchemyPatientRepository(
    SqlAlchemyRepositoryBase[Patient], PatientRepository
):
    """Patients stored in the ``patients`` table."""

    TABLE = patients
    TYPE_NAME = Patient.TYPE_NAME

    def list_by_clinic(self, clinic_id: str) -> list[Patient]:
        return self._select(patients.c.clinic_id == clinic_id)

    def _to_row(self, aggregate: Patient) -> dict[str, Any]:
        return {
            "id": aggregate.aggregate_id,
            "first_name": aggregate.first_name.value,
            "last_name": aggregate.last_name.value,
            "email": aggregate.email.value,
            "phone": aggregate.phone.value,
            "date_of_birth": aggregate.date_of_birth.value,
            "clinic_id": aggregate.clinic_id,
            "is_active": aggregate.is_active,
            "created_at": aggregate.created_at,
            "updated_at": aggregate.updated_at,
        }

    def _from_row(self, row: Row) -> Patient:
        return Patient(
            row.id,
            first_name=FirstName(row.first_name),
            last_name=LastName(row.last_name),
            email=Email(row.email),
            phone=PhoneNumber(row.phone),
            date_of_birth=DateOfBirth(row.date_of_birth),
            clinic_id=row.clinic_id,
            is_active=bool(row.is_active),
            created_at=row.created_at,
            updated_at=row.updated_at,
        )

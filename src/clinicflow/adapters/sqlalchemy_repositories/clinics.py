"""SQLAlchemy implementation of the ClinicRepository port."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from clinicflow.adapters.db.schema import clinics
from clinicflow.domain.aggregates import Clinic
from clinicflow.domain.value_objects import ClinicAddress, ClinicName, PhoneNumber
from clinicflow.interfaces.repositories import ClinicRepository

from .base import SqlAlchemyRepositoryBase

if TYPE_CHECKING:
    from sqlalchemy.engine import Row


class SqlAlchemyClinicRepository(SqlAlchemyRepositoryBase[Clinic], ClinicRepository):
    """Clinics stored in the ``clinics`` table."""

    TABLE = clinics
    TYPE_NAME = Clinic.TYPE_NAME

    def _to_row(self, aggregate: Clinic) -> dict[str, Any]:
        return {
            "id": aggregate.aggregate_id,
            "name": aggregate.name.value,
            "address": aggregate.address.value,
            "phone": aggregate.phone.value,
            "is_active": aggregate.is_active,
            "created_at": aggregate.created_at,
            "updated_at": aggregate.updated_at,
        }

    def _from_row(self, row: Row) -> Clinic:
        return Clinic(
            row.id,
            name=ClinicName(row.name),
            address=ClinicAddress(row.address),
            phone=PhoneNumber(row.phone),
            is_active=bool(row.is_active),
            created_at=row.created_at,
            updated_at=row.updated_at,
        )

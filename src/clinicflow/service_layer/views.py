"""Read-only projections returned by command handlers.

Handlers never hand aggregates to callers. Each view flattens value objects
to primitives and can render itself as a JSON-friendly dict.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from datetime import date, datetime
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from clinicflow.domain.aggregates import Clinic, Patient, Sample

# pylint: disable=too-many-instance-attributes


def _jsonable(value: Any) -> Any:
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    return value


@dataclass(frozen=True)
class _View:
    def to_dict(self) -> dict[str, Any]:
        """Return the view as a dict of JSON-serializable values."""
        return {key: _jsonable(value) for key, value in asdict(self).items()}


@dataclass(frozen=True)
class ClinicView(_View):
    """Projection of a clinic."""

    id: str
    name: str
    address: str
    phone: str
    is_active: bool
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_clinic(cls, clinic: Clinic) -> ClinicView:
        return cls(
            id=clinic.aggregate_id,
            name=clinic.name.value,
            address=clinic.address.value,
            phone=clinic.phone.value,
            is_active=clinic.is_active,
            created_at=clinic.created_at,
            updated_at=clinic.updated_at,
        )


@dataclass(frozen=True)
class PatientView(_View):
    """Projection of a patient, including derived name and age."""

    id: str
    first_name: str
    last_name: str
    full_name: str
    email: str
    phone: str
    date_of_birth: date
    age: int
    clinic_id: str
    is_active: bool
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_patient(cls, patient: Patient) -> PatientView:
        return cls(
            id=patient.aggregate_id,
            first_name=patient.first_name.value,
            last_name=patient.last_name.value,
            full_name=patient.full_name,
            email=patient.email.value,
            phone=patient.phone.value,
            date_of_birth=patient.date_of_birth.value,
            age=patient.age(),
            clinic_id=patient.clinic_id,
            is_active=patient.is_active,
            created_at=patient.created_at,
            updated_at=patient.updated_at,
        )


@dataclass(frozen=True)
class SampleView(_View):
    """Projection of a sample; `status` is the enum value."""

    id: str
    patient_id: str
    clinic_id: str
    sample_type: str
    status: str
    collection_date: datetime
    notes: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_sample(cls, sample: Sample) -> SampleView:
        return cls(
            id=sample.aggregate_id,
            patient_id=sample.patient_id,
            clinic_id=sample.clinic_id,
            sample_type=sample.sample_type,
            status=sample.status.value,
            collection_date=sample.collection_date,
            notes=sample.notes,
            created_at=sample.created_at,
            updated_at=sample.updated_at,
        )

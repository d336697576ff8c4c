"""In-memory repository implementations."""

from __future__ import annotations

import copy
from collections.abc import Callable
from typing import Generic, TypeVar

from clinicflow.domain.aggregates import Aggregate, Clinic, Patient, Sample
from clinicflow.domain.errors import AggregateNotFoundError, DuplicateAggregateError
from clinicflow.interfaces.repositories import (
    ClinicRepository,
    PatientRepository,
    SampleRepository,
)

from .store import InMemoryStore

A = TypeVar("A", bound=Aggregate)


class _InMemoryRepositoryBase(Generic[A]):
    """Shared mechanics for the in-memory repositories.

    Aggregates are copied on the way in and on the way out, so callers never
    hold a reference to the stored object.
    """

    BUCKET_ATTR: str  # e.g., "clinics", "patients", "samples"
    TYPE_NAME: str  # e.g., "Clinic"

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    @property
    def _bucket(self) -> dict[str, A]:
        return getattr(self._store, self.BUCKET_ATTR)

    def save(self, aggregate: A) -> None:
        with self._store.lock:
            if aggregate.aggregate_id in self._bucket:
                raise DuplicateAggregateError(self.TYPE_NAME, aggregate.aggregate_id)
            self._bucket[aggregate.aggregate_id] = copy.deepcopy(aggregate)

    def get(self, aggregate_id: str) -> A | None:
        with self._store.lock:
            if (aggregate := self._bucket.get(aggregate_id)) is None:
                return None
            return copy.deepcopy(aggregate)

    def list_all(self) -> list[A]:
        return self._select(lambda _: True)

    def update(self, aggregate: A) -> None:
        with self._store.lock:
            if aggregate.aggregate_id not in self._bucket:
                raise AggregateNotFoundError(self.TYPE_NAME, aggregate.aggregate_id)
            self._bucket[aggregate.aggregate_id] = copy.deepcopy(aggregate)

    def delete(self, aggregate_id: str) -> None:
        with self._store.lock:
            if self._bucket.pop(aggregate_id, None) is None:
                raise AggregateNotFoundError(self.TYPE_NAME, aggregate_id)

    def _select(self, predicate: Callable[[A], bool]) -> list[A]:
        with self._store.lock:
            return [
                copy.deepcopy(aggregate)
                for aggregate in self._bucket.values()
                if predicate(aggregate)
            ]


class InMemoryClinicRepository(_InMemoryRepositoryBase[Clinic], ClinicRepository):
    """In-memory implementation of the ClinicRepository port."""

    BUCKET_ATTR = "clinics"
    TYPE_NAME = Clinic.TYPE_NAME


class InMemoryPatientRepository(_InMemoryRepositoryBase[Patient], PatientRepository):
    """In-memory implementation of the PatientRepository port."""

    BUCKET_ATTR = "patients"
    TYPE_NAME = Patient.TYPE_NAME

    def list_by_clinic(self, clinic_id: str) -> list[Patient]:
        return self._select(lambda patient: patient.clinic_id == clinic_id)


class InMemorySampleRepository(_InMemoryRepositoryBase[Sample], SampleRepository):
    """In-memory implementation of the SampleRepository port."""

    BUCKET_ATTR = "samples"
    TYPE_NAME = Sample.TYPE_NAME

    def list_by_patient(self, patient_id: str) -> list[Sample]:
        return self._select(lambda sample: sample.patient_id == patient_id)

    def list_by_clinic(self, clinic_id: str) -> list[Sample]:
        return self._select(lambda sample: sample.clinic_id == clinic_id)

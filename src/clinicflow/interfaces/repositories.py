"""Repository ports for the clinic, patient and sample aggregates.

Each aggregate is owned by its repository. Implementations must honour the
same contract whatever the storage technology:

- `save` inserts a new aggregate and raises `DuplicateAggregateError` when
  the id is already stored; it never overwrites.
- `get` returns a detached copy, or None when the id is unknown. Changes made
  to the copy reach storage only through `update`.
- `update` and `delete` check existence at the moment of the call and raise
  `AggregateNotFoundError` when the id is not stored; `update` is never an
  upsert.
- List methods return aggregates in insertion order.

Check-then-act sequences spanning several calls are not atomic.
"""

from __future__ import annotations

import abc
from typing import TYPE_CHECKING, Generic, TypeVar

if TYPE_CHECKING:
    from clinicflow.domain.aggregates import Clinic, Patient, Sample

T = TypeVar("T")


class Repository(abc.ABC, Generic[T]):
    """Operations shared by every aggregate repository."""

    @abc.abstractmethod
    def save(self, aggregate: T) -> None:
        """Insert a new aggregate.

        Args:
            aggregate: The aggregate to store.

        Raises:
            DuplicateAggregateError: If the id is already stored.
        """

    @abc.abstractmethod
    def get(self, aggregate_id: str) -> T | None:
        """Get an aggregate by its id.

        Args:
            aggregate_id: The id of the aggregate.

        Returns:
            The aggregate if found, otherwise None.
        """

    @abc.abstractmethod
    def list_all(self) -> list[T]:
        """Return every stored aggregate in insertion order."""

    @abc.abstractmethod
    def update(self, aggregate: T) -> None:
        """Replace the stored state of an existing aggregate.

        Raises:
            AggregateNotFoundError: If the aggregate's id is not stored.
        """

    @abc.abstractmethod
    def delete(self, aggregate_id: str) -> None:
        """Remove an aggregate.

        Raises:
            AggregateNotFoundError: If the id is not stored.
        """


class ClinicRepository(Repository["Clinic"]):
    """Port for clinic persistence."""


class PatientRepository(Repository["Patient"]):
    """Port for patient persistence."""

    @abc.abstractmethod
    def list_by_clinic(self, clinic_id: str) -> list[Patient]:
        """Return the patients registered with a clinic, in insertion order."""


class SampleRepository(Repository["Sample"]):
    """Port for sample persistence."""

    @abc.abstractmethod
    def list_by_patient(self, patient_id: str) -> list[Sample]:
        """Return the samples collected from a patient, in insertion order."""

    @abc.abstractmethod
    def list_by_clinic(self, clinic_id: str) -> list[Sample]:
        """Return the samples collected at a clinic, in insertion order."""

"""Aggregate representing a biological sample."""

from __future__ import annotations

from datetime import date, datetime, time, timezone
from enum import Enum
from typing import ClassVar

from clinicflow.domain import errors
from clinicflow.domain.utils import ensure_utc, is_blank, utc_now

from .base import Aggregate, new_aggregate_id

# pylint: disable=too-many-arguments, too-many-instance-attributes


class SampleStatus(Enum):
    """Enumeration of possible Sample statuses."""

    PENDING = "PENDING"
    PROCESSING = "PROCESSING"
    COMPLETED = "COMPLETED"
    REJECTED = "REJECTED"


TERMINAL_STATUSES = frozenset({SampleStatus.COMPLETED, SampleStatus.REJECTED})


def _as_datetime(value: date | datetime) -> datetime:
    if isinstance(value, datetime):
        return ensure_utc(value)
    return datetime.combine(value, time.min, tzinfo=timezone.utc)


def _require(value: str, field: str, label: str) -> None:
    if not isinstance(value, str) or is_blank(value):
        raise errors.InvalidValueError(field, f"{label} cannot be empty")


class Sample(Aggregate):
    """Aggregate representing a sample collected from a patient at a clinic.

    Status lifecycle::

        PENDING -> PROCESSING -> COMPLETED
        PENDING | PROCESSING -> REJECTED

    COMPLETED and REJECTED are terminal. Whether the patient and clinic exist,
    and whether they belong together, is checked by the use case that creates
    the sample.
    """

    TYPE_NAME: ClassVar[str] = "Sample"

    def __init__(
        self,
        aggregate_id: str,
        *,
        patient_id: str,
        clinic_id: str,
        sample_type: str,
        collection_date: date | datetime,
        status: SampleStatus = SampleStatus.PENDING,
        notes: str = "",
        created_at: datetime,
        updated_at: datetime | None = None,
    ) -> None:
        _require(patient_id, "patient_id", "Patient ID")
        _require(clinic_id, "clinic_id", "Clinic ID")
        _require(sample_type, "sample_type", "Sample type")
        super().__init__(aggregate_id, created_at=created_at, updated_at=updated_at)
        self._patient_id = patient_id
        self._clinic_id = clinic_id
        self._sample_type = sample_type
        self._collection_date = _as_datetime(collection_date)
        self._status = SampleStatus(status)
        self._notes = notes or ""

    # --- Construction Paths ---

    @classmethod
    def create(
        cls,
        patient_id: str,
        clinic_id: str,
        sample_type: str,
        collection_date: date | datetime,
        *,
        notes: str = "",
        aggregate_id: str | None = None,
        at: datetime | None = None,
    ) -> Sample:
        """Register a newly collected, pending sample.

        Raises:
            InvalidValueError: If an id or the sample type is empty, or the
                collection date lies in the future.
        """
        if _as_datetime(collection_date) > utc_now():
            raise errors.InvalidValueError(
                "collection_date", "Collection date cannot be in the future"
            )
        created_at = ensure_utc(at) if at is not None else utc_now()
        return cls(
            aggregate_id or new_aggregate_id(),
            patient_id=patient_id,
            clinic_id=clinic_id,
            sample_type=sample_type,
            collection_date=collection_date,
            notes=notes,
            created_at=created_at,
        )

    # --- State ---

    @property
    def patient_id(self) -> str:
        """ID of the patient the sample was collected from."""
        return self._patient_id

    @property
    def clinic_id(self) -> str:
        """ID of the clinic that collected the sample."""
        return self._clinic_id

    @property
    def sample_type(self) -> str:
        """Free-text sample type (e.g. "blood")."""
        return self._sample_type

    @property
    def collection_date(self) -> datetime:
        """When the sample was collected (UTC)."""
        return self._collection_date

    @property
    def status(self) -> SampleStatus:
        """Current lifecycle status."""
        return self._status

    @property
    def notes(self) -> str:
        """Free-text notes."""
        return self._notes

    # --- State Transitions ---

    def start_processing(self, at: datetime | None = None) -> None:
        """Move a pending sample into processing.

        Raises:
            InvalidSampleTransitionError: If the sample is not pending.
        """
        if self._status is not SampleStatus.PENDING:
            raise errors.InvalidSampleTransitionError(
                self.aggregate_id,
                self._status.value,
                "Only pending samples can start processing",
            )
        self._set_status(SampleStatus.PROCESSING, at)

    def complete(self, at: datetime | None = None) -> None:
        """Complete a sample that is being processed.

        Raises:
            InvalidSampleTransitionError: If the sample is not processing.
        """
        if self._status is not SampleStatus.PROCESSING:
            raise errors.InvalidSampleTransitionError(
                self.aggregate_id,
                self._status.value,
                "Only processing samples can be completed",
            )
        self._set_status(SampleStatus.COMPLETED, at)

    def reject(self, reason: str, at: datetime | None = None) -> None:
        """Reject the sample, replacing its notes with the rejection reason.

        Prior notes are discarded, not appended to.

        Raises:
            InvalidSampleTransitionError: If the sample is completed or already rejected.
        """
        if self._status in TERMINAL_STATUSES:
            raise errors.InvalidSampleTransitionError(
                self.aggregate_id,
                self._status.value,
                "Cannot reject a completed or already rejected sample",
            )
        self._notes = f"Rejected: {reason}"
        self._set_status(SampleStatus.REJECTED, at)

    def update_notes(self, notes: str, at: datetime | None = None) -> None:
        """Replace the notes, whatever the status."""
        self._notes = notes
        self._touch(at)

    def change_sample_type(self, sample_type: str, at: datetime | None = None) -> None:
        """Replace the sample type.

        Raises:
            InvalidValueError: If the new sample type is empty.
        """
        _require(sample_type, "sample_type", "Sample type")
        self._sample_type = sample_type
        self._touch(at)

    # --- Internal Helpers ---

    def _set_status(self, status: SampleStatus, at: datetime | None) -> None:
        self._status = status
        self._touch(at)

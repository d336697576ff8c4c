"""Patient Aggregate"""

from __future__ import annotations

from datetime import date, datetime
from typing import ClassVar

from clinicflow.domain import errors
from clinicflow.domain.utils import ensure_utc, is_blank, utc_now
from clinicflow.domain.value_objects import (
    DateOfBirth,
    Email,
    FirstName,
    LastName,
    PhoneNumber,
)

from .base import ActivatableAggregate, new_aggregate_id

# pylint: disable=too-many-arguments, too-many-instance-attributes


class Patient(ActivatableAggregate):
    """Aggregate root representing a patient registered with a clinic.

    The entity only checks that `clinic_id` is present. Whether the clinic
    exists is verified by the use case that creates the patient.
    """

    TYPE_NAME: ClassVar[str] = "Patient"

    def __init__(
        self,
        aggregate_id: str,
        *,
        first_name: FirstName,
        last_name: LastName,
        email: Email,
        phone: PhoneNumber,
        date_of_birth: DateOfBirth,
        clinic_id: str,
        is_active: bool = True,
        created_at: datetime,
        updated_at: datetime | None = None,
    ) -> None:
        if is_blank(clinic_id):
            raise errors.InvalidValueError("clinic_id", "Clinic ID cannot be empty")
        super().__init__(
            aggregate_id,
            is_active=is_active,
            created_at=created_at,
            updated_at=updated_at,
        )
        self._first_name = first_name
        self._last_name = last_name
        self._email = email
        self._phone = phone
        self._date_of_birth = date_of_birth
        self._clinic_id = clinic_id

    # --- Construction Paths ---

    @classmethod
    def create(
        cls,
        first_name: FirstName,
        last_name: LastName,
        email: Email,
        phone: PhoneNumber,
        date_of_birth: DateOfBirth,
        clinic_id: str,
        *,
        aggregate_id: str | None = None,
        at: datetime | None = None,
    ) -> Patient:
        """Register a new, active patient."""
        created_at = ensure_utc(at) if at is not None else utc_now()
        return cls(
            aggregate_id or new_aggregate_id(),
            first_name=first_name,
            last_name=last_name,
            email=email,
            phone=phone,
            date_of_birth=date_of_birth,
            clinic_id=clinic_id,
            created_at=created_at,
        )

    # --- State ---

    @property
    def first_name(self) -> FirstName:
        """Given name."""
        return self._first_name

    @property
    def last_name(self) -> LastName:
        """Family name."""
        return self._last_name

    @property
    def full_name(self) -> str:
        """First and last name separated by a space."""
        return f"{self._first_name.value} {self._last_name.value}"

    @property
    def email(self) -> Email:
        """Lowercased email address."""
        return self._email

    @property
    def phone(self) -> PhoneNumber:
        """Contact phone number."""
        return self._phone

    @property
    def date_of_birth(self) -> DateOfBirth:
        """Date of birth."""
        return self._date_of_birth

    @property
    def clinic_id(self) -> str:
        """ID of the clinic the patient belongs to."""
        return self._clinic_id

    def age(self, on: date | None = None) -> int:
        """Age in whole years, derived from the date of birth."""
        return self._date_of_birth.age(on)

    # --- State Transitions ---

    def change_first_name(self, first_name: FirstName, at: datetime | None = None) -> None:
        """Replace the given name."""
        self._first_name = first_name
        self._touch(at)

    def change_last_name(self, last_name: LastName, at: datetime | None = None) -> None:
        """Replace the family name."""
        self._last_name = last_name
        self._touch(at)

    def change_email(self, email: Email, at: datetime | None = None) -> None:
        """Replace the email address."""
        self._email = email
        self._touch(at)

    def change_phone(self, phone: PhoneNumber, at: datetime | None = None) -> None:
        """Replace the phone number."""
        self._phone = phone
        self._touch(at)

    def update(
        self,
        *,
        first_name: FirstName | None = None,
        last_name: LastName | None = None,
        email: Email | None = None,
        phone: PhoneNumber | None = None,
        at: datetime | None = None,
    ) -> None:
        """Replace the given fields; omitted fields are left untouched.

        `updated_at` is always bumped, even when no field is given.
        """
        if first_name is not None:
            self._first_name = first_name
        if last_name is not None:
            self._last_name = last_name
        if email is not None:
            self._email = email
        if phone is not None:
            self._phone = phone
        self._touch(at)

"""Clinic Aggregate"""

from __future__ import annotations

from datetime import datetime
from typing import ClassVar

from clinicflow.domain.utils import ensure_utc, utc_now
from clinicflow.domain.value_objects import ClinicAddress, ClinicName, PhoneNumber

from .base import ActivatableAggregate, new_aggregate_id

# pylint: disable=too-many-arguments


class Clinic(ActivatableAggregate):
    """Aggregate root representing a clinic."""

    TYPE_NAME: ClassVar[str] = "Clinic"

    def __init__(
        self,
        aggregate_id: str,
        *,
        name: ClinicName,
        address: ClinicAddress,
        phone: PhoneNumber,
        is_active: bool = True,
        created_at: datetime,
        updated_at: datetime | None = None,
    ) -> None:
        super().__init__(
            aggregate_id,
            is_active=is_active,
            created_at=created_at,
            updated_at=updated_at,
        )
        self._name = name
        self._address = address
        self._phone = phone

    # --- Construction Paths ---

    @classmethod
    def create(
        cls,
        name: ClinicName,
        address: ClinicAddress,
        phone: PhoneNumber,
        *,
        aggregate_id: str | None = None,
        at: datetime | None = None,
    ) -> Clinic:
        """Register a new, active clinic."""
        created_at = ensure_utc(at) if at is not None else utc_now()
        return cls(
            aggregate_id or new_aggregate_id(),
            name=name,
            address=address,
            phone=phone,
            created_at=created_at,
        )

    # --- State ---

    @property
    def name(self) -> ClinicName:
        """Name of the clinic."""
        return self._name

    @property
    def address(self) -> ClinicAddress:
        """Address of the clinic."""
        return self._address

    @property
    def phone(self) -> PhoneNumber:
        """Contact phone number of the clinic."""
        return self._phone

    # --- State Transitions ---

    def update(
        self,
        *,
        name: ClinicName | None = None,
        address: ClinicAddress | None = None,
        phone: PhoneNumber | None = None,
        at: datetime | None = None,
    ) -> None:
        """Replace the given fields; omitted fields are left untouched.

        `updated_at` is always bumped, even when no field is given.
        """
        if name is not None:
            self._name = name
        if address is not None:
            self._address = address
        if phone is not None:
            self._phone = phone
        self._touch(at)

"""Fixtures for generating test data.

Aggregate factories build valid domain objects with overridable fields;
command-parameter factories build the keyword arguments of create commands.
"""

from __future__ import annotations

import itertools
from collections.abc import Callable
from datetime import date, datetime, timedelta, timezone
from typing import Any

import pytest

from clinicflow.domain.aggregates import Clinic, Patient, Sample
from clinicflow.domain.value_objects import (
    ClinicAddress,
    ClinicName,
    DateOfBirth,
    Email,
    FirstName,
    LastName,
    PhoneNumber,
)

# pylint: disable=redefined-outer-name

_counter = itertools.count(1)

FIXED_NOW = datetime(2024, 3, 1, 9, 30, tzinfo=timezone.utc)
ONE_HOUR_AGO = datetime.now(timezone.utc) - timedelta(hours=1)


def next_id(prefix: str) -> str:
    """Return a unique, readable test id such as ``clinic-0007``."""
    return f"{prefix}-{next(_counter):04d}"


@pytest.fixture
def make_clinic() -> Callable[..., Clinic]:
    """Factory fixture: build a valid, active Clinic.

    Keyword overrides accept raw strings for name/address/phone.
    """

    def _make(
        *,
        aggregate_id: str | None = None,
        name: str = "Central Clinic",
        address: str = "123 Main Street",
        phone: str = "+1 555 010 0100",
        at: datetime = FIXED_NOW,
    ) -> Clinic:
        return Clinic.create(
            ClinicName(name),
            ClinicAddress(address),
            PhoneNumber(phone),
            aggregate_id=aggregate_id or next_id("clinic"),
            at=at,
        )

    return _make


@pytest.fixture
def make_patient() -> Callable[..., Patient]:
    """Factory fixture: build a valid, active Patient of a given clinic."""

    def _make(
        clinic_id: str,
        *,
        aggregate_id: str | None = None,
        first_name: str = "John",
        last_name: str = "Smith",
        email: str = "john.smith@example.com",
        phone: str = "555-123-4567",
        date_of_birth: date = date(1985, 6, 15),
        at: datetime = FIXED_NOW,
    ) -> Patient:
        return Patient.create(
            FirstName(first_name),
            LastName(last_name),
            Email(email),
            PhoneNumber(phone),
            DateOfBirth(date_of_birth),
            clinic_id,
            aggregate_id=aggregate_id or next_id("patient"),
            at=at,
        )

    return _make


@pytest.fixture
def make_sample() -> Callable[..., Sample]:
    """Factory fixture: build a pending Sample for a patient at a clinic."""

    def _make(
        patient_id: str,
        clinic_id: str,
        *,
        aggregate_id: str | None = None,
        sample_type: str = "blood",
        collection_date: datetime = ONE_HOUR_AGO,
        at: datetime = FIXED_NOW,
    ) -> Sample:
        return Sample.create(
            patient_id,
            clinic_id,
            sample_type,
            collection_date,
            aggregate_id=aggregate_id or next_id("sample"),
            at=at,
        )

    return _make


@pytest.fixture
def clinic_params() -> Callable[..., dict[str, Any]]:
    """Factory fixture: keyword arguments for `CreateClinic`."""

    def _params(**overrides: Any) -> dict[str, Any]:
        params = {
            "name": "Central Clinic",
            "address": "123 Main Street",
            "phone": "+1 555 010 0100",
        }
        params.update(overrides)
        return params

    return _params


@pytest.fixture
def patient_params() -> Callable[..., dict[str, Any]]:
    """Factory fixture: keyword arguments for `CreatePatient`."""

    def _params(clinic_id: str, **overrides: Any) -> dict[str, Any]:
        params = {
            "first_name": "John",
            "last_name": "Smith",
            "email": "John.Smith@Example.com",
            "phone": "555-123-4567",
            "date_of_birth": date(1985, 6, 15),
            "clinic_id": clinic_id,
        }
        params.update(overrides)
        return params

    return _params


@pytest.fixture
def sample_params() -> Callable[..., dict[str, Any]]:
    """Factory fixture: keyword arguments for `CreateSample`."""

    def _params(patient_id: str, clinic_id: str, **overrides: Any) -> dict[str, Any]:
        params = {
            "patient_id": patient_id,
            "clinic_id": clinic_id,
            "sample_type": "blood",
            "collection_date": datetime.now(timezone.utc) - timedelta(hours=1),
        }
        params.update(overrides)
        return params

    return _params

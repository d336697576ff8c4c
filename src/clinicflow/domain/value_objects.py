"""Module including value objects used across the domain layer.

Value objects validate and normalize their input once, at construction, and
are immutable afterwards. Changing a field on an aggregate means replacing
the value object it holds.
"""

import re
from dataclasses import dataclass
from datetime import date, datetime
from typing import ClassVar

from clinicflow.domain.errors import InvalidValueError
from clinicflow.domain.utils import is_blank, utc_today

PHONE_PATTERN = re.compile(r"[0-9\s\-+()]{7,}")
EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")


@dataclass(frozen=True)
class _BoundedText:
    """Trimmed, non-empty text with inclusive length bounds."""

    FIELD: ClassVar[str]
    LABEL: ClassVar[str]
    MIN_LENGTH: ClassVar[int]
    MAX_LENGTH: ClassVar[int]

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or is_blank(self.value):
            raise InvalidValueError(self.FIELD, f"{self.LABEL} cannot be empty")
        trimmed = self.value.strip()
        if len(trimmed) < self.MIN_LENGTH:
            raise InvalidValueError(
                self.FIELD,
                f"{self.LABEL} must be at least {self.MIN_LENGTH} characters long",
            )
        if len(trimmed) > self.MAX_LENGTH:
            raise InvalidValueError(
                self.FIELD, f"{self.LABEL} cannot exceed {self.MAX_LENGTH} characters"
            )
        object.__setattr__(self, "value", trimmed)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class ClinicName(_BoundedText):
    """Name of a clinic (2-100 characters)."""

    FIELD = "name"
    LABEL = "Clinic name"
    MIN_LENGTH = 2
    MAX_LENGTH = 100


@dataclass(frozen=True)
class ClinicAddress(_BoundedText):
    """Postal address of a clinic (5-255 characters)."""

    FIELD = "address"
    LABEL = "Clinic address"
    MIN_LENGTH = 5
    MAX_LENGTH = 255


@dataclass(frozen=True)
class FirstName(_BoundedText):
    """Given name of a patient (2-50 characters)."""

    FIELD = "first_name"
    LABEL = "First name"
    MIN_LENGTH = 2
    MAX_LENGTH = 50


@dataclass(frozen=True)
class LastName(_BoundedText):
    """Family name of a patient (2-50 characters)."""

    FIELD = "last_name"
    LABEL = "Last name"
    MIN_LENGTH = 2
    MAX_LENGTH = 50


@dataclass(frozen=True)
class PhoneNumber:
    """Phone number shared by clinics and patients.

    Permissive shape: at least seven digits, spaces, ``+``, ``-`` or
    parentheses. The value is stored as given.
    """

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not PHONE_PATTERN.fullmatch(self.value):
            raise InvalidValueError("phone", "Invalid phone format")

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Email:
    """Email address in ``local@domain.tld`` shape, stored lowercase."""

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not EMAIL_PATTERN.fullmatch(self.value):
            raise InvalidValueError("email", "Invalid email format")
        object.__setattr__(self, "value", self.value.lower())

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class DateOfBirth:
    """Date of birth of a patient; never in the future."""

    value: date

    def __post_init__(self) -> None:
        value = self.value
        if isinstance(value, datetime):
            value = value.date()
        if not isinstance(value, date):
            raise InvalidValueError("date_of_birth", "Invalid date of birth")
        if value > utc_today():
            raise InvalidValueError(
                "date_of_birth", "Date of birth cannot be in the future"
            )
        object.__setattr__(self, "value", value)

    def age(self, on: date | None = None) -> int:
        """Return the age in whole years on the given date (default: today, UTC)."""
        today = on if on is not None else utc_today()
        years = today.year - self.value.year
        if (today.month, today.day) < (self.value.month, self.value.day):
            years -= 1
        return years

    def __str__(self) -> str:
        return self.value.isoformat()

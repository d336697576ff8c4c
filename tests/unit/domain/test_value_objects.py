"""Unit tests for the validated value objects."""

from datetime import date, datetime, timedelta, timezone

import pytest

from clinicflow.domain.errors import ErrorKind, InvalidValueError
from clinicflow.domain.value_objects import (
    ClinicAddress,
    ClinicName,
    DateOfBirth,
    Email,
    FirstName,
    LastName,
    PhoneNumber,
)

# pylint: disable=magic-value-comparison


def _reason(exc_info: pytest.ExceptionInfo[InvalidValueError]) -> str:
    return exc_info.value.reason


class TestClinicName:
    """Tests for ClinicName."""

    @staticmethod
    def test_trims_whitespace():
        """Surrounding whitespace is removed once, at construction."""
        assert ClinicName("  Central Clinic  ").value == "Central Clinic"

    @staticmethod
    @pytest.mark.parametrize("raw", ["", "   ", "\t\n"])
    def test_rejects_blank(raw):
        """Empty and whitespace-only names are rejected."""
        with pytest.raises(InvalidValueError) as exc_info:
            ClinicName(raw)
        assert _reason(exc_info) == "Clinic name cannot be empty"
        assert exc_info.value.field == "name"
        assert exc_info.value.kind is ErrorKind.VALIDATION

    @staticmethod
    def test_rejects_too_short_after_trim():
        """A single character (after trimming) is too short."""
        with pytest.raises(InvalidValueError) as exc_info:
            ClinicName("  A  ")
        assert _reason(exc_info) == "Clinic name must be at least 2 characters long"

    @staticmethod
    def test_length_bounds_are_inclusive():
        """Exactly 2 and exactly 100 characters are accepted."""
        assert ClinicName("AB").value == "AB"
        assert ClinicName("x" * 100).value == "x" * 100

    @staticmethod
    def test_rejects_too_long():
        """101 characters is one too many."""
        with pytest.raises(InvalidValueError) as exc_info:
            ClinicName("x" * 101)
        assert _reason(exc_info) == "Clinic name cannot exceed 100 characters"

    @staticmethod
    def test_equality_is_by_normalized_value():
        """Two names that trim to the same text are equal."""
        assert ClinicName(" Central ") == ClinicName("Central")

    @staticmethod
    def test_is_immutable():
        """Value objects cannot be mutated after construction."""
        name = ClinicName("Central")
        with pytest.raises(AttributeError):
            name.value = "Other"  # type: ignore[misc]


class TestClinicAddress:
    """Tests for ClinicAddress."""

    @staticmethod
    def test_rejects_short_address():
        """Addresses under five characters are rejected."""
        with pytest.raises(InvalidValueError) as exc_info:
            ClinicAddress("1 St")
        assert (
            _reason(exc_info) == "Clinic address must be at least 5 characters long"
        )

    @staticmethod
    def test_rejects_long_address():
        """Addresses over 255 characters are rejected."""
        with pytest.raises(InvalidValueError) as exc_info:
            ClinicAddress("x" * 256)
        assert _reason(exc_info) == "Clinic address cannot exceed 255 characters"

    @staticmethod
    def test_rejects_empty_address():
        """Empty addresses are rejected with the address label."""
        with pytest.raises(InvalidValueError) as exc_info:
            ClinicAddress("")
        assert _reason(exc_info) == "Clinic address cannot be empty"


class TestPersonNames:
    """Tests for FirstName and LastName."""

    @staticmethod
    @pytest.mark.parametrize(
        ("factory", "label"), [(FirstName, "First name"), (LastName, "Last name")]
    )
    def test_messages_use_their_label(factory, label):
        """Each name type reports errors with its own label."""
        with pytest.raises(InvalidValueError) as exc_info:
            factory("J")
        assert _reason(exc_info) == f"{label} must be at least 2 characters long"

        with pytest.raises(InvalidValueError) as exc_info:
            factory("x" * 51)
        assert _reason(exc_info) == f"{label} cannot exceed 50 characters"

    @staticmethod
    def test_accepts_and_trims():
        """A valid name is trimmed."""
        assert FirstName(" John ").value == "John"
        assert LastName("Smith").value == "Smith"


class TestPhoneNumber:
    """Tests for PhoneNumber."""

    @staticmethod
    @pytest.mark.parametrize(
        "raw", ["555-123-4567", "+1 (555) 123 4567", "1234567", "(01) 234-5678"]
    )
    def test_accepts_permissive_shapes(raw):
        """Digits, spaces, dashes, plus signs and parentheses are allowed."""
        assert PhoneNumber(raw).value == raw

    @staticmethod
    @pytest.mark.parametrize(
        "raw",
        [
            "",
            "123456",
            "555-CALL-NOW",
            "555.123.4567",
            "\u0661\u0662\u0663\u0664\u0665\u0666\u0667",  # Arabic-Indic digits
            "\uff11\uff12\uff13\uff14\uff15\uff16\uff17",  # fullwidth digits
        ],
    )
    def test_rejects_bad_shapes(raw):
        """Too short or containing other characters is rejected."""
        with pytest.raises(InvalidValueError) as exc_info:
            PhoneNumber(raw)
        assert _reason(exc_info) == "Invalid phone format"
        assert exc_info.value.field == "phone"

    @staticmethod
    def test_is_not_trimmed():
        """Phone numbers are stored exactly as given."""
        assert PhoneNumber(" 5551234 ").value == " 5551234 "


class TestEmail:
    """Tests for Email."""

    @staticmethod
    def test_lowercases():
        """Emails are stored lowercased."""
        assert Email("John.Smith@Example.COM").value == "john.smith@example.com"

    @staticmethod
    @pytest.mark.parametrize(
        "raw", ["", "john", "john@example", "@example.com", "jo hn@example.com"]
    )
    def test_rejects_bad_shapes(raw):
        """Anything that is not local@domain.tld is rejected."""
        with pytest.raises(InvalidValueError) as exc_info:
            Email(raw)
        assert _reason(exc_info) == "Invalid email format"


class TestDateOfBirth:
    """Tests for DateOfBirth."""

    @staticmethod
    def test_rejects_future_date():
        """A date after today (UTC) is rejected."""
        tomorrow = datetime.now(timezone.utc).date() + timedelta(days=1)
        with pytest.raises(InvalidValueError) as exc_info:
            DateOfBirth(tomorrow)
        assert _reason(exc_info) == "Date of birth cannot be in the future"

    @staticmethod
    def test_accepts_today():
        """Being born today is allowed."""
        today = datetime.now(timezone.utc).date()
        assert DateOfBirth(today).age(on=today) == 0

    @staticmethod
    def test_datetime_is_reduced_to_date():
        """A datetime is stored as its calendar date."""
        dob = DateOfBirth(datetime(1990, 1, 2, 15, 0))  # type: ignore[arg-type]
        assert dob.value == date(1990, 1, 2)

    @staticmethod
    @pytest.mark.parametrize(
        ("on", "expected"),
        [
            (date(2024, 6, 14), 38),  # day before birthday
            (date(2024, 6, 15), 39),  # birthday
            (date(2024, 12, 31), 39),
        ],
    )
    def test_age_counts_whole_years(on, expected):
        """Age only increments on or after the birthday."""
        assert DateOfBirth(date(1985, 6, 15)).age(on=on) == expected

    @staticmethod
    def test_str_is_iso_date():
        """The string form is the ISO date."""
        assert str(DateOfBirth(date(1985, 6, 15))) == "1985-06-15"

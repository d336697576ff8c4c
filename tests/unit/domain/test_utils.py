"""Unit tests for domain utilities."""

from datetime import datetime, timedelta, timezone

import pytest

from clinicflow.domain.utils import ensure_utc, is_blank, utc_now, utc_today

from tests.helpers.time_asserts import assert_recent, assert_utc


def test_utc_now_is_aware_utc() -> None:
    """utc_now returns a tz-aware UTC timestamp close to the wall clock."""
    assert_recent(utc_now())


def test_utc_today_matches_utc_now() -> None:
    """utc_today is the calendar date of utc_now."""
    assert utc_today() in {utc_now().date(), (utc_now() - timedelta(seconds=1)).date()}


def test_ensure_utc_treats_naive_as_utc() -> None:
    """Naive datetimes get UTC attached without shifting."""
    out = ensure_utc(datetime(2024, 5, 1, 8, 0))
    assert_utc(out)
    assert out.hour == 8


def test_ensure_utc_converts_offsets() -> None:
    """Aware datetimes are converted to UTC."""
    minus_five = timezone(timedelta(hours=-5))
    out = ensure_utc(datetime(2024, 5, 1, 8, 0, tzinfo=minus_five))
    assert out == datetime(2024, 5, 1, 13, 0, tzinfo=timezone.utc)
    assert out.utcoffset() == timedelta(0)


@pytest.mark.parametrize(
    ("value", "expected"),
    [(None, True), ("", True), ("  \t", True), ("x", False), (" x ", False)],
)
def test_is_blank(value, expected) -> None:
    """None, empty and whitespace-only strings are blank."""
    assert is_blank(value) is expected

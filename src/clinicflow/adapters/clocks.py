"""Clock implementations."""

from datetime import datetime

from clinicflow.domain.utils import utc_now
from clinicflow.interfaces.clock import Clock

# pylint: disable=too-few-public-methods


class SystemClock(Clock):
    """Clock reading the system time, in UTC."""

    def now(self) -> datetime:
        return utc_now()

"""Aggregates package.

All aggregates are defined in this package and inherit from the base `Aggregate`
class in `base.py`. They are re-exported here to provide a single, convenient
import path.
"""

from .base import ActivatableAggregate, Aggregate
from .clinic import Clinic
from .patient import Patient
from .sample import Sample, SampleStatus

__all__ = [
    "ActivatableAggregate",
    "Aggregate",
    "Clinic",
    "Patient",
    "Sample",
    "SampleStatus",
]

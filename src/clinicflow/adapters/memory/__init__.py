"""In-memory adapters, used by tests and demos."""

from .repositories import (
    InMemoryClinicRepository,
    InMemoryPatientRepository,
    InMemorySampleRepository,
)
from .store import InMemoryStore
from .unit_of_work import InMemoryUnitOfWork

__all__ = [
    "InMemoryClinicRepository",
    "InMemoryPatientRepository",
    "InMemorySampleRepository",
    "InMemoryStore",
    "InMemoryUnitOfWork",
]

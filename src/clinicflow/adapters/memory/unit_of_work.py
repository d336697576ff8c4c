"""In-memory Unit of Work."""

from __future__ import annotations

from clinicflow.interfaces.unit_of_work import AbstractUnitOfWork

from .repositories import (
    InMemoryClinicRepository,
    InMemoryPatientRepository,
    InMemorySampleRepository,
)
from .store import InMemoryStore


class InMemoryUnitOfWork(AbstractUnitOfWork):
    """Unit of work over an `InMemoryStore`.

    Repository writes land in the store immediately; there is no transaction
    to roll back. `committed` records whether the last block committed, which
    tests use to check that handlers finish their work.
    """

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self.store = store if store is not None else InMemoryStore()
        self.clinics = InMemoryClinicRepository(self.store)
        self.patients = InMemoryPatientRepository(self.store)
        self.samples = InMemorySampleRepository(self.store)
        self.committed = False

    def __enter__(self) -> InMemoryUnitOfWork:
        self.committed = False
        return self

    def commit(self):
        self.committed = True

    def rollback(self):
        # Writes are already visible; nothing to undo.
        pass

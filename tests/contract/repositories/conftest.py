"""Fixtures for repository contract tests.

Every test here runs once per backend. Each backend hands out a unit of
work over an empty store.
"""

from collections.abc import Iterator

import pytest

from clinicflow.adapters.memory import InMemoryUnitOfWork
from clinicflow.adapters.unit_of_work import SqlAlchemyUnitOfWork
from clinicflow.interfaces.unit_of_work import AbstractUnitOfWork


@pytest.fixture(params=["memory", "sqlite"])
def uow(request: pytest.FixtureRequest) -> Iterator[AbstractUnitOfWork]:
    """Return a fresh unit of work for the requested backend.

    Supported params:
      - `"memory"` → InMemoryUnitOfWork over a new store
      - `"sqlite"` → SqlAlchemyUnitOfWork over an in-memory SQLite engine
    """
    match request.param:
        case "memory":
            yield InMemoryUnitOfWork()
        case "sqlite":
            yield SqlAlchemyUnitOfWork(request.getfixturevalue("sqlite_engine_memory"))
        case _:
            raise ValueError(f"unknown repository backend: {request.param}")

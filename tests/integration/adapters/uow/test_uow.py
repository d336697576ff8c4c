"""Integration tests for the SQLAlchemy-backed Unit of Work adapter.

Verifies commit and rollback behavior of SqlAlchemyUnitOfWork.
"""

import pytest

from clinicflow.adapters.unit_of_work import SqlAlchemyUnitOfWork


@pytest.mark.parametrize(
    "engine", ["sqlite_engine_memory", "sqlite_engine_file"], indirect=True
)
def test_commit_persists(engine, make_clinic):
    """Committed writes are visible to the next unit of work."""
    clinic = make_clinic()
    with SqlAlchemyUnitOfWork(engine) as uow:
        uow.clinics.save(clinic)
        uow.commit()

    with SqlAlchemyUnitOfWork(engine) as uow:
        assert uow.clinics.get(clinic.aggregate_id) is not None


@pytest.mark.parametrize(
    "engine", ["sqlite_engine_memory", "sqlite_engine_file"], indirect=True
)
def test_exit_without_commit_rolls_back(engine, make_clinic):
    """Leaving the block without commit discards the writes."""
    clinic = make_clinic()
    uow = SqlAlchemyUnitOfWork(engine)
    with uow:
        uow.clinics.save(clinic)

    with uow:
        assert uow.clinics.list_all() == []


def test_rolls_back_on_error(sqlite_engine_file, make_clinic, make_patient):
    """An exception inside the block discards every write made in it."""

    class Boom(Exception):
        """Custom exception for testing."""

    clinic = make_clinic()
    uow = SqlAlchemyUnitOfWork(sqlite_engine_file)
    with pytest.raises(Boom):
        with uow:
            uow.clinics.save(clinic)
            uow.patients.save(make_patient(clinic.aggregate_id))
            raise Boom()

    with uow:
        assert uow.clinics.list_all() == []
        assert uow.patients.list_all() == []


def test_connection_is_closed_after_block(sqlite_engine_memory):
    """Each block closes its connection on exit."""
    uow = SqlAlchemyUnitOfWork(sqlite_engine_memory)
    with uow:
        pass
    assert uow.connection.closed

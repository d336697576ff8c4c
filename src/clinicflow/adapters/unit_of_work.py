"""SQLAlchemy-backed Unit of Work for CLINICFLOW.

Provides a context-managed UnitOfWork using a SQLAlchemy Connection
and the SQLAlchemy repositories.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from clinicflow.adapters.sqlalchemy_repositories import (
    SqlAlchemyClinicRepository,
    SqlAlchemyPatientRepository,
    SqlAlchemySampleRepository,
)
from clinicflow.interfaces.unit_of_work import AbstractUnitOfWork

if TYPE_CHECKING:
    from sqlalchemy.engine import Connection, Engine


class SqlAlchemyUnitOfWork(AbstractUnitOfWork):
    """SQLAlchemy-backed Unit of Work.

    Each ``with uow:`` block opens one connection; anything not committed
    when the block exits is rolled back.
    """

    def __init__(self, engine: Engine):
        self.engine = engine
        self.connection: Connection

    def __enter__(self):
        self.connection = self.engine.connect()
        self.clinics = SqlAlchemyClinicRepository(self.connection)
        self.patients = SqlAlchemyPatientRepository(self.connection)
        self.samples = SqlAlchemySampleRepository(self.connection)
        return super().__enter__()

    def __exit__(self, *args):
        super().__exit__(*args)
        self.connection.close()

    def commit(self):
        self.connection.commit()

    def rollback(self):
        self.connection.rollback()

"""Shared mechanics for the SQLAlchemy repositories."""

from __future__ import annotations

import abc
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from sqlalchemy import delete, insert, select, update
from sqlalchemy.exc import IntegrityError

from clinicflow.domain.errors import AggregateNotFoundError, DuplicateAggregateError

if TYPE_CHECKING:
    from sqlalchemy import Table
    from sqlalchemy.engine import Connection, Row
    from sqlalchemy.sql.elements import ColumnElement

A = TypeVar("A")


class SqlAlchemyRepositoryBase(abc.ABC, Generic[A]):
    """One row per aggregate, keyed by the unique `id` column.

    Rows are read in `seq` order so lists come back in insertion order.
    Every read builds a fresh aggregate, detached from the row it came from.
    """

    TABLE: Table
    TYPE_NAME: str

    def __init__(self, connection: Connection):
        self.connection = connection

    # --- mapping ---

    @abc.abstractmethod
    def _to_row(self, aggregate: A) -> dict[str, Any]:
        """Map an aggregate to column values (without `seq`)."""

    @abc.abstractmethod
    def _from_row(self, row: Row) -> A:
        """Rehydrate an aggregate from a row."""

    # --- port operations ---

    def save(self, aggregate: A) -> None:
        try:
            self.connection.execute(
                insert(self.TABLE).values(**self._to_row(aggregate))
            )
        except IntegrityError as e:
            raise DuplicateAggregateError(self.TYPE_NAME, aggregate.aggregate_id) from e

    def get(self, aggregate_id: str) -> A | None:
        stmt = select(self.TABLE).where(self.TABLE.c.id == aggregate_id)
        if not (row := self.connection.execute(stmt).fetchone()):
            return None
        return self._from_row(row)

    def list_all(self) -> list[A]:
        return self._select()

    def update(self, aggregate: A) -> None:
        values = self._to_row(aggregate)
        aggregate_id = values.pop("id")
        result = self.connection.execute(
            update(self.TABLE).where(self.TABLE.c.id == aggregate_id).values(**values)
        )
        if result.rowcount == 0:
            raise AggregateNotFoundError(self.TYPE_NAME, aggregate_id)

    def delete(self, aggregate_id: str) -> None:
        result = self.connection.execute(
            delete(self.TABLE).where(self.TABLE.c.id == aggregate_id)
        )
        if result.rowcount == 0:
            raise AggregateNotFoundError(self.TYPE_NAME, aggregate_id)

    # --- helpers ---

    def _select(self, *criteria: ColumnElement[bool]) -> list[A]:
        stmt = select(self.TABLE).where(*criteria).order_by(self.TABLE.c.seq)
        return [self._from_row(row) for row in self.connection.execute(stmt)]

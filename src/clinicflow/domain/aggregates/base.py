"""Base classes for all aggregates."""

from __future__ import annotations

import abc
import uuid
from datetime import datetime
from typing import ClassVar

from clinicflow.domain import errors
from clinicflow.domain.utils import ensure_utc, is_blank, utc_now


def new_aggregate_id() -> str:
    """Generate a fresh aggregate identifier (UUIDv4)."""
    return str(uuid.uuid4())


class Aggregate(abc.ABC):
    """Generic base class for all aggregates.

    Holds identity and the created/updated timestamps. Concrete aggregates
    expose their state through read-only properties and change it only
    through named operations, each of which stamps `updated_at`.
    """

    TYPE_NAME: ClassVar[str]
    """Human-readable aggregate name used in error messages (e.g. "Clinic")."""

    def __init__(
        self,
        aggregate_id: str,
        *,
        created_at: datetime,
        updated_at: datetime | None = None,
    ) -> None:
        if is_blank(aggregate_id):
            raise errors.InvalidValueError("id", f"{self.TYPE_NAME} ID cannot be empty")
        self._aggregate_id = aggregate_id
        self._created_at = ensure_utc(created_at)
        self._updated_at = (
            ensure_utc(updated_at) if updated_at is not None else self._created_at
        )

    @property
    def aggregate_id(self) -> str:
        """The unique identifier of the aggregate."""
        return self._aggregate_id

    @property
    def created_at(self) -> datetime:
        """When the aggregate was created (UTC)."""
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        """When the aggregate last changed (UTC)."""
        return self._updated_at

    # --- Plumbing ---

    def _touch(self, at: datetime | None) -> None:
        self._updated_at = ensure_utc(at) if at is not None else utc_now()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, type(self)):
            return NotImplemented
        return self._aggregate_id == other._aggregate_id

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._aggregate_id))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(aggregate_id={self._aggregate_id!r})"


class ActivatableAggregate(Aggregate):
    """Aggregate with an explicit active/inactive lifecycle.

    State machine: ``{active, inactive}``, initial state active. The flag only
    changes through `activate()` and `deactivate()`, which are strict toggles.
    """

    def __init__(
        self,
        aggregate_id: str,
        *,
        is_active: bool = True,
        created_at: datetime,
        updated_at: datetime | None = None,
    ) -> None:
        super().__init__(aggregate_id, created_at=created_at, updated_at=updated_at)
        self._is_active = is_active

    @property
    def is_active(self) -> bool:
        """Whether the aggregate is currently active."""
        return self._is_active

    # --- State Transitions ---

    def activate(self, at: datetime | None = None) -> None:
        """Mark the aggregate active.

        Raises:
            AlreadyActiveError: If the aggregate is already active.
        """
        if self._is_active:
            raise errors.AlreadyActiveError(self.TYPE_NAME, self._aggregate_id)
        self._is_active = True
        self._touch(at)

    def deactivate(self, at: datetime | None = None) -> None:
        """Mark the aggregate inactive.

        Raises:
            AlreadyInactiveError: If the aggregate is already inactive.
        """
        if not self._is_active:
            raise errors.AlreadyInactiveError(self.TYPE_NAME, self._aggregate_id)
        self._is_active = False
        self._touch(at)

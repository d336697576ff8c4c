"""Helpers shared by the command handlers."""

from typing import TypeVar

from clinicflow.domain.errors import AggregateNotFoundError, UnknownReferenceError
from clinicflow.interfaces.repositories import Repository

T = TypeVar("T")


def load(repo: Repository[T], type_name: str, aggregate_id: str) -> T:
    """Load the aggregate addressed by a command.

    Raises:
        AggregateNotFoundError: If the id is not stored.
    """
    aggregate = repo.get(aggregate_id)
    if aggregate is None:
        raise AggregateNotFoundError(type_name, aggregate_id)
    return aggregate


def load_reference(repo: Repository[T], type_name: str, aggregate_id: str) -> T:
    """Load an aggregate referenced from the body of a create request.

    A dangling reference is bad input rather than a missing resource.

    Raises:
        UnknownReferenceError: If the id is not stored.
    """
    aggregate = repo.get(aggregate_id)
    if aggregate is None:
        raise UnknownReferenceError(type_name, aggregate_id)
    return aggregate

"""Tri-state handling for partial-update fields.

This module defines the ``UNSET`` sentinel, the `Unsettable` type alias,
and the `resolve` helper used by update handlers.

A field of type ``Unsettable[T]`` can take three states:

* ``UNSET``: the field was omitted and is left unchanged.
* ``None``: the caller asked to clear the field. No aggregate field can be
  cleared, so this is rejected with `UnclearableFieldError`.
* concrete ``T``: the raw value is handed to its value object, which
  validates it. An empty string is therefore rejected by the value object,
  not treated as "omitted".
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import TypeVar

from clinicflow.domain.errors import UnclearableFieldError


def _get_unset() -> "_UnsetType":
    # Factory used by pickle to retrieve the one true instance.
    return UNSET


@dataclass(frozen=True)
class _UnsetType:
    """Sentinel to mark fields intentionally left out of an update.

    This is distinct from `None`, which asks for the value to be cleared.
    """

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "UNSET"

    def __reduce__(self):  # keep singleton on pickle
        return (_get_unset, ())


# Singleton instance
UNSET = _UnsetType()

T = TypeVar("T")
V = TypeVar("V")
type Unsettable[T] = T | _UnsetType | None


def is_unset(value: object) -> bool:
    """Return True if `value` is the UNSET sentinel."""
    return isinstance(value, _UnsetType)


def resolve(
    value: T | None | _UnsetType,
    factory: Callable[[T], V],
    *,
    field: str,
) -> V | None:
    """Resolve a tri-state update value into a value object.

    Args:
        value: The raw value from the request (UNSET, None, or a concrete value).
        factory: Builds (and validates) the value object from a concrete value.
        field: The name of the field (for error messages).

    Returns:
        None when the field was omitted (leave unchanged), otherwise the value
        object built from `value`.

    Raises:
        UnclearableFieldError: If `value` is None.
        InvalidValueError: If the value object rejects `value`.
    """
    if isinstance(value, _UnsetType):
        return None
    if value is None:
        raise UnclearableFieldError(field)
    return factory(value)

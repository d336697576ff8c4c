"""Domain-layer error definitions.

Every error carries its `kind` as a class attribute so outer layers can map
failures to status codes without looking at messages.
"""

from enum import Enum
from typing import ClassVar


class ErrorKind(str, Enum):
    """Classification of a failure, independent of its concrete type."""

    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"


# ============================================================================
#                           General domain errors
# ============================================================================


class DomainError(Exception):
    """Base class for domain-layer errors."""

    kind: ClassVar[ErrorKind]


class ValidationError(DomainError):
    """Raised for malformed or out-of-range input."""

    kind = ErrorKind.VALIDATION


class NotFoundError(DomainError):
    """Raised when a looked-up aggregate does not exist."""

    kind = ErrorKind.NOT_FOUND


class ConflictError(DomainError):
    """Raised when an operation is invalid for the aggregate's current state."""

    kind = ErrorKind.CONFLICT


# ============================================================================
#                             Validation errors
# ============================================================================


class InvalidValueError(ValidationError):
    """Raised when a value object refuses its input."""

    def __init__(self, field: str, reason: str) -> None:
        super().__init__(reason)
        self.field = field
        self.reason = reason


class UnclearableFieldError(ValidationError):
    """Raised when an update tries to clear a field that must always hold a value."""

    def __init__(self, field: str) -> None:
        super().__init__(f"Field '{field}' cannot be cleared")
        self.field = field


class UnknownReferenceError(ValidationError):
    """Raised when a request body references an aggregate that does not exist."""

    def __init__(self, aggregate_type_name: str, aggregate_id: str) -> None:
        super().__init__(f"{aggregate_type_name} with id {aggregate_id} not found")
        self.aggregate_type_name = aggregate_type_name
        self.aggregate_id = aggregate_id


class ClinicMismatchError(ValidationError):
    """Raised when a sample's clinic is not the clinic of its patient."""

    def __init__(self, patient_id: str, clinic_id: str) -> None:
        super().__init__("Patient does not belong to the specified clinic")
        self.patient_id = patient_id
        self.clinic_id = clinic_id


# ============================================================================
#                             Not found errors
# ============================================================================


class AggregateNotFoundError(NotFoundError):
    """Raised when an aggregate cannot be found in its repository."""

    def __init__(self, aggregate_type_name: str, aggregate_id: str) -> None:
        super().__init__(f"{aggregate_type_name} with id {aggregate_id} not found")
        self.aggregate_type_name = aggregate_type_name
        self.aggregate_id = aggregate_id


# ============================================================================
#                              Conflict errors
# ============================================================================


class DuplicateAggregateError(ConflictError):
    """Raised when saving an aggregate whose id is already stored."""

    def __init__(self, aggregate_type_name: str, aggregate_id: str) -> None:
        super().__init__(f"{aggregate_type_name} with id {aggregate_id} already exists")
        self.aggregate_type_name = aggregate_type_name
        self.aggregate_id = aggregate_id


class AlreadyActiveError(ConflictError):
    """Raised when activating an aggregate that is already active."""

    def __init__(self, aggregate_type_name: str, aggregate_id: str) -> None:
        super().__init__(f"{aggregate_type_name} is already active")
        self.aggregate_type_name = aggregate_type_name
        self.aggregate_id = aggregate_id


class AlreadyInactiveError(ConflictError):
    """Raised when deactivating an aggregate that is already inactive."""

    def __init__(self, aggregate_type_name: str, aggregate_id: str) -> None:
        super().__init__(f"{aggregate_type_name} is already inactive")
        self.aggregate_type_name = aggregate_type_name
        self.aggregate_id = aggregate_id


class InvalidSampleTransitionError(ConflictError):
    """Raised when a sample status transition is not allowed from its current status."""

    def __init__(self, sample_id: str, status: str, message: str) -> None:
        super().__init__(message)
        self.sample_id = sample_id
        self.status = status

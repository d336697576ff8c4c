"""SQLAlchemy Core implementations of the repository ports."""

from .clinics import SqlAlchemyClinicRepository
from .patients import SqlAlchemyPatientRepository
from .samples import SqlAlchemySampleRepository

__all__ = [
    "SqlAlchemyClinicRepository",
    "SqlAlchemyPatientRepository",
    "SqlAlchemySampleRepository",
]

"""Module defining Commands.

Commands are the plain requests the service layer accepts. They carry raw
primitive values; validation happens when handlers build value objects.
"""

from dataclasses import dataclass
from datetime import date, datetime

from .unsettable import UNSET, Unsettable

# pylint: disable=too-many-instance-attributes


@dataclass(frozen=True)
class Command:
    """Base class for all commands."""


# ============================================================================
#                               Clinic commands
# ============================================================================


@dataclass(frozen=True)
class CreateClinic(Command):
    """Command to register a new clinic."""

    name: str
    address: str
    phone: str


@dataclass(frozen=True)
class GetClinic(Command):
    """Command to fetch a single clinic."""

    clinic_id: str


@dataclass(frozen=True)
class ListClinics(Command):
    """Command to list every clinic."""


@dataclass(frozen=True)
class UpdateClinic(Command):
    """Command to partially update a clinic. Omitted fields stay unchanged."""

    clinic_id: str
    name: Unsettable[str] = UNSET
    address: Unsettable[str] = UNSET
    phone: Unsettable[str] = UNSET


@dataclass(frozen=True)
class DeleteClinic(Command):
    """Command to delete a clinic."""

    clinic_id: str


@dataclass(frozen=True)
class ActivateClinic(Command):
    """Command to activate an inactive clinic."""

    clinic_id: str


@dataclass(frozen=True)
class DeactivateClinic(Command):
    """Command to deactivate an active clinic."""

    clinic_id: str


# ============================================================================
#                              Patient commands
# ============================================================================


@dataclass(frozen=True)
class CreatePatient(Command):
    """Command to register a patient with an existing clinic."""

    first_name: str
    last_name: str
    email: str
    phone: str
    date_of_birth: date
    clinic_id: str


@dataclass(frozen=True)
class GetPatient(Command):
    """Command to fetch a single patient."""

    patient_id: str


@dataclass(frozen=True)
class ListPatientsByClinic(Command):
    """Command to list the patients of a clinic."""

    clinic_id: str


@dataclass(frozen=True)
class UpdatePatient(Command):
    """Command to partially update a patient. Omitted fields stay unchanged."""

    patient_id: str
    first_name: Unsettable[str] = UNSET
    last_name: Unsettable[str] = UNSET
    email: Unsettable[str] = UNSET
    phone: Unsettable[str] = UNSET


@dataclass(frozen=True)
class DeletePatient(Command):
    """Command to delete a patient."""

    patient_id: str


@dataclass(frozen=True)
class ActivatePatient(Command):
    """Command to activate an inactive patient."""

    patient_id: str


@dataclass(frozen=True)
class DeactivatePatient(Command):
    """Command to deactivate an active patient."""

    patient_id: str


# ============================================================================
#                              Sample commands
# ============================================================================


@dataclass(frozen=True)
class CreateSample(Command):
    """Command to register a sample collected from a patient at a clinic."""

    patient_id: str
    clinic_id: str
    sample_type: str
    collection_date: datetime


@dataclass(frozen=True)
class GetSample(Command):
    """Command to fetch a single sample."""

    sample_id: str


@dataclass(frozen=True)
class ListSamplesByPatient(Command):
    """Command to list the samples collected from a patient."""

    patient_id: str


@dataclass(frozen=True)
class ListSamplesByClinic(Command):
    """Command to list the samples collected at a clinic."""

    clinic_id: str


@dataclass(frozen=True)
class UpdateSampleNotes(Command):
    """Command to replace the notes of a sample."""

    sample_id: str
    notes: str


@dataclass(frozen=True)
class ChangeSampleType(Command):
    """Command to replace the type of a sample."""

    sample_id: str
    sample_type: str


@dataclass(frozen=True)
class StartSampleProcessing(Command):
    """Command to move a pending sample into processing."""

    sample_id: str


@dataclass(frozen=True)
class CompleteSample(Command):
    """Command to complete a sample that is being processed."""

    sample_id: str


@dataclass(frozen=True)
class RejectSample(Command):
    """Command to reject a sample with a reason."""

    sample_id: str
    reason: str


@dataclass(frozen=True)
class DeleteSample(Command):
    """Command to delete a sample."""

    sample_id: str

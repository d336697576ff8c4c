"""Handlers for the patient aggregate."""

import logging
from collections.abc import Callable

from clinicflow.domain.aggregates import Clinic, Patient
from clinicflow.domain.value_objects import (
    DateOfBirth,
    Email,
    FirstName,
    LastName,
    PhoneNumber,
)
from clinicflow.interfaces.clock import Clock
from clinicflow.interfaces.id_generator import IdGenerator
from clinicflow.interfaces.unit_of_work import AbstractUnitOfWork
from clinicflow.service_layer import commands
from clinicflow.service_layer.unsettable import resolve
from clinicflow.service_layer.views import PatientView

from .common import load, load_reference

logger = logging.getLogger(__name__)


def create_patient(
    cmd: commands.CreatePatient,
    uow: AbstractUnitOfWork,
    id_generator: IdGenerator,
    clock: Clock,
) -> PatientView:
    """Register a patient with an existing clinic.

    The clinic only has to exist; an inactive clinic still accepts patients.
    """

    with uow:
        load_reference(uow.clinics, Clinic.TYPE_NAME, cmd.clinic_id)

        patient = Patient.create(
            FirstName(cmd.first_name),
            LastName(cmd.last_name),
            Email(cmd.email),
            PhoneNumber(cmd.phone),
            DateOfBirth(cmd.date_of_birth),
            cmd.clinic_id,
            aggregate_id=id_generator.new_id(),
            at=clock.now(),
        )
        uow.patients.save(patient)
        uow.commit()

    logger.info(
        "Created patient %s in clinic %s", patient.aggregate_id, patient.clinic_id
    )
    return PatientView.from_patient(patient)


def get_patient(cmd: commands.GetPatient, uow: AbstractUnitOfWork) -> PatientView:
    """Fetch a single patient."""
    with uow:
        patient = load(uow.patients, Patient.TYPE_NAME, cmd.patient_id)
    return PatientView.from_patient(patient)


def list_patients_by_clinic(
    cmd: commands.ListPatientsByClinic, uow: AbstractUnitOfWork
) -> list[PatientView]:
    """List the patients of a clinic. An unknown clinic simply has none."""
    with uow:
        patients = uow.patients.list_by_clinic(cmd.clinic_id)
    return [PatientView.from_patient(patient) for patient in patients]


def update_patient(
    cmd: commands.UpdatePatient, uow: AbstractUnitOfWork, clock: Clock
) -> PatientView:
    """Replace the given fields of a patient."""

    with uow:
        patient = load(uow.patients, Patient.TYPE_NAME, cmd.patient_id)
        patient.update(
            first_name=resolve(cmd.first_name, FirstName, field="first_name"),
            last_name=resolve(cmd.last_name, LastName, field="last_name"),
            email=resolve(cmd.email, Email, field="email"),
            phone=resolve(cmd.phone, PhoneNumber, field="phone"),
            at=clock.now(),
        )
        uow.patients.update(patient)
        uow.commit()

    logger.info("Updated patient %s", patient.aggregate_id)
    return PatientView.from_patient(patient)


def delete_patient(cmd: commands.DeletePatient, uow: AbstractUnitOfWork) -> None:
    """Delete a patient. Their samples are left in place."""
    with uow:
        uow.patients.delete(cmd.patient_id)
        uow.commit()
    logger.info("Deleted patient %s", cmd.patient_id)


def activate_patient(
    cmd: commands.ActivatePatient, uow: AbstractUnitOfWork, clock: Clock
) -> PatientView:
    """Activate an inactive patient."""
    with uow:
        patient = load(uow.patients, Patient.TYPE_NAME, cmd.patient_id)
        patient.activate(at=clock.now())
        uow.patients.update(patient)
        uow.commit()
    logger.info("Activated patient %s", patient.aggregate_id)
    return PatientView.from_patient(patient)


def deactivate_patient(
    cmd: commands.DeactivatePatient, uow: AbstractUnitOfWork, clock: Clock
) -> PatientView:
    """Deactivate an active patient."""
    with uow:
        patient = load(uow.patients, Patient.TYPE_NAME, cmd.patient_id)
        patient.deactivate(at=clock.now())
        uow.patients.update(patient)
        uow.commit()
    logger.info("Deactivated patient %s", patient.aggregate_id)
    return PatientView.from_patient(patient)


COMMAND_HANDLERS: dict[type, Callable[..., object]] = {
    commands.CreatePatient: create_patient,
    commands.GetPatient: get_patient,
    commands.ListPatientsByClinic: list_patients_by_clinic,
    commands.UpdatePatient: update_patient,
    commands.DeletePatient: delete_patient,
    commands.ActivatePatient: activate_patient,
    commands.DeactivatePatient: deactivate_patient,
}

"""Handlers for the clinic aggregate."""

import logging
from collections.abc import Callable

from clinicflow.domain.aggregates import Clinic
from clinicflow.domain.value_objects import ClinicAddress, ClinicName, PhoneNumber
from clinicflow.interfaces.clock import Clock
from clinicflow.interfaces.id_generator import IdGenerator
from clinicflow.interfaces.unit_of_work import AbstractUnitOfWork
from clinicflow.service_layer import commands
from clinicflow.service_layer.unsettable import resolve
from clinicflow.service_layer.views import ClinicView

from .common import load

logger = logging.getLogger(__name__)


def create_clinic(
    cmd: commands.CreateClinic,
    uow: AbstractUnitOfWork,
    id_generator: IdGenerator,
    clock: Clock,
) -> ClinicView:
    """Register a new, active clinic."""

    clinic = Clinic.create(
        ClinicName(cmd.name),
        ClinicAddress(cmd.address),
        PhoneNumber(cmd.phone),
        aggregate_id=id_generator.new_id(),
        at=clock.now(),
    )

    with uow:
        uow.clinics.save(clinic)
        uow.commit()

    logger.info("Created clinic %s (%s)", clinic.aggregate_id, clinic.name)
    return ClinicView.from_clinic(clinic)


def get_clinic(cmd: commands.GetClinic, uow: AbstractUnitOfWork) -> ClinicView:
    """Fetch a single clinic."""
    with uow:
        clinic = load(uow.clinics, Clinic.TYPE_NAME, cmd.clinic_id)
    return ClinicView.from_clinic(clinic)


def list_clinics(
    cmd: commands.ListClinics,  # pylint: disable=unused-argument
    uow: AbstractUnitOfWork,
) -> list[ClinicView]:
    """List every clinic in registration order."""
    with uow:
        clinics = uow.clinics.list_all()
    return [ClinicView.from_clinic(clinic) for clinic in clinics]


def update_clinic(
    cmd: commands.UpdateClinic, uow: AbstractUnitOfWork, clock: Clock
) -> ClinicView:
    """Replace the given fields of a clinic."""

    with uow:
        clinic = load(uow.clinics, Clinic.TYPE_NAME, cmd.clinic_id)
        clinic.update(
            name=resolve(cmd.name, ClinicName, field="name"),
            address=resolve(cmd.address, ClinicAddress, field="address"),
            phone=resolve(cmd.phone, PhoneNumber, field="phone"),
            at=clock.now(),
        )
        uow.clinics.update(clinic)
        uow.commit()

    logger.info("Updated clinic %s", clinic.aggregate_id)
    return ClinicView.from_clinic(clinic)


def delete_clinic(cmd: commands.DeleteClinic, uow: AbstractUnitOfWork) -> None:
    """Delete a clinic. Its patients and samples are left in place."""
    with uow:
        uow.clinics.delete(cmd.clinic_id)
        uow.commit()
    logger.info("Deleted clinic %s", cmd.clinic_id)


def activate_clinic(
    cmd: commands.ActivateClinic, uow: AbstractUnitOfWork, clock: Clock
) -> ClinicView:
    """Activate an inactive clinic."""
    with uow:
        clinic = load(uow.clinics, Clinic.TYPE_NAME, cmd.clinic_id)
        clinic.activate(at=clock.now())
        uow.clinics.update(clinic)
        uow.commit()
    logger.info("Activated clinic %s", clinic.aggregate_id)
    return ClinicView.from_clinic(clinic)


def deactivate_clinic(
    cmd: commands.DeactivateClinic, uow: AbstractUnitOfWork, clock: Clock
) -> ClinicView:
    """Deactivate an active clinic."""
    with uow:
        clinic = load(uow.clinics, Clinic.TYPE_NAME, cmd.clinic_id)
        clinic.deactivate(at=clock.now())
        uow.clinics.update(clinic)
        uow.commit()
    logger.info("Deactivated clinic %s", clinic.aggregate_id)
    return ClinicView.from_clinic(clinic)


COMMAND_HANDLERS: dict[type, Callable[..., object]] = {
    commands.CreateClinic: create_clinic,
    commands.GetClinic: get_clinic,
    commands.ListClinics: list_clinics,
    commands.UpdateClinic: update_clinic,
    commands.DeleteClinic: delete_clinic,
    commands.ActivateClinic: activate_clinic,
    commands.DeactivateClinic: deactivate_clinic,
}

"""Handlers for the sample aggregate."""

import logging
from collections.abc import Callable

from clinicflow.domain.aggregates import Clinic, Patient, Sample
from clinicflow.domain.errors import ClinicMismatchError
from clinicflow.interfaces.clock import Clock
from clinicflow.interfaces.id_generator import IdGenerator
from clinicflow.interfaces.unit_of_work import AbstractUnitOfWork
from clinicflow.service_layer import commands
from clinicflow.service_layer.views import SampleView

from .common import load, load_reference

logger = logging.getLogger(__name__)


def create_sample(
    cmd: commands.CreateSample,
    uow: AbstractUnitOfWork,
    id_generator: IdGenerator,
    clock: Clock,
) -> SampleView:
    """Register a pending sample collected from a patient at their clinic.

    Raises:
        UnknownReferenceError: If the patient or the clinic does not exist.
        ClinicMismatchError: If the patient is registered with another clinic.
        InvalidValueError: If the sample type is empty or the collection date
            lies in the future.
    """

    with uow:
        patient = load_reference(uow.patients, Patient.TYPE_NAME, cmd.patient_id)
        load_reference(uow.clinics, Clinic.TYPE_NAME, cmd.clinic_id)
        if patient.clinic_id != cmd.clinic_id:
            raise ClinicMismatchError(cmd.patient_id, cmd.clinic_id)

        sample = Sample.create(
            cmd.patient_id,
            cmd.clinic_id,
            cmd.sample_type,
            cmd.collection_date,
            aggregate_id=id_generator.new_id(),
            at=clock.now(),
        )
        uow.samples.save(sample)
        uow.commit()

    logger.info(
        "Created %s sample %s for patient %s",
        sample.sample_type,
        sample.aggregate_id,
        sample.patient_id,
    )
    return SampleView.from_sample(sample)


def get_sample(cmd: commands.GetSample, uow: AbstractUnitOfWork) -> SampleView:
    """Fetch a single sample."""
    with uow:
        sample = load(uow.samples, Sample.TYPE_NAME, cmd.sample_id)
    return SampleView.from_sample(sample)


def list_samples_by_patient(
    cmd: commands.ListSamplesByPatient, uow: AbstractUnitOfWork
) -> list[SampleView]:
    """List the samples collected from a patient."""
    with uow:
        samples = uow.samples.list_by_patient(cmd.patient_id)
    return [SampleView.from_sample(sample) for sample in samples]


def list_samples_by_clinic(
    cmd: commands.ListSamplesByClinic, uow: AbstractUnitOfWork
) -> list[SampleView]:
    """List the samples collected at a clinic."""
    with uow:
        samples = uow.samples.list_by_clinic(cmd.clinic_id)
    return [SampleView.from_sample(sample) for sample in samples]


def update_sample_notes(
    cmd: commands.UpdateSampleNotes, uow: AbstractUnitOfWork, clock: Clock
) -> SampleView:
    """Replace the notes of a sample, whatever its status."""
    with uow:
        sample = load(uow.samples, Sample.TYPE_NAME, cmd.sample_id)
        sample.update_notes(cmd.notes, at=clock.now())
        uow.samples.update(sample)
        uow.commit()
    logger.info("Updated notes of sample %s", sample.aggregate_id)
    return SampleView.from_sample(sample)


def change_sample_type(
    cmd: commands.ChangeSampleType, uow: AbstractUnitOfWork, clock: Clock
) -> SampleView:
    """Replace the type of a sample."""
    with uow:
        sample = load(uow.samples, Sample.TYPE_NAME, cmd.sample_id)
        sample.change_sample_type(cmd.sample_type, at=clock.now())
        uow.samples.update(sample)
        uow.commit()
    logger.info("Changed type of sample %s to %s", sample.aggregate_id, cmd.sample_type)
    return SampleView.from_sample(sample)


def start_sample_processing(
    cmd: commands.StartSampleProcessing, uow: AbstractUnitOfWork, clock: Clock
) -> SampleView:
    """Move a pending sample into processing."""
    with uow:
        sample = load(uow.samples, Sample.TYPE_NAME, cmd.sample_id)
        sample.start_processing(at=clock.now())
        uow.samples.update(sample)
        uow.commit()
    logger.info("Started processing sample %s", sample.aggregate_id)
    return SampleView.from_sample(sample)


def complete_sample(
    cmd: commands.CompleteSample, uow: AbstractUnitOfWork, clock: Clock
) -> SampleView:
    """Complete a sample that is being processed."""
    with uow:
        sample = load(uow.samples, Sample.TYPE_NAME, cmd.sample_id)
        sample.complete(at=clock.now())
        uow.samples.update(sample)
        uow.commit()
    logger.info("Completed sample %s", sample.aggregate_id)
    return SampleView.from_sample(sample)


def reject_sample(
    cmd: commands.RejectSample, uow: AbstractUnitOfWork, clock: Clock
) -> SampleView:
    """Reject a sample. Its notes are replaced with the rejection reason."""
    with uow:
        sample = load(uow.samples, Sample.TYPE_NAME, cmd.sample_id)
        sample.reject(cmd.reason, at=clock.now())
        uow.samples.update(sample)
        uow.commit()
    logger.info("Rejected sample %s: %s", sample.aggregate_id, cmd.reason)
    return SampleView.from_sample(sample)


def delete_sample(cmd: commands.DeleteSample, uow: AbstractUnitOfWork) -> None:
    """Delete a sample."""
    with uow:
        uow.samples.delete(cmd.sample_id)
        uow.commit()
    logger.info("Deleted sample %s", cmd.sample_id)


COMMAND_HANDLERS: dict[type, Callable[..., object]] = {
    commands.CreateSample: create_sample,
    commands.GetSample: get_sample,
    commands.ListSamplesByPatient: list_samples_by_patient,
    commands.ListSamplesByClinic: list_samples_by_clinic,
    commands.UpdateSampleNotes: update_sample_notes,
    commands.ChangeSampleType: change_sample_type,
    commands.StartSampleProcessing: start_sample_processing,
    commands.CompleteSample: complete_sample,
    commands.RejectSample: reject_sample,
    commands.DeleteSample: delete_sample,
}

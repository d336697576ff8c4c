"""``clinicflow sample``: register samples and drive their lifecycle."""

from datetime import datetime

import click
import click_extra as clickx

from clinicflow.domain.utils import ensure_utc, utc_now
from clinicflow.service_layer import commands

from .helpers import dispatch, success

COLLECTION_DATE_FORMATS = ["%Y-%m-%d", "%Y-%m-%dT%H:%M:%S", "%Y-%m-%d %H:%M:%S"]


@click.group(cls=clickx.ExtraGroup)
def sample() -> None:
    """Sample management commands."""


@sample.command()
@click.option("--patient-id", required=True, help="Patient the sample comes from.")
@click.option("--clinic-id", required=True, help="Clinic that collected the sample.")
@click.option("--type", "sample_type", required=True, help="Sample type, e.g. blood.")
@click.option(
    "--collected-at",
    "collected_at",
    type=click.DateTime(formats=COLLECTION_DATE_FORMATS),
    default=None,
    help="Collection time in UTC (defaults to now).",
)
def create(
    patient_id: str, clinic_id: str, sample_type: str, collected_at: datetime | None
) -> None:
    """Register a pending sample."""
    collection_date = ensure_utc(collected_at) if collected_at else utc_now()
    dispatch(
        commands.CreateSample(
            patient_id=patient_id,
            clinic_id=clinic_id,
            sample_type=sample_type,
            collection_date=collection_date,
        )
    )


@sample.command()
@click.argument("sample_id")
def show(sample_id: str) -> None:
    """Show one sample."""
    dispatch(commands.GetSample(sample_id=sample_id))


@sample.command(name="list")
@click.option("--patient-id", required=True, help="Patient whose samples to list.")
def list_(patient_id: str) -> None:
    """List the samples collected from a patient."""
    dispatch(commands.ListSamplesByPatient(patient_id=patient_id))


@sample.command(name="list-by-clinic")
@click.option("--clinic-id", required=True, help="Clinic whose samples to list.")
def list_by_clinic(clinic_id: str) -> None:
    """List the samples collected at a clinic."""
    dispatch(commands.ListSamplesByClinic(clinic_id=clinic_id))


@sample.command()
@click.argument("sample_id")
@click.argument("notes")
def notes(sample_id: str, notes: str) -> None:  # pylint: disable=redefined-outer-name
    """Replace the notes of a sample."""
    dispatch(commands.UpdateSampleNotes(sample_id=sample_id, notes=notes))


@sample.command(name="type")
@click.argument("sample_id")
@click.argument("sample_type")
def type_(sample_id: str, sample_type: str) -> None:
    """Change the type of a sample."""
    dispatch(commands.ChangeSampleType(sample_id=sample_id, sample_type=sample_type))


@sample.command()
@click.argument("sample_id")
def start(sample_id: str) -> None:
    """Start processing a pending sample."""
    dispatch(commands.StartSampleProcessing(sample_id=sample_id))


@sample.command()
@click.argument("sample_id")
def complete(sample_id: str) -> None:
    """Complete a sample that is being processed."""
    dispatch(commands.CompleteSample(sample_id=sample_id))


@sample.command()
@click.argument("sample_id")
@click.option("--reason", required=True, help="Why the sample is rejected.")
def reject(sample_id: str, reason: str) -> None:
    """Reject a pending or processing sample."""
    dispatch(commands.RejectSample(sample_id=sample_id, reason=reason))


@sample.command()
@click.argument("sample_id")
def delete(sample_id: str) -> None:
    """Delete a sample."""
    dispatch(commands.DeleteSample(sample_id=sample_id))
    success(f"Sample {sample_id} deleted.")

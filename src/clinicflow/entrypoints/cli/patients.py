"""``clinicflow patient``: register and manage patients."""

from datetime import datetime

import click
import click_extra as clickx

from clinicflow.service_layer import commands

from .helpers import dispatch, success


@click.group(cls=clickx.ExtraGroup)
def patient() -> None:
    """Patient management commands."""


@patient.command()
@click.option("--first-name", required=True, help="Given name (2-50 characters).")
@click.option("--last-name", required=True, help="Family name (2-50 characters).")
@click.option("--email", required=True, help="Email address.")
@click.option("--phone", required=True, help="Contact phone number.")
@click.option(
    "--date-of-birth",
    "date_of_birth",
    required=True,
    type=click.DateTime(formats=["%Y-%m-%d"]),
    help="Date of birth (YYYY-MM-DD).",
)
@click.option("--clinic-id", required=True, help="Clinic the patient registers with.")
def create(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    first_name: str,
    last_name: str,
    email: str,
    phone: str,
    date_of_birth: datetime,
    clinic_id: str,
) -> None:
    """Register a patient with an existing clinic."""
    dispatch(
        commands.CreatePatient(
            first_name=first_name,
            last_name=last_name,
            email=email,
            phone=phone,
            date_of_birth=date_of_birth.date(),
            clinic_id=clinic_id,
        )
    )


@patient.command()
@click.argument("patient_id")
def show(patient_id: str) -> None:
    """Show one patient."""
    dispatch(commands.GetPatient(patient_id=patient_id))


@patient.command(name="list")
@click.option("--clinic-id", required=True, help="Clinic whose patients to list.")
def list_(clinic_id: str) -> None:
    """List the patients of a clinic."""
    dispatch(commands.ListPatientsByClinic(clinic_id=clinic_id))


@patient.command()
@click.argument("patient_id")
@click.option("--first-name", default=None, help="New given name.")
@click.option("--last-name", default=None, help="New family name.")
@click.option("--email", default=None, help="New email address.")
@click.option("--phone", default=None, help="New phone number.")
def update(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    patient_id: str,
    first_name: str | None,
    last_name: str | None,
    email: str | None,
    phone: str | None,
) -> None:
    """Change the given fields of a patient; others stay as they are."""
    options = {
        "first_name": first_name,
        "last_name": last_name,
        "email": email,
        "phone": phone,
    }
    given = {field: value for field, value in options.items() if value is not None}
    dispatch(commands.UpdatePatient(patient_id=patient_id, **given))


@patient.command()
@click.argument("patient_id")
def delete(patient_id: str) -> None:
    """Delete a patient."""
    dispatch(commands.DeletePatient(patient_id=patient_id))
    success(f"Patient {patient_id} deleted.")


@patient.command()
@click.argument("patient_id")
def activate(patient_id: str) -> None:
    """Activate an inactive patient."""
    dispatch(commands.ActivatePatient(patient_id=patient_id))


@patient.command()
@click.argument("patient_id")
def deactivate(patient_id: str) -> None:
    """Deactivate an active patient."""
    dispatch(commands.DeactivatePatient(patient_id=patient_id))

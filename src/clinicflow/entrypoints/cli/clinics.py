"""``clinicflow clinic``: register and manage clinics."""

import click
import click_extra as clickx

from clinicflow.service_layer import commands

from .helpers import dispatch, success


@click.group(cls=clickx.ExtraGroup)
def clinic() -> None:
    """Clinic management commands."""


@clinic.command()
@click.option("--name", required=True, help="Clinic name (2-100 characters).")
@click.option("--address", required=True, help="Postal address (5-255 characters).")
@click.option("--phone", required=True, help="Contact phone number.")
def create(name: str, address: str, phone: str) -> None:
    """Register a new clinic."""
    dispatch(commands.CreateClinic(name=name, address=address, phone=phone))


@clinic.command(name="list")
def list_() -> None:
    """List every clinic."""
    dispatch(commands.ListClinics())


@clinic.command()
@click.argument("clinic_id")
def show(clinic_id: str) -> None:
    """Show one clinic."""
    dispatch(commands.GetClinic(clinic_id=clinic_id))


@clinic.command()
@click.argument("clinic_id")
@click.option("--name", default=None, help="New clinic name.")
@click.option("--address", default=None, help="New postal address.")
@click.option("--phone", default=None, help="New phone number.")
def update(
    clinic_id: str, name: str | None, address: str | None, phone: str | None
) -> None:
    """Change the given fields of a clinic; others stay as they are."""
    given = {
        field: value
        for field, value in {"name": name, "address": address, "phone": phone}.items()
        if value is not None
    }
    dispatch(commands.UpdateClinic(clinic_id=clinic_id, **given))


@clinic.command()
@click.argument("clinic_id")
def delete(clinic_id: str) -> None:
    """Delete a clinic."""
    dispatch(commands.DeleteClinic(clinic_id=clinic_id))
    success(f"Clinic {clinic_id} deleted.")


@clinic.command()
@click.argument("clinic_id")
def activate(clinic_id: str) -> None:
    """Activate an inactive clinic."""
    dispatch(commands.ActivateClinic(clinic_id=clinic_id))


@clinic.command()
@click.argument("clinic_id")
def deactivate(clinic_id: str) -> None:
    """Deactivate an active clinic."""
    dispatch(commands.DeactivateClinic(clinic_id=clinic_id))

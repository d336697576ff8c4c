"""create clinics, patients and samples tables

Revision ID: 3f1c9a7d2b64
Revises:
Create Date: 2025-11-03 14:12:47.518203

"""

# pylint: disable=invalid-name

from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op

from clinicflow.adapters.db.sa_types import UTCDateTime

# pylint: disable=no-member

# revision identifiers, used by Alembic.
revision: str = "3f1c9a7d2b64"
down_revision: str | Sequence[str] | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def _seq() -> sa.Column:
    return sa.Column(
        "seq",
        sa.Integer(),
        sa.Identity(start=1),
        nullable=False,
        comment="Insertion order.",
    )


def _id() -> sa.Column:
    return sa.Column(
        "id", sa.String(length=64), nullable=False, comment="Aggregate identifier."
    )


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column("created_at", UTCDateTime(), nullable=False),
        sa.Column("updated_at", UTCDateTime(), nullable=False),
    ]


def upgrade() -> None:
    """Upgrade schema."""

    op.create_table(
        "clinics",
        _seq(),
        _id(),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("address", sa.String(length=255), nullable=False),
        sa.Column("phone", sa.Text(), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("seq", name=op.f("pk_clinics")),
        sa.UniqueConstraint("id", name=op.f("uq_clinics_id")),
        comment="Current state of each clinic.",
    )

    op.create_table(
        "patients",
        _seq(),
        _id(),
        sa.Column("first_name", sa.String(length=50), nullable=False),
        sa.Column("last_name", sa.String(length=50), nullable=False),
        sa.Column("email", sa.Text(), nullable=False),
        sa.Column("phone", sa.Text(), nullable=False),
        sa.Column("date_of_birth", sa.Date(), nullable=False),
        sa.Column("clinic_id", sa.String(length=64), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("seq", name=op.f("pk_patients")),
        sa.UniqueConstraint("id", name=op.f("uq_patients_id")),
        comment="Current state of each patient.",
    )
    op.create_index(
        op.f("ix_patients_clinic_id"), "patients", ["clinic_id"], unique=False
    )

    op.create_table(
        "samples",
        _seq(),
        _id(),
        sa.Column("patient_id", sa.String(length=64), nullable=False),
        sa.Column("clinic_id", sa.String(length=64), nullable=False),
        sa.Column("sample_type", sa.Text(), nullable=False),
        sa.Column("status", sa.String(length=20), nullable=False),
        sa.Column("collection_date", UTCDateTime(), nullable=False),
        sa.Column("notes", sa.Text(), server_default="", nullable=False),
        *_timestamps(),
        sa.CheckConstraint(
            "status IN ('PENDING', 'PROCESSING', 'COMPLETED', 'REJECTED')",
            name=op.f("ck_samples_known_status"),
        ),
        sa.PrimaryKeyConstraint("seq", name=op.f("pk_samples")),
        sa.UniqueConstraint("id", name=op.f("uq_samples_id")),
        comment="Current state of each sample.",
    )
    op.create_index(
        op.f("ix_samples_patient_id"), "samples", ["patient_id"], unique=False
    )
    op.create_index(
        op.f("ix_samples_clinic_id"), "samples", ["clinic_id"], unique=False
    )


def downgrade() -> None:
    """Downgrade schema."""

    op.drop_index(op.f("ix_samples_clinic_id"), table_name="samples")
    op.drop_index(op.f("ix_samples_patient_id"), table_name="samples")
    op.drop_table("samples")
    op.drop_index(op.f("ix_patients_clinic_id"), table_name="patients")
    op.drop_table("patients")
    op.drop_table("clinics")

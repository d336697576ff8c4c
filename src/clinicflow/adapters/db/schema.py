"""Relational schema for the clinic, patient and sample aggregates.

One table per aggregate. Each row holds the full current state of one
aggregate; there is no history.

| Constraint / index   | Purpose                                       |
|----------------------|-----------------------------------------------|
| PK(seq)              | insertion order for list queries              |
| UNIQUE(id)           | aggregate identity                            |
| INDEX(clinic_id)     | patients and samples by clinic                |
| INDEX(patient_id)    | samples by patient                            |
| CHECK(status IN ...) | samples only hold known lifecycle states      |

Foreign ids are plain indexed columns, not foreign keys: deleting a clinic
or patient leaves its dependants in place.
"""

from __future__ import annotations

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    Date,
    Identity,
    Index,
    Integer,
    String,
    Table,
    Text,
)

from .metadata import metadata
from .sa_types import UTCDateTime

__all__ = ["clinics", "patients", "samples"]


def _seq_column() -> Column:
    return Column(
        "seq",
        Integer,
        Identity(start=1),
        nullable=False,
        primary_key=True,
        comment="Insertion order.",
    )


def _id_column() -> Column:
    return Column(
        "id",
        String(64),
        nullable=False,
        unique=True,
        comment="Aggregate identifier.",
    )


def _timestamp_columns() -> list[Column]:
    return [
        Column("created_at", UTCDateTime(), nullable=False),
        Column("updated_at", UTCDateTime(), nullable=False),
    ]


clinics = Table(
    "clinics",
    metadata,
    _seq_column(),
    _id_column(),
    Column("name", String(100), nullable=False),
    Column("address", String(255), nullable=False),
    Column("phone", Text(), nullable=False),
    Column("is_active", Boolean(), nullable=False),
    *_timestamp_columns(),
    comment="Current state of each clinic.",
)

patients = Table(
    "patients",
    metadata,
    _seq_column(),
    _id_column(),
    Column("first_name", String(50), nullable=False),
    Column("last_name", String(50), nullable=False),
    Column("email", Text(), nullable=False),
    Column("phone", Text(), nullable=False),
    Column("date_of_birth", Date(), nullable=False),
    Column("clinic_id", String(64), nullable=False),
    Column("is_active", Boolean(), nullable=False),
    *_timestamp_columns(),
    Index(None, "clinic_id"),
    comment="Current state of each patient.",
)

samples = Table(
    "samples",
    metadata,
    _seq_column(),
    _id_column(),
    Column("patient_id", String(64), nullable=False),
    Column("clinic_id", String(64), nullable=False),
    Column("sample_type", Text(), nullable=False),
    Column("status", String(20), nullable=False),
    Column("collection_date", UTCDateTime(), nullable=False),
    Column("notes", Text(), nullable=False, server_default=""),
    *_timestamp_columns(),
    CheckConstraint(
        "status IN ('PENDING', 'PROCESSING', 'COMPLETED', 'REJECTED')",
        name="known_status",
    ),
    Index(None, "patient_id"),
    Index(None, "clinic_id"),
    comment="Current state of each sample.",
)

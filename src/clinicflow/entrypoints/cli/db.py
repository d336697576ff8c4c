"""``clinicflow db``: create and inspect the clinic database.

The commands wrap Alembic over the migrations packaged in
``clinicflow.adapters.db.alembic``. Schema changes only move forward, so
``downgrade`` and ``stamp`` are not offered.

Alembic's own report goes to stdout; notices and prompts go to stderr.
``upgrade`` asks before touching the schema unless ``--force`` or ``--sql``
is given. ``status`` never fails: it reports what it could find out.
"""

from __future__ import annotations

import sys
from enum import Enum
from typing import TYPE_CHECKING

import click
import click_extra as clickx
from alembic import command
from alembic.runtime.migration import MigrationContext
from alembic.script import ScriptDirectory
from sqlalchemy import func, select, text
from sqlalchemy.exc import ArgumentError, OperationalError

from clinicflow import config
from clinicflow.adapters.db.engine import make_engine
from clinicflow.adapters.db.schema import clinics, patients, samples

from .helpers import error, sanitize_url, success, warn
from .helpers.dispatch import (
    CANNOT_CONNECT_MSG,
    INVALID_URL_FORMAT_MSG,
    MISSING_DB_URL_MSG,
)

if TYPE_CHECKING:
    from sqlalchemy.engine import Connection

__all__ = ["db", "CANNOT_CONNECT_MSG", "INVALID_URL_FORMAT_MSG", "MISSING_DB_URL_MSG"]

UPGRADE_SCHEMA_WARNING = (
    "This will create or update the clinic, patient and sample tables.\n"
    "Please ensure you have a backup before proceeding."
)

UPGRADE_SCHEMA_INSTRUCTIONS = "Run 'clinicflow db upgrade' to update the schema."

COUNTED_TABLES = (clinics, patients, samples)


class MigrationStatus(Enum):
    """Where the database schema stands against the packaged head revision."""

    UP_TO_DATE = "up to date"
    OUT_OF_DATE = "out of date"
    UNINITIALIZED = "uninitialized"

    @classmethod
    def of(cls, current: str | None, head: str | None) -> MigrationStatus:
        if current == head:
            return cls.UP_TO_DATE
        if current is None:
            return cls.UNINITIALIZED
        return cls.OUT_OF_DATE


def _reachable_url() -> str:
    """Return ``CLINICFLOW_DB_URL`` once a connection to it has succeeded."""
    try:
        url = config.get_db_url()
    except config.DatabaseUrlNotSetError as e:
        raise click.ClickException(MISSING_DB_URL_MSG) from e
    try:
        engine = make_engine(url)
    except ArgumentError as e:
        raise click.ClickException(INVALID_URL_FORMAT_MSG) from e
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
    except OperationalError as e:
        raise click.ClickException(CANNOT_CONNECT_MSG) from e
    finally:
        engine.dispose()
    return url


def _head_revision() -> str | None:
    heads = ScriptDirectory.from_config(config.build_alembic_config()).get_heads()
    return heads[0] if heads else None


def _record_counts(conn: Connection) -> dict[str, int]:
    return {
        table.name: conn.execute(select(func.count()).select_from(table)).scalar_one()
        for table in COUNTED_TABLES
    }


def _verbose_option(fn):
    return click.option(
        "--verbose",
        "-v",
        "verbose",
        is_flag=True,
        help="Show alembic's more verbose output.",
    )(fn)


@click.group(cls=clickx.ExtraGroup)
def db() -> None:
    """Database management commands."""


@db.command()
@_verbose_option
def current(verbose: bool) -> None:
    """Show current DB revision."""
    cfg = config.build_alembic_config(db_url=_reachable_url(), stdout=sys.stdout)
    command.current(cfg, verbose=verbose)


@db.command()
@_verbose_option
def heads(verbose: bool) -> None:
    """Show available head revisions."""
    command.heads(config.build_alembic_config(stdout=sys.stdout), verbose=verbose)


@db.command()
@_verbose_option
@click.option(
    "--indicate-current",
    "-i",
    "indicate_current",
    is_flag=True,
    help="Indicate the current revision.",
)
def history(verbose: bool, indicate_current: bool) -> None:
    """Show revision history."""
    db_url = _reachable_url() if indicate_current else None
    cfg = config.build_alembic_config(db_url=db_url, stdout=sys.stdout)
    command.history(cfg, verbose=verbose, indicate_current=indicate_current)


@db.command()
@click.option("--sql", is_flag=True, help="Generate SQL without executing.")
@click.option("--force", is_flag=True, help="Upgrade without confirmation.")
def upgrade(sql: bool, force: bool) -> None:
    """Create or update the tables up to the head revision."""
    url = _reachable_url()
    if not force and not sql:
        warn(UPGRADE_SCHEMA_WARNING)
        click.secho(f"db: {click.style(sanitize_url(url), underline=True)}")
        click.confirm("Are you sure you want to proceed?", abort=True)
    command.upgrade(
        config.build_alembic_config(db_url=url, stdout=sys.stdout),
        revision="head",
        sql=sql,
    )
    success("Upgrade complete!")


@db.command()
def status() -> None:
    """Show the connection, schema revision and number of stored records."""
    try:
        url = _reachable_url()
    except click.ClickException as e:
        error("Cannot connect to database")
        click.echo(e.message)
        return

    engine = make_engine(url)
    try:
        with engine.connect() as conn:
            rev = MigrationContext.configure(conn).get_current_revision()
            migration_status = MigrationStatus.of(rev, _head_revision())
            counts = (
                _record_counts(conn)
                if migration_status is MigrationStatus.UP_TO_DATE
                else None
            )
    finally:
        engine.dispose()

    success("Database reachable")
    click.echo(f"Backend : {engine.dialect.name}")
    click.echo(f"URL     : {sanitize_url(url)}")
    schema = migration_status.value if rev is None else f"{rev} ({migration_status.value})"
    click.echo(f"Schema  : {schema}")
    if counts is None:
        warn(UPGRADE_SCHEMA_INSTRUCTIONS)
        return
    click.echo(
        "Records : " + ", ".join(f"{count} {name}" for name, count in counts.items())
    )

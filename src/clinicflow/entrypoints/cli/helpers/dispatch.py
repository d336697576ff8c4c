"""Bridge from CLI commands to the message bus.

Builds the application on demand, hands the command to the message bus and
renders the result as JSON on stdout. Domain errors become a message on
stderr and an exit code chosen by their kind.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

import click
from sqlalchemy.exc import ArgumentError, OperationalError

from clinicflow import config
from clinicflow.bootstrap import AppContainer, bootstrap
from clinicflow.domain.errors import DomainError
from clinicflow.entrypoints.errors import exit_code_for

from .messages import error

if TYPE_CHECKING:
    from clinicflow.service_layer.commands import Command


MISSING_DB_URL_MSG = (
    "CLINICFLOW_DB_URL is not set.\n\n"
    "Set it before running this command, e.g.:\n"
    "  export CLINICFLOW_DB_URL='sqlite:///clinicflow.db'\n"
    "and run 'clinicflow db upgrade' once to create the tables."
)

INVALID_URL_FORMAT_MSG = (
    "The value of CLINICFLOW_DB_URL is not a valid SQLAlchemy database URL."
)

CANNOT_CONNECT_MSG = (
    "CLINICFLOW_DB_URL is set, but the database is not reachable.\n"
    "Please ensure the database is running and the URL is correct."
)

DATABASE_NOT_READY_MSG = (
    "The database at CLINICFLOW_DB_URL could not be used.\n"
    "Make sure it is reachable, then run 'clinicflow db upgrade' to create "
    "or update its tables."
)


def _container(ctx: click.Context) -> AppContainer:
    # Tests may hand in a ready-made container through `obj`.
    if isinstance(ctx.obj, AppContainer):
        return ctx.obj
    try:
        ctx.obj = bootstrap()
    except config.DatabaseUrlNotSetError as e:
        raise click.ClickException(MISSING_DB_URL_MSG) from e
    except ArgumentError as e:
        raise click.ClickException(INVALID_URL_FORMAT_MSG) from e
    except config.InvalidIdFormatError as e:
        raise click.ClickException(str(e)) from e
    return ctx.obj


def _render(result: Any) -> Any:
    if isinstance(result, list):
        return [_render(item) for item in result]
    return result.to_dict()


def dispatch(cmd: Command) -> Any:
    """Run `cmd` through the message bus and print its result as JSON.

    Returns:
        The handler's result.

    Raises:
        click.exceptions.Exit: With the kind's exit code on a domain error.
        click.ClickException: If the settings are missing or invalid, or the
            database cannot be queried.
    """
    ctx = click.get_current_context()
    bus = _container(ctx.find_root()).message_bus
    try:
        result = bus.handle(cmd)
    except DomainError as exc:
        error(str(exc))
        ctx.exit(exit_code_for(exc))
    except OperationalError as e:
        # missing tables and unreachable servers both surface here
        raise click.ClickException(DATABASE_NOT_READY_MSG) from e
    if result is not None:
        click.echo(json.dumps(_render(result), indent=2))
    return result

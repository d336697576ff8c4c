"""CLINICFLOW CLI entry point.

Defines the top-level ``clinicflow`` command (via Click-Extra) and registers
the subcommand groups exposed by the project.

Available groups
- ``clinicflow db``: forward-only database management.
- ``clinicflow clinic``: register and manage clinics.
- ``clinicflow patient``: register and manage patients.
- ``clinicflow sample``: register samples and drive their lifecycle.

Notes
- The CLI version is sourced from `clinicflow.__version__` and displayed
  automatically by Click-Extra (``--version``).
- Results are printed to stdout as JSON; logs and messages go to stderr.

Examples
    $ clinicflow db upgrade
    $ clinicflow clinic create --name "Central Clinic" --address "123 Main St" --phone "+1 555 0100"
"""

import logging
from pathlib import Path

import click
import click_extra as clickx
from platformdirs import user_log_dir

from clinicflow import __version__
from clinicflow.logging import LoggingSettings, configure_logging, log_startup

from .clinics import clinic as clinic_group
from .db import db as db_group
from .helpers import hyperlink
from .helpers.log_level_parser import parse_log_level
from .patients import patient as patient_group
from .samples import sample as sample_group

logger = logging.getLogger(__name__)


HELP = """CLINICFLOW command-line interface.

    CLINICFLOW keeps track of clinics, the patients registered with them and
    the biological samples collected from those patients, from collection
    through processing to completion or rejection.

    The database is read from CLINICFLOW_DB_URL. New records get UUIDv4 ids
    unless CLINICFLOW_ID_FORMAT is set to "ulid".
    """


EPILOG = "\b\n" + "\n".join(
    [
        f"{click.style('See Also:', fg='blue', bold=True, underline=True)}",
        "  Alembic: " + hyperlink("https://alembic.sqlalchemy.org/"),
    ]
)


@clickx.extra_group(
    version=__version__,
    help=HELP,
    params=[
        clickx.ColorOption(show_envvar=True),
        clickx.TimerOption(show_envvar=True),
        clickx.ExtraVersionOption(),
    ],
    epilog=EPILOG,
)
@click.option(
    "--verbose",
    "-v",
    "verbose_count",
    count=True,
    help=(
        "Increase the default WARNING verbosity by one level "
        "for each additional repetition of the option."
    ),
    default=0,
)
@click.option(
    "--quiet",
    "-q",
    "quiet_count",
    count=True,
    help=(
        "Decrease the default WARNING verbosity by one level "
        "for each additional repetition of the option."
    ),
    default=0,
)
@click.option(
    "--debug/--no-debug",
    is_flag=True,
    help="Enable debug mode (enables extra developer diagnostics beyond -vvv).",
    default=False,
)
@click.option(
    "--log-path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Path to log file written by the flight recorder.",
    default=Path(user_log_dir("clinicflow", appauthor=False, ensure_exists=True))
    / "latest.log",
    envvar="CLINICFLOW_LOG_PATH",
    show_default=True,
    show_envvar=True,
)
@click.option(
    "--flight-recorder-capacity",
    type=int,
    default=2000,
    hidden=True,
    envvar="CLINICFLOW_FLIGHT_RECORDER_CAPACITY",
    show_envvar=True,
    help="Capacity of the flight recorder (in number of log records).",
)
@click.option(
    "--flight-recorder/--no-flight-recorder",
    "flight_recorder",
    is_flag=True,
    help=(
        "Enable the in-memory flight recorder. Keeps the last N log records "
        "at DEBUG granularity (unaffected by -v/-q) and writes them to "
        "--log-path when a WARNING/ERROR occurs, or on clean exit if "
        "--force-flush is set."
    ),
    default=True,
    show_envvar=True,
)
@click.option(
    "--force-flush/--no-force-flush",
    "force_flush_flight_recorder",
    is_flag=True,
    help="Write the flight recorder buffer to --log-path on exit.",
    default=False,
    show_default=True,
    show_envvar=True,
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,
    callback=parse_log_level,
    help=(
        "Set MINIMUM LEVEL for specific LOGGERS (NAME=LEVEL). Applies to both "
        "console and flight recorder. Repeatable (e.g. -L sqlalchemy=INFO "
        "-L clinicflow.service_layer=DEBUG)."
    ),
    default=("sqlalchemy=WARNING", "alembic=WARNING"),
    show_default=True,
    show_envvar=True,
)
@clickx.pass_context
def clinicflow(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    log_path: Path,
    flight_recorder_capacity: int,
    flight_recorder: bool,
    force_flush_flight_recorder: bool,
    logger_levels: dict[str, int],
) -> None:
    """CLINICFLOW command-line interface."""
    settings = LoggingSettings(
        verbosity=verbose_count - quiet_count,
        debug=debug,
        color=ctx.color is not False,
        log_path=log_path if flight_recorder else None,
        recorder_capacity=flight_recorder_capacity,
        flush_on_exit=force_flush_flight_recorder,
        logger_levels=logger_levels,
    )
    handlers = configure_logging(settings)
    log_startup(logger, settings, handlers, app_version=__version__)

    ctx.call_on_close(logging.shutdown)


clinicflow.add_command(db_group)
clinicflow.add_command(clinic_group)
clinicflow.add_command(patient_group)
clinicflow.add_command(sample_group)

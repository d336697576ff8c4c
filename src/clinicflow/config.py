"""Environment settings for CLINICFLOW.

| Variable                 | Read by         | Default   |
|--------------------------|-----------------|-----------|
| ``CLINICFLOW_DB_URL``    | `get_db_url`    | required  |
| ``CLINICFLOW_ID_FORMAT`` | `get_id_format` | ``uuid4`` |

The CLI's own options (log path, flight recorder) are read by Click-Extra in
`clinicflow.entrypoints.cli.main`. Alembic is configured in code by
`build_alembic_config`; the project ships no ``alembic.ini``.
"""

import os
import sys
from enum import Enum
from importlib.resources import files
from typing import TextIO

from alembic.config import Config

DB_URL_ENV_VAR = "CLINICFLOW_DB_URL"
ID_FORMAT_ENV_VAR = "CLINICFLOW_ID_FORMAT"

ALEMBIC_URL_KEY = "sqlalchemy.url"  # pragma: no mutate
MIGRATIONS_PACKAGE = "clinicflow.adapters.db.alembic"


class DatabaseUrlNotSetError(Exception):
    """Raised when no database URL is configured."""

    def __init__(self) -> None:
        super().__init__(f"{DB_URL_ENV_VAR} is not set")


class IdFormat(str, Enum):
    """Formats for newly generated aggregate ids."""

    UUID4 = "uuid4"
    ULID = "ulid"


class InvalidIdFormatError(ValueError):
    """Raised when the id format setting names no known format."""

    def __init__(self, value: str) -> None:
        choices = ", ".join(f.value for f in IdFormat)
        super().__init__(
            f"{ID_FORMAT_ENV_VAR}={value!r} is not a known id format (choose from {choices})."
        )
        self.value = value


def get_db_url() -> str:
    """Return the database URL from ``CLINICFLOW_DB_URL``.

    Raises:
        DatabaseUrlNotSetError: If the variable is unset or empty.
    """
    if not (url := os.environ.get(DB_URL_ENV_VAR)):
        raise DatabaseUrlNotSetError
    return url


def get_id_format() -> IdFormat:
    """Return the id format from ``CLINICFLOW_ID_FORMAT``.

    Case and surrounding blanks are ignored; unset or empty means UUIDv4.

    Raises:
        InvalidIdFormatError: If the value is not an `IdFormat`.
    """
    raw = os.environ.get(ID_FORMAT_ENV_VAR, "").strip().lower()
    if not raw:
        return IdFormat.UUID4
    try:
        return IdFormat(raw)
    except ValueError as e:
        raise InvalidIdFormatError(raw) from e


def build_alembic_config(
    db_url: str | None = None, stdout: TextIO = sys.stdout
) -> Config:
    """Build the Alembic config for the packaged clinic migrations.

    Args:
        db_url: Database to migrate. `None` suits commands that only read the
            scripts (``heads``, ``history``).
        stdout: Where Alembic writes its report lines.
    """
    cfg = Config(stdout=stdout)
    if db_url is not None:
        cfg.set_main_option(ALEMBIC_URL_KEY, db_url)
    cfg.set_main_option("script_location", str(files(MIGRATIONS_PACKAGE)))
    return cfg

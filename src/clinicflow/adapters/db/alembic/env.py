"""Alembic environment for the CLINICFLOW tables.

`clinicflow.config.build_alembic_config` builds the Alembic config in code,
so there is no ``alembic.ini`` and no logging section to load. The database
URL comes from that config, or from ``CLINICFLOW_DB_URL`` when Alembic is run
directly.
"""

from alembic import context

import clinicflow.adapters.db.schema  # noqa: F401 # pylint: disable=unused-import
from clinicflow import config
from clinicflow.adapters.db.engine import is_sqlite, make_engine
from clinicflow.adapters.db.metadata import metadata

# pylint: disable=no-member


def _database_url() -> str:
    return context.config.get_main_option(config.ALEMBIC_URL_KEY) or config.get_db_url()


def run_migrations_offline() -> None:
    """Write the migration SQL to Alembic's output (``clinicflow db upgrade --sql``)."""
    context.configure(
        url=_database_url(),
        target_metadata=metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    """Apply the migrations over a connection from `make_engine`."""
    url = _database_url()
    engine = make_engine(url)
    try:
        with engine.connect() as connection:
            context.configure(
                connection=connection,
                target_metadata=metadata,
                # SQLite cannot ALTER constraints in place
                render_as_batch=is_sqlite(url),
            )
            with context.begin_transaction():
                context.run_migrations()
    finally:
        engine.dispose()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()

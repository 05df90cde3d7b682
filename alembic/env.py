"""
Alembic environment configuration.

The database URL always comes from ``settings.DATABASE_URL`` so that
migrations and the running API share one source of truth.  SQLite
databases are migrated in batch mode.
"""

from logging.config import fileConfig

from alembic import context
from sqlalchemy import pool
from sqlmodel import SQLModel, create_engine

from app.core.config import settings
# Register players and test_sessions on SQLModel.metadata
from app.db import base  # noqa: F401

config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = SQLModel.metadata


def _options(url: str) -> dict:
    # SQLite cannot ALTER most columns; batch mode rebuilds the table instead
    return {
        "target_metadata": target_metadata,
        "compare_type": True,
        "render_as_batch": url.startswith("sqlite"),
    }


def run_migrations_offline() -> None:
    """Emit the migration SQL for ``settings.DATABASE_URL`` without connecting."""
    context.configure(url=settings.DATABASE_URL, literal_binds=True, dialect_opts={ "paramstyle": "named" },
                      **_options(settings.DATABASE_URL), )

    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    """Apply migrations over a short-lived connection."""
    connectable = create_engine(settings.DATABASE_URL, poolclass=pool.NullPool)

    with connectable.connect() as connection:
        context.configure(connection=connection, **_options(settings.DATABASE_URL))

        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()

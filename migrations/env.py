# 📄 File: migrations/env.py
# 🧭 Purpose (Layman Explanation):
# Configuration file that tells Alembic how to connect to the database and
# run migrations safely, handling different environments like development and production.
# 🧪 Purpose (Technical Summary):
# Alembic environment configuration for database migrations over asyncpg, with model imports
# for autogenerate and filtering of Supabase-managed schemas and tables.
# 🔗 Dependencies:
# - alembic (migration tool)
# - SQLAlchemy (ORM)
# - asyncpg (PostgreSQL async driver)
# - python-dotenv (environment variables)
# 🔄 Connected Modules / Calls From:
# - alembic CLI commands (upgrade, downgrade, revision)

import asyncio
import os
import sys
from logging.config import fileConfig

from alembic import context
from dotenv import load_dotenv
from sqlalchemy import pool
from sqlalchemy.ext.asyncio import async_engine_from_config

load_dotenv()

sys.path.append(os.path.join(os.path.dirname(__file__), '..'))

from app.shared.infrastructure.database.connection import Base  # noqa: E402

# Model modules register their tables on Base.metadata
from app.modules.user_management.infrastructure.database import models as user_models  # noqa: E402,F401
from app.modules.directory.infrastructure.database import models as directory_models  # noqa: E402,F401
from app.modules.billing.infrastructure.database import models as billing_models  # noqa: E402,F401

config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = Base.metadata

exclude_tables = config.get_main_option("exclude_tables", "")

SUPABASE_SCHEMAS = {'auth', 'storage', 'realtime', 'vault', 'extensions'}


def get_database_url() -> str:
    """
    Database URL from the environment, always using the asyncpg driver.
    """
    database_url = os.getenv("DATABASE_URL")

    if database_url:
        if database_url.startswith("postgresql://"):
            database_url = database_url.replace("postgresql://", "postgresql+asyncpg://", 1)
        return database_url

    db_host = os.getenv("DB_HOST", "localhost")
    db_port = os.getenv("DB_PORT", "5432")
    db_user = os.getenv("DB_USER", "postgres")
    db_password = os.getenv("DB_PASSWORD", "")
    db_name = os.getenv("DB_NAME", "cigarmap_db")

    return f"postgresql+asyncpg://{db_user}:{db_password}@{db_host}:{db_port}/{db_name}"


def include_object(object, name, type_, reflected, compare_to):
    """
    Filter objects to include in migrations.

    Supabase owns its own schemas; ``exclude_tables`` in alembic.ini lists
    any further tables to leave alone.
    """
    if getattr(object, 'schema', None) in SUPABASE_SCHEMAS:
        return False

    if type_ == "table" and name in exclude_tables.split(","):
        return False

    return True


def run_migrations_offline() -> None:
    """
    Run migrations in 'offline' mode, emitting SQL without a connection.
    """
    context.configure(
        url=get_database_url(),
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        compare_type=True,
        include_object=include_object,
    )

    with context.begin_transaction():
        context.run_migrations()


def do_run_migrations(connection) -> None:
    context.configure(
        connection=connection,
        target_metadata=target_metadata,
        compare_type=True,
        include_object=include_object,
    )

    with context.begin_transaction():
        context.run_migrations()


async def run_async_migrations() -> None:
    configuration = config.get_section(config.config_ini_section) or {}
    configuration["sqlalchemy.url"] = get_database_url()

    connectable = async_engine_from_config(
        configuration,
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
    )

    async with connectable.connect() as connection:
        await connection.run_sync(do_run_migrations)

    await connectable.dispose()


def run_migrations_online() -> None:
    asyncio.run(run_async_migrations())


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()

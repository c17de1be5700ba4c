from __future__ import annotations
import asyncio
from logging.config import fileConfig
from sqlalchemy import pool
from sqlalchemy.engine import Connection
from sqlalchemy.ext.asyncio import async_engine_from_config
from alembic import context

# Models-Metadata laden
from app.core.config import settings
from app.database import Base
from app.models import chat_message, geography_topic  # noqa: F401

# Alembic Config
config = context.config
if config.config_file_name:
    fileConfig(config.config_file_name)

# DB-URL: explizit gesetzt (z. B. Tests) oder dieselbe Quelle wie die App (Settings/ENV)
if not config.get_main_option("sqlalchemy.url"):
    config.set_main_option("sqlalchemy.url", settings.database_url)

target_metadata = Base.metadata

def run_migrations_offline() -> None:
    """Offline: SQL-Skript ohne DB-Connection."""
    context.configure(
        url=config.get_main_option("sqlalchemy.url"),
        target_metadata=target_metadata,
        literal_binds=True,
        compare_type=True,
        render_as_batch=True,
    )
    with context.begin_transaction():
        context.run_migrations()

def _do_run_migrations(connection: Connection) -> None:
    context.configure(
        connection=connection,
        target_metadata=target_metadata,
        compare_type=True,
        render_as_batch=True,   # SQLite kann kein ALTER COLUMN
    )
    with context.begin_transaction():
        context.run_migrations()

async def run_migrations_online() -> None:
    """Online: Async-Engine wie die App (aiosqlite / asyncpg)."""
    connectable = async_engine_from_config(
        config.get_section(config.config_ini_section, {}),
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
    )
    async with connectable.connect() as connection:
        await connection.run_sync(_do_run_migrations)
    await connectable.dispose()

if context.is_offline_mode():
    run_migrations_offline()
else:
    asyncio.run(run_migrations_online())

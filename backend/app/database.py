# 📁 backend/app/database.py

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine
from sqlalchemy.orm import sessionmaker, declarative_base
from sqlalchemy.pool import NullPool
# Einzige Quelle für Einstellungen ist app.core.config
from app.core.config import settings

# SQLAlchemy Base
Base = declarative_base()

# Datenbank-URL aus Core-Config ziehen
DATABASE_URL = settings.database_url


def _engine_kwargs(url: str) -> dict:
    kwargs = {"future": True, "echo": settings.debug_sql}
    # SQLite: keine gepoolten Verbindungen über Event-Loops hinweg
    if url.startswith("sqlite"):
        kwargs["poolclass"] = NullPool
    return kwargs


engine = create_async_engine(DATABASE_URL, **_engine_kwargs(DATABASE_URL))

# Session-Factory
AsyncSessionLocal = sessionmaker(
    bind=engine,
    class_=AsyncSession,
    expire_on_commit=False
)

# FastAPI-Dependency für DB-Sessions
async def get_db() -> AsyncSession:
    async with AsyncSessionLocal() as session:
        yield session


async def init_models(bind: AsyncEngine = engine) -> None:
    """Legt alle Tabellen an, die noch nicht existieren (Dev/Tests; Prod nutzt Alembic)."""
    # Modelle registrieren, bevor create_all läuft
    from app.models import chat_message, geography_topic  # noqa: F401

    async with bind.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def drop_models(bind: AsyncEngine = engine) -> None:
    from app.models import chat_message, geography_topic  # noqa: F401

    async with bind.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

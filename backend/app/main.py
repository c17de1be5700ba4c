from __future__ import annotations

import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.v1.api import api_router
from app.core.config import settings
from app.database import init_models

# ---- Access-Log-Filter: /health stummschalten ----
class _HealthSilencer(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        try:
            msg = record.getMessage()
        except Exception:
            return True
        return "/health" not in msg

logging.getLogger("uvicorn.access").addFilter(_HealthSilencer())
# ---------------------------------------------------

log = logging.getLogger("uvicorn.error")


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Tabellen anlegen (Dev/SQLite); in Prod übernimmt Alembic
    if settings.db_create_all:
        await init_models()
        log.info("Database tables ensured.")
    yield


def create_app() -> FastAPI:
    app = FastAPI(
        title="Geography Tutor Backend",
        version=os.getenv("APP_VERSION", "dev"),
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Health für LB/Compose
    @app.get("/health", tags=["health"])
    async def _health() -> dict:
        return {"status": "ok"}

    # API v1
    app.include_router(api_router, prefix="/api/v1")

    return app


app = create_app()

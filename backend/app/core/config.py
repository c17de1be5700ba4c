# backend/app/core/config.py
from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache
import structlog

# Strukturiertes Logging (JSON)
structlog.configure(
    processors=[
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.stdlib.add_log_level,
        structlog.processors.JSONRenderer(),
    ],
    context_class=dict,
    logger_factory=structlog.stdlib.LoggerFactory(),
    wrapper_class=structlog.stdlib.BoundLogger,
    cache_logger_on_first_use=True,
)


class Settings(BaseSettings):
    # Datenbank / SQLAlchemy
    database_url: str = "sqlite+aiosqlite:///./geography.db"
    debug_sql: bool = False
    db_create_all: bool = True

    # OpenAI / LLM / LangChain
    openai_api_key: Optional[str] = None
    openai_base_url: Optional[str] = None
    openai_model: str = "gpt-4.1-nano"
    openai_temperature: float = 0.7
    openai_max_tokens: int = 500
    openai_max_retries: int = 0
    openai_timeout: float = 60.0

    # Auth (externer Identity-Provider)
    auth_jwt_secret: Optional[str] = None
    auth_jwks_url: Optional[str] = None
    auth_issuer: Optional[str] = None
    auth_audience: Optional[str] = None

    # HTTP
    cors_allow_origins: str = "*"

    # Chat-Verlauf
    history_page_size: int = 20

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
    )

    @property
    def cors_origins(self) -> list[str]:
        return [o.strip() for o in self.cors_allow_origins.split(",") if o.strip()]


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()


settings = get_settings()

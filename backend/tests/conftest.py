# backend/tests/conftest.py
from __future__ import annotations

import asyncio
import os
import tempfile

# Settings werden beim Import gecacht → ENV vor dem ersten `import app…` setzen
_DB_DIR = tempfile.mkdtemp(prefix="geotutor-tests-")
TEST_SECRET = "test-shared-secret"

os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_DB_DIR}/test.db"
os.environ["AUTH_JWT_SECRET"] = TEST_SECRET
os.environ["OPENAI_API_KEY"] = "sk-test"
for _key in ("AUTH_JWKS_URL", "AUTH_ISSUER", "AUTH_AUDIENCE", "OPENAI_BASE_URL", "OPENAI_MODEL"):
    os.environ.pop(_key, None)

import pytest  # noqa: E402
from jose import jwt  # noqa: E402
from langchain_core.messages import AIMessage  # noqa: E402

from app.database import AsyncSessionLocal, drop_models, init_models  # noqa: E402


class FakeLLM:
    """Ersetzt ChatOpenAI: liefert eine feste Antwort oder wirft."""

    def __init__(self, answer: str = "Paris is the capital of France.", exc: Exception | None = None) -> None:
        self.answer = answer
        self.exc = exc
        self.calls: list[list] = []

    async def ainvoke(self, messages, **_kwargs) -> AIMessage:
        self.calls.append(list(messages))
        if self.exc is not None:
            raise self.exc
        return AIMessage(content=self.answer)


def make_token(sub: str = "user-1", secret: str = TEST_SECRET, **claims) -> str:
    return jwt.encode({"sub": sub, **claims}, secret, algorithm="HS256")


def make_claims_token(claims: dict, secret: str = TEST_SECRET) -> str:
    return jwt.encode(claims, secret, algorithm="HS256")


def auth_header(sub: str = "user-1") -> dict:
    return {"Authorization": f"Bearer {make_token(sub)}"}


def run(coro):
    return asyncio.run(coro)


async def with_session(fn):
    async with AsyncSessionLocal() as db:
        return await fn(db)


async def _reset_db() -> None:
    await drop_models()
    await init_models()


@pytest.fixture(autouse=True)
def fresh_db():
    run(_reset_db())
    yield


@pytest.fixture
def fake_llm(monkeypatch):
    import app.services.chat.tutor as tutor

    llm = FakeLLM()
    monkeypatch.setattr(tutor, "get_llm", lambda: llm)
    return llm


@pytest.fixture
def client():
    from fastapi.testclient import TestClient
    from app.main import app

    with TestClient(app) as c:
        yield c

# 📁 backend/app/services/chat/tutor.py
"""
Geographie-Tutor: Frage → LLM → gespeicherter Austausch → Antworttext.

Ein LLM-Aufruf pro Frage, kein Retry, keine Idempotenz. Jeder Fehler des
Upstream-Aufrufs (Exception oder leere Antwort) und jeder DB-Fehler beim
Speichern wird zu TutorUnavailableError.
"""

from __future__ import annotations

from typing import Any, Optional

import structlog
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.services.chat.chat_store import append_exchange
from app.services.llm.llm_factory import get_llm
from app.services.prompt.prompting import build_tutor_messages

log = structlog.get_logger(__name__)

GENERIC_FAILURE_MESSAGE = "Failed to get AI response. Please try again."


class TutorUnavailableError(RuntimeError):
    """Upstream-Fehler; die Nachricht ist für Nutzer:innen gedacht."""

    def __init__(self, message: str = GENERIC_FAILURE_MESSAGE) -> None:
        super().__init__(message)
        self.message = message


def _extract_text(resp: Any) -> str:
    content = getattr(resp, "content", resp)
    if isinstance(content, list):
        # Content-Blocks (z. B. [{"type": "text", "text": "..."}])
        parts = []
        for block in content:
            if isinstance(block, dict):
                parts.append(str(block.get("text") or ""))
            else:
                parts.append(str(block))
        content = "".join(parts)
    return content.strip() if isinstance(content, str) else ""


async def ask_geography_question(
    db: AsyncSession,
    owner_id: str,
    question: str,
    topic: Optional[str] = None,
    difficulty: Optional[str] = None,
    *,
    llm: Any = None,
) -> str:
    question = (question or "").strip()
    if not question:
        raise ValueError("question must not be empty")

    messages = build_tutor_messages(question, topic, difficulty)
    try:
        client = llm if llm is not None else get_llm()
        resp = await client.ainvoke(messages)
    except Exception as exc:
        log.exception("tutor.llm_failed", owner_id=owner_id, error=str(exc))
        raise TutorUnavailableError() from exc

    answer = _extract_text(resp)
    if not answer:
        log.warning("tutor.empty_answer", owner_id=owner_id)
        raise TutorUnavailableError()

    try:
        await append_exchange(
            db,
            owner_id=owner_id,
            question=question,
            answer=answer,
            topic=topic,
            difficulty=difficulty,
        )
    except SQLAlchemyError as exc:
        await db.rollback()
        log.exception("tutor.save_failed", owner_id=owner_id, error=str(exc))
        raise TutorUnavailableError() from exc
    log.info("tutor.answered", owner_id=owner_id, topic=topic, difficulty=difficulty, chars=len(answer))
    return answer

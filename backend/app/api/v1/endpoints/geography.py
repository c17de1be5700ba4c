# backend/app/api/v1/endpoints/geography.py
from __future__ import annotations

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.v1.schemas.chat import AskRequest, AskResponse, ChatMessageOut
from app.api.v1.schemas.topic import SeedResponse, TopicOut
from app.database import get_db
from app.services.auth.dependencies import get_current_request_user, get_optional_request_user
from app.services.chat.chat_store import list_recent_exchanges
from app.services.chat.tutor import TutorUnavailableError, ask_geography_question
from app.services.topics.topic_catalog import list_topics, seed_topics

log = logging.getLogger("uvicorn.error")

router = APIRouter(prefix="/geography", tags=["geography"])


# ─────────────────────────────────────────────────────────────
# Fragen & Verlauf
# ─────────────────────────────────────────────────────────────
@router.post("/ask", response_model=AskResponse, summary="Geographie-Frage stellen")
async def ask(
    payload: AskRequest,
    owner_id: str = Depends(get_current_request_user),
    db: AsyncSession = Depends(get_db),
) -> AskResponse:
    try:
        answer = await ask_geography_question(
            db,
            owner_id=owner_id,
            question=payload.question,
            topic=payload.topic,
            difficulty=payload.difficulty,
        )
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
    except TutorUnavailableError as exc:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=exc.message)
    return AskResponse(answer=answer)


@router.get("/history", response_model=List[ChatMessageOut], summary="Letzte Austausche des Users")
async def history(
    owner_id: Optional[str] = Depends(get_optional_request_user),
    db: AsyncSession = Depends(get_db),
) -> List[ChatMessageOut]:
    if not owner_id:
        return []
    rows = await list_recent_exchanges(db, owner_id)
    return [ChatMessageOut.model_validate(r) for r in rows]


# ─────────────────────────────────────────────────────────────
# Themenkatalog
# ─────────────────────────────────────────────────────────────
@router.get("/topics", response_model=List[TopicOut], summary="Alle Themen")
async def topics(db: AsyncSession = Depends(get_db)) -> List[TopicOut]:
    rows = await list_topics(db)
    return [TopicOut.model_validate(r) for r in rows]


@router.post("/topics/seed", response_model=SeedResponse, summary="Themen einmalig anlegen")
async def seed(
    owner_id: str = Depends(get_current_request_user),
    db: AsyncSession = Depends(get_db),
) -> SeedResponse:
    result = await seed_topics(db)
    log.info("topics seed by %s: %s", owner_id, result.message)
    return SeedResponse(seeded=result.seeded, message=result.message)

# 📁 backend/app/services/chat/chat_store.py

from __future__ import annotations

from typing import Optional, Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import settings
from app.models.chat_message import ChatMessage

HISTORY_PAGE_SIZE = settings.history_page_size


async def append_exchange(
    db: AsyncSession,
    owner_id: str,
    question: str,
    answer: str,
    topic: Optional[str] = None,
    difficulty: Optional[str] = None,
) -> ChatMessage:
    message = ChatMessage(
        owner_id=owner_id,
        question=question,
        answer=answer,
        topic=topic,
        difficulty=difficulty,
    )
    db.add(message)
    await db.commit()
    await db.refresh(message)
    return message


async def list_recent_exchanges(
    db: AsyncSession,
    owner_id: str,
    limit: int = HISTORY_PAGE_SIZE,
) -> Sequence[ChatMessage]:
    """Neueste zuerst, nur für den Owner, maximal `limit` Einträge (kein Cursor)."""
    result = await db.execute(
        select(ChatMessage)
        .where(ChatMessage.owner_id == owner_id)
        .order_by(ChatMessage.id.desc())
        .limit(limit)
    )
    return result.scalars().all()

# 📁 backend/app/services/topics/topic_catalog.py
"""
Themenkatalog: feste Seed-Liste plus Lese-/Seed-Zugriff.

Der Seed ist idempotent über einen Existenz-Check. Check und Insert laufen
nicht atomar; zwei gleichzeitige Erst-Seeds können den Satz doppelt anlegen.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Sequence

import structlog
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.geography_topic import DIFFICULTIES, GeographyTopic  # noqa: F401

log = structlog.get_logger(__name__)

SEED_TOPICS: List[Dict[str, Any]] = [
    {
        "name": "World Capitals",
        "description": "Learn about capital cities around the world",
        "difficulty": "easy",
        "sample_questions": [
            "What is the capital of Australia?",
            "Which city is the capital of Canada?",
            "What is the capital of Brazil?",
        ],
    },
    {
        "name": "Physical Geography",
        "description": "Mountains, rivers, deserts, and natural features",
        "difficulty": "medium",
        "sample_questions": [
            "What is the longest river in the world?",
            "Which mountain range separates Europe from Asia?",
            "Where is the Sahara Desert located?",
        ],
    },
    {
        "name": "Countries & Continents",
        "description": "Learn about countries, their locations, and continents",
        "difficulty": "easy",
        "sample_questions": [
            "Which continent is Egypt located in?",
            "What countries border France?",
            "Which is the largest country in South America?",
        ],
    },
    {
        "name": "Climate & Weather",
        "description": "Weather patterns, climate zones, and atmospheric phenomena",
        "difficulty": "hard",
        "sample_questions": [
            "What causes monsoons in South Asia?",
            "Why is the Amazon rainforest important for global climate?",
            "What is the difference between weather and climate?",
        ],
    },
    {
        "name": "Oceans & Seas",
        "description": "Bodies of water, marine geography, and coastal features",
        "difficulty": "medium",
        "sample_questions": [
            "What are the five major oceans?",
            "Which sea is between Europe and Africa?",
            "What is the deepest point in the ocean?",
        ],
    },
]

ALREADY_INITIALIZED = "Topics already initialized"
INITIALIZED = "Topics initialized successfully"


@dataclass(frozen=True)
class SeedResult:
    seeded: bool
    message: str


async def list_topics(db: AsyncSession) -> Sequence[GeographyTopic]:
    result = await db.execute(select(GeographyTopic).order_by(GeographyTopic.id))
    return result.scalars().all()


async def seed_topics(db: AsyncSession) -> SeedResult:
    existing = await db.execute(select(GeographyTopic.id).limit(1))
    if existing.first() is not None:
        log.info("topics.seed.skipped")
        return SeedResult(seeded=False, message=ALREADY_INITIALIZED)

    for topic in SEED_TOPICS:
        db.add(
            GeographyTopic(
                name=topic["name"],
                description=topic["description"],
                difficulty=topic["difficulty"],
                sample_questions=list(topic["sample_questions"]),
            )
        )
    await db.commit()
    log.info("topics.seed.done", count=len(SEED_TOPICS))
    return SeedResult(seeded=True, message=INITIALIZED)

from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Optional
from datetime import datetime

class AskRequest(BaseModel):
    question: str = Field(..., min_length=1, description="Geographie-Frage")
    topic: Optional[str] = None
    difficulty: Optional[str] = None

    @field_validator("question")
    @classmethod
    def _strip_question(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("question must not be empty")
        return v

    @field_validator("topic", "difficulty")
    @classmethod
    def _blank_to_none(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return None
        v = v.strip()
        return v or None

class AskResponse(BaseModel):
    answer: str

# ───────────────────────────────────────────────────────
# Verlauf (GET /history)
# ───────────────────────────────────────────────────────
class ChatMessageOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    question: str
    answer: str
    topic: Optional[str] = None
    difficulty: Optional[str] = None
    created_at: Optional[datetime] = None

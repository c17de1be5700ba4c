from pydantic import BaseModel, ConfigDict
from typing import List, Literal

class TopicOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    description: str
    difficulty: Literal["easy", "medium", "hard"]
    sample_questions: List[str]

class SeedResponse(BaseModel):
    seeded: bool
    message: str

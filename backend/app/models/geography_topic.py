# 📁 backend/app/models/geography_topic.py
from __future__ import annotations
from sqlalchemy import CheckConstraint, Column, Integer, String, Text, JSON
from app.database import Base

# Feste Schwierigkeitsstufen; die DB lehnt andere Labels ab
DIFFICULTIES = ("easy", "medium", "hard")
DIFFICULTY_CHECK = "difficulty IN ('easy', 'medium', 'hard')"

class GeographyTopic(Base):
    __tablename__ = "geography_topics"
    __table_args__ = (
        CheckConstraint(DIFFICULTY_CHECK, name="ck_geography_topics_difficulty"),
    )

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    name = Column(String, nullable=False)
    description = Column(Text, nullable=False)
    difficulty = Column(String, nullable=False)
    sample_questions = Column(JSON, nullable=False, default=list)

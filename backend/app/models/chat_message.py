# 📁 backend/app/models/chat_message.py

from sqlalchemy import Column, Integer, String, Text, DateTime, func
from app.database import Base

class ChatMessage(Base):
    """Ein gespeicherter Austausch (Frage + Antwort). Wird nie verändert oder gelöscht."""

    __tablename__ = "chat_messages"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    owner_id = Column(String, index=True, nullable=False)
    question = Column(Text, nullable=False)
    answer = Column(Text, nullable=False)
    topic = Column(String, nullable=True)
    difficulty = Column(String, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

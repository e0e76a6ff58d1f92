"""Mood log model: a named mood with a 1-10 intensity and an optional note."""
from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from app.db.session import Base


class MoodLog(Base):
    __tablename__ = "mood_logs"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    mood = Column(String(64), nullable=False)
    intensity = Column(Integer, nullable=False, default=5)  # 1-10
    note = Column(Text, nullable=False, default="")
    created_at = Column(DateTime(timezone=True), nullable=False)

    user = relationship("User", back_populates="mood_logs")

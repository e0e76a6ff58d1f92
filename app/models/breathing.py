"""Breathing session model."""
from sqlalchemy import Column, DateTime, ForeignKey, Integer
from sqlalchemy.orm import relationship

from app.db.session import Base


class BreathingSession(Base):
    __tablename__ = "breathing_sessions"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    duration_seconds = Column(Integer, nullable=False)
    cycles_completed = Column(Integer, nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False)

    user = relationship("User", back_populates="breathing_sessions")

"""User model: account plus the persisted daily streak."""
from sqlalchemy import Column, Date, DateTime, Integer, String
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from app.db.session import Base


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    email = Column(String(255), unique=True, nullable=False, index=True)
    hashed_password = Column(String(255), nullable=False)
    name = Column(String(255), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=True)

    # Daily streak (UTC calendar days)
    current_streak = Column(Integer, nullable=False, default=0)
    longest_streak = Column(Integer, nullable=False, default=0)
    last_streak_date = Column(Date, nullable=True)

    assessments = relationship("Assessment", back_populates="user", order_by="Assessment.id")
    breathing_sessions = relationship("BreathingSession", back_populates="user", order_by="BreathingSession.id")
    mood_logs = relationship("MoodLog", back_populates="user", order_by="MoodLog.id")
    journals = relationship("Journal", back_populates="user", order_by="Journal.id")

"""Pydantic schemas for mood logs, journal entries and profile stats."""
from datetime import datetime

from pydantic import BaseModel, Field


class MoodLogInSchema(BaseModel):
    mood: str = Field(min_length=1, max_length=64)
    intensity: int = Field(default=5, ge=1, le=10)
    note: str = ""

    class Config:
        extra = "forbid"


class MoodLogOutSchema(BaseModel):
    id: int
    mood: str
    intensity: int
    note: str
    created_at: datetime

    class Config:
        from_attributes = True


class JournalInSchema(BaseModel):
    title: str = Field(default="Untitled", max_length=255)
    content: str = Field(min_length=1)
    mood: str = Field(default="neutral", max_length=64)

    class Config:
        extra = "forbid"


class JournalUpdateSchema(BaseModel):
    """Partial update; omitted fields keep their stored value."""

    title: str | None = Field(default=None, max_length=255)
    content: str | None = Field(default=None, min_length=1)
    mood: str | None = Field(default=None, max_length=64)

    class Config:
        extra = "forbid"


class JournalOutSchema(BaseModel):
    id: int
    title: str
    content: str
    mood: str
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class ProfileStatsSchema(BaseModel):
    total_assessments: int
    average_score: int
    total_breathing_sessions: int
    total_mood_logs: int
    total_journals: int
    current_streak: int
    longest_streak: int
    effective_streak: int

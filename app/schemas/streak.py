"""Pydantic schemas for streaks and breathing sessions."""
from datetime import date, datetime

from pydantic import BaseModel, Field

from app.schemas.assessment import CONTRACT_VERSION


class StreakOutSchema(BaseModel):
    version: int = CONTRACT_VERSION
    current_streak: int
    longest_streak: int
    last_activity_date: date | None = None
    effective_streak: int
    lapsed: bool


class BreathingSessionInSchema(BaseModel):
    duration_seconds: int = Field(ge=0)
    cycles_completed: int = Field(ge=0)

    class Config:
        extra = "forbid"


class BreathingSessionOutSchema(BaseModel):
    id: int
    duration_seconds: int
    cycles_completed: int
    created_at: datetime

    class Config:
        from_attributes = True

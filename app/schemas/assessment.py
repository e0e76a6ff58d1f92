"""Pydantic schemas for questions and assessments."""
from datetime import datetime

from pydantic import BaseModel, Field

CONTRACT_VERSION = 1


class QuestionOutSchema(BaseModel):
    position: int
    text: str
    direction: str
    options: list[str]

    class Config:
        from_attributes = True


class LevelBandSchema(BaseModel):
    low: int
    high: int
    level: str


class AnswerInSchema(BaseModel):
    question_index: int = Field(ge=0)  # 0-based
    selected_label: str

    class Config:
        extra = "forbid"


class AssessmentSubmitSchema(BaseModel):
    answers: list[AnswerInSchema] = Field(min_length=1)

    class Config:
        extra = "forbid"


class AnswerOutSchema(BaseModel):
    question_index: int
    selected_label: str
    value: int


class AssessmentOutSchema(BaseModel):
    version: int = CONTRACT_VERSION
    id: int
    total: int
    max_score: int
    level: str
    answers: list[AnswerOutSchema]
    recommendations: list[str]
    created_at: datetime

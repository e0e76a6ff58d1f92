from app.schemas.assessment import (
    AnswerInSchema,
    AssessmentOutSchema,
    AssessmentSubmitSchema,
    LevelBandSchema,
    QuestionOutSchema,
)
from app.schemas.auth import LoginSchema, ProfileSchema, RegisterSchema, TokenSchema
from app.schemas.journal import (
    JournalInSchema,
    JournalOutSchema,
    JournalUpdateSchema,
    MoodLogInSchema,
    MoodLogOutSchema,
    ProfileStatsSchema,
)
from app.schemas.streak import BreathingSessionInSchema, BreathingSessionOutSchema, StreakOutSchema

__all__ = [
    "AnswerInSchema",
    "AssessmentOutSchema",
    "AssessmentSubmitSchema",
    "LevelBandSchema",
    "QuestionOutSchema",
    "LoginSchema",
    "ProfileSchema",
    "RegisterSchema",
    "TokenSchema",
    "JournalInSchema",
    "JournalOutSchema",
    "JournalUpdateSchema",
    "MoodLogInSchema",
    "MoodLogOutSchema",
    "ProfileStatsSchema",
    "BreathingSessionInSchema",
    "BreathingSessionOutSchema",
    "StreakOutSchema",
]

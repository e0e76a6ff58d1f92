from app.services.likert import CANONICAL_INSTRUMENT, LIKERT_SCALE, encode_answer
from app.services.scoring import evaluate, level_bands, recommendations_for
from app.services.seeding import load_instrument, seed_questions
from app.services.streaks import StreakState, effective_streak, record_activity, reset_streak

__all__ = [
    "CANONICAL_INSTRUMENT",
    "LIKERT_SCALE",
    "encode_answer",
    "evaluate",
    "level_bands",
    "recommendations_for",
    "load_instrument",
    "seed_questions",
    "StreakState",
    "effective_streak",
    "record_activity",
    "reset_streak",
]

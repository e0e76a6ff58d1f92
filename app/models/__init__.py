from app.models.user import User
from app.models.question import Question
from app.models.assessment import Assessment
from app.models.breathing import BreathingSession
from app.models.mood_log import MoodLog
from app.models.journal import Journal

__all__ = ["User", "Question", "Assessment", "BreathingSession", "MoodLog", "Journal"]

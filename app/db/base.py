"""SQLAlchemy declarative base and model imports for Alembic."""
from app.db.session import Base

# Import all models so Alembic can see them
from app.models.assessment import Assessment  # noqa: F401
from app.models.breathing import BreathingSession  # noqa: F401
from app.models.journal import Journal  # noqa: F401
from app.models.mood_log import MoodLog  # noqa: F401
from app.models.question import Question  # noqa: F401
from app.models.user import User  # noqa: F401

__all__ = ["Base", "User", "Question", "Assessment", "BreathingSession", "MoodLog", "Journal"]

"""Question model: one item of the stress instrument, by 1-based position."""
from sqlalchemy import Column, Integer, String, Text

from app.db.session import Base


class Question(Base):
    __tablename__ = "questions"

    id = Column(Integer, primary_key=True, autoincrement=True)
    position = Column(Integer, unique=True, nullable=False, index=True)
    text = Column(Text, nullable=False)
    direction = Column(String(16), nullable=False)  # forward | reverse | informational

"""Assessment model: one scored submission. Answers and recommendations stored as JSON text."""
from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from app.db.session import Base


class Assessment(Base):
    __tablename__ = "assessments"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    total = Column(Integer, nullable=False)
    max_score = Column(Integer, nullable=False)
    level = Column(String(16), nullable=False)
    # answers: JSON array of {question_index, selected_label, value}
    answers_json = Column(Text, nullable=False)
    recommendations_json = Column(Text, nullable=False, default="[]")
    created_at = Column(DateTime(timezone=True), nullable=False)

    user = relationship("User", back_populates="assessments")

"""Error taxonomy for assessment scoring and streak tracking.

Every error is raised where it is detected; callers never receive a partial
score or a partially updated streak.
"""
from typing import Any


class MindEaseError(Exception):
    """
    Base class for domain errors.

    Attributes:
        message: human-readable message
        detail: optional structured context (offending labels, indexes, dates)
        code: stable machine-readable code
    """

    code = "mindease_error"

    def __init__(
        self,
        message: str,
        detail: str | list[Any] | dict[str, Any] | None = None,
        code: str | None = None,
    ) -> None:
        self.message = message
        self.detail = detail
        if code is not None:
            self.code = code
        super().__init__(message)

    def __str__(self) -> str:
        if self.detail:
            return f"{self.message} - {self.detail}"
        return self.message


class InvalidAnswerLabel(MindEaseError):
    """Selected label is not on the five-point scale."""

    code = "invalid_answer_label"


class IncompleteAssessment(MindEaseError):
    """Answers do not cover every scored question exactly once."""

    code = "incomplete_assessment"


class InvalidStreakState(MindEaseError):
    """Stored streak state cannot happen (negative counts, future date...)."""

    code = "invalid_streak_state"


class InvalidQuestionSet(MindEaseError):
    """Question positions are not a clean partition of 1..n."""

    code = "invalid_question_set"

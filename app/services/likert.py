"""Five-point Likert scale and per-question scoring direction."""
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Sequence

from app.core.errors import InvalidAnswerLabel, InvalidQuestionSet

# Index in this tuple is the forward value (Never=0 .. Very Often=4)
LIKERT_SCALE = ("Never", "Almost Never", "Sometimes", "Fairly Often", "Very Often")
MAX_VALUE = len(LIKERT_SCALE) - 1


class ScoringDirection(str, Enum):
    FORWARD = "forward"
    REVERSE = "reverse"
    INFORMATIONAL = "informational"


@dataclass(frozen=True)
class QuestionDefinition:
    position: int  # 1-based
    text: str
    direction: ScoringDirection

    @property
    def is_scored(self) -> bool:
        return self.direction is not ScoringDirection.INFORMATIONAL


def encode_answer(direction: ScoringDirection, label: str) -> int:
    """Return the 0..4 contribution of `label` for a question scored in `direction`.

    Informational questions contribute 0, but the label must still be on the scale.
    """
    try:
        forward_value = LIKERT_SCALE.index(label)
    except ValueError:
        raise InvalidAnswerLabel(
            f"Unknown answer label {label!r}",
            detail={"label": label, "allowed": list(LIKERT_SCALE)},
        ) from None

    if direction is ScoringDirection.FORWARD:
        return forward_value
    if direction is ScoringDirection.REVERSE:
        return MAX_VALUE - forward_value
    return 0


def build_instrument(
    forward: Iterable[int],
    reverse: Iterable[int],
    informational: Iterable[int] = (),
    texts: Sequence[str] | None = None,
) -> list[QuestionDefinition]:
    """Build an ordered question list from three disjoint position sets covering 1..n."""
    by_direction = {
        ScoringDirection.FORWARD: set(forward),
        ScoringDirection.REVERSE: set(reverse),
        ScoringDirection.INFORMATIONAL: set(informational),
    }
    directions: dict[int, ScoringDirection] = {}
    for direction, positions in by_direction.items():
        for pos in positions:
            if pos in directions:
                raise InvalidQuestionSet(
                    f"Question {pos} is both {directions[pos].value} and {direction.value}",
                    detail={"position": pos},
                )
            directions[pos] = direction

    n = len(directions)
    if n == 0:
        raise InvalidQuestionSet("Instrument has no questions")
    if set(directions) != set(range(1, n + 1)):
        raise InvalidQuestionSet(
            "Question positions must be exactly 1..n",
            detail={"positions": sorted(directions)},
        )
    if texts is not None and len(texts) != n:
        raise InvalidQuestionSet(
            f"Expected {n} question texts, got {len(texts)}",
        )

    questions = [
        QuestionDefinition(
            position=pos,
            text=texts[pos - 1] if texts is not None else f"Question {pos}",
            direction=directions[pos],
        )
        for pos in range(1, n + 1)
    ]
    check_bands_reachable(questions)
    return questions


def max_score(questions: Sequence[QuestionDefinition]) -> int:
    return MAX_VALUE * sum(1 for q in questions if q.is_scored)


def band_range(questions: Sequence[QuestionDefinition]) -> int:
    """Nominal 0..N range the level bands are laid over (4 per question on the instrument)."""
    return MAX_VALUE * len(questions)


def check_bands_reachable(questions: Sequence[QuestionDefinition]) -> None:
    """Reject instruments whose top quartile lies above the highest reachable total.

    Bands span the nominal range, so scored questions must be more than three
    quarters of the instrument for "High" to be reachable.
    """
    top = max_score(questions)
    if top == 0:
        raise InvalidQuestionSet("Instrument has no scored questions")
    if 4 * top <= 3 * band_range(questions):
        raise InvalidQuestionSet(
            "Too many informational questions: top stress level is unreachable",
            detail={"scored": top // MAX_VALUE, "questions": len(questions)},
        )


CANONICAL_QUESTION_TEXTS = [
    "How often have you been upset because of something that happened unexpectedly?",
    "How often have you felt that you were unable to control the important things in your life?",
    "How often have you felt nervous and stressed?",
    "How often have you felt confident about your ability to handle your personal problems?",
    "How often have you felt that things were going your way?",
    "How often have you found that you could not cope with all the things that you had to do?",
    "How often have you been able to control irritations in your life?",
    "How often have you felt that you were on top of things?",
    "How often have you been angered because of things that were outside of your control?",
    "How often have you felt difficulties were piling up so high that you could not overcome them?",
    "How often have you found yourself thinking about things that you have to accomplish?",
    "How often have you been able to control the way you spend your time?",
]

CANONICAL_INSTRUMENT = build_instrument(
    forward={1, 2, 3, 6, 9, 10},
    reverse={4, 5, 7, 8, 12},
    informational={11},
    texts=CANONICAL_QUESTION_TEXTS,
)

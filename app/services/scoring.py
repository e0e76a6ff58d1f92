"""Stress score and level computation; recommendations per level."""
from collections import Counter
from dataclasses import dataclass
from typing import Iterable, Sequence

from app.core.errors import IncompleteAssessment
from app.services.likert import (
    MAX_VALUE,
    QuestionDefinition,
    band_range,
    check_bands_reachable,
    encode_answer,
    max_score,
)

# Quartiles of the band range; upper bound of each band is inclusive
LEVEL_QUARTILES = [
    (1, "Low"),
    (2, "Mild"),
    (3, "Moderate"),
    (4, "High"),
]
LEVELS = [label for _, label in LEVEL_QUARTILES]

RECOMMENDATIONS = {
    "Low": [
        "Keep up healthy habits",
        "Maintain regular exercise and sleep",
        "Continue your current wellness routine",
    ],
    "Mild": [
        "Try short breathing exercises",
        "Take short breaks during work",
        "Write down what is on your mind in a journal",
    ],
    "Moderate": [
        "Practice mindfulness or guided breathing daily",
        "Spend time on relaxing activities",
        "Consider speaking to a friend or counselor",
        "Set boundaries and prioritize self-care",
    ],
    "High": [
        "Reach out to a mental health professional",
        "Create a structured plan with a clinician",
        "Practice relaxation techniques daily",
        "Contact a mental health crisis line if necessary",
    ],
}


@dataclass(frozen=True)
class AssessmentAnswer:
    question_index: int  # 0-based
    selected_label: str
    value: int


@dataclass(frozen=True)
class StressScore:
    total: int
    level: str
    max_score: int


def compute_level(total: int, range_max: int) -> str:
    """Return level label for a total on a 0..range_max scale."""
    for quartile, label in LEVEL_QUARTILES:
        if 4 * total <= quartile * range_max:
            return label
    return LEVELS[-1]


def level_bands(questions: Sequence[QuestionDefinition]) -> list[tuple[int, int, str]]:
    """Contiguous (low, high, level) bands covering 0..band_range."""
    range_max = band_range(questions)
    bands = []
    low = 0
    for quartile, label in LEVEL_QUARTILES:
        high = (quartile * range_max) // 4
        if high >= low:
            bands.append((low, high, label))
            low = high + 1
    return bands


def recommendations_for(level: str) -> list[str]:
    return list(RECOMMENDATIONS.get(level, []))


def encode_answers(
    questions: Sequence[QuestionDefinition],
    raw_answers: Iterable[tuple[int, str]],
) -> list[AssessmentAnswer]:
    """Encode (question_index, selected_label) pairs; index is 0-based."""
    encoded = []
    for index, label in raw_answers:
        if not 0 <= index < len(questions):
            raise IncompleteAssessment(
                f"Answer for unknown question index {index}",
                detail={"question_index": index, "question_count": len(questions)},
            )
        value = encode_answer(questions[index].direction, label)
        encoded.append(AssessmentAnswer(question_index=index, selected_label=label, value=value))
    return encoded


def score_answers(
    questions: Sequence[QuestionDefinition],
    answers: Sequence[AssessmentAnswer],
) -> StressScore:
    """Sum encoded answers and classify the total.

    Every scored question must be answered exactly once; informational ones at most once.
    """
    check_bands_reachable(questions)
    top = max_score(questions)

    counts = Counter(a.question_index for a in answers)
    unknown = sorted(i for i in counts if not 0 <= i < len(questions))
    duplicates = sorted(i for i, n in counts.items() if n > 1)
    missing = [
        i for i, q in enumerate(questions) if q.is_scored and counts.get(i, 0) == 0
    ]
    if unknown or duplicates or missing:
        raise IncompleteAssessment(
            "Answers must cover every scored question exactly once",
            detail={"missing": missing, "duplicates": duplicates, "unknown": unknown},
        )

    total = 0
    for a in answers:
        if not 0 <= a.value <= MAX_VALUE:
            raise IncompleteAssessment(
                f"Encoded value {a.value} out of range",
                detail={"question_index": a.question_index, "value": a.value},
            )
        if questions[a.question_index].is_scored:
            total += a.value

    return StressScore(
        total=total,
        level=compute_level(total, band_range(questions)),
        max_score=top,
    )


def evaluate(
    questions: Sequence[QuestionDefinition],
    raw_answers: Iterable[tuple[int, str]],
) -> tuple[StressScore, list[AssessmentAnswer]]:
    """Encode and score in one step; returns the score and the encoded answers."""
    answers = encode_answers(questions, raw_answers)
    return score_answers(questions, answers), answers

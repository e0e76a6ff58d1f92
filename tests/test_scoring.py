import pytest

from app.core.errors import IncompleteAssessment, InvalidAnswerLabel, InvalidQuestionSet
from app.services.likert import (
    CANONICAL_INSTRUMENT,
    LIKERT_SCALE,
    QuestionDefinition,
    ScoringDirection,
    build_instrument,
    max_score,
)
from app.services.scoring import (
    LEVELS,
    AssessmentAnswer,
    band_range,
    compute_level,
    encode_answers,
    evaluate,
    level_bands,
    recommendations_for,
    score_answers,
)


def _answers_for(questions, forward_label, reverse_label, info_label="Sometimes"):
    labels = {
        ScoringDirection.FORWARD: forward_label,
        ScoringDirection.REVERSE: reverse_label,
        ScoringDirection.INFORMATIONAL: info_label,
    }
    return [(i, labels[q.direction]) for i, q in enumerate(questions)]


def test_lowest_stress_answers_score_zero():
    score, _ = evaluate(CANONICAL_INSTRUMENT, _answers_for(CANONICAL_INSTRUMENT, "Never", "Very Often", "Very Often"))
    assert score.total == 0
    assert score.level == "Low"


def test_highest_stress_answers_reach_max_and_high():
    score, answers = evaluate(CANONICAL_INSTRUMENT, _answers_for(CANONICAL_INSTRUMENT, "Very Often", "Never"))
    # question 11 is informational, so 11 scored questions x 4
    assert score.total == 44
    assert score.max_score == 44
    assert score.level == "High"
    assert answers[10].value == 0


def test_informational_answer_does_not_change_total():
    low, _ = evaluate(CANONICAL_INSTRUMENT, _answers_for(CANONICAL_INSTRUMENT, "Sometimes", "Sometimes", "Never"))
    high, _ = evaluate(CANONICAL_INSTRUMENT, _answers_for(CANONICAL_INSTRUMENT, "Sometimes", "Sometimes", "Very Often"))
    assert low == high
    assert low.total == 22


def test_informational_answer_may_be_omitted():
    raw = [pair for pair in _answers_for(CANONICAL_INSTRUMENT, "Fairly Often", "Almost Never") if pair[0] != 10]
    score, _ = evaluate(CANONICAL_INSTRUMENT, raw)
    assert score.total == 33
    assert score.level == "Moderate"


def test_answer_order_does_not_matter():
    raw = _answers_for(CANONICAL_INSTRUMENT, "Fairly Often", "Sometimes")
    assert evaluate(CANONICAL_INSTRUMENT, raw)[0] == evaluate(CANONICAL_INSTRUMENT, list(reversed(raw)))[0]


@pytest.mark.parametrize(
    "total,level",
    [(0, "Low"), (12, "Low"), (13, "Mild"), (24, "Mild"), (25, "Moderate"), (36, "Moderate"), (37, "High"), (48, "High")],
)
def test_canonical_cutoffs(total, level):
    assert band_range(CANONICAL_INSTRUMENT) == 48
    assert compute_level(total, 48) == level


def test_canonical_bands():
    assert level_bands(CANONICAL_INSTRUMENT) == [
        (0, 12, "Low"),
        (13, 24, "Mild"),
        (25, 36, "Moderate"),
        (37, 48, "High"),
    ]


@pytest.mark.parametrize("n", range(1, 21))
def test_bands_are_contiguous_and_cover_range(n):
    questions = build_instrument(forward=range(1, n + 1), reverse=())
    bands = level_bands(questions)
    assert bands[0][0] == 0
    assert bands[-1][1] == band_range(questions)
    for (_, prev_high, _), (low, high, _) in zip(bands, bands[1:]):
        assert low == prev_high + 1
        assert low <= high
    for total in range(0, max_score(questions) + 1):
        matching = [level for low, high, level in bands if low <= total <= high]
        assert matching == [compute_level(total, band_range(questions))]


def test_level_is_monotonic():
    levels = [LEVELS.index(compute_level(t, 48)) for t in range(0, 49)]
    assert levels == sorted(levels)


def test_small_instrument_scales_proportionally():
    questions = build_instrument(forward={1, 2}, reverse={3, 4})
    raw = [(0, "Fairly Often"), (1, "Fairly Often"), (2, "Almost Never"), (3, "Almost Never")]
    score, _ = evaluate(questions, raw)
    # 12 of 16: exactly the 75% boundary
    assert score.total == 12
    assert score.level == "Moderate"


def test_missing_scored_answer_is_incomplete():
    raw = _answers_for(CANONICAL_INSTRUMENT, "Never", "Never")[1:]
    with pytest.raises(IncompleteAssessment) as exc:
        evaluate(CANONICAL_INSTRUMENT, raw)
    assert exc.value.detail["missing"] == [0]


def test_duplicate_answer_is_incomplete():
    raw = _answers_for(CANONICAL_INSTRUMENT, "Never", "Never") + [(3, "Sometimes")]
    with pytest.raises(IncompleteAssessment) as exc:
        evaluate(CANONICAL_INSTRUMENT, raw)
    assert exc.value.detail["duplicates"] == [3]


def test_duplicate_informational_answer_is_incomplete():
    raw = _answers_for(CANONICAL_INSTRUMENT, "Never", "Never") + [(10, "Never")]
    with pytest.raises(IncompleteAssessment):
        evaluate(CANONICAL_INSTRUMENT, raw)


def test_unknown_question_index_is_incomplete():
    raw = _answers_for(CANONICAL_INSTRUMENT, "Never", "Never") + [(12, "Never")]
    with pytest.raises(IncompleteAssessment):
        evaluate(CANONICAL_INSTRUMENT, raw)


def test_invalid_label_fails_whole_assessment():
    raw = _answers_for(CANONICAL_INSTRUMENT, "Never", "Never")
    raw[4] = (4, "Always")
    with pytest.raises(InvalidAnswerLabel):
        evaluate(CANONICAL_INSTRUMENT, raw)


def test_score_answers_rejects_out_of_range_value():
    answers = encode_answers(CANONICAL_INSTRUMENT, _answers_for(CANONICAL_INSTRUMENT, "Never", "Never"))
    answers[0] = AssessmentAnswer(question_index=0, selected_label="Never", value=9)
    with pytest.raises(IncompleteAssessment):
        score_answers(CANONICAL_INSTRUMENT, answers)


def test_instrument_without_scored_questions():
    with pytest.raises(InvalidQuestionSet):
        build_instrument(forward=(), reverse=(), informational={1})

    questions = [QuestionDefinition(position=1, text="Any notes?", direction=ScoringDirection.INFORMATIONAL)]
    with pytest.raises(InvalidQuestionSet):
        evaluate(questions, [(0, "Never")])


@pytest.mark.parametrize(
    "forward,informational",
    [({1}, {2, 3, 4}), ({1, 2}, {3, 4}), ({1, 2, 3}, {4})],
)
def test_instrument_with_unreachable_top_level_is_rejected(forward, informational):
    with pytest.raises(InvalidQuestionSet) as exc:
        build_instrument(forward=forward, reverse=(), informational=informational)
    assert exc.value.code == "invalid_question_set"


def test_score_answers_checks_hand_built_instruments():
    questions = [
        QuestionDefinition(position=1, text="q1", direction=ScoringDirection.FORWARD),
        QuestionDefinition(position=2, text="q2", direction=ScoringDirection.INFORMATIONAL),
        QuestionDefinition(position=3, text="q3", direction=ScoringDirection.INFORMATIONAL),
        QuestionDefinition(position=4, text="q4", direction=ScoringDirection.INFORMATIONAL),
    ]
    with pytest.raises(InvalidQuestionSet):
        evaluate(questions, [(0, "Very Often")])


@pytest.mark.parametrize("scored,informational", [(4, 1), (7, 2), (11, 1), (10, 3)])
def test_every_level_reachable_with_informational_questions(scored, informational):
    questions = build_instrument(
        forward=range(1, scored + 1),
        reverse=(),
        informational=range(scored + 1, scored + informational + 1),
    )
    bands = level_bands(questions)
    reached = {compute_level(total, band_range(questions)) for total in range(0, max_score(questions) + 1)}
    assert reached == set(LEVELS)
    for low, high, _ in bands:
        assert low <= max_score(questions)

    top, _ = evaluate(questions, [(i, "Very Often") for i in range(scored)])
    assert top.total == max_score(questions)
    assert top.level == "High"
    bottom, _ = evaluate(questions, [(i, "Never") for i in range(scored)])
    assert bottom.level == "Low"


def test_evaluate_is_deterministic():
    raw = _answers_for(CANONICAL_INSTRUMENT, "Sometimes", "Fairly Often")
    assert evaluate(CANONICAL_INSTRUMENT, raw) == evaluate(CANONICAL_INSTRUMENT, raw)


@pytest.mark.parametrize("level", LEVELS)
def test_every_level_has_recommendations(level):
    assert recommendations_for(level)


def test_recommendations_are_copies():
    recs = recommendations_for("Low")
    recs.append("mutated")
    assert "mutated" not in recommendations_for("Low")


def test_scale_has_five_points():
    assert LIKERT_SCALE == ("Never", "Almost Never", "Sometimes", "Fairly Often", "Very Often")

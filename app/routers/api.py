"""API routes: JSON for questions and assessments."""
import json
import logging

from fastapi import APIRouter, HTTPException
from fastapi.responses import Response
from sqlalchemy import select

from app.models.assessment import Assessment
from app.routers.deps import CurrentClock, CurrentUser, DbSession
from app.schemas.assessment import (
    AnswerOutSchema,
    AssessmentOutSchema,
    AssessmentSubmitSchema,
    LevelBandSchema,
    QuestionOutSchema,
)
from app.services.activity import record_user_activity
from app.services.export import assessments_to_csv
from app.services.likert import LIKERT_SCALE
from app.services.scoring import evaluate, level_bands, recommendations_for
from app.services.seeding import load_instrument

router = APIRouter(prefix="/api", tags=["api"])
logger = logging.getLogger(__name__)


def _assessment_out(assessment: Assessment) -> AssessmentOutSchema:
    return AssessmentOutSchema(
        id=assessment.id,
        total=assessment.total,
        max_score=assessment.max_score,
        level=assessment.level,
        answers=[AnswerOutSchema(**a) for a in json.loads(assessment.answers_json)],
        recommendations=json.loads(assessment.recommendations_json or "[]"),
        created_at=assessment.created_at,
    )


async def _user_assessments(db: DbSession, user_id: int) -> list[Assessment]:
    result = await db.execute(
        select(Assessment)
        .where(Assessment.user_id == user_id)
        .order_by(Assessment.created_at.desc(), Assessment.id.desc())
    )
    return list(result.scalars().all())


@router.get("/questions", response_model=list[QuestionOutSchema])
async def list_questions(db: DbSession):
    """Active instrument in position order."""
    questions = await load_instrument(db)
    return [
        QuestionOutSchema(position=q.position, text=q.text, direction=q.direction.value, options=list(LIKERT_SCALE))
        for q in questions
    ]


@router.get("/questions/bands", response_model=list[LevelBandSchema])
async def list_level_bands(db: DbSession):
    questions = await load_instrument(db)
    return [LevelBandSchema(low=low, high=high, level=level) for low, high, level in level_bands(questions)]


@router.post("/assessments", response_model=AssessmentOutSchema, status_code=201)
async def submit_assessment(
    body: AssessmentSubmitSchema,
    db: DbSession,
    current_user: CurrentUser,
    clock: CurrentClock,
):
    """Score answers, store the assessment and count it as today's activity."""
    questions = await load_instrument(db)
    score, answers = evaluate(questions, [(a.question_index, a.selected_label) for a in body.answers])

    assessment = Assessment(
        user_id=current_user.id,
        total=score.total,
        max_score=score.max_score,
        level=score.level,
        answers_json=json.dumps(
            [
                {"question_index": a.question_index, "selected_label": a.selected_label, "value": a.value}
                for a in sorted(answers, key=lambda a: a.question_index)
            ]
        ),
        recommendations_json=json.dumps(recommendations_for(score.level)),
        created_at=clock.now(),
    )
    db.add(assessment)
    await record_user_activity(db, current_user.id, clock.today())
    await db.commit()
    logger.info("Stored assessment %s for user %s: %d (%s)", assessment.id, current_user.id, score.total, score.level)

    return _assessment_out(assessment)


@router.get("/assessments", response_model=list[AssessmentOutSchema])
async def assessment_history(db: DbSession, current_user: CurrentUser):
    """User's assessments, newest first."""
    return [_assessment_out(a) for a in await _user_assessments(db, current_user.id)]


@router.get("/assessments/latest", response_model=AssessmentOutSchema)
async def latest_assessment(db: DbSession, current_user: CurrentUser):
    assessments = await _user_assessments(db, current_user.id)
    if not assessments:
        raise HTTPException(status_code=404, detail="No assessments found")
    return _assessment_out(assessments[0])


@router.get("/assessments/export")
async def export_assessments(db: DbSession, current_user: CurrentUser):
    """CSV download of the user's assessments."""
    questions = await load_instrument(db)
    assessments = await _user_assessments(db, current_user.id)
    body = assessments_to_csv(assessments, len(questions), user_name=current_user.name or current_user.email)
    return Response(
        content=body,
        media_type="text/csv",
        headers={"Content-Disposition": 'attachment; filename="assessments_export.csv"'},
    )

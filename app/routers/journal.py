"""API routes: mood logs, journal entries and profile stats."""
import logging

from fastapi import APIRouter, HTTPException
from sqlalchemy import func, select

from app.models.assessment import Assessment
from app.models.breathing import BreathingSession
from app.models.journal import Journal
from app.models.mood_log import MoodLog
from app.routers.deps import CurrentClock, CurrentUser, DbSession
from app.schemas.journal import (
    JournalInSchema,
    JournalOutSchema,
    JournalUpdateSchema,
    MoodLogInSchema,
    MoodLogOutSchema,
    ProfileStatsSchema,
)
from app.services.activity import record_user_activity, streak_state_of
from app.services.streaks import effective_streak

router = APIRouter(prefix="/api", tags=["journal"])
logger = logging.getLogger(__name__)


async def _owned(db, model, record_id: int, user_id: int, not_found: str):
    """Load a record owned by user_id; 404 when missing or owned by someone else."""
    record = await db.get(model, record_id)
    if record is None or record.user_id != user_id:
        raise HTTPException(status_code=404, detail=not_found)
    return record


async def _count(db, model, user_id: int) -> int:
    result = await db.execute(select(func.count(model.id)).where(model.user_id == user_id))
    return result.scalar_one()


@router.post("/mood-logs", response_model=MoodLogOutSchema, status_code=201)
async def create_mood_log(
    body: MoodLogInSchema,
    db: DbSession,
    current_user: CurrentUser,
    clock: CurrentClock,
):
    mood_log = MoodLog(
        user_id=current_user.id,
        mood=body.mood,
        intensity=body.intensity,
        note=body.note,
        created_at=clock.now(),
    )
    db.add(mood_log)
    await record_user_activity(db, current_user.id, clock.today())
    await db.commit()
    logger.info("Stored mood log %s for user %s", mood_log.id, current_user.id)
    return mood_log


@router.get("/mood-logs", response_model=list[MoodLogOutSchema])
async def list_mood_logs(db: DbSession, current_user: CurrentUser):
    result = await db.execute(
        select(MoodLog)
        .where(MoodLog.user_id == current_user.id)
        .order_by(MoodLog.created_at.desc(), MoodLog.id.desc())
    )
    return result.scalars().all()


@router.delete("/mood-logs/{mood_log_id}")
async def delete_mood_log(mood_log_id: int, db: DbSession, current_user: CurrentUser):
    mood_log = await _owned(db, MoodLog, mood_log_id, current_user.id, "Mood log not found")
    await db.delete(mood_log)
    await db.commit()
    logger.info("Deleted mood log %s for user %s", mood_log_id, current_user.id)
    return {"message": "Mood log deleted"}


@router.post("/journals", response_model=JournalOutSchema, status_code=201)
async def create_journal(
    body: JournalInSchema,
    db: DbSession,
    current_user: CurrentUser,
    clock: CurrentClock,
):
    now = clock.now()
    journal = Journal(
        user_id=current_user.id,
        title=body.title or "Untitled",
        content=body.content,
        mood=body.mood or "neutral",
        created_at=now,
        updated_at=now,
    )
    db.add(journal)
    await record_user_activity(db, current_user.id, clock.today())
    await db.commit()
    logger.info("Stored journal entry %s for user %s", journal.id, current_user.id)
    return journal


@router.get("/journals", response_model=list[JournalOutSchema])
async def list_journals(db: DbSession, current_user: CurrentUser):
    result = await db.execute(
        select(Journal)
        .where(Journal.user_id == current_user.id)
        .order_by(Journal.created_at.desc(), Journal.id.desc())
    )
    return result.scalars().all()


@router.put("/journals/{journal_id}", response_model=JournalOutSchema)
async def update_journal(
    journal_id: int,
    body: JournalUpdateSchema,
    db: DbSession,
    current_user: CurrentUser,
    clock: CurrentClock,
):
    """Update the given fields only. Editing is not a new activity for the streak."""
    journal = await _owned(db, Journal, journal_id, current_user.id, "Journal entry not found")
    for field, value in body.model_dump(exclude_none=True).items():
        setattr(journal, field, value)
    journal.updated_at = clock.now()
    await db.commit()
    return journal


@router.delete("/journals/{journal_id}")
async def delete_journal(journal_id: int, db: DbSession, current_user: CurrentUser):
    journal = await _owned(db, Journal, journal_id, current_user.id, "Journal entry not found")
    await db.delete(journal)
    await db.commit()
    logger.info("Deleted journal entry %s for user %s", journal_id, current_user.id)
    return {"message": "Journal entry deleted"}


@router.get("/profile/stats", response_model=ProfileStatsSchema)
async def profile_stats(db: DbSession, current_user: CurrentUser, clock: CurrentClock):
    """Activity counts, mean assessment total (rounded half up) and streak."""
    result = await db.execute(
        select(func.count(Assessment.id), func.avg(Assessment.total))
        .where(Assessment.user_id == current_user.id)
    )
    total_assessments, mean_total = result.one()
    state = streak_state_of(current_user)
    return ProfileStatsSchema(
        total_assessments=total_assessments,
        average_score=int(float(mean_total) + 0.5) if mean_total is not None else 0,
        total_breathing_sessions=await _count(db, BreathingSession, current_user.id),
        total_mood_logs=await _count(db, MoodLog, current_user.id),
        total_journals=await _count(db, Journal, current_user.id),
        current_streak=state.current_streak,
        longest_streak=state.longest_streak,
        effective_streak=effective_streak(state, clock.today()),
    )

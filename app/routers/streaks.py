"""API routes: daily streak and breathing sessions."""
import logging

from fastapi import APIRouter
from sqlalchemy import select

from app.models.breathing import BreathingSession
from app.routers.deps import CurrentClock, CurrentUser, DbSession
from app.schemas.streak import BreathingSessionInSchema, BreathingSessionOutSchema, StreakOutSchema
from app.services.activity import record_user_activity, reset_user_streak, streak_state_of
from app.services.clock import Clock
from app.services.streaks import StreakState, effective_streak, is_lapsed

router = APIRouter(prefix="/api", tags=["streaks"])
logger = logging.getLogger(__name__)


def _streak_out(state: StreakState, clock: Clock) -> StreakOutSchema:
    today = clock.today()
    return StreakOutSchema(
        current_streak=state.current_streak,
        longest_streak=state.longest_streak,
        last_activity_date=state.last_activity_date,
        effective_streak=effective_streak(state, today),
        lapsed=is_lapsed(state, today),
    )


@router.get("/streaks", response_model=StreakOutSchema)
async def get_streak(current_user: CurrentUser, clock: CurrentClock):
    """Stored streak plus what to display today. Read-only."""
    return _streak_out(streak_state_of(current_user), clock)


@router.post("/streaks/increment", response_model=StreakOutSchema)
async def increment_streak(db: DbSession, current_user: CurrentUser, clock: CurrentClock):
    state = await record_user_activity(db, current_user.id, clock.today())
    await db.commit()
    return _streak_out(state, clock)


@router.post("/streaks/reset", response_model=StreakOutSchema)
async def reset_streak(db: DbSession, current_user: CurrentUser, clock: CurrentClock):
    state = await reset_user_streak(db, current_user.id)
    await db.commit()
    return _streak_out(state, clock)


@router.post("/breathing/sessions", response_model=BreathingSessionOutSchema, status_code=201)
async def create_breathing_session(
    body: BreathingSessionInSchema,
    db: DbSession,
    current_user: CurrentUser,
    clock: CurrentClock,
):
    """Store a finished breathing session and count it as today's activity."""
    session = BreathingSession(
        user_id=current_user.id,
        duration_seconds=body.duration_seconds,
        cycles_completed=body.cycles_completed,
        created_at=clock.now(),
    )
    db.add(session)
    await record_user_activity(db, current_user.id, clock.today())
    await db.commit()
    logger.info("Stored breathing session %s for user %s", session.id, current_user.id)
    return session


@router.get("/breathing/sessions", response_model=list[BreathingSessionOutSchema])
async def list_breathing_sessions(db: DbSession, current_user: CurrentUser):
    result = await db.execute(
        select(BreathingSession)
        .where(BreathingSession.user_id == current_user.id)
        .order_by(BreathingSession.created_at.desc(), BreathingSession.id.desc())
    )
    return result.scalars().all()

"""Load, update and store a user's streak inside the caller's transaction."""
import logging
from datetime import date

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.user import User
from app.services.streaks import StreakState, record_activity, reset_streak

logger = logging.getLogger(__name__)


def streak_state_of(user: User) -> StreakState:
    return StreakState(
        current_streak=user.current_streak or 0,
        longest_streak=user.longest_streak or 0,
        last_activity_date=user.last_streak_date,
    )


def _store(user: User, state: StreakState) -> None:
    user.current_streak = state.current_streak
    user.longest_streak = state.longest_streak
    user.last_streak_date = state.last_activity_date


async def _lock_user(db: AsyncSession, user_id: int) -> User:
    # FOR UPDATE is ignored by SQLite; serializes concurrent updates on PostgreSQL
    result = await db.execute(
        select(User).where(User.id == user_id).with_for_update().execution_options(populate_existing=True)
    )
    return result.scalar_one()


async def record_user_activity(db: AsyncSession, user_id: int, today: date) -> StreakState:
    """Apply one activity for `today`. Does not commit."""
    user = await _lock_user(db, user_id)
    before = streak_state_of(user)
    after = record_activity(before, today)
    if after != before:
        _store(user, after)
        logger.info(
            "Streak for user %s: %d -> %d (longest %d)",
            user_id, before.current_streak, after.current_streak, after.longest_streak,
        )
    return after


async def reset_user_streak(db: AsyncSession, user_id: int) -> StreakState:
    """Persistable reset of the current streak. Does not commit."""
    user = await _lock_user(db, user_id)
    after = reset_streak(streak_state_of(user))
    _store(user, after)
    logger.info("Streak for user %s reset", user_id)
    return after

"""Daily activity streak: consecutive UTC calendar days with at least one activity.

All functions take a state and return a new one; persisting it is up to the caller.
"""
from dataclasses import dataclass, replace
from datetime import date, timedelta

from app.core.errors import InvalidStreakState

ONE_DAY = timedelta(days=1)


@dataclass(frozen=True)
class StreakState:
    current_streak: int = 0
    longest_streak: int = 0
    last_activity_date: date | None = None


def validate_state(state: StreakState, today: date) -> None:
    if state.current_streak < 0 or state.longest_streak < 0:
        raise InvalidStreakState(
            "Streak counters must be non-negative",
            detail={"current_streak": state.current_streak, "longest_streak": state.longest_streak},
        )
    if state.current_streak > state.longest_streak:
        raise InvalidStreakState(
            "Current streak exceeds longest streak",
            detail={"current_streak": state.current_streak, "longest_streak": state.longest_streak},
        )
    if state.last_activity_date is not None and state.last_activity_date > today:
        raise InvalidStreakState(
            "Last activity date is in the future",
            detail={"last_activity_date": state.last_activity_date.isoformat(), "today": today.isoformat()},
        )


def record_activity(state: StreakState, today: date) -> StreakState:
    """Return the state after one activity on `today`."""
    validate_state(state, today)
    last = state.last_activity_date

    if last == today:
        return state

    if last is not None and last == today - ONE_DAY:
        current = state.current_streak + 1
    else:
        # first activity ever, or lapsed
        current = 1

    return StreakState(
        current_streak=current,
        longest_streak=max(state.longest_streak, current),
        last_activity_date=today,
    )


def is_lapsed(state: StreakState, today: date) -> bool:
    validate_state(state, today)
    last = state.last_activity_date
    return last is None or last < today - ONE_DAY


def effective_streak(state: StreakState, today: date) -> int:
    """Streak to display on `today`; 0 once a whole day was missed. Does not reset anything."""
    if is_lapsed(state, today):
        return 0
    return state.current_streak


def reset_streak(state: StreakState) -> StreakState:
    """Explicit reset: current streak to 0, forget the last date, keep the record."""
    return replace(state, current_streak=0, last_activity_date=None)

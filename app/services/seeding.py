"""Seed the canonical stress instrument and load the active one from the database."""
import logging

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.errors import InvalidQuestionSet
from app.models.question import Question
from app.services.likert import CANONICAL_INSTRUMENT, QuestionDefinition, ScoringDirection, build_instrument

logger = logging.getLogger(__name__)


async def seed_questions(db: AsyncSession) -> int:
    """Insert the canonical instrument if the questions table is empty. Returns rows added."""
    count = await db.scalar(select(func.count(Question.id)))
    if count:
        return 0

    for q in CANONICAL_INSTRUMENT:
        db.add(Question(position=q.position, text=q.text, direction=q.direction.value))
    await db.commit()
    logger.info("Seeded %d assessment questions", len(CANONICAL_INSTRUMENT))
    return len(CANONICAL_INSTRUMENT)


async def load_instrument(db: AsyncSession) -> list[QuestionDefinition]:
    """Active instrument in position order; the canonical one when the table is empty."""
    result = await db.execute(select(Question).order_by(Question.position.asc()))
    rows = result.scalars().all()
    if not rows:
        return list(CANONICAL_INSTRUMENT)

    positions: dict[ScoringDirection, set[int]] = {d: set() for d in ScoringDirection}
    for r in rows:
        try:
            direction = ScoringDirection(r.direction)
        except ValueError:
            raise InvalidQuestionSet(
                f"Question {r.position} has unknown direction {r.direction!r}",
                detail={"position": r.position, "direction": r.direction},
            ) from None
        positions[direction].add(r.position)

    return build_instrument(
        forward=positions[ScoringDirection.FORWARD],
        reverse=positions[ScoringDirection.REVERSE],
        informational=positions[ScoringDirection.INFORMATIONAL],
        texts=[r.text for r in rows],
    )

"""Rating ledger: at most one 1-5 rating per user per recipe.

Averages and counts are computed from the rows on every read and are
never stored.
"""
import enum
import logging

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import InvalidArgumentError, NotFoundError
from app.models import Rating, Recipe

logger = logging.getLogger(__name__)

MIN_RATING = 1
MAX_RATING = 5


class RatingOutcome(str, enum.Enum):
    CREATED = "created"
    UPDATED = "updated"


async def submit_rating(db: AsyncSession, *, user_id: int, recipe_id: int, value: int | None) -> RatingOutcome:
    if value is None or isinstance(value, bool) or not isinstance(value, int) or not MIN_RATING <= value <= MAX_RATING:
        raise InvalidArgumentError("Rating must be an integer between 1 and 5.")

    if await db.scalar(select(Recipe.id).where(Recipe.id == recipe_id)) is None:
        raise NotFoundError("Recipe not found.")

    query = select(Rating).where(Rating.user_id == user_id, Rating.recipe_id == recipe_id)
    existing = (await db.execute(query)).scalar_one_or_none()

    if existing is not None:
        existing.rating = value
        existing.updated_at = func.now()
        outcome = RatingOutcome.UPDATED
    else:
        db.add(Rating(user_id=user_id, recipe_id=recipe_id, rating=value))
        outcome = RatingOutcome.CREATED

    await db.commit()
    logger.info(f"Rating {value} {outcome.value} for recipe {recipe_id} by user {user_id}")
    return outcome


async def get_rating_summary(db: AsyncSession, *, recipe_id: int) -> tuple[float, int]:
    """
    Returns (average, count); the average is 0 when nobody rated yet
    """
    query = select(func.avg(Rating.rating), func.count(Rating.id)).where(Rating.recipe_id == recipe_id)
    average, count = (await db.execute(query)).one()
    return float(average or 0), int(count or 0)


async def get_user_rating(db: AsyncSession, *, user_id: int, recipe_id: int) -> int:
    query = select(Rating.rating).where(Rating.user_id == user_id, Rating.recipe_id == recipe_id)
    return await db.scalar(query) or 0

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import NotFoundError
from app.models import Favorite, Recipe

logger = logging.getLogger(__name__)


async def is_favorited(db: AsyncSession, *, user_id: int, recipe_id: int) -> bool:
    query = select(Favorite.user_id).where(Favorite.user_id == user_id, Favorite.recipe_id == recipe_id)
    return await db.scalar(query) is not None


async def toggle_favorite(db: AsyncSession, *, user_id: int, recipe_id: int) -> bool:
    """
    Flip the favorite state of a recipe for a user and return the new state
    """
    if await db.scalar(select(Recipe.id).where(Recipe.id == recipe_id)) is None:
        raise NotFoundError("Recipe not found.")

    existing = await db.get(Favorite, (user_id, recipe_id))
    if existing is not None:
        await db.delete(existing)
        favorited = False
    else:
        db.add(Favorite(user_id=user_id, recipe_id=recipe_id))
        favorited = True

    await db.commit()
    logger.info(f"User {user_id} {'favorited' if favorited else 'unfavorited'} recipe {recipe_id}")
    return favorited

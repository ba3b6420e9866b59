import logging

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert as postgresql_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import settings
from app.core.exceptions import InvalidArgumentError, UnexpectedError
from app.core.text_utils import normalize_ingredient_name
from app.models import Ingredient

logger = logging.getLogger(__name__)

_UPSERT_INSERTS = {
    "postgresql": postgresql_insert,
    "sqlite": sqlite_insert,
}


async def get_ingredient_by_name(db: AsyncSession, *, name: str) -> Ingredient | None:
    query = select(Ingredient).where(Ingredient.name == normalize_ingredient_name(name))
    result = await db.execute(query)
    return result.scalar_one_or_none()


async def get_or_create_ingredient(db: AsyncSession, *, name: str) -> Ingredient:
    """
    Case-insensitive get-or-create on the master ingredient list.

    Concurrent callers may race on the insert: the unique index on the
    name decides the winner, the loser's insert is a no-op and it picks
    up the winner's row on the next lookup.
    """
    normalized = normalize_ingredient_name(name)
    if not normalized:
        raise InvalidArgumentError("Ingredient name is required.")

    dialect = db.bind.dialect.name
    if dialect not in _UPSERT_INSERTS:
        raise UnexpectedError(f"Ingredient upsert is not supported on the '{dialect}' backend.")
    insert = _UPSERT_INSERTS[dialect]

    for _ in range(settings.INGREDIENT_CREATE_ATTEMPTS):
        ingredient = await get_ingredient_by_name(db, name=normalized)
        if ingredient is not None:
            return ingredient

        stmt = insert(Ingredient).values(name=normalized).on_conflict_do_nothing(
            index_elements=[Ingredient.name]
        )
        result = await db.execute(stmt)
        if result.rowcount:
            logger.info(f"Created ingredient '{normalized}'")

    ingredient = await get_ingredient_by_name(db, name=normalized)
    if ingredient is None:
        raise UnexpectedError(f"Could not resolve ingredient '{normalized}'.")
    return ingredient

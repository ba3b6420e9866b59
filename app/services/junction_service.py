"""Recipe-to-taxonomy link handling.

Every taxonomy kind has its own junction table of (recipe_id, <kind>_id)
pairs. The functions here take a ``TaxonomyKind`` and never touch the
recipe row itself. Writes run inside the caller's transaction; nothing
here commits.
"""
from typing import Iterable

from sqlalchemy import Table, delete, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.text_utils import unique_ids
from app.models import TaxonomyKind, user_dietary_restrictions


async def _insert_links(db: AsyncSession, table: Table, owner_column: str, target_column: str, owner_id: int, ids: Iterable[int]) -> None:
    rows = [{owner_column: owner_id, target_column: item_id} for item_id in unique_ids(ids)]
    if not rows:
        return
    await db.execute(insert(table), rows)


async def _replace_links(db: AsyncSession, table: Table, owner_column: str, target_column: str, owner_id: int, ids: Iterable[int]) -> None:
    await db.execute(delete(table).where(table.c[owner_column] == owner_id))
    await _insert_links(db, table, owner_column, target_column, owner_id, ids)


async def add_links(db: AsyncSession, *, recipe_id: int, kind: TaxonomyKind, ids: Iterable[int]) -> None:
    """
    Insert-only variant used on creation. An id missing from the taxonomy
    table surfaces as an IntegrityError when the statement runs
    """
    await _insert_links(db, kind.link_table, "recipe_id", kind.column_name, recipe_id, ids)


async def replace_links(db: AsyncSession, *, recipe_id: int, kind: TaxonomyKind, ids: Iterable[int]) -> None:
    await _replace_links(db, kind.link_table, "recipe_id", kind.column_name, recipe_id, ids)


async def fetch_linked_ids(db: AsyncSession, *, recipe_id: int, kind: TaxonomyKind) -> set[int]:
    table = kind.link_table
    result = await db.execute(
        select(table.c[kind.column_name]).where(table.c.recipe_id == recipe_id)
    )
    return set(result.scalars().all())


async def replace_user_dietary_restrictions(db: AsyncSession, *, user_id: int, ids: Iterable[int]) -> None:
    await _replace_links(
        db, user_dietary_restrictions, "user_id", "dietary_restriction_id", user_id, ids
    )


async def fetch_user_dietary_restriction_ids(db: AsyncSession, *, user_id: int) -> set[int]:
    table = user_dietary_restrictions
    result = await db.execute(
        select(table.c.dietary_restriction_id).where(table.c.user_id == user_id)
    )
    return set(result.scalars().all())

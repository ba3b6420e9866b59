"""Filtered, paginated recipe listings.

Filters are applied by one function, ``_apply_filters``, to a bare
``SELECT recipes.id`` statement. The distinct id set it produces feeds
both the count and the page query, so the two can never disagree about
which recipes match.
"""
import math
from typing import Mapping, Sequence

from sqlalchemy import Select, func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import settings
from app.core.exceptions import InvalidArgumentError
from app.models import Favorite, Recipe, TaxonomyKind, User
from app.schemas import RecipePage, RecipeSummary


def _summary_columns():
    return (*Recipe.__table__.columns, User.username)


def _apply_filters(
    query: Select,
    *,
    search: str | None,
    filters: Mapping[TaxonomyKind, Sequence[int]],
) -> Select:
    if search:
        term = search.lower()
        query = query.where(
            or_(
                func.lower(Recipe.title).contains(term, autoescape=True),
                func.lower(Recipe.description).contains(term, autoescape=True),
            )
        )

    # AND across kinds, OR within one kind's ids
    for kind, ids in filters.items():
        if not ids:
            continue
        link = kind.link_table
        query = query.join(link, link.c.recipe_id == Recipe.id).where(
            link.c[kind.column_name].in_(list(ids))
        )

    return query


def matching_recipe_ids(
    *,
    search: str | None = None,
    filters: Mapping[TaxonomyKind, Sequence[int]] | None = None,
) -> Select:
    return _apply_filters(select(Recipe.id), search=search, filters=filters or {}).distinct()


async def list_recipes(
    db: AsyncSession,
    *,
    search: str | None = None,
    filters: Mapping[TaxonomyKind, Sequence[int]] | None = None,
    page: int = 1,
    page_size: int | None = None,
) -> RecipePage:
    if page_size is None:
        page_size = settings.DEFAULT_PAGE_SIZE
    if page < 1:
        raise InvalidArgumentError("Page must be a positive integer.")
    if page_size < 1:
        raise InvalidArgumentError("Limit must be a positive integer.")
    page_size = min(page_size, settings.MAX_PAGE_SIZE)

    matching = matching_recipe_ids(search=search, filters=filters).subquery()

    total_items = await db.scalar(select(func.count()).select_from(matching)) or 0

    query = (
        select(*_summary_columns())
        .outerjoin(User, Recipe.user_id == User.id)
        .where(Recipe.id.in_(select(matching.c.id)))
        .order_by(Recipe.created_at.desc(), Recipe.id.desc())
        .offset((page - 1) * page_size)
        .limit(page_size)
    )
    result = await db.execute(query)
    recipes = [RecipeSummary.model_validate(dict(row)) for row in result.mappings().all()]

    return RecipePage(
        recipes=recipes,
        current_page=page,
        per_page=page_size,
        total_items=total_items,
        total_pages=math.ceil(total_items / page_size),
        has_more=page * page_size < total_items,
    )


async def list_favorite_recipes(db: AsyncSession, *, user_id: int) -> list[RecipeSummary]:
    query = (
        select(*_summary_columns())
        .join(Favorite, Favorite.recipe_id == Recipe.id)
        .outerjoin(User, Recipe.user_id == User.id)
        .where(Favorite.user_id == user_id)
        .order_by(Favorite.created_at.desc(), Recipe.id.desc())
    )
    result = await db.execute(query)
    return [RecipeSummary.model_validate(dict(row)) for row in result.mappings().all()]

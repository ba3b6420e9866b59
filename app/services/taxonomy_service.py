from typing import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models import DifficultyLevel, TaxonomyKind
from app.schemas import FilterOption, FilterOptions


async def list_all(db: AsyncSession, *, kind: TaxonomyKind) -> Sequence[FilterOption]:
    model = kind.model
    if kind is TaxonomyKind.DIFFICULTY_LEVEL:
        query = select(DifficultyLevel).order_by(DifficultyLevel.level_order, DifficultyLevel.id)
    else:
        query = select(model).order_by(model.name)

    result = await db.execute(query)
    return [FilterOption.model_validate(row) for row in result.scalars().all()]


async def list_filter_options(db: AsyncSession) -> FilterOptions:
    options = {}
    for kind in TaxonomyKind:
        options[kind.model.__tablename__] = await list_all(db, kind=kind)
    return FilterOptions(**options)

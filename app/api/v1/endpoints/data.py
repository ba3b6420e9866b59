from typing import Any

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_db
from app.schemas import FilterOptions
from app.services import taxonomy_service

router = APIRouter()


@router.get("/filters", response_model=FilterOptions, response_model_exclude_none=True)
async def read_filter_options(*, db: AsyncSession = Depends(get_db)) -> Any:
    return await taxonomy_service.list_filter_options(db)

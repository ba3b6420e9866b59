from typing import Any

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_current_user, get_db
from app.core.security import CurrentUser
from app.schemas import UserProfile, UserProfileUpdate
from app.services import user_service

router = APIRouter()


@router.get("/profile", response_model=UserProfile)
async def read_profile(
    *, db: AsyncSession = Depends(get_db), user: CurrentUser = Depends(get_current_user)
) -> Any:
    return await user_service.get_profile(db, user_id=user.id)


@router.put("/profile", response_model=UserProfile)
async def update_profile(
    *,
    db: AsyncSession = Depends(get_db),
    user: CurrentUser = Depends(get_current_user),
    profile_in: UserProfileUpdate,
) -> Any:
    return await user_service.update_profile(db, user_id=user.id, profile_in=profile_in)

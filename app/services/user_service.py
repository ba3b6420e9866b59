import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import ConstraintViolationError, InvalidArgumentError, NotFoundError
from app.models import DietaryRestriction, User, user_dietary_restrictions
from app.schemas import FilterOption, UserProfile, UserProfileUpdate
from app.services import junction_service

logger = logging.getLogger(__name__)

PROFILE_FIELDS = ("first_name", "last_name", "bio", "profile_picture_url")


async def get_user_by_id(db: AsyncSession, *, user_id: int) -> User | None:
    result = await db.execute(select(User).where(User.id == user_id))
    return result.scalar_one_or_none()


async def get_profile(db: AsyncSession, *, user_id: int) -> UserProfile:
    user = await get_user_by_id(db, user_id=user_id)
    if user is None:
        raise NotFoundError("User not found.")

    query = (
        select(DietaryRestriction)
        .join(
            user_dietary_restrictions,
            user_dietary_restrictions.c.dietary_restriction_id == DietaryRestriction.id,
        )
        .where(user_dietary_restrictions.c.user_id == user_id)
        .order_by(DietaryRestriction.name)
    )
    restrictions = (await db.execute(query)).scalars().all()

    profile = UserProfile.model_validate(user)
    profile.dietary_restrictions = [FilterOption.model_validate(r) for r in restrictions]
    return profile


async def _is_taken(db: AsyncSession, column, value: str, user_id: int) -> bool:
    query = select(User.id).where(column == value, User.id != user_id)
    return await db.scalar(query) is not None


async def update_profile(db: AsyncSession, *, user_id: int, profile_in: UserProfileUpdate) -> UserProfile:
    if not profile_in.username or not profile_in.email:
        raise InvalidArgumentError("Username and email are required.")

    user = await get_user_by_id(db, user_id=user_id)
    if user is None:
        raise NotFoundError("User not found.")

    if await _is_taken(db, User.username, profile_in.username, user_id):
        raise InvalidArgumentError("Username already taken.")
    if await _is_taken(db, User.email, profile_in.email, user_id):
        raise InvalidArgumentError("Email already in use.")

    try:
        user.username = profile_in.username
        user.email = profile_in.email
        for field in PROFILE_FIELDS:
            setattr(user, field, getattr(profile_in, field) or None)
        await db.flush()

        if profile_in.dietary_restriction_ids is not None:
            await junction_service.replace_user_dietary_restrictions(
                db, user_id=user_id, ids=profile_in.dietary_restriction_ids
            )

        await db.commit()
    except IntegrityError as ex:
        await db.rollback()
        logger.error(f"Updating profile of user {user_id} failed: {ex.orig}")
        raise ConstraintViolationError("Server error updating user profile.") from ex

    logger.info(f"Profile of user {user_id} updated")
    return await get_profile(db, user_id=user_id)

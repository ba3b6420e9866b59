from app.core.exceptions import ForbiddenError
from app.core.security import CurrentUser


def can_mutate(user: CurrentUser | None, owner_id: int | None) -> bool:
    """
    Owner-or-admin check for updating or deleting a recipe
    """
    if user is None:
        return False
    return user.id == owner_id or user.is_admin


def ensure_can_mutate(user: CurrentUser | None, owner_id: int | None, action: str) -> None:
    if not can_mutate(user, owner_id):
        raise ForbiddenError(f"Not authorized to {action} this recipe.")


def ensure_admin(user: CurrentUser | None) -> None:
    # recipe creation is admin-only; ownership cannot apply before the recipe exists
    if user is None or not user.is_admin:
        raise ForbiddenError("Not authorized as an admin.")

import logging
from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from app.core.exceptions import UnauthorizedError
from app.core.permissions import ensure_admin
from app.core.security import CurrentUser, TokenError, decode_access_token
from app.db.session import get_db

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False, description="JWT Bearer token authentication")

__all__ = ["get_db", "get_optional_user", "get_current_user", "get_current_admin"]


async def get_optional_user(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)],
) -> CurrentUser | None:
    """
    Principal for endpoints that work anonymously; a bad token is ignored
    """
    if credentials is None:
        return None
    try:
        return decode_access_token(credentials.credentials)
    except TokenError as ex:
        logger.warning(f"Optional token verification failed: {ex}")
        return None


async def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)],
) -> CurrentUser:
    if credentials is None:
        raise UnauthorizedError("Not authorized, no token.")
    try:
        return decode_access_token(credentials.credentials)
    except TokenError as ex:
        logger.warning(f"Token verification failed: {ex}")
        raise UnauthorizedError("Not authorized, token failed.") from ex


async def get_current_admin(
    user: Annotated[CurrentUser, Depends(get_current_user)],
) -> CurrentUser:
    ensure_admin(user)
    return user

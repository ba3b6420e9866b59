"""JWT access tokens.

Login and registration live outside this service; they only need to mint
tokens carrying ``sub`` (user id), ``username`` and ``is_admin``. This
module decodes them into a principal and can mint them for seeding and
tests.
"""

from datetime import datetime, timedelta, timezone
from typing import Any

from jose import jwt
from jose.exceptions import JWTError
from pydantic import BaseModel

from app.core.config import settings


class CurrentUser(BaseModel):
    """The acting principal of a request."""

    id: int
    username: str = ""
    is_admin: bool = False


class TokenError(Exception):
    """Raised when a token cannot be decoded or has expired."""


def create_access_token(
    user_id: int,
    *,
    username: str = "",
    is_admin: bool = False,
    expires_delta: timedelta | None = None,
) -> str:
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.JWT_ACCESS_TOKEN_EXPIRE_MINUTES)

    now = datetime.now(timezone.utc)
    payload: dict[str, Any] = {
        "sub": str(user_id),
        "username": username,
        "is_admin": is_admin,
        "iat": now,
        "exp": now + expires_delta,
    }
    return jwt.encode(payload, settings.JWT_SECRET_KEY, algorithm=settings.JWT_ALGORITHM)


def decode_access_token(token: str) -> CurrentUser:
    try:
        payload = jwt.decode(token, settings.JWT_SECRET_KEY, algorithms=[settings.JWT_ALGORITHM])
        return CurrentUser(
            id=int(payload["sub"]),
            username=payload.get("username", ""),
            is_admin=bool(payload.get("is_admin", False)),
        )
    except (JWTError, KeyError, ValueError) as ex:
        raise TokenError(str(ex)) from ex

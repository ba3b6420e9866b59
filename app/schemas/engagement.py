from typing import Literal

from pydantic import BaseModel


class RatingIn(BaseModel):
    rating: int | None = None


class RatingResult(BaseModel):
    status: Literal["created", "updated"]
    rating: int


class FavoriteToggle(BaseModel):
    favorited: bool


class Message(BaseModel):
    detail: str

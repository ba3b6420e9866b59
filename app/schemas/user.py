from pydantic import BaseModel, ConfigDict, Field

from .taxonomy import FilterOption


class UserProfile(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    email: str
    is_admin: bool = False
    first_name: str | None = None
    last_name: str | None = None
    bio: str | None = None
    profile_picture_url: str | None = None
    dietary_restrictions: list[FilterOption] = Field(default_factory=list)


class UserProfileUpdate(BaseModel):
    username: str | None = Field(None, max_length=50)
    email: str | None = Field(None, max_length=255)
    first_name: str | None = Field(None, max_length=255)
    last_name: str | None = Field(None, max_length=255)
    bio: str | None = None
    profile_picture_url: str | None = Field(None, max_length=255)
    # None leaves the stored preferences untouched
    dietary_restriction_ids: list[int] | None = None

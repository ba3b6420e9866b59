from pydantic import BaseModel, Field


class RecipeBase(BaseModel):
    title: str | None = Field(None, max_length=255)
    description: str | None = None
    instructions: str | None = Field(None, max_length=50000)
    prep_time_minutes: int | None = Field(None, ge=0)
    cook_time_minutes: int | None = Field(None, ge=0)
    servings: int | None = Field(None, ge=1)
    image_url: str | None = Field(None, max_length=255)
    video_url: str | None = Field(None, max_length=255)

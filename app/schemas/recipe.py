from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .ingredient import Ingredient


class RecipeSummary(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    username: str | None = None
    title: str
    description: str | None = None
    instructions: str | None = None
    prep_time_minutes: int | None = None
    cook_time_minutes: int | None = None
    servings: int | None = None
    image_url: str | None = None
    video_url: str | None = None
    created_at: datetime
    updated_at: datetime


class RecipeDetail(RecipeSummary):
    ingredients: list[Ingredient] = Field(default_factory=list)

    category_ids: list[int] = Field(default_factory=list)
    cuisine_ids: list[int] = Field(default_factory=list)
    season_ids: list[int] = Field(default_factory=list)
    dietary_restriction_ids: list[int] = Field(default_factory=list)
    cooking_method_ids: list[int] = Field(default_factory=list)
    main_ingredient_ids: list[int] = Field(default_factory=list)
    difficulty_level_ids: list[int] = Field(default_factory=list)
    occasion_ids: list[int] = Field(default_factory=list)

    # unrounded mean, 0 when there are no ratings
    average_rating: float = 0.0
    total_ratings: int = 0
    current_user_rating: int = 0
    is_favorited: bool = False


class RecipePage(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    recipes: list[RecipeSummary]
    current_page: int
    per_page: int
    total_items: int
    total_pages: int
    has_more: bool


class RecipeCreated(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    recipe_id: int
    title: str
    owner: int

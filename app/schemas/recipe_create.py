from pydantic import Field

from .recipe_base import RecipeBase
from .ingredient import IngredientIn


class RecipeCreate(RecipeBase):
    ingredients: list[IngredientIn] = Field(default_factory=list, max_length=100)

    category_ids: list[int] = Field(default_factory=list)
    cuisine_ids: list[int] = Field(default_factory=list)
    season_ids: list[int] = Field(default_factory=list)
    dietary_restriction_ids: list[int] = Field(default_factory=list)
    cooking_method_ids: list[int] = Field(default_factory=list)
    main_ingredient_ids: list[int] = Field(default_factory=list)
    difficulty_level_ids: list[int] = Field(default_factory=list)
    occasion_ids: list[int] = Field(default_factory=list)

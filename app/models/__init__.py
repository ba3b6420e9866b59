from .base import Base
from .user import User, user_dietary_restrictions
from .recipe import Recipe
from .ingredient import Ingredient, RecipeIngredient
from .engagement import Favorite, Rating
from .taxonomy import (
    Category,
    CookingMethod,
    Cuisine,
    DietaryRestriction,
    DifficultyLevel,
    MainIngredient,
    Occasion,
    Season,
    TaxonomyKind,
)

__all__ = [
    "Base",
    "User",
    "user_dietary_restrictions",
    "Recipe",
    "Ingredient",
    "RecipeIngredient",
    "Favorite",
    "Rating",
    "Category",
    "CookingMethod",
    "Cuisine",
    "DietaryRestriction",
    "DifficultyLevel",
    "MainIngredient",
    "Occasion",
    "Season",
    "TaxonomyKind",
]

from .recipe_base import RecipeBase
from .recipe_create import RecipeCreate
from .recipe_update import RecipeUpdate
from .recipe import RecipeCreated, RecipeDetail, RecipePage, RecipeSummary
from .ingredient import Ingredient, IngredientIn
from .taxonomy import FilterOption, FilterOptions
from .engagement import FavoriteToggle, Message, RatingIn, RatingResult
from .user import UserProfile, UserProfileUpdate

__all__ = [
    "RecipeBase",
    "RecipeCreate",
    "RecipeUpdate",
    "RecipeCreated",
    "RecipeDetail",
    "RecipePage",
    "RecipeSummary",
    "Ingredient",
    "IngredientIn",
    "FilterOption",
    "FilterOptions",
    "FavoriteToggle",
    "Message",
    "RatingIn",
    "RatingResult",
    "UserProfile",
    "UserProfileUpdate",
]

from .recipe_create import RecipeCreate


class RecipeUpdate(RecipeCreate):
    """
    PUT replaces every mutable field, the ingredient list and all
    taxonomy links, so it takes the same shape as creation
    """

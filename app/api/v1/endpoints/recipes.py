from typing import Any, List

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_current_admin, get_current_user, get_db, get_optional_user
from app.core.security import CurrentUser
from app.core.text_utils import parse_id_list
from app.models import TaxonomyKind
from app.schemas import (
    FavoriteToggle,
    Message,
    RatingIn,
    RatingResult,
    RecipeCreate,
    RecipeCreated,
    RecipeDetail,
    RecipePage,
    RecipeSummary,
    RecipeUpdate,
)
from app.services import favorite_service, rating_service, recipe_query, recipe_service
from app.services.rating_service import RatingOutcome

router = APIRouter()

ID_LIST_HELP = "Comma-separated ids"


@router.get("/", response_model=RecipePage)
async def read_recipes(
    *,
    db: AsyncSession = Depends(get_db),
    search: str | None = Query(None, description="Case-insensitive substring of title or description"),
    page: int = 1,
    limit: int | None = None,
    categories: str | None = Query(None, description=ID_LIST_HELP),
    cuisines: str | None = Query(None, description=ID_LIST_HELP),
    seasons: str | None = Query(None, description=ID_LIST_HELP),
    dietary_restrictions: str | None = Query(None, alias="dietaryRestrictions", description=ID_LIST_HELP),
    cooking_methods: str | None = Query(None, alias="cookingMethods", description=ID_LIST_HELP),
    main_ingredients: str | None = Query(None, alias="mainIngredients", description=ID_LIST_HELP),
    difficulty_levels: str | None = Query(None, alias="difficultyLevels", description=ID_LIST_HELP),
    occasions: str | None = Query(None, description=ID_LIST_HELP),
) -> Any:
    filters = {
        TaxonomyKind.CATEGORY: parse_id_list(categories),
        TaxonomyKind.CUISINE: parse_id_list(cuisines),
        TaxonomyKind.SEASON: parse_id_list(seasons),
        TaxonomyKind.DIETARY_RESTRICTION: parse_id_list(dietary_restrictions),
        TaxonomyKind.COOKING_METHOD: parse_id_list(cooking_methods),
        TaxonomyKind.MAIN_INGREDIENT: parse_id_list(main_ingredients),
        TaxonomyKind.DIFFICULTY_LEVEL: parse_id_list(difficulty_levels),
        TaxonomyKind.OCCASION: parse_id_list(occasions),
    }
    return await recipe_query.list_recipes(
        db, search=search, filters=filters, page=page, page_size=limit
    )


# must be registered before /{recipe_id}
@router.get("/my-favorites", response_model=List[RecipeSummary])
async def read_my_favorites(
    *, db: AsyncSession = Depends(get_db), user: CurrentUser = Depends(get_current_user)
) -> Any:
    return await recipe_query.list_favorite_recipes(db, user_id=user.id)


@router.get("/{recipe_id}", response_model=RecipeDetail)
async def read_recipe_by_id(
    *,
    db: AsyncSession = Depends(get_db),
    viewer: CurrentUser | None = Depends(get_optional_user),
    recipe_id: int,
) -> Any:
    return await recipe_service.load_recipe(
        db, recipe_id=recipe_id, viewer_id=viewer.id if viewer else None
    )


@router.post("/", response_model=RecipeCreated, status_code=201)
async def create_new_recipe(
    *,
    db: AsyncSession = Depends(get_db),
    admin: CurrentUser = Depends(get_current_admin),
    recipe_in: RecipeCreate,
) -> Any:
    recipe = await recipe_service.create_recipe(db, owner_id=admin.id, recipe_in=recipe_in)
    return RecipeCreated(recipe_id=recipe.id, title=recipe_in.title, owner=admin.id)


@router.put("/{recipe_id}", response_model=RecipeDetail)
async def update_existing_recipe(
    *,
    db: AsyncSession = Depends(get_db),
    user: CurrentUser = Depends(get_current_user),
    recipe_id: int,
    recipe_in: RecipeUpdate,
) -> Any:
    await recipe_service.update_recipe(db, recipe_id=recipe_id, recipe_in=recipe_in, user=user)
    return await recipe_service.load_recipe(db, recipe_id=recipe_id, viewer_id=user.id)


@router.delete("/{recipe_id}", response_model=Message)
async def delete_existing_recipe(
    *,
    db: AsyncSession = Depends(get_db),
    user: CurrentUser = Depends(get_current_user),
    recipe_id: int,
) -> Any:
    await recipe_service.delete_recipe(db, recipe_id=recipe_id, user=user)
    return Message(detail="Recipe deleted successfully.")


@router.post("/{recipe_id}/rate", response_model=RatingResult)
async def rate_recipe(
    *,
    db: AsyncSession = Depends(get_db),
    user: CurrentUser = Depends(get_current_user),
    recipe_id: int,
    rating_in: RatingIn,
    response: Response,
) -> Any:
    outcome = await rating_service.submit_rating(
        db, user_id=user.id, recipe_id=recipe_id, value=rating_in.rating
    )
    response.status_code = status.HTTP_201_CREATED if outcome is RatingOutcome.CREATED else status.HTTP_200_OK
    return RatingResult(status=outcome.value, rating=rating_in.rating)


@router.post("/{recipe_id}/favorite", response_model=FavoriteToggle)
async def toggle_favorite(
    *,
    db: AsyncSession = Depends(get_db),
    user: CurrentUser = Depends(get_current_user),
    recipe_id: int,
    response: Response,
) -> Any:
    favorited = await favorite_service.toggle_favorite(db, user_id=user.id, recipe_id=recipe_id)
    response.status_code = status.HTTP_201_CREATED if favorited else status.HTTP_200_OK
    return FavoriteToggle(favorited=favorited)

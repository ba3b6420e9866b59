import logging

from sqlalchemy import delete, func, insert, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import ConstraintViolationError, InvalidArgumentError, NotFoundError
from app.core.permissions import ensure_can_mutate
from app.core.security import CurrentUser
from app.core.text_utils import normalize_ingredient_name
from app.models import Ingredient, Recipe, RecipeIngredient, TaxonomyKind, User
from app.schemas import Ingredient as IngredientOut
from app.schemas import RecipeCreate, RecipeDetail, RecipeUpdate
from app.services import favorite_service, junction_service, rating_service
from app.services.ingredient_service import get_or_create_ingredient

logger = logging.getLogger(__name__)

RECIPE_FIELDS = (
    "title",
    "description",
    "instructions",
    "prep_time_minutes",
    "cook_time_minutes",
    "servings",
    "image_url",
    "video_url",
)


def validate_recipe_input(recipe_in: RecipeCreate) -> None:
    if not recipe_in.title or not recipe_in.title.strip():
        raise InvalidArgumentError("Title, instructions, and ingredients are required.")
    if not recipe_in.instructions or not recipe_in.instructions.strip():
        raise InvalidArgumentError("Title, instructions, and ingredients are required.")
    if not recipe_in.ingredients:
        raise InvalidArgumentError("Title, instructions, and ingredients are required.")

    seen = set()
    for item in recipe_in.ingredients:
        if not item.name or not item.name.strip() or item.quantity is None or not item.unit or not item.unit.strip():
            raise InvalidArgumentError("Each ingredient needs a name, quantity and unit.")
        name = normalize_ingredient_name(item.name)
        if name in seen:
            raise InvalidArgumentError(f"Ingredient '{name}' is listed more than once.")
        seen.add(name)


async def get_recipe_by_id(db: AsyncSession, *, recipe_id: int) -> Recipe | None:
    query = select(Recipe).where(Recipe.id == recipe_id)
    result = await db.execute(query)
    return result.scalar_one_or_none()


async def _get_existing_recipe(db: AsyncSession, recipe_id: int) -> Recipe:
    recipe = await get_recipe_by_id(db, recipe_id=recipe_id)
    if recipe is None:
        raise NotFoundError("Recipe not found.")
    return recipe


async def _write_ingredients(db: AsyncSession, *, recipe_id: int, recipe_in: RecipeCreate) -> None:
    rows = []
    for item in recipe_in.ingredients:
        ingredient = await get_or_create_ingredient(db, name=item.name)
        rows.append(
            {
                "recipe_id": recipe_id,
                "ingredient_id": ingredient.id,
                "quantity": item.quantity,
                "unit": item.unit.strip(),
                "notes": item.notes or None,
            }
        )
    await db.execute(insert(RecipeIngredient), rows)


async def create_recipe(db: AsyncSession, *, owner_id: int, recipe_in: RecipeCreate) -> Recipe:
    """
    Insert the recipe, its ingredients and every taxonomy link as one
    transaction. Any failure rolls the whole recipe back.
    """
    validate_recipe_input(recipe_in)

    db_recipe = Recipe(user_id=owner_id, **recipe_in.model_dump(include=set(RECIPE_FIELDS)))
    try:
        db.add(db_recipe)
        await db.flush()

        await _write_ingredients(db, recipe_id=db_recipe.id, recipe_in=recipe_in)
        for kind in TaxonomyKind:
            await junction_service.add_links(
                db, recipe_id=db_recipe.id, kind=kind, ids=getattr(recipe_in, kind.ids_field)
            )

        await db.commit()
    except IntegrityError as ex:
        await db.rollback()
        logger.error(f"Creating recipe '{recipe_in.title}' failed: {ex.orig}")
        raise ConstraintViolationError("Server error creating recipe.") from ex
    except Exception:
        await db.rollback()
        raise

    logger.info(f"Recipe {db_recipe.id} created by user {owner_id}")
    return db_recipe


async def update_recipe(
    db: AsyncSession, *, recipe_id: int, recipe_in: RecipeUpdate, user: CurrentUser
) -> Recipe:
    validate_recipe_input(recipe_in)

    db_recipe = await _get_existing_recipe(db, recipe_id)
    ensure_can_mutate(user, db_recipe.user_id, "update")

    try:
        for field, value in recipe_in.model_dump(include=set(RECIPE_FIELDS)).items():
            setattr(db_recipe, field, value)
        db_recipe.updated_at = func.now()
        await db.flush()

        await db.execute(delete(RecipeIngredient).where(RecipeIngredient.recipe_id == recipe_id))
        await _write_ingredients(db, recipe_id=recipe_id, recipe_in=recipe_in)
        for kind in TaxonomyKind:
            await junction_service.replace_links(
                db, recipe_id=recipe_id, kind=kind, ids=getattr(recipe_in, kind.ids_field)
            )

        await db.commit()
    except IntegrityError as ex:
        await db.rollback()
        logger.error(f"Updating recipe {recipe_id} failed: {ex.orig}")
        raise ConstraintViolationError("Server error updating recipe.") from ex
    except Exception:
        await db.rollback()
        raise

    logger.info(f"Recipe {recipe_id} updated by user {user.id}")
    return db_recipe


async def delete_recipe(db: AsyncSession, *, recipe_id: int, user: CurrentUser) -> None:
    db_recipe = await _get_existing_recipe(db, recipe_id)
    ensure_can_mutate(user, db_recipe.user_id, "delete")

    # links, ingredients, ratings and favorites go with it via ON DELETE CASCADE
    await db.execute(delete(Recipe).where(Recipe.id == recipe_id))
    await db.commit()
    logger.info(f"Recipe {recipe_id} deleted by user {user.id}")


async def load_recipe(db: AsyncSession, *, recipe_id: int, viewer_id: int | None = None) -> RecipeDetail:
    """
    Compose the full read model of one recipe.

    The pieces come from independent queries; no snapshot spans them.
    """
    query = (
        select(*Recipe.__table__.columns, User.username)
        .outerjoin(User, Recipe.user_id == User.id)
        .where(Recipe.id == recipe_id)
    )
    row = (await db.execute(query)).mappings().first()
    if row is None:
        raise NotFoundError("Recipe not found.")

    ingredients_query = (
        select(Ingredient.name, RecipeIngredient.quantity, RecipeIngredient.unit, RecipeIngredient.notes)
        .join(Ingredient, RecipeIngredient.ingredient_id == Ingredient.id)
        .where(RecipeIngredient.recipe_id == recipe_id)
        .order_by(Ingredient.name)
    )
    ingredient_rows = (await db.execute(ingredients_query)).mappings().all()

    detail = dict(row)
    detail["ingredients"] = [IngredientOut.model_validate(dict(r)) for r in ingredient_rows]

    for kind in TaxonomyKind:
        ids = await junction_service.fetch_linked_ids(db, recipe_id=recipe_id, kind=kind)
        detail[kind.ids_field] = sorted(ids)

    average, count = await rating_service.get_rating_summary(db, recipe_id=recipe_id)
    detail["average_rating"] = average
    detail["total_ratings"] = count

    if viewer_id is not None:
        detail["current_user_rating"] = await rating_service.get_user_rating(
            db, user_id=viewer_id, recipe_id=recipe_id
        )
        detail["is_favorited"] = await favorite_service.is_favorited(
            db, user_id=viewer_id, recipe_id=recipe_id
        )

    return RecipeDetail.model_validate(detail)


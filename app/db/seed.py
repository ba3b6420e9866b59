import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models import DifficultyLevel, Recipe, TaxonomyKind
from app.schemas import RecipeCreate
from app.services import recipe_service

logger = logging.getLogger(__name__)

TAXONOMY_SEED: dict[TaxonomyKind, list[str]] = {
    TaxonomyKind.CATEGORY: [
        "Breakfast", "Brunch", "Lunch", "Dinner", "Appetizer", "Snack", "Dessert",
        "Soups & Stews", "Salads", "Main Courses", "Side Dishes", "Beverages",
        "Baking", "Sauces & Dressings",
    ],
    TaxonomyKind.CUISINE: [
        "American", "Italian", "Mexican", "Asian", "Mediterranean", "French",
        "Middle Eastern", "African", "South American", "Caribbean", "Nordic", "Fusion",
    ],
    TaxonomyKind.SEASON: ["Spring", "Summer", "Autumn", "Winter", "Year-Round"],
    TaxonomyKind.DIETARY_RESTRICTION: [
        "Vegan", "Gluten-Free", "Soy-Free", "Nut-Free", "Oil-Free", "Sugar-Free",
        "High-Protein", "Low-Carb", "Whole Food Plant-Based", "Raw", "Kid-Friendly",
        "Pantry-Friendly",
    ],
    TaxonomyKind.COOKING_METHOD: [
        "Baking", "Roasting", "Sautéing", "Grilling", "Stovetop", "Slow Cooker",
        "Instant Pot", "Air Fryer", "No-Cook", "Steaming", "Blender",
    ],
    TaxonomyKind.MAIN_INGREDIENT: [
        "Lentils", "Chickpeas", "Black Beans", "Kidney Beans", "Pinto Beans", "Edamame",
        "Tofu", "Tempeh", "Quinoa", "Rice", "Pasta", "Oats", "Farro", "Barley",
        "Broccoli", "Spinach", "Sweet Potato", "Mushrooms", "Carrots", "Bell Peppers",
        "Cauliflower", "Kale", "Berries", "Apples", "Bananas", "Avocado", "Almonds",
        "Walnuts", "Cashews", "Chia Seeds", "Flax Seeds", "Hemp Seeds", "Vegan Sausage",
        "Vegan Ground Meat", "Jackfruit",
    ],
    # listed in level_order
    TaxonomyKind.DIFFICULTY_LEVEL: ["Beginner", "Easy", "Intermediate", "Advanced", "Expert"],
    TaxonomyKind.OCCASION: [
        "Everyday", "Weeknight Meal", "Holiday", "Potluck", "Party", "Meal Prep",
        "Quick & Easy", "Comfort Food",
    ],
}


async def seed_taxonomies(db: AsyncSession) -> int:
    """
    Insert the taxonomy vocabularies; names already present are skipped.
    Returns the number of rows inserted
    """
    inserted = 0
    for kind, names in TAXONOMY_SEED.items():
        model = kind.model
        existing = set((await db.execute(select(model.name))).scalars().all())
        for position, name in enumerate(names, start=1):
            if name in existing:
                continue
            if model is DifficultyLevel:
                db.add(DifficultyLevel(name=name, level_order=position))
            else:
                db.add(model(name=name))
            inserted += 1

    await db.commit()
    logger.info(f"Seeded {inserted} taxonomy entries")
    return inserted


async def seed_sample_recipes(db: AsyncSession, *, owner_id: int, recipes: list[dict]) -> int:
    """
    Create sample recipes owned by `owner_id`. A title the owner already
    has is skipped, so the seed can be re-run. Returns the number created
    """
    existing = set(
        (await db.execute(select(Recipe.title).where(Recipe.user_id == owner_id))).scalars().all()
    )

    created = 0
    for r_data in recipes:
        r_input = {k: v for k, v in r_data.items() if k != "id"}
        recipe_in = RecipeCreate(**r_input)
        if recipe_in.title in existing:
            logger.info(f"Sample recipe '{recipe_in.title}' already present, skipping")
            continue
        await recipe_service.create_recipe(db, owner_id=owner_id, recipe_in=recipe_in)
        existing.add(recipe_in.title)
        created += 1

    return created

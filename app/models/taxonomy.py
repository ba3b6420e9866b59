import enum

from .base import Base

from sqlalchemy import Column, ForeignKey, Integer, String, Table


class Category(Base):
    __tablename__ = "categories"

    id = Column(Integer, primary_key=True)
    name = Column(String(255), unique=True, nullable=False)


class Cuisine(Base):
    __tablename__ = "cuisines"

    id = Column(Integer, primary_key=True)
    name = Column(String(255), unique=True, nullable=False)


class Season(Base):
    __tablename__ = "seasons"

    id = Column(Integer, primary_key=True)
    name = Column(String(255), unique=True, nullable=False)


class DietaryRestriction(Base):
    __tablename__ = "dietary_restrictions"

    id = Column(Integer, primary_key=True)
    name = Column(String(255), unique=True, nullable=False)


class CookingMethod(Base):
    __tablename__ = "cooking_methods"

    id = Column(Integer, primary_key=True)
    name = Column(String(255), unique=True, nullable=False)


class MainIngredient(Base):
    __tablename__ = "main_ingredients"

    id = Column(Integer, primary_key=True)
    name = Column(String(255), unique=True, nullable=False)


class DifficultyLevel(Base):
    __tablename__ = "difficulty_levels"

    id = Column(Integer, primary_key=True)
    name = Column(String(255), unique=True, nullable=False)
    # 1 for Beginner ... 5 for Expert
    level_order = Column(Integer, unique=True)


class Occasion(Base):
    __tablename__ = "occasions"

    id = Column(Integer, primary_key=True)
    name = Column(String(255), unique=True, nullable=False)


def _recipe_link_table(name: str, column: str, target: str) -> Table:
    return Table(
        name,
        Base.metadata,
        Column("recipe_id", Integer, ForeignKey("recipes.id", ondelete="CASCADE"), primary_key=True),
        Column(column, Integer, ForeignKey(f"{target}.id", ondelete="CASCADE"), primary_key=True),
    )


class TaxonomyKind(str, enum.Enum):
    """
    One of the eight independent classification dimensions of a recipe.

    Each kind resolves to its entity model, its junction table and the
    foreign-key column of that table, so link handling and filtering
    are written once for all of them.
    """

    CATEGORY = "category"
    CUISINE = "cuisine"
    SEASON = "season"
    DIETARY_RESTRICTION = "dietary_restriction"
    COOKING_METHOD = "cooking_method"
    MAIN_INGREDIENT = "main_ingredient"
    DIFFICULTY_LEVEL = "difficulty_level"
    OCCASION = "occasion"

    @property
    def model(self) -> type[Base]:
        return _MODELS[self]

    @property
    def link_table(self) -> Table:
        return _LINK_TABLES[self]

    @property
    def column_name(self) -> str:
        return f"{self.value}_id"

    @property
    def ids_field(self) -> str:
        """Name of the id-list field in recipe payloads, e.g. category_ids"""
        return f"{self.value}_ids"

    @property
    def param_name(self) -> str:
        """Query parameter and filter-options key, e.g. dietaryRestrictions"""
        return _PARAM_NAMES[self]


_MODELS: dict[TaxonomyKind, type[Base]] = {
    TaxonomyKind.CATEGORY: Category,
    TaxonomyKind.CUISINE: Cuisine,
    TaxonomyKind.SEASON: Season,
    TaxonomyKind.DIETARY_RESTRICTION: DietaryRestriction,
    TaxonomyKind.COOKING_METHOD: CookingMethod,
    TaxonomyKind.MAIN_INGREDIENT: MainIngredient,
    TaxonomyKind.DIFFICULTY_LEVEL: DifficultyLevel,
    TaxonomyKind.OCCASION: Occasion,
}

_LINK_TABLES: dict[TaxonomyKind, Table] = {
    kind: _recipe_link_table(f"recipe_{model.__tablename__}", kind.column_name, model.__tablename__)
    for kind, model in _MODELS.items()
}

_PARAM_NAMES: dict[TaxonomyKind, str] = {
    TaxonomyKind.CATEGORY: "categories",
    TaxonomyKind.CUISINE: "cuisines",
    TaxonomyKind.SEASON: "seasons",
    TaxonomyKind.DIETARY_RESTRICTION: "dietaryRestrictions",
    TaxonomyKind.COOKING_METHOD: "cookingMethods",
    TaxonomyKind.MAIN_INGREDIENT: "mainIngredients",
    TaxonomyKind.DIFFICULTY_LEVEL: "difficultyLevels",
    TaxonomyKind.OCCASION: "occasions",
}

recipe_categories = TaxonomyKind.CATEGORY.link_table
recipe_cuisines = TaxonomyKind.CUISINE.link_table
recipe_seasons = TaxonomyKind.SEASON.link_table
recipe_dietary_restrictions = TaxonomyKind.DIETARY_RESTRICTION.link_table
recipe_cooking_methods = TaxonomyKind.COOKING_METHOD.link_table
recipe_main_ingredients = TaxonomyKind.MAIN_INGREDIENT.link_table
recipe_difficulty_levels = TaxonomyKind.DIFFICULTY_LEVEL.link_table
recipe_occasions = TaxonomyKind.OCCASION.link_table

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class FilterOption(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    level_order: int | None = None


class FilterOptions(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    categories: list[FilterOption]
    cuisines: list[FilterOption]
    seasons: list[FilterOption]
    dietary_restrictions: list[FilterOption]
    cooking_methods: list[FilterOption]
    main_ingredients: list[FilterOption]
    difficulty_levels: list[FilterOption]
    occasions: list[FilterOption]

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field


class IngredientIn(BaseModel):
    name: str | None = Field(None, max_length=255)
    quantity: Decimal | None = Field(None, ge=0, max_digits=10, decimal_places=2)
    unit: str | None = Field(None, max_length=50)
    notes: str | None = Field(None, max_length=255)


class Ingredient(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    name: str
    quantity: Decimal
    unit: str
    notes: str | None = None

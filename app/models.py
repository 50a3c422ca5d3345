# app/models.py
from enum import Enum
from typing import Annotated, Any, List, Optional

from pydantic import BaseModel, Field, StrictBool, StrictStr, field_validator


class Category(str, Enum):
    appetizer = "appetizer"
    entree = "entree"
    dessert = "dessert"
    beverage = "beverage"


Name = Annotated[StrictStr, Field(min_length=3)]
Description = Annotated[StrictStr, Field(min_length=10)]
Price = Annotated[float, Field(gt=0, allow_inf_nan=False)]
Ingredients = Annotated[List[StrictStr], Field(min_length=1)]


def _json_number(value: Any) -> Any:
    # lax float parsing would take "8.99" and true
    if value is not None and (isinstance(value, bool) or not isinstance(value, (int, float))):
        raise ValueError("price must be a JSON number")
    return value


class MenuItemIn(BaseModel):
    name: Name
    description: Description
    price: Price
    category: Category
    ingredients: Ingredients
    available: StrictBool = True

    @field_validator("price", mode="before")
    @classmethod
    def validate_price(cls, value: Any) -> Any:
        return _json_number(value)


class MenuItemPatch(BaseModel):
    name: Optional[Name] = None
    description: Optional[Description] = None
    price: Optional[Price] = None
    category: Optional[Category] = None
    ingredients: Optional[Ingredients] = None
    available: Optional[StrictBool] = None

    @field_validator("price", mode="before")
    @classmethod
    def validate_price(cls, value: Any) -> Any:
        return _json_number(value)


class MenuItem(MenuItemIn):
    id: int = Field(..., ge=1)

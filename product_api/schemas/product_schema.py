from datetime import datetime
from decimal import Decimal
from typing import Optional, List

from pydantic import BaseModel, Field, field_validator


class ProductSchema(BaseModel):
    """
    Pydantic schema for product data sent to the API.

    It also carries the field-level constraints the product validator checks
    before applying the business rules.

    Attributes:
        name (str): product name, required, at most 100 characters.
        description (str): product description, required, at most 200 characters.
        price (Decimal): unit price, strictly greater than 0.
        stock (int): units in stock, not negative.
        category (str): optional category, at most 50 characters.
    """
    name: str = Field(..., min_length=1, max_length=100)
    description: str = Field(..., min_length=1, max_length=200)
    price: Decimal = Field(..., gt=0)
    stock: int = Field(..., ge=0)
    category: Optional[str] = Field(default=None, max_length=50)

    model_config = {"from_attributes": True, "str_strip_whitespace": True}


class ProductResponseSchema(BaseModel):
    id_product: int
    name: str
    description: str
    price: float
    stock: int
    category: Optional[str]
    created_at: Optional[datetime]

    @field_validator('price', mode='before')
    @classmethod
    def round_decimal(cls, v):
        if v is None:
            return None
        return round(float(v), 2)

    model_config = {"from_attributes": True}


class AllProductsResponseSchema(BaseModel):
    products: List[ProductResponseSchema]
    total: int
    page: int
    limit: int

    model_config = {"from_attributes": True}

from typing import List

from pydantic import BaseModel, Field

from .product_schema import ProductResponseSchema


class ProductImportResponseSchema(BaseModel):
    """Summary returned by the CSV import endpoint"""
    total_records: int = Field(..., ge=0)
    valid_records: int = Field(..., ge=0)
    invalid_records: int = Field(..., ge=0)
    errors: List[str] = Field(default_factory=list)
    imported_products: List[ProductResponseSchema] = Field(default_factory=list)

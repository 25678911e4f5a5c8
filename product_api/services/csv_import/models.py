"""
Data models for the product CSV import.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Dict, Any, Optional

from product_api.models.product import Product
from product_api.schemas.product_schema import ProductResponseSchema


@dataclass(frozen=True)
class ColumnIndices:
    """
    Zero-based positions of the known columns in the CSV header.

    A position is None when the header does not declare the column.
    """
    name: Optional[int]
    description: Optional[int]
    price: Optional[int]
    stock: Optional[int]
    category: Optional[int] = None

    REQUIRED = ('name', 'description', 'price', 'stock')

    @property
    def missing_required(self) -> List[str]:
        return [column for column in self.REQUIRED if getattr(self, column) is None]

    @property
    def min_field_count(self) -> int:
        """Fields a data line needs so that every required column is present"""
        return max(getattr(self, column) for column in self.REQUIRED) + 1


@dataclass
class ProductImportReport:
    """
    Result of one CSV import call.

    Attributes:
        total_records: data lines read (header excluded)
        valid_records: products persisted
        invalid_records: lines rejected while building or validating
        errors: error messages in the order they were produced
        imported_products: the persisted products, with their IDs
    """
    total_records: int = 0
    valid_records: int = 0
    invalid_records: int = 0
    errors: List[str] = field(default_factory=list)
    imported_products: List[Product] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a dictionary for the API response"""
        return {
            "total_records": self.total_records,
            "valid_records": self.valid_records,
            "invalid_records": self.invalid_records,
            "errors": list(self.errors),
            "imported_products": [
                ProductResponseSchema.model_validate(product).model_dump(mode="json")
                for product in self.imported_products
            ],
        }

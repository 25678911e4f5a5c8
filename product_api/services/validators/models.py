"""
Validation result types.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from product_api.models.product import Product


@dataclass
class ValidationVerdict:
    """
    Outcome of validating one product.

    Attributes:
        product: the validated product (None when the input was None)
        errors: human readable messages, in the order the rules fired
        is_valid: True iff errors is empty
    """
    product: Optional[Product] = None
    errors: List[str] = field(default_factory=list)
    is_valid: bool = True

    def add_error(self, error: str) -> "ValidationVerdict":
        self.errors.append(error)
        self.is_valid = False
        return self

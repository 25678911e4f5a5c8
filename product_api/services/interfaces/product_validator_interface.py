"""
Product validator interface (ISP)
"""
from abc import ABC, abstractmethod
from typing import Iterable, List, Optional

from product_api.models.product import Product
from product_api.services.validators.models import ValidationVerdict


class IProductValidator(ABC):
    """Validates products against field constraints and business rules"""

    @abstractmethod
    def validate(self, product: Optional[Product]) -> ValidationVerdict:
        """Validate a single product"""
        pass

    @abstractmethod
    def validate_batch(self, products: Iterable[Product]) -> List[ValidationVerdict]:
        """Validate every product, preserving input order"""
        pass

"""
Product repository interface (ISP)
"""
from abc import abstractmethod
from typing import List

from product_api.core.interfaces import IRepository
from product_api.models.product import Product


class IProductRepository(IRepository[Product, int]):
    """Storage gateway for products"""

    @abstractmethod
    def get_count(self, **filters) -> int:
        """Count the products matching the filters"""
        pass

    @abstractmethod
    def bulk_create(self, entities: List[Product], batch_size: int = 1000) -> List[Product]:
        """Persist many products in one call and return them with their IDs"""
        pass

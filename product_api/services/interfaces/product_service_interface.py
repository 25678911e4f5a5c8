"""
Product service interface (ISP)
"""
from abc import abstractmethod
from typing import List, Optional

from product_api.core.interfaces import IBaseService
from product_api.schemas.product_schema import ProductSchema
from product_api.models.product import Product


class IProductService(IBaseService):
    """Product CRUD service"""

    @abstractmethod
    async def create_product(self, product_data: Optional[ProductSchema]) -> Product:
        """Create a new product"""
        pass

    @abstractmethod
    async def update_product(self, product_id: int, product_data: Optional[ProductSchema]) -> Product:
        """Update an existing product"""
        pass

    @abstractmethod
    async def get_product(self, product_id: int) -> Optional[Product]:
        """Get a product by ID, None when it does not exist"""
        pass

    @abstractmethod
    async def get_products(self, page: int = 1, limit: int = 10, **filters) -> List[Product]:
        """Get a page of products"""
        pass

    @abstractmethod
    async def get_products_count(self, **filters) -> int:
        """Count products matching the filters"""
        pass

    @abstractmethod
    async def delete_product(self, product_id: int) -> bool:
        """Delete a product, False when it does not exist"""
        pass

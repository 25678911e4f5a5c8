"""
Product service (SRP, DIP): business rules for the product CRUD endpoints
"""
import logging
from typing import List, Optional

from product_api.services.interfaces.product_service_interface import IProductService
from product_api.services.interfaces.product_validator_interface import IProductValidator
from product_api.repository.interfaces.product_repository_interface import IProductRepository
from product_api.schemas.product_schema import ProductSchema
from product_api.models.product import Product
from product_api.core.exceptions import ExceptionFactory, ValidationException, ErrorCode

logger = logging.getLogger(__name__)


class ProductService(IProductService):
    """Product service"""

    def __init__(self, product_repository: IProductRepository, product_validator: IProductValidator):
        self._product_repository = product_repository
        self._product_validator = product_validator

    async def create_product(self, product_data: Optional[ProductSchema]) -> Product:
        """
        Create a new product after validating it.

        Raises:
            ValidationException: missing data or failed validation
        """
        if product_data is None:
            raise ExceptionFactory.product_required()

        product = Product(**product_data.model_dump())
        await self.validate_business_rules(product)

        product = self._product_repository.create(product)
        logger.info(f"Created product {product.id_product}")
        return product

    async def update_product(self, product_id: int, product_data: Optional[ProductSchema]) -> Product:
        """
        Update the editable fields of an existing product.

        The ID and creation timestamp never change.

        Raises:
            ValidationException: missing data, unknown ID or failed validation
        """
        if product_data is None:
            raise ExceptionFactory.product_required()

        product = self._product_repository.get_by_id(product_id)
        if product is None:
            raise ValidationException(
                f"Product with ID {product_id} not found",
                ErrorCode.PRODUCT_NOT_FOUND,
                {"product_id": product_id}
            )

        for field_name, value in product_data.model_dump().items():
            setattr(product, field_name, value)
        await self.validate_business_rules(product)

        return self._product_repository.update(product)

    async def get_product(self, product_id: int) -> Optional[Product]:
        return self._product_repository.get_by_id(product_id)

    async def get_products(self, page: int = 1, limit: int = 10, **filters) -> List[Product]:
        return self._product_repository.get_all(page=page, limit=limit, **filters)

    async def get_products_count(self, **filters) -> int:
        return self._product_repository.get_count(**filters)

    async def delete_product(self, product_id: int) -> bool:
        deleted = self._product_repository.delete(product_id)
        if deleted:
            logger.info(f"Deleted product {product_id}")
        return deleted

    async def validate_business_rules(self, data: Product) -> None:
        verdict = self._product_validator.validate(data)
        if not verdict.is_valid:
            raise ExceptionFactory.product_validation_failed(verdict.errors)

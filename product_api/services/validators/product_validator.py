"""
Product validator.

Two layers, both always evaluated so every violated rule is reported:
1. field constraints declared on ``ProductSchema`` (required, length, range);
2. business rules on name length, price and stock.
The same problem can therefore be reported once by each layer.
"""
from decimal import Decimal
from typing import Iterable, List, Optional

from pydantic import ValidationError

from product_api.core.pydantic_error_formatter import PydanticErrorFormatter
from product_api.models.product import Product
from product_api.schemas.product_schema import ProductSchema
from product_api.services.interfaces.product_validator_interface import IProductValidator
from product_api.services.validators.models import ValidationVerdict


class ProductValidator(IProductValidator):
    """Stateless product validator"""

    FIELD_LABELS = {
        'name': 'Name',
        'description': 'Description',
        'price': 'Price',
        'stock': 'Stock',
        'category': 'Category',
    }

    MIN_NAME_LENGTH = 2

    def validate(self, product: Optional[Product]) -> ValidationVerdict:
        verdict = ValidationVerdict(product=product)

        if product is None:
            return verdict.add_error("Product cannot be null")

        for error in self._schema_errors(product):
            verdict.add_error(error)

        for error in self._business_rule_errors(product):
            verdict.add_error(error)

        return verdict

    def validate_batch(self, products: Iterable[Product]) -> List[ValidationVerdict]:
        return [self.validate(product) for product in products]

    def _schema_errors(self, product: Product) -> List[str]:
        data = {field_name: getattr(product, field_name, None) for field_name in self.FIELD_LABELS}
        try:
            ProductSchema.model_validate(data)
        except ValidationError as e:
            return PydanticErrorFormatter.field_messages(e.errors(), self.FIELD_LABELS)
        return []

    def _business_rule_errors(self, product: Product) -> List[str]:
        errors = []

        name = product.name
        if isinstance(name, str) and name.strip() and len(name.strip()) < self.MIN_NAME_LENGTH:
            errors.append(f"Product name must be at least {self.MIN_NAME_LENGTH} characters long")

        if product.price is None or Decimal(product.price) <= 0:
            errors.append("Product price must be greater than 0")

        if product.stock is not None and product.stock < 0:
            errors.append("Product stock cannot be negative")

        return errors

"""
Unit tests for ProductService
"""
from decimal import Decimal

import pytest

from product_api.core.exceptions import ValidationException
from product_api.schemas.product_schema import ProductSchema
from product_api.services.routers.product_service import ProductService
from product_api.services.validators.product_validator import ProductValidator
from tests.factories.products_factory import create_product_data


@pytest.fixture
def product_service(fake_product_repository) -> ProductService:
    return ProductService(fake_product_repository, ProductValidator())


# ============================================================================
# create_product
# ============================================================================

@pytest.mark.asyncio
async def test_create_product(product_service, fake_product_repository):
    product = await product_service.create_product(ProductSchema(**create_product_data(name="Laptop")))

    assert product.id_product == 1
    assert product.name == "Laptop"
    assert product.price == Decimal("19.99")
    assert fake_product_repository.exists(1)


@pytest.mark.asyncio
async def test_create_product_none(product_service):
    with pytest.raises(ValidationException) as exc_info:
        await product_service.create_product(None)

    assert exc_info.value.message == "Product cannot be null"
    assert exc_info.value.error_code == "REQUIRED_FIELD_MISSING"


@pytest.mark.asyncio
async def test_create_product_short_name(product_service, fake_product_repository):
    with pytest.raises(ValidationException) as exc_info:
        await product_service.create_product(ProductSchema(**create_product_data(name="A")))

    assert "Product name must be at least 2 characters long" in exc_info.value.message
    assert exc_info.value.details["errors"] == ["Product name must be at least 2 characters long"]
    assert fake_product_repository.products == {}


# ============================================================================
# update_product
# ============================================================================

@pytest.mark.asyncio
async def test_update_product(product_service):
    created = await product_service.create_product(ProductSchema(**create_product_data(name="Laptop")))

    updated = await product_service.update_product(
        created.id_product,
        ProductSchema(**create_product_data(name="Laptop Pro", price="1299.00", stock=3))
    )

    assert updated.id_product == created.id_product
    assert updated.name == "Laptop Pro"
    assert updated.price == Decimal("1299.00")
    assert updated.stock == 3


@pytest.mark.asyncio
async def test_update_missing_product(product_service):
    with pytest.raises(ValidationException) as exc_info:
        await product_service.update_product(42, ProductSchema(**create_product_data()))

    assert exc_info.value.message == "Product with ID 42 not found"
    assert exc_info.value.status_code == 400


@pytest.mark.asyncio
async def test_update_product_none(product_service):
    with pytest.raises(ValidationException):
        await product_service.update_product(1, None)


# ============================================================================
# Reads and delete
# ============================================================================

@pytest.mark.asyncio
async def test_get_missing_product_returns_none(product_service):
    assert await product_service.get_product(99) is None


@pytest.mark.asyncio
async def test_get_products_with_category_filter(product_service):
    await product_service.create_product(ProductSchema(**create_product_data(name="Laptop", category="Electronics")))
    await product_service.create_product(ProductSchema(**create_product_data(name="Desk", category="Office")))

    products = await product_service.get_products(page=1, limit=10, category="electronics")

    assert [p.name for p in products] == ["Laptop"]
    assert await product_service.get_products_count(category="electronics") == 1
    assert await product_service.get_products_count() == 2


@pytest.mark.asyncio
async def test_delete_product(product_service):
    created = await product_service.create_product(ProductSchema(**create_product_data()))

    assert await product_service.delete_product(created.id_product) is True
    assert await product_service.delete_product(created.id_product) is False

"""
Product router
"""
from typing import Optional

from fastapi import APIRouter, Depends, status, Query, Path, Response

from product_api.services.interfaces.product_service_interface import IProductService
from product_api.schemas.product_schema import ProductSchema, ProductResponseSchema, AllProductsResponseSchema
from product_api.core.exceptions import ExceptionFactory
from product_api.core.dependencies import get_product_service, settings_dependency
from .dependencies import LIMIT_DEFAULT, MAX_LIMIT

router = APIRouter(
    prefix="/api/v1/products",
    tags=["Product"]
)


@router.get("/", status_code=status.HTTP_200_OK, response_model=AllProductsResponseSchema)
async def get_all_products(
    settings: settings_dependency,
    product_service: IProductService = Depends(get_product_service),
    page: int = Query(1, gt=0),
    limit: int = Query(LIMIT_DEFAULT, gt=0, le=MAX_LIMIT),
    category: Optional[str] = Query(None, description="Filter by category (case-insensitive)")
):
    """
    Return products with pagination.

    - **page**: page to return.
    - **limit**: maximum number of products per page.
    - **category**: only products of this category.
    """
    limit = min(limit, settings.max_page_limit)
    filters = {}
    if category and category.strip():
        filters['category'] = category.strip()

    products = await product_service.get_products(page=page, limit=limit, **filters)
    total_count = await product_service.get_products_count(**filters)

    return {"products": products, "total": total_count, "page": page, "limit": limit}


@router.get("/{product_id}", status_code=status.HTTP_200_OK, response_model=ProductResponseSchema)
async def get_product_by_id(
    product_service: IProductService = Depends(get_product_service),
    product_id: int = Path(gt=0)
):
    """
    Return a single product.

    - **product_id**: product identifier.
    """
    product = await product_service.get_product(product_id)
    if product is None:
        raise ExceptionFactory.product_not_found(product_id)
    return product


@router.post("/", status_code=status.HTTP_201_CREATED, response_model=ProductResponseSchema,
             response_description="Product created")
async def create_product(
    product_data: ProductSchema,
    product_service: IProductService = Depends(get_product_service)
):
    """
    Create a new product.
    """
    return await product_service.create_product(product_data)


@router.put("/{product_id}", status_code=status.HTTP_200_OK, response_model=ProductResponseSchema,
            response_description="Product updated")
async def update_product(
    product_data: ProductSchema,
    product_service: IProductService = Depends(get_product_service),
    product_id: int = Path(gt=0)
):
    """
    Update an existing product.

    - **product_id**: product identifier.
    """
    return await product_service.update_product(product_id, product_data)


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT, response_description="Product deleted")
async def delete_product(
    product_service: IProductService = Depends(get_product_service),
    product_id: int = Path(gt=0)
):
    """
    Delete a product.

    - **product_id**: product identifier.
    """
    if not await product_service.delete_product(product_id):
        raise ExceptionFactory.product_not_found(product_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

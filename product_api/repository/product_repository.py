"""
Product repository backed by SQLAlchemy
"""
from typing import List

from sqlalchemy import func
from sqlalchemy.orm import Session

from product_api.models.product import Product
from product_api.repository.interfaces.product_repository_interface import IProductRepository
from product_api.core.base_repository import BaseRepository
from product_api.core.exceptions import InfrastructureException


class ProductRepository(BaseRepository[Product, int], IProductRepository):
    """Product repository"""

    def __init__(self, session: Session):
        super().__init__(session, Product)

    def get_all(self, **filters) -> List[Product]:
        """
        Products ordered by ID.

        Supported filters: `category` (case-insensitive match), `page` and
        `limit`. Without `limit` every product is returned.
        """
        try:
            query = self._filtered_query(filters).order_by(Product.id_product)

            limit = filters.get('limit')
            if limit:
                query = self.paginate(query, filters.get('page', 1), limit)

            return query.all()
        except Exception as e:
            raise InfrastructureException(f"Database error retrieving {self._model_class.__name__} list: {str(e)}")

    def get_count(self, **filters) -> int:
        """Count with the same filters used by get_all"""
        try:
            return self._filtered_query(filters).count()
        except Exception as e:
            raise InfrastructureException(f"Database error counting {self._model_class.__name__}: {str(e)}")

    def _filtered_query(self, filters):
        query = self._session.query(Product)
        category = filters.get('category')
        if category:
            query = query.filter(func.lower(Product.category) == category.strip().lower())

        column_filters = {k: v for k, v in filters.items() if k not in ('category', 'page', 'limit')}
        return self._apply_filters(query, column_filters)

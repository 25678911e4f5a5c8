"""
Base repository with the CRUD operations shared by every SQLAlchemy model
"""
import logging
import re
from typing import Generic, TypeVar, Optional, List, Dict, Any, Type, Union

from sqlalchemy.orm import Session

from product_api.core.interfaces import IRepository
from product_api.core.exceptions import InfrastructureException

T = TypeVar('T')
K = TypeVar('K')

logger = logging.getLogger(__name__)


class BaseRepository(Generic[T, K], IRepository[T, K]):
    """Common repository implementation (DRY, SRP)"""

    def __init__(self, session: Session, model_class: Type[T]):
        self._session = session
        self._model_class = model_class

    def get_by_id(self, id: K) -> Optional[T]:
        """Get an entity by ID"""
        try:
            return self._session.query(self._model_class).filter(
                self._id_column() == id
            ).first()
        except Exception as e:
            raise InfrastructureException(f"Database error retrieving {self._model_class.__name__}: {str(e)}")

    def get_all(self, **filters) -> List[T]:
        """Get every entity matching the optional filters"""
        try:
            query = self._session.query(self._model_class).order_by(self._id_column())
            query = self._apply_filters(query, filters)
            return query.all()
        except Exception as e:
            raise InfrastructureException(f"Database error retrieving {self._model_class.__name__} list: {str(e)}")

    def get_count(self, **filters) -> int:
        """Count the entities matching the optional filters"""
        try:
            query = self._session.query(self._model_class)
            query = self._apply_filters(query, filters)
            return query.count()
        except Exception as e:
            raise InfrastructureException(f"Database error counting {self._model_class.__name__}: {str(e)}")

    def exists(self, id: K) -> bool:
        """Check whether an entity exists"""
        try:
            return self._session.query(self._id_column()).filter(
                self._id_column() == id
            ).first() is not None
        except Exception as e:
            raise InfrastructureException(f"Database error checking {self._model_class.__name__} existence: {str(e)}")

    def create(self, entity: Union[T, dict]) -> T:
        """Persist a new entity"""
        try:
            instance = self._to_model(entity)
            self._session.add(instance)
            self._session.commit()
            self._session.refresh(instance)
            return instance
        except Exception as e:
            self._session.rollback()
            raise InfrastructureException(f"Database error creating {self._model_class.__name__}: {str(e)}")

    def update(self, entity: T) -> T:
        """Update an existing entity"""
        try:
            merged = self._session.merge(entity)
            self._session.commit()
            self._session.refresh(merged)
            return merged
        except Exception as e:
            self._session.rollback()
            raise InfrastructureException(f"Database error updating {self._model_class.__name__}: {str(e)}")

    def delete(self, id: K) -> bool:
        """Delete an entity by ID, False when it does not exist"""
        try:
            entity = self.get_by_id(id)
            if entity is None:
                return False
            self._session.delete(entity)
            self._session.commit()
            return True
        except InfrastructureException:
            raise
        except Exception as e:
            self._session.rollback()
            raise InfrastructureException(f"Database error deleting {self._model_class.__name__}: {str(e)}")

    def bulk_create(self, entities: List[Union[T, dict]], batch_size: int = 1000) -> List[T]:
        """
        Persist many entities in a single transaction.

        Batches are flushed one at a time and committed together, so either the
        whole list is stored or nothing is.
        """
        if not entities:
            return []

        persisted: List[T] = []
        try:
            for i in range(0, len(entities), batch_size):
                batch = [self._to_model(entity) for entity in entities[i:i + batch_size]]
                self._session.add_all(batch)
                self._session.flush()
                persisted.extend(batch)
                logger.debug(f"Flushed batch of {len(batch)} {self._model_class.__name__} entities")

            self._session.commit()
            for instance in persisted:
                self._session.refresh(instance)
        except Exception as e:
            self._session.rollback()
            raise InfrastructureException(f"Database error bulk creating {self._model_class.__name__}: {str(e)}")

        return persisted

    def _to_model(self, entity: Union[T, dict, Any]) -> T:
        """Convert a dict or pydantic model into a model instance"""
        if isinstance(entity, self._model_class):
            return entity
        if isinstance(entity, dict):
            return self._model_class(**entity)
        if hasattr(entity, 'model_dump'):
            return self._model_class(**entity.model_dump())
        raise ValueError(f"Cannot create {self._model_class.__name__} from {type(entity).__name__}")

    def _apply_filters(self, query, filters: Dict[str, Any]):
        """Apply equality / IN / LIKE filters for known columns"""
        for field_name, value in filters.items():
            if value is None or not hasattr(self._model_class, field_name):
                continue

            field = getattr(self._model_class, field_name)
            if isinstance(value, list):
                query = query.filter(field.in_(value))
            elif isinstance(value, str) and '%' in value:
                query = query.filter(field.like(value))
            else:
                query = query.filter(field == value)

        return query

    def paginate(self, query, page: int = 1, limit: int = 10):
        """Apply pagination to a query"""
        return query.offset(self.get_offset(limit, page)).limit(limit)

    def get_offset(self, limit: int, page: int) -> int:
        """Offset for the requested page"""
        return (page - 1) * limit

    def _id_column(self):
        return getattr(self._model_class, self._get_id_field())

    def _get_id_field(self) -> str:
        """Find the primary key attribute of the model"""
        model_name = self._model_class.__name__
        patterns = [
            'id',
            f'id_{model_name.lower()}',
            f'id_{self._convert_camel_to_snake(model_name)}',
        ]

        for pattern in patterns:
            if hasattr(self._model_class, pattern):
                return pattern

        raise ValueError(f"Cannot find ID field for {model_name}. Tried patterns: {patterns}")

    @staticmethod
    def _convert_camel_to_snake(camel_str: str) -> str:
        """CamelCase -> snake_case"""
        s1 = re.sub('(.)([A-Z][a-z]+)', r'\1_\2', camel_str)
        return re.sub('([a-z0-9])([A-Z])', r'\1_\2', s1).lower()

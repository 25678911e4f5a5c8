"""
Base interfaces shared by repositories and services (ISP)
"""
from abc import ABC, abstractmethod
from typing import Generic, TypeVar, Optional, List

T = TypeVar('T')
K = TypeVar('K')


class IRepository(Generic[T, K], ABC):
    """Base repository contract"""

    @abstractmethod
    def get_by_id(self, id: K) -> Optional[T]:
        """Get an entity by ID, None when missing"""
        pass

    @abstractmethod
    def get_all(self, **filters) -> List[T]:
        """Get every entity matching the optional filters"""
        pass

    @abstractmethod
    def create(self, entity: T) -> T:
        """Persist a new entity"""
        pass

    @abstractmethod
    def bulk_create(self, entities: List[T], batch_size: int = 1000) -> List[T]:
        """Persist many entities and return the persisted instances"""
        pass

    @abstractmethod
    def update(self, entity: T) -> T:
        """Update an existing entity"""
        pass

    @abstractmethod
    def delete(self, id: K) -> bool:
        """Delete an entity by ID, False when it does not exist"""
        pass

    @abstractmethod
    def exists(self, id: K) -> bool:
        """Check whether an entity exists"""
        pass


class IBaseService(ABC):
    """Base service contract"""

    @abstractmethod
    async def validate_business_rules(self, data) -> None:
        """Validate business rules, raising on violation"""
        pass

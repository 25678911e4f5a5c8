"""
Main fixtures for the product catalog tests
"""
import sys
from pathlib import Path
from typing import AsyncGenerator, Generator, Dict, List, Optional

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from httpx import ASGITransport, AsyncClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool

project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from product_api.main import app
from product_api.database import Base, get_db
from product_api.models.product import Product
from product_api.repository.interfaces.product_repository_interface import IProductRepository


# ============================================================================
# Database Test Setup
# ============================================================================

SQLALCHEMY_TEST_DATABASE_URL = "sqlite:///:memory:"

test_engine = create_engine(
    SQLALCHEMY_TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)


@pytest.fixture(scope="function")
def db_session() -> Generator[Session, None, None]:
    """
    Isolated database session for each test.
    Tables are dropped at the end of the test.
    """
    Base.metadata.create_all(bind=test_engine)
    session = TestSessionLocal()

    try:
        yield session
        session.rollback()
    finally:
        session.close()
        Base.metadata.drop_all(bind=test_engine)


def override_get_db():
    """Override for the get_db dependency"""
    db = TestSessionLocal()
    try:
        yield db
    finally:
        db.close()


# ============================================================================
# Fake Product Repository
# ============================================================================

class FakeProductRepository(IProductRepository):
    """In-memory product repository recording the bulk inserts it receives"""

    def __init__(self, fail_bulk_create: Optional[Exception] = None):
        self.products: Dict[int, Product] = {}
        self.next_id = 1
        self.bulk_create_calls: List[List[Product]] = []
        self.fail_bulk_create = fail_bulk_create

    def _store(self, product: Product) -> Product:
        if product.id_product is None:
            product.id_product = self.next_id
            self.next_id += 1
        self.products[product.id_product] = product
        return product

    def get_by_id(self, id: int) -> Optional[Product]:
        return self.products.get(id)

    def get_all(self, **filters) -> List[Product]:
        products = sorted(self.products.values(), key=lambda p: p.id_product)
        category = filters.get('category')
        if category:
            products = [p for p in products if (p.category or '').lower() == category.lower()]
        limit = filters.get('limit')
        if limit:
            start = (filters.get('page', 1) - 1) * limit
            products = products[start:start + limit]
        return products

    def get_count(self, **filters) -> int:
        return len(self.get_all(category=filters.get('category')))

    def create(self, entity: Product) -> Product:
        return self._store(entity)

    def bulk_create(self, entities: List[Product], batch_size: int = 1000) -> List[Product]:
        self.bulk_create_calls.append(list(entities))
        if self.fail_bulk_create is not None:
            raise self.fail_bulk_create
        return [self._store(entity) for entity in entities]

    def update(self, entity: Product) -> Product:
        return self._store(entity)

    def delete(self, id: int) -> bool:
        return self.products.pop(id, None) is not None

    def exists(self, id: int) -> bool:
        return id in self.products


@pytest.fixture
def fake_product_repository() -> FakeProductRepository:
    return FakeProductRepository()


# ============================================================================
# App Fixture with Overrides
# ============================================================================

@pytest.fixture(scope="function")
def test_app(db_session: Session):
    """
    FastAPI app bound to the in-memory test database.
    """
    app.dependency_overrides[get_db] = override_get_db
    try:
        yield app
    finally:
        app.dependency_overrides.clear()


# ============================================================================
# HTTP Clients
# ============================================================================

@pytest.fixture
def client(test_app) -> TestClient:
    """Synchronous HTTP client"""
    return TestClient(test_app)


@pytest_asyncio.fixture
async def async_client(test_app) -> AsyncGenerator[AsyncClient, None]:
    """Asynchronous HTTP client"""
    async with AsyncClient(transport=ASGITransport(app=test_app), base_url="http://test") as ac:
        yield ac

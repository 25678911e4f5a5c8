"""
Dependency injection container configuration
"""
from product_api.core.container import container
from product_api.core.settings import get_settings
from product_api.repository.interfaces.product_repository_interface import IProductRepository
from product_api.repository.product_repository import ProductRepository
from product_api.services.interfaces.product_validator_interface import IProductValidator
from product_api.services.validators.product_validator import ProductValidator
from product_api.services.interfaces.product_service_interface import IProductService
from product_api.services.routers.product_service import ProductService
from product_api.services.interfaces.csv_import_service_interface import IProductCSVImportService
from product_api.services.csv_import.csv_import_service import ProductCSVImportService


def _build_csv_import_service(session) -> IProductCSVImportService:
    return ProductCSVImportService(
        product_repository=container.resolve_with_session(IProductRepository, session),
        product_validator=container.resolve(IProductValidator),
        batch_size=get_settings().csv_bulk_batch_size,
    )


def configure_container():
    """Register repositories and services"""

    # Repositories - transient (one per request session)
    container.register_transient(IProductRepository, ProductRepository)

    # Stateless validator - singleton
    container.register_singleton(IProductValidator, ProductValidator)

    # Services - transient
    container.register_transient(IProductService, ProductService)
    container.register_factory(IProductCSVImportService, _build_csv_import_service)

    return container


_configured = False


def get_configured_container():
    """Container configured once per process"""
    global _configured
    if not _configured:
        configure_container()
        _configured = True
    return container

"""
FastAPI dependencies (DIP)
"""
from typing import Annotated

from fastapi import Depends
from sqlalchemy.orm import Session

from product_api.database import get_db
from product_api.core.container_config import get_configured_container
from product_api.core.settings import AppSettings, get_settings
from product_api.services.interfaces.product_service_interface import IProductService
from product_api.services.interfaces.csv_import_service_interface import IProductCSVImportService

db_dependency = Annotated[Session, Depends(get_db)]
settings_dependency = Annotated[AppSettings, Depends(get_settings)]


def get_product_service(db: db_dependency) -> IProductService:
    """Product service bound to the request session"""
    return get_configured_container().resolve_with_session(IProductService, db)


def get_csv_import_service(db: db_dependency) -> IProductCSVImportService:
    """CSV import service bound to the request session"""
    return get_configured_container().resolve_with_session(IProductCSVImportService, db)

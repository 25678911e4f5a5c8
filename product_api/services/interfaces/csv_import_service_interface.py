"""
Product CSV import service interface (ISP)
"""
from abc import ABC, abstractmethod
from typing import BinaryIO

from product_api.services.csv_import.models import ProductImportReport


class IProductCSVImportService(ABC):
    """Imports products from a CSV stream"""

    @abstractmethod
    async def import_products(self, csv_stream: BinaryIO) -> ProductImportReport:
        """Import every valid product in the stream and report the outcome"""
        pass

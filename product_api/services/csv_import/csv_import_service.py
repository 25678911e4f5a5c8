"""
Product CSV import service - orchestrates the import workflow.

Workflow:
1. read the header line (abort if missing or empty)
2. resolve column positions (abort if a required column is missing)
3. build a candidate product for every data line
4. validate the candidates as a batch
5. persist the valid ones with a single bulk insert
6. return the report

Line and record failures are collected in the report, never raised.
"""
from __future__ import annotations

import io
import logging
from typing import BinaryIO, Iterator, List, Optional, Tuple

from product_api.models.product import Product
from product_api.repository.interfaces.product_repository_interface import IProductRepository
from product_api.services.interfaces.csv_import_service_interface import IProductCSVImportService
from product_api.services.interfaces.product_validator_interface import IProductValidator

from .csv_parser import CSVParser
from .models import ColumnIndices, ProductImportReport
from .record_builder import ProductRecordBuilder

logger = logging.getLogger(__name__)

EMPTY_FILE_ERROR = "CSV file is empty or invalid"
MISSING_COLUMNS_ERROR = (
    f"Required columns ({', '.join(CSVParser.REQUIRED_COLUMNS)}) not found in CSV"
)


class ProductCSVImportService(IProductCSVImportService):
    """
    CSV import orchestrator.

    Depends only on the repository and validator interfaces. Each call keeps
    its own report and candidate list, so one instance can serve many calls.
    """

    def __init__(
        self,
        product_repository: IProductRepository,
        product_validator: IProductValidator,
        batch_size: int = 1000
    ):
        self._product_repository = product_repository
        self._product_validator = product_validator
        self._batch_size = batch_size

    async def import_products(self, csv_stream: BinaryIO) -> ProductImportReport:
        """
        Import products from a UTF-8 CSV byte stream.

        The stream is not closed; it belongs to the caller.

        Args:
            csv_stream: binary stream, first line is the header

        Returns:
            ProductImportReport with counters, errors and persisted products
        """
        report = ProductImportReport()
        # undecodable bytes become U+FFFD, the line still goes through the pipeline
        reader = io.TextIOWrapper(csv_stream, encoding='utf-8-sig', errors='replace')

        try:
            header_line = reader.readline()
            if not header_line.rstrip('\r\n'):
                report.errors.append(EMPTY_FILE_ERROR)
                return report

            columns = CSVParser.resolve_columns(CSVParser.parse_line(header_line.rstrip('\r\n')))
            if columns.missing_required:
                logger.info(f"CSV import aborted, missing columns: {columns.missing_required}")
                report.errors.append(MISSING_COLUMNS_ERROR)
                return report

            candidates: List[Product] = []
            for product, error in self._build_candidates(reader, columns):
                report.total_records += 1
                if error is not None:
                    report.invalid_records += 1
                    report.errors.append(error)
                else:
                    candidates.append(product)

            to_persist: List[Product] = []
            for verdict in self._product_validator.validate_batch(candidates):
                if verdict.is_valid:
                    to_persist.append(verdict.product)
                else:
                    report.invalid_records += 1
                    report.errors.extend(verdict.errors)

            if to_persist:
                self._persist(to_persist, report)

        except Exception as e:
            logger.error(f"Error processing CSV: {str(e)}", exc_info=True)
            report.errors.append(f"Error processing CSV: {str(e)}")
        finally:
            reader.detach()

        logger.info(
            f"CSV import completed. Total: {report.total_records}, "
            f"Valid: {report.valid_records}, Invalid: {report.invalid_records}"
        )
        return report

    @staticmethod
    def _build_candidates(
        lines: Iterator[str],
        columns: ColumnIndices
    ) -> Iterator[Tuple[Optional[Product], Optional[str]]]:
        """Yield (product, error) for every data line; line 1 is the header"""
        for line_number, line in enumerate(lines, start=2):
            try:
                values = CSVParser.parse_line(line.rstrip('\r\n'))
                result = ProductRecordBuilder.build(values, columns, line_number)
            except Exception as e:
                logger.warning(f"Unexpected error on CSV line {line_number}: {str(e)}", exc_info=True)
                result = (None, f"Line {line_number}: {str(e)}")
            yield result

    def _persist(self, products: List[Product], report: ProductImportReport) -> None:
        """
        Bulk insert the valid products.

        When the insert fails the whole batch is counted as invalid, so
        valid_records + invalid_records still equals total_records.
        """
        try:
            persisted = self._product_repository.bulk_create(products, self._batch_size)
        except Exception as e:
            logger.error(f"Error saving {len(products)} imported products: {str(e)}", exc_info=True)
            report.invalid_records += len(products)
            report.errors.append(f"Error saving products: {str(e)}")
            return

        report.valid_records = len(persisted)
        report.imported_products = list(persisted)

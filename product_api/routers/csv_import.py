"""
CSV import router

Endpoints for the bulk import of products from a CSV file.
"""
import io
import logging
from typing import Optional

from fastapi import APIRouter, Depends, UploadFile, File, status
from fastapi.responses import StreamingResponse

from product_api.core.dependencies import get_csv_import_service, settings_dependency
from product_api.core.exceptions import ExceptionFactory
from product_api.schemas.csv_import_schema import ProductImportResponseSchema
from product_api.services.csv_import.csv_parser import CSVParser
from product_api.services.interfaces.csv_import_service_interface import IProductCSVImportService
from .dependencies import CSV_EXTENSION

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/v1/products",
    tags=["CSV Import"]
)


def _file_too_large(max_bytes: int, filename: Optional[str]):
    limit_mb = max_bytes // (1024 * 1024)
    return ExceptionFactory.invalid_upload(f"File size cannot exceed {limit_mb}MB", filename)


@router.post(
    "/import-csv",
    status_code=status.HTTP_200_OK,
    response_model=ProductImportResponseSchema,
    response_description="CSV import completed"
)
async def import_csv(
    settings: settings_dependency,
    file: Optional[UploadFile] = File(None, description="CSV file to import"),
    import_service: IProductCSVImportService = Depends(get_csv_import_service)
):
    """
    Import products from a CSV file.

    **CSV format**:
    - first row holds the headers: Name, Description, Price, Stock (required, any order,
      case-insensitive) and Category (optional)
    - comma delimiter, fields containing commas go between double quotes
    - UTF-8 encoding, '.' as decimal separator

    Valid rows are saved, invalid rows are reported in `errors`.

    **Example**:
    ```csv
    Name,Description,Price,Stock,Category
    Laptop,"15 inch, 16GB RAM",999.99,5,Electronics
    ```
    """
    if file is None:
        raise ExceptionFactory.invalid_upload("No file uploaded")

    # size known from the multipart parser: reject before buffering the upload
    if file.size is not None and file.size > settings.csv_max_upload_bytes:
        raise _file_too_large(settings.csv_max_upload_bytes, file.filename)

    content = await file.read()

    if not content:
        raise ExceptionFactory.invalid_upload("No file uploaded", file.filename)

    if not (file.filename or "").lower().endswith(CSV_EXTENSION):
        raise ExceptionFactory.invalid_upload("File must be a CSV file", file.filename)

    if len(content) > settings.csv_max_upload_bytes:
        raise _file_too_large(settings.csv_max_upload_bytes, file.filename)

    report = await import_service.import_products(io.BytesIO(content))

    logger.info(
        f"CSV import of {file.filename}: total {report.total_records}, "
        f"valid {report.valid_records}, invalid {report.invalid_records}"
    )
    return report.to_dict()


@router.get(
    "/import-csv/template",
    status_code=status.HTTP_200_OK,
    response_description="CSV template downloaded"
)
async def get_csv_template():
    """
    Download a CSV file containing only the import headers.
    """
    return StreamingResponse(
        iter([CSVParser.generate_template()]),
        media_type="text/csv",
        headers={
            "Content-Disposition": "attachment; filename=products_template.csv"
        }
    )

"""
Integration tests for the CSV import endpoints
"""
import pytest
from httpx import AsyncClient
from fastapi import status
from starlette.datastructures import UploadFile as StarletteUploadFile

from product_api.core.settings import AppSettings, get_settings
from tests.factories.products_factory import build_csv
from tests.helpers.asserts import assert_success_response, assert_error_response, assert_import_report

IMPORT_URL = "/api/v1/products/import-csv"


def _upload(content: bytes, filename: str = "products.csv") -> dict:
    return {"file": (filename, content, "text/csv")}


# ============================================================================
# POST /api/v1/products/import-csv
# ============================================================================

@pytest.mark.asyncio
@pytest.mark.integration
async def test_import_csv_mixed_validity(async_client: AsyncClient):
    """✅ POST /import-csv - valid rows saved, invalid rows reported"""
    # Arrange
    content = build_csv([
        ["Laptop", "15 inch, 16GB RAM", "999.99", 5, "Electronics"],
        ["X", "Too short", "0", 1, "Electronics"],
    ])

    # Act
    response = await async_client.post(IMPORT_URL, files=_upload(content))

    # Assert
    assert_success_response(
        response,
        check_fields=["total_records", "valid_records", "invalid_records", "errors", "imported_products"]
    )
    data = response.json()
    assert_import_report(data, total=2, valid=1, invalid=1)
    assert "Product name must be at least 2 characters long" in data["errors"]
    imported = data["imported_products"][0]
    assert imported["id_product"] > 0
    assert imported["description"] == "15 inch, 16GB RAM"

    listing = await async_client.get("/api/v1/products/")
    assert listing.json()["total"] == 1


@pytest.mark.asyncio
@pytest.mark.integration
async def test_import_csv_missing_columns(async_client: AsyncClient):
    """✅ POST /import-csv - 200 with a single error when a required column is missing"""
    response = await async_client.post(IMPORT_URL, files=_upload(b"Name,Price\nLaptop,10\n"))

    assert_success_response(response)
    data = response.json()
    assert_import_report(data, total=0, valid=0, invalid=0)
    assert data["errors"] == ["Required columns (Name, Description, Price, Stock) not found in CSV"]


@pytest.mark.asyncio
@pytest.mark.integration
async def test_import_csv_without_file_400(async_client: AsyncClient):
    """❌ POST /import-csv - 400 when no file is sent"""
    response = await async_client.post(IMPORT_URL)

    assert_error_response(
        response,
        status_code=status.HTTP_400_BAD_REQUEST,
        error_code="INVALID_FILE",
        message_contains="No file uploaded"
    )


@pytest.mark.asyncio
@pytest.mark.integration
async def test_import_csv_empty_file_400(async_client: AsyncClient):
    """❌ POST /import-csv - 400 for a zero-byte file"""
    response = await async_client.post(IMPORT_URL, files=_upload(b""))

    assert_error_response(response, status_code=status.HTTP_400_BAD_REQUEST, message_contains="No file uploaded")


@pytest.mark.asyncio
@pytest.mark.integration
async def test_import_csv_wrong_extension_400(async_client: AsyncClient):
    """❌ POST /import-csv - 400 when the file name does not end in .csv"""
    response = await async_client.post(IMPORT_URL, files=_upload(build_csv([]), filename="products.txt"))

    assert_error_response(
        response,
        status_code=status.HTTP_400_BAD_REQUEST,
        error_code="INVALID_FILE",
        message_contains="File must be a CSV file"
    )


@pytest.mark.asyncio
@pytest.mark.integration
async def test_import_csv_extension_is_case_insensitive(async_client: AsyncClient):
    """✅ POST /import-csv - PRODUCTS.CSV is accepted"""
    content = build_csv([["Laptop", "Portable", "10", 1, "Electronics"]])

    response = await async_client.post(IMPORT_URL, files=_upload(content, filename="PRODUCTS.CSV"))

    assert_success_response(response)
    assert_import_report(response.json(), total=1, valid=1, invalid=0)


@pytest.mark.asyncio
@pytest.mark.integration
async def test_import_csv_too_large_400(test_app, async_client: AsyncClient):
    """❌ POST /import-csv - 400 above the configured size limit"""
    # Arrange
    test_app.dependency_overrides[get_settings] = lambda: AppSettings(csv_max_upload_bytes=64)
    content = build_csv([["Laptop", "Portable", "10", 1, "Electronics"]] * 10)

    # Act
    response = await async_client.post(IMPORT_URL, files=_upload(content))

    # Assert
    assert_error_response(
        response,
        status_code=status.HTTP_400_BAD_REQUEST,
        error_code="INVALID_FILE",
        message_contains="File size cannot exceed"
    )


@pytest.mark.asyncio
@pytest.mark.integration
async def test_import_csv_too_large_rejected_before_reading(test_app, async_client: AsyncClient, monkeypatch):
    """❌ POST /import-csv - oversized uploads are refused from their size, without reading them"""
    # Arrange
    async def read_not_allowed(self, size: int = -1) -> bytes:
        raise AssertionError("oversized upload was read")

    monkeypatch.setattr(StarletteUploadFile, "read", read_not_allowed)
    test_app.dependency_overrides[get_settings] = lambda: AppSettings(csv_max_upload_bytes=64)
    content = build_csv([["Laptop", "Portable", "10", 1, "Electronics"]] * 10)

    # Act
    response = await async_client.post(IMPORT_URL, files=_upload(content))

    # Assert
    assert_error_response(
        response,
        status_code=status.HTTP_400_BAD_REQUEST,
        error_code="INVALID_FILE",
        message_contains="File size cannot exceed"
    )


# ============================================================================
# GET /api/v1/products/import-csv/template
# ============================================================================

@pytest.mark.asyncio
@pytest.mark.integration
async def test_get_csv_template(async_client: AsyncClient):
    """✅ GET /import-csv/template - header-only CSV download"""
    response = await async_client.get(f"{IMPORT_URL}/template")

    assert response.status_code == status.HTTP_200_OK
    assert response.headers["content-type"].startswith("text/csv")
    assert "products_template.csv" in response.headers["content-disposition"]
    assert response.text == "Name,Description,Price,Stock,Category\n"

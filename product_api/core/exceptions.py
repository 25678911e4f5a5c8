"""
Centralized application error hierarchy.

Every exception carries a stable error code and renders to the JSON envelope
returned by the global handlers in ``product_api.main``.
"""
from abc import ABC
from typing import Optional, Dict, Any
from enum import Enum


class ErrorCode(Enum):
    """Standardized error codes"""
    # Validation errors
    VALIDATION_ERROR = "VALIDATION_ERROR"
    REQUIRED_FIELD_MISSING = "REQUIRED_FIELD_MISSING"
    INVALID_FILE = "INVALID_FILE"

    # Business logic errors
    BUSINESS_RULE_VIOLATION = "BUSINESS_RULE_VIOLATION"

    # Not found errors
    ENTITY_NOT_FOUND = "ENTITY_NOT_FOUND"
    PRODUCT_NOT_FOUND = "PRODUCT_NOT_FOUND"

    # Infrastructure errors
    DATABASE_ERROR = "DATABASE_ERROR"


class BaseApplicationException(Exception, ABC):
    """Base exception for the application"""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.VALIDATION_ERROR,
        details: Optional[Dict[str, Any]] = None,
        status_code: int = 400
    ):
        self.message = message
        self.error_code = error_code.value
        self.details = details or {}
        self.status_code = status_code
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Render the exception as the API error envelope"""
        return {
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details,
            "status_code": self.status_code
        }


class DomainException(BaseApplicationException):
    """Business domain errors"""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.BUSINESS_RULE_VIOLATION,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message, error_code, details, 400)


class ValidationException(DomainException):
    """Invalid caller input"""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.VALIDATION_ERROR,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message, error_code, details)


class BusinessRuleException(DomainException):
    """Business rule violation"""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.BUSINESS_RULE_VIOLATION,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message, error_code, details)


class NotFoundException(BaseApplicationException):
    """Entity not found"""

    def __init__(
        self,
        entity_type: str,
        entity_id: Any = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if entity_id is not None:
            message = f"{entity_type} with ID {entity_id} not found"
        else:
            message = f"{entity_type} not found"

        error_details = details or {}
        if entity_id is not None:
            error_details["entity_id"] = entity_id
        error_details["entity_type"] = entity_type

        super().__init__(
            message,
            ErrorCode.ENTITY_NOT_FOUND,
            error_details,
            404
        )


class InfrastructureException(BaseApplicationException):
    """Storage and other infrastructure failures"""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.DATABASE_ERROR,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message, error_code, details, 500)


class ExceptionFactory:
    """Shortcuts for the exceptions raised by the product surface"""

    @staticmethod
    def product_not_found(product_id: int) -> NotFoundException:
        return NotFoundException("Product", product_id)

    @staticmethod
    def product_required() -> ValidationException:
        return ValidationException(
            "Product cannot be null",
            ErrorCode.REQUIRED_FIELD_MISSING,
            {"field_name": "product"}
        )

    @staticmethod
    def product_validation_failed(errors: list) -> ValidationException:
        return ValidationException(
            f"Validation failed: {', '.join(errors)}",
            ErrorCode.VALIDATION_ERROR,
            {"errors": list(errors)}
        )

    @staticmethod
    def invalid_upload(reason: str, filename: Optional[str] = None) -> ValidationException:
        return ValidationException(
            reason,
            ErrorCode.INVALID_FILE,
            {"filename": filename}
        )

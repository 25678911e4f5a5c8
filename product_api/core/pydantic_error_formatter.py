"""
Pydantic error formatting.

Turns the raw error dictionaries produced by pydantic (``ValidationError.errors()``
or ``RequestValidationError.errors()``) into readable messages, both for the
422 response envelope and for the product validator's error list.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Any, Tuple, Optional


@dataclass(frozen=True)
class PydanticErrorData:
    """
    Pydantic errors grouped by kind.

    Attributes:
        missing_fields: required fields that are missing or empty
        constraint_errors: field -> message for length/range violations
        invalid_fields: field -> message for every other failure
        raw_errors: the original error dictionaries
    """
    missing_fields: List[str]
    constraint_errors: Dict[str, str]
    invalid_fields: Dict[str, str]
    raw_errors: List[Dict[str, Any]]


class PydanticErrorParser:
    """Parses and categorizes pydantic errors (SRP)"""

    CONSTRAINT_TYPES: Tuple[str, ...] = (
        'string_too_long', 'string_too_short', 'greater_than', 'greater_than_equal',
        'less_than', 'less_than_equal', 'too_long', 'too_short',
    )

    @staticmethod
    def extract_field_path(loc: Tuple[Any, ...]) -> str:
        """
        Dot-separated field path without the request location prefix.

        ('body', 'price') -> 'price'
        """
        path_parts = [str(part) for part in loc if part not in ('body', 'query', 'path', 'header')]
        if not path_parts:
            return 'unknown'
        return '.'.join(path_parts)

    @staticmethod
    def is_missing(error: Dict[str, Any]) -> bool:
        """A required value that was not supplied, None, or blank"""
        if error.get('type') == 'missing' or error.get('input') is None:
            return True
        ctx = error.get('ctx') or {}
        return error.get('type') == 'string_too_short' and ctx.get('min_length') == 1

    @staticmethod
    def parse_errors(pydantic_errors: List[Dict[str, Any]]) -> PydanticErrorData:
        missing_fields: List[str] = []
        constraint_errors: Dict[str, str] = {}
        invalid_fields: Dict[str, str] = {}

        for error in pydantic_errors:
            field_path = PydanticErrorParser.extract_field_path(error.get('loc', ()))
            message = error.get('msg', 'Validation error')

            if PydanticErrorParser.is_missing(error):
                if field_path not in missing_fields:
                    missing_fields.append(field_path)
            elif error.get('type') in PydanticErrorParser.CONSTRAINT_TYPES:
                constraint_errors[field_path] = message
            elif field_path not in invalid_fields:
                invalid_fields[field_path] = message

        return PydanticErrorData(
            missing_fields=sorted(missing_fields),
            constraint_errors=constraint_errors,
            invalid_fields=invalid_fields,
            raw_errors=pydantic_errors,
        )


class PydanticErrorFormatter:
    """Formats pydantic errors for API responses and validators"""

    @staticmethod
    def field_label(field_path: str, labels: Optional[Dict[str, str]] = None) -> str:
        if labels and field_path in labels:
            return labels[field_path]
        return field_path.replace('_', ' ').capitalize()

    @staticmethod
    def field_message(error: Dict[str, Any], labels: Optional[Dict[str, str]] = None) -> str:
        """
        One sentence per pydantic error, naming the field.

        >>> PydanticErrorFormatter.field_message({'loc': ('price',), 'type': 'greater_than', 'ctx': {'gt': 0}, 'input': 0})
        'Price must be greater than 0'
        """
        label = PydanticErrorFormatter.field_label(
            PydanticErrorParser.extract_field_path(error.get('loc', ())), labels
        )
        error_type = error.get('type')
        ctx = error.get('ctx') or {}

        if PydanticErrorParser.is_missing(error):
            return f"{label} is required"
        if error_type == 'string_too_long':
            return f"{label} must be at most {ctx.get('max_length')} characters long"
        if error_type == 'string_too_short':
            return f"{label} must be at least {ctx.get('min_length')} characters long"
        if error_type == 'greater_than':
            return f"{label} must be greater than {ctx.get('gt')}"
        if error_type == 'greater_than_equal':
            return f"{label} must be greater than or equal to {ctx.get('ge')}"
        return f"{label}: {error.get('msg', 'invalid value')}"

    @staticmethod
    def field_messages(pydantic_errors: List[Dict[str, Any]], labels: Optional[Dict[str, str]] = None) -> List[str]:
        return [PydanticErrorFormatter.field_message(error, labels) for error in pydantic_errors]

    @staticmethod
    def format_message(error_data: PydanticErrorData) -> str:
        message_parts: List[str] = []

        if error_data.missing_fields:
            message_parts.append(f"missing fields: {', '.join(error_data.missing_fields)}")

        if error_data.constraint_errors:
            items = [f"{field} ({msg})" for field, msg in error_data.constraint_errors.items()]
            message_parts.append(f"constraint violation for {', '.join(items)}")

        if error_data.invalid_fields:
            items = [f"{field} ({msg})" for field, msg in error_data.invalid_fields.items()]
            message_parts.append(f"invalid value for {', '.join(items)}")

        if not message_parts:
            return "Validation failed"

        return f"Validation failed: {'; '.join(message_parts)}"

    @staticmethod
    def format(pydantic_errors: List[Dict[str, Any]], error_code: str = "VALIDATION_ERROR") -> Dict[str, Any]:
        """Complete 422 response envelope"""
        error_data = PydanticErrorParser.parse_errors(pydantic_errors)

        return {
            "error_code": error_code,
            "message": PydanticErrorFormatter.format_message(error_data),
            "details": {
                "missing_fields": error_data.missing_fields,
                "constraint_errors": error_data.constraint_errors,
                "invalid_fields": error_data.invalid_fields,
            },
            "status_code": 422
        }

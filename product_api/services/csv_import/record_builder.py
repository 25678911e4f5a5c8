"""
Builds candidate products from parsed CSV fields.

Numbers are parsed without locale: '.' is the only decimal separator and
thousands separators or exponents are rejected.
"""
from __future__ import annotations

import re
from decimal import Decimal, InvalidOperation
from typing import List, Optional, Tuple

from product_api.models.product import Product

from .models import ColumnIndices

_INTEGER_PATTERN = re.compile(r'^[+-]?\d+$')
_DECIMAL_PATTERN = re.compile(r'^[+-]?(\d+(\.\d*)?|\.\d+)$')


class ProductRecordBuilder:
    """
    Maps CSV fields to a transient Product.

    Stateless, every method is static. Validation is left to the validator:
    the builder only reports lines it cannot turn into a product at all.
    """

    @staticmethod
    def build(
        values: List[str],
        columns: ColumnIndices,
        line_number: int
    ) -> Tuple[Optional[Product], Optional[str]]:
        """
        Build the candidate product for one data line.

        Args:
            values: fields of the line, as returned by CSVParser.parse_line
            columns: resolved header positions (required ones all set)
            line_number: 1-based line number in the file, for error messages

        Returns:
            (product, None) on success, (None, error message) otherwise
        """
        if len(values) < columns.min_field_count:
            return None, f"Line {line_number}: Insufficient columns"

        try:
            price = ProductRecordBuilder.parse_decimal(values[columns.price])
            stock = ProductRecordBuilder.parse_int(values[columns.stock])
        except ValueError as e:
            return None, f"Line {line_number}: {e}"

        category = None
        if columns.category is not None and columns.category < len(values):
            category = values[columns.category].strip()

        product = Product(
            name=values[columns.name].strip(),
            description=values[columns.description].strip(),
            price=price,
            stock=stock,
            category=category,
        )
        return product, None

    @staticmethod
    def parse_decimal(value: str) -> Decimal:
        """
        Raises:
            ValueError: if the value is not a plain decimal number
        """
        text = value.strip()
        if not _DECIMAL_PATTERN.match(text):
            raise ValueError(f"Cannot convert '{text}' to decimal")
        try:
            return Decimal(text)
        except InvalidOperation:
            raise ValueError(f"Cannot convert '{text}' to decimal")

    @staticmethod
    def parse_int(value: str) -> int:
        """
        Raises:
            ValueError: if the value is not a plain integer
        """
        text = value.strip()
        if not _INTEGER_PATTERN.match(text):
            raise ValueError(f"Cannot convert '{text}' to int")
        return int(text)

"""
CSV line parsing and header resolution for the product import.

Only the minimal quoting rule is supported: a double quote toggles a quoted
section in which the delimiter is plain data. Doubled quotes are not an escape.
"""
from __future__ import annotations

from typing import List, Optional

from .models import ColumnIndices


class CSVParser:
    """
    Stateless parser, all methods are static.
    """

    DEFAULT_DELIMITER = ','
    QUOTE = '"'

    NAME_COLUMN = 'Name'
    DESCRIPTION_COLUMN = 'Description'
    PRICE_COLUMN = 'Price'
    STOCK_COLUMN = 'Stock'
    CATEGORY_COLUMN = 'Category'

    REQUIRED_COLUMNS = [NAME_COLUMN, DESCRIPTION_COLUMN, PRICE_COLUMN, STOCK_COLUMN]
    TEMPLATE_COLUMNS = REQUIRED_COLUMNS + [CATEGORY_COLUMN]

    @staticmethod
    def parse_line(line: str, delimiter: str = DEFAULT_DELIMITER) -> List[str]:
        """
        Split one CSV line into fields.

        Args:
            line: line without its terminator
            delimiter: field separator

        Returns:
            Field values, at least one (the whole line when there is no delimiter)
        """
        fields: List[str] = []
        current: List[str] = []
        in_quotes = False

        for char in line:
            if char == CSVParser.QUOTE:
                in_quotes = not in_quotes
            elif char == delimiter and not in_quotes:
                fields.append(''.join(current))
                current = []
            else:
                current.append(char)

        fields.append(''.join(current))
        return fields

    @staticmethod
    def get_column_index(headers: List[str], column_name: str) -> Optional[int]:
        """
        Position of the first header equal to column_name, ignoring case and
        surrounding whitespace.

        Returns:
            Zero-based index, or None when the column is not declared
        """
        target = column_name.strip().casefold()
        for index, header in enumerate(headers):
            if header.strip().casefold() == target:
                return index
        return None

    @staticmethod
    def resolve_columns(headers: List[str]) -> ColumnIndices:
        """Resolve the positions of every known product column"""
        return ColumnIndices(
            name=CSVParser.get_column_index(headers, CSVParser.NAME_COLUMN),
            description=CSVParser.get_column_index(headers, CSVParser.DESCRIPTION_COLUMN),
            price=CSVParser.get_column_index(headers, CSVParser.PRICE_COLUMN),
            stock=CSVParser.get_column_index(headers, CSVParser.STOCK_COLUMN),
            category=CSVParser.get_column_index(headers, CSVParser.CATEGORY_COLUMN),
        )

    @staticmethod
    def generate_template(delimiter: str = DEFAULT_DELIMITER) -> str:
        """Header-only CSV ready to be filled with products"""
        return delimiter.join(CSVParser.TEMPLATE_COLUMNS) + '\n'

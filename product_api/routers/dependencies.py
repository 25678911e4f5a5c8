"""
Router constants
"""
from product_api.core.settings import get_settings

# Pagination
LIMIT_DEFAULT = get_settings().default_page_limit
MAX_LIMIT = get_settings().max_page_limit

CSV_EXTENSION = ".csv"

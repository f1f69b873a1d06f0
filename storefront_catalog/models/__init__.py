"""
Data models for the catalog.

This module contains pure data classes with no business logic.
"""

from .product import (
    Category,
    CategorySummary,
    Product,
    ProductSeo,
    ProductSpecifications,
    has_specifications,
)
from .listing import FilterOptions, ProductPage
from .results import (
    SKIP_MISSING_TITLE,
    SKIP_UNCATEGORIZED,
    SKIP_UNNAMED_CATEGORY,
    RowOk,
    RowResult,
    RowSkipped,
)

__all__ = [
    'Product',
    'ProductSeo',
    'ProductSpecifications',
    'has_specifications',
    'Category',
    'CategorySummary',
    'ProductPage',
    'FilterOptions',
    'RowOk',
    'RowSkipped',
    'RowResult',
    'SKIP_MISSING_TITLE',
    'SKIP_UNNAMED_CATEGORY',
    'SKIP_UNCATEGORIZED',
]

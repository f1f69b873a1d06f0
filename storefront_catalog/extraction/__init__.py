"""
Record extraction modules for the storefront exports.

Modules:
    normalizer - ProductNormalizer and category normalization
    category_matcher - Resolve taxonomy values to main categories
    parsers - Specification parsers for description HTML
"""

from .category_matcher import (
    CATEGORY_ALIASES,
    MAIN_CATEGORIES,
    UNCATEGORIZED,
    CategoryMatcher,
)
from .normalizer import (
    PRICE_FALLBACK,
    STOCK_FALLBACK,
    ProductNormalizer,
    normalize_categories,
    normalize_category,
)
from .parsers import StructuredSpecParser, TableSpecParser, extract_specifications

__all__ = [
    # Normalization
    'ProductNormalizer',
    'normalize_category',
    'normalize_categories',
    'PRICE_FALLBACK',
    'STOCK_FALLBACK',
    # Category matching
    'CategoryMatcher',
    'MAIN_CATEGORIES',
    'CATEGORY_ALIASES',
    'UNCATEGORIZED',
    # Parsers
    'StructuredSpecParser',
    'TableSpecParser',
    'extract_specifications',
]

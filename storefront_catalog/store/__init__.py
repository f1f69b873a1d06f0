"""
Catalog store: loading, querying and serializing products and categories.

Modules:
    loader - load_products / load_categories entry points
    queries - storefront filtering, pagination and admin summaries
    serializers - camelCase JSON shapes for the storefront
"""

from .loader import (
    load_categories,
    load_category_summaries,
    load_product_results,
    load_products,
)
from .queries import (
    category_slug,
    filter_options,
    filter_products,
    find_category_by_slug,
    find_product_by_slug,
    paginate,
    summarize_categories,
)
from .serializers import (
    category_summary_to_dict,
    category_to_dict,
    filter_options_to_dict,
    product_page_to_dict,
    product_to_dict,
)

__all__ = [
    # Loading
    'load_products',
    'load_product_results',
    'load_categories',
    'load_category_summaries',
    # Queries
    'category_slug',
    'filter_products',
    'paginate',
    'filter_options',
    'find_product_by_slug',
    'find_category_by_slug',
    'summarize_categories',
    # Serialization
    'product_to_dict',
    'category_to_dict',
    'category_summary_to_dict',
    'product_page_to_dict',
    'filter_options_to_dict',
]

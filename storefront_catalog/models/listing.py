"""
Listing data models.

Results of storefront queries over loaded products.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from .product import Product


@dataclass
class ProductPage:
    """One page of a filtered product list."""
    items: List[Product] = field(default_factory=list)
    page: int = 1
    limit: int = 21
    total: int = 0
    total_pages: int = 0


@dataclass
class FilterOptions:
    """Available filter values for a product list."""
    brands: List[str] = field(default_factory=list)
    min_price: Optional[int] = None     # floor of the lowest price
    max_price: Optional[int] = None     # ceil of the highest price

"""
Catalog Queries

Read-side helpers the storefront and admin pages apply to loaded records:
category slug matching, product filtering and pagination, filter options,
slug lookups and the admin category summary.
"""

import math
import re
from typing import Iterable, List, Optional

from ..models import Category, CategorySummary, FilterOptions, Product, ProductPage

DEFAULT_PAGE_SIZE = 21
DEFAULT_MAX_PRICE = 999999


def category_slug(name: str) -> str:
    """
    Convert a category name to the slug used in storefront URLs.

    Example:
        >>> category_slug("GROWTH HORMONES (HGH) AND PEPTIDES")
        'growth-hormones-hgh-and-peptides'
    """
    slug = re.sub(r'\s+', '-', name.lower())
    return re.sub(r'[^\w-]', '', slug, flags=re.ASCII)


def filter_products(
    products: List[Product],
    category: Optional[str] = None,
    search: Optional[str] = None,
    brands: Optional[Iterable[str]] = None,
    min_price: float = 0,
    max_price: float = DEFAULT_MAX_PRICE,
    in_stock: bool = False,
) -> List[Product]:
    """
    Filter products the way the storefront listing does.

    Args:
        products: Loaded products
        category: Category slug (compared with category_slug(product.category))
        search: Case-insensitive substring of name or brand
        brands: Brand names to keep (case-insensitive)
        min_price: Inclusive lower price bound
        max_price: Inclusive upper price bound
        in_stock: Keep only products with stock > 0

    Returns:
        Matching products, order preserved
    """
    result = products

    if category:
        wanted = category.lower()
        result = [p for p in result if category_slug(p.category) == wanted]

    if search:
        needle = search.lower()
        result = [
            p for p in result
            if needle in p.name.lower() or (p.brand and needle in p.brand.lower())
        ]

    if brands:
        selected = {b.strip().lower() for b in brands if b.strip()}
        if selected:
            result = [p for p in result if p.brand and p.brand.lower() in selected]

    result = [p for p in result if min_price <= p.price <= max_price]

    if in_stock:
        result = [p for p in result if p.stock > 0]

    return result


def paginate(products: List[Product], page: int = 1, limit: int = DEFAULT_PAGE_SIZE) -> ProductPage:
    """Slice one page out of a product list (pages start at 1)."""
    page = max(page, 1)
    limit = max(limit, 1)
    total = len(products)
    start = (page - 1) * limit

    return ProductPage(
        items=products[start:start + limit],
        page=page,
        limit=limit,
        total=total,
        total_pages=math.ceil(total / limit),
    )


def filter_options(products: List[Product], category: Optional[str] = None) -> FilterOptions:
    """
    Brand list and price range for the filter sidebar.

    Args:
        products: Loaded products
        category: Optional category slug to restrict to

    Returns:
        FilterOptions with sorted unique brands and whole-number price bounds
    """
    if category:
        products = filter_products(products, category=category, max_price=math.inf)

    brands = sorted({p.brand for p in products if p.brand})
    if not products:
        return FilterOptions(brands=brands)

    prices = [p.price for p in products]
    return FilterOptions(
        brands=brands,
        min_price=math.floor(min(prices)),
        max_price=math.ceil(max(prices)),
    )


def find_product_by_slug(products: List[Product], slug: str) -> Optional[Product]:
    return next((p for p in products if p.slug == slug), None)


def find_category_by_slug(categories: List[Category], slug: str) -> Optional[Category]:
    return next((c for c in categories if c.slug == slug), None)


def summarize_categories(categories: List[Category], products: List[Product]) -> List[CategorySummary]:
    """
    Build the admin category list.

    Only top-level categories are listed. A category's count covers
    products assigned to it directly plus products assigned to any of its
    direct children, matched by exact category name. Categories without
    products are left out.

    Args:
        categories: Loaded categories
        products: Loaded products

    Returns:
        CategorySummary list in category export order
    """
    counts = {}
    for product in products:
        counts[product.category] = counts.get(product.category, 0) + 1

    summaries = []
    for category in categories:
        if not category.is_top_level:
            continue

        children = [c for c in categories if c.parent == category.id]
        total = counts.get(category.name, 0) + sum(counts.get(c.name, 0) for c in children)
        if total == 0:
            continue

        summaries.append(CategorySummary(
            category=category,
            product_count=total,
            subcategory_count=len(children),
        ))

    return summaries

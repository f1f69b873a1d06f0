"""
Record Normalizer

Turns raw export records into Product and Category models.

Each record yields one row result (RowOk or RowSkipped); a failing row
never aborts the batch. Incomplete data is defaulted rather than rejected:
- Missing or non-positive price -> PRICE_FALLBACK
- Missing or zero stock -> STOCK_FALLBACK
- Negative stock -> STOCK_FALLBACK

Zero stock in the export is indistinguishable from "not filled in", so a
genuinely sold-out product is reported with STOCK_FALLBACK units. Kept for
compatibility with the storefront until product owners decide otherwise.

Negative stock is a separate rule, not part of the zero quirk: a negative
count is never passed through and is reported as STOCK_FALLBACK too.
"""

from __future__ import annotations

import logging
import re
from typing import Dict, List, Optional

from ..common.text_utils import capitalize_words, clean_optional, slugify_title
from ..models import (
    SKIP_MISSING_TITLE,
    SKIP_UNCATEGORIZED,
    SKIP_UNNAMED_CATEGORY,
    Category,
    Product,
    ProductSeo,
    RowOk,
    RowResult,
    RowSkipped,
)
from .category_matcher import CategoryMatcher
from .parsers import extract_specifications

logger = logging.getLogger(__name__)

PRICE_FALLBACK = 50.0
STOCK_FALLBACK = 100

BOM = '\ufeff'

# Product export columns
COL_ID = 'ID'
COL_TITLE = 'post_title'
COL_SLUG = 'post_name'
COL_PRICE = 'regular_price'
COL_STOCK = 'stock'
COL_IMAGES = 'images'
COL_CATEGORIES = 'tax:product_cat'
COL_BRAND = 'tax:product_brand'
COL_TAGS = 'tax:product_tag'
COL_EXCERPT = 'post_excerpt'
COL_CONTENT = 'post_content'

# ProductSeo field -> export column
SEO_COLUMNS = {
    'title': 'meta:_aioseo_title',
    'description': 'meta:_aioseo_description',
    'keywords': 'meta:_aioseo_keywords',
    'og_title': 'meta:_aioseo_og_title',
    'og_description': 'meta:_aioseo_og_description',
    'twitter_title': 'meta:_aioseo_twitter_title',
    'twitter_description': 'meta:_aioseo_twitter_description',
}

# Category export columns
COL_TERM_ID = 'term_id'
COL_NAME = 'name'
COL_TERM_SLUG = 'slug'
COL_DESCRIPTION = 'description'
COL_PARENT = 'parent'

# Leading numeric prefix, so "19.99 EUR" reads as 19.99 and "7.5" as stock 7
_DECIMAL_PREFIX = re.compile(r'\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)')
_INTEGER_PREFIX = re.compile(r'\s*([+-]?\d+)')
_IMAGE_URL = re.compile(r'https?://[^\s!]+')


def get_field(row: Dict[str, str], column: str) -> str:
    """
    Get a column value, accepting a BOM-prefixed header name.

    The export's first header carries a UTF-8 byte-order mark.
    """
    value = row.get(column)
    if not value:
        value = row.get(BOM + column)
    return value or ''


def parse_price(raw: Optional[str]) -> float:
    """
    Parse a price, falling back to PRICE_FALLBACK.

    Example:
        >>> parse_price("19.99")
        19.99
        >>> parse_price("-5")
        50.0
    """
    match = _DECIMAL_PREFIX.match(raw or '')
    price = float(match.group(1)) if match else 0.0
    if price <= 0:
        return PRICE_FALLBACK
    return price


def parse_stock(raw: Optional[str]) -> int:
    """
    Parse a stock quantity, falling back to STOCK_FALLBACK.

    "0", empty and unparseable values all mean "unknown" in the export.
    Negative values are not passed through either.
    """
    match = _INTEGER_PREFIX.match(raw or '')
    stock = int(match.group(1)) if match else 0
    if stock <= 0:
        return STOCK_FALLBACK
    return stock


def extract_image_urls(raw: Optional[str]) -> List[str]:
    """
    Extract image URLs from the pipe-delimited images column.

    Each segment holds a URL surrounded by decorative text, e.g.
    "https://cdn.example.com/a.jpg ! alt : Anavar ! title : Anavar".
    Segments without a URL are ignored.
    """
    if not raw:
        return []

    urls = []
    for segment in raw.split('|'):
        match = _IMAGE_URL.search(segment)
        if match:
            urls.append(match.group(0).strip())
    return urls


def split_tags(raw: Optional[str]) -> Optional[List[str]]:
    """Split pipe-delimited tags, dropping empties. None if no tags remain."""
    if not raw:
        return None
    tags = [tag.strip() for tag in raw.split('|') if tag.strip()]
    return tags or None


def build_seo(row: Dict[str, str]) -> Optional[ProductSeo]:
    seo = ProductSeo(**{
        field_name: clean_optional(row.get(column))
        for field_name, column in SEO_COLUMNS.items()
    })
    return None if seo.is_empty() else seo


class ProductNormalizer:
    """
    Normalizes product export records.

    Usage:
        normalizer = ProductNormalizer()
        results = normalizer.normalize_all(records)
        products = [r.value for r in results if isinstance(r, RowOk)]
    """

    def __init__(self, category_matcher: Optional[CategoryMatcher] = None):
        self.category_matcher = category_matcher or CategoryMatcher()

    def normalize(self, row: Dict[str, str], index: int) -> RowResult:
        """
        Normalize one record.

        Args:
            row: Raw record keyed by column name
            index: 0-based record index (used for synthesized ids)

        Returns:
            RowOk with the Product, or RowSkipped with the reason
        """
        title = get_field(row, COL_TITLE).strip()
        if not title:
            return RowSkipped(index, SKIP_MISSING_TITLE)

        try:
            product = self._build_product(row, index, title)
        except Exception as e:
            logger.debug("Skipping product row %d: %s", index, e)
            return RowSkipped(index, f"error: {e}")

        return RowOk(index, product)

    def normalize_all(self, records: List[Dict[str, str]]) -> List[RowResult]:
        return [self.normalize(row, index) for index, row in enumerate(records)]

    def _build_product(self, row: Dict[str, str], index: int, title: str) -> Product:
        short_description = clean_optional(row.get(COL_EXCERPT))
        content = clean_optional(row.get(COL_CONTENT))

        return Product(
            id=get_field(row, COL_ID).strip() or f"product-{index}",
            name=capitalize_words(title),
            slug=get_field(row, COL_SLUG).strip() or slugify_title(title),
            price=parse_price(row.get(COL_PRICE)),
            stock=parse_stock(row.get(COL_STOCK)),
            images=extract_image_urls(row.get(COL_IMAGES)),
            category=self.category_matcher.match(row.get(COL_CATEGORIES, '')),
            brand=clean_optional(row.get(COL_BRAND)),
            tags=split_tags(row.get(COL_TAGS)),
            description=short_description or content,
            short_description=short_description,
            content=content,
            specifications=extract_specifications(short_description, content),
            seo=build_seo(row),
        )


def normalize_category(row: Dict[str, str], index: int) -> RowResult:
    """
    Normalize one category export record.

    Rows without a name and the "Uncategorized" placeholder are skipped.
    """
    name = get_field(row, COL_NAME).strip()
    if not name:
        return RowSkipped(index, SKIP_UNNAMED_CATEGORY)
    if name == 'Uncategorized':
        return RowSkipped(index, SKIP_UNCATEGORIZED)

    try:
        category = Category(
            id=get_field(row, COL_TERM_ID).strip(),
            name=name,
            slug=get_field(row, COL_TERM_SLUG).strip(),
            description=clean_optional(row.get(COL_DESCRIPTION)),
            parent=get_field(row, COL_PARENT).strip() or '0',
        )
    except Exception as e:
        logger.debug("Skipping category row %d: %s", index, e)
        return RowSkipped(index, f"error: {e}")

    return RowOk(index, category)


def normalize_categories(records: List[Dict[str, str]]) -> List[RowResult]:
    return [normalize_category(row, index) for index, row in enumerate(records)]

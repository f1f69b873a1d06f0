"""
Catalog data models.

Pure data classes for representing normalized catalog records.
No business logic beyond simple presence checks.
"""

from dataclasses import dataclass, field, fields
from typing import List, Optional


@dataclass
class ProductSpecifications:
    """Specification fields pulled out of product description HTML."""
    company: Optional[str] = None
    dosage: Optional[str] = None
    product_pack: Optional[str] = None   # "Detection time" in table-format descriptions
    content: Optional[str] = None        # Active substance

    def found_fields(self) -> List[str]:
        """Names of the fields that carry a value."""
        return [f.name for f in fields(self) if getattr(self, f.name)]

    def is_complete(self) -> bool:
        return len(self.found_fields()) == len(fields(self))


def has_specifications(specs: Optional[ProductSpecifications]) -> bool:
    """Return True if at least one specification field is present."""
    if specs is None:
        return False
    return bool(specs.found_fields())


@dataclass
class ProductSeo:
    """SEO overrides from the export's meta columns."""
    title: Optional[str] = None
    description: Optional[str] = None
    keywords: Optional[str] = None
    og_title: Optional[str] = None
    og_description: Optional[str] = None
    twitter_title: Optional[str] = None
    twitter_description: Optional[str] = None

    def is_empty(self) -> bool:
        return not any(getattr(self, f.name) for f in fields(self))


@dataclass
class Product:
    """
    Normalized storefront product.

    Field Groups:
    - Core fields: id, name, slug, price, stock, category
    - Media: image URLs in export order
    - Content: description HTML carried through from the export
    - Derived: specifications, SEO overrides
    """

    # Core fields (required)
    id: str
    name: str
    slug: str
    price: float
    stock: int
    category: str
    images: List[str] = field(default_factory=list)

    brand: Optional[str] = None
    tags: Optional[List[str]] = None

    # Content sections (HTML, trimmed)
    description: Optional[str] = None
    short_description: Optional[str] = None
    content: Optional[str] = None

    specifications: Optional[ProductSpecifications] = None
    seo: Optional[ProductSeo] = None

    def __post_init__(self):
        """Validate required fields after initialization."""
        if not self.name:
            raise ValueError("Product name is required")
        if not self.slug:
            raise ValueError("Product slug is required")


@dataclass
class Category:
    """Category from the category export. parent "0" means top level."""
    id: str
    name: str
    slug: str
    description: Optional[str] = None
    parent: str = "0"

    @property
    def is_top_level(self) -> bool:
        return self.parent == "0"


@dataclass
class CategorySummary:
    """Top-level category with product counts for the admin category list."""
    category: Category
    product_count: int = 0
    subcategory_count: int = 0

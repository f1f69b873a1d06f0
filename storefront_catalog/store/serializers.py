"""
JSON Serializers

Convert catalog models to the camelCase dictionaries the storefront
and admin pages consume. Absent optional values are omitted.
"""

from typing import Any, Dict, Optional

from ..models import (
    Category,
    CategorySummary,
    FilterOptions,
    Product,
    ProductPage,
    ProductSeo,
    ProductSpecifications,
)

SPECIFICATION_KEYS = {
    'company': 'company',
    'dosage': 'dosage',
    'product_pack': 'productPack',
    'content': 'content',
}

SEO_KEYS = {
    'title': 'title',
    'description': 'description',
    'keywords': 'keywords',
    'og_title': 'ogTitle',
    'og_description': 'ogDescription',
    'twitter_title': 'twitterTitle',
    'twitter_description': 'twitterDescription',
}


def _compact(data: Dict[str, Any]) -> Dict[str, Any]:
    return {key: value for key, value in data.items() if value is not None}


def _rename(obj: Any, keys: Dict[str, str]) -> Dict[str, Any]:
    return _compact({json_key: getattr(obj, attr) for attr, json_key in keys.items()})


def specifications_to_dict(specs: Optional[ProductSpecifications]) -> Dict[str, str]:
    if specs is None:
        return {}
    return _rename(specs, SPECIFICATION_KEYS)


def seo_to_dict(seo: Optional[ProductSeo]) -> Optional[Dict[str, str]]:
    if seo is None:
        return None
    return _rename(seo, SEO_KEYS)


def product_to_dict(product: Product) -> Dict[str, Any]:
    """
    Convert a product to its JSON shape.

    Example:
        {'id': '101', 'name': 'Anavar 10mg', 'slug': 'anavar-10mg',
         'price': 45.0, 'stock': 100, 'images': [...],
         'category': 'ORAL STEROIDS', 'specifications': {'dosage': '10mg'}}
    """
    return _compact({
        'id': product.id,
        'name': product.name,
        'slug': product.slug,
        'price': product.price,
        'stock': product.stock,
        'images': list(product.images),
        'category': product.category,
        'brand': product.brand,
        'description': product.description,
        'shortDescription': product.short_description,
        'content': product.content,
        'tags': list(product.tags) if product.tags else None,
        'specifications': specifications_to_dict(product.specifications),
        'seo': seo_to_dict(product.seo),
    })


def category_to_dict(category: Category) -> Dict[str, Any]:
    return _compact({
        'id': category.id,
        'name': category.name,
        'slug': category.slug,
        'description': category.description,
        'parent': category.parent,
    })


def category_summary_to_dict(summary: CategorySummary) -> Dict[str, Any]:
    data = category_to_dict(summary.category)
    data['productCount'] = summary.product_count
    data['subcategoryCount'] = summary.subcategory_count
    return data


def product_page_to_dict(page: ProductPage) -> Dict[str, Any]:
    return {
        'data': [product_to_dict(p) for p in page.items],
        'pagination': {
            'page': page.page,
            'limit': page.limit,
            'total': page.total,
            'totalPages': page.total_pages,
        },
    }


def filter_options_to_dict(options: FilterOptions) -> Dict[str, Any]:
    return {
        'brands': list(options.brands),
        'priceRange': {
            'min': options.min_price,
            'max': options.max_price,
        },
    }

"""Tests for storefront_catalog/store/queries.py"""

import pytest

from storefront_catalog.models import Product
from storefront_catalog.store.queries import (
    DEFAULT_PAGE_SIZE,
    category_slug,
    filter_options,
    filter_products,
    find_category_by_slug,
    find_product_by_slug,
    paginate,
    summarize_categories,
)


def ids(products):
    return [p.id for p in products]


class TestCategorySlug:
    @pytest.mark.parametrize("name,expected", [
        ("ORAL STEROIDS", "oral-steroids"),
        ("Oral Steroids", "oral-steroids"),
        ("GROWTH HORMONES (HGH) AND PEPTIDES", "growth-hormones-hgh-and-peptides"),
        ("ANTIANXIETY, SLEEP AID - INSOMNIA", "antianxiety-sleep-aid---insomnia"),
    ])
    def test_slug(self, name, expected):
        assert category_slug(name) == expected


class TestFilterProducts:
    def test_no_filters(self, sample_products):
        assert ids(filter_products(sample_products)) == ["1", "2", "3", "4", "5"]

    def test_category_matches_any_spelling(self, sample_products):
        assert ids(filter_products(sample_products, category="oral-steroids")) == ["1", "2"]

    def test_category_with_punctuation(self, sample_products):
        result = filter_products(sample_products, category="growth-hormones-hgh-and-peptides")
        assert ids(result) == ["4"]

    def test_search_name_or_brand(self, sample_products):
        assert ids(filter_products(sample_products, search="PHARMACOM")) == ["1", "3"]
        assert ids(filter_products(sample_products, search="masteron")) == ["3"]

    def test_brands(self, sample_products):
        assert ids(filter_products(sample_products, brands=["pharmacom labs"])) == ["1", "3"]

    def test_blank_brands_ignored(self, sample_products):
        assert len(filter_products(sample_products, brands=[" "])) == 5

    def test_price_range_inclusive(self, sample_products):
        assert ids(filter_products(sample_products, min_price=45.5, max_price=50)) == ["1", "5"]

    def test_in_stock(self, sample_products):
        sold_out = Product(id="6", name="Sold Out", slug="sold-out", price=10.0, stock=0,
                           category="ACNE")
        result = filter_products(sample_products + [sold_out], in_stock=True)
        assert "6" not in ids(result)

    def test_combined(self, sample_products):
        result = filter_products(sample_products, category="oral-steroids", search="anavar")
        assert ids(result) == ["1"]


class TestPaginate:
    def test_defaults(self, sample_products):
        page = paginate(sample_products)
        assert page.limit == DEFAULT_PAGE_SIZE == 21
        assert page.page == 1
        assert page.total == 5
        assert page.total_pages == 1

    def test_last_page(self, sample_products):
        page = paginate(sample_products, page=3, limit=2)
        assert ids(page.items) == ["5"]
        assert page.total_pages == 3

    def test_page_past_end(self, sample_products):
        page = paginate(sample_products, page=10, limit=2)
        assert page.items == []
        assert page.total == 5

    def test_clamps_page_and_limit(self, sample_products):
        page = paginate(sample_products, page=0, limit=0)
        assert page.page == 1
        assert page.limit == 1
        assert ids(page.items) == ["1"]

    def test_empty(self):
        page = paginate([])
        assert page.total == 0
        assert page.total_pages == 0


class TestFilterOptions:
    def test_all_products(self, sample_products):
        options = filter_options(sample_products)
        assert options.brands == ["Balkan Pharmaceuticals", "Canada Peptides", "Pharmacom Labs"]
        assert options.min_price == 30
        assert options.max_price == 120

    def test_category(self, sample_products):
        options = filter_options(sample_products, category="oral-steroids")
        assert options.brands == ["Balkan Pharmaceuticals", "Pharmacom Labs"]
        assert options.min_price == 30
        assert options.max_price == 46

    def test_empty(self):
        options = filter_options([])
        assert options.brands == []
        assert options.min_price is None
        assert options.max_price is None


class TestLookups:
    def test_find_product(self, sample_products):
        assert find_product_by_slug(sample_products, "masteron-100mg").id == "3"
        assert find_product_by_slug(sample_products, "missing") is None

    def test_find_category(self, sample_categories):
        assert find_category_by_slug(sample_categories, "acne").id == "30"
        assert find_category_by_slug(sample_categories, "missing") is None


class TestSummarizeCategories:
    def test_counts_include_direct_children(self, sample_categories, sample_products):
        summaries = summarize_categories(sample_categories, sample_products)

        assert [(s.category.name, s.product_count, s.subcategory_count) for s in summaries] == [
            ("INJECTABLE STEROIDS", 2, 1),
            ("ORAL STEROIDS", 1, 0),
        ]

    def test_child_categories_not_listed(self, sample_categories, sample_products):
        names = [s.category.name for s in summarize_categories(sample_categories, sample_products)]
        assert "Drostanolone Propionate" not in names

    def test_empty_categories_dropped(self, sample_categories):
        assert summarize_categories(sample_categories, []) == []

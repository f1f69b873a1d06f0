"""Shared test fixtures."""

from pathlib import Path

import pytest

from storefront_catalog.models import Category, Product, ProductSpecifications

DATA_DIR = Path(__file__).parent.parent / "data"

PRODUCT_COLUMNS = [
    "\ufeffpost_title",
    "ID",
    "post_name",
    "regular_price",
    "stock",
    "images",
    "tax:product_cat",
    "tax:product_brand",
    "tax:product_tag",
    "post_excerpt",
    "post_content",
    "meta:_aioseo_title",
    "meta:_aioseo_description",
]

CATEGORY_COLUMNS = ["term_id", "name", "slug", "description", "parent"]


def quote(value: str) -> str:
    """Quote a CSV field, doubling embedded quotes."""
    return '"' + value.replace('"', '""') + '"'


def make_csv(columns, rows) -> str:
    """Build export text; rows are dicts keyed by column (missing -> empty)."""
    lines = [",".join(columns)]
    for row in rows:
        lines.append(",".join(quote(row.get(column, "")) for column in columns))
    return "\n".join(lines) + "\n"


@pytest.fixture
def data_dir():
    """Return path to the bundled sample export directory."""
    return DATA_DIR


@pytest.fixture
def write_exports(tmp_path):
    """Write product/category exports into tmp_path and return the directory."""
    def _write(products=None, categories=None):
        if products is not None:
            (tmp_path / "products.csv").write_text(
                make_csv(PRODUCT_COLUMNS, products), encoding="utf-8"
            )
        if categories is not None:
            (tmp_path / "categories.csv").write_text(
                make_csv(CATEGORY_COLUMNS, categories), encoding="utf-8"
            )
        return tmp_path
    return _write


@pytest.fixture
def product_row():
    """A complete product export row."""
    return {
        "\ufeffpost_title": "ANAVAR 10mg tablets",
        "ID": "101",
        "post_name": "anavar-10mg",
        "regular_price": "45.50",
        "stock": "12",
        "images": (
            "https://cdn.example.com/anavar-1.jpg ! alt : Anavar ! title : Anavar"
            "|https://cdn.example.com/anavar-2.jpg ! alt : Anavar box"
        ),
        "tax:product_cat": "Oral Steroids|Oral Steroids > Oxandrolone",
        "tax:product_brand": " Pharmacom Labs ",
        "tax:product_tag": "anavar| oxandrolone |",
        "post_excerpt": (
            "<strong>Company:</strong> Pharmacom Labs"
            "<strong>Dosage:</strong> 10mg"
            "<strong>Product pack:</strong> 100 tabs"
            "<strong>Content (active):</strong> Oxandrolone"
        ),
        "post_content": "<p>Oxandrolone, popularly known as Anavar, is an oral steroid.</p>",
        "meta:_aioseo_title": "Buy Anavar 10mg",
        "meta:_aioseo_description": "",
    }


@pytest.fixture
def sample_products():
    """Small product set covering several categories and brands."""
    return [
        Product(id="1", name="Anavar 10mg", slug="anavar-10mg", price=45.5, stock=12,
                category="ORAL STEROIDS", brand="Pharmacom Labs",
                specifications=ProductSpecifications(dosage="10mg")),
        Product(id="2", name="Dianabol 10mg", slug="dianabol-10mg", price=30.0, stock=100,
                category="Oral Steroids", brand="Balkan Pharmaceuticals"),
        Product(id="3", name="Masteron 100mg", slug="masteron-100mg", price=62.25, stock=5,
                category="INJECTABLE STEROIDS", brand="Pharmacom Labs"),
        Product(id="4", name="Hgh Fragment", slug="hgh-fragment", price=120.0, stock=100,
                category="GROWTH HORMONES (HGH) AND PEPTIDES"),
        Product(id="5", name="Drostanolone Propionate", slug="drostanolone-propionate",
                price=50.0, stock=100, category="Drostanolone Propionate",
                brand="Canada Peptides"),
    ]


@pytest.fixture
def sample_categories():
    """Category tree: two top-level categories, one with a child, one empty."""
    return [
        Category(id="10", name="INJECTABLE STEROIDS", slug="injectable-steroids"),
        Category(id="11", name="Drostanolone Propionate", slug="drostanolone-propionate", parent="10"),
        Category(id="20", name="ORAL STEROIDS", slug="oral-steroids"),
        Category(id="30", name="ACNE", slug="acne"),
    ]

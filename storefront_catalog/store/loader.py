"""
Catalog Loader

Entry points that read the export files and return normalized records.

Loaders never raise: a missing or invalid config falls back to the
built-in defaults, a missing or unreadable export file is logged and
yields an empty list, and malformed rows are skipped.
Every call re-reads and re-parses the file; there is no cache.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

import yaml

from ..common.config_loader import default_catalog_settings, load_catalog_settings, resolve_data_dir
from ..common.csv_utils import read_records
from ..extraction import ProductNormalizer, normalize_categories
from ..models import Category, CategorySummary, Product, RowOk, RowResult, RowSkipped
from .queries import summarize_categories

logger = logging.getLogger(__name__)


def _export_path(data_dir: Optional[str | Path], file_key: str) -> tuple[Path, str]:
    """
    Resolve an export file path and encoding from settings.

    If config/catalog.yaml is missing or invalid, the built-in defaults are
    used and a relative data_dir is taken from the current directory.
    """
    try:
        settings = load_catalog_settings()
        default_dir = resolve_data_dir(settings)
    except (OSError, yaml.YAMLError, ValueError, TypeError) as e:
        logger.warning("Catalog config unavailable, using defaults: %s", e)
        settings = default_catalog_settings()
        default_dir = Path.cwd() / settings['data_dir']

    base_dir = Path(data_dir) if data_dir is not None else default_dir
    return base_dir / settings[file_key], settings['encoding']


def _read_export(file_path: Path, encoding: str) -> Optional[list]:
    """Read export records, or None if the file is missing or unreadable."""
    if not file_path.exists():
        logger.warning("%s not found", file_path)
        return None

    try:
        return read_records(file_path, encoding=encoding)
    except (OSError, UnicodeDecodeError) as e:
        logger.error("Error reading %s: %s", file_path, e)
        return None


def _log_skipped(results: List[RowResult], kind: str) -> None:
    skipped = [r for r in results if isinstance(r, RowSkipped)]
    if skipped:
        logger.debug("Skipped %d %s rows", len(skipped), kind)
        for result in skipped:
            logger.debug("  row %d: %s", result.index, result.reason)


def load_product_results(data_dir: Optional[str | Path] = None) -> List[RowResult]:
    """
    Load the product export and normalize every record.

    Args:
        data_dir: Directory holding the export (default: from config/catalog.yaml)

    Returns:
        One RowOk/RowSkipped per parsed record, in file order
    """
    file_path, encoding = _export_path(data_dir, 'products_file')
    records = _read_export(file_path, encoding)
    if records is None:
        return []

    results = ProductNormalizer().normalize_all(records)
    _log_skipped(results, "product")
    return results


def load_products(data_dir: Optional[str | Path] = None) -> List[Product]:
    """
    Load normalized products.

    Returns:
        Products in export order; empty if the export is missing or unreadable
    """
    results = load_product_results(data_dir)
    products = [r.value for r in results if isinstance(r, RowOk)]
    if results:
        logger.info("Loaded %d products (%d rows skipped)",
                    len(products), len(results) - len(products))
    return products


def load_categories(data_dir: Optional[str | Path] = None) -> List[Category]:
    """
    Load normalized categories ("Uncategorized" excluded).

    Returns:
        Categories in export order; empty if the export is missing or unreadable
    """
    file_path, encoding = _export_path(data_dir, 'categories_file')
    records = _read_export(file_path, encoding)
    if records is None:
        return []

    results = normalize_categories(records)
    _log_skipped(results, "category")
    categories = [r.value for r in results if isinstance(r, RowOk)]
    logger.info("Loaded %d categories", len(categories))
    return categories


def load_category_summaries(data_dir: Optional[str | Path] = None) -> List[CategorySummary]:
    """Top-level categories with product counts, for the admin category list."""
    return summarize_categories(load_categories(data_dir), load_products(data_dir))

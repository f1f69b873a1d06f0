#!/usr/bin/env python3
"""
Catalog Report

Loads the product and category exports and prints a summary:
product count, skipped rows, products per category and specification
coverage. Useful to check a fresh export before deploying it.

Usage:
    python3 scripts/catalog_report.py
    python3 scripts/catalog_report.py --data-dir data/ --skipped
    python3 scripts/catalog_report.py --json > catalog.json
"""

import argparse
import json
import os
import sys
from collections import Counter
from pathlib import Path

from dotenv import load_dotenv

# Add project root to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from storefront_catalog.common.log_config import setup_logging
from storefront_catalog.models import RowOk, RowSkipped, has_specifications
from storefront_catalog.store import (
    category_summary_to_dict,
    load_categories,
    load_product_results,
    product_to_dict,
    summarize_categories,
)

load_dotenv(Path(__file__).parent.parent / ".env")


def print_report(results, categories, show_skipped: bool = False) -> None:
    """Print a human-readable catalog summary."""
    products = [r.value for r in results if isinstance(r, RowOk)]
    skipped = [r for r in results if isinstance(r, RowSkipped)]

    print("=" * 60)
    print("Catalog Report")
    print("=" * 60)
    print(f"  Product rows:   {len(results)}")
    print(f"  Products:       {len(products)}")
    print(f"  Skipped rows:   {len(skipped)}")
    print(f"  Categories:     {len(categories)}")

    with_specs = sum(1 for p in products if has_specifications(p.specifications))
    with_images = sum(1 for p in products if p.images)
    print(f"  With specs:     {with_specs}")
    print(f"  With images:    {with_images}")

    print("\nProducts per category:")
    for name, count in Counter(p.category for p in products).most_common():
        print(f"  {count:5}  {name}")

    if skipped:
        print("\nSkip reasons:")
        for reason, count in Counter(r.reason for r in skipped).most_common():
            print(f"  {count:5}  {reason}")

    if show_skipped and skipped:
        print("\nSkipped rows:")
        for result in skipped:
            print(f"  row {result.index}: {result.reason}")


def main():
    parser = argparse.ArgumentParser(
        description="Summarize the storefront product and category exports"
    )
    parser.add_argument(
        "--data-dir", "-d",
        default=None,
        help="Directory with products.csv and categories.csv (default: config/catalog.yaml)"
    )
    parser.add_argument(
        "--skipped",
        action="store_true",
        help="List every skipped product row"
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print products and category summaries as JSON instead of a report"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose (debug) logging"
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress info messages, show only warnings and errors"
    )

    args = parser.parse_args()
    setup_logging(verbose=args.verbose, quiet=args.quiet)

    if args.data_dir and not os.path.isdir(args.data_dir):
        print(f"Error: Data directory not found: {args.data_dir}")
        sys.exit(1)

    results = load_product_results(args.data_dir)
    categories = load_categories(args.data_dir)

    if args.json:
        products = [r.value for r in results if isinstance(r, RowOk)]
        output = {
            "products": [product_to_dict(p) for p in products],
            "categories": [
                category_summary_to_dict(s)
                for s in summarize_categories(categories, products)
            ],
        }
        json.dump(output, sys.stdout, indent=2, ensure_ascii=False)
        print()
        return

    print_report(results, categories, show_skipped=args.skipped)


if __name__ == "__main__":
    main()

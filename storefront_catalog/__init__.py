"""
Storefront Catalog

Modules:
    models      - Data models (Product, Category, ProductSpecifications, row results)
    common      - Shared utilities (config loader, CSV record parser, text helpers, logging)
    extraction  - Row normalization, category reconciliation, specification parsing
    store       - Catalog loading, storefront queries and JSON serialization
"""

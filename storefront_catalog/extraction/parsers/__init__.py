"""
Specialized parsers for product description HTML.

- StructuredSpecParser: inline <strong>Label:</strong> value runs
- TableSpecParser: label/value table cells
"""

from .specifications import (
    SPECIFICATION_FORMATS,
    StructuredSpecParser,
    TableSpecParser,
    extract_specifications,
)

__all__ = [
    'StructuredSpecParser',
    'TableSpecParser',
    'SPECIFICATION_FORMATS',
    'extract_specifications',
]

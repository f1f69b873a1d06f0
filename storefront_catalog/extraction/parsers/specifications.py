"""
Specification Parser

Extracts product specifications (company, dosage, product pack, active
content) from description HTML. The export mixes two formats:

Structured format (inline labels):
    <strong>Company:</strong> Pharmacom Labs<strong>Dosage:</strong> 10mg

Table format (label cell followed by value cell):
    <td><strong>ACTIVE SUBSTANCE:</strong></td><td>Oxandrolone</td>

Formats are tried in order and the first one that yields anything wins.
Values from the two formats are never combined.
"""

import re
from typing import Dict, List, Optional, Pattern, Sequence

from ...common.text_utils import clean_html_content
from ...models import ProductSpecifications, has_specifications


def _structured_label(label: str) -> Pattern:
    # Value runs to the next <strong> tag, a closing block tag or end of text
    return re.compile(
        rf'<strong>{label}</strong>\s*(.*?)(?=<strong>|</(?:p|li|td|div)>|\Z)',
        re.IGNORECASE | re.DOTALL,
    )


def _table_label(label: str) -> Pattern:
    return re.compile(
        rf'<strong>{label}</strong>\s*</td>\s*<td[^>]*>(.*?)</td>',
        re.IGNORECASE | re.DOTALL,
    )


class StructuredSpecParser:
    """
    Parses inline <strong>Label:</strong> value runs.

    Usage:
        parser = StructuredSpecParser()
        if parser.detect(html):
            specs = parser.extract(html)
    """

    name = "structured"

    DETECT_PATTERN = re.compile(
        r'<strong>Company:</strong>|<strong>Dosage:</strong>|<strong>Product pack:</strong>',
        re.IGNORECASE,
    )

    FIELD_PATTERNS: Dict[str, Pattern] = {
        'company': _structured_label(r'Company:'),
        'dosage': _structured_label(r'Dosage:'),
        'product_pack': _structured_label(r'Product pack:'),
        'content': _structured_label(r'Content\s*\(active\)?\s*:'),
    }

    def detect(self, html: str) -> bool:
        return bool(self.DETECT_PATTERN.search(html))

    def extract(self, html: str) -> ProductSpecifications:
        """Extract every labelled field present in the HTML."""
        values = {}
        for field_name, pattern in self.FIELD_PATTERNS.items():
            match = pattern.search(html)
            if match:
                value = clean_html_content(match.group(1))
                if value:
                    values[field_name] = value
        return ProductSpecifications(**values)

    def collect(self, sources: Sequence[str]) -> ProductSpecifications:
        """
        Merge structured fields across sources in order.

        A later source overrides fields an earlier source also provided.
        Stops as soon as all four fields are known.
        """
        specs = ProductSpecifications()
        for html in sources:
            if not self.detect(html):
                continue
            found = self.extract(html)
            for field_name in found.found_fields():
                setattr(specs, field_name, getattr(found, field_name))
            if specs.is_complete():
                break
        return specs


class TableSpecParser:
    """
    Parses label/value table cells from reference-style descriptions.

    Label mapping:
        ACTIVE SUBSTANCE           -> content
        Usual dosage(s)            -> dosage
        Detection time             -> product_pack
        ALTERNATIVE STEROID NAMES  -> company (first comma-separated name)
    """

    name = "table"

    DETECT_PATTERN = re.compile(
        r'<strong>ACTIVE\s+SUBSTANCE:</strong>|<strong>Usual\s+dosages?:</strong>',
        re.IGNORECASE,
    )

    FIELD_PATTERNS: Dict[str, Pattern] = {
        'content': _table_label(r'ACTIVE\s+SUBSTANCE:'),
        'dosage': _table_label(r'Usual\s+dosages?:'),
        # Detection time is shown in the "Product pack" slot
        'product_pack': _table_label(r'Detection\s+time:'),
    }

    ALTERNATIVE_NAMES_PATTERN = _table_label(r'ALTERNATIVE\s+STEROID\s+NAMES:')

    def detect(self, html: str) -> bool:
        return bool(self.DETECT_PATTERN.search(html))

    def extract(self, html: str) -> ProductSpecifications:
        values = {}
        for field_name, pattern in self.FIELD_PATTERNS.items():
            match = pattern.search(html)
            if match:
                value = clean_html_content(match.group(1))
                if value:
                    values[field_name] = value

        company = self._extract_company(html)
        if company:
            values['company'] = company

        return ProductSpecifications(**values)

    def _extract_company(self, html: str) -> Optional[str]:
        """Best guess at the manufacturer: first listed alternative name."""
        match = self.ALTERNATIVE_NAMES_PATTERN.search(html)
        if not match:
            return None
        first_name = clean_html_content(match.group(1)).split(',')[0].strip()
        return first_name or None

    def collect(self, sources: Sequence[str]) -> ProductSpecifications:
        """Use the first source whose table yields at least one field."""
        for html in sources:
            if not self.detect(html):
                continue
            found = self.extract(html)
            if has_specifications(found):
                return found
        return ProductSpecifications()


# Tried in order; the first format producing any field wins
SPECIFICATION_FORMATS = (StructuredSpecParser(), TableSpecParser())


def extract_specifications(
    short_description: Optional[str],
    content: Optional[str] = None,
) -> ProductSpecifications:
    """
    Extract specifications from a product's description HTML.

    Args:
        short_description: Excerpt HTML (searched first)
        content: Full content HTML

    Returns:
        ProductSpecifications; all fields None when nothing was recognised
    """
    sources: List[str] = [text for text in (short_description, content) if text]
    if not sources:
        return ProductSpecifications()

    for spec_format in SPECIFICATION_FORMATS:
        specs = spec_format.collect(sources)
        if has_specifications(specs):
            return specs

    return ProductSpecifications()

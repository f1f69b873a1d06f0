"""
Text Utilities

Helper functions for text processing and cleanup.
"""

import re
import warnings
from typing import Optional

from bs4 import BeautifulSoup, MarkupResemblesLocatorWarning


def clean_html_content(html: str) -> str:
    """
    Strip tags from an HTML fragment, decode entities and collapse whitespace.

    Args:
        html: HTML fragment (may be plain text)

    Returns:
        Plain text on a single line

    Example:
        >>> clean_html_content('<b>Testosterone</b>&nbsp;Enanthate &amp; more')
        'Testosterone Enanthate & more'
    """
    if not html:
        return ""

    with warnings.catch_warnings():
        # Short values such as "250mg/ml" look like file names to bs4
        warnings.simplefilter("ignore", MarkupResemblesLocatorWarning)
        text = BeautifulSoup(html, "lxml").get_text(" ")

    return ' '.join(text.split()).strip()


def capitalize_words(text: str) -> str:
    """
    Capitalize the first letter of each space-separated word, lower-case the rest.

    Not locale-aware; punctuation-led words keep their first character.

    Example:
        >>> capitalize_words("TESTOSTERONE enanthate 250MG")
        'Testosterone Enanthate 250mg'
    """
    return ' '.join(word[:1].upper() + word[1:].lower() for word in text.split(' '))


def slugify_title(title: str) -> str:
    """
    Derive a URL slug from a title: lower-case, whitespace runs to hyphens.

    Example:
        >>> slugify_title("Anavar 10mg  Tablets")
        'anavar-10mg-tablets'
    """
    return re.sub(r'\s+', '-', title.strip().lower())


def clean_optional(value: Optional[str]) -> Optional[str]:
    """Trim a raw export value; empty becomes None."""
    if value is None:
        return None
    value = value.strip()
    return value or None

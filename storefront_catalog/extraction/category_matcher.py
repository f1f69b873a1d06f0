"""
Category Matcher

Resolves a product's pipe-delimited taxonomy value to one main category
using multiple strategies, per candidate in order:
1. Exact match against the main categories (case-insensitive)
2. Breadcrumb prefix match (e.g., "Injectable Steroids > Drostanolone")
3. Alias table for known brand/subcategory names (e.g., "Canada Peptides")

The first candidate that matches any strategy wins. If none does, the
first non-empty candidate is used as-is.
"""

from typing import Dict, Iterable, List, Optional

UNCATEGORIZED = "Uncategorized"
BREADCRUMB_SEPARATOR = ">"

# Main product categories (storefront megamenu)
MAIN_CATEGORIES = (
    'ORAL STEROIDS',
    'INJECTABLE STEROIDS',
    'GROWTH HORMONES (HGH) AND PEPTIDES',
    'ANTIESTROGENS AND PCT',
    'ANTIBIOTICS',
    'MEDICAL EQUIPMENTS',
    'STEROID CYCLES',
    'FAT LOSS',
    'SEXUAL HEALTH',
    'ANTIANXIETY, SLEEP AID - INSOMNIA',
    'PAIN KILLERS',
    'LIVER AID',
    'DIURETICS',
    'SARMS',
    'ACNE',
    'HIGH BLOOD PRESSURE',
    'ORIGINAL PHARMACY PRODUCTS',
)

# Brand and subcategory names that belong under a main category
CATEGORY_ALIASES: Dict[str, str] = {
    'CANADA PEPTIDES': 'GROWTH HORMONES (HGH) AND PEPTIDES',
    'PEPTIDES': 'GROWTH HORMONES (HGH) AND PEPTIDES',
}


def split_taxonomy(value: str) -> List[str]:
    """Split a pipe-delimited taxonomy value into trimmed candidates."""
    if not value:
        return []
    return [part.strip() for part in value.split('|')]


class CategoryMatcher:
    """
    Matches taxonomy values to main categories.

    Usage:
        matcher = CategoryMatcher()
        matcher.match("Canada Peptides|Peptides")
        # Returns: "GROWTH HORMONES (HGH) AND PEPTIDES"
    """

    def __init__(
        self,
        main_categories: Optional[Iterable[str]] = None,
        aliases: Optional[Dict[str, str]] = None,
    ):
        """
        Initialize the category matcher.

        Args:
            main_categories: Upper-case main category names (default: MAIN_CATEGORIES)
            aliases: Upper-case alias -> main category (default: CATEGORY_ALIASES)
        """
        self.main_categories = frozenset(
            MAIN_CATEGORIES if main_categories is None else main_categories
        )
        self.aliases = dict(CATEGORY_ALIASES if aliases is None else aliases)

    def match_candidate(self, candidate: str) -> Optional[str]:
        """
        Match a single taxonomy candidate.

        Returns:
            Main category name, or None if no strategy applies

        Example:
            >>> matcher.match_candidate("Oral Steroids")
            'Oral Steroids'
            >>> matcher.match_candidate("Injectable Steroids > Drostanolone Propionate")
            'INJECTABLE STEROIDS'
        """
        candidate_upper = candidate.upper()

        # Direct match keeps the candidate's own spelling
        if candidate_upper in self.main_categories:
            return candidate

        if BREADCRUMB_SEPARATOR in candidate_upper:
            main_part = candidate_upper.split(BREADCRUMB_SEPARATOR)[0].strip()
            if main_part in self.main_categories:
                return main_part

        return self.aliases.get(candidate_upper)

    def match(self, taxonomy: str) -> str:
        """
        Resolve a pipe-delimited taxonomy value to a single category.

        Args:
            taxonomy: Raw tax:product_cat value

        Returns:
            Main category, first non-empty candidate, or "Uncategorized"
        """
        candidates = split_taxonomy(taxonomy)

        for candidate in candidates:
            found = self.match_candidate(candidate)
            if found:
                return found

        for candidate in candidates:
            if candidate:
                return candidate

        return UNCATEGORIZED

    def is_main_category(self, name: str) -> bool:
        return name.upper() in self.main_categories

"""Tests for storefront_catalog/extraction/category_matcher.py"""

import pytest

from storefront_catalog.extraction.category_matcher import (
    CATEGORY_ALIASES,
    MAIN_CATEGORIES,
    UNCATEGORIZED,
    CategoryMatcher,
    split_taxonomy,
)

HGH = "GROWTH HORMONES (HGH) AND PEPTIDES"


@pytest.fixture
def matcher():
    return CategoryMatcher()


class TestTables:
    def test_seventeen_main_categories(self):
        assert len(MAIN_CATEGORIES) == 17
        assert all(name == name.upper() for name in MAIN_CATEGORIES)

    def test_aliases_point_to_main_categories(self):
        assert set(CATEGORY_ALIASES.values()) <= set(MAIN_CATEGORIES)


class TestSplitTaxonomy:
    def test_splits_and_trims(self):
        assert split_taxonomy(" Oral Steroids | Fat Loss ") == ["Oral Steroids", "Fat Loss"]

    def test_empty(self):
        assert split_taxonomy("") == []


class TestMatchCandidate:
    def test_direct_match_keeps_spelling(self, matcher):
        assert matcher.match_candidate("Oral Steroids") == "Oral Steroids"

    def test_breadcrumb_prefix(self, matcher):
        result = matcher.match_candidate("Injectable Steroids > Drostanolone Propionate")
        assert result == "INJECTABLE STEROIDS"

    def test_breadcrumb_unknown_prefix(self, matcher):
        assert matcher.match_candidate("Brands > Pharmacom") is None

    def test_alias(self, matcher):
        assert matcher.match_candidate("Canada Peptides") == HGH

    def test_no_match(self, matcher):
        assert matcher.match_candidate("Drostanolone Propionate") is None


class TestMatch:
    def test_breadcrumb_fires_before_fallback(self, matcher):
        assert matcher.match("Injectable Steroids > Drostanolone Propionate") == "INJECTABLE STEROIDS"

    def test_alias_resolves(self, matcher):
        assert matcher.match("Canada Peptides") == HGH

    def test_first_matching_candidate_wins(self, matcher):
        assert matcher.match("Pharmacom|Peptides|Oral Steroids") == HGH

    def test_later_match_beats_unmatched_first(self, matcher):
        assert matcher.match("Clenbuterol|Fat Loss") == "Fat Loss"

    def test_fallback_to_first_candidate(self, matcher):
        assert matcher.match("Clenbuterol|Fat Burners") == "Clenbuterol"

    def test_fallback_skips_empty_candidates(self, matcher):
        assert matcher.match("|Clenbuterol") == "Clenbuterol"

    def test_empty_is_uncategorized(self, matcher):
        assert matcher.match("") == UNCATEGORIZED

    def test_only_separators_is_uncategorized(self, matcher):
        assert matcher.match(" | ") == UNCATEGORIZED


class TestCustomTables:
    def test_custom_main_categories(self):
        matcher = CategoryMatcher(main_categories={"VITAMINS"}, aliases={})
        assert matcher.match("Vitamins > C") == "VITAMINS"
        assert matcher.match("Oral Steroids") == "Oral Steroids"
        assert matcher.is_main_category("vitamins") is True

"""
Unit tests for technology recommendations and company stack suggestions.
"""

import unittest
import logging

from techmatch.errors import InvalidCategoryError, UnknownTechnologyError
from techmatch.models import RecommendationItem, RecommendationSource
from techmatch.recommender import (
    beginner_friendly_source,
    combination_source,
    merge_recommendations,
    recommend,
    suggest_for_company,
    trending_source,
)
from techmatch.tests.fixtures import build_catalog, build_graph

logging.basicConfig(level=logging.INFO)


class TestSources(unittest.TestCase):
    """Test each recommendation source on its own."""

    def setUp(self):
        self.catalog = build_catalog()
        self.graph = build_graph(self.catalog)

    def test_combination_source(self):
        items = combination_source(frozenset({1}), self.catalog, self.graph)
        self.assertEqual([i.technology.name for i in items], ["Django", "pytest"])
        self.assertEqual([i.score for i in items], [9.0, 6.0])
        self.assertEqual(items[0].reason, "often paired with Python")
        self.assertTrue(all(i.source is RecommendationSource.combination for i in items))

    def test_combination_source_skips_held(self):
        items = combination_source(frozenset({1, 2}), self.catalog, self.graph)
        # Python -> pytest (Django held); Django -> PostgreSQL (Python held)
        self.assertEqual([i.technology.id for i in items], [13, 3])

    def test_beginner_friendly_source(self):
        items = beginner_friendly_source(frozenset({5}), ["frontend"], self.catalog)
        self.assertEqual([i.technology.name for i in items], ["HTML", "CSS", "Vue.js"])
        self.assertEqual(items[0].reason, "beginner-friendly in frontend")

    def test_beginner_friendly_source_limit(self):
        items = beginner_friendly_source(
            frozenset(), ["frontend", "backend", "design", "testing"], self.catalog
        )
        self.assertEqual(len(items), 5)
        self.assertEqual([i.technology.name for i in items], ["JavaScript", "Python", "HTML", "CSS", "Vue.js"])

    def test_trending_source(self):
        items = trending_source(frozenset({1}), self.catalog)
        self.assertEqual(
            [i.technology.name for i in items],
            ["JavaScript", "React", "TypeScript", "Kubernetes", "Docker"],
        )
        self.assertEqual(items[0].reason, "high market demand")


class TestMerge(unittest.TestCase):
    """Test deduplication, stable ordering and truncation."""

    def setUp(self):
        self.catalog = build_catalog()

    def _item(self, tech_id, score, source=RecommendationSource.trending):
        return RecommendationItem(
            technology=self.catalog.require(tech_id), score=score, reason="r", source=source
        )

    def test_first_occurrence_wins(self):
        merged = merge_recommendations(
            [self._item(4, 2.0, RecommendationSource.combination)],
            [self._item(4, 9.0)],
        )
        self.assertEqual(len(merged), 1)
        self.assertEqual(merged[0].score, 2.0)
        self.assertIs(merged[0].source, RecommendationSource.combination)

    def test_equal_scores_keep_source_order(self):
        merged = merge_recommendations(
            [self._item(3, 5.0), self._item(1, 5.0)],
            [self._item(2, 5.0), self._item(4, 6.0)],
        )
        self.assertEqual([i.technology.id for i in merged], [4, 3, 1, 2])

    def test_truncates_to_ten(self):
        items = [self._item(tech_id, float(tech_id)) for tech_id in range(1, 15)]
        merged = merge_recommendations(items)
        self.assertEqual(len(merged), 10)
        self.assertEqual(merged[0].technology.id, 14)
        self.assertEqual(merged[-1].technology.id, 5)


class TestRecommend(unittest.TestCase):
    """Test the merged recommendation list."""

    def setUp(self):
        self.catalog = build_catalog()
        self.graph = build_graph(self.catalog)

    def test_categories_derived_from_holdings(self):
        result = recommend({1}, None, self.catalog, self.graph)
        self.assertEqual(
            [i.technology.name for i in result],
            ["JavaScript", "Django", "React", "TypeScript", "Kubernetes", "Docker", "pytest"],
        )

    def test_combination_entry_beats_other_sources(self):
        """React is both paired with JavaScript and trending; HTML is paired and beginner-friendly."""
        result = recommend({5}, ["frontend"], self.catalog, self.graph)
        by_name = {i.technology.name: i for i in result}

        self.assertIs(by_name["React"].source, RecommendationSource.combination)
        self.assertEqual(by_name["React"].score, 9.5)
        self.assertIs(by_name["HTML"].source, RecommendationSource.combination)
        self.assertEqual(by_name["HTML"].score, 7.0)
        self.assertEqual(
            [i.technology.name for i in result],
            ["React", "Python", "TypeScript", "Kubernetes", "Docker", "CSS", "Vue.js", "HTML"],
        )

    def test_never_recommends_held_or_duplicates(self):
        held = {1, 4, 5, 7}
        result = recommend(held, ["frontend", "devops"], self.catalog, self.graph)
        ids = [i.technology.id for i in result]
        self.assertFalse(set(ids) & held)
        self.assertEqual(len(ids), len(set(ids)))
        self.assertLessEqual(len(ids), 10)

    def test_nothing_left_to_recommend(self):
        everything = self.catalog.ids
        self.assertEqual(recommend(everything, None, self.catalog, self.graph), [])

    def test_invalid_category(self):
        with self.assertRaises(InvalidCategoryError):
            recommend({1}, ["blockchain"], self.catalog, self.graph)

    def test_unknown_held_technology(self):
        with self.assertRaises(UnknownTechnologyError):
            recommend({1, 500}, None, self.catalog, self.graph)

    def test_idempotent(self):
        first = recommend({2, 5}, ["frontend"], self.catalog, self.graph)
        second = recommend({5, 2}, ["frontend"], self.catalog, self.graph)
        self.assertEqual(
            [i.model_dump_json() for i in first],
            [i.model_dump_json() for i in second],
        )


class TestCompanySuggestions(unittest.TestCase):
    """Test stack suggestions for a company."""

    def setUp(self):
        self.catalog = build_catalog()
        self.graph = build_graph(self.catalog)

    def test_industry_and_combination_suggestions(self):
        peers = [{1, 7, 8}, {7, 3}, {1, 3, 7}]
        result = suggest_for_company({1, 2}, "fintech", peers, self.catalog, self.graph)

        industry = result.industry_suggestions
        self.assertEqual([i.technology.id for i in industry], [7, 3, 8])
        self.assertEqual([i.score for i in industry], [3.0, 2.0, 1.0])
        self.assertEqual(industry[0].reason, "popular in fintech industry")
        self.assertIs(industry[0].source, RecommendationSource.industry)

        combos = result.combination_suggestions
        self.assertEqual([i.technology.id for i in combos], [3, 13])

    def test_no_peers(self):
        result = suggest_for_company({4}, "media", [], self.catalog, self.graph)
        self.assertEqual(result.industry_suggestions, [])
        self.assertEqual([i.technology.id for i in result.combination_suggestions], [5, 10])


if __name__ == "__main__":
    unittest.main()

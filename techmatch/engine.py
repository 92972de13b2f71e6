"""
Engine Facade

Binds one catalog/graph snapshot and exposes every operation:
1. score_company / score_job / score_target
2. recommend / suggest_for_company
3. gap_report
4. search_companies / search_jobs
"""

import logging
from typing import Any, Dict, Iterable, List, Optional

from . import gap_planner, recommender, scorer, search
from .catalog import TechnologyCatalog
from .graph import CooccurrenceGraph
from .models import (
    CompanySuggestions, CompanyTarget, GapReport, JobTarget,
    MatchScore, RankedTarget, RecommendationItem, TechQuery
)

logger = logging.getLogger(__name__)


class TechCompatibilityEngine:
    """
    Read-only snapshot of the catalog and co-occurrence graph.

    Holds no other state, so one instance can serve concurrent callers.

    Example:
        >>> engine = TechCompatibilityEngine.from_records(tech_rows, edge_rows)
        >>> engine.score_company([1, 2], [], "union", 8, 10, 6, {1, 3}).score
        66.0
    """

    def __init__(self, catalog: TechnologyCatalog, graph: CooccurrenceGraph):
        self.catalog = catalog
        self.graph = graph

    @classmethod
    def from_records(
        cls,
        technologies: Iterable[Dict[str, Any]],
        edges: Iterable[Dict[str, Any]] = (),
        strict_edges: bool = False,
    ) -> "TechCompatibilityEngine":
        catalog = TechnologyCatalog.from_records(technologies)
        graph = CooccurrenceGraph.from_records(catalog, edges, strict=strict_edges)
        logger.info(f"Engine ready: {len(catalog)} technologies, {len(graph)} combinations")
        return cls(catalog, graph)

    def score_company(
        self,
        required_ids: Iterable[int],
        preferred_ids: Iterable[int],
        mode,
        target_culture_score: Optional[float],
        target_oss_count: int,
        target_freshness_score: Optional[float],
        target_held_ids: Iterable[int],
    ) -> MatchScore:
        return scorer.score_company(
            required_ids, preferred_ids, mode,
            target_culture_score, target_oss_count, target_freshness_score,
            target_held_ids, self.catalog,
        )

    def score_job(
        self,
        required_ids: Iterable[int],
        preferred_ids: Iterable[int],
        actor_held_ids: Iterable[int],
    ) -> float:
        return scorer.score_job(required_ids, preferred_ids, actor_held_ids, self.catalog)

    def score_target(self, target, query: TechQuery) -> MatchScore:
        return scorer.score_target(target, query, self.catalog)

    def recommend(
        self,
        actor_held_ids: Iterable[int],
        actor_interest_categories: Optional[Iterable] = None,
    ) -> List[RecommendationItem]:
        return recommender.recommend(
            actor_held_ids, actor_interest_categories, self.catalog, self.graph
        )

    def suggest_for_company(
        self,
        held_ids: Iterable[int],
        industry: str,
        peer_holdings: Iterable[Iterable[int]],
    ) -> CompanySuggestions:
        return recommender.suggest_for_company(
            held_ids, industry, peer_holdings, self.catalog, self.graph
        )

    def gap_report(
        self,
        target_held_ids: Iterable[int],
        actor_held_ids: Iterable[int],
        catalog: Optional[TechnologyCatalog] = None,
    ) -> GapReport:
        if catalog is None:
            catalog = self.catalog
        return gap_planner.gap_report(target_held_ids, actor_held_ids, catalog)

    def search_companies(self, query: TechQuery, companies: Iterable[CompanyTarget]) -> List[RankedTarget]:
        return search.search_companies(query, companies, self.catalog)

    def search_jobs(self, query: TechQuery, jobs: Iterable[JobTarget]) -> List[RankedTarget]:
        return search.search_jobs(query, jobs, self.catalog)

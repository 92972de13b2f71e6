"""
Recommendation Engine

Three independent sources propose technologies an actor does not hold yet:

1. combination       - neighbours in the co-occurrence graph
2. beginner_friendly - easy technologies in the actor's categories
3. trending          - highest market demand overall

The lists are concatenated in that order, deduplicated keeping the first
entry per technology, stable-sorted by score and truncated.
"""

import logging
from collections import Counter
from typing import FrozenSet, Iterable, List, Optional

from .catalog import TechnologyCatalog
from .config import (
    COMBINATION_SUGGESTION_LIMIT, INDUSTRY_SUGGESTION_LIMIT,
    RECOMMENDATION_LIMIT, REASONS, SOURCE_LIMIT
)
from .graph import CooccurrenceGraph
from .models import CompanySuggestions, RecommendationItem, RecommendationSource, TechCategory

logger = logging.getLogger(__name__)


def combination_source(
    held_ids: FrozenSet[int],
    catalog: TechnologyCatalog,
    graph: CooccurrenceGraph,
) -> List[RecommendationItem]:
    """
    Technologies paired with something already held.

    Held technologies are visited in ascending id order and their edges
    most-popular first. A technology reachable from several held ones
    appears once per edge; the merge step keeps the first.
    """
    items = []
    for tech_id in sorted(held_ids):
        held_name = catalog.require(tech_id).name
        for edge in graph.combinations_for(tech_id):
            other_id = edge.other_end(tech_id)
            if other_id in held_ids:
                continue
            items.append(RecommendationItem(
                technology=catalog.require(other_id),
                score=edge.popularity_score,
                reason=REASONS["combination"].format(name=held_name),
                source=RecommendationSource.combination,
            ))

    logger.debug(f"Combination source: {len(items)} candidates")
    return items


def beginner_friendly_source(
    held_ids: FrozenSet[int],
    categories: Iterable[TechCategory],
    catalog: TechnologyCatalog,
    limit: int = SOURCE_LIMIT,
) -> List[RecommendationItem]:
    """Most popular difficulty 1-2 technologies in the given categories."""
    wanted = set(categories)
    candidates = [
        tech for tech in catalog.beginner_friendly()
        if tech.category in wanted and tech.id not in held_ids
    ]
    items = [
        RecommendationItem(
            technology=tech,
            score=tech.popularity_score,
            reason=REASONS["beginner_friendly"].format(category=tech.category.value),
            source=RecommendationSource.beginner_friendly,
        )
        for tech in catalog.popular(candidates)[:limit]
    ]
    logger.debug(f"Beginner-friendly source: {len(items)} candidates")
    return items


def trending_source(
    held_ids: FrozenSet[int],
    catalog: TechnologyCatalog,
    limit: int = SOURCE_LIMIT,
) -> List[RecommendationItem]:
    """Highest market demand among technologies not held."""
    candidates = [tech for tech in catalog if tech.id not in held_ids]
    items = [
        RecommendationItem(
            technology=tech,
            score=tech.market_demand_score,
            reason=REASONS["trending"],
            source=RecommendationSource.trending,
        )
        for tech in catalog.in_demand(candidates)[:limit]
    ]
    logger.debug(f"Trending source: {len(items)} candidates")
    return items


def merge_recommendations(
    *sources: List[RecommendationItem],
    limit: int = RECOMMENDATION_LIMIT,
) -> List[RecommendationItem]:
    """
    Concatenate sources in order, keep the first item per technology,
    stable-sort by score descending and truncate.
    """
    seen = set()
    unique = []
    for source in sources:
        for item in source:
            if item.technology.id in seen:
                continue
            seen.add(item.technology.id)
            unique.append(item)

    # sorted() is stable, so equal scores keep source order
    ranked = sorted(unique, key=lambda item: -item.score)
    return ranked[:limit]


def recommend(
    actor_held_ids: Iterable[int],
    actor_interest_categories: Optional[Iterable],
    catalog: TechnologyCatalog,
    graph: CooccurrenceGraph,
) -> List[RecommendationItem]:
    """
    Recommend up to 10 technologies for an actor.

    Args:
        actor_held_ids: Technologies the actor holds or is interested in
        actor_interest_categories: Categories for the beginner-friendly
            source; None derives them from the held technologies
        catalog: Technology catalog snapshot
        graph: Co-occurrence graph over the same catalog

    Returns:
        Ranked RecommendationItem list, never containing a held technology
    """
    held = catalog.validate_ids(actor_held_ids)
    if actor_interest_categories is None:
        categories = catalog.categories_of(held)
    else:
        categories = [TechCategory.parse(c) for c in actor_interest_categories]

    result = merge_recommendations(
        combination_source(held, catalog, graph),
        beginner_friendly_source(held, categories, catalog),
        trending_source(held, catalog),
    )
    logger.info(f"Recommended {len(result)} technologies for an actor holding {len(held)}")
    return result


def industry_source(
    held_ids: FrozenSet[int],
    industry: str,
    peer_holdings: Iterable[Iterable[int]],
    catalog: TechnologyCatalog,
    limit: int = INDUSTRY_SUGGESTION_LIMIT,
) -> List[RecommendationItem]:
    """Technologies most used by peer companies in the same industry."""
    usage: Counter = Counter()
    for peer in peer_holdings:
        usage.update(catalog.validate_ids(peer) - held_ids)

    ranked = sorted(usage.items(), key=lambda item: (-item[1], item[0]))[:limit]
    return [
        RecommendationItem(
            technology=catalog.require(tech_id),
            score=float(count),
            reason=REASONS["industry"].format(industry=industry),
            source=RecommendationSource.industry,
        )
        for tech_id, count in ranked
    ]


def suggest_for_company(
    held_ids: Iterable[int],
    industry: str,
    peer_holdings: Iterable[Iterable[int]],
    catalog: TechnologyCatalog,
    graph: CooccurrenceGraph,
) -> CompanySuggestions:
    """
    Suggest technologies a company could add to its stack.

    ``peer_holdings`` are the technology ids of other companies in the
    same industry, one collection per company, excluding this one.
    """
    held = catalog.validate_ids(held_ids)
    suggestions = CompanySuggestions(
        industry_suggestions=industry_source(held, industry, peer_holdings, catalog),
        combination_suggestions=merge_recommendations(
            combination_source(held, catalog, graph),
            limit=COMBINATION_SUGGESTION_LIMIT,
        ),
    )
    logger.info(
        f"Company suggestions: {len(suggestions.industry_suggestions)} from industry, "
        f"{len(suggestions.combination_suggestions)} from combinations"
    )
    return suggestions

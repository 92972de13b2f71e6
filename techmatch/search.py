"""
Target Search

Scores many companies or job postings against one query, drops the ones
that fail the mode prefilter, hold an excluded technology or score below
the threshold, and ranks the rest.
"""

import logging
from typing import FrozenSet, Iterable, List

from .catalog import TechnologyCatalog
from .models import CompanyTarget, JobTarget, RankedTarget, SearchMode, TechQuery
from .scorer import score_target

logger = logging.getLogger(__name__)


def _searchable_ids(target) -> FrozenSet[int]:
    """The holding the required technologies are matched against."""
    if isinstance(target, CompanyTarget):
        return target.held_ids
    return target.required_ids


def _all_ids(target) -> FrozenSet[int]:
    if isinstance(target, CompanyTarget):
        return target.held_ids
    return target.required_ids | target.preferred_ids


def passes_prefilter(target, query: TechQuery) -> bool:
    """
    intersection: every required technology must be held.
    union: at least one required technology must be held.
    No required technologies: every target passes.
    """
    if not query.required_ids:
        return True
    held = _searchable_ids(target)
    if query.mode is SearchMode.intersection:
        return query.required_ids <= held
    return bool(query.required_ids & held)


def is_excluded(target, query: TechQuery) -> bool:
    return bool(query.excluded_ids & _all_ids(target))


def search_targets(
    query: TechQuery,
    targets: Iterable,
    catalog: TechnologyCatalog,
) -> List[RankedTarget]:
    """
    Rank targets for a query, best match first.

    Every target holding is checked against the catalog, including
    targets that are filtered out. Targets with equal scores keep their
    input order.
    """
    catalog.validate_ids(query.required_ids | query.preferred_ids | query.excluded_ids)

    ranked = []
    considered = 0
    for target in targets:
        considered += 1
        catalog.validate_ids(_all_ids(target))
        if not passes_prefilter(target, query):
            logger.debug(f"{target.kind} {target.id}: filtered by {query.mode.value} prefilter")
            continue
        if is_excluded(target, query):
            logger.debug(f"{target.kind} {target.id}: holds an excluded technology")
            continue

        match = score_target(target, query, catalog)
        if match.score < query.min_match_score:
            logger.debug(f"{target.kind} {target.id}: score {match.score:.2f} below threshold")
            continue
        ranked.append(RankedTarget(target=target, match=match))

    ranked.sort(key=lambda item: -item.match.score)
    logger.info(f"Search kept {len(ranked)} of {considered} targets")
    return ranked


def search_companies(
    query: TechQuery,
    companies: Iterable[CompanyTarget],
    catalog: TechnologyCatalog,
) -> List[RankedTarget]:
    return search_targets(query, companies, catalog)


def search_jobs(
    query: TechQuery,
    jobs: Iterable[JobTarget],
    catalog: TechnologyCatalog,
) -> List[RankedTarget]:
    return search_targets(query, jobs, catalog)

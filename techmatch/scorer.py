"""
Deterministic Match Scorer

All scoring functions are deterministic - same inputs produce same outputs.
Company and job targets use different formulas; score_target picks the
right one from the target's kind.
"""

import logging
from typing import Dict, FrozenSet, Iterable, Optional

from .catalog import TechnologyCatalog
from .config import ANCILLARY_SCALE, COMPANY_WEIGHTS, INTERSECTION_PARTIAL_WEIGHT, JOB_WEIGHTS
from .errors import InvalidScoreInputError
from .models import CompanyTarget, JobTarget, MatchScore, SearchMode, TechQuery
from .utils import clamp, ratio, round_half_up

logger = logging.getLogger(__name__)


def calculate_required_contribution(
    required_ids: FrozenSet[int],
    held_ids: FrozenSet[int],
    mode: SearchMode,
) -> float:
    """
    Required-technology contribution (0-60).

    Formula:
    - No required technologies: 60
    - union: (matches / total) * 60
    - intersection: 60 on full coverage, else (matches / total) * 40

    Intersection mode is deliberately harsher on partial coverage than union.
    """
    weight = COMPANY_WEIGHTS["required"]
    if not required_ids:
        logger.debug(f"No required technologies, contribution = {weight}")
        return float(weight)

    matches = len(required_ids & held_ids)
    total = len(required_ids)

    if mode is SearchMode.union:
        contribution = matches / total * weight
    elif matches == total:
        contribution = float(weight)
    else:
        contribution = matches / total * INTERSECTION_PARTIAL_WEIGHT

    logger.debug(f"Required ({mode.value}): {matches}/{total} = {contribution:.2f}")
    return contribution


def calculate_preferred_contribution(
    preferred_ids: FrozenSet[int],
    held_ids: FrozenSet[int],
) -> float:
    """Preferred-technology contribution (0-20); 20 when nothing is preferred."""
    weight = COMPANY_WEIGHTS["preferred"]
    if not preferred_ids:
        return float(weight)

    matches = len(preferred_ids & held_ids)
    contribution = matches / len(preferred_ids) * weight
    logger.debug(f"Preferred: {matches}/{len(preferred_ids)} = {contribution:.2f}")
    return contribution


def _scaled(field: str, value: Optional[float], weight: float) -> float:
    if value is None:
        return 0.0
    if not 0 <= value <= ANCILLARY_SCALE:
        raise InvalidScoreInputError(field, value, f"0-{ANCILLARY_SCALE:g}")
    return value / ANCILLARY_SCALE * weight


def calculate_ancillary_contributions(
    culture_score: Optional[float],
    oss_count: int,
    freshness_score: Optional[float],
) -> Dict[str, float]:
    """
    Target-only contributions, independent of the query.

    - culture: 0-10 scaled to 0-10
    - open_source: flat 5 if the company has any contributions
    - freshness: 0-10 scaled to 0-5
    """
    if oss_count is None:
        oss_count = 0
    if oss_count < 0:
        raise InvalidScoreInputError("oss_count", oss_count, ">= 0")

    return {
        "culture": _scaled("culture_score", culture_score, COMPANY_WEIGHTS["culture"]),
        "open_source": float(COMPANY_WEIGHTS["open_source"]) if oss_count > 0 else 0.0,
        "freshness": _scaled("freshness_score", freshness_score, COMPANY_WEIGHTS["freshness"]),
    }


def score_company(
    required_ids: Iterable[int],
    preferred_ids: Iterable[int],
    mode,
    target_culture_score: Optional[float],
    target_oss_count: int,
    target_freshness_score: Optional[float],
    target_held_ids: Iterable[int],
    catalog: TechnologyCatalog,
) -> MatchScore:
    """
    Calculate how well a company's technology holding matches a query (0-100).

    Args:
        required_ids: Technologies the searcher requires
        preferred_ids: Technologies the searcher would like
        mode: SearchMode (or "intersection"/"union"/"AND"/"OR")
        target_culture_score: Company tech-culture score, 0-10
        target_oss_count: Number of open-source contributions
        target_freshness_score: Tech-stack freshness, 0-10
        target_held_ids: Technologies the company uses
        catalog: Catalog every id must belong to

    Returns:
        MatchScore with the clamped, rounded total and its breakdown

    Raises:
        UnknownSearchModeError, UnknownTechnologyError, InvalidScoreInputError
    """
    mode = SearchMode.parse(mode)
    required = catalog.validate_ids(required_ids)
    preferred = catalog.validate_ids(preferred_ids)
    held = catalog.validate_ids(target_held_ids)

    components = {
        "required": calculate_required_contribution(required, held, mode),
        "preferred": calculate_preferred_contribution(preferred, held),
    }
    components.update(
        calculate_ancillary_contributions(
            target_culture_score, target_oss_count, target_freshness_score
        )
    )

    total = round_half_up(clamp(sum(components.values())))
    logger.debug(f"Company score: {total:.2f}")

    return MatchScore(
        score=total,
        matching_technologies=catalog.resolve((required | preferred) & held),
        breakdown={name: round_half_up(value) for name, value in components.items()},
    )


def score_job(
    required_ids: Iterable[int],
    preferred_ids: Iterable[int],
    actor_held_ids: Iterable[int],
    catalog: TechnologyCatalog,
) -> float:
    """
    Calculate how well an actor's technologies fit a job posting (0-100).

    Formula:
    - Required: (matched_required / total_required) * 60, 0 if none required
    - Preferred: (matched_preferred / total_preferred) * 40, 0 if none preferred

    Unlike company scoring, an empty set earns nothing here.
    """
    return _job_components(
        catalog.validate_ids(required_ids),
        catalog.validate_ids(preferred_ids),
        catalog.validate_ids(actor_held_ids),
    )[0]


def _job_components(required, preferred, held):
    components = {
        "required": ratio(len(required & held), len(required)) * JOB_WEIGHTS["required"],
        "preferred": ratio(len(preferred & held), len(preferred)) * JOB_WEIGHTS["preferred"],
    }
    total = round_half_up(sum(components.values()))
    logger.debug(
        f"Job score: required {components['required']:.2f} + "
        f"preferred {components['preferred']:.2f} = {total:.2f}"
    )
    return total, components


def score_target(target, query: TechQuery, catalog: TechnologyCatalog) -> MatchScore:
    """
    Score any target against a query.

    Companies use the company formula with the query's required/preferred
    sets and mode. Jobs use the job formula with the query's required
    technologies standing in for the searcher's holding.
    """
    if isinstance(target, CompanyTarget):
        return score_company(
            query.required_ids,
            query.preferred_ids,
            query.mode,
            target.culture_score,
            target.open_source_contributions,
            target.freshness_score,
            target.held_ids,
            catalog,
        )

    if isinstance(target, JobTarget):
        job_required = catalog.validate_ids(target.required_ids)
        job_preferred = catalog.validate_ids(target.preferred_ids)
        searched = catalog.validate_ids(query.required_ids) | catalog.validate_ids(query.preferred_ids)

        total, components = _job_components(
            job_required, job_preferred, frozenset(query.required_ids)
        )
        return MatchScore(
            score=total,
            matching_technologies=catalog.resolve(searched & (job_required | job_preferred)),
            breakdown={name: round_half_up(value) for name, value in components.items()},
        )

    raise TypeError(f"Cannot score target of type {type(target).__name__}")

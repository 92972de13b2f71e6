"""
Gap & Learning-Path Planner

Compares a target's technologies with an actor's and orders the missing
ones into a learning sequence.
"""

import logging
from typing import Iterable, List

from .catalog import TechnologyCatalog
from .config import WEEKS_PER_DIFFICULTY
from .models import GapReport, LearningStep, Technology
from .utils import round_half_up

logger = logging.getLogger(__name__)


def learning_order(technologies: Iterable[Technology]) -> List[Technology]:
    """Easiest first; equal difficulty by ascending id."""
    return sorted(technologies, key=lambda tech: (tech.learning_difficulty, tech.id))


def approximate_prerequisites_by_difficulty(
    tech: Technology,
    gap: Iterable[Technology],
) -> List[int]:
    """
    Ids of the other gap technologies that are strictly easier than ``tech``.

    This is a difficulty ordering, not a dependency graph: an easier
    technology is listed even when the two are unrelated.
    """
    return [
        other.id for other in learning_order(gap)
        if other.id != tech.id and other.learning_difficulty < tech.learning_difficulty
    ]


def estimated_weeks(tech: Technology) -> int:
    return tech.learning_difficulty * WEEKS_PER_DIFFICULTY


def gap_report(
    target_held_ids: Iterable[int],
    actor_held_ids: Iterable[int],
    catalog: TechnologyCatalog,
) -> GapReport:
    """
    Build the gap report between a target (usually a company) and an actor.

    Args:
        target_held_ids: Technologies the target uses (C)
        actor_held_ids: Technologies the actor holds or is learning (S)
        catalog: Catalog every id must belong to

    Returns:
        GapReport with gap = C - S, overlap = C & S and a learning path.
        When C is empty, match_percentage is 0 and has_target_data is False.
    """
    target = catalog.validate_ids(target_held_ids)
    actor = catalog.validate_ids(actor_held_ids)

    gap = catalog.resolve(target - actor)
    overlap = target & actor

    if not target:
        logger.info("Target has no technologies on record; gap report is empty")
        return GapReport(
            match_percentage=0.0,
            has_target_data=False,
            total_target_technologies=0,
        )

    match_percentage = round_half_up(len(overlap) / len(target) * 100)

    path = [
        LearningStep(
            technology=tech,
            priority=priority,
            estimated_duration=estimated_weeks(tech),
            prerequisite_ids=approximate_prerequisites_by_difficulty(tech, gap),
        )
        for priority, tech in enumerate(learning_order(gap), start=1)
    ]

    logger.info(
        f"Gap report: {len(overlap)}/{len(target)} matched ({match_percentage:.2f}%), "
        f"{len(gap)} to learn"
    )
    return GapReport(
        gap_ids=[tech.id for tech in gap],
        overlap_ids=sorted(overlap),
        match_percentage=match_percentage,
        has_target_data=True,
        total_target_technologies=len(target),
        learning_path=path,
    )

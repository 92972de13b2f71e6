"""
Technology Compatibility & Recommendation Engine

Deterministic scoring over in-memory technology holdings:
1. Match scoring of companies and job postings against a query
2. Technology recommendations from a co-occurrence graph
3. Skill-gap reports with a suggested learning order

Usage:
    from techmatch import TechCompatibilityEngine

    engine = TechCompatibilityEngine.from_records(technologies, combinations)
    result = engine.score_company([1, 2], [], "union", 8, 10, 6, {1, 3})
    print(f"Match: {result.score}%")
"""

from .catalog import TechnologyCatalog
from .config import COMPANY_WEIGHTS, JOB_WEIGHTS
from .engine import TechCompatibilityEngine
from .errors import TechMatchError, UnknownSearchModeError, UnknownTechnologyError
from .gap_planner import gap_report
from .graph import CooccurrenceGraph
from .models import (
    CooccurrenceEdge, GapReport, MatchScore, RecommendationItem,
    SearchMode, TechCategory, TechQuery, Technology, TechnologySet
)
from .recommender import recommend
from .scorer import score_company, score_job, score_target

__all__ = [
    "TechCompatibilityEngine",
    "TechnologyCatalog",
    "CooccurrenceGraph",
    "Technology",
    "CooccurrenceEdge",
    "TechnologySet",
    "TechCategory",
    "TechQuery",
    "SearchMode",
    "MatchScore",
    "RecommendationItem",
    "GapReport",
    "TechMatchError",
    "UnknownSearchModeError",
    "UnknownTechnologyError",
    "score_company",
    "score_job",
    "score_target",
    "recommend",
    "gap_report",
    "COMPANY_WEIGHTS",
    "JOB_WEIGHTS",
]
__version__ = "1.0.0"

"""
Configuration for the technology compatibility engine.
Adjust weights and parameters here.
"""

# Company match weights (must sum to 100)
COMPANY_WEIGHTS = {
    "required": 60,
    "preferred": 20,
    "culture": 10,
    "open_source": 5,
    "freshness": 5,
}

# Partial coverage ceiling for the required term in intersection mode
INTERSECTION_PARTIAL_WEIGHT = 40

# Job match weights (must sum to 100)
JOB_WEIGHTS = {
    "required": 60,
    "preferred": 40,
}

# Ancillary company attributes are reported on a 0-10 scale
ANCILLARY_SCALE = 10.0

SCORE_BOUNDS = (0.0, 100.0)
SCORE_DECIMALS = 2

# Search mode aliases (the marketplace API used AND/OR)
SEARCH_MODE_ALIASES = {
    "intersection": "intersection",
    "and": "intersection",
    "union": "union",
    "or": "union",
}

# Recommendation limits
RECOMMENDATION_LIMIT = 10
SOURCE_LIMIT = 5
INDUSTRY_SUGGESTION_LIMIT = 10
COMBINATION_SUGGESTION_LIMIT = 5
TRENDING_BY_USAGE_LIMIT = 10

# Learning difficulty range considered beginner-friendly
BEGINNER_DIFFICULTY = (1, 2)

# Learning path: weeks per difficulty point
WEEKS_PER_DIFFICULTY = 2

# Reason templates
REASONS = {
    "combination": "often paired with {name}",
    "beginner_friendly": "beginner-friendly in {category}",
    "trending": "high market demand",
    "industry": "popular in {industry} industry",
}

# Fuzzy name suggestions for unknown technologies
SUGGESTIONS = {
    "limit": 3,
    "score_cutoff": 70,
}

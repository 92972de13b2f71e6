"""
Sample catalog shared by the test modules.

Ids 1-3 back the company scoring example and ids 10-12 (difficulty 3, 2, 1)
back the gap report example.
"""

from techmatch.catalog import TechnologyCatalog
from techmatch.graph import CooccurrenceGraph

SAMPLE_TECHNOLOGIES = [
    {"id": 1, "name": "Python", "category": "backend", "learning_difficulty": 2,
     "market_demand_score": 9.5, "popularity_score": 9.0},
    {"id": 2, "name": "Django", "category": "backend", "learning_difficulty": 3,
     "market_demand_score": 7.0, "popularity_score": 7.5},
    {"id": 3, "name": "PostgreSQL", "category": "database", "learning_difficulty": 3,
     "market_demand_score": 8.0, "popularity_score": 8.0},
    {"id": 4, "name": "React", "category": "frontend", "learning_difficulty": 3,
     "market_demand_score": 9.0, "popularity_score": 9.2},
    {"id": 5, "name": "JavaScript", "category": "frontend", "learning_difficulty": 2,
     "market_demand_score": 9.8, "popularity_score": 9.5},
    {"id": 6, "name": "HTML", "category": "frontend", "learning_difficulty": 1,
     "market_demand_score": 6.0, "popularity_score": 8.5},
    {"id": 7, "name": "Docker", "category": "devops", "learning_difficulty": 3,
     "market_demand_score": 8.5, "popularity_score": 8.0},
    {"id": 8, "name": "Kubernetes", "category": "devops", "learning_difficulty": 5,
     "market_demand_score": 8.8, "popularity_score": 7.0},
    {"id": 9, "name": "Figma", "category": "design", "learning_difficulty": 1,
     "market_demand_score": 5.0, "popularity_score": 7.0},
    {"id": 10, "name": "TypeScript", "category": "frontend", "learning_difficulty": 3,
     "market_demand_score": 8.9, "popularity_score": 8.3},
    {"id": 11, "name": "Vue.js", "category": "frontend", "learning_difficulty": 2,
     "market_demand_score": 6.5, "popularity_score": 7.2},
    {"id": 12, "name": "CSS", "category": "frontend", "learning_difficulty": 1,
     "market_demand_score": 6.2, "popularity_score": 8.1},
    {"id": 13, "name": "pytest", "category": "testing", "learning_difficulty": 2,
     "market_demand_score": 5.5, "popularity_score": 6.5},
    {"id": 14, "name": "TensorFlow", "category": "ai_ml", "learning_difficulty": 4,
     "market_demand_score": 8.0, "popularity_score": 7.8},
]

SAMPLE_COMBINATIONS = [
    {"primary_id": 1, "secondary_id": 2, "combination_type": "language_framework", "popularity_score": 9.0},
    {"primary_id": 2, "secondary_id": 3, "combination_type": "backend_database", "popularity_score": 8.5},
    {"primary_id": 4, "secondary_id": 5, "combination_type": "language_framework", "popularity_score": 9.5},
    {"primary_id": 1, "secondary_id": 13, "combination_type": "common", "popularity_score": 6.0},
    {"primary_id": 4, "secondary_id": 10, "combination_type": "common", "popularity_score": 8.7},
    {"primary_id": 7, "secondary_id": 8, "combination_type": "common", "popularity_score": 7.5},
    {"primary_id": 5, "secondary_id": 6, "combination_type": "common", "popularity_score": 7.0},
]


def build_catalog() -> TechnologyCatalog:
    return TechnologyCatalog.from_records(SAMPLE_TECHNOLOGIES)


def build_graph(catalog: TechnologyCatalog = None) -> CooccurrenceGraph:
    return CooccurrenceGraph.from_records(catalog or build_catalog(), SAMPLE_COMBINATIONS)

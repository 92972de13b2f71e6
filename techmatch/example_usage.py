"""
Example usage of the technology compatibility engine.

Run this file to see the engine in action:
    python -m techmatch.example_usage
"""

import logging

from techmatch import TechCompatibilityEngine, TechQuery
from techmatch.models import CompanyTarget

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

# Sample catalog, as the persistence layer would hand it over
TECHNOLOGIES = [
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
    {"id": 6, "name": "Docker", "category": "devops", "learning_difficulty": 3,
     "market_demand_score": 8.5, "popularity_score": 8.0},
    {"id": 7, "name": "Kubernetes", "category": "devops", "learning_difficulty": 5,
     "market_demand_score": 8.8, "popularity_score": 7.0},
    {"id": 8, "name": "HTML", "category": "frontend", "learning_difficulty": 1,
     "market_demand_score": 6.0, "popularity_score": 8.5},
]

COMBINATIONS = [
    {"primary_id": 1, "secondary_id": 2, "combination_type": "language_framework", "popularity_score": 9.0},
    {"primary_id": 2, "secondary_id": 3, "combination_type": "backend_database", "popularity_score": 8.5},
    {"primary_id": 4, "secondary_id": 5, "combination_type": "language_framework", "popularity_score": 9.5},
    {"primary_id": 6, "secondary_id": 7, "combination_type": "common", "popularity_score": 7.5},
]

COMPANIES = [
    CompanyTarget(id=1, name="Acme", held_ids={1, 2, 3, 6}, culture_score=8,
                  open_source_contributions=12, freshness_score=7),
    CompanyTarget(id=2, name="Globex", held_ids={4, 5, 8}, culture_score=6,
                  open_source_contributions=0, freshness_score=9),
    CompanyTarget(id=3, name="Initech", held_ids={1, 6, 7}, culture_score=4,
                  open_source_contributions=2, freshness_score=3),
]

STUDENT_TECHNOLOGIES = {1, 5}


def example_company_search(engine: TechCompatibilityEngine):
    """Example 1: Rank companies for a technology search."""
    print("\n" + "="*80)
    print("EXAMPLE 1: Company Search")
    print("="*80)

    for mode in ("union", "intersection"):
        query = TechQuery(required_ids={1, 6}, preferred_ids={3}, mode=mode)
        print(f"\nRequired: Python + Docker, preferred: PostgreSQL ({mode})")
        for ranked in engine.search_companies(query, COMPANIES):
            names = ", ".join(t.name for t in ranked.match.matching_technologies)
            print(f"  {ranked.target.name:10} {ranked.match.score:6.2f}%  [{names}]")
            for component, score in ranked.match.breakdown.items():
                bar = "█" * int(score / 2)
                print(f"      {component.capitalize():12} {score:5.1f} {bar}")


def example_recommendations(engine: TechCompatibilityEngine):
    """Example 2: Recommend technologies to a student."""
    print("\n" + "="*80)
    print("EXAMPLE 2: Recommendations")
    print("="*80)

    for i, item in enumerate(engine.recommend(STUDENT_TECHNOLOGIES), 1):
        print(f"  #{i:<2} {item.technology.name:12} {item.score:4.1f}  "
              f"{item.source.value:18} {item.reason}")


def example_learning_path(engine: TechCompatibilityEngine):
    """Example 3: Skill gap between the student and each company."""
    print("\n" + "="*80)
    print("EXAMPLE 3: Learning Paths")
    print("="*80)

    for company in COMPANIES:
        report = engine.gap_report(company.held_ids, STUDENT_TECHNOLOGIES)
        print(f"\n{company.name}: {report.match_percentage}% of the stack already known")
        for step in report.learning_path:
            prereqs = [engine.catalog.require(i).name for i in step.prerequisite_ids]
            print(f"  {step.priority}. {step.technology.name:12} ~{step.estimated_duration} weeks"
                  f"{'  after ' + ', '.join(prereqs) if prereqs else ''}")


def main():
    """Run all examples."""
    print("\n" + "="*80)
    print("TECHNOLOGY COMPATIBILITY ENGINE - EXAMPLES")
    print("="*80)

    engine = TechCompatibilityEngine.from_records(TECHNOLOGIES, COMBINATIONS)
    example_company_search(engine)
    example_recommendations(engine)
    example_learning_path(engine)

    print("\n" + "="*80)
    print("✅ ALL EXAMPLES COMPLETED SUCCESSFULLY")
    print("="*80)


if __name__ == "__main__":
    main()

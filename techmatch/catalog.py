"""
Technology Catalog

Read-only snapshot of the known technologies. Built once by the caller from
whatever the persistence layer loaded, then passed explicitly to every
scoring, recommendation and gap computation.
"""

import logging
from collections import Counter
from typing import Any, Dict, FrozenSet, Iterable, Iterator, List, Optional

from rapidfuzz import fuzz, process

from .config import BEGINNER_DIFFICULTY, SUGGESTIONS, TRENDING_BY_USAGE_LIMIT
from .errors import CatalogIntegrityError, UnknownTechnologyError
from .models import TechCategory, Technology, TechnologySet

logger = logging.getLogger(__name__)


def _by_popularity(tech: Technology):
    return (-tech.popularity_score, tech.id)


def _by_demand(tech: Technology):
    return (-tech.market_demand_score, tech.id)


class TechnologyCatalog:
    """
    Technologies indexed by id and by case-insensitive name.

    Iteration is always in ascending id order so that every ranking built
    on top of the catalog is deterministic.
    """

    def __init__(self, technologies: Iterable[Technology]):
        by_id: Dict[int, Technology] = {}
        by_name: Dict[str, Technology] = {}

        for tech in technologies:
            if tech.id in by_id:
                raise CatalogIntegrityError(f"Duplicate technology id {tech.id}")
            existing = by_name.get(tech.name_key)
            if existing is not None:
                raise CatalogIntegrityError(
                    f"Technology name {tech.name!r} clashes with {existing.name!r} (id {existing.id})"
                )
            by_id[tech.id] = tech
            by_name[tech.name_key] = tech

        self._by_id = {tech_id: by_id[tech_id] for tech_id in sorted(by_id)}
        self._by_name = by_name
        logger.debug(f"Catalog loaded with {len(self._by_id)} technologies")

    @classmethod
    def from_records(cls, records: Iterable[Dict[str, Any]]) -> "TechnologyCatalog":
        """Build a catalog from plain dicts (e.g. rows from the persistence layer)."""
        return cls(Technology.model_validate(record) for record in records)

    def __len__(self) -> int:
        return len(self._by_id)

    def __contains__(self, tech_id) -> bool:
        return tech_id in self._by_id

    def __iter__(self) -> Iterator[Technology]:
        return iter(self._by_id.values())

    @property
    def ids(self) -> FrozenSet[int]:
        return frozenset(self._by_id)

    def get(self, tech_id: int) -> Optional[Technology]:
        return self._by_id.get(tech_id)

    def require(self, tech_id: int) -> Technology:
        tech = self._by_id.get(tech_id)
        if tech is None:
            raise UnknownTechnologyError(ids=[tech_id])
        return tech

    def validate_ids(self, ids: Iterable[int]) -> FrozenSet[int]:
        """
        Return ``ids`` (any iterable or a TechnologySet) as a frozenset.

        Raises UnknownTechnologyError listing every unknown id, not just
        the first one found.
        """
        if isinstance(ids, TechnologySet):
            ids = ids.ids
        id_set = frozenset(ids or ())
        missing = id_set - self._by_id.keys()
        if missing:
            raise UnknownTechnologyError(ids=missing)
        return id_set

    def resolve(self, ids: Iterable[int]) -> List[Technology]:
        """Technologies for ``ids`` in ascending id order."""
        return [self._by_id[tech_id] for tech_id in sorted(self.validate_ids(ids))]

    def find_by_name(self, name: str) -> Technology:
        tech = self._by_name.get(name.strip().casefold())
        if tech is None:
            raise UnknownTechnologyError(name=name, suggestions=self.suggest_names(name))
        return tech

    def suggest_names(self, name: str) -> List[str]:
        """Closest known technology names for a misspelled one."""
        choices = [tech.name for tech in self]
        if not choices or not name.strip():
            return []
        matches = process.extract(
            name.strip(),
            choices,
            scorer=fuzz.WRatio,
            limit=SUGGESTIONS["limit"],
            score_cutoff=SUGGESTIONS["score_cutoff"],
        )
        return [match for match, score, _ in matches]

    def by_category(self, category) -> List[Technology]:
        category = TechCategory.parse(category)
        return [tech for tech in self if tech.category == category]

    def popular(self, technologies: Iterable[Technology] = None) -> List[Technology]:
        """Popularity descending, ties by ascending id."""
        return sorted(self if technologies is None else technologies, key=_by_popularity)

    def in_demand(self, technologies: Iterable[Technology] = None) -> List[Technology]:
        """Market demand descending, ties by ascending id."""
        return sorted(self if technologies is None else technologies, key=_by_demand)

    def beginner_friendly(self) -> List[Technology]:
        low, high = BEGINNER_DIFFICULTY
        return [tech for tech in self if low <= tech.learning_difficulty <= high]

    def search(self, term: str) -> List[Technology]:
        """Case-insensitive substring match on name."""
        needle = term.strip().casefold()
        return [tech for tech in self if needle in tech.name_key]

    def categories_of(self, ids: Iterable[int]) -> List[TechCategory]:
        """Distinct categories of ``ids``, in ascending id order of first appearance."""
        categories: List[TechCategory] = []
        for tech in self.resolve(ids):
            if tech.category not in categories:
                categories.append(tech.category)
        return categories

    def trending_by_usage(
        self,
        holdings: Iterable[Iterable[int]],
        limit: int = TRENDING_BY_USAGE_LIMIT,
    ) -> List[Technology]:
        """
        Technologies used by the most companies.

        ``holdings`` holds one id collection per company; a company counts
        once per technology. Ties break by ascending id.
        """
        usage: Counter = Counter()
        for held in holdings:
            usage.update(self.validate_ids(held))

        ranked = sorted(usage.items(), key=lambda item: (-item[1], item[0]))
        return [self._by_id[tech_id] for tech_id, _ in ranked[:limit]]

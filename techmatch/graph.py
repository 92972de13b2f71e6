"""
Co-occurrence Graph

Weighted, typed edges between technologies that are commonly used together.
Built once from a catalog and a list of edges; read-only afterwards.
"""

import logging
from typing import Dict, Iterable, List, Optional, Tuple

from .catalog import TechnologyCatalog
from .errors import DanglingEdgeError, DuplicateEdgeError
from .models import CooccurrenceEdge

logger = logging.getLogger(__name__)


class CooccurrenceGraph:
    """
    Adjacency view over co-occurrence edges.

    Edges are keyed by their sorted technology pair. The marketplace only
    rejected a repeat of the same (primary, secondary) ordering, so a
    reversed pair could slip in next to the original. Here a same-order
    repeat always raises; a reversed repeat is skipped with a warning, or
    raises when ``strict`` is set.
    """

    def __init__(
        self,
        catalog: TechnologyCatalog,
        edges: Iterable[CooccurrenceEdge],
        strict: bool = False,
    ):
        self._edges: Dict[Tuple[int, int], CooccurrenceEdge] = {}
        self._order: Dict[Tuple[int, int], int] = {}
        self._adjacency: Dict[int, List[CooccurrenceEdge]] = {}
        self.skipped: List[CooccurrenceEdge] = []

        for edge in edges:
            self._add(catalog, edge, strict)

        # Most popular first; equal popularity keeps insertion order
        for touching in self._adjacency.values():
            touching.sort(key=lambda e: (-e.popularity_score, self._order[e.pair_key]))

        logger.debug(
            f"Co-occurrence graph built: {len(self._edges)} edges, "
            f"{len(self.skipped)} reversed duplicates skipped"
        )

    @classmethod
    def from_records(cls, catalog: TechnologyCatalog, records, strict: bool = False) -> "CooccurrenceGraph":
        return cls(catalog, (CooccurrenceEdge.model_validate(r) for r in records), strict=strict)

    def _add(self, catalog: TechnologyCatalog, edge: CooccurrenceEdge, strict: bool) -> None:
        missing = [i for i in (edge.primary_id, edge.secondary_id) if i not in catalog]
        if missing:
            raise DanglingEdgeError(edge.primary_id, edge.secondary_id, missing)

        key = edge.pair_key
        existing = self._edges.get(key)
        if existing is not None:
            reversed_pair = existing.primary_id != edge.primary_id
            if strict or not reversed_pair:
                raise DuplicateEdgeError(edge.primary_id, edge.secondary_id, reversed_pair)
            logger.warning(
                f"Skipping reversed duplicate edge ({edge.primary_id}, {edge.secondary_id}); "
                f"keeping ({existing.primary_id}, {existing.secondary_id})"
            )
            self.skipped.append(edge)
            return

        self._order[key] = len(self._edges)
        self._edges[key] = edge
        self._adjacency.setdefault(edge.primary_id, []).append(edge)
        self._adjacency.setdefault(edge.secondary_id, []).append(edge)

    def __len__(self) -> int:
        return len(self._edges)

    @property
    def edges(self) -> List[CooccurrenceEdge]:
        return list(self._edges.values())

    def combinations_for(self, tech_id: int) -> List[CooccurrenceEdge]:
        """Edges touching ``tech_id``, most popular first."""
        return list(self._adjacency.get(tech_id, ()))

    def related(self, tech_id: int) -> List[int]:
        """Ids paired with ``tech_id``, in the order of combinations_for."""
        return [edge.other_end(tech_id) for edge in self.combinations_for(tech_id)]

    def edge_between(self, first_id: int, second_id: int) -> Optional[CooccurrenceEdge]:
        return self._edges.get(tuple(sorted((first_id, second_id))))

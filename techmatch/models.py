from enum import Enum
from typing import Annotated, Any, Dict, FrozenSet, Iterable, List, Literal, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .config import SEARCH_MODE_ALIASES
from .errors import InvalidCategoryError, UnknownSearchModeError


class TechCategory(str, Enum):
    frontend = "frontend"
    backend = "backend"
    database = "database"
    devops = "devops"
    mobile = "mobile"
    ai_ml = "ai_ml"
    data_science = "data_science"
    testing = "testing"
    design = "design"
    other = "other"

    @classmethod
    def parse(cls, value) -> "TechCategory":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise InvalidCategoryError(value, [c.value for c in cls]) from None


class CombinationType(str, Enum):
    common = "common"
    frontend_backend = "frontend_backend"
    framework_library = "framework_library"
    language_framework = "language_framework"
    backend_database = "backend_database"


class TechRole(str, Enum):
    required = "required"
    preferred = "preferred"
    excluded = "excluded"
    held = "held"
    interest = "interest"


class SearchMode(str, Enum):
    intersection = "intersection"
    union = "union"

    @classmethod
    def parse(cls, value) -> "SearchMode":
        """Accept a SearchMode, its value, or one of the AND/OR aliases."""
        if isinstance(value, cls):
            return value
        key = value.strip().lower() if isinstance(value, str) else None
        if key not in SEARCH_MODE_ALIASES:
            raise UnknownSearchModeError(value, sorted(SEARCH_MODE_ALIASES))
        return cls(SEARCH_MODE_ALIASES[key])


class RecommendationSource(str, Enum):
    combination = "combination"
    beginner_friendly = "beginner_friendly"
    trending = "trending"
    industry = "industry"


class Technology(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    name: str = Field(..., min_length=1)
    category: TechCategory
    learning_difficulty: int = Field(..., ge=1, le=5)
    market_demand_score: float = Field(0.0, ge=0, le=10)
    popularity_score: float = Field(0.0, ge=0, le=10)
    description: Optional[str] = None

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Technology name must not be blank")
        return v

    @property
    def name_key(self) -> str:
        return self.name.casefold()


class CooccurrenceEdge(BaseModel):
    """Two technologies that are commonly used together."""

    model_config = ConfigDict(frozen=True)

    primary_id: int
    secondary_id: int
    combination_type: CombinationType = CombinationType.common
    popularity_score: float = Field(0.0, ge=0)

    @model_validator(mode="after")
    def distinct_ends(self) -> "CooccurrenceEdge":
        if self.primary_id == self.secondary_id:
            raise ValueError(f"Edge endpoints must differ (got {self.primary_id} twice)")
        return self

    @property
    def pair_key(self) -> Tuple[int, int]:
        return tuple(sorted((self.primary_id, self.secondary_id)))

    def touches(self, tech_id: int) -> bool:
        return tech_id in (self.primary_id, self.secondary_id)

    def other_end(self, tech_id: int) -> int:
        if tech_id == self.primary_id:
            return self.secondary_id
        if tech_id == self.secondary_id:
            return self.primary_id
        raise ValueError(f"Technology {tech_id} is not an endpoint of edge {self.pair_key}")


class TechnologySet(BaseModel):
    """
    A role-tagged bucket of technology ids.

    Built per request from upstream data; order and duplicates in the
    input are irrelevant.
    """

    model_config = ConfigDict(frozen=True)

    role: TechRole
    ids: FrozenSet[int] = frozenset()

    @classmethod
    def of(cls, role, ids: Iterable[int] = ()) -> "TechnologySet":
        return cls(role=role, ids=frozenset(ids or ()))

    def __len__(self) -> int:
        return len(self.ids)

    def __contains__(self, tech_id) -> bool:
        return tech_id in self.ids

    def __and__(self, other) -> FrozenSet[int]:
        return self.ids & _ids_of(other)

    def __sub__(self, other) -> FrozenSet[int]:
        return self.ids - _ids_of(other)

    def sorted_ids(self) -> List[int]:
        return sorted(self.ids)


def _ids_of(value) -> FrozenSet[int]:
    if isinstance(value, TechnologySet):
        return value.ids
    return frozenset(value)


class TechQuery(BaseModel):
    """A technology search issued against many targets."""

    model_config = ConfigDict(frozen=True)

    required_ids: FrozenSet[int] = frozenset()
    preferred_ids: FrozenSet[int] = frozenset()
    excluded_ids: FrozenSet[int] = frozenset()
    mode: SearchMode = SearchMode.union
    min_match_score: float = Field(0.0, ge=0, le=100)

    def __init__(self, **data):
        # A bad mode raises UnknownSearchModeError rather than ValidationError
        if "mode" in data:
            data["mode"] = SearchMode.parse(data["mode"])
        super().__init__(**data)

    @classmethod
    def from_request(cls, data: Dict[str, Any]) -> "TechQuery":
        """Build a query from a raw request payload such as decoded JSON."""
        return cls(**dict(data))


class CompanyTarget(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["company"] = "company"
    id: int
    name: Optional[str] = None
    industry: Optional[str] = None
    held_ids: FrozenSet[int] = frozenset()
    culture_score: Optional[float] = None
    open_source_contributions: int = 0
    freshness_score: Optional[float] = None


class JobTarget(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["job"] = "job"
    id: int
    title: Optional[str] = None
    company_id: Optional[int] = None
    required_ids: FrozenSet[int] = frozenset()
    preferred_ids: FrozenSet[int] = frozenset()


Target = Annotated[Union[CompanyTarget, JobTarget], Field(discriminator="kind")]


class MatchScore(BaseModel):
    model_config = ConfigDict(frozen=True)

    score: float = Field(..., ge=0, le=100)
    matching_technologies: List[Technology] = Field(default_factory=list)
    breakdown: Dict[str, float] = Field(default_factory=dict)


class RecommendationItem(BaseModel):
    model_config = ConfigDict(frozen=True)

    technology: Technology
    score: float
    reason: str
    source: RecommendationSource


class LearningStep(BaseModel):
    model_config = ConfigDict(frozen=True)

    technology: Technology
    priority: int = Field(..., ge=1)
    estimated_duration: int
    prerequisite_ids: List[int] = Field(default_factory=list)


class GapReport(BaseModel):
    """
    Difference between a target's technologies and an actor's.

    ``has_target_data`` is False when the target has no technologies on
    record; ``match_percentage`` is then 0 but carries no information.
    """

    model_config = ConfigDict(frozen=True)

    gap_ids: List[int] = Field(default_factory=list)
    overlap_ids: List[int] = Field(default_factory=list)
    match_percentage: float = 0.0
    has_target_data: bool = True
    total_target_technologies: int = 0
    learning_path: List[LearningStep] = Field(default_factory=list)


class RankedTarget(BaseModel):
    model_config = ConfigDict(frozen=True)

    target: Target
    match: MatchScore


class CompanySuggestions(BaseModel):
    model_config = ConfigDict(frozen=True)

    industry_suggestions: List[RecommendationItem] = Field(default_factory=list)
    combination_suggestions: List[RecommendationItem] = Field(default_factory=list)

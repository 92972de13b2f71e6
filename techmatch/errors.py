"""
Exceptions raised by the engine.

Degenerate inputs (empty sets, targets with no technologies) are never
errors. Everything here signals a bad value supplied by the caller.
"""

from typing import Iterable, List, Sequence


class TechMatchError(ValueError):
    """Base class for all engine errors."""


class UnknownSearchModeError(TechMatchError):
    def __init__(self, mode, allowed: Sequence[str]):
        self.mode = mode
        self.allowed = list(allowed)
        super().__init__(
            f"Unknown search mode {mode!r}; expected one of {', '.join(self.allowed)}"
        )


class UnknownTechnologyError(TechMatchError):
    """A technology id or name that the catalog does not contain."""

    def __init__(self, ids: Iterable[int] = (), name: str = None, suggestions: List[str] = None):
        self.ids = sorted(ids)
        self.name = name
        self.suggestions = suggestions or []

        if name is not None:
            message = f"Unknown technology name {name!r}"
            if self.suggestions:
                message += f" (did you mean: {', '.join(self.suggestions)}?)"
        else:
            message = f"Unknown technology id(s): {', '.join(str(i) for i in self.ids)}"
        super().__init__(message)


class InvalidCategoryError(TechMatchError):
    def __init__(self, category, allowed: Sequence[str]):
        self.category = category
        super().__init__(
            f"Unknown technology category {category!r}; expected one of {', '.join(allowed)}"
        )


class InvalidScoreInputError(TechMatchError):
    """An ancillary company attribute outside its documented range."""

    def __init__(self, field: str, value, expected: str):
        self.field = field
        self.value = value
        super().__init__(f"{field}={value!r} is out of range (expected {expected})")


class CatalogIntegrityError(TechMatchError):
    """Duplicate ids or case-insensitive names in catalog input."""


class DuplicateEdgeError(TechMatchError):
    def __init__(self, primary_id: int, secondary_id: int, reversed_pair: bool = False):
        self.primary_id = primary_id
        self.secondary_id = secondary_id
        self.reversed_pair = reversed_pair
        kind = "reversed duplicate" if reversed_pair else "duplicate"
        super().__init__(
            f"{kind} co-occurrence edge for technologies {primary_id} and {secondary_id}"
        )


class DanglingEdgeError(TechMatchError):
    def __init__(self, primary_id: int, secondary_id: int, missing: Iterable[int]):
        self.missing = sorted(missing)
        super().__init__(
            f"Co-occurrence edge ({primary_id}, {secondary_id}) references unknown "
            f"technology id(s): {', '.join(str(i) for i in self.missing)}"
        )

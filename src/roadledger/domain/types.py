"""City and road value types plus the error-code vocabulary.

Cities carry a permanent index assigned at creation. A rename replaces
the name but never the index. Roads are undirected and identified by
the unordered pair of their endpoint cities.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, Field


class ErrorCode(StrEnum):
    """Machine-readable failure kinds surfaced in ``ServiceError.code``."""

    DUPLICATE_NAME = "DUPLICATE_NAME"
    NOT_FOUND = "NOT_FOUND"
    CITY_NOT_FOUND = "CITY_NOT_FOUND"
    SAME_NAME = "SAME_NAME"
    SELF_LOOP = "SELF_LOOP"
    DUPLICATE_ROAD = "DUPLICATE_ROAD"
    NO_ROAD = "NO_ROAD"
    NEGATIVE_BUDGET = "NEGATIVE_BUDGET"
    INVALID_FORMAT = "INVALID_FORMAT"
    SNAPSHOT_FAILED = "SNAPSHOT_FAILED"
    EXPORT_FAILED = "EXPORT_FAILED"


class City(BaseModel):
    """A registered city.

    INVARIANT: ``index`` is permanent. Matrix position is ``index - 1``.
    """

    model_config = {"frozen": True}

    index: int = Field(ge=1)
    name: str

    @property
    def position(self) -> int:
        """Zero-based row/column of this city in the road matrices."""
        return self.index - 1


class RoadEntry(BaseModel):
    """One road as enumerated for display and snapshots.

    ``number`` is a presentation artifact: it is recomputed on every
    enumeration and is not a stable identifier.
    """

    model_config = {"frozen": True}

    number: int = Field(ge=1)
    first: City
    second: City
    budget: float = 0.0

    @property
    def label(self) -> str:
        """``"<first>-<second>"`` in matrix order (not alphabetical)."""
        return f"{self.first.name}-{self.second.name}"

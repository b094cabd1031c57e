"""Search query filters and result records."""

from enum import Enum
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, field_validator


class ResultType(str, Enum):
    POST = "post"
    ALUMNI = "alumni"
    EVENT = "event"
    JOB = "job"
    MESSAGE = "message"


FilterType = Literal["all", "post", "alumni", "event", "job"]
DateRange = Literal["all", "today", "week", "month", "year"]


class SearchFilters(BaseModel):
    """Filter set applied to a global search. Blank location/batch are treated as unset."""
    model_config = ConfigDict(frozen=True)

    type: FilterType = "all"
    date_range: DateRange = "all"
    location: Optional[str] = None
    batch: Optional[str] = None

    @field_validator("location", "batch", mode="before")
    @classmethod
    def _blank_to_none(cls, value):
        if value is None:
            return None
        v = str(value).strip()
        return v or None

    def includes(self, result_type: ResultType) -> bool:
        return self.type == "all" or self.type == result_type.value


class SearchResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    type: ResultType
    title: str
    description: str
    image: Optional[str] = None
    url: str
    relevance: int = 0

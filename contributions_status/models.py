from datetime import date
from typing import Any
from typing import TypeAlias

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field


DayRecord: TypeAlias = dict[str, Any]


class ContributionDay(BaseModel):
    """Combined contribution count for one day in the calendar reference."""

    model_config = ConfigDict(frozen=True)

    date: date
    count: int = Field(ge=0)


# Seven slots, Sunday first; None marks padding outside the window.
WeekColumn: TypeAlias = list[ContributionDay | None]


class ProviderResult(BaseModel):
    """Outcome of one provider fetch: records on success, a message on failure."""

    model_config = ConfigDict(frozen=True)

    provider: str
    ok: bool
    records: list[DayRecord] = Field(default_factory=list)
    error: str | None = None

    @classmethod
    def success(cls, provider: str, records: list[DayRecord]) -> "ProviderResult":
        return cls(provider=provider, ok=True, records=records)

    @classmethod
    def failure(cls, provider: str, error: str) -> "ProviderResult":
        return cls(provider=provider, ok=False, error=error)

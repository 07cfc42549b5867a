"""Weekend questionnaire and itinerary schemas."""

from __future__ import annotations

import re
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from this_weekend.schemas.enums import (
    ActivityKind,
    BudgetLevel,
    DayLabel,
    DaysOption,
    GroupType,
    MoodType,
    PlanSource,
    PriceLevel,
)

# The first release of the questionnaire used euro symbols for budget.
EURO_PRICE_ALIASES = {"€": "low", "€€": "medium", "€€€": "high"}
_DAYS_ALIASES = {"saturday": "sat", "sunday": "sun", "halfday": "half-day", "half_day": "half-day"}
_TIME_PATTERN = re.compile(r"^(\d{1,2}):(\d{2})$")


def _coerce_choice(value: Any, aliases: dict[str, str] | None = None) -> Any:
    """Map empty input to the unset sentinel and normalize case and aliases."""
    if value is None:
        return "unset"
    if not isinstance(value, str):
        return value

    text = value.strip()
    if not text:
        return "unset"
    if aliases and text in aliases:
        return aliases[text]
    lowered = text.lower()
    if aliases and lowered in aliases:
        return aliases[lowered]
    return lowered


class WeekendFormDraft(BaseModel):
    """Questionnaire answers while the user is still filling them in.

    Fields:
        `city`: city the weekend takes place in
        `group`: who is travelling
        `mood`: requested vibe
        `budget`: spending level
        `days`: available part of the weekend
    """

    model_config = ConfigDict(frozen=True)

    city: str = Field("", description="City name")
    group: GroupType = Field(GroupType.UNSET, description="Group type")
    mood: MoodType = Field(MoodType.UNSET, description="Mood")
    budget: BudgetLevel = Field(BudgetLevel.UNSET, description="Budget level")
    days: DaysOption = Field(DaysOption.UNSET, description="Available days")

    @field_validator("city", mode="before")
    @classmethod
    def _strip_city(cls, value: Any) -> Any:
        if value is None:
            return ""
        return value.strip() if isinstance(value, str) else value

    @field_validator("group", "mood", mode="before")
    @classmethod
    def _normalize_choice(cls, value: Any) -> Any:
        return _coerce_choice(value)

    @field_validator("budget", mode="before")
    @classmethod
    def _normalize_budget(cls, value: Any) -> Any:
        return _coerce_choice(value, EURO_PRICE_ALIASES)

    @field_validator("days", mode="before")
    @classmethod
    def _normalize_days(cls, value: Any) -> Any:
        return _coerce_choice(value, _DAYS_ALIASES)


class WeekendForm(WeekendFormDraft):
    """Submitted questionnaire. The city is mandatory, everything else may be unset."""

    city: str = Field(..., min_length=1, description="City name (non-empty after trim)")


class ItineraryActivity(BaseModel):
    """A single scheduled stop."""

    model_config = ConfigDict(populate_by_name=True)

    time: str = Field(..., description="Start time, 24-hour HH:MM")
    title: str = Field(..., min_length=1, description="Short title")
    kind: ActivityKind = Field(..., description="food, activity, coffee or nightlife")
    description: str = Field(..., description="One or two sentence description")
    area: str | None = Field(None, description="Neighbourhood or area")
    price_level: PriceLevel | None = Field(None, alias="priceLevel", description="low, medium or high")

    @field_validator("time", mode="before")
    @classmethod
    def _normalize_time(cls, value: Any) -> Any:
        if not isinstance(value, str):
            return value
        match = _TIME_PATTERN.match(value.strip())
        if not match:
            raise ValueError("time must be a 24-hour HH:MM value")
        hour, minute = int(match.group(1)), int(match.group(2))
        if hour > 23 or minute > 59:
            raise ValueError("time must be a 24-hour HH:MM value")
        return f"{hour:02d}:{minute:02d}"

    @field_validator("area", mode="before")
    @classmethod
    def _blank_area_to_none(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("price_level", mode="before")
    @classmethod
    def _normalize_price_level(cls, value: Any) -> Any:
        if value is None:
            return None
        if isinstance(value, str):
            text = value.strip()
            if not text or text.lower() == "unset":
                return None
            return EURO_PRICE_ALIASES.get(text, text.lower())
        return value


class ItineraryDay(BaseModel):
    """One day of the plan."""

    label: DayLabel = Field(..., description="Saturday or Sunday")
    summary: str = Field(..., description="Short summary of the day")
    activities: list[ItineraryActivity] = Field(..., min_length=1, description="Stops in visiting order")


class WeekendItinerary(BaseModel):
    """Full weekend plan returned to the presentation layer."""

    city: str = Field(..., min_length=1, description="City name")
    days: list[ItineraryDay] = Field(..., min_length=1, description="One or two days, Saturday first")

    def to_payload(self) -> dict[str, Any]:
        """Dump to the JSON wire shape (camelCase priceLevel, optional keys omitted)."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class WeekendPlanRequest(BaseModel):
    """Body of the plan endpoints."""

    form: WeekendForm


class WeekendPlanResponse(BaseModel):
    """Successful plan response."""

    itinerary: WeekendItinerary


class ResilientPlanResponse(BaseModel):
    """Plan response that also reports which path produced the itinerary."""

    itinerary: WeekendItinerary
    source: PlanSource


class TextExportRequest(BaseModel):
    """Body of the plain-text export endpoint."""

    form: WeekendFormDraft = Field(default_factory=WeekendFormDraft)
    itinerary: WeekendItinerary


class ErrorResponse(BaseModel):
    """Error body used by the plan endpoints."""

    error: str

"""Enumerations shared by the form and itinerary schemas."""

from enum import StrEnum


class GroupType(StrEnum):
    """Who the weekend is planned for."""

    SOLO = "solo"
    COUPLE = "couple"
    FRIENDS = "friends"
    FAMILY = "family"
    UNSET = "unset"


class MoodType(StrEnum):
    """Overall vibe requested for the weekend."""

    CHILL = "chill"
    FOODIE = "foodie"
    EXPLORE = "explore"
    CULTURAL = "cultural"
    OUTDOORS = "outdoors"
    NIGHTLIFE = "nightlife"
    UNSET = "unset"


class BudgetLevel(StrEnum):
    """Spending level selected in the questionnaire."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    UNSET = "unset"


class DaysOption(StrEnum):
    """How much of the weekend is available."""

    SATURDAY = "sat"
    SUNDAY = "sun"
    BOTH = "both"
    HALF_DAY = "half-day"
    UNSET = "unset"


class ActivityKind(StrEnum):
    """Category of a single itinerary stop."""

    FOOD = "food"
    ACTIVITY = "activity"
    COFFEE = "coffee"
    NIGHTLIFE = "nightlife"


class PriceLevel(StrEnum):
    """Price indication attached to an itinerary stop."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class DayLabel(StrEnum):
    """Weekend day label."""

    SATURDAY = "Saturday"
    SUNDAY = "Sunday"


class PlanSource(StrEnum):
    """Which path produced an itinerary."""

    GENERATOR = "generator"
    FALLBACK = "fallback"

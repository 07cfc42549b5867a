"""Weekend planning rules shared by the prompt builder, the validator and the fallback."""

from __future__ import annotations

from dataclasses import dataclass

from this_weekend.schemas.enums import ActivityKind, BudgetLevel, DayLabel, DaysOption, GroupType, MoodType
from this_weekend.schemas.weekend import WeekendFormDraft

FULL_DAY_ACTIVITY_RANGE = (3, 5)
HALF_DAY_ACTIVITY_RANGE = (2, 3)

# Times before this hour belong to the previous evening (nightlife runs past midnight).
LATE_NIGHT_CUTOFF_HOUR = 5

TIME_WINDOWS: dict[str, tuple[str, str]] = {
    "coffee / breakfast": ("08:00", "11:00"),
    "lunch": ("12:00", "14:30"),
    "afternoon": ("14:00", "18:00"),
    "dinner": ("19:00", "21:30"),
    "nightlife": ("21:30", "01:00"),
}
HALF_DAY_BLOCK_HOURS = (4, 6)

DEFAULT_GROUP_FRAMING = "neutral adult"
DEFAULT_MOOD_BLEND = "a blend of chill and explore"


@dataclass(frozen=True, slots=True)
class ResolvedSelections:
    """Form selections with defaults substituted for unset values."""

    city: str
    group: str
    mood: str
    budget: BudgetLevel
    days: DaysOption

    def as_dict(self) -> dict[str, str]:
        return {
            "city": self.city,
            "group": self.group,
            "mood": self.mood,
            "budget": self.budget.value,
            "days": self.days.value,
        }


def resolve_days(days: DaysOption) -> DaysOption:
    """Unset days plan a full weekend."""
    return DaysOption.BOTH if days == DaysOption.UNSET else days


def resolve_selections(form: WeekendFormDraft) -> ResolvedSelections:
    """Substitute documented defaults for unset form fields."""
    return ResolvedSelections(
        city=form.city,
        group=DEFAULT_GROUP_FRAMING if form.group == GroupType.UNSET else form.group.value,
        mood=DEFAULT_MOOD_BLEND if form.mood == MoodType.UNSET else form.mood.value,
        budget=BudgetLevel.MEDIUM if form.budget == BudgetLevel.UNSET else form.budget,
        days=resolve_days(form.days),
    )


def expected_day_labels(days: DaysOption) -> list[tuple[DayLabel, ...]]:
    """Allowed labels for each day position, in order."""
    resolved = resolve_days(days)
    if resolved == DaysOption.SATURDAY:
        return [(DayLabel.SATURDAY,)]
    if resolved == DaysOption.SUNDAY:
        return [(DayLabel.SUNDAY,)]
    if resolved == DaysOption.HALF_DAY:
        return [(DayLabel.SATURDAY, DayLabel.SUNDAY)]
    return [(DayLabel.SATURDAY,), (DayLabel.SUNDAY,)]


def activity_range(days: DaysOption) -> tuple[int, int]:
    """Inclusive bounds on the number of activities per day."""
    if resolve_days(days) == DaysOption.HALF_DAY:
        return HALF_DAY_ACTIVITY_RANGE
    return FULL_DAY_ACTIVITY_RANGE


def allows_nightlife(form: WeekendFormDraft) -> bool:
    """Nightlife stops need the nightlife mood, a non-family group and a full day."""
    return (
        form.mood == MoodType.NIGHTLIFE
        and form.group != GroupType.FAMILY
        and resolve_days(form.days) != DaysOption.HALF_DAY
    )


def time_to_minutes(value: str) -> int:
    """Minutes since midnight for an HH:MM value."""
    hour, minute = value.split(":")
    return int(hour) * 60 + int(minute)


def is_nightlife(kind: ActivityKind | str | None) -> bool:
    return kind == ActivityKind.NIGHTLIFE


def activity_sort_key(value: str, kind: ActivityKind | str | None = None) -> int:
    """Ordering key for an HH:MM value.

    Nightlife stops before the late-night cutoff continue the previous
    evening and sort after 23:59. Other early-morning stops keep their
    clock position.
    """
    minutes = time_to_minutes(value)
    if is_nightlife(kind) and minutes < LATE_NIGHT_CUTOFF_HOUR * 60:
        minutes += 24 * 60
    return minutes

"""Plain-text rendering of an itinerary for copy/paste sharing."""

from __future__ import annotations

from this_weekend.schemas.weekend import ItineraryActivity, WeekendFormDraft, WeekendItinerary

_NOT_SET = "n/a"


def _choice_text(value: str) -> str:
    return _NOT_SET if value == "unset" else value


def _activity_line(activity: ItineraryActivity) -> str:
    line = f"- {activity.time} – {activity.title}"
    if activity.area:
        line += f" ({activity.area})"
    if activity.price_level:
        line += f" [{activity.price_level.value}]"
    return line


def format_weekend_as_text(itinerary: WeekendItinerary, form: WeekendFormDraft) -> str:
    """Render the itinerary as shareable plain text."""
    lines = [
        f"Weekend in {itinerary.city}",
        (
            f"Group: {_choice_text(form.group.value)} | Mood: {_choice_text(form.mood.value)} | "
            f"Budget: {_choice_text(form.budget.value)}"
        ),
        "",
    ]

    for day in itinerary.days:
        lines.append(f"=== {day.label.value} ===")
        lines.append(day.summary)
        lines.extend(_activity_line(activity) for activity in day.activities)
        lines.append("")

    return "\n".join(lines)

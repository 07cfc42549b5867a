"""Fallback itinerary tests."""

import itertools

import pytest

from this_weekend.schemas.enums import ActivityKind, BudgetLevel, DayLabel, DaysOption, GroupType, MoodType, PriceLevel
from this_weekend.schemas.weekend import WeekendForm
from this_weekend.services.fallback import build_fallback_itinerary
from this_weekend.services.itinerary_parser import parse_itinerary, serialize_itinerary

ALL_FORMS = [
    WeekendForm(city="Lisbon", group=group, mood=mood, budget=budget, days=days)
    for group, mood, budget, days in itertools.product(GroupType, MoodType, BudgetLevel, DaysOption)
]


def test_saturday_template_order() -> None:
    itinerary = build_fallback_itinerary(WeekendForm(city="Berlin", mood="chill", days="sat"))

    assert itinerary.city == "Berlin"
    assert [day.label for day in itinerary.days] == [DayLabel.SATURDAY]
    assert [item.kind for item in itinerary.days[0].activities] == [
        ActivityKind.COFFEE,
        ActivityKind.FOOD,
        ActivityKind.ACTIVITY,
        ActivityKind.FOOD,
    ]


def test_sunday_only_uses_sunday_label() -> None:
    itinerary = build_fallback_itinerary(WeekendForm(city="Berlin", days="sun"))

    assert [day.label for day in itinerary.days] == [DayLabel.SUNDAY]


def test_both_days_adds_lighter_sunday() -> None:
    itinerary = build_fallback_itinerary(WeekendForm(city="Berlin", days="both"))

    assert [day.label for day in itinerary.days] == [DayLabel.SATURDAY, DayLabel.SUNDAY]
    assert len(itinerary.days[1].activities) == 3


def test_nightlife_slot_appended_for_nightlife_mood() -> None:
    itinerary = build_fallback_itinerary(WeekendForm(city="Berlin", group="friends", mood="nightlife", days="sat"))

    last = itinerary.days[0].activities[-1]
    assert last.kind == ActivityKind.NIGHTLIFE
    assert last.time == "22:30"


def test_family_nightlife_gets_early_evening_activity() -> None:
    itinerary = build_fallback_itinerary(WeekendForm(city="Berlin", group="family", mood="nightlife", days="sat"))

    activities = itinerary.days[0].activities
    assert all(item.kind != ActivityKind.NIGHTLIFE for item in activities)
    assert any(item.time == "18:00" and item.kind == ActivityKind.ACTIVITY for item in activities)


def test_half_day_is_compact() -> None:
    itinerary = build_fallback_itinerary(WeekendForm(city="Berlin", mood="nightlife", days="half-day"))

    activities = itinerary.days[0].activities
    assert len(itinerary.days) == 1
    assert 2 <= len(activities) <= 3
    assert all(item.kind != ActivityKind.NIGHTLIFE for item in activities)


def test_budget_echoed_on_food_stops() -> None:
    itinerary = build_fallback_itinerary(WeekendForm(city="Berlin", budget="€€", days="sat"))

    food = [item for item in itinerary.days[0].activities if item.kind == ActivityKind.FOOD]
    assert all(item.price_level == PriceLevel.MEDIUM for item in food)


def test_foodie_summary() -> None:
    itinerary = build_fallback_itinerary(WeekendForm(city="Berlin", mood="foodie", days="sat"))

    assert "food-focused" in itinerary.days[0].summary


def test_is_deterministic() -> None:
    form = WeekendForm(city="Berlin", group="couple", mood="explore", budget="high", days="both")

    assert build_fallback_itinerary(form) == build_fallback_itinerary(form)


@pytest.mark.parametrize("form", ALL_FORMS)
def test_fallback_satisfies_form_rules(form: WeekendForm) -> None:
    itinerary = build_fallback_itinerary(form)

    result = parse_itinerary(serialize_itinerary(itinerary), form)

    assert result.ok, result.error
    assert result.itinerary == itinerary

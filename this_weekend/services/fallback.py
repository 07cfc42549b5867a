"""Deterministic local itinerary used when the generator path fails."""

from __future__ import annotations

from this_weekend.schemas.enums import (
    ActivityKind,
    BudgetLevel,
    DayLabel,
    DaysOption,
    GroupType,
    MoodType,
    PriceLevel,
)
from this_weekend.schemas.weekend import ItineraryActivity, ItineraryDay, WeekendForm, WeekendItinerary
from this_weekend.services.plan_policy import allows_nightlife, resolve_days


def _price_level(form: WeekendForm) -> PriceLevel | None:
    if form.budget == BudgetLevel.UNSET:
        return None
    return PriceLevel(form.budget.value)


def _primary_summary(form: WeekendForm) -> str:
    if form.mood == MoodType.FOODIE:
        return "Slow, food-focused day with cosy spots and local flavors."
    return "Relaxed day exploring nice corners of the city."


def _full_day(form: WeekendForm, label: DayLabel) -> ItineraryDay:
    price = _price_level(form)
    activities = [
        ItineraryActivity(
            time="10:00",
            title="Neighbourhood coffee & pastry",
            kind=ActivityKind.COFFEE,
            description="Start the day with a good coffee and something sweet in a calm place.",
            area="Central area",
            price_level=price,
        ),
        ItineraryActivity(
            time="12:30",
            title="Lunch at a local spot",
            kind=ActivityKind.FOOD,
            description="Casual restaurant with good reviews and a relaxed atmosphere.",
            area="Walkable from city centre",
            price_level=price,
        ),
        ItineraryActivity(
            time="15:00",
            title="Afternoon walk & discovery",
            kind=ActivityKind.ACTIVITY,
            description="Explore one nice neighbourhood, a park, or a viewpoint depending on the weather.",
            area="Scenic area",
        ),
    ]

    if form.mood == MoodType.NIGHTLIFE and form.group == GroupType.FAMILY:
        activities.append(
            ItineraryActivity(
                time="18:00",
                title="Early-evening family outing",
                kind=ActivityKind.ACTIVITY,
                description="A relaxed square, playground or riverside stroll while the evening lights come on.",
                area="Family-friendly area",
            )
        )

    activities.append(
        ItineraryActivity(
            time="19:30",
            title="Evening dinner",
            kind=ActivityKind.FOOD,
            description="Comfortable dinner spot that matches your budget and vibe for the evening.",
            area="Lively street or square",
            price_level=price,
        )
    )

    if allows_nightlife(form):
        activities.append(
            ItineraryActivity(
                time="22:30",
                title="Drinks or nightlife option",
                kind=ActivityKind.NIGHTLIFE,
                description="Optional bar or nightlife suggestion if you feel like staying out.",
                area="Nightlife area",
            )
        )

    return ItineraryDay(label=label, summary=_primary_summary(form), activities=activities)


def _half_day(form: WeekendForm) -> ItineraryDay:
    price = _price_level(form)
    return ItineraryDay(
        label=DayLabel.SATURDAY,
        summary="Compact half-day with a coffee, a short walk and a relaxed lunch.",
        activities=[
            ItineraryActivity(
                time="10:00",
                title="Neighbourhood coffee",
                kind=ActivityKind.COFFEE,
                description="Ease into the morning at a calm café.",
                area="Central area",
                price_level=price,
            ),
            ItineraryActivity(
                time="11:00",
                title="Short walk & viewpoint",
                kind=ActivityKind.ACTIVITY,
                description="A short walk through a pleasant neighbourhood ending at a viewpoint or park.",
                area="Scenic area",
            ),
            ItineraryActivity(
                time="13:00",
                title="Relaxed lunch",
                kind=ActivityKind.FOOD,
                description="Casual lunch spot close to where the walk ends.",
                area="Walkable from city centre",
                price_level=price,
            ),
        ],
    )


def _lighter_sunday(form: WeekendForm) -> ItineraryDay:
    price = _price_level(form)
    return ItineraryDay(
        label=DayLabel.SUNDAY,
        summary="Slower, softer day with time to recharge.",
        activities=[
            ItineraryActivity(
                time="10:30",
                title="Late brunch",
                kind=ActivityKind.FOOD,
                description="Brunch spot with good coffee and something savoury + sweet.",
                area="Central area",
                price_level=price,
            ),
            ItineraryActivity(
                time="13:30",
                title="Light activity",
                kind=ActivityKind.ACTIVITY,
                description="Simple activity like a park walk, small museum, or waterfront walk.",
                area="Calmer part of the city",
            ),
            ItineraryActivity(
                time="16:00",
                title="End-of-weekend café",
                kind=ActivityKind.COFFEE,
                description="A final stop to relax before the weekend ends.",
                area="Easy to reach before going home",
                price_level=price,
            ),
        ],
    )


def build_fallback_itinerary(form: WeekendForm) -> WeekendItinerary:
    """Build the template itinerary for a form. Pure, deterministic and always valid."""
    days = resolve_days(form.days)
    if days == DaysOption.HALF_DAY:
        return WeekendItinerary(city=form.city, days=[_half_day(form)])

    first_label = DayLabel.SUNDAY if days == DaysOption.SUNDAY else DayLabel.SATURDAY
    plan_days = [_full_day(form, first_label)]
    if days == DaysOption.BOTH:
        plan_days.append(_lighter_sunday(form))
    return WeekendItinerary(city=form.city, days=plan_days)

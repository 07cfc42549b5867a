"""Itinerary request builder tests."""

import pytest
from langchain_core.messages import HumanMessage, SystemMessage

from this_weekend.schemas.weekend import WeekendForm, WeekendFormDraft
from this_weekend.services.prompt_builder import build_generation_request, build_rules


def _rules_text(form: WeekendForm) -> str:
    return "\n".join(build_rules(form))


class TestDayRules:
    """Day-count policy."""

    def test_saturday_only(self):
        assert 'exactly 1 day labeled "Saturday"' in _rules_text(WeekendForm(city="Lisbon", days="sat"))

    def test_sunday_only(self):
        assert 'exactly 1 day labeled "Sunday"' in _rules_text(WeekendForm(city="Lisbon", days="sun"))

    def test_both_days_in_order(self):
        assert '"Saturday" first, then "Sunday"' in _rules_text(WeekendForm(city="Lisbon", days="both"))

    def test_half_day_is_compact_without_nightlife(self):
        text = _rules_text(WeekendForm(city="Lisbon", days="half-day"))

        assert "half-day" in text
        assert "4-6 hours" in text
        assert "no nightlife" in text
        assert "2-3 activities" in text

    def test_unset_days_plan_full_weekend(self):
        text = _rules_text(WeekendForm(city="Lisbon"))

        assert '"Saturday" first, then "Sunday"' in text
        assert "3-5 activities" in text


class TestPreferenceRules:
    """Mood, group, budget and kind policies."""

    def test_time_windows_are_listed(self):
        text = _rules_text(WeekendForm(city="Lisbon"))

        for window in ("08:00-11:00", "12:00-14:30", "14:00-18:00", "19:00-21:30", "21:30-01:00"):
            assert window in text

    def test_foodie_requires_two_food_stops(self):
        assert "at least 2 food stops" in _rules_text(WeekendForm(city="Lisbon", mood="foodie"))

    def test_cultural_caps_food_and_coffee(self):
        assert "at most 2 food or coffee stops" in _rules_text(WeekendForm(city="Lisbon", mood="cultural"))

    def test_family_never_gets_nightlife(self):
        text = _rules_text(WeekendForm(city="Lisbon", group="family", mood="nightlife"))

        assert 'never use kind "nightlife"' in text
        assert "family-friendly early-evening activity" in text

    def test_nightlife_forbidden_without_nightlife_mood(self):
        assert 'Never use kind "nightlife"' in _rules_text(WeekendForm(city="Lisbon", mood="chill"))

    def test_nightlife_mood_asks_for_exactly_one(self):
        text = _rules_text(WeekendForm(city="Lisbon", group="friends", mood="nightlife"))

        assert "exactly one nightlife activity" in text
        assert "social and lively" in text

    def test_half_day_nightlife_mood_asks_for_early_evening_stop(self):
        text = _rules_text(WeekendForm(city="Lisbon", group="friends", mood="nightlife", days="half-day"))

        assert "exactly one nightlife activity" not in text
        assert "lively early-evening stop" in text
        assert "no nightlife" in text

    def test_family_nightlife_mood_has_no_conflicting_rule(self):
        text = _rules_text(WeekendForm(city="Lisbon", group="family", mood="nightlife", days="sat"))

        assert "exactly one nightlife activity" not in text
        assert "lively early-evening stop" in text

    def test_unset_defaults(self):
        text = _rules_text(WeekendForm(city="Lisbon"))

        assert "blend of chill and explore" in text
        assert "neutral adult framing" in text
        assert "Budget medium" in text

    def test_generic_venue_names(self):
        assert "never invent proper names" in _rules_text(WeekendForm(city="Lisbon"))


class TestBuildGenerationRequest:
    """Request payload assembly."""

    def test_echoes_selections_with_defaults(self):
        request = build_generation_request(WeekendForm(city="Lisbon", group="couple", budget="€"))

        assert request.selections == {
            "city": "Lisbon",
            "group": "couple",
            "mood": "a blend of chill and explore",
            "budget": "low",
            "days": "both",
        }

    def test_output_schema_describes_itinerary(self):
        request = build_generation_request(WeekendForm(city="Lisbon"))

        assert set(request.output_schema["required"]) == {"city", "days"}
        assert "priceLevel" in request.output_schema["$defs"]["ItineraryActivity"]["properties"]

    def test_messages_carry_rules_schema_and_form(self):
        request = build_generation_request(WeekendForm(city="Lisbon", mood="foodie"), temperature=0.3)

        system, human = request.to_messages()

        assert isinstance(system, SystemMessage)
        assert isinstance(human, HumanMessage)
        assert "valid JSON" in system.content
        assert "- City: Lisbon" in human.content
        assert "at least 2 food stops" in human.content
        assert "priceLevel" in human.content
        assert request.temperature == 0.3

    def test_is_deterministic(self):
        form = WeekendForm(city="Lisbon", group="solo", mood="outdoors", budget="high", days="sun")

        assert build_generation_request(form) == build_generation_request(form)

    def test_requires_city(self):
        with pytest.raises(ValueError):
            build_generation_request(WeekendFormDraft(city=""))

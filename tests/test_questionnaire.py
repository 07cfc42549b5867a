"""Questionnaire step navigation tests."""

from this_weekend.schemas.weekend import WeekendFormDraft
from this_weekend.services.questionnaire import (
    QuestionnaireStep,
    can_advance,
    is_complete,
    next_step,
    previous_step,
)


def test_city_step_needs_two_characters() -> None:
    assert not can_advance(QuestionnaireStep.CITY, WeekendFormDraft(city=" P "))
    assert can_advance(QuestionnaireStep.CITY, WeekendFormDraft(city="Po"))


def test_next_step_is_gated_by_current_answer() -> None:
    draft = WeekendFormDraft(city="Porto")

    assert next_step(QuestionnaireStep.CITY, draft) == QuestionnaireStep.GROUP
    assert next_step(QuestionnaireStep.GROUP, draft) == QuestionnaireStep.GROUP
    assert next_step(QuestionnaireStep.GROUP, WeekendFormDraft(city="Porto", group="solo")) == QuestionnaireStep.MOOD


def test_steps_are_clamped() -> None:
    complete = WeekendFormDraft(city="Porto", group="solo", mood="chill", budget="low", days="sat")

    assert next_step(QuestionnaireStep.DAYS, complete) == QuestionnaireStep.DAYS
    assert previous_step(QuestionnaireStep.CITY) == QuestionnaireStep.CITY
    assert previous_step(QuestionnaireStep.BUDGET) == QuestionnaireStep.MOOD


def test_is_complete() -> None:
    assert not is_complete(WeekendFormDraft(city="Porto", group="solo"))
    assert is_complete(WeekendFormDraft(city="Porto", group="solo", mood="chill", budget="€€", days="both"))

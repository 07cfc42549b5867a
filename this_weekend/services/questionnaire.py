"""Questionnaire step navigation."""

from __future__ import annotations

from enum import IntEnum

from this_weekend.schemas.enums import BudgetLevel, DaysOption, GroupType, MoodType
from this_weekend.schemas.weekend import WeekendFormDraft

MIN_CITY_LENGTH = 2


class QuestionnaireStep(IntEnum):
    """Questionnaire steps in display order."""

    CITY = 1
    GROUP = 2
    MOOD = 3
    BUDGET = 4
    DAYS = 5


def can_advance(step: QuestionnaireStep, draft: WeekendFormDraft) -> bool:
    """Whether the field owned by `step` holds a usable answer."""
    if step == QuestionnaireStep.CITY:
        return len(draft.city.strip()) >= MIN_CITY_LENGTH
    if step == QuestionnaireStep.GROUP:
        return draft.group != GroupType.UNSET
    if step == QuestionnaireStep.MOOD:
        return draft.mood != MoodType.UNSET
    if step == QuestionnaireStep.BUDGET:
        return draft.budget != BudgetLevel.UNSET
    return draft.days != DaysOption.UNSET


def next_step(step: QuestionnaireStep, draft: WeekendFormDraft) -> QuestionnaireStep:
    """Move forward when the current answer is valid; the last step stays put."""
    if not can_advance(step, draft) or step == QuestionnaireStep.DAYS:
        return step
    return QuestionnaireStep(step + 1)


def previous_step(step: QuestionnaireStep) -> QuestionnaireStep:
    """Move back one step; the first step stays put."""
    if step == QuestionnaireStep.CITY:
        return step
    return QuestionnaireStep(step - 1)


def is_complete(draft: WeekendFormDraft) -> bool:
    """True once every step can be passed and the form can be submitted."""
    return all(can_advance(step, draft) for step in QuestionnaireStep)

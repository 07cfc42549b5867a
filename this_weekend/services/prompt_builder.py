"""Builds the generation request (rules, target schema, echoed selections) for a weekend form."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from langchain_core.messages import BaseMessage
from langchain_core.output_parsers import PydanticOutputParser
from langchain_core.prompts import ChatPromptTemplate

from this_weekend.schemas.enums import BudgetLevel, DaysOption, GroupType, MoodType
from this_weekend.schemas.weekend import WeekendForm, WeekendItinerary
from this_weekend.services.plan_policy import (
    FULL_DAY_ACTIVITY_RANGE,
    HALF_DAY_ACTIVITY_RANGE,
    HALF_DAY_BLOCK_HOURS,
    TIME_WINDOWS,
    ResolvedSelections,
    allows_nightlife,
    resolve_selections,
)

DEFAULT_TEMPERATURE = 0.7

SYSTEM_PROMPT = (
    "You are a helpful weekend travel and lifestyle planner.\n"
    "You generate structured, realistic weekend plans and respond ONLY with valid JSON."
)

USER_PROMPT = (
    "User preferences:\n"
    "- City: {city}\n"
    "- Group: {group}\n"
    "- Mood: {mood}\n"
    "- Budget: {budget}\n"
    "- Days: {days}\n\n"
    "Rules:\n"
    "{rules}\n\n"
    "Return exactly one JSON object describing the itinerary and nothing else "
    "(no markdown, no comments, no surrounding text).\n"
    "{format_instructions}"
)

_MOOD_RULES = {
    MoodType.FOODIE: "Foodie mood: include at least 2 food stops per day.",
    MoodType.CHILL: "Chill mood: keep the number of stops low and favour parks, cafés and slow moments.",
    MoodType.EXPLORE: "Explore mood: mix a neighbourhood walk, a viewpoint and some light culture.",
    MoodType.CULTURAL: (
        "Cultural mood: centre the day on museums, galleries and historic areas; "
        "use at most 2 food or coffee stops per day."
    ),
    MoodType.OUTDOORS: (
        "Outdoors mood: parks, waterfronts and viewpoints are the main stops; food stops are secondary."
    ),
    MoodType.NIGHTLIFE: (
        "Nightlife mood: include exactly one nightlife activity in the evening and keep the rest of the day lighter."
    ),
    MoodType.UNSET: "No mood selected: plan a blend of chill and explore.",
}

# Nightlife mood for a plan that may not contain nightlife stops (family group or half-day).
_NIGHTLIFE_WITHOUT_NIGHTLIFE_RULE = (
    "Nightlife mood, but this plan allows no nightlife stops: add one lively early-evening stop "
    "with kind \"activity\" or \"food\" instead, and never use kind \"nightlife\"."
)

_GROUP_RULES = {
    GroupType.FAMILY: (
        "Family group: never use kind \"nightlife\"; "
        "use a family-friendly early-evening activity instead. Keep every stop suitable for children."
    ),
    GroupType.COUPLE: "Couple: frame the day as cosy and intimate.",
    GroupType.FRIENDS: "Friends: frame the day as social and lively.",
    GroupType.SOLO: "Solo traveller: favour safe, comfortable and easy-to-navigate places.",
    GroupType.UNSET: "No group selected: use neutral adult framing.",
}

_BUDGET_RULES = {
    BudgetLevel.LOW: "Budget low: prefer free or cheap options; priceLevel should mostly be \"low\".",
    BudgetLevel.MEDIUM: "Budget medium: prefer mid-range options; priceLevel should mostly be \"medium\".",
    BudgetLevel.HIGH: "Budget high: upscale options are welcome; priceLevel may be \"high\".",
}


@dataclass(frozen=True, slots=True)
class GenerationRequest:
    """Everything the generator needs for one itinerary.

    Attributes:
        system_prompt: system instruction for the chat model.
        output_schema: JSON schema of the object the model must return.
        rules: constraint lines the itinerary must satisfy.
        selections: user selections with defaults substituted.
        format_instructions: schema rendering appended to the user message.
        temperature: sampling temperature.
    """

    system_prompt: str
    output_schema: dict[str, Any]
    rules: tuple[str, ...]
    selections: dict[str, str]
    format_instructions: str
    temperature: float = DEFAULT_TEMPERATURE

    def to_messages(self) -> list[BaseMessage]:
        """Render the system and user chat messages."""
        prompt = ChatPromptTemplate.from_messages([("system", "{system_prompt}"), ("human", USER_PROMPT)])
        return prompt.format_messages(
            system_prompt=self.system_prompt,
            rules="\n".join(f"- {rule}" for rule in self.rules),
            format_instructions=self.format_instructions,
            **self.selections,
        )


def _day_rules(selections: ResolvedSelections) -> list[str]:
    days = selections.days
    if days == DaysOption.SATURDAY:
        return ["Plan exactly 1 day labeled \"Saturday\"."]
    if days == DaysOption.SUNDAY:
        return ["Plan exactly 1 day labeled \"Sunday\"."]
    if days == DaysOption.HALF_DAY:
        low, high = HALF_DAY_BLOCK_HOURS
        return [
            "Plan exactly 1 half-day; label it \"Saturday\" or \"Sunday\".",
            f"Keep the half-day inside one compact block of {low}-{high} hours with no nightlife.",
        ]
    return ["Plan exactly 2 days: \"Saturday\" first, then \"Sunday\"."]


def _activity_count_rules(selections: ResolvedSelections) -> list[str]:
    if selections.days == DaysOption.HALF_DAY:
        low, high = HALF_DAY_ACTIVITY_RANGE
        return [f"The half-day has {low}-{high} activities."]
    low, high = FULL_DAY_ACTIVITY_RANGE
    return [f"Each full day has {low}-{high} activities."]


def _time_rules() -> list[str]:
    windows = "; ".join(f"{name} {start}-{end}" for name, (start, end) in TIME_WINDOWS.items())
    return [
        f"Use realistic 24-hour HH:MM times within these windows: {windows}.",
        "List activities of a day in chronological order.",
    ]


def _mood_rule(form: WeekendForm) -> str:
    if form.mood == MoodType.NIGHTLIFE and not allows_nightlife(form):
        return _NIGHTLIFE_WITHOUT_NIGHTLIFE_RULE
    return _MOOD_RULES[form.mood]


def _kind_rules(form: WeekendForm) -> list[str]:
    rules = [
        "Use kind \"food\" for meals, \"coffee\" for café-type stops and \"activity\" for every other "
        "non-food stop.",
    ]
    if form.mood != MoodType.NIGHTLIFE:
        rules.append("Never use kind \"nightlife\" because the nightlife mood was not selected.")
    return rules


def build_rules(form: WeekendForm) -> tuple[str, ...]:
    """Collect the textual rule set for a form."""
    selections = resolve_selections(form)
    rules: list[str] = []
    rules.extend(_day_rules(selections))
    rules.extend(_activity_count_rules(selections))
    rules.extend(_time_rules())
    rules.append(_mood_rule(form))
    rules.append(_GROUP_RULES[form.group])
    rules.append(_BUDGET_RULES[selections.budget])
    rules.extend(_kind_rules(form))
    rules.append("Use generic venue descriptors only (e.g. \"riverside café\"); never invent proper names.")
    rules.append(f"Set \"city\" to \"{selections.city}\".")
    return tuple(rules)


def build_generation_request(form: WeekendForm, *, temperature: float = DEFAULT_TEMPERATURE) -> GenerationRequest:
    """Build the generation request for a submitted form. Pure function of its input."""
    if not form.city.strip():
        raise ValueError("city is required to build a generation request")

    parser = PydanticOutputParser(pydantic_object=WeekendItinerary)
    return GenerationRequest(
        system_prompt=SYSTEM_PROMPT,
        output_schema=WeekendItinerary.model_json_schema(by_alias=True),
        rules=build_rules(form),
        selections=resolve_selections(form).as_dict(),
        format_instructions=parser.get_format_instructions(),
        temperature=temperature,
    )

"""Weekend plan graph state."""

from typing import TypedDict

from this_weekend.core.errors import PlanErrorKind
from this_weekend.schemas.enums import PlanSource
from this_weekend.schemas.weekend import WeekendItinerary
from this_weekend.services.itinerary_parser import ItineraryValidationError
from this_weekend.services.prompt_builder import GenerationRequest


class WeekendPlanState(TypedDict, total=False):
    """State of one itinerary generation.

    Keys:
        form: submitted form payload
        allow_fallback: route failures to the local template instead of ending with an error
        temperature: sampling temperature for the generator
        generation_request: prompt, rules and schema built from the form
        raw_response: generator reply text
        itinerary: validated or fallback itinerary
        source: which path produced the itinerary
        error_kind: failure category
        validation_error: typed validator rejection
        error: error message
    """

    form: dict
    allow_fallback: bool
    temperature: float
    generation_request: GenerationRequest
    raw_response: str
    itinerary: WeekendItinerary | None
    source: PlanSource
    error_kind: PlanErrorKind | None
    validation_error: ItineraryValidationError | None
    error: str | None

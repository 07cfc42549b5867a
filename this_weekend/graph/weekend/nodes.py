"""Weekend plan graph nodes."""

from __future__ import annotations

from langchain_core.runnables import RunnableConfig

from this_weekend.core.errors import PlanErrorKind
from this_weekend.core.logger import get_logger
from this_weekend.graph.weekend.state import WeekendPlanState
from this_weekend.schemas.enums import PlanSource
from this_weekend.schemas.weekend import WeekendForm
from this_weekend.services.fallback import build_fallback_itinerary
from this_weekend.services.generator import ChatOpenAIGenerator, ItineraryGenerator
from this_weekend.services.itinerary_parser import parse_itinerary
from this_weekend.services.prompt_builder import DEFAULT_TEMPERATURE, build_generation_request

logger = get_logger(__name__)


def build_request(state: WeekendPlanState) -> WeekendPlanState:
    """Build the generation request from the submitted form."""
    try:
        form = WeekendForm.model_validate(state.get("form") or {})
        request = build_generation_request(form, temperature=state.get("temperature", DEFAULT_TEMPERATURE))
    except ValueError as exc:
        logger.error("Weekend form rejected: %s", exc)
        return {**state, "error_kind": PlanErrorKind.INPUT_INVALID, "error": "form data is invalid"}

    return {**state, "generation_request": request}


async def call_generator(state: WeekendPlanState, config: RunnableConfig) -> WeekendPlanState:
    """Invoke the external generator once; any exception marks the upstream unavailable."""
    request = state.get("generation_request")
    if request is None:
        return {**state, "error_kind": PlanErrorKind.INPUT_INVALID, "error": "generation_request is missing"}

    generator: ItineraryGenerator | None = config.get("configurable", {}).get("generator")
    try:
        if generator is None:
            generator = ChatOpenAIGenerator()
        raw_response = await generator.complete(request)
    except Exception as exc:
        logger.error("Itinerary generator failed: %s", exc)
        return {**state, "error_kind": PlanErrorKind.UPSTREAM_UNAVAILABLE, "error": str(exc) or type(exc).__name__}

    return {**state, "raw_response": raw_response}


def validate_response(state: WeekendPlanState) -> WeekendPlanState:
    """Parse and validate the generator reply against the form."""
    form = WeekendForm.model_validate(state["form"])
    result = parse_itinerary(state.get("raw_response") or "", form)
    if not result.ok:
        logger.warning("Generator response rejected: %s", result.error)
        return {
            **state,
            "error_kind": PlanErrorKind.RESPONSE_MALFORMED,
            "validation_error": result.error,
            "error": str(result.error),
        }

    return {**state, "itinerary": result.itinerary, "source": PlanSource.GENERATOR}


def apply_fallback(state: WeekendPlanState) -> WeekendPlanState:
    """Replace a failed generation with the local template itinerary."""
    form = WeekendForm.model_validate(state["form"])
    logger.info(
        "Using fallback itinerary for %s (%s)",
        form.city,
        state.get("error_kind"),
        extra={"plan_source": PlanSource.FALLBACK.value},
    )
    return {**state, "itinerary": build_fallback_itinerary(form), "source": PlanSource.FALLBACK}

"""Weekend itinerary orchestration."""

from __future__ import annotations

from dataclasses import dataclass

from this_weekend.core.config import get_settings
from this_weekend.core.errors import (
    InputInvalidError,
    PlanErrorKind,
    ResponseMalformedError,
    UpstreamUnavailableError,
)
from this_weekend.core.logger import get_logger
from this_weekend.graph.weekend import compiled_weekend_graph
from this_weekend.schemas.enums import PlanSource
from this_weekend.schemas.weekend import WeekendForm, WeekendItinerary
from this_weekend.services.fallback import build_fallback_itinerary
from this_weekend.services.generator import ItineraryGenerator

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class PlanOutcome:
    """Itinerary plus the path that produced it."""

    itinerary: WeekendItinerary
    source: PlanSource


async def run_weekend_pipeline(
    form: WeekendForm,
    *,
    allow_fallback: bool,
    generator: ItineraryGenerator | None = None,
) -> dict:
    """Run the weekend plan graph and return its final state."""
    initial_state = {
        "form": form.model_dump(mode="json"),
        "allow_fallback": allow_fallback,
        "temperature": get_settings().LLM_TEMPERATURE,
    }
    return await compiled_weekend_graph.ainvoke(
        initial_state,
        config={"configurable": {"generator": generator}},
    )


async def request_weekend_plan(form: WeekendForm, generator: ItineraryGenerator | None = None) -> WeekendItinerary:
    """Generate an itinerary without fallback.

    Raises:
        InputInvalidError: The form could not be turned into a request.
        UpstreamUnavailableError: The generator call failed.
        ResponseMalformedError: The reply could not be decoded or validated.
    """
    result = await run_weekend_pipeline(form, allow_fallback=False, generator=generator)

    error_kind = result.get("error_kind")
    if error_kind == PlanErrorKind.UPSTREAM_UNAVAILABLE:
        raise UpstreamUnavailableError(result.get("error") or "generator call failed")
    if error_kind == PlanErrorKind.RESPONSE_MALFORMED:
        raise ResponseMalformedError(
            result.get("error") or "generator response rejected",
            validation_error=result.get("validation_error"),
        )
    if error_kind == PlanErrorKind.INPUT_INVALID:
        raise InputInvalidError(result.get("error") or "form data is invalid")

    itinerary = result.get("itinerary")
    if itinerary is None:
        raise ResponseMalformedError("itinerary result is missing")
    return itinerary


async def generate_weekend_plan(form: WeekendForm, generator: ItineraryGenerator | None = None) -> PlanOutcome:
    """Generate an itinerary, falling back to the local template on any failure. Never raises."""
    try:
        result = await run_weekend_pipeline(form, allow_fallback=True, generator=generator)
        itinerary = result.get("itinerary")
        if itinerary is not None:
            return PlanOutcome(itinerary=itinerary, source=result.get("source", PlanSource.GENERATOR))
        logger.warning("Weekend pipeline ended without an itinerary: %s", result.get("error"))
    except Exception as exc:
        logger.exception("Weekend pipeline crashed; using fallback", exc_info=exc)

    return PlanOutcome(itinerary=build_fallback_itinerary(form), source=PlanSource.FALLBACK)

"""Weekend plan API."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse, PlainTextResponse
from pydantic import ValidationError

from this_weekend.api.dependencies import get_itinerary_generator
from this_weekend.core.errors import InputInvalidError
from this_weekend.core.logger import get_logger
from this_weekend.schemas.weekend import (
    ErrorResponse,
    ResilientPlanResponse,
    TextExportRequest,
    WeekendForm,
    WeekendPlanResponse,
)
from this_weekend.services.generator import ItineraryGenerator
from this_weekend.services.planner_service import generate_weekend_plan, request_weekend_plan
from this_weekend.services.text_export import format_weekend_as_text

router = APIRouter(prefix="/api", tags=["weekend-plan"])
logger = get_logger(__name__)

INVALID_JSON_MESSAGE = "Invalid JSON"
MISSING_FORM_MESSAGE = "Missing form data"
INVALID_FORM_MESSAGE = "Invalid form data"

_FORM_BODY_EXAMPLE = {
    "form": {"city": "Lisbon", "group": "couple", "mood": "foodie", "budget": "medium", "days": "both"}
}

WEEKEND_PLAN_ERROR_EXAMPLES = {
    400: {
        "invalid_json": {
            "summary": "Unparseable body",
            "description": "The request body is not valid JSON",
            "value": {"error": INVALID_JSON_MESSAGE},
        },
        "missing_form": {
            "summary": "Missing form",
            "description": "`form` or `form.city` is absent or blank",
            "value": {"error": MISSING_FORM_MESSAGE},
        },
        "invalid_form": {
            "summary": "Invalid form",
            "description": "A form field holds an unknown value",
            "value": {"error": INVALID_FORM_MESSAGE},
        },
    },
    500: {
        "parse_failure": {
            "summary": "Unusable AI response",
            "description": "The generator reply could not be decoded or validated",
            "value": {"error": "Failed to parse AI response"},
        },
        "backend_failure": {
            "summary": "AI backend error",
            "description": "The generator call itself failed",
            "value": {"error": "AI backend error"},
        },
    },
}


async def _read_form(request: Request) -> WeekendForm:
    """Read and validate `{form: WeekendForm}` from the raw request body."""
    try:
        body: Any = await request.json()
    except ValueError as exc:
        raise InputInvalidError(INVALID_JSON_MESSAGE) from exc

    form_data = body.get("form") if isinstance(body, dict) else None
    if not isinstance(form_data, dict):
        raise InputInvalidError(MISSING_FORM_MESSAGE)

    city = form_data.get("city")
    if city is None or (isinstance(city, str) and not city.strip()):
        raise InputInvalidError(MISSING_FORM_MESSAGE)

    try:
        return WeekendForm.model_validate(form_data)
    except ValidationError as exc:
        logger.info("Rejected weekend form: %s", exc.errors()[0].get("msg"))
        raise InputInvalidError(INVALID_FORM_MESSAGE) from exc


@router.post(
    "/weekend-plan",
    response_model=WeekendPlanResponse,
    responses={
        400: {
            "model": ErrorResponse,
            "description": "Invalid request",
            "content": {"application/json": {"examples": WEEKEND_PLAN_ERROR_EXAMPLES[400]}},
        },
        500: {
            "model": ErrorResponse,
            "description": "Generation failed",
            "content": {"application/json": {"examples": WEEKEND_PLAN_ERROR_EXAMPLES[500]}},
        },
    },
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {"application/json": {"example": _FORM_BODY_EXAMPLE}},
        }
    },
)
async def create_weekend_plan(
    request: Request,
    generator: ItineraryGenerator = Depends(get_itinerary_generator),
) -> JSONResponse:
    """Generate a weekend itinerary. Generator failures surface as 500 errors."""
    form = await _read_form(request)
    itinerary = await request_weekend_plan(form, generator=generator)
    logger.info("Weekend plan generated for %s (%d day(s))", form.city, len(itinerary.days))
    return JSONResponse(status_code=200, content={"itinerary": itinerary.to_payload()})


@router.post(
    "/weekend-plan/resilient",
    response_model=ResilientPlanResponse,
    responses={
        400: {
            "model": ErrorResponse,
            "description": "Invalid request",
            "content": {"application/json": {"examples": WEEKEND_PLAN_ERROR_EXAMPLES[400]}},
        },
    },
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {"application/json": {"example": _FORM_BODY_EXAMPLE}},
        }
    },
)
async def create_resilient_weekend_plan(
    request: Request,
    generator: ItineraryGenerator = Depends(get_itinerary_generator),
) -> JSONResponse:
    """Generate a weekend itinerary, using the local template when generation fails."""
    form = await _read_form(request)
    outcome = await generate_weekend_plan(form, generator=generator)
    return JSONResponse(
        status_code=200,
        content={"itinerary": outcome.itinerary.to_payload(), "source": outcome.source.value},
    )


@router.post("/weekend-plan/text", response_class=PlainTextResponse)
def export_weekend_plan_text(body: TextExportRequest) -> PlainTextResponse:
    """Render an itinerary as shareable plain text."""
    return PlainTextResponse(format_weekend_as_text(body.itinerary, body.form))

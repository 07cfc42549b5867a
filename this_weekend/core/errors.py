"""Error types raised by the weekend planning pipeline."""

from __future__ import annotations

from enum import StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from this_weekend.services.itinerary_parser import ItineraryValidationError


class PlanErrorKind(StrEnum):
    """Failure categories of one itinerary generation."""

    INPUT_INVALID = "INPUT_INVALID"
    UPSTREAM_UNAVAILABLE = "UPSTREAM_UNAVAILABLE"
    RESPONSE_MALFORMED = "RESPONSE_MALFORMED"


class WeekendPlanError(Exception):
    """Base class for weekend planning failures."""

    kind: PlanErrorKind = PlanErrorKind.INPUT_INVALID


class InputInvalidError(WeekendPlanError):
    """The submitted form cannot be planned."""

    kind = PlanErrorKind.INPUT_INVALID


class UpstreamUnavailableError(WeekendPlanError):
    """The generator call failed (network, timeout, non-success status)."""

    kind = PlanErrorKind.UPSTREAM_UNAVAILABLE


class ResponseMalformedError(WeekendPlanError):
    """The generator answered but the payload could not be decoded or validated."""

    kind = PlanErrorKind.RESPONSE_MALFORMED

    def __init__(self, message: str, validation_error: ItineraryValidationError | None = None) -> None:
        super().__init__(message)
        self.validation_error = validation_error

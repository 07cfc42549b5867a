"""Parsing, validation and normalization of raw generator output."""

from __future__ import annotations

import json
from dataclasses import dataclass
from enum import StrEnum
from typing import Any

from pydantic import ValidationError

from this_weekend.core.logger import get_logger
from this_weekend.schemas.enums import DaysOption, GroupType, MoodType
from this_weekend.schemas.weekend import ItineraryDay, WeekendFormDraft, WeekendItinerary
from this_weekend.services.plan_policy import (
    activity_range,
    activity_sort_key,
    allows_nightlife,
    expected_day_labels,
    is_nightlife,
    resolve_days,
)

logger = get_logger(__name__)


class ValidationErrorKind(StrEnum):
    """Why a generator payload was rejected."""

    MALFORMED = "MALFORMED"
    SCHEMA_MISMATCH = "SCHEMA_MISMATCH"
    RULE_VIOLATION = "RULE_VIOLATION"


@dataclass(frozen=True, slots=True)
class ItineraryValidationError:
    """Typed rejection reason. `path` is a dotted field path such as `days.0.activities.1.time`."""

    kind: ValidationErrorKind
    message: str
    path: str | None = None

    def __str__(self) -> str:
        if self.path:
            return f"{self.kind}: {self.path}: {self.message}"
        return f"{self.kind}: {self.message}"


@dataclass(frozen=True, slots=True)
class ParseResult:
    """Tagged result: exactly one of `itinerary` and `error` is set."""

    itinerary: WeekendItinerary | None = None
    error: ItineraryValidationError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, itinerary: WeekendItinerary) -> ParseResult:
        return cls(itinerary=itinerary)

    @classmethod
    def failure(cls, kind: ValidationErrorKind, message: str, path: str | None = None) -> ParseResult:
        return cls(error=ItineraryValidationError(kind=kind, message=message, path=path))


def strip_code_fence(text: str) -> str:
    """Remove a surrounding Markdown code fence, if any."""
    content = (text or "").strip()
    if content.startswith("```"):
        parts = content.split("```")
        if len(parts) > 1:
            content = parts[1].strip()
            if content.lower().startswith("json"):
                content = content[4:].strip()
    return content.strip()


def _decode(raw: str) -> dict[str, Any] | None:
    try:
        data = json.loads(strip_code_fence(raw))
    except (TypeError, ValueError, RecursionError):
        return None
    if not isinstance(data, dict):
        return None

    envelope = data.get("itinerary")
    if isinstance(envelope, dict) and "days" not in data:
        return envelope
    return data


def _first_schema_error(exc: ValidationError) -> tuple[str, str]:
    error = exc.errors()[0]
    path = ".".join(str(part) for part in error.get("loc", ()))
    return path, error.get("msg", "invalid value")


def _sort_activities(itinerary: WeekendItinerary) -> WeekendItinerary:
    """Return the itinerary with each day's activities in time order."""
    repaired_days: list[ItineraryDay] = []
    repaired = False
    for day in itinerary.days:
        ordered = sorted(day.activities, key=lambda activity: activity_sort_key(activity.time, activity.kind))
        if ordered != day.activities:
            repaired = True
        repaired_days.append(day.model_copy(update={"activities": ordered}))

    if not repaired:
        return itinerary
    logger.info("Generator returned activities out of time order; re-sorted")
    return itinerary.model_copy(update={"days": repaired_days})


def _check_rules(itinerary: WeekendItinerary, form: WeekendFormDraft) -> ItineraryValidationError | None:
    """Check the itinerary against the form's day, count and nightlife policies."""
    label_slots = expected_day_labels(form.days)
    if len(itinerary.days) != len(label_slots):
        return ItineraryValidationError(
            kind=ValidationErrorKind.RULE_VIOLATION,
            message=f"expected {len(label_slots)} day(s) but got {len(itinerary.days)}",
            path="days",
        )

    low, high = activity_range(form.days)
    nightlife_allowed = allows_nightlife(form)
    for day_index, (day, allowed_labels) in enumerate(zip(itinerary.days, label_slots)):
        if day.label not in allowed_labels:
            return ItineraryValidationError(
                kind=ValidationErrorKind.RULE_VIOLATION,
                message=f"label must be one of {', '.join(allowed_labels)}",
                path=f"days.{day_index}.label",
            )

        count = len(day.activities)
        if count < low or count > high:
            return ItineraryValidationError(
                kind=ValidationErrorKind.RULE_VIOLATION,
                message=f"{count} activities (allowed: {low}-{high})",
                path=f"days.{day_index}.activities",
            )

        if nightlife_allowed:
            continue
        for activity_index, activity in enumerate(day.activities):
            if is_nightlife(activity.kind):
                return ItineraryValidationError(
                    kind=ValidationErrorKind.RULE_VIOLATION,
                    message=_nightlife_reason(form),
                    path=f"days.{day_index}.activities.{activity_index}.kind",
                )
    return None


def _nightlife_reason(form: WeekendFormDraft) -> str:
    if form.group == GroupType.FAMILY:
        return "nightlife is not allowed for family plans"
    if resolve_days(form.days) == DaysOption.HALF_DAY:
        return "nightlife is not allowed in a half-day plan"
    if form.mood != MoodType.NIGHTLIFE:
        return "nightlife is only allowed with the nightlife mood"
    return "nightlife is not allowed"


def parse_itinerary(raw: str, form: WeekendFormDraft | None = None) -> ParseResult:
    """Decode, validate and normalize generator text.

    Args:
        raw: Raw text returned by the generator, expected to be one JSON object.
        form: Form the itinerary was requested for. When given, the day,
            activity-count and nightlife policies are enforced as well.

    Returns:
        A `ParseResult`. On success the itinerary is schema valid and every
        day's activities are in time order.
    """
    data = _decode(raw)
    if data is None:
        return ParseResult.failure(ValidationErrorKind.MALFORMED, "response is not a JSON object")

    try:
        itinerary = WeekendItinerary.model_validate(data)
    except ValidationError as exc:
        path, message = _first_schema_error(exc)
        return ParseResult.failure(ValidationErrorKind.SCHEMA_MISMATCH, message, path=path or None)

    itinerary = _sort_activities(itinerary)

    if form is not None:
        rule_error = _check_rules(itinerary, form)
        if rule_error is not None:
            return ParseResult(error=rule_error)

    return ParseResult.success(itinerary)


def serialize_itinerary(itinerary: WeekendItinerary) -> str:
    """Serialize an itinerary to the JSON text `parse_itinerary` accepts."""
    return json.dumps(itinerary.to_payload(), ensure_ascii=False)

"""Fake itinerary generator.

Returns canned replies (or raises) without any network access.
"""

from __future__ import annotations

import json

from this_weekend.services.generator import ItineraryGenerator
from this_weekend.services.prompt_builder import GenerationRequest


def activity(time: str, title: str, kind: str, **extra) -> dict:
    """Build an activity payload with a generic description."""
    return {"time": time, "title": title, "kind": kind, "description": f"{title} in a nice area.", **extra}


def saturday_payload(city: str = "Lisbon", *, nightlife: bool = False) -> dict:
    """A valid single-Saturday itinerary payload."""
    activities = [
        activity("09:30", "Corner café breakfast", "coffee", area="Old town", priceLevel="low"),
        activity("12:30", "Market hall lunch", "food", area="Riverside", priceLevel="medium"),
        activity("15:00", "Hilltop viewpoint walk", "activity", area="Castle hill"),
        activity("19:30", "Neighbourhood tavern dinner", "food", area="Old town", priceLevel="medium"),
    ]
    if nightlife:
        activities.append(activity("22:30", "Live music bar", "nightlife", area="Nightlife district"))
    return {
        "city": city,
        "days": [{"label": "Saturday", "summary": "Easy day around the old town.", "activities": activities}],
    }


def weekend_payload(city: str = "Lisbon") -> dict:
    """A valid Saturday + Sunday itinerary payload."""
    payload = saturday_payload(city)
    payload["days"].append(
        {
            "label": "Sunday",
            "summary": "Slow Sunday by the water.",
            "activities": [
                activity("10:30", "Bakery brunch", "food", priceLevel="low"),
                activity("13:00", "Waterfront stroll", "activity", area="Riverside"),
                activity("16:00", "Garden café", "coffee"),
            ],
        }
    )
    return payload


class FakeGenerator(ItineraryGenerator):
    """Generator stub recording every request it receives."""

    def __init__(self, reply: str | dict | None = None, error: Exception | None = None) -> None:
        self._reply = json.dumps(reply) if isinstance(reply, dict) else reply
        self._error = error
        self.requests: list[GenerationRequest] = []

    async def complete(self, request: GenerationRequest) -> str:
        self.requests.append(request)
        if self._error is not None:
            raise self._error
        return self._reply or ""

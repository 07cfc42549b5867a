"""API dependencies."""

from this_weekend.services.generator import ChatOpenAIGenerator, ItineraryGenerator


def get_itinerary_generator() -> ItineraryGenerator:
    """Provide the itinerary generator used by the plan endpoints."""
    return ChatOpenAIGenerator()

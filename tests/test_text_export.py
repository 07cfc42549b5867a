"""Plain-text export tests."""

from this_weekend.schemas.weekend import WeekendForm, WeekendItinerary
from this_weekend.services.text_export import format_weekend_as_text


def test_format_weekend_as_text() -> None:
    itinerary = WeekendItinerary.model_validate(
        {
            "city": "Lisbon",
            "days": [
                {
                    "label": "Saturday",
                    "summary": "Easy day.",
                    "activities": [
                        {
                            "time": "10:00",
                            "title": "Coffee",
                            "kind": "coffee",
                            "description": "",
                            "area": "Old town",
                            "priceLevel": "€",
                        },
                        {"time": "15:00", "title": "Viewpoint", "kind": "activity", "description": ""},
                    ],
                }
            ],
        }
    )
    form = WeekendForm(city="Lisbon", group="friends", mood="explore")

    text = format_weekend_as_text(itinerary, form)

    assert text.split("\n") == [
        "Weekend in Lisbon",
        "Group: friends | Mood: explore | Budget: n/a",
        "",
        "=== Saturday ===",
        "Easy day.",
        "- 10:00 – Coffee (Old town) [low]",
        "- 15:00 – Viewpoint",
        "",
    ]

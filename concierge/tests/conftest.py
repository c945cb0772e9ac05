from __future__ import annotations

from typing import Any

import pytest

from concierge.search.models import Listing

_BASE_LISTING: dict[str, Any] = {
    "org_key": "BB_test",
    "post_type": "restaurant",
    "excerpt": "",
    "content_html": "<p></p>",
    "url": "https://example.test/listing",
    "featured_image": "https://example.test/listing.jpg",
    "sort_rating": 5.0,
    "sort_expense": 2,
    "sort_date": "2024-01-01",
    "expense_level": "$$",
    "contact": {
        "phone": "555-0100",
        "email": "hello@example.test",
        "website": "https://example.test",
    },
    "created_at": "2024-01-01T00:00:00Z",
    "updated_at": "2024-01-01T00:00:00Z",
}

_BASE_LOCATION: dict[str, Any] = {
    "country": "United States",
    "region": "New Jersey",
    "city": "Hoboken",
    "neighbourhood": None,
    "street": "1 Main St",
    "zip": "07030",
    "lat": 40.74,
    "lng": -74.03,
}


def build_listing(listing_id: str, location: dict[str, Any] | None = None, **overrides: Any) -> Listing:
    data = {**_BASE_LISTING, "id": listing_id, "title": f"Listing {listing_id}"}
    data.update(overrides)
    data.setdefault("sort_title", data["title"])
    data["location"] = {**_BASE_LOCATION, **(location or {})}
    return Listing.model_validate(data)


@pytest.fixture
def make_listing():
    return build_listing

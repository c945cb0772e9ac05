from __future__ import annotations

from unittest.mock import patch

from concierge.catalog.mock import MockCatalogProvider
from concierge.config import ServiceConfig
from concierge.locations.models import LocationParams
from concierge.search.models import SearchRequest
from concierge.service import SearchService

ORG = "BB_vrconcierge"


def _service(**overrides) -> SearchService:
    config = ServiceConfig(**overrides)
    return SearchService(MockCatalogProvider(config), config)


@patch("concierge.service.time.sleep")
def test_latency_injected_in_mock_mode(mock_sleep):
    service = _service(api_mode="mock", latency_ms=100)
    service.search(SearchRequest(org_key=ORG))
    service.locations(LocationParams(org_key=ORG))
    assert mock_sleep.call_count == 2
    mock_sleep.assert_called_with(0.1)


@patch("concierge.service.time.sleep")
def test_no_latency_by_default(mock_sleep):
    _service(latency_ms=0).search(SearchRequest(org_key=ORG))
    mock_sleep.assert_not_called()


@patch("concierge.service.time.sleep")
def test_no_latency_outside_mock_mode(mock_sleep):
    config = ServiceConfig(api_mode="remote", latency_ms=100)
    service = SearchService(MockCatalogProvider(ServiceConfig()), config)
    service.facets(ORG)
    mock_sleep.assert_not_called()


def test_search_config_per_post_type():
    service = _service()
    assert service.search_config("winery").post_type == "winery"
    assert service.search_config("hotels").post_type == "restaurant"


def test_facets_ignore_inactive_and_other_post_types():
    facets = _service().facets(ORG, "winery")
    assert [(f.value, f.count) for f in facets.features] == [("Outdoor Seating", 1), ("Tastings", 1)]
    assert facets.cuisine == []


def test_repeated_search_is_deterministic():
    service = _service()
    request = SearchRequest.model_validate({
        "org_key": ORG,
        "query": "pizza",
        "sort": {"field": "sort_expense", "order": "asc"},
    })
    assert service.search(request) == service.search(request)

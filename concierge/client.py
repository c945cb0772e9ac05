"""
HTTP client for the concierge search API.

Threads the configured organization key through every call. Rejected
requests raise ``RequestRejectedError``; server failures and unreadable
answers raise ``ProviderUnavailableError`` / ``MalformedPayloadError``. No
retries are attempted; callers own their retry and timeout policy.
"""
from __future__ import annotations

import logging
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from .config import DEFAULT_SERVICE_CONFIG, ServiceConfig
from .errors import MalformedPayloadError, ProviderUnavailableError, RequestRejectedError
from .locations.models import LocationResponse
from .search.models import (
    GeoPoint,
    SearchConfigResponse,
    SearchFacets,
    SearchFilters,
    SearchPagination,
    SearchResponse,
    SearchSort,
)

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class ConciergeClient:
    def __init__(
        self,
        config: ServiceConfig = DEFAULT_SERVICE_CONFIG,
        client: httpx.Client | None = None,
    ) -> None:
        self._org_key = config.org_key
        headers = {"X-API-Key": config.api_key} if config.api_key else {}
        self._client = client or httpx.Client(
            base_url=config.api_base, headers=headers, timeout=config.timeout
        )

    def _request(
        self,
        method: str,
        path: str,
        model: type[ModelT],
        label: str,
        **kwargs: Any,
    ) -> ModelT:
        try:
            response = self._client.request(method, path, **kwargs)
        except httpx.HTTPError as exc:
            logger.warning("%s request failed", label, exc_info=True)
            raise ProviderUnavailableError(f"{label} failed: {exc}") from exc

        if response.is_client_error:
            raise RequestRejectedError(
                f"{label} rejected: {response.status_code} {response.reason_phrase}",
                response.status_code,
            )
        if response.is_error:
            raise ProviderUnavailableError(
                f"{label} failed: {response.status_code} {response.reason_phrase}"
            )

        try:
            return model.model_validate(response.json())
        except (ValueError, ValidationError) as exc:
            raise MalformedPayloadError(f"{label} returned an unexpected payload") from exc

    def search_listings(
        self,
        query: str | None = None,
        filters: SearchFilters | None = None,
        sort: SearchSort | None = None,
        pagination: SearchPagination | None = None,
        location: GeoPoint | None = None,
        post_type: str | None = None,
    ) -> SearchResponse:
        """Search for listings with filters, sorting, and pagination."""
        body: dict[str, Any] = {"org_key": self._org_key}
        if post_type:
            body["post_type"] = post_type
        if query:
            body["query"] = query
        if filters:
            body["filters"] = filters.model_dump(exclude_none=True)
        if sort:
            body["sort"] = sort.model_dump()
        if pagination:
            body["pagination"] = pagination.model_dump(exclude_none=True)
        if location:
            body["location"] = location.model_dump()
        return self._request("POST", "/api/search", SearchResponse, "Search", json=body)

    def get_locations(
        self,
        country: str | None = None,
        region: str | None = None,
        city: str | None = None,
    ) -> LocationResponse:
        """Get location options for dependent dropdowns."""
        params = {"org_key": self._org_key}
        for name, value in (("country", country), ("region", region), ("city", city)):
            if value:
                params[name] = value
        return self._request("GET", "/api/locations", LocationResponse, "Locations", params=params)

    def get_search_config(self, post_type: str = "restaurant") -> SearchConfigResponse:
        params = {"org_key": self._org_key, "post_type": post_type}
        return self._request("GET", "/api/search-config", SearchConfigResponse, "Config", params=params)

    def get_facets(self) -> SearchFacets:
        params = {"org_key": self._org_key}
        return self._request("GET", "/api/facets", SearchFacets, "Facets", params=params)

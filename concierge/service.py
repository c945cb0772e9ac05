"""
In-process transport for the search engine and location resolver.

Fetches one snapshot from the configured catalog provider per call and hands
it to the pure engine / resolver. Synthetic latency (mock mode only) is
injected here so the core stays free of it.
"""
from __future__ import annotations

import json
import time

from pydantic import TypeAdapter

from .catalog.provider import CatalogProvider
from .config import DEFAULT_SERVICE_CONFIG, ServiceConfig
from .locations.models import LocationParams, LocationResponse
from .locations.resolver import resolve_locations
from .search.engine import filter_listings, search
from .search.facets import compute_facets
from .search.models import SearchConfigResponse, SearchFacets, SearchRequest, SearchResponse

DEFAULT_POST_TYPE = "restaurant"

_CONFIG_ADAPTER = TypeAdapter(dict[str, SearchConfigResponse])


class SearchService:
    def __init__(
        self,
        provider: CatalogProvider,
        config: ServiceConfig = DEFAULT_SERVICE_CONFIG,
    ) -> None:
        self._provider = provider
        self._config = config
        self._search_configs: dict[str, SearchConfigResponse] | None = None

    def _simulate_latency(self) -> None:
        if self._config.api_mode == "mock" and self._config.latency_ms > 0:
            time.sleep(self._config.latency_ms / 1000)

    def search(self, request: SearchRequest) -> SearchResponse:
        self._simulate_latency()
        catalog = self._provider.get_catalog(request.org_key, request.post_type)
        return search(catalog, request)

    def locations(self, params: LocationParams) -> LocationResponse:
        self._simulate_latency()
        tree = self._provider.get_locations(params.org_key)
        return resolve_locations(tree, params)

    def facets(self, org_key: str, post_type: str | None = None) -> SearchFacets:
        """Facet counts over every active listing, with no filters applied."""
        self._simulate_latency()
        catalog = self._provider.get_catalog(org_key, post_type)
        active = filter_listings(catalog, SearchRequest(org_key=org_key))
        return compute_facets(active)

    def search_config(self, post_type: str = DEFAULT_POST_TYPE) -> SearchConfigResponse:
        """Sort options, filter options and location levels for *post_type*.

        Unknown post types get the restaurant configuration.
        """
        self._simulate_latency()
        if self._search_configs is None:
            raw = json.loads(self._config.search_config_path.read_text(encoding="utf-8"))
            self._search_configs = _CONFIG_ADAPTER.validate_python(raw)
        configs = self._search_configs
        return configs.get(post_type) or configs[DEFAULT_POST_TYPE]

    def metadata(self, org_key: str) -> dict:
        catalog = [l for l in self._provider.get_catalog(org_key) if l.is_active]
        cities = sorted({l.location.city for l in catalog})
        cuisines = sorted({c for l in catalog for c in l.cuisine})
        return {"cities": cities, "cuisines": cuisines}

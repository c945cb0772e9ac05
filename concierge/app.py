from __future__ import annotations

import logging

from fastapi import Depends, FastAPI, HTTPException, Query

from .catalog.cache import get_cache_stats
from .catalog.provider import get_provider
from .config import DEFAULT_SERVICE_CONFIG
from .errors import MissingGeoOriginError, ProviderError
from .locations.models import LocationParams, LocationResponse
from .search.models import SearchConfigResponse, SearchFacets, SearchRequest, SearchResponse
from .service import DEFAULT_POST_TYPE, SearchService

logger = logging.getLogger(__name__)

app = FastAPI(title="Restaurant Directory Search API", version="1.0.0")

_service: SearchService | None = None


def get_service() -> SearchService:
    """Return the process-wide service, building its provider on first call."""
    global _service
    if _service is None:
        _service = SearchService(get_provider(DEFAULT_SERVICE_CONFIG), DEFAULT_SERVICE_CONFIG)
    return _service


def _provider_failure(exc: ProviderError) -> HTTPException:
    logger.warning("Catalog provider failed: %s", exc)
    return HTTPException(status_code=502, detail=str(exc))


# ── Public endpoints ─────────────────────────────────────────────────────


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/cache/stats")
def cache_stats() -> dict:
    """Hit/miss counters of the remote snapshot cache; all zero in mock mode."""
    return get_cache_stats()


@app.get("/metadata")
def metadata(
    org_key: str = Query(DEFAULT_SERVICE_CONFIG.org_key, min_length=1),
    service: SearchService = Depends(get_service),
) -> dict:
    try:
        return service.metadata(org_key)
    except ProviderError as exc:
        raise _provider_failure(exc) from exc


# ── Search endpoints ─────────────────────────────────────────────────────


@app.post("/api/search", response_model=SearchResponse)
def search_listings(
    body: SearchRequest,
    service: SearchService = Depends(get_service),
) -> SearchResponse:
    try:
        return service.search(body)
    except MissingGeoOriginError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except ProviderError as exc:
        raise _provider_failure(exc) from exc


@app.get("/api/locations", response_model=LocationResponse, response_model_exclude_none=True)
def locations(
    org_key: str = Query(DEFAULT_SERVICE_CONFIG.org_key, min_length=1),
    country: str | None = None,
    region: str | None = None,
    city: str | None = None,
    service: SearchService = Depends(get_service),
) -> LocationResponse:
    params = LocationParams(org_key=org_key, country=country, region=region, city=city)
    try:
        return service.locations(params)
    except ProviderError as exc:
        raise _provider_failure(exc) from exc


@app.get("/api/search-config", response_model=SearchConfigResponse, response_model_exclude_none=True)
def search_config(
    org_key: str = Query(DEFAULT_SERVICE_CONFIG.org_key, min_length=1),
    post_type: str = DEFAULT_POST_TYPE,
    service: SearchService = Depends(get_service),
) -> SearchConfigResponse:
    # org_key is accepted so every client call carries it; configuration is
    # shared by all organizations
    return service.search_config(post_type)


@app.get("/api/facets", response_model=SearchFacets)
def facets(
    org_key: str = Query(DEFAULT_SERVICE_CONFIG.org_key, min_length=1),
    post_type: str | None = None,
    service: SearchService = Depends(get_service),
) -> SearchFacets:
    try:
        return service.facets(org_key, post_type)
    except ProviderError as exc:
        raise _provider_failure(exc) from exc

from __future__ import annotations

import logging
from typing import Any

import httpx
from pydantic import BaseModel, ValidationError

from ..config import DEFAULT_SERVICE_CONFIG, ServiceConfig
from ..errors import MalformedPayloadError, ProviderUnavailableError
from ..locations.models import LocationTree
from ..search.models import Listing
from .cache import cache_get, cache_set
from .provider import CatalogProvider

logger = logging.getLogger(__name__)


class CatalogPayload(BaseModel):
    listings: list[Listing]


class RemoteCatalogProvider(CatalogProvider):
    """
    Fetches catalog and location snapshots from the remote directory service.

    Snapshots are cached for ``config.catalog_ttl`` seconds. Failures are
    raised as ``ProviderUnavailableError`` / ``MalformedPayloadError``;
    nothing is retried.
    """

    def __init__(
        self,
        config: ServiceConfig = DEFAULT_SERVICE_CONFIG,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._config = config
        headers = {"X-API-Key": config.api_key} if config.api_key else {}
        self._client = httpx.Client(
            base_url=config.api_base,
            headers=headers,
            timeout=config.timeout,
            transport=transport,
        )

    def _get_json(self, path: str, params: dict[str, str]) -> Any:
        try:
            response = self._client.get(path, params=params)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            logger.warning("Directory service answered %s for %s", exc.response.status_code, path)
            raise ProviderUnavailableError(
                f"{path} failed: {exc.response.status_code} {exc.response.reason_phrase}"
            ) from exc
        except httpx.HTTPError as exc:
            logger.warning("Directory service unreachable for %s", path, exc_info=True)
            raise ProviderUnavailableError(f"{path} failed: {exc}") from exc

        try:
            return response.json()
        except ValueError as exc:
            raise MalformedPayloadError(f"{path} returned a non-JSON body") from exc

    def get_catalog(self, org_key: str, post_type: str | None = None) -> tuple[Listing, ...]:
        key = {
            "kind": "catalog",
            "base": self._config.api_base,
            "org_key": org_key,
            "post_type": post_type,
        }
        cached = cache_get(key, ttl=self._config.catalog_ttl)
        if cached is not None:
            return cached

        params = {"org_key": org_key}
        if post_type:
            params["post_type"] = post_type
        raw = self._get_json("/api/catalog", params)
        try:
            listings = tuple(CatalogPayload.model_validate(raw).listings)
        except ValidationError as exc:
            raise MalformedPayloadError("/api/catalog returned an invalid catalog") from exc

        logger.info("Fetched %d listings for %s", len(listings), org_key)
        cache_set(key, listings)
        return listings

    def get_locations(self, org_key: str) -> LocationTree:
        key = {"kind": "locations", "base": self._config.api_base, "org_key": org_key}
        cached = cache_get(key, ttl=self._config.catalog_ttl)
        if cached is not None:
            return cached

        raw = self._get_json("/api/locations/tree", {"org_key": org_key})
        try:
            tree = LocationTree.model_validate(raw)
        except ValidationError as exc:
            raise MalformedPayloadError("/api/locations/tree returned an invalid hierarchy") from exc

        cache_set(key, tree)
        return tree

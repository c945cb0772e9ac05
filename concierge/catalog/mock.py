from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from ..config import DEFAULT_SERVICE_CONFIG, ServiceConfig
from ..errors import MalformedPayloadError, ProviderUnavailableError
from ..locations.models import LocationTree
from ..search.models import Listing
from .hierarchy import build_location_tree
from .provider import CatalogProvider

logger = logging.getLogger(__name__)

_LISTINGS_ADAPTER = TypeAdapter(list[Listing])


def load_listings(path: Path) -> tuple[Listing, ...]:
    """Read and validate a JSON array of listings."""
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as exc:
        raise ProviderUnavailableError(f"Catalog file not found: {path}") from exc
    except json.JSONDecodeError as exc:
        raise MalformedPayloadError(f"Catalog file is not valid JSON: {path}") from exc

    try:
        return tuple(_LISTINGS_ADAPTER.validate_python(raw))
    except ValidationError as exc:
        raise MalformedPayloadError(f"Catalog file does not match the listing schema: {path}") from exc


class MockCatalogProvider(CatalogProvider):
    """Serves the bundled catalog from memory; the file is read on first use."""

    def __init__(self, config: ServiceConfig = DEFAULT_SERVICE_CONFIG) -> None:
        self._path = config.catalog_path
        self._listings: tuple[Listing, ...] | None = None
        self._trees: dict[str, LocationTree] = {}

    def _all(self) -> tuple[Listing, ...]:
        if self._listings is None:
            self._listings = load_listings(self._path)
            logger.info("Loaded %d listings from %s", len(self._listings), self._path)
        return self._listings

    def get_catalog(self, org_key: str, post_type: str | None = None) -> tuple[Listing, ...]:
        return tuple(
            l for l in self._all()
            if l.org_key == org_key and (not post_type or l.post_type == post_type)
        )

    def get_locations(self, org_key: str) -> LocationTree:
        tree = self._trees.get(org_key)
        if tree is None:
            tree = build_location_tree(self.get_catalog(org_key))
            self._trees[org_key] = tree
        return tree

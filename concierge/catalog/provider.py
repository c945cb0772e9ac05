from __future__ import annotations

from abc import ABC, abstractmethod

from ..config import API_MODES, DEFAULT_SERVICE_CONFIG, ServiceConfig
from ..errors import ConfigurationError
from ..locations.models import LocationTree
from ..search.models import Listing


class CatalogProvider(ABC):
    """Read-only source of listings and location hierarchies."""

    @abstractmethod
    def get_catalog(self, org_key: str, post_type: str | None = None) -> tuple[Listing, ...]:
        """Return every listing of *org_key*, optionally limited to *post_type*."""

    @abstractmethod
    def get_locations(self, org_key: str) -> LocationTree:
        """Return the location hierarchy of *org_key*."""


def get_provider(config: ServiceConfig = DEFAULT_SERVICE_CONFIG) -> CatalogProvider:
    """Build the provider selected by ``config.api_mode``."""
    if config.api_mode == "mock":
        from .mock import MockCatalogProvider

        return MockCatalogProvider(config)
    if config.api_mode == "remote":
        from .remote import RemoteCatalogProvider

        return RemoteCatalogProvider(config)
    raise ConfigurationError(
        f"Unknown api_mode {config.api_mode!r}; expected one of {', '.join(API_MODES)}"
    )

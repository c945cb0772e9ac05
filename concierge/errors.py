"""Error types shared by the search service layers."""
from __future__ import annotations


class ConciergeError(Exception):
    """Base exception for the concierge service."""


class ConfigurationError(ConciergeError):
    """Invalid or unsupported service configuration."""


class ProviderError(ConciergeError):
    """A catalog or location provider could not serve a snapshot."""


class ProviderUnavailableError(ProviderError):
    """The provider is unreachable or answered with a failure status."""


class MalformedPayloadError(ProviderError):
    """The provider answered, but the payload does not match the schema."""


class MissingGeoOriginError(ConciergeError):
    """Distance sort was requested without a geo-origin."""

    def __init__(self, message: str = "Sorting by distance requires a location (lat, lng)") -> None:
        super().__init__(message)


class RequestRejectedError(ConciergeError):
    """The search API refused the request as invalid (4xx)."""

    def __init__(self, message: str, status_code: int) -> None:
        super().__init__(message)
        self.status_code = status_code

from __future__ import annotations

import unicodedata
from collections.abc import Callable, Sequence
from typing import Any

import numpy as np

from ..errors import MissingGeoOriginError
from .models import GeoPoint, Listing

EARTH_RADIUS_MILES = 3959.0
DISTANCE_FIELD = "distance"
DEFAULT_SORT_FIELD = "sort_rating"
DEFAULT_SORT_ORDER = "desc"

SortKey = Callable[[Listing], Any]


def _numeric(attr: str) -> SortKey:
    return lambda listing: float(getattr(listing, attr))


def collation_key(value: str) -> tuple[str, str]:
    """Compare ignoring case and accents first; the exact text breaks ties."""
    decomposed = unicodedata.normalize("NFKD", value)
    base = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return base.casefold(), value


def _text(attr: str) -> SortKey:
    def key(listing: Listing) -> tuple[str, str]:
        return collation_key(getattr(listing, attr))

    return key


# Every sortable attribute and how its values compare
SORT_FIELDS: dict[str, SortKey] = {
    "sort_rating": _numeric("sort_rating"),
    "sort_expense": _numeric("sort_expense"),
    "sort_title": _text("sort_title"),
    "sort_date": _text("sort_date"),
    "title": _text("title"),
}


def haversine_miles(
    lat1: float | np.ndarray,
    lng1: float | np.ndarray,
    lat2: float | np.ndarray,
    lng2: float | np.ndarray,
) -> float | np.ndarray:
    """Great-circle distance in miles; accepts scalars or arrays."""
    phi1 = np.radians(lat1)
    phi2 = np.radians(lat2)
    d_phi = np.radians(np.subtract(lat2, lat1))
    d_lambda = np.radians(np.subtract(lng2, lng1))
    a = np.sin(d_phi / 2) ** 2 + np.cos(phi1) * np.cos(phi2) * np.sin(d_lambda / 2) ** 2
    return EARTH_RADIUS_MILES * 2 * np.arctan2(np.sqrt(a), np.sqrt(1 - a))


def _sort_by_distance(
    listings: Sequence[Listing], origin: GeoPoint, descending: bool
) -> list[Listing]:
    lats = np.array([l.location.lat for l in listings], dtype=float)
    lngs = np.array([l.location.lng for l in listings], dtype=float)
    distances = haversine_miles(origin.lat, origin.lng, lats, lngs)
    order = sorted(range(len(listings)), key=lambda i: float(distances[i]), reverse=descending)
    return [listings[i] for i in order]


def sort_listings(
    listings: Sequence[Listing],
    field: str = DEFAULT_SORT_FIELD,
    order: str = DEFAULT_SORT_ORDER,
    origin: GeoPoint | None = None,
) -> list[Listing]:
    """Return a new, stably sorted list of *listings*.

    Unknown fields leave the input order untouched. Distance sorting raises
    ``MissingGeoOriginError`` when *origin* is missing.
    """
    descending = order != "asc"

    if field == DISTANCE_FIELD:
        if origin is None:
            raise MissingGeoOriginError()
        if not listings:
            return []
        return _sort_by_distance(listings, origin, descending)

    key = SORT_FIELDS.get(field)
    if key is None:
        return list(listings)
    return sorted(listings, key=key, reverse=descending)

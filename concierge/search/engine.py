from __future__ import annotations

from collections.abc import Sequence

import pandas as pd

from .facets import compute_facets
from .models import (
    Listing,
    SearchFacets,
    SearchFilters,
    SearchPagination,
    SearchRequest,
    SearchResponse,
)
from .sorting import DEFAULT_SORT_FIELD, DEFAULT_SORT_ORDER, sort_listings

DEFAULT_PER_PAGE = 20
MAX_PER_PAGE = 100

LOCATION_FIELDS = ("country", "region", "city", "neighbourhood")
MULTI_VALUE_FIELDS = ("cuisine", "meals_served", "features")


def searchable_text(listing: Listing) -> str:
    """Lower-cased text that free-text queries are matched against."""
    loc = listing.location
    parts = [
        listing.title,
        listing.excerpt,
        *listing.cuisine,
        *listing.features,
        loc.city,
        loc.region,
        loc.neighbourhood or "",
    ]
    return " ".join(parts).lower()


def _build_frame(listings: Sequence[Listing]) -> pd.DataFrame:
    return pd.DataFrame(
        {
            "country": [l.location.country for l in listings],
            "region": [l.location.region for l in listings],
            "city": [l.location.city for l in listings],
            "neighbourhood": [l.location.neighbourhood for l in listings],
            "cuisine": [l.cuisine for l in listings],
            "meals_served": [l.meals_served for l in listings],
            "features": [l.features for l in listings],
            "expense_level": [l.expense_level for l in listings],
            "is_featured": [l.is_featured for l in listings],
            "text": [searchable_text(l) for l in listings],
        }
    )


def _filter_mask(df: pd.DataFrame, query: str | None, filters: SearchFilters) -> pd.Series:
    mask = pd.Series(True, index=df.index)

    if query:
        mask &= df["text"].str.contains(query.lower(), regex=False)

    for name in LOCATION_FIELDS:
        value = getattr(filters, name)
        if value:
            mask &= df[name] == value

    for name in MULTI_VALUE_FIELDS:
        wanted = getattr(filters, name)
        if wanted:
            wanted_set = set(wanted)
            mask &= df[name].apply(lambda values: not wanted_set.isdisjoint(values)).astype(bool)

    if filters.expense_level:
        mask &= df["expense_level"].isin(filters.expense_level)

    if filters.is_featured:
        mask &= df["is_featured"].astype(bool)

    return mask


def resolve_pagination(pagination: SearchPagination | None) -> tuple[int, int]:
    """Return ``(page, per_page)`` with defaults applied and bounds enforced."""
    page = pagination.page if pagination else None
    per_page = pagination.per_page if pagination else None

    # zero counts as unset, matching the wire format's falsy defaults
    if not per_page:
        per_page = DEFAULT_PER_PAGE
    per_page = max(1, min(MAX_PER_PAGE, per_page))

    if not page or page < 1:
        page = 1
    return page, per_page


def filter_listings(catalog: Sequence[Listing], request: SearchRequest) -> list[Listing]:
    """Apply the active gate, text query and filters; keep catalog order."""
    active = [listing for listing in catalog if listing.is_active]
    if not active:
        return []

    filters = request.filters or SearchFilters()
    df = _build_frame(active)
    mask = _filter_mask(df, request.query, filters)
    return [active[i] for i in df.index[mask.to_numpy()]]


def search(catalog: Sequence[Listing], request: SearchRequest) -> SearchResponse:
    """Resolve *request* against *catalog* into one page of results plus facets.

    Facets and ``total`` describe the filtered population before pagination.
    Raises ``MissingGeoOriginError`` for a distance sort without ``location``.
    """
    matched = filter_listings(catalog, request)
    facets = compute_facets(matched) if matched else SearchFacets()

    sort_field = request.sort.field if request.sort and request.sort.field else DEFAULT_SORT_FIELD
    sort_order = request.sort.order if request.sort else DEFAULT_SORT_ORDER
    ordered = sort_listings(matched, sort_field, sort_order, request.location)

    page, per_page = resolve_pagination(request.pagination)
    start = (page - 1) * per_page

    return SearchResponse(
        results=ordered[start:start + per_page],
        total=len(ordered),
        page=page,
        per_page=per_page,
        facets=facets,
    )

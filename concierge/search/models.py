from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

PostType = Literal["restaurant", "place", "winery", "hotels", "entertainment"]


class ListingLocation(BaseModel):
    model_config = ConfigDict(frozen=True)

    country: str
    region: str
    city: str
    neighbourhood: str | None = None
    street: str
    zip: str
    lat: float
    lng: float


class ListingContact(BaseModel):
    model_config = ConfigDict(frozen=True)

    phone: str
    email: str
    website: str
    facebook: str | None = None
    reservation_url: str | None = None


class Listing(BaseModel):
    """One searchable venue record, as stored in the catalog."""

    model_config = ConfigDict(frozen=True)

    id: str
    org_key: str
    post_type: PostType
    title: str
    excerpt: str
    content_html: str
    url: str
    featured_image: str
    location: ListingLocation
    sort_rating: float
    sort_expense: float
    sort_title: str
    sort_date: str
    cuisine: tuple[str, ...] = ()
    meals_served: tuple[str, ...] = ()
    features: tuple[str, ...] = ()
    payment_methods: tuple[str, ...] = ()
    dress_code: tuple[str, ...] = ()
    alcohol_policy: tuple[str, ...] = ()
    parking: tuple[str, ...] = ()
    awards: tuple[str, ...] = ()
    is_featured: bool = False
    is_active: bool = True
    expense_level: str
    contact: ListingContact
    categories: tuple[int, ...] = ()
    category_names: tuple[str, ...] = ()
    tags: tuple[str, ...] = ()
    created_at: str
    updated_at: str


class SearchFilters(BaseModel):
    country: str | None = None
    region: str | None = None
    city: str | None = None
    neighbourhood: str | None = None
    cuisine: list[str] | None = None
    expense_level: list[str] | None = None
    meals_served: list[str] | None = None
    features: list[str] | None = None
    is_featured: bool | None = None


class SearchSort(BaseModel):
    """A malformed sort never fails the request; it falls back to rating, descending."""

    field: str = "sort_rating"
    order: Literal["asc", "desc"] = "desc"

    @field_validator("field", mode="before")
    @classmethod
    def _coerce_field(cls, value: Any) -> str:
        if isinstance(value, str) and value:
            return value
        return "sort_rating"

    @field_validator("order", mode="before")
    @classmethod
    def _coerce_order(cls, value: Any) -> str:
        # Anything but "asc" sorts descending
        return "asc" if value == "asc" else "desc"


class SearchPagination(BaseModel):
    """Raw pagination input; clamping happens in the engine."""

    page: int | None = None
    per_page: int | None = None

    @field_validator("page", "per_page", mode="before")
    @classmethod
    def _coerce_invalid(cls, value: Any) -> int | None:
        # Unparseable values fall back to the defaults instead of failing the request
        if value is None or isinstance(value, bool):
            return None
        try:
            return int(value)
        except (TypeError, ValueError):
            return None


class GeoPoint(BaseModel):
    lat: float = Field(..., ge=-90.0, le=90.0)
    lng: float = Field(..., ge=-180.0, le=180.0)


class SearchRequest(BaseModel):
    org_key: str = Field(..., min_length=1)
    post_type: str | None = None
    query: str | None = None
    filters: SearchFilters | None = None
    sort: SearchSort | None = None
    pagination: SearchPagination | None = None
    location: GeoPoint | None = None

    @field_validator("sort", mode="before")
    @classmethod
    def _drop_malformed_sort(cls, value: Any) -> Any:
        if value is None or isinstance(value, (dict, SearchSort)):
            return value
        return None


class FacetItem(BaseModel):
    value: str
    count: int


class SearchFacets(BaseModel):
    cuisine: list[FacetItem] = Field(default_factory=list)
    expense_level: list[FacetItem] = Field(default_factory=list)
    meals_served: list[FacetItem] = Field(default_factory=list)
    features: list[FacetItem] = Field(default_factory=list)


class SearchResponse(BaseModel):
    results: list[Listing]
    total: int
    page: int
    per_page: int
    facets: SearchFacets


class SortOption(BaseModel):
    field: str
    label: str
    order: Literal["asc", "desc"]
    default: bool | None = None
    requires_location: bool | None = None


class FilterOption(BaseModel):
    field: str
    label: str
    type: Literal["multiselect", "toggle"]


class SearchConfigResponse(BaseModel):
    post_type: str
    sort_options: list[SortOption]
    filter_options: list[FilterOption]
    location_levels: list[str]

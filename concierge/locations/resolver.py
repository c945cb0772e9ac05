from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .models import LocationOption, LocationParams, LocationResponse, LocationTree


def _options(nodes: Mapping[str, Any]) -> list[LocationOption]:
    return [
        LocationOption(value=name, count=node if isinstance(node, int) else node.count)
        for name, node in nodes.items()
    ]


def resolve_locations(tree: LocationTree, params: LocationParams) -> LocationResponse:
    """Return the options for the next location level below the given parents.

    Selectors are consulted top down and the walk stops at the first one
    missing, so a ``city`` without a ``region`` is ignored. An unknown parent
    yields an empty option list for the level below it.
    """
    if not params.country:
        return LocationResponse(level="country", options=_options(tree.countries))

    country = tree.countries.get(params.country)
    if country is None:
        return LocationResponse(level="region", parent=params.country, options=[])

    if not params.region:
        return LocationResponse(
            level="region", parent=params.country, options=_options(country.regions)
        )

    region = country.regions.get(params.region)
    if region is None:
        return LocationResponse(level="city", parent=params.region, options=[])

    if not params.city:
        return LocationResponse(
            level="city", parent=params.region, options=_options(region.cities)
        )

    city = region.cities.get(params.city)
    if city is None:
        return LocationResponse(level="neighbourhood", parent=params.city, options=[])

    return LocationResponse(
        level="neighbourhood", parent=params.city, options=_options(city.neighbourhoods)
    )

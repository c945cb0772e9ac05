from __future__ import annotations

from collections.abc import Sequence

import pandas as pd

from ..locations.models import CityNode, CountryNode, LocationTree, RegionNode
from ..search.models import Listing

_LEVELS = ["country", "region", "city", "neighbourhood"]


def build_location_tree(listings: Sequence[Listing]) -> LocationTree:
    """Group active listings into a counted country/region/city/neighbourhood tree.

    Every level, neighbourhoods included, counts the listings beneath it.
    Names keep the order in which they first appear in the catalog.
    """
    df = pd.DataFrame(
        [
            {
                "country": l.location.country,
                "region": l.location.region,
                "city": l.location.city,
                "neighbourhood": l.location.neighbourhood or None,
            }
            for l in listings
            if l.is_active
        ],
        columns=_LEVELS,
    )

    countries: dict[str, CountryNode] = {}
    for country, country_df in df.groupby("country", sort=False):
        regions: dict[str, RegionNode] = {}
        for region, region_df in country_df.groupby("region", sort=False):
            cities: dict[str, CityNode] = {}
            for city, city_df in region_df.groupby("city", sort=False):
                hoods = city_df["neighbourhood"].dropna().value_counts(sort=False)
                cities[str(city)] = CityNode(
                    count=len(city_df),
                    neighbourhoods={str(name): int(count) for name, count in hoods.items()},
                )
            regions[str(region)] = RegionNode(count=len(region_df), cities=cities)
        countries[str(country)] = CountryNode(count=len(country_df), regions=regions)

    return LocationTree(countries=countries)

from __future__ import annotations

import pytest

from concierge.catalog.hierarchy import build_location_tree
from concierge.locations.models import LocationParams, LocationTree
from concierge.locations.resolver import resolve_locations

ORG = "BB_test"

TREE = LocationTree.model_validate({
    "countries": {
        "United States": {
            "count": 6,
            "regions": {
                "New Jersey": {
                    "count": 4,
                    "cities": {
                        "Hoboken": {"count": 3, "neighbourhoods": {"Uptown": 2, "Downtown": 1}},
                        "Princeton": {"count": 1, "neighbourhoods": {}},
                    },
                },
                "Pennsylvania": {
                    "count": 2,
                    "cities": {"Philadelphia": {"count": 2, "neighbourhoods": ["Old City"]}},
                },
            },
        },
        "Canada": {"count": 1, "regions": {}},
    }
})


def _resolve(**params):
    return resolve_locations(TREE, LocationParams(org_key=ORG, **params))


def _options(response) -> list[tuple[str, int]]:
    return [(o.value, o.count) for o in response.options]


def test_countries_when_nothing_selected():
    response = _resolve()
    assert response.level == "country"
    assert response.parent is None
    assert _options(response) == [("United States", 6), ("Canada", 1)]


def test_regions_for_country():
    response = _resolve(country="United States")
    assert response.level == "region"
    assert response.parent == "United States"
    assert _options(response) == [("New Jersey", 4), ("Pennsylvania", 2)]


def test_cities_for_region():
    response = _resolve(country="United States", region="New Jersey")
    assert response.level == "city"
    assert response.parent == "New Jersey"
    assert _options(response) == [("Hoboken", 3), ("Princeton", 1)]


def test_neighbourhoods_for_city():
    response = _resolve(country="United States", region="New Jersey", city="Hoboken")
    assert response.level == "neighbourhood"
    assert response.parent == "Hoboken"
    assert _options(response) == [("Uptown", 2), ("Downtown", 1)]


def test_neighbourhood_names_without_counts_report_zero():
    response = _resolve(country="United States", region="Pennsylvania", city="Philadelphia")
    assert _options(response) == [("Old City", 0)]


@pytest.mark.parametrize(
    "params, level, parent",
    [
        ({"country": "Atlantis"}, "region", "Atlantis"),
        ({"country": "United States", "region": "Ohio"}, "city", "Ohio"),
        ({"country": "United States", "region": "New Jersey", "city": "Trenton"}, "neighbourhood", "Trenton"),
    ],
)
def test_unknown_parent_returns_empty_options(params, level, parent):
    response = _resolve(**params)
    assert response.level == level
    assert response.parent == parent
    assert response.options == []


def test_selector_without_ancestor_is_ignored():
    assert _resolve(city="Hoboken").level == "country"
    response = _resolve(country="United States", city="Hoboken")
    assert response.level == "region"
    assert _options(response) == [("New Jersey", 4), ("Pennsylvania", 2)]


# ── Building the tree from a catalog ─────────────────────────────────────


def test_build_location_tree_counts_active_listings(make_listing):
    catalog = [
        make_listing("a", location={"city": "Hoboken", "neighbourhood": "Uptown"}),
        make_listing("b", location={"city": "Hoboken", "neighbourhood": "Uptown"}),
        make_listing("c", location={"city": "Hoboken", "neighbourhood": "Downtown"}),
        make_listing("d", location={"city": "Princeton"}),
        make_listing("e", location={"region": "Pennsylvania", "city": "Philadelphia"}),
        make_listing("f", location={"country": "Canada", "region": "Ontario", "city": "Toronto"}),
        make_listing("g", location={"city": "Hoboken", "neighbourhood": "Uptown"}, is_active=False),
    ]
    tree = build_location_tree(catalog)

    us = tree.countries["United States"]
    assert list(tree.countries) == ["United States", "Canada"]
    assert us.count == 5
    assert us.regions["New Jersey"].count == 4
    hoboken = us.regions["New Jersey"].cities["Hoboken"]
    assert hoboken.count == 3
    assert hoboken.neighbourhoods == {"Uptown": 2, "Downtown": 1}
    assert us.regions["New Jersey"].cities["Princeton"].neighbourhoods == {}
    assert tree.countries["Canada"].regions["Ontario"].cities["Toronto"].count == 1


def test_build_location_tree_empty_catalog():
    assert build_location_tree([]).countries == {}

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence

from .models import FacetItem, Listing, SearchFacets


def _to_items(counter: Counter[str]) -> list[FacetItem]:
    # most_common keeps first-seen order for equal counts
    return [FacetItem(value=value, count=count) for value, count in counter.most_common()]


def _tally(values: Iterable[Iterable[str]]) -> Counter[str]:
    counter: Counter[str] = Counter()
    for listing_values in values:
        for value in listing_values:
            counter[value] += 1
    return counter


def compute_facets(listings: Sequence[Listing]) -> SearchFacets:
    """Count attribute values across *listings*, most frequent first."""
    return SearchFacets(
        cuisine=_to_items(_tally(l.cuisine for l in listings)),
        expense_level=_to_items(_tally((l.expense_level,) for l in listings)),
        meals_served=_to_items(_tally(l.meals_served for l in listings)),
        features=_to_items(_tally(l.features for l in listings)),
    )

"""
Listing search engine.

Responsibilities:
- Gate out inactive listings.
- Match free-text queries and apply location / attribute filters.
- Count facet values over the filtered population.
- Sort (by attribute or distance) and slice one page of results.
"""

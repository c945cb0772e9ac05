"""
Hierarchical location lookups (country -> region -> city -> neighbourhood)
used to populate dependent location selectors.
"""

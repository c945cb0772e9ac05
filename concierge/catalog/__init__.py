"""
Catalog providers.

Responsibilities:
- Supply immutable listing snapshots per organization and post type.
- Supply the location hierarchy with precomputed counts.
- Hide whether the data is bundled locally or fetched from the remote service.
"""

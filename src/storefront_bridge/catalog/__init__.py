"""
storefront_bridge.catalog

Catalog lookups over the search cluster.

Responsibilities:
- Product and category entity models.
- URL-key lookup across the product and category indexes.
"""

# Package marker.

"""
storefront_bridge.routing

Navigation routing package.

Responsibilities:
- An in-memory route table.
- Lazy entity routes for paths the table does not know yet.
- The navigation guard combining auth-only routes and entity routes.
"""

# Package marker.

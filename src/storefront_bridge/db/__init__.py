"""
storefront_bridge.db

Persistence package (SQLAlchemy).

Responsibilities:
- Provide the key-value storage schema and engine/session setup.
"""

# Package marker.

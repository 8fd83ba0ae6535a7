"""
storefront_bridge.api

ERP proxy HTTP application.

Responsibilities:
- Forward storefront ERP calls through a server-side hop that adds credentials.
- Expose liveness/readiness probes.
"""

# Package marker.

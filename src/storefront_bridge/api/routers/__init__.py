"""
storefront_bridge.api.routers

Routers for the proxy app.
"""

# Package marker.

"""
storefront_bridge.observability

Observability package.

Responsibilities:
- Structured logging configuration.
- Request-context middleware for the proxy app.
"""

# Package marker.

"""
storefront_bridge.services

Service-layer package.

Responsibilities:
- Shop settings loaded from the ERP.
- The storefront composition root and startup sequence.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# Services should be pure Python and easily testable with fake transports.

"""
storefront_bridge.auth

Authentication state package.

Responsibilities:
- User snapshot and auth result models.
- The Anonymous/Authenticated state machine with listener fan-out.
- ERP-backed login, logout, registration and silent re-authentication.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# `coordinator` never performs I/O; network flows live in `service`.

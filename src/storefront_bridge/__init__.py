"""
storefront_bridge

Client-side coordination layer between a storefront frontend, a locale-partitioned
search cluster and an ERP backend.

Responsibilities:
- Expose package version metadata.
"""

__all__ = ["__version__"]

__version__ = "0.1.0"


# --- Module Notes -----------------------------------------------------------
# Keep this file minimal to avoid import-time side effects across the codebase.

"""
storefront_bridge.search

Search-cluster client package.

Responsibilities:
- Locale-suffixed endpoint construction.
- Partial-failure extraction from search responses.
- The search client and its HTTP transport.
"""

from storefront_bridge.search.client import SearchClient
from storefront_bridge.search.endpoint import build_endpoint
from storefront_bridge.search.failures import extract_failures

__all__ = ["SearchClient", "build_endpoint", "extract_failures"]

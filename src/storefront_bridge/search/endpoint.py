"""
storefront_bridge.search.endpoint

Locale-aware search endpoint construction.

Responsibilities:
- Normalize an index set (one name or an ordered sequence of names).
- Suffix every index with the active locale and build the `_search` URL.
"""

from __future__ import annotations

from collections.abc import Sequence

from storefront_bridge.errors import ConfigurationError

IndexSet = str | Sequence[str]

SEARCH_SUFFIX = "_search"
# The search cluster treats a comma-separated index list as a multi-index query.
INDEX_SEPARATOR = ","


def normalize_index_set(index_set: IndexSet | None) -> tuple[str, ...]:
    if isinstance(index_set, str):
        names: tuple[str, ...] = (index_set,) if index_set else ()
    else:
        names = tuple(index_set or ())
    if not names or not all(names):
        raise ConfigurationError("Search index is required")
    return names


def build_endpoint(base_url: str, index_set: IndexSet, locale: str) -> str:
    """
    Pure: identical arguments always produce the identical URL.

    >>> build_endpoint("http://es:9200", ["product", "category"], "fr_FR")
    'http://es:9200/product_fr_FR,category_fr_FR/_search'
    """

    names = normalize_index_set(index_set)
    localized = INDEX_SEPARATOR.join(f"{name}_{locale}" for name in names)
    return f"{base_url.rstrip('/')}/{localized}/{SEARCH_SUFFIX}"

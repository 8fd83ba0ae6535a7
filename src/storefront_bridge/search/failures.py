"""
storefront_bridge.search.failures

Partial-failure extraction for search responses and error bodies.

Responsibilities:
- Walk a decoded JSON payload to a bounded depth looking for failure markers.
- Render the markers into a single human-readable summary.

A distributed search cluster can answer 200 while some shards failed; the details
then live under `failures` (e.g. `_shards.failures`) or `failed_shards`
(e.g. `error.failed_shards`). Markers are recognized on the root object and on its
direct children only. Deeper payloads are not inspected, trading missed deep markers
for a bounded cost on large or malformed bodies.
"""

from __future__ import annotations

import enum
import json
from collections.abc import Iterator, Mapping, Sequence
from typing import Any

MARKER_KEYS = frozenset({"failures", "failed_shards"})
MAX_DEPTH = 2
SEPARATOR = "; "


class NodeKind(enum.Enum):
    object = "object"
    array = "array"
    scalar = "scalar"


def node_kind(value: Any) -> NodeKind:
    if isinstance(value, Mapping):
        return NodeKind.object
    if isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
        return NodeKind.array
    return NodeKind.scalar


def _children(value: Any) -> Iterator[tuple[str | int, Any]]:
    kind = node_kind(value)
    if kind is NodeKind.object:
        yield from value.items()
    elif kind is NodeKind.array:
        yield from enumerate(value)


def extract_failures(body: Any) -> str | None:
    """
    Return a `"<index>: <reason>"` summary of failure markers, or None.

    >>> extract_failures({"took": 5, "failures": [{"index": "a", "reason": {"reason": "timeout"}}]})
    'a: timeout'
    """

    if not body:
        return None
    fragments: list[str] = []
    _collect(body, level=1, fragments=fragments)
    summary = SEPARATOR.join(f for f in fragments if f)
    return summary or None


def _collect(node: Any, *, level: int, fragments: list[str]) -> None:
    for key, child in _children(node):
        if key in MARKER_KEYS:
            fragments.append(_render(child))
        elif level < MAX_DEPTH and node_kind(child) is not NodeKind.scalar:
            _collect(child, level=level + 1, fragments=fragments)


def _render(marker: Any) -> str:
    if node_kind(marker) is NodeKind.array:
        return SEPARATOR.join(_render_item(item) for item in marker)
    return json.dumps(marker, default=str)


def _render_item(item: Any) -> str:
    index = reason = None
    if node_kind(item) is NodeKind.object:
        index = item.get("index")
        raw_reason = item.get("reason")
        if node_kind(raw_reason) is NodeKind.object:
            reason = raw_reason.get("reason")
        elif isinstance(raw_reason, str):
            reason = raw_reason
    return f"{index}: {reason}"


# --- Module Notes -----------------------------------------------------------
# Array elements are containers like any object: a marker inside `{"a": [{...}]}`
# sits three levels down and is outside the walk.

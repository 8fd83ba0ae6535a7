"""
tests.test_search_failures

Bounded-depth partial-failure extraction.
"""

from __future__ import annotations

import pytest

from storefront_bridge.search.failures import NodeKind, extract_failures, node_kind


def test_root_level_failures_are_summarized() -> None:
    body = {"took": 5, "failures": [{"index": "a", "reason": {"reason": "timeout"}}]}
    assert extract_failures(body) == "a: timeout"


def test_shard_failures_one_level_down_are_summarized() -> None:
    body = {
        "took": 12,
        "_shards": {
            "total": 2,
            "failed": 2,
            "failures": [
                {"index": "product_en_US", "reason": {"reason": "shard unavailable"}},
                {"index": "category_en_US", "reason": {"reason": "parse error"}},
            ],
        },
        "hits": {"hits": []},
    }
    assert extract_failures(body) == (
        "product_en_US: shard unavailable; category_en_US: parse error"
    )


def test_failed_shards_in_error_body() -> None:
    body = {
        "error": {
            "type": "search_phase_execution_exception",
            "failed_shards": [{"index": "product_fr_FR", "reason": {"reason": "no mapping"}}],
        },
        "status": 400,
    }
    assert extract_failures(body) == "product_fr_FR: no mapping"


def test_non_sequence_marker_is_serialized_verbatim() -> None:
    assert extract_failures({"failures": {"count": 1}}) == '{"count": 1}'


def test_several_markers_are_joined() -> None:
    body = {
        "failures": [{"index": "a", "reason": {"reason": "x"}}],
        "error": {"failed_shards": [{"index": "b", "reason": {"reason": "y"}}]},
    }
    assert extract_failures(body) == "a: x; b: y"


def test_missing_item_fields_render_as_none() -> None:
    assert extract_failures({"failures": [{"shard": 0}]}) == "None: None"


@pytest.mark.parametrize(
    "body",
    [
        None,
        {},
        [],
        "Internal Server Error",
        {"took": 3, "hits": {"total": 0, "hits": []}},
        {"_shards": {"total": 1, "successful": 1, "failed": 0}},
        {"failures": []},
    ],
)
def test_no_marker_returns_none(body) -> None:
    assert extract_failures(body) is None


def test_marker_three_levels_deep_is_outside_the_budget() -> None:
    body = {"a": {"b": {"failures": [{"index": "x", "reason": {"reason": "deep"}}]}}}
    assert extract_failures(body) is None


def test_marker_inside_array_element_of_child_is_outside_the_budget() -> None:
    body = {"responses": [{"failures": [{"index": "x", "reason": {"reason": "deep"}}]}]}
    assert extract_failures(body) is None


def test_node_kinds() -> None:
    assert node_kind({}) is NodeKind.object
    assert node_kind([1]) is NodeKind.array
    assert node_kind("text") is NodeKind.scalar
    assert node_kind(3) is NodeKind.scalar

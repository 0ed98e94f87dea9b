"""Unit tests for capture models and topology decoding."""

from __future__ import annotations

import pytest

from topoclient.models.schemas import (
    Capture,
    CaptureRequest,
    EdgeList,
    NodeList,
    decode_topology,
    normalize_topology,
    parse_captures,
)
from topoclient.utils.exceptions import TransportError

A, B, C = {"ID": "a"}, {"ID": "b"}, {"ID": "c"}


def test_normalize_unwraps_first_nested_array():
    assert normalize_topology([[A, B], [B, C]]) == [A, B]


def test_normalize_keeps_flat_and_empty_arrays():
    assert normalize_topology([A, B]) == [A, B]
    assert normalize_topology([]) == []


def test_normalize_null():
    assert normalize_topology(None) == []


def test_normalize_passes_other_bodies_through():
    assert normalize_topology({"ID": "a"}) == {"ID": "a"}


def test_normalize_only_looks_at_first_element():
    assert normalize_topology([A, [B]]) == [A, [B]]


def test_decode_edge_pairs():
    result = decode_topology([[A, B], [B, C]])
    assert isinstance(result, EdgeList)
    assert result.edges == [(A, B), (B, C)]


def test_decode_wrapped_node_list():
    result = decode_topology([[A, B, C]])
    assert isinstance(result, NodeList)
    assert result.nodes == [A, B, C]


def test_decode_flat_node_list():
    result = decode_topology([A, B])
    assert result == NodeList(nodes=[A, B])


def test_decode_wrapped_pair_matches_normalize():
    raw = [[A, B]]
    result = decode_topology(raw)
    assert isinstance(result, NodeList)
    assert result.nodes == normalize_topology(raw)


@pytest.mark.parametrize("raw", [None, []])
def test_decode_empty(raw):
    assert decode_topology(raw) == NodeList()


@pytest.mark.parametrize("raw", [{"ID": "a"}, [A, [B, C]], [[A], [B, C, A]]])
def test_decode_unrecognized_shape(raw):
    with pytest.raises(TransportError):
        decode_topology(raw)


def test_capture_request_payload_aliases():
    payload = CaptureRequest.build("g.V()", "n", "d").to_payload()
    assert payload == {"GremlinQuery": "g.V()", "Name": "n", "Description": "d"}


def test_capture_request_blank_fields_become_none():
    request = CaptureRequest.build("g.V()", "", None)
    assert request.name is None
    assert request.description is None


def test_capture_keeps_server_fields():
    capture = Capture.model_validate({
        "UUID": "7f1e",
        "GremlinQuery": "g.V().Has('Name', 'eth0')",
        "Name": "eth0",
        "Count": 2,
    })
    assert capture.uuid == "7f1e"
    assert capture.gremlin_query == "g.V().Has('Name', 'eth0')"
    assert capture.description is None
    assert capture.model_dump(by_alias=True)["Count"] == 2


def test_parse_captures_from_array():
    captures = parse_captures([{"UUID": "1", "GremlinQuery": "g.V()"}])
    assert [c.uuid for c in captures] == ["1"]


def test_parse_captures_from_uuid_map():
    captures = parse_captures({"7f1e": {"GremlinQuery": "g.V()", "Name": "eth0"}})
    assert captures[0].uuid == "7f1e"
    assert captures[0].name == "eth0"


def test_parse_captures_null():
    assert parse_captures(None) == []

"""Pydantic models for captures and topology query results."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

from topoclient.utils.exceptions import TransportError

Node = Any


# ── Capture models ───────────────────────────────────────────────────


class Capture(BaseModel):
    """A capture as stored by the analyzer.

    The client returns capture JSON as received; use ``parse_captures`` for
    typed access.
    """
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    uuid: str = Field(default="", alias="UUID")
    gremlin_query: str = Field(alias="GremlinQuery")
    name: str | None = Field(default=None, alias="Name")
    description: str | None = Field(default=None, alias="Description")


class CaptureRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    gremlin_query: str = Field(alias="GremlinQuery")
    name: str | None = Field(default=None, alias="Name")
    description: str | None = Field(default=None, alias="Description")

    @classmethod
    def build(cls, query: str, name: str | None = None, description: str | None = None) -> CaptureRequest:
        # Empty strings are sent as null
        return cls(gremlin_query=query, name=name or None, description=description or None)

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)


# ── Topology results ─────────────────────────────────────────────────


class NodeList(BaseModel):
    kind: Literal["nodes"] = "nodes"
    nodes: list[Node] = Field(default_factory=list)


class EdgeList(BaseModel):
    kind: Literal["edges"] = "edges"
    edges: list[tuple[Node, Node]] = Field(default_factory=list)


TopologyResult = NodeList | EdgeList


def normalize_topology(data: Any) -> Any:
    """Unwrap a query response one level.

    The analyzer answers either ``[Node]`` or ``[[Node, Node]]``. A non-empty
    array whose first element is an array is replaced by that element; null
    becomes an empty list. Any other body is returned unchanged.
    """
    if data is None:
        return []
    if isinstance(data, list) and data and isinstance(data[0], list):
        return data[0]
    return data


def decode_topology(data: Any) -> TopologyResult:
    """Decode a raw query response into a tagged result.

    ``null`` and ``[]`` both decode to an empty ``NodeList``. A single wrapping
    array holding nodes is unwrapped into a ``NodeList``, matching
    ``normalize_topology``. Otherwise an array made only of 2-element arrays
    is an ``EdgeList``.
    """
    if data is None:
        return NodeList()
    if not isinstance(data, list):
        raise TransportError("Unexpected topology response", body=repr(data))
    if not data:
        return NodeList()

    if len(data) == 1 and isinstance(data[0], list):
        inner = data[0]
        if not any(isinstance(item, list) for item in inner):
            return NodeList(nodes=inner)

    if all(isinstance(item, list) and len(item) == 2 for item in data):
        return EdgeList(edges=[(item[0], item[1]) for item in data])

    if not any(isinstance(item, list) for item in data):
        return NodeList(nodes=data)

    raise TransportError("Unexpected topology response", body=repr(data))


def parse_captures(data: Any) -> list[Capture]:
    """Validate a capture list body, either an array or a map keyed by UUID."""
    if data is None:
        return []
    if isinstance(data, dict):
        return [Capture.model_validate({"UUID": key, **value}) for key, value in data.items()]
    return [Capture.model_validate(item) for item in data]

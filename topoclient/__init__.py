"""Async client for the topology analyzer REST API."""

from __future__ import annotations

from topoclient.api.client import TopologyApiClient
from topoclient.models.schemas import Capture, EdgeList, NodeList
from topoclient.notifier import LoggingNotifier, Notifier
from topoclient.utils.exceptions import TopologyClientError, TransportError

__all__ = [
    "Capture",
    "EdgeList",
    "LoggingNotifier",
    "NodeList",
    "Notifier",
    "TopologyApiClient",
    "TopologyClientError",
    "TransportError",
]

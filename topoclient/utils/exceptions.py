"""Exception hierarchy for the topology client."""

from __future__ import annotations


class TopologyClientError(Exception):
    """Base exception for all topology client errors."""


class TransportError(TopologyClientError):
    """Request failed, returned a non-2xx status, or could not be decoded.

    ``body`` holds the raw response text, or the transport error text when
    no response was received.
    """

    def __init__(self, message: str, body: str = "", status_code: int | None = None) -> None:
        super().__init__(message)
        self.body = body
        self.status_code = status_code

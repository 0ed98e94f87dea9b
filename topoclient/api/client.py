"""API client for the topology analyzer."""

from __future__ import annotations

import json
from typing import Any

import httpx

from topoclient.config import Settings
from topoclient.models.schemas import (
    CaptureRequest,
    TopologyResult,
    decode_topology,
    normalize_topology,
)
from topoclient.notifier import LoggingNotifier, Notifier
from topoclient.utils.exceptions import TransportError
from topoclient.utils.logging import get_logger

logger = get_logger(__name__)

JSON_CONTENT_TYPE = "application/json; charset=utf-8"

TOPOLOGY_PATH = "/api/topology"
CAPTURE_PATH = "/api/capture"


class TopologyApiClient:
    """Topology query and capture management against an analyzer.

    Every call issues exactly one request. Capture failures are reported to the
    notifier and then re-raised; topology query failures are only re-raised.
    """

    def __init__(self, http_client: httpx.AsyncClient, notifier: Notifier) -> None:
        self._http = http_client
        self._notifier = notifier
        self._owns_http = False

    @classmethod
    def from_settings(cls, settings: Settings, notifier: Notifier | None = None) -> TopologyApiClient:
        http_client = httpx.AsyncClient(
            base_url=settings.base_url,
            timeout=settings.HTTP_TIMEOUT,
        )
        client = cls(http_client, notifier or LoggingNotifier())
        client._owns_http = True
        return client

    async def aclose(self) -> None:
        if self._owns_http:
            await self._http.aclose()

    async def __aenter__(self) -> TopologyApiClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    # ── Topology ─────────────────────────────────────────────────────

    async def query_topology(self, gremlin_query: str) -> list[Any]:
        """POST /api/topology — nodes or node pairs, unwrapped one level."""
        data = await self._query(gremlin_query)
        return normalize_topology(data)

    async def query_topology_result(self, gremlin_query: str) -> TopologyResult:
        """POST /api/topology — decoded into a NodeList or EdgeList."""
        data = await self._query(gremlin_query)
        return decode_topology(data)

    async def _query(self, gremlin_query: str) -> Any:
        logger.debug("topology_query", query=gremlin_query)
        resp = await self._send("POST", TOPOLOGY_PATH, payload={"GremlinQuery": gremlin_query})
        return _decode_json(resp)

    # ── Captures ─────────────────────────────────────────────────────

    async def list_captures(self) -> Any:
        """GET /api/capture — returned as decoded, without normalization."""
        try:
            resp = await self._send("GET", CAPTURE_PATH)
            return _decode_json(resp)
        except TransportError as exc:
            self._report("Capture list error", exc)
            raise

    async def create_capture(
        self,
        query: str,
        name: str | None = None,
        description: str | None = None,
    ) -> Any:
        """POST /api/capture — returns the created capture as decoded JSON."""
        request = CaptureRequest.build(query, name, description)
        try:
            resp = await self._send("POST", CAPTURE_PATH, payload=request.to_payload())
            data = _decode_json(resp)
        except TransportError as exc:
            self._report("Capture create error", exc)
            raise

        logger.info("capture_created", query=query, uuid=_capture_uuid(data))
        self._notifier.notify_success("Capture created")
        return data

    async def delete_capture(self, uuid: str) -> None:
        """DELETE /api/capture/{uuid}/ — the plain-text body is ignored."""
        try:
            await self._send("DELETE", f"{CAPTURE_PATH}/{uuid}/", accept="text/plain")
        except TransportError as exc:
            self._report("Capture delete error", exc)
            raise
        logger.info("capture_deleted", uuid=uuid)

    # ── Plumbing ─────────────────────────────────────────────────────

    async def _send(
        self,
        method: str,
        path: str,
        payload: dict[str, Any] | None = None,
        accept: str = "application/json",
    ) -> httpx.Response:
        headers = {"Accept": accept}
        content: bytes | None = None
        if payload is not None:
            headers["Content-Type"] = JSON_CONTENT_TYPE
            content = json.dumps(payload).encode("utf-8")

        try:
            resp = await self._http.request(method, path, content=content, headers=headers)
        except httpx.HTTPError as exc:
            logger.warning("request_failed", method=method, path=path, error=str(exc))
            raise TransportError(f"{method} {path} failed: {exc}", body=str(exc)) from exc

        if resp.is_error:
            logger.warning(
                "request_rejected",
                method=method,
                path=path,
                status=resp.status_code,
            )
            raise TransportError(
                f"{method} {path} returned HTTP {resp.status_code}",
                body=resp.text,
                status_code=resp.status_code,
            )
        return resp

    def _report(self, prefix: str, exc: TransportError) -> None:
        logger.error("capture_request_failed", operation=prefix, status=exc.status_code, body=exc.body)
        self._notifier.notify_error(f"{prefix}: {exc.body}")


def _decode_json(resp: httpx.Response) -> Any:
    try:
        return resp.json()
    except ValueError as exc:
        raise TransportError(
            "Invalid JSON in response",
            body=resp.text,
            status_code=resp.status_code,
        ) from exc


def _capture_uuid(data: Any) -> str | None:
    if isinstance(data, dict):
        return data.get("UUID")
    return None

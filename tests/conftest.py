"""Pytest configuration and shared fixtures."""

import json
from typing import Any, Dict, List, Optional

import httpx
import pytest

from beebotte import BBT

KEY_ID = "test-access-key"
SECRET_KEY = "test-secret-key-3f9a1c"
HOSTNAME = "http://api.test.local"
PORT = 8080


class FakePlatform:
    """In-memory stand-in for the Beebotte REST API.

    Persisted writes are stored per ``channel/resource``; transient publishes
    are only counted. Every request is kept in ``requests`` for inspection.
    """

    def __init__(self):
        self.requests: List[httpx.Request] = []
        self.persisted: Dict[str, List[Dict[str, Any]]] = {}
        self.transient: List[Dict[str, Any]] = []
        self.next_error: Optional[httpx.Response] = None
        self._clock = 1_700_000_000_000

    def _store(self, channel: str, resource: str, data: Any, ts: Optional[int]) -> None:
        self._clock += 1
        record = {"data": data, "ts": ts if ts is not None else self._clock}
        self.persisted.setdefault(f"{channel}/{resource}", []).insert(0, record)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.next_error is not None:
            response, self.next_error = self.next_error, None
            return response

        parts = request.url.path.strip("/").split("/")
        if request.method == "GET":
            if parts[:3] == ["v1", "public", "data"]:
                channel, resource = parts[5], parts[6]
            else:
                channel, resource = parts[3], parts[4]
            records = self.persisted.get(f"{channel}/{resource}", [])
            limit = request.url.params.get("limit")
            if limit is not None:
                records = records[: int(limit)]
            return httpx.Response(200, json=records)

        body = json.loads(request.content)
        kind, channel = parts[2], parts[3]
        if len(parts) == 5:
            items = [dict(body, resource=parts[4])]
        else:
            items = body["records"]

        for item in items:
            if kind == "write":
                self._store(channel, item["resource"], item["data"], item.get("ts"))
            else:
                self.transient.append(dict(item, channel=channel))
        return httpx.Response(200, json=True)


@pytest.fixture
def platform() -> FakePlatform:
    return FakePlatform()


@pytest.fixture
def client(platform: FakePlatform) -> BBT:
    """Client wired to the fake platform."""
    return BBT(
        KEY_ID,
        SECRET_KEY,
        hostname=HOSTNAME,
        port=PORT,
        transport=httpx.MockTransport(platform.handler),
    )


def error_response(status: int, code: int, message: str) -> httpx.Response:
    return httpx.Response(status, json={"error": {"code": code, "message": message}})

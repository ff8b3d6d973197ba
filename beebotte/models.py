"""
Request models for the Beebotte SDK.

These Pydantic models describe the query strings and JSON bodies the client
sends. Optional fields are left out of the wire payload when unset, and all
bodies go through ``encode_body`` so the bytes that are MD5-hashed for the
signature are exactly the bytes that are sent.
"""
import json
from typing import Any, Dict, List, Literal, Optional
from urllib.parse import urlencode

from pydantic import BaseModel, ConfigDict, Field

ReadSource = Literal["live", "hour-stats", "day-stats"]


def encode_body(payload: Dict[str, Any]) -> str:
    """Serialize a request body to JSON."""
    return json.dumps(payload, separators=(",", ":"))


class ReadQuery(BaseModel):
    """Query parameters of a read call.

    Attributes
    ----------
    limit: Number of records to return (positive).
    source: ``live`` data or one of the historical statistics sets.
    time_range: Window such as ``1hour``, ``3day``, ``today``, ``last-week``.
    """
    limit: Optional[int] = Field(default=None, gt=0)
    source: Optional[ReadSource] = None
    time_range: Optional[str] = None

    def to_query_string(self) -> str:
        params = []
        if self.limit is not None:
            params.append(("limit", self.limit))
        if self.source is not None:
            params.append(("source", self.source))
        if self.time_range:
            params.append(("time-range", self.time_range))
        return urlencode(params)


class Record(BaseModel):
    """A single value addressed to a resource, as used in bulk calls.

    Keys beyond ``resource``, ``data`` and ``ts`` (e.g. ``type``) are kept and
    sent as given.
    """
    model_config = ConfigDict(extra="allow")

    resource: str
    data: Any
    ts: Optional[int] = None

    def to_payload(self) -> Dict[str, Any]:
        payload = {"resource": self.resource, "data": self.data}
        if self.ts is not None:
            payload["ts"] = self.ts
        payload.update(self.model_extra or {})
        return payload


class WriteRequest(BaseModel):
    """Body of a single write or publish."""
    data: Any = None
    ts: Optional[int] = None

    def to_payload(self) -> Dict[str, Any]:
        payload = {"data": self.data}
        if self.ts is not None:
            payload["ts"] = self.ts
        return payload


class BulkRequest(BaseModel):
    """Body of a bulk write or publish."""
    records: List[Record]

    def to_payload(self) -> Dict[str, Any]:
        return {"records": [record.to_payload() for record in self.records]}

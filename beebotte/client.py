"""
Beebotte Python API Client

Overview
--------
This module implements ``BBT``, the connector to the Beebotte REST API:
- Signed reads of persisted resource data, plus unsigned public reads
- Persistent writes and transient publishes, single and bulk
- Subscription tokens for real-time clients (computed locally)
- A pandas helper turning read results into a DataFrame

Design Notes
------------
- Network: every call opens an ``httpx.Client``, sends one request and closes
  it before returning. Nothing is pooled or reused between calls.
- Signing: see ``beebotte.auth``. The query string and body are encoded once,
  and the same string is signed and sent.
- Errors: responses with status >= 400 are mapped to ``BeebotteError``
  subclasses by ``beebotte.exceptions.classify_error``. httpx transport errors
  propagate unchanged.
"""
import logging
from typing import Any, Dict, Iterable, List, Optional, Union
from urllib.parse import quote

import httpx
import pandas as pd

from .auth import CONTENT_TYPE, get_auth_headers, hmac_sha1, http_date, subscription_string
from .config import DEFAULT_ENDPOINTS, DEFAULT_HOSTNAME, DEFAULT_PORT, DEFAULT_TIMEOUT, Endpoints, Settings
from .exceptions import classify_error
from .models import BulkRequest, ReadQuery, Record, WriteRequest, encode_body
from .resource import Resource

logger = logging.getLogger(__name__)

RecordLike = Union[Record, Dict[str, Any]]


class BBT:
    """
    Beebotte API Client

    Example:
        >>> from beebotte import BBT
        >>> bbt = BBT("your_api_key", "your_secret_key")
        >>> bbt.write("dev", "temperature", 21.5)
        >>> records = bbt.read("dev", "temperature", limit=10)
    """

    def __init__(
        self,
        key_id: str,
        secret_key: str,
        hostname: str = DEFAULT_HOSTNAME,
        port: int = DEFAULT_PORT,
        timeout: Optional[float] = DEFAULT_TIMEOUT,
        endpoints: Endpoints = DEFAULT_ENDPOINTS,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        """
        Initialize the Beebotte client.

        Args:
            key_id: API access key, sent with every signed call
            secret_key: Secret key used to sign calls; never sent
            hostname: Scheme and host of the API
            port: API port
            timeout: Request timeout in seconds (None disables it)
            endpoints: API path prefixes
            transport: Optional httpx transport (e.g. ``httpx.MockTransport``)
        """
        self.key_id = key_id
        self._secret_key = secret_key
        self.hostname = hostname.rstrip("/")
        self.port = port
        self.timeout = timeout
        self.endpoints = endpoints
        self._transport = transport

    @classmethod
    def from_settings(cls, settings: Settings, **kwargs: Any) -> "BBT":
        """Build a client from a ``Settings`` value."""
        return cls(
            settings.api_key,
            settings.secret_key,
            hostname=settings.hostname,
            port=settings.port,
            timeout=settings.timeout,
            **kwargs,
        )

    def __repr__(self) -> str:
        return f"BBT(key_id={self.key_id!r}, base_url={self.base_url!r})"

    @property
    def base_url(self) -> str:
        return f"{self.hostname}:{self.port}"

    @staticmethod
    def _path(prefix: str, *segments: str) -> str:
        return "/".join([prefix] + [quote(str(segment), safe="") for segment in segments])

    def _handle_response(self, response: httpx.Response) -> Any:
        """Return the parsed body, or raise the matching ``BeebotteError``."""
        status = response.status_code
        if status < 400:
            if not response.content:
                return None
            return response.json()

        error_code: Optional[int] = None
        message = response.text
        try:
            body = response.json()
        except ValueError:
            body = None

        if isinstance(body, dict) and isinstance(body.get("error"), dict):
            error = body["error"]
            message = error.get("message", "")
            try:
                error_code = int(error["code"])
            except (KeyError, TypeError, ValueError):
                error_code = None

        logger.warning(
            "Beebotte API error: %s %s - status=%s code=%s message=%s",
            response.request.method, response.request.url.path, status, error_code, message,
        )
        raise classify_error(status, error_code, message)

    def _send(
        self,
        method: str,
        uri: str,
        headers: Dict[str, str],
        body: Optional[str] = None,
    ) -> Any:
        url = f"{self.base_url}{uri}"
        with httpx.Client(timeout=self.timeout, transport=self._transport) as http:
            response = http.request(
                method,
                url,
                headers=headers,
                content=body.encode("utf-8") if body is not None else None,
            )

        logger.debug("%s %s -> %s", method, url, response.status_code)
        return self._handle_response(response)

    def _get(self, path: str, query: ReadQuery, auth: bool = True) -> Any:
        query_string = query.to_query_string()
        uri = f"{path}?{query_string}" if query_string else path

        if auth:
            headers = get_auth_headers(self.key_id, self._secret_key, "GET", uri)
        else:
            headers = {"Content-Type": CONTENT_TYPE, "Date": http_date()}

        return self._send("GET", uri, headers)

    def _post(self, path: str, payload: Dict[str, Any]) -> Any:
        body = encode_body(payload)
        headers = get_auth_headers(self.key_id, self._secret_key, "POST", path, body=body)
        return self._send("POST", path, headers, body=body)

    # Read API

    def public_read(
        self,
        owner: str,
        channel: str,
        resource: str,
        limit: Optional[int] = None,
        source: Optional[str] = None,
        time_range: Optional[str] = None,
    ) -> List[Dict[str, Any]]:
        """Read records of a public resource. The call is not signed.

        Args:
            owner: Username owning the channel
            channel: Channel name
            resource: Resource name
            limit: Number of records to return
            source: ``live``, ``hour-stats`` or ``day-stats``
            time_range: e.g. ``1hour``, ``3day``, ``today``, ``last-month``

        Returns:
            List of records, most recent first
        """
        query = ReadQuery(limit=limit, source=source, time_range=time_range)
        return self._get(
            self._path(self.endpoints.public_read, owner, channel, resource),
            query,
            auth=False,
        )

    def read(
        self,
        channel: str,
        resource: str,
        limit: Optional[int] = None,
        source: Optional[str] = None,
        time_range: Optional[str] = None,
    ) -> List[Dict[str, Any]]:
        """Read records of one of the caller's resources (signed).

        Takes the same paging arguments as ``public_read``.
        """
        query = ReadQuery(limit=limit, source=source, time_range=time_range)
        return self._get(self._path(self.endpoints.read, channel, resource), query)

    def read_dataframe(
        self,
        channel: str,
        resource: str,
        limit: Optional[int] = None,
        source: Optional[str] = None,
        time_range: Optional[str] = None,
    ) -> pd.DataFrame:
        """Read records as a pandas DataFrame indexed by timestamp.

        Returns:
            DataFrame with one row per record (empty if there are none)
        """
        records = self.read(channel, resource, limit=limit, source=source, time_range=time_range)

        if not records:
            return pd.DataFrame()

        df = pd.DataFrame(records)
        if "ts" in df.columns:
            df["ts"] = pd.to_datetime(df["ts"], unit="ms")
            df.set_index("ts", inplace=True)

        return df

    # Write API (persistent)

    def write(self, channel: str, resource: str, data: Any, ts: Optional[int] = None) -> Any:
        """Persist a value to a resource.

        Args:
            channel: Channel name
            resource: Resource name
            data: Any JSON serializable value
            ts: Timestamp in ms since epoch (server time if None)

        Returns:
            Platform acknowledgement
        """
        request = WriteRequest(data=data, ts=ts)
        return self._post(self._path(self.endpoints.write, channel, resource), request.to_payload())

    def write_bulk(self, channel: str, records: Iterable[RecordLike]) -> Any:
        """Persist several records of a channel in one call.

        Args:
            channel: Channel name
            records: ``Record`` objects or dicts with ``resource``, ``data``
                and optional ``ts``
        """
        request = BulkRequest(records=list(records))
        return self._post(self._path(self.endpoints.bulk_write, channel), request.to_payload())

    # Publish API (transient)

    def publish(self, channel: str, resource: str, data: Any, ts: Optional[int] = None) -> Any:
        """Send a transient message to a resource.

        The value is delivered to connected subscribers only and is never
        returned by ``read``.
        """
        request = WriteRequest(data=data, ts=ts)
        return self._post(self._path(self.endpoints.publish, channel, resource), request.to_payload())

    def publish_bulk(self, channel: str, records: Iterable[RecordLike]) -> Any:
        """Send several transient messages of a channel in one call."""
        request = BulkRequest(records=list(records))
        return self._post(self._path(self.endpoints.bulk_publish, channel), request.to_payload())

    # Subscription authentication

    def compute_subscription_token(
        self,
        sid: str,
        channel: str,
        resource: str = "*",
        ttl: int = 0,
        read: bool = False,
        write: bool = False,
    ) -> str:
        """Sign a subscription grant for a real-time client session.

        No network call is made. Presence channels are named
        ``presence:<name>`` and private channels ``private:<name>``.

        Args:
            sid: Session id of the subscribing client
            channel: Channel name
            resource: Resource name, ``*`` for every resource of the channel
            ttl: Validity of the grant in seconds
            read: Grant read access
            write: Grant write access

        Returns:
            Token ``key_id:signature``
        """
        payload = subscription_string(sid, channel, resource, ttl, read, write)
        return f"{self.key_id}:{hmac_sha1(self._secret_key, payload)}"

    def resource(self, channel: str, resource: str) -> Resource:
        """Handle bound to ``channel/resource``."""
        return Resource(self, channel, resource)

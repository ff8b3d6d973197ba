"""
Request signing utilities for the Beebotte API.

Signed calls carry ``Authorization: <key_id>:<signature>`` where the signature
is the base64 encoded HMAC-SHA1 of a canonical string::

    VERB \\n CONTENT-MD5 \\n CONTENT-TYPE \\n DATE \\n URI

For GET requests ``CONTENT-MD5`` is empty and ``URI`` includes the query
string. For POST requests ``CONTENT-MD5`` is the base64 MD5 of the body and
``URI`` is the bare path. Subscription tokens use the same HMAC over
``sid:channel.resource:ttl=N:read=bool:write=bool``.
"""
import base64
import hashlib
import hmac
from email.utils import formatdate
from typing import Dict, Optional

CONTENT_TYPE = "application/json"


def http_date(timestamp: Optional[float] = None) -> str:
    """RFC 2822 date for the ``Date`` header (current time if None)."""
    return formatdate(timeval=timestamp, localtime=False, usegmt=True)


def content_md5(body: str) -> str:
    """Base64 encoded MD5 digest of a request body."""
    digest = hashlib.md5(body.encode("utf-8")).digest()
    return base64.b64encode(digest).decode("ascii")


def hmac_sha1(secret_key: str, payload: str) -> str:
    """Base64 encoded HMAC-SHA1 of ``payload`` keyed with ``secret_key``."""
    digest = hmac.new(
        secret_key.encode("utf-8"),
        payload.encode("utf-8"),
        hashlib.sha1,
    ).digest()
    return base64.b64encode(digest).decode("ascii")


def string_to_sign(
    method: str,
    uri: str,
    date: str,
    md5: str = "",
    content_type: str = CONTENT_TYPE,
) -> str:
    """Canonical string of a REST call.

    Args:
        method: HTTP verb in upper case
        uri: Request path; must include the query string for GET requests
        date: Value sent in the ``Date`` header
        md5: Content-MD5 of the body (empty for GET)
        content_type: Value sent in the ``Content-Type`` header

    Returns:
        The newline separated string covered by the signature
    """
    return "\n".join([method, md5, content_type, date, uri])


def sign_request(
    key_id: str,
    secret_key: str,
    method: str,
    uri: str,
    date: str,
    md5: str = "",
) -> str:
    """Authorization header value (``key_id:signature``) for a REST call."""
    signature = hmac_sha1(secret_key, string_to_sign(method, uri, date, md5))
    return f"{key_id}:{signature}"


def get_auth_headers(
    key_id: str,
    secret_key: str,
    method: str,
    uri: str,
    body: Optional[str] = None,
    date: Optional[str] = None,
) -> Dict[str, str]:
    """
    Build the headers of a signed request.

    Args:
        key_id: API access key
        secret_key: Secret used for the HMAC, never placed in a header
        method: HTTP method
        uri: Path (with query string for GET)
        body: JSON body for POST requests
        date: RFC 2822 date (generated if None)

    Returns:
        Dictionary of headers
    """
    if date is None:
        date = http_date()

    headers = {"Content-Type": CONTENT_TYPE, "Date": date}
    md5 = ""
    if body is not None:
        md5 = content_md5(body)
        headers["Content-MD5"] = md5

    headers["Authorization"] = sign_request(key_id, secret_key, method, uri, date, md5)
    return headers


def subscription_string(
    sid: str,
    channel: str,
    resource: str = "*",
    ttl: int = 0,
    read: bool = False,
    write: bool = False,
) -> str:
    """Canonical string of a subscription grant."""
    return (
        f"{sid}:{channel}.{resource}:ttl={ttl}"
        f":read={'true' if read else 'false'}"
        f":write={'true' if write else 'false'}"
    )

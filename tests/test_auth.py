"""Tests for request signing and subscription tokens."""

import base64
import hashlib
import hmac

import pytest

from beebotte import BBT
from beebotte.auth import (
    content_md5,
    get_auth_headers,
    hmac_sha1,
    http_date,
    sign_request,
    string_to_sign,
    subscription_string,
)

KEY_ID = "access"
SECRET = "secret"
DATE = "Tue, 14 Nov 2023 22:13:20 GMT"


def reference_signature(secret: str, payload: str) -> str:
    mac = hmac.new(secret.encode(), payload.encode(), hashlib.sha1)
    return base64.b64encode(mac.digest()).decode()


def test_http_date_is_rfc2822():
    assert http_date(1700000000) == DATE


def test_content_md5_matches_reference():
    body = '{"data":42}'
    expected = base64.b64encode(hashlib.md5(body.encode()).digest()).decode()
    assert content_md5(body) == expected


def test_get_string_to_sign_has_empty_md5_and_full_uri():
    canonical = string_to_sign("GET", "/v1/data/read/dev/temp?limit=5", DATE)
    assert canonical == f"GET\n\napplication/json\n{DATE}\n/v1/data/read/dev/temp?limit=5"


def test_post_string_to_sign_includes_md5():
    md5 = content_md5('{"data":1}')
    canonical = string_to_sign("POST", "/v1/data/write/dev/temp", DATE, md5)
    assert canonical == f"POST\n{md5}\napplication/json\n{DATE}\n/v1/data/write/dev/temp"


def test_sign_request_is_deterministic_and_matches_reference():
    uri = "/v1/data/read/dev/temp?limit=5"
    expected = reference_signature(
        SECRET, f"GET\n\napplication/json\n{DATE}\n{uri}"
    )

    first = sign_request(KEY_ID, SECRET, "GET", uri, DATE)
    second = sign_request(KEY_ID, SECRET, "GET", uri, DATE)

    assert first == second == f"{KEY_ID}:{expected}"


def test_get_auth_headers_for_post():
    body = '{"data":42}'
    uri = "/v1/data/write/dev/temp"
    headers = get_auth_headers(KEY_ID, SECRET, "POST", uri, body=body, date=DATE)

    md5 = content_md5(body)
    expected = reference_signature(SECRET, f"POST\n{md5}\napplication/json\n{DATE}\n{uri}")
    assert headers == {
        "Content-Type": "application/json",
        "Date": DATE,
        "Content-MD5": md5,
        "Authorization": f"{KEY_ID}:{expected}",
    }


def test_get_auth_headers_for_get_has_no_md5():
    headers = get_auth_headers(KEY_ID, SECRET, "GET", "/v1/data/read/a/b", date=DATE)
    assert "Content-MD5" not in headers
    assert headers["Authorization"].startswith(f"{KEY_ID}:")


def test_signature_depends_on_secret():
    assert hmac_sha1("one", "payload") != hmac_sha1("two", "payload")


def test_subscription_string_format():
    assert (
        subscription_string("sid1", "private:dev", "temp", 60, True, False)
        == "sid1:private:dev.temp:ttl=60:read=true:write=false"
    )


def test_subscription_token_matches_reference():
    bbt = BBT(KEY_ID, SECRET)
    token = bbt.compute_subscription_token("sid1", "dev", "temp", ttl=0, read=True)

    expected = reference_signature(SECRET, "sid1:dev.temp:ttl=0:read=true:write=false")
    assert token == f"{KEY_ID}:{expected}"


def test_subscription_token_defaults_to_all_resources():
    bbt = BBT(KEY_ID, SECRET)
    token = bbt.compute_subscription_token("sid1", "dev")

    expected = reference_signature(SECRET, "sid1:dev.*:ttl=0:read=false:write=false")
    assert token == f"{KEY_ID}:{expected}"


@pytest.mark.parametrize(
    "left, right",
    [
        ({"read": True, "write": False}, {"read": False, "write": True}),
        ({"ttl": 0}, {"ttl": 60}),
    ],
)
def test_subscription_tokens_differ_by_grant(left, right):
    bbt = BBT(KEY_ID, SECRET)
    assert bbt.compute_subscription_token("sid", "dev", "temp", **left) != bbt.compute_subscription_token(
        "sid", "dev", "temp", **right
    )

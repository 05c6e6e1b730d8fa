"""Tests for the single-request path in :mod:`sparkapi.core.api_client`."""

from __future__ import annotations

import pytest
import requests

from sparkapi.core.api_client import APIClient, merge_query, validate_url
from sparkapi.core.exceptions import HTTPStatusError, InvalidURLError, ResponseReadError
from sparkapi.core.transport import ResponseBody, TransportResponse
from tests.fixtures.clients import TEST_BASE_URL, TEST_TOKEN
from tests.support.transport import FakeTransport, failing_body, json_response, query_of, tracked_body

PEOPLE_URL = f"{TEST_BASE_URL}/people"


def test_request_sets_authorization_and_content_type(
    api_client: APIClient, fake_transport: FakeTransport
) -> None:
    fake_transport.queue(json_response({"id": "1"}))

    api_client.request("GET", PEOPLE_URL)

    request = fake_transport.requests[0]
    assert request.method == "GET"
    assert request.headers["Authorization"] == f"Bearer {TEST_TOKEN}"
    assert request.headers["Content-Type"] == "application/json; charset=utf-8"


def test_mandatory_headers_override_caller_headers(api_client: APIClient) -> None:
    request = api_client.build_request(
        "post",
        PEOPLE_URL,
        headers={"authorization": "Basic nope", "content-type": "text/plain", "X-Trace": "abc"},
    )

    assert request.method == "POST"
    assert request.headers["Authorization"] == f"Bearer {TEST_TOKEN}"
    assert request.headers["Content-Type"] == "application/json; charset=utf-8"
    assert request.headers["X-Trace"] == "abc"


def test_query_parameters_are_added_to_existing_ones(api_client: APIClient) -> None:
    request = api_client.build_request(
        "GET",
        f"{PEOPLE_URL}?email=a%40example.com",
        params={"email": ["b@example.com"], "orgId": "org-1"},
    )

    query = query_of(request)
    assert query["email"] == ["a@example.com", "b@example.com"]
    assert query["orgId"] == ["org-1"]


def test_page_size_replaces_any_max_in_the_url(api_client: APIClient) -> None:
    request = api_client.build_request(
        "GET",
        f"{PEOPLE_URL}?max=100&after=abc",
        params={"max": "7"},
        page_size=3,
    )

    query = query_of(request)
    assert query["max"] == ["3"]
    assert query["after"] == ["abc"]


def test_url_without_parameters_is_left_untouched(api_client: APIClient) -> None:
    request = api_client.build_request("DELETE", f"{PEOPLE_URL}/abc")

    assert request.url == f"{PEOPLE_URL}/abc"
    assert request.body is None


def test_merge_query_keeps_blank_values() -> None:
    merged = merge_query("https://h.test/p?flag=&a=1", {"a": [2, 3]})

    assert merged == "https://h.test/p?flag=&a=1&a=2&a=3"


@pytest.mark.parametrize(
    ("url", "reason"),
    [
        (":123", "missing protocol scheme"),
        ("api.example.test/v1/people", "missing protocol scheme"),
        ("ftp://api.example.test/v1", "unsupported protocol scheme 'ftp'"),
        ("https:///v1/people", "missing host"),
    ],
)
def test_validate_url_rejects_unusable_urls(url: str, reason: str) -> None:
    with pytest.raises(InvalidURLError) as excinfo:
        validate_url(url)

    assert excinfo.value.reason == reason
    assert excinfo.value.url == url


def test_invalid_url_never_reaches_the_transport(
    api_client: APIClient, fake_transport: FakeTransport
) -> None:
    with pytest.raises(InvalidURLError):
        api_client.get(":123")

    assert fake_transport.calls == 0


def test_transport_failure_propagates_unchanged(
    api_client: APIClient, fake_transport: FakeTransport
) -> None:
    failure = requests.ConnectionError("connection refused")
    fake_transport.queue(failure)

    with pytest.raises(requests.ConnectionError) as excinfo:
        api_client.get(PEOPLE_URL)

    assert excinfo.value is failure
    assert fake_transport.responses == []


def test_body_read_failure_raises_and_releases_body(
    api_client: APIClient, fake_transport: FakeTransport
) -> None:
    body = failing_body()
    fake_transport.queue(TransportResponse(status_code=200, body=body))

    with pytest.raises(ResponseReadError) as excinfo:
        api_client.get(PEOPLE_URL)

    assert isinstance(excinfo.value.__cause__, OSError)
    assert body.released


def test_error_status_reports_code_and_body(
    api_client: APIClient, fake_transport: FakeTransport
) -> None:
    fake_transport.queue(json_response(status=500, raw=b"boom"))

    with pytest.raises(HTTPStatusError) as excinfo:
        api_client.get(PEOPLE_URL)

    assert excinfo.value.status_code == 500
    assert excinfo.value.body == "boom"
    assert "500" in str(excinfo.value)
    assert "boom" in str(excinfo.value)
    assert fake_transport.bodies_released


@pytest.mark.parametrize("status", [201, 301, 404])
def test_only_200_and_204_are_accepted(
    api_client: APIClient, fake_transport: FakeTransport, status: int
) -> None:
    fake_transport.queue(json_response({}, status=status))

    with pytest.raises(HTTPStatusError):
        api_client.get(PEOPLE_URL)


def test_no_content_response_yields_empty_bytes(
    api_client: APIClient, fake_transport: FakeTransport
) -> None:
    fake_transport.queue(TransportResponse(status_code=204, body=ResponseBody.empty()))

    assert api_client.delete(f"{PEOPLE_URL}/abc") == b""
    assert fake_transport.requests[0].method == "DELETE"
    assert fake_transport.bodies_released


def test_body_is_read_once_then_released(
    api_client: APIClient, fake_transport: FakeTransport
) -> None:
    body, calls = tracked_body(b'{"id": "1"}')
    fake_transport.queue(TransportResponse(status_code=200, body=body))

    response = api_client.request("GET", PEOPLE_URL)

    assert response.content == b'{"id": "1"}'
    assert calls == ["read", "release"]


def test_post_sends_body_bytes(api_client: APIClient, fake_transport: FakeTransport) -> None:
    fake_transport.queue(json_response({"id": "1"}))

    content = api_client.post(PEOPLE_URL, b'{"emails": ["a@example.com"]}')

    assert content == b'{"id": "1"}'
    assert fake_transport.requests[0].body == b'{"emails": ["a@example.com"]}'


def test_response_headers_are_looked_up_case_insensitively(
    api_client: APIClient, fake_transport: FakeTransport
) -> None:
    fake_transport.queue(
        TransportResponse(
            status_code=200,
            headers={"link": '<https://h.test/a>; rel="next"'},
            body=ResponseBody.from_bytes(b"{}"),
        )
    )

    response = api_client.request("GET", PEOPLE_URL)

    assert response.headers["Link"] == '<https://h.test/a>; rel="next"'

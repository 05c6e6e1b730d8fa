"""Single-request execution: headers, query merging and status classification."""

from __future__ import annotations

import time
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Union
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

from requests.structures import CaseInsensitiveDict
from structlog.stdlib import BoundLogger

from sparkapi.config.models import ClientConfig
from sparkapi.core.exceptions import HTTPStatusError, InvalidURLError, ResponseReadError
from sparkapi.core.logging import LogEvents, UnifiedLogger
from sparkapi.core.transport import Transport, TransportRequest

__all__ = [
    "APIClient",
    "APIResponse",
    "JSON_CONTENT_TYPE",
    "PAGE_SIZE_PARAM",
    "QueryParams",
    "merge_query",
    "validate_url",
]

PAGE_SIZE_PARAM = "max"
JSON_CONTENT_TYPE = "application/json; charset=utf-8"
ACCEPTED_STATUSES = frozenset({200, 204})

QueryValue = Union[str, int, Sequence[Union[str, int]]]
QueryParams = Mapping[str, QueryValue]


@dataclass(frozen=True, slots=True)
class APIResponse:
    """Raw outcome of one accepted request."""

    status_code: int
    headers: Mapping[str, str]
    content: bytes


def _as_strings(value: QueryValue) -> list[str]:
    if isinstance(value, (str, int)):
        return [str(value)]
    return [str(item) for item in value]


def validate_url(url: str) -> None:
    """Reject URLs that cannot address a remote endpoint."""

    try:
        parts = urlsplit(url)
    except ValueError as exc:
        raise InvalidURLError(url, str(exc)) from exc
    if not parts.scheme:
        raise InvalidURLError(url, "missing protocol scheme")
    if parts.scheme not in ("http", "https"):
        raise InvalidURLError(url, f"unsupported protocol scheme {parts.scheme!r}")
    if not parts.netloc:
        raise InvalidURLError(url, "missing host")


def merge_query(
    url: str,
    params: QueryParams | None = None,
    *,
    overrides: QueryParams | None = None,
) -> str:
    """Merge ``params`` into the query string already present in ``url``.

    Values are appended per key so existing values survive. Keys in
    ``overrides`` replace whatever was there before.
    """

    parts = urlsplit(url)
    merged: dict[str, list[str]] = {}
    for key, value in parse_qsl(parts.query, keep_blank_values=True):
        merged.setdefault(key, []).append(value)
    for key, value in (params or {}).items():
        merged.setdefault(key, []).extend(_as_strings(value))
    for key, value in (overrides or {}).items():
        merged[key] = _as_strings(value)
    query = urlencode([(key, item) for key, values in merged.items() for item in values])
    return urlunsplit(parts._replace(query=query))


class APIClient:
    """Build and execute exactly one request per call.

    Every request carries the bearer token and a JSON content type. Only
    200 and 204 are accepted; any other status raises
    :class:`HTTPStatusError` with the status and the body text. The response
    body is always released before a call returns.
    """

    def __init__(
        self,
        config: ClientConfig,
        transport: Transport,
        *,
        logger: BoundLogger | None = None,
    ) -> None:
        self._config = config
        self._transport = transport
        self._logger = logger or UnifiedLogger.get(__name__).bind(component="http_client")

    @property
    def config(self) -> ClientConfig:
        return self._config

    @property
    def transport(self) -> Transport:
        return self._transport

    def build_request(
        self,
        method: str,
        url: str,
        *,
        params: QueryParams | None = None,
        page_size: int | None = None,
        body: bytes | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> TransportRequest:
        validate_url(url)
        overrides = {PAGE_SIZE_PARAM: page_size} if page_size is not None else None
        if params or overrides:
            url = merge_query(url, params, overrides=overrides)
        request_headers: CaseInsensitiveDict[str] = CaseInsensitiveDict(headers or {})
        request_headers["Authorization"] = self._config.authorization
        request_headers["Content-Type"] = JSON_CONTENT_TYPE
        return TransportRequest(
            method=method.upper(),
            url=url,
            headers=dict(request_headers),
            body=body,
        )

    def execute(self, request: TransportRequest) -> APIResponse:
        log = self._logger.bind(method=request.method, url=request.url)
        log.debug(LogEvents.HTTP_REQUEST_SENT)
        start = time.perf_counter()
        try:
            response = self._transport.send(request)
        except Exception as exc:
            log.warning(LogEvents.HTTP_REQUEST_EXCEPTION, error=str(exc))
            raise

        with response.body as body:
            try:
                content = body.read()
            except Exception as exc:
                log.warning(
                    LogEvents.HTTP_RESPONSE_UNREADABLE,
                    status_code=response.status_code,
                    error=str(exc),
                )
                raise ResponseReadError(f"failed to read response body: {exc}") from exc

        duration_ms = (time.perf_counter() - start) * 1000
        if response.status_code not in ACCEPTED_STATUSES:
            text = content.decode("utf-8", errors="replace")
            log.warning(
                LogEvents.HTTP_REQUEST_FAILED,
                status_code=response.status_code,
                duration_ms=duration_ms,
            )
            raise HTTPStatusError(response.status_code, text)

        log.info(
            LogEvents.HTTP_REQUEST_COMPLETED,
            status_code=response.status_code,
            duration_ms=duration_ms,
            size=len(content),
        )
        return APIResponse(
            status_code=response.status_code,
            headers=CaseInsensitiveDict(response.headers),
            content=content,
        )

    def request(
        self,
        method: str,
        url: str,
        *,
        params: QueryParams | None = None,
        page_size: int | None = None,
        body: bytes | None = None,
    ) -> APIResponse:
        try:
            request = self.build_request(
                method, url, params=params, page_size=page_size, body=body
            )
        except InvalidURLError as exc:
            self._logger.warning(LogEvents.HTTP_REQUEST_INVALID, url=url, error=exc.reason)
            raise
        return self.execute(request)

    def get(self, url: str, params: QueryParams | None = None) -> bytes:
        return self.request("GET", url, params=params).content

    def post(self, url: str, body: bytes | None = None) -> bytes:
        return self.request("POST", url, body=body).content

    def put(self, url: str, body: bytes | None = None) -> bytes:
        return self.request("PUT", url, body=body).content

    def delete(self, url: str) -> bytes:
        return self.request("DELETE", url).content

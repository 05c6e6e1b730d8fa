"""Transport boundary: send one HTTP request, receive one HTTP response.

The request path depends only on the :class:`Transport` protocol. Production
code uses :class:`RequestsTransport`; tests inject in-memory fakes through the
same constructor argument, so no process-wide client handle exists.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable

import requests
from requests.structures import CaseInsensitiveDict

__all__ = [
    "ResponseBody",
    "Transport",
    "TransportRequest",
    "TransportResponse",
    "RequestsTransport",
]


class ResponseBody:
    """Scoped response body exposing ``read`` and an idempotent ``release``.

    ``released`` stays observable after the fact, which lets callers (and
    tests) verify that the underlying connection was handed back.
    """

    __slots__ = ("_reader", "_on_release", "_released")

    def __init__(
        self,
        reader: Callable[[], bytes],
        *,
        on_release: Callable[[], None] | None = None,
    ) -> None:
        self._reader = reader
        self._on_release = on_release
        self._released = False

    @classmethod
    def from_bytes(cls, data: bytes) -> ResponseBody:
        return cls(lambda: data)

    @classmethod
    def empty(cls) -> ResponseBody:
        return cls.from_bytes(b"")

    @property
    def released(self) -> bool:
        return self._released

    def read(self) -> bytes:
        if self._released:
            raise ValueError("response body already released")
        return self._reader()

    def release(self) -> None:
        if self._released:
            return
        self._released = True
        if self._on_release is not None:
            self._on_release()

    def __enter__(self) -> ResponseBody:
        return self

    def __exit__(self, exc_type: object, exc: object, tb: object) -> None:
        self.release()


@dataclass(frozen=True, slots=True)
class TransportRequest:
    """Fully built request handed to a transport."""

    method: str
    url: str
    headers: Mapping[str, str] = field(default_factory=dict)
    body: bytes | None = None


@dataclass(slots=True)
class TransportResponse:
    """Status, headers and an unread body returned by a transport."""

    status_code: int
    headers: Mapping[str, str] = field(default_factory=CaseInsensitiveDict)
    body: ResponseBody = field(default_factory=ResponseBody.empty)


@runtime_checkable
class Transport(Protocol):
    """Anything able to send a :class:`TransportRequest`."""

    def send(self, request: TransportRequest) -> TransportResponse:
        """Send ``request`` or raise; connection pooling and TLS are the transport's concern."""
        ...


class RequestsTransport:
    """:class:`Transport` backed by a :class:`requests.Session`.

    Responses are streamed so the body is only pulled when the request path
    reads it, and releasing the body closes the response.
    """

    def __init__(
        self,
        session: requests.Session | None = None,
        *,
        timeout: float | tuple[float, float] = 60.0,
        headers: Mapping[str, str] | None = None,
    ) -> None:
        self._owns_session = session is None
        self._session = session or requests.Session()
        if headers:
            self._session.headers.update(dict(headers))
        self._timeout = timeout

    @property
    def session(self) -> requests.Session:
        return self._session

    def send(self, request: TransportRequest) -> TransportResponse:
        prepared = self._session.prepare_request(
            requests.Request(
                request.method,
                request.url,
                headers=dict(request.headers),
                data=request.body,
            )
        )
        response = self._session.send(prepared, stream=True, timeout=self._timeout)
        return TransportResponse(
            status_code=response.status_code,
            headers=response.headers,
            body=ResponseBody(lambda: response.content, on_release=response.close),
        )

    def close(self) -> None:
        if self._owns_session:
            self._session.close()

    def __enter__(self) -> RequestsTransport:
        return self

    def __exit__(self, exc_type: object, exc: object, tb: object) -> None:
        self.close()

"""In-memory transport doubles shared by the unit tests."""

from __future__ import annotations

import json
from collections.abc import Callable, Mapping, Sequence
from typing import Any
from urllib.parse import parse_qs, urlsplit

from requests.structures import CaseInsensitiveDict

from sparkapi.core.transport import ResponseBody, TransportRequest, TransportResponse

__all__ = [
    "FakeTransport",
    "Outcome",
    "failing_body",
    "json_response",
    "link_next",
    "path_of",
    "query_of",
    "tracked_body",
]

Outcome = TransportResponse | BaseException
Handler = Callable[[TransportRequest, int], Outcome]


def json_response(
    payload: Any = None,
    *,
    status: int = 200,
    headers: Mapping[str, str] | None = None,
    raw: bytes | None = None,
) -> TransportResponse:
    """Build a response whose body is ``payload`` serialised as JSON (or ``raw``)."""

    content = raw if raw is not None else json.dumps(payload).encode("utf-8")
    return TransportResponse(
        status_code=status,
        headers=CaseInsensitiveDict(headers or {}),
        body=ResponseBody.from_bytes(content),
    )


def tracked_body(content: bytes) -> tuple[ResponseBody, list[str]]:
    """Return a body plus a list that records ``"read"``/``"release"`` calls."""

    calls: list[str] = []

    def reader() -> bytes:
        calls.append("read")
        return content

    body = ResponseBody(reader, on_release=lambda: calls.append("release"))
    return body, calls


def failing_body(error: Exception | None = None) -> ResponseBody:
    """Return a body whose ``read`` raises ``error``."""

    failure = error or OSError("connection reset while reading body")

    def reader() -> bytes:
        raise failure

    return ResponseBody(reader)


def link_next(url: str) -> dict[str, str]:
    return {"Link": f'<{url}>; rel="next"'}


def query_of(request: TransportRequest) -> dict[str, list[str]]:
    return parse_qs(urlsplit(request.url).query, keep_blank_values=True)


def path_of(request: TransportRequest) -> str:
    return urlsplit(request.url).path


class FakeTransport:
    """Transport double that records requests and replays scripted outcomes.

    Outcomes come either from a fixed sequence or from a ``handler`` called
    with the request and its zero-based index. Exceptions are raised instead
    of being returned.
    """

    def __init__(
        self,
        outcomes: Sequence[Outcome] | None = None,
        *,
        handler: Handler | None = None,
    ) -> None:
        self._outcomes = list(outcomes or [])
        self._handler = handler
        self.requests: list[TransportRequest] = []
        self.responses: list[TransportResponse] = []
        self.closed = False

    @property
    def calls(self) -> int:
        return len(self.requests)

    def queue(self, *outcomes: Outcome) -> None:
        self._outcomes.extend(outcomes)

    def send(self, request: TransportRequest) -> TransportResponse:
        index = len(self.requests)
        self.requests.append(request)
        if self._handler is not None:
            outcome = self._handler(request, index)
        elif index < len(self._outcomes):
            outcome = self._outcomes[index]
        else:
            raise AssertionError(f"unexpected request #{index + 1}: {request.method} {request.url}")
        if isinstance(outcome, BaseException):
            raise outcome
        self.responses.append(outcome)
        return outcome

    def close(self) -> None:
        self.closed = True

    @property
    def bodies_released(self) -> bool:
        return all(response.body.released for response in self.responses)

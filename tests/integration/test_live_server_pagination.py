from __future__ import annotations

import json
import threading
from collections.abc import Iterator
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from typing import ClassVar
from urllib.parse import parse_qs, urlsplit

import pytest

from sparkapi import SparkClient
from sparkapi.config import build_client_config

pytestmark = pytest.mark.integration


class _RoomsHandler(BaseHTTPRequestHandler):
    """Serve three pages of rooms with multi-entry ``Link`` headers."""

    seen_queries: ClassVar[list[dict[str, list[str]]]] = []

    def log_message(self, _format: str, *args: object) -> None:  # pragma: no cover - quiet server
        return

    def do_GET(self) -> None:  # noqa: N802 - required by BaseHTTPRequestHandler
        parts = urlsplit(self.path)
        query = parse_qs(parts.query)
        self.seen_queries.append(query)

        page = int(query.get("page", ["0"])[0])
        host = f"http://{self.headers['Host']}"
        first = f'<{host}/v1/rooms?page=0>; rel="first"'
        if page < 2:
            link = f'<{host}/v1/rooms?page={page + 1}&max=1>; rel="next", {first}'
        else:
            link = first
        payload = {"items": [{"id": f"room-{page}", "title": f"Room {page}", "type": "group"}]}
        body = json.dumps(payload).encode("utf-8")
        self.send_response(200)
        self.send_header("Content-Type", "application/json")
        self.send_header("Content-Length", str(len(body)))
        self.send_header("Link", link)
        self.end_headers()
        self.wfile.write(body)


@pytest.fixture()  # type: ignore[misc]
def rooms_server() -> Iterator[str]:
    _RoomsHandler.seen_queries = []
    server = ThreadingHTTPServer(("127.0.0.1", 0), _RoomsHandler)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    try:
        host, port = server.server_address[:2]
        yield f"http://{host}:{port}/v1"
    finally:
        server.shutdown()
        server.server_close()
        thread.join(timeout=5)


def test_rooms_follow_first_link_entry_only(rooms_server: str) -> None:
    config = build_client_config(token="live", base_url=rooms_server, page_size=5, timeout_sec=5.0)

    with SparkClient(config=config) as client:
        rooms = client.list_rooms(0)
        found = client.get_room_by_name("Room 1")

    assert [room.id for room in rooms] == ["room-0", "room-1", "room-2"]
    assert found.id == "room-1"
    # every request, continuation links included, asks for the configured page size
    assert all(query["max"] == ["5"] for query in _RoomsHandler.seen_queries)


def test_bounded_listing_stops_when_budget_is_spent(rooms_server: str) -> None:
    config = build_client_config(token="live", base_url=rooms_server, page_size=1, timeout_sec=5.0)

    with SparkClient(config=config) as client:
        rooms = client.list_rooms(2)

    assert [room.id for room in rooms] == ["room-0", "room-1"]
    assert len(_RoomsHandler.seen_queries) == 2

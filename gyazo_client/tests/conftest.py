from __future__ import annotations

import json
import threading
from dataclasses import dataclass, field
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from typing import Dict, Iterator, List, Optional, Tuple, Union

import pytest


@dataclass
class RecordedRequest:
    method: str
    path: str
    headers: Dict[str, str]
    body: bytes


@dataclass
class MockApiServer:
    """In-process HTTP server that replays canned responses and records hits."""

    base_url: str
    routes: Dict[Tuple[str, str], Tuple[int, bytes, Dict[str, str]]] = field(default_factory=dict)
    hits: List[RecordedRequest] = field(default_factory=list)

    def add(
        self,
        method: str,
        path: str,
        status: int,
        body: Union[str, bytes, object],
        headers: Optional[Dict[str, str]] = None,
    ) -> None:
        if isinstance(body, str):
            data = body.encode("utf-8")
        elif isinstance(body, bytes):
            data = body
        else:
            data = json.dumps(body).encode("utf-8")
        self.routes[(method, path)] = (status, data, dict(headers or {}))


def _handler_for(server: MockApiServer):
    class Handler(BaseHTTPRequestHandler):
        def _serve(self) -> None:
            length = int(self.headers.get("Content-Length") or 0)
            body = self.rfile.read(length) if length else b""
            server.hits.append(
                RecordedRequest(
                    method=self.command,
                    path=self.path,
                    headers={k.lower(): v for k, v in self.headers.items()},
                    body=body,
                )
            )
            status, data, extra = server.routes.get(
                (self.command, self.path), (404, b"no route", {})
            )
            self.send_response(status)
            for k, v in extra.items():
                self.send_header(k, v)
            self.send_header("Content-Type", "application/json")
            self.send_header("Content-Length", str(len(data)))
            self.end_headers()
            self.wfile.write(data)

        do_GET = _serve
        do_POST = _serve
        do_DELETE = _serve

        def log_message(self, format, *args):  # noqa: A002
            pass

    return Handler


def _serve_mock() -> Iterator[MockApiServer]:
    state = MockApiServer(base_url="")
    httpd = ThreadingHTTPServer(("127.0.0.1", 0), _handler_for(state))
    state.base_url = f"http://127.0.0.1:{httpd.server_address[1]}"
    t = threading.Thread(target=httpd.serve_forever, daemon=True)
    t.start()
    try:
        yield state
    finally:
        httpd.shutdown()
        httpd.server_close()


@pytest.fixture()
def mock_api():
    """Yield a running MockApiServer bound to an ephemeral localhost port."""

    yield from _serve_mock()


@pytest.fixture()
def other_api():
    """A second, independent server (a different origin from mock_api)."""

    yield from _serve_mock()


IMAGE_JSON = {
    "image_id": "abc123",
    "permalink_url": "https://gyazo.com/abc123",
    "thumb_url": "https://thumb.gyazo.com/thumb/abc123",
    "type": "png",
    "created_at": "2024-08-10 12:00:00",
    "metadata": {"app": None, "title": None, "url": None, "desc": None},
    "ocr": None,
}


@pytest.fixture()
def image_json() -> dict:
    return json.loads(json.dumps(IMAGE_JSON))

from __future__ import annotations

import json
import mimetypes
import ssl
import uuid
from dataclasses import dataclass
from http.client import HTTPException
from typing import Any, List, Mapping, Optional, Sequence, Tuple
from urllib.error import HTTPError
from urllib.parse import urlsplit
from urllib.request import HTTPRedirectHandler, HTTPSHandler, OpenerDirector, Request
from urllib.request import build_opener as _build_opener

from gyazo_client.errors import RequestFailedError

# (field_name, filename, data, content_type)
FilePart = Tuple[str, str, bytes, str]


@dataclass(frozen=True, slots=True)
class HttpResponse:
    """HTTP response wrapper.

    Notes:
    - Non-2xx responses are returned, not raised.
    - `body_bytes` is None when an error body could not be read.

    """

    status: int
    headers: Mapping[str, str]
    body_bytes: Optional[bytes]

    def json(self) -> Any:
        """Decode body as JSON."""

        return json.loads((self.body_bytes or b"").decode("utf-8", errors="strict"))

    def text(self) -> Optional[str]:
        if self.body_bytes is None:
            return None
        return self.body_bytes.decode("utf-8", errors="replace")


def file_part(field_name: str, filename: str, data: bytes) -> FilePart:
    """Describe an in-memory file for encode_multipart."""

    ct = mimetypes.guess_type(filename)[0] or "application/octet-stream"
    return (field_name, filename, data, ct)


def encode_multipart(
    *, fields: Sequence[Tuple[str, str]], files: Sequence[FilePart]
) -> Tuple[bytes, str]:
    """Encode multipart/form-data.

    Text fields are written first, in the given order, then the files.
    Returns (body, boundary).
    """

    boundary = "----gyazo-" + uuid.uuid4().hex
    crlf = "\r\n"
    parts: List[bytes] = []

    for name, value in fields:
        parts.append(f"--{boundary}{crlf}".encode("utf-8"))
        parts.append(f'Content-Disposition: form-data; name="{name}"{crlf}{crlf}'.encode("utf-8"))
        parts.append(str(value).encode("utf-8"))
        parts.append(crlf.encode("utf-8"))

    for field_name, filename, data, content_type in files:
        parts.append(f"--{boundary}{crlf}".encode("utf-8"))
        parts.append(
            f'Content-Disposition: form-data; name="{field_name}"; filename="{filename}"{crlf}'.encode(
                "utf-8"
            )
        )
        parts.append(f"Content-Type: {content_type}{crlf}{crlf}".encode("utf-8"))
        parts.append(data)
        parts.append(crlf.encode("utf-8"))

    parts.append(f"--{boundary}--{crlf}".encode("utf-8"))
    body = b"".join(parts)
    return body, boundary


def _origin(url: str) -> Tuple[str, str]:
    parts = urlsplit(url)
    return (parts.scheme.lower(), parts.netloc.lower())


class SameOriginAuthRedirectHandler(HTTPRedirectHandler):
    """Follow redirects, carrying Authorization only to the same origin.

    Security notes:
    - A redirect to another scheme, host or port never sees the bearer token.

    """

    def redirect_request(self, req, fp, code, msg, headers, newurl):
        new = super().redirect_request(req, fp, code, msg, headers, newurl)
        if new is not None:
            auth = req.get_header("Authorization")
            if auth and _origin(req.full_url) == _origin(new.full_url):
                new.add_unredirected_header("Authorization", auth)
        return new


def build_opener() -> OpenerDirector:
    """Opener with the default SSL context (verification ON)."""

    return _build_opener(
        HTTPSHandler(context=ssl.create_default_context()),
        SameOriginAuthRedirectHandler(),
    )


def send(
    method: str,
    url: str,
    *,
    headers: Mapping[str, str],
    body: Optional[bytes] = None,
    timeout: Optional[float] = None,
) -> HttpResponse:
    """Execute one HTTP request.

    Security notes:
    - Uses default SSL context (verification ON).

    Raises RequestFailedError when no response could be obtained.
    """

    req = Request(url=url, data=body, method=method)
    for k, v in headers.items():
        if k.lower() == "authorization":
            # Not copied onto redirects; see SameOriginAuthRedirectHandler.
            req.add_unredirected_header(k, v)
        else:
            req.add_header(k, v)
    if body is not None:
        req.add_header("Content-Length", str(len(body)))

    kwargs = {}
    if timeout is not None:
        kwargs["timeout"] = timeout

    try:
        with build_opener().open(req, **kwargs) as resp:
            data = resp.read()
            resp_headers = {k: v for k, v in resp.headers.items()}
            return HttpResponse(status=int(resp.status), headers=resp_headers, body_bytes=data)
    except HTTPError as e:
        return HttpResponse(
            status=int(e.code or 0),
            headers=dict(e.headers or {}),
            body_bytes=_read_error_body(e),
        )
    except (OSError, HTTPException) as e:
        # URLError, TLS failures and socket timeouts are all OSError subclasses.
        raise RequestFailedError(e) from e


def _read_error_body(e: HTTPError) -> Optional[bytes]:
    try:
        return e.read()
    except (OSError, HTTPException):
        return None
    finally:
        e.close()

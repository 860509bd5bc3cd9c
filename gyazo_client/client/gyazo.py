from __future__ import annotations

import logging
from typing import Any, List, Optional, Tuple
from urllib.parse import quote, urlencode, urljoin

from pydantic import TypeAdapter, ValidationError

from gyazo_client.client.http import encode_multipart, file_part, send
from gyazo_client.config import (
    DEFAULT_BASE_URL,
    DEFAULT_UPLOAD_URL,
    GyazoClientOptions,
    validate_base_url,
)
from gyazo_client.errors import InvalidUrlError, JsonParseError, error_for_status
from gyazo_client.models import (
    DeleteImageResponse,
    GyazoImage,
    OembedResponse,
    UploadImageResponse,
)
from gyazo_client.upload import IMAGE_FIELD_NAME, IMAGE_FILE_NAME, UploadParams

log = logging.getLogger("gyazo_client")

UPLOAD_PATH = "/api/upload"
OEMBED_URL_PREFIX = "https://gyazo.com/"
SUCCESS_STATUSES = frozenset({200, 201, 204})

# (body, content_type)
Form = Tuple[bytes, str]

_IMAGE = TypeAdapter(GyazoImage)
_IMAGE_LIST = TypeAdapter(List[GyazoImage])
_UPLOAD = TypeAdapter(UploadImageResponse)
_DELETE = TypeAdapter(DeleteImageResponse)
_OEMBED = TypeAdapter(OembedResponse)


def _image_path(image_id: str) -> str:
    return f"/api/images/{quote(image_id, safe='')}"


class GyazoClient:
    """Gyazo API client.

    The instance holds only immutable configuration, so one client can be
    shared between threads.

    Security notes:
    - Every request carries the bearer token; nothing is sent unauthenticated.
    - The token and image bytes are never logged.

    """

    def __init__(self, options: GyazoClientOptions):
        if not options.access_token:
            raise ValueError("access_token must not be empty")
        self._options = options
        self._base_url = validate_base_url("base_url", options.base_url)
        self._upload_url = validate_base_url("upload_url", options.upload_url)

    @classmethod
    def from_token(
        cls,
        access_token: str,
        *,
        base_url: str = DEFAULT_BASE_URL,
        upload_url: str = DEFAULT_UPLOAD_URL,
        timeout: Optional[float] = None,
    ) -> "GyazoClient":
        return cls(
            GyazoClientOptions(
                access_token=access_token,
                base_url=base_url,
                upload_url=upload_url,
                timeout=timeout,
            )
        )

    @property
    def options(self) -> GyazoClientOptions:
        return self._options

    def get_image(self, image_id: str) -> GyazoImage:
        """Get an image by its ID."""

        return self._request(_image_path(image_id), "GET", _IMAGE)

    def list_images(self) -> List[GyazoImage]:
        return self._request("/api/images", "GET", _IMAGE_LIST)

    def upload_image(self, params: UploadParams) -> UploadImageResponse:
        """Upload an image to the upload origin."""

        body, boundary = encode_multipart(
            fields=params.form_fields(),
            files=[file_part(IMAGE_FIELD_NAME, IMAGE_FILE_NAME, params.imagedata)],
        )
        form = (body, f"multipart/form-data; boundary={boundary}")
        return self._request(UPLOAD_PATH, "POST", _UPLOAD, form=form)

    def delete_image(self, image_id: str) -> DeleteImageResponse:
        return self._request(_image_path(image_id), "DELETE", _DELETE)

    def get_oembed(self, url: str) -> OembedResponse:
        """Get oEmbed data for a gyazo.com image page.

        The URL prefix is checked locally, before any request is made.
        """

        if not url.startswith(OEMBED_URL_PREFIX):
            raise InvalidUrlError(f"URL must start with '{OEMBED_URL_PREFIX}'")
        query = urlencode({"url": url}, safe=":/")
        return self._request(f"/api/oembed?{query}", "GET", _OEMBED)

    def _resolve(self, path: str) -> str:
        base = self._upload_url if path == UPLOAD_PATH else self._base_url
        return urljoin(base, path.lstrip("/"))

    def _request(
        self,
        path: str,
        method: str,
        adapter: TypeAdapter,
        *,
        form: Optional[Form] = None,
    ) -> Any:
        """Send one authenticated request and classify the response.

        - 200/201/204: decode the body with `adapter`.
        - 400/401/403/404/422/429/500: the matching status error, body ignored.
        - anything else: ApiError with the raw body text.
        """

        url = self._resolve(path)
        headers = {
            "Authorization": f"Bearer {self._options.access_token}",
            "Accept": "application/json",
        }
        body = None
        if form is not None:
            body, content_type = form
            headers["Content-Type"] = content_type

        log.debug("%s %s", method, url)
        resp = send(method, url, headers=headers, body=body, timeout=self._options.timeout)
        log.debug("%s %s -> %s", method, url, resp.status)

        if resp.status not in SUCCESS_STATUSES:
            raise error_for_status(resp.status, resp.text())

        try:
            return adapter.validate_python(resp.json())
        except (ValueError, ValidationError) as e:
            raise JsonParseError(e) from e

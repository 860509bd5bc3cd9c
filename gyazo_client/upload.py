from __future__ import annotations

from dataclasses import dataclass
from typing import FrozenSet, List, Optional, Tuple

from gyazo_client.errors import InvalidInputError

IMAGE_FIELD_NAME = "imagedata"
IMAGE_FILE_NAME = "image.png"
DEFAULT_ACCESS_POLICY = "anyone"

ACCESS_POLICIES: FrozenSet[str] = frozenset({"anyone", "only_me"})
METADATA_VISIBILITY: FrozenSet[str] = frozenset({"true", "false"})


@dataclass(frozen=True, slots=True)
class UploadParams:
    """Immutable parameter set for a single upload.

    Build it with UploadParamsBuilder; the enumerated fields are validated
    there and cannot change afterwards.

    """

    imagedata: bytes
    access_policy: Optional[str] = None
    metadata_is_public: Optional[str] = None
    referer_url: Optional[str] = None
    app: Optional[str] = None
    title: Optional[str] = None
    desc: Optional[str] = None
    created_at: Optional[str] = None
    collection_id: Optional[str] = None

    def form_fields(self) -> List[Tuple[str, str]]:
        """Text parts of the multipart body, in wire order.

        `access_policy` is always sent; the rest only when set.
        """

        fields = [("access_policy", self.access_policy or DEFAULT_ACCESS_POLICY)]
        optional = (
            ("metadata_is_public", self.metadata_is_public),
            ("referer_url", self.referer_url),
            ("app", self.app),
            ("title", self.title),
            ("desc", self.desc),
            ("created_at", self.created_at),
            ("collection_id", self.collection_id),
        )
        fields.extend((name, value) for name, value in optional if value is not None)
        return fields


class UploadParamsBuilder:
    """Fluent builder for UploadParams.

    Example:
      params = (
          UploadParamsBuilder(data)
          .access_policy("only_me")
          .title("screenshot")
          .build()
      )

    """

    def __init__(self, imagedata: bytes):
        self._imagedata = bytes(imagedata)
        self._access_policy: Optional[str] = None
        self._metadata_is_public: Optional[str] = None
        self._referer_url: Optional[str] = None
        self._app: Optional[str] = None
        self._title: Optional[str] = None
        self._desc: Optional[str] = None
        self._created_at: Optional[str] = None
        self._collection_id: Optional[str] = None

    def access_policy(self, access_policy: str) -> "UploadParamsBuilder":
        if access_policy not in ACCESS_POLICIES:
            raise InvalidInputError("access_policy must be 'anyone' or 'only_me'")
        self._access_policy = access_policy
        return self

    def metadata_is_public(self, metadata_is_public: str) -> "UploadParamsBuilder":
        if metadata_is_public not in METADATA_VISIBILITY:
            raise InvalidInputError("metadata_is_public must be 'true' or 'false'")
        self._metadata_is_public = metadata_is_public
        return self

    def referer_url(self, referer_url: str) -> "UploadParamsBuilder":
        self._referer_url = referer_url
        return self

    def app(self, app: str) -> "UploadParamsBuilder":
        self._app = app
        return self

    def title(self, title: str) -> "UploadParamsBuilder":
        self._title = title
        return self

    def desc(self, desc: str) -> "UploadParamsBuilder":
        self._desc = desc
        return self

    def created_at(self, created_at: str) -> "UploadParamsBuilder":
        self._created_at = created_at
        return self

    def collection_id(self, collection_id: str) -> "UploadParamsBuilder":
        self._collection_id = collection_id
        return self

    def build(self) -> UploadParams:
        return UploadParams(
            imagedata=self._imagedata,
            access_policy=self._access_policy,
            metadata_is_public=self._metadata_is_public,
            referer_url=self._referer_url,
            app=self._app,
            title=self._title,
            desc=self._desc,
            created_at=self._created_at,
            collection_id=self._collection_id,
        )

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class _Record(BaseModel):
    """Immutable API record.

    Notes:
    - Unknown fields from the server are ignored.
    - The wire name `type` is exposed as `image_type`.

    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")


class ImageMetadata(_Record):
    app: Optional[str] = None
    title: Optional[str] = None
    url: Optional[str] = None
    desc: Optional[str] = None


class ImageOcr(_Record):
    locale: str
    description: str


class GyazoImage(_Record):
    """A stored image as returned by the get and list endpoints."""

    image_id: str
    permalink_url: Optional[str] = None
    thumb_url: Optional[str] = None
    image_type: str = Field(alias="type")
    created_at: str
    metadata: ImageMetadata
    ocr: Optional[ImageOcr] = None


class UploadImageResponse(_Record):
    """Result of a successful upload."""

    image_id: str
    permalink_url: str
    thumb_url: str
    url: str
    image_type: str = Field(alias="type")


class DeleteImageResponse(_Record):
    image_id: str
    image_type: str = Field(alias="type")


class OembedResponse(_Record):
    """oEmbed descriptor for a hosted image."""

    version: str
    image_type: str = Field(alias="type")
    provider_name: str
    provider_url: str
    url: str
    width: int
    height: int

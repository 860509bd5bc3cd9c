"""Typed client for the Gyazo image hosting API.

Five operations are exposed on GyazoClient: get_image, list_images,
upload_image, delete_image and get_oembed. Failures are raised as
GyazoError subclasses; match on the class or on `.kind`.
"""

from .client import GyazoClient
from .config import GyazoClientOptions
from .errors import (
    ApiError,
    BadRequestError,
    ErrorKind,
    ForbiddenError,
    GyazoError,
    HttpStatusError,
    InternalServerError,
    InvalidInputError,
    InvalidUrlError,
    JsonParseError,
    NotFoundError,
    RateLimitExceededError,
    RequestFailedError,
    UnauthorizedError,
    UnprocessableEntityError,
)
from .models import (
    DeleteImageResponse,
    GyazoImage,
    ImageMetadata,
    ImageOcr,
    OembedResponse,
    UploadImageResponse,
)
from .upload import UploadParams, UploadParamsBuilder

__all__ = [
    "GyazoClient",
    "GyazoClientOptions",
    "UploadParams",
    "UploadParamsBuilder",
    "GyazoImage",
    "ImageMetadata",
    "ImageOcr",
    "UploadImageResponse",
    "DeleteImageResponse",
    "OembedResponse",
    "ErrorKind",
    "GyazoError",
    "RequestFailedError",
    "JsonParseError",
    "InvalidInputError",
    "InvalidUrlError",
    "HttpStatusError",
    "BadRequestError",
    "UnauthorizedError",
    "ForbiddenError",
    "NotFoundError",
    "UnprocessableEntityError",
    "RateLimitExceededError",
    "InternalServerError",
    "ApiError",
]

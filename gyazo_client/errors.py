from __future__ import annotations

from enum import Enum
from typing import Dict, Optional, Type


class ErrorKind(str, Enum):
    """
    Enumerated failure kinds raised by the client.

    Using str Enum keeps the kind stable when printed or serialized.
    """

    REQUEST_FAILED = "request_failed"
    JSON_PARSE_ERROR = "json_parse_error"
    BAD_REQUEST = "bad_request"
    UNAUTHORIZED = "unauthorized"
    FORBIDDEN = "forbidden"
    NOT_FOUND = "not_found"
    UNPROCESSABLE_ENTITY = "unprocessable_entity"
    RATE_LIMIT_EXCEEDED = "rate_limit_exceeded"
    INTERNAL_SERVER_ERROR = "internal_server_error"
    API_ERROR = "api_error"
    INVALID_INPUT = "invalid_input"
    INVALID_URL = "invalid_url"


class GyazoError(Exception):
    """
    Base exception for all client failures.

    Every subclass pins a single ErrorKind, so callers may match either on
    the exception class or on `kind`.
    """

    kind: ErrorKind


class RequestFailedError(GyazoError):
    """Connection, TLS or timeout failure before a response was received."""

    kind = ErrorKind.REQUEST_FAILED

    def __init__(self, cause: BaseException):
        self.cause = cause
        super().__init__(f"HTTP request failed: {cause}")


class JsonParseError(GyazoError):
    """A success response whose body does not decode into the expected record."""

    kind = ErrorKind.JSON_PARSE_ERROR

    def __init__(self, cause: BaseException):
        self.cause = cause
        super().__init__(f"Failed to parse JSON: {cause}")


class InvalidInputError(GyazoError):
    kind = ErrorKind.INVALID_INPUT

    def __init__(self, message: str):
        self.message = message
        super().__init__(f"Invalid input: {message}")


class InvalidUrlError(GyazoError):
    kind = ErrorKind.INVALID_URL

    def __init__(self, message: str):
        self.message = message
        super().__init__(f"Invalid url: {message}")


class HttpStatusError(GyazoError):
    """
    Base for failures classified from the response status alone.

    The response body is never inspected for these.
    """

    status_code: int
    description: str

    def __init__(self) -> None:
        super().__init__(self.description)


class BadRequestError(HttpStatusError):
    kind = ErrorKind.BAD_REQUEST
    status_code = 400
    description = "Bad Request: Invalid request parameters"


class UnauthorizedError(HttpStatusError):
    kind = ErrorKind.UNAUTHORIZED
    status_code = 401
    description = "Unauthorized: Authentication required"


class ForbiddenError(HttpStatusError):
    kind = ErrorKind.FORBIDDEN
    status_code = 403
    description = "Forbidden: Access denied"


class NotFoundError(HttpStatusError):
    kind = ErrorKind.NOT_FOUND
    status_code = 404
    description = "Not Found"


class UnprocessableEntityError(HttpStatusError):
    kind = ErrorKind.UNPROCESSABLE_ENTITY
    status_code = 422
    description = "Unprocessable Entity: Server cannot process the request"


class RateLimitExceededError(HttpStatusError):
    kind = ErrorKind.RATE_LIMIT_EXCEEDED
    status_code = 429
    description = "Too Many Requests: Rate limit exceeded"


class InternalServerError(HttpStatusError):
    kind = ErrorKind.INTERNAL_SERVER_ERROR
    status_code = 500
    description = "Internal Server Error: Unexpected error occurred"


class ApiError(GyazoError):
    """Any other non-success status, with the raw body text."""

    kind = ErrorKind.API_ERROR

    def __init__(self, status_code: int, message: str):
        self.status_code = status_code
        self.message = message
        super().__init__(f"API error: {status_code}, message: {message}")


STATUS_ERRORS: Dict[int, Type[HttpStatusError]] = {
    cls.status_code: cls
    for cls in (
        BadRequestError,
        UnauthorizedError,
        ForbiddenError,
        NotFoundError,
        UnprocessableEntityError,
        RateLimitExceededError,
        InternalServerError,
    )
}


def error_for_status(status_code: int, body_text: Optional[str]) -> GyazoError:
    """Map a non-success status to its error.

    Unknown statuses become ApiError; an unreadable body is reported as
    "Unknown error" rather than failing the classification.
    """

    cls = STATUS_ERRORS.get(status_code)
    if cls is not None:
        return cls()
    return ApiError(status_code, body_text if body_text is not None else "Unknown error")

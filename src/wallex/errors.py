"""Service errors raised by the Wallex client."""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    MISSING_API_KEY = "missing_api_key"
    BAD_REQUEST = "bad_request"
    UNAUTHORIZED = "unauthorized"
    FORBIDDEN = "forbidden"
    NOT_FOUND = "not_found"
    UNKNOWN = "unknown"
    REQUEST_FAILED = "request_failed"
    DECODE_FAILED = "decode_failed"


class WallexError(Exception):
    """Base class for every error raised at the API boundary."""

    kind: ErrorKind = ErrorKind.UNKNOWN
    default_message = "unknown error"

    def __init__(self, message: str | None = None, *, cause: BaseException | None = None) -> None:
        self.message = message or self.default_message
        self.cause = cause
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.cause is not None:
            return f"wallex: {self.message}: {self.cause}"
        return f"wallex: {self.message}"


class MissingAPIKeyError(WallexError):
    kind = ErrorKind.MISSING_API_KEY
    default_message = "missing api key"


class RequestError(WallexError):
    """The HTTP exchange could not be completed."""

    kind = ErrorKind.REQUEST_FAILED
    default_message = "request failed"


class DecodeError(RequestError):
    """The response body did not match the expected shape."""

    kind = ErrorKind.DECODE_FAILED


# ── Status-code categories ──

class StatusError(WallexError):
    """Non-200 response. The body is not inspected."""

    status_code: int | None = None

    def __init__(self, status_code: int | None = None) -> None:
        super().__init__()
        if status_code is not None:
            self.status_code = status_code


class BadRequestError(StatusError):
    kind = ErrorKind.BAD_REQUEST
    default_message = "bad request"
    status_code = 400


class UnauthorizedError(StatusError):
    kind = ErrorKind.UNAUTHORIZED
    default_message = "unauthorized"
    status_code = 401


class ForbiddenError(StatusError):
    kind = ErrorKind.FORBIDDEN
    default_message = "access forbidden"
    status_code = 403


class NotFoundError(StatusError):
    kind = ErrorKind.NOT_FOUND
    default_message = "resource not found"
    status_code = 404


class UnknownError(StatusError):
    kind = ErrorKind.UNKNOWN
    default_message = "unknown error"


_STATUS_ERRORS: dict[int, type[StatusError]] = {
    400: BadRequestError,
    401: UnauthorizedError,
    403: ForbiddenError,
    404: NotFoundError,
}


def error_for_status(code: int) -> StatusError:
    return _STATUS_ERRORS.get(code, UnknownError)(code)

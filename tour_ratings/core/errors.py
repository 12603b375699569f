"""
Error kinds raised by the ratings service and their HTTP status mapping.
"""
from enum import Enum


class ErrorKind(str, Enum):
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    INVALID = "invalid"


# Single dispatch table used by the API exception handler
STATUS_BY_KIND = {
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.CONFLICT: 409,
    ErrorKind.INVALID: 422,
}


class TourRatingError(Exception):
    """Raised when a request cannot be served; the message is returned as-is."""

    def __init__(self, kind: ErrorKind, message: str):
        super().__init__(message)
        self.kind = kind
        self.message = message

    @property
    def status_code(self) -> int:
        return STATUS_BY_KIND[self.kind]


def not_found(message: str) -> TourRatingError:
    return TourRatingError(ErrorKind.NOT_FOUND, message)


def conflict(message: str) -> TourRatingError:
    return TourRatingError(ErrorKind.CONFLICT, message)


def invalid(message: str) -> TourRatingError:
    return TourRatingError(ErrorKind.INVALID, message)

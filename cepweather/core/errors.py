"""Failure kinds raised by the lookup pipeline."""
from __future__ import annotations

import enum
from typing import Optional

# Short messages returned to callers; causes stay in the operator log.
MSG_INVALID_ZIPCODE = "invalid zipcode"
MSG_ZIPCODE_NOT_FOUND = "can not find zipcode"
MSG_INTERNAL_ERROR = "internal server error"
MSG_BAD_REQUEST = "invalid request body"


class ErrorKind(enum.Enum):
    INVALID_INPUT = "invalid_input"
    NOT_FOUND = "not_found"
    TRANSPORT_ERROR = "transport_error"
    UPSTREAM_ERROR = "upstream_error"


class ServiceError(RuntimeError):
    """Base pipeline error. Callers match on :attr:`kind`, not on identity."""

    kind: ErrorKind = ErrorKind.TRANSPORT_ERROR

    def __init__(
        self,
        message: str,
        *,
        status: Optional[int] = None,
        body: Optional[str] = None,
        cause: Optional[BaseException] = None,
    ) -> None:
        super().__init__(message)
        self.status = status
        self.body = body
        self.cause = cause


class InvalidInput(ServiceError):
    """The postal code is not exactly eight digits."""

    kind = ErrorKind.INVALID_INPUT


class NotFound(ServiceError):
    """The directory service has no record for the postal code."""

    kind = ErrorKind.NOT_FOUND


class TransportError(ServiceError):
    """The outbound call could not be completed or its body could not be parsed."""

    kind = ErrorKind.TRANSPORT_ERROR


class UpstreamError(ServiceError):
    """The outbound call completed with an unexpected status."""

    kind = ErrorKind.UPSTREAM_ERROR


__all__ = [
    "MSG_BAD_REQUEST",
    "MSG_INTERNAL_ERROR",
    "MSG_INVALID_ZIPCODE",
    "MSG_ZIPCODE_NOT_FOUND",
    "ErrorKind",
    "InvalidInput",
    "NotFound",
    "ServiceError",
    "TransportError",
    "UpstreamError",
]

"""
Exception classes for the Beebotte SDK.

Every error returned by the platform is tagged with an ``ErrorKind`` and
carries the HTTP status, the platform error code and the server message.
Catch ``BeebotteError`` to handle all API failures in one place, switch on
``error.kind``, or catch a specific subclass for finer control.

Typical usage:
    >>> from beebotte import BBT, NotFoundError
    >>> bbt = BBT("key_id", "secret_key")
    >>> try:
    ...     records = bbt.read("dev", "temperature")
    ... except NotFoundError as exc:
    ...     print(exc.error_code, exc.message)

Transport failures (``httpx.HTTPError``) are not wrapped and reach the caller
as raised by httpx.
"""
from enum import Enum
from typing import Dict, Optional, Type


class ErrorKind(Enum):
    """Classification of a failed platform call."""
    AUTHENTICATION = "authentication"
    PARAMETER = "parameter"
    BAD_REQUEST = "bad_request"
    DATA_TYPE = "data_type"
    BAD_TYPE = "bad_type"
    PAYLOAD_LIMIT = "payload_limit"
    NOT_ALLOWED = "not_allowed"
    INTERNAL = "internal"
    NOT_FOUND = "not_found"
    ALREADY_EXIST = "already_exist"
    UNEXPECTED = "unexpected"


class BeebotteError(Exception):
    """Base exception for API errors.

    Attributes
    ----------
    kind: ``ErrorKind`` tag of the failure.
    status_code: HTTP status returned by the platform (``None`` for errors
        detected client side).
    error_code: Platform application error code, when the body carried one.
    message: Server message, verbatim.
    """
    kind: ErrorKind = ErrorKind.UNEXPECTED

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        error_code: Optional[int] = None,
    ):
        self.message = message
        self.status_code = status_code
        self.error_code = error_code
        super().__init__(f"Status: {status_code}; Code {error_code}; Message: {message}")


class AuthenticationError(BeebotteError):
    """Request signature or API key rejected (400/1101)."""
    kind = ErrorKind.AUTHENTICATION


class ParameterError(BeebotteError):
    """Missing or invalid request parameter (400/1401)."""
    kind = ErrorKind.PARAMETER


class BadRequestError(BeebotteError):
    """Malformed request (400/1403)."""
    kind = ErrorKind.BAD_REQUEST


class DataTypeError(BeebotteError):
    """Value does not match the resource data type (400/1404)."""
    kind = ErrorKind.DATA_TYPE


class BadTypeError(BeebotteError):
    """Unknown data type (400/1405)."""
    kind = ErrorKind.BAD_TYPE


class PayloadLimitError(BeebotteError):
    """Request body exceeds the platform limit (400/1406)."""
    kind = ErrorKind.PAYLOAD_LIMIT


class NotAllowedError(BeebotteError):
    """Operation not permitted for these credentials (405/1102)."""
    kind = ErrorKind.NOT_ALLOWED


class InternalError(BeebotteError):
    """Platform side failure (500)."""
    kind = ErrorKind.INTERNAL


class NotFoundError(BeebotteError):
    """Channel, resource or user does not exist (404/1301-1303)."""
    kind = ErrorKind.NOT_FOUND


class AlreadyExistError(BeebotteError):
    """Channel, resource or user already exists (404/1304-1306)."""
    kind = ErrorKind.ALREADY_EXIST


class UnexpectedError(BeebotteError):
    """Any error status/code combination not listed above."""
    kind = ErrorKind.UNEXPECTED


# status -> {error code -> exception}
_ERROR_TABLE: Dict[int, Dict[int, Type[BeebotteError]]] = {
    400: {
        1101: AuthenticationError,
        1401: ParameterError,
        1403: BadRequestError,
        1404: DataTypeError,
        1405: BadTypeError,
        1406: PayloadLimitError,
    },
    404: {
        1301: NotFoundError,
        1302: NotFoundError,
        1303: NotFoundError,
        1304: AlreadyExistError,
        1305: AlreadyExistError,
        1306: AlreadyExistError,
    },
    405: {
        1102: NotAllowedError,
    },
    500: {
        1201: InternalError,
    },
}

# Used when the error code is not listed for the status.
_STATUS_FALLBACK: Dict[int, Type[BeebotteError]] = {
    500: InternalError,
}


def classify_error(
    status_code: int,
    error_code: Optional[int],
    message: str,
) -> BeebotteError:
    """Build the exception matching an error response.

    Args:
        status_code: HTTP status (expected >= 400)
        error_code: Application error code from the body, if any
        message: Server message

    Returns:
        Exception instance; the caller raises it
    """
    codes = _ERROR_TABLE.get(status_code, {})
    exc_type = codes.get(error_code) if error_code is not None else None
    if exc_type is None:
        exc_type = _STATUS_FALLBACK.get(status_code, UnexpectedError)
    return exc_type(message, status_code=status_code, error_code=error_code)

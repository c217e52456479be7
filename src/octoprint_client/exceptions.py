# ==============================================================================
#                  © 2025 Dedalus Labs, Inc. and affiliates
#                            Licensed under MIT
#            github.com/dedalus-labs/octoprint-client-python/LICENSE
# ==============================================================================

"""Exception hierarchy raised by the OctoPrint client."""

from __future__ import annotations


__all__ = [
    "Error",
    "HTTPError",
    "AuthenticationError",
    "BadRequestError",
    "NotFoundError",
    "ConflictError",
    "UnsupportedMediaTypeError",
    "InternalServerError",
    "UnknownError",
    "MissingCredentialsError",
    "ClientNotConfiguredError",
    "MalformedResponseError",
    "error_for_status",
]


class Error(Exception):
    """Base class for every error raised by this package."""


class HTTPError(Error):
    """The server answered with an error status."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class AuthenticationError(HTTPError):
    """The API key is missing, invalid or lacks the required permission (401, 403)."""


class BadRequestError(HTTPError):
    """The request could not be processed because of invalid input (400)."""


class NotFoundError(HTTPError):
    """The requested resource does not exist (404)."""


class ConflictError(HTTPError):
    """The request conflicts with the printer's current state (409)."""


class UnsupportedMediaTypeError(HTTPError):
    """The uploaded file type is not accepted (415)."""


class InternalServerError(HTTPError):
    """OctoPrint failed while handling the request (500)."""


class UnknownError(HTTPError):
    """Any other error status."""


class MissingCredentialsError(Error):
    """Host or API key was not provided."""

    def __init__(self, message: str = "Host and API key are required") -> None:
        super().__init__(message)


class ClientNotConfiguredError(Error, RuntimeError):
    """A resource was used before a client was configured."""

    def __init__(self, message: str = "No client configured") -> None:
        super().__init__(message)


class MalformedResponseError(Error, ValueError):
    """The response body is not valid JSON."""


_STATUS_ERRORS: dict[int, type[HTTPError]] = {
    400: BadRequestError,
    401: AuthenticationError,
    403: AuthenticationError,
    404: NotFoundError,
    409: ConflictError,
    415: UnsupportedMediaTypeError,
    500: InternalServerError,
}


def error_for_status(status_code: int, detail: str | None = None) -> HTTPError:
    """Build the exception matching ``status_code``.

    The message reads ``"[<status>] <detail>"`` with ``Unknown error`` standing
    in for a missing detail.
    """
    error_cls = _STATUS_ERRORS.get(status_code, UnknownError)
    return error_cls(f"[{status_code}] {detail or 'Unknown error'}", status_code=status_code)

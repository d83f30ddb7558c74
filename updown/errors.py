"""Exceptions raised by the updown client."""
from typing import Optional

import httpx

DEFAULT_ERROR_MESSAGE = "unknown error"


class UpdownError(Exception):
    """Base exception for everything raised by this library."""
    pass


class TransportError(UpdownError):
    """The request could not be built or sent."""
    pass


class RequestBuildError(TransportError):
    """The request path or payload is invalid."""
    pass


class ResponseDecodeError(TransportError):
    """A successful response body could not be decoded into the expected type."""
    pass


class APIError(UpdownError):
    """The API answered with a non-2xx status.

    Carries the original request, the full response, and the message the
    server supplied (or a generic one when the body had none).
    """

    def __init__(self, response: httpx.Response, message: str = DEFAULT_ERROR_MESSAGE):
        self.response = response
        self.message = message
        self.request: Optional[httpx.Request]
        try:
            self.request = response.request
        except RuntimeError:
            # Response built without a request, e.g. in tests
            self.request = None
        super().__init__(str(self))

    @property
    def status_code(self) -> int:
        return self.response.status_code

    def __str__(self) -> str:
        if self.request is None:
            return f"{self.status_code} {self.message}"
        return f"{self.request.method} {self.request.url}: {self.status_code} {self.message}"


class AuthError(APIError):
    """API key missing or rejected (401/403)."""
    pass


class NotFoundError(APIError):
    """Resource not found (404)."""
    pass


class ValidationError(APIError):
    """Invalid payload (400/422)."""
    pass


class RateLimitError(APIError):
    """Rate limited (429)."""
    pass


class NotDeletedError(UpdownError):
    """The API accepted a delete but reported the resource was not deleted."""

    def __init__(self, resource: str, response: Optional[httpx.Response] = None):
        super().__init__(f"{resource} couldn't be deleted")
        self.resource = resource
        self.response = response


class AliasNotFoundError(UpdownError, LookupError):
    """No check with the given alias exists in the latest check list."""

    def __init__(self, alias: str):
        super().__init__(f"no check found with alias {alias!r}")
        self.alias = alias


class CheckKindMismatchError(UpdownError):
    """A check was read back with a type the caller did not expect."""

    def __init__(self, token: str, kind: Optional[str], expected: tuple):
        super().__init__(f"check {token} is not a {'/'.join(expected)} check (type: {kind})")
        self.token = token
        self.kind = kind
        self.expected = expected


def error_for_status(status_code: int) -> type:
    """Pick the APIError subclass matching an HTTP status."""
    if status_code in (401, 403):
        return AuthError
    if status_code == 404:
        return NotFoundError
    if status_code in (400, 422):
        return ValidationError
    if status_code == 429:
        return RateLimitError
    return APIError

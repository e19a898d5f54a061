"""Exception hierarchy for httpauth.

All exceptions inherit from :class:`HttpAuthError`, which carries two
class-level attributes:

* ``status`` -- the HTTP status a server should answer with when the error
  was caused by a request (400 for malformed client input).
* ``exit_code`` -- the process exit code used by the CLI, taken from
  :mod:`httpauth.exit_codes`.

Subclass hierarchy::

    HttpAuthError (status 500, exit 1)
    +-- BadRequestError               (status 400, exit 3)
    |   +-- SchemeMismatchError
    |   +-- UnknownSchemeError
    |   +-- MalformedAuthorizationError
    |   +-- BadBase64Error
    |   +-- BadEncodingError
    |   +-- MissingSeparatorError
    +-- HeaderValueError              (status 500, exit 2)
    +-- ConfigError                   (status 500, exit 1)

A missing ``Authorization`` header is never an error: the decoders return
``None`` for that case.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from httpauth.exit_codes import (
    EXIT_BAD_CREDENTIALS,
    EXIT_GENERIC_FAILURE,
    EXIT_INVALID_USAGE,
)

if TYPE_CHECKING:
    from httpauth.auth.scheme import AuthenticationScheme


class HttpAuthError(Exception):
    """Base exception for all httpauth errors.

    Args:
        message: Human-readable diagnostic, safe to show to the client.
        status: Optional override for the class-level HTTP status.
        exit_code: Optional override for the class-level exit code.
    """

    status: int = 500
    exit_code: int = EXIT_GENERIC_FAILURE

    def __init__(
        self,
        message: str,
        status: Optional[int] = None,
        exit_code: Optional[int] = None,
    ):
        super().__init__(message)
        if status is not None:
            self.status = status
        if exit_code is not None:
            self.exit_code = exit_code

    @property
    def message(self) -> str:
        """The diagnostic text passed to the constructor."""
        return str(self)


class BadRequestError(HttpAuthError):
    """Raised when client-supplied authentication data is malformed."""

    status = 400
    exit_code = EXIT_BAD_CREDENTIALS


class SchemeMismatchError(BadRequestError):
    """Raised when an ``Authorization`` header uses a scheme other than the expected one.

    Args:
        scheme: The scheme actually found in the header.
        message: Optional diagnostic override.
    """

    def __init__(self, scheme: AuthenticationScheme, message: Optional[str] = None):
        super().__init__(message or f"Expected basic auth scheme found `{scheme}`")
        self.scheme = scheme


class UnknownSchemeError(BadRequestError):
    """Raised when the scheme token is not a recognised authentication scheme."""


class MalformedAuthorizationError(BadRequestError):
    """Raised when a header value does not have the ``<scheme> <params>`` shape."""


class BadBase64Error(BadRequestError):
    """Raised when the credentials are not valid standard Base64."""


class BadEncodingError(BadRequestError):
    """Raised when decoded credentials are not valid UTF-8."""


class MissingSeparatorError(BadRequestError):
    """Raised when decoded credentials contain no ``:`` between username and password."""


MissingPasswordError = MissingSeparatorError
"""Alias kept for the historical "missing password" diagnostic.

Splitting on the first colon can only fail by finding no colon at all, so
both names describe the same condition.
"""


class HeaderValueError(HttpAuthError):
    """Raised when a header value cannot be written (e.g. contains CR or LF)."""

    exit_code = EXIT_INVALID_USAGE


class ConfigError(HttpAuthError):
    """Raised for configuration problems (invalid JSON, bad credential sources)."""

    exit_code = EXIT_GENERIC_FAILURE

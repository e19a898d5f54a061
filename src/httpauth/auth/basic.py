"""HTTP Basic authentication (:rfc:`7617`).

This module provides :class:`BasicAuth`, a value holding a username and a
password. It converts in both directions:

* **Encoding** -- ``username:password`` is UTF-8 encoded, Base64 encoded,
  and sent as ``Authorization: Basic <encoded>``.
* **Decoding** -- the header (or a bare credentials string) is validated
  and split back into its two parts.

Decoding works on untrusted input, so every failure raises a
:class:`~httpauth.exceptions.BadRequestError` subclass with ``status`` 400.
The checks run in a fixed order: scheme, Base64, UTF-8, separator.

Example::

    import httpx
    from httpauth.auth import BasicAuth

    authz = BasicAuth("nori", "secret_fish!!")
    headers = httpx.Headers()
    authz.apply(headers)

    decoded = BasicAuth.from_headers(headers)
    assert decoded.username == "nori"
    assert decoded.password == "secret_fish!!"
"""

from __future__ import annotations

import logging
from typing import Any, Optional, Union

import httpx

from httpauth.auth.authorization import Authorization
from httpauth.auth.codec import STANDARD, Codec
from httpauth.auth.scheme import AuthenticationScheme
from httpauth.exceptions import (
    BadBase64Error,
    BadEncodingError,
    MissingSeparatorError,
    SchemeMismatchError,
)
from httpauth.headers import AUTHORIZATION, apply_header

logger = logging.getLogger(__name__)


class BasicAuth:
    """HTTP Basic credentials.

    The username and password are stored verbatim. No validation happens on
    construction: an empty username or password is legal, and a colon in the
    username is not escaped (it will be read back as part of the password).

    Args:
        username: The user identifier.
        password: The password; may contain colons.
    """

    __slots__ = ("_username", "_password")

    def __init__(self, username: str, password: str) -> None:
        self._username = username
        self._password = password

    @property
    def username(self) -> str:
        """The decoded username."""
        return self._username

    @property
    def password(self) -> str:
        """The decoded password."""
        return self._password

    # ------------------------------------------------------------------ #
    # Decoding
    # ------------------------------------------------------------------ #

    @classmethod
    def from_headers(
        cls,
        headers: Any,  # noqa: ANN401
        codec: Codec = STANDARD,
    ) -> Optional[BasicAuth]:
        """Read Basic credentials from the ``Authorization`` header.

        Args:
            headers: Anything accepted by :func:`~httpauth.headers.as_headers`
                (an :class:`httpx.Headers`, request, response, mapping...).
            codec: Codec used for Base64 and text decoding.

        Returns:
            The decoded credentials, or ``None`` when the request carries no
            ``Authorization`` header at all.

        Raises:
            SchemeMismatchError: If the header uses a scheme other than Basic.
            BadRequestError: For any other malformed header; see
                :meth:`from_credentials`.
        """
        auth = Authorization.from_headers(headers)
        if auth is None:
            return None

        if auth.scheme is not AuthenticationScheme.BASIC:
            logger.debug("Rejected Authorization header with scheme %s", auth.scheme)
            raise SchemeMismatchError(auth.scheme)

        return cls.from_credentials(auth.credentials, codec=codec)

    @classmethod
    def from_credentials(
        cls, credentials: Union[str, bytes], codec: Codec = STANDARD
    ) -> BasicAuth:
        """Decode a Base64 ``username:password`` credentials string.

        The decoded text is split on the first colon only; later colons are
        part of the password.

        Args:
            credentials: The Base64 payload that follows ``Basic `` in the
                header.
            codec: Codec used for Base64 and text decoding.

        Returns:
            A new :class:`BasicAuth`.

        Raises:
            BadBase64Error: If *credentials* is not valid standard Base64.
            BadEncodingError: If the decoded bytes are not valid UTF-8.
            MissingSeparatorError: If the decoded text contains no colon.
        """
        if isinstance(credentials, str):
            try:
                credentials = credentials.encode("ascii")
            except UnicodeEncodeError as exc:
                raise BadBase64Error(
                    "Basic auth credentials are not valid base64"
                ) from exc

        try:
            raw = codec.b64decode(credentials)
        except ValueError as exc:
            logger.debug("Basic auth credentials failed base64 decoding")
            raise BadBase64Error("Basic auth credentials are not valid base64") from exc

        try:
            text = codec.decode_text(raw)
        except ValueError as exc:
            logger.debug("Basic auth credentials failed UTF-8 decoding")
            raise BadEncodingError("Basic auth credentials are not valid UTF-8") from exc

        username, sep, password = text.partition(":")
        if not sep:
            raise MissingSeparatorError("Expected basic auth to contain a password")

        return cls(username, password)

    # ------------------------------------------------------------------ #
    # Encoding
    # ------------------------------------------------------------------ #

    def encode_credentials(self, codec: Codec = STANDARD) -> str:
        """Return the Base64 credentials string, without the scheme."""
        plain = codec.encode_text(f"{self._username}:{self._password}")
        return codec.b64encode(plain).decode("ascii")

    def to_authorization(self, codec: Codec = STANDARD) -> Authorization:
        """Return the generic :class:`~httpauth.auth.Authorization` form."""
        return Authorization(
            scheme=AuthenticationScheme.BASIC,
            credentials=self.encode_credentials(codec),
        )

    def header_name(self) -> str:
        return AUTHORIZATION

    def header_value(self) -> str:
        """Return ``"Basic <base64(username:password)>"``."""
        return self.to_authorization().header_value()

    def apply(self, headers: httpx.Headers) -> None:
        """Write the ``Authorization`` header into *headers*, replacing any existing one."""
        apply_header(self, headers)

    # ------------------------------------------------------------------ #
    # Value semantics
    # ------------------------------------------------------------------ #

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BasicAuth):
            return NotImplemented
        return (self._username, self._password) == (other._username, other._password)

    def __hash__(self) -> int:
        return hash((self._username, self._password))

    def __repr__(self) -> str:
        return f"BasicAuth(username={self._username!r}, password='***')"

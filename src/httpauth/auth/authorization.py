"""The generic ``Authorization`` header: ``<scheme> <credentials>``.

:class:`Authorization` knows nothing about what the credentials mean; it only
splits a header value into a scheme token and an opaque credentials string,
and joins them back. Scheme-specific types such as
:class:`~httpauth.auth.basic.BasicAuth` build on top of it.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict

from httpauth.auth.scheme import AuthenticationScheme
from httpauth.exceptions import MalformedAuthorizationError
from httpauth.headers import AUTHORIZATION, as_headers

logger = logging.getLogger(__name__)


class Authorization(BaseModel):
    """Credentials to authenticate a user agent with a server.

    Example::

        auth = Authorization(scheme=AuthenticationScheme.BEARER, credentials="abc123")
        assert auth.header_value() == "Bearer abc123"
    """

    model_config = ConfigDict(frozen=True)

    scheme: AuthenticationScheme
    credentials: str

    @classmethod
    def from_headers(cls, headers: Any) -> Optional[Authorization]:  # noqa: ANN401
        """Parse the ``Authorization`` header out of a header collection.

        When the header occurs more than once the last value wins.

        Args:
            headers: Anything accepted by :func:`~httpauth.headers.as_headers`.

        Returns:
            The parsed value, or ``None`` when no ``Authorization`` header is
            present.

        Raises:
            MalformedAuthorizationError: If the value has no space between
                scheme and credentials.
            UnknownSchemeError: If the scheme token is not recognised.
        """
        values = as_headers(headers).get_list(AUTHORIZATION)
        if not values:
            return None

        scheme_token, sep, credentials = values[-1].partition(" ")
        if not scheme_token:
            raise MalformedAuthorizationError("Could not find scheme")
        if not sep:
            raise MalformedAuthorizationError("Could not find credentials")

        scheme = AuthenticationScheme.parse(scheme_token)
        logger.debug("Parsed Authorization header with scheme %s", scheme)
        return cls(scheme=scheme, credentials=credentials)

    def header_name(self) -> str:
        return AUTHORIZATION

    def header_value(self) -> str:
        return f"{self.scheme} {self.credentials}"

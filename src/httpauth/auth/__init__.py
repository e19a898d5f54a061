"""Typed authentication headers.

The main entry points are:

- :class:`BasicAuth` -- HTTP Basic credentials (:rfc:`7617`), encoded to and
  decoded from the ``Authorization`` header.
- :class:`Authorization` -- the generic ``<scheme> <credentials>`` header.
- :class:`WwwAuthenticate` -- the server's authentication challenge.
- :class:`AuthenticationScheme` -- the registered scheme tokens.

Typical usage::

    from httpauth.auth import BasicAuth

    authz = BasicAuth.from_headers(request.headers)
    if authz is None:
        ...  # no credentials supplied: answer 401 with a challenge
"""

from httpauth.auth.authorization import Authorization
from httpauth.auth.basic import BasicAuth
from httpauth.auth.codec import STANDARD, Codec, StandardCodec
from httpauth.auth.scheme import AuthenticationScheme
from httpauth.auth.www_authenticate import WwwAuthenticate

__all__ = [
    "AuthenticationScheme",
    "Authorization",
    "BasicAuth",
    "Codec",
    "STANDARD",
    "StandardCodec",
    "WwwAuthenticate",
]

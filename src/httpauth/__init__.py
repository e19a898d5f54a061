"""httpauth -- typed HTTP authentication headers.

Encodes a username/password pair into an ``Authorization: Basic`` header
(:rfc:`7617`) and decodes/validates such headers from untrusted peers,
raising typed 400-class errors for malformed input. Header collections are
:class:`httpx.Headers`.

Typical usage::

    from httpauth import BasicAuth

    authz = BasicAuth("nori", "secret_fish!!")
    authz.header_value()            # 'Basic bm9yaTpzZWNyZXRfZmlzaCEh'
    BasicAuth.from_headers(request.headers)

Modules:
    auth: BasicAuth, Authorization, WwwAuthenticate, AuthenticationScheme.
    headers: The ``Header`` capability and header collection helpers.
    client: httpx ``Auth`` adapter.
    exceptions: Exception hierarchy with HTTP status and exit-code mapping.
    app: Typer CLI entry point.
"""

__version__ = "0.1.0"

from httpauth.auth import (  # noqa: E402
    AuthenticationScheme,
    Authorization,
    BasicAuth,
    WwwAuthenticate,
)
from httpauth.exceptions import (  # noqa: E402
    BadBase64Error,
    BadEncodingError,
    BadRequestError,
    HttpAuthError,
    MissingPasswordError,
    MissingSeparatorError,
    SchemeMismatchError,
)
from httpauth.headers import Header, apply_header  # noqa: E402

__all__ = [
    "AuthenticationScheme",
    "Authorization",
    "BadBase64Error",
    "BadEncodingError",
    "BadRequestError",
    "BasicAuth",
    "Header",
    "HttpAuthError",
    "MissingPasswordError",
    "MissingSeparatorError",
    "SchemeMismatchError",
    "WwwAuthenticate",
    "__version__",
    "apply_header",
]

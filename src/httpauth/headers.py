"""Header collection helpers and the :class:`Header` capability.

httpauth does not define its own header map: every operation reads from and
writes into an :class:`httpx.Headers` instance, which is already ordered,
multi-valued, and case-insensitive on names.

Anything that knows its own header name and how to serialise its value
satisfies the :class:`Header` protocol -- :class:`~httpauth.auth.BasicAuth`,
:class:`~httpauth.auth.Authorization` and
:class:`~httpauth.auth.WwwAuthenticate` all do, without sharing a base class.
:func:`apply_header` writes such a value into a collection.

Example::

    headers = httpx.Headers()
    apply_header(BasicAuth("nori", "secret_fish!!"), headers)
    assert headers["authorization"] == "Basic bm9yaTpzZWNyZXRfZmlzaCEh"
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

import httpx

from httpauth.exceptions import HeaderValueError

AUTHORIZATION = "Authorization"
"""Request header carrying client credentials (:rfc:`7235#section-4.2`)."""

WWW_AUTHENTICATE = "WWW-Authenticate"
"""Response header carrying an authentication challenge (:rfc:`7235#section-4.1`)."""

PROXY_AUTHORIZATION = "Proxy-Authorization"
"""Request header carrying credentials for a proxy (:rfc:`7235#section-4.4`)."""

_FORBIDDEN_VALUE_CHARS = ("\r", "\n", "\x00")


@runtime_checkable
class Header(Protocol):
    """A typed header value that knows its own name."""

    def header_name(self) -> str:
        """Return the header field name, e.g. ``"Authorization"``."""
        ...

    def header_value(self) -> str:
        """Return the serialised header field value."""
        ...


def as_headers(source: Any) -> httpx.Headers:  # noqa: ANN401
    """Return *source* as an :class:`httpx.Headers` collection.

    Accepts an existing collection (returned as-is), an
    :class:`httpx.Request` or :class:`httpx.Response` (their ``headers``),
    or anything :class:`httpx.Headers` can be built from -- a mapping or a
    list of ``(name, value)`` pairs. New collections decode values as UTF-8.
    """
    if isinstance(source, httpx.Headers):
        return source
    if isinstance(source, (httpx.Request, httpx.Response)):
        return source.headers
    return httpx.Headers(source, encoding="utf-8")


def validate_header_value(value: str) -> str:
    """Check that *value* can be sent as a single header line.

    Raises:
        HeaderValueError: If *value* contains CR, LF or NUL.
    """
    if any(ch in value for ch in _FORBIDDEN_VALUE_CHARS):
        raise HeaderValueError(
            "Header values must not contain line terminators or NUL characters"
        )
    return value


def apply_header(header: Header, headers: httpx.Headers) -> None:
    """Insert *header* into *headers*, replacing any existing values for its name.

    Args:
        header: Any object satisfying the :class:`Header` protocol.
        headers: The collection to write into.

    Raises:
        HeaderValueError: If the serialised value is not a valid header value.
    """
    headers[header.header_name()] = validate_header_value(header.header_value())

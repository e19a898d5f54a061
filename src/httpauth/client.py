"""httpx integration.

:class:`HeaderAuth` plugs any :class:`~httpauth.headers.Header` into
:class:`httpx.Client` / :class:`httpx.AsyncClient` so the header is written
into every outgoing request::

    with httpx.Client(auth=HeaderAuth(BasicAuth("nori", "secret_fish!!"))) as client:
        client.get("https://example.com/private")
"""

from __future__ import annotations

from typing import Generator

import httpx

from httpauth.headers import Header, apply_header


class HeaderAuth(httpx.Auth):
    """Apply a typed header to each request.

    Args:
        header: Any object satisfying the :class:`~httpauth.headers.Header`
            protocol, e.g. :class:`~httpauth.auth.BasicAuth`.
    """

    def __init__(self, header: Header) -> None:
        self._header = header

    def auth_flow(self, request: httpx.Request) -> Generator[httpx.Request, httpx.Response, None]:
        apply_header(self._header, request.headers)
        yield request

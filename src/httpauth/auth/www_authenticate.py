"""The ``WWW-Authenticate`` challenge a server sends with a 401 response."""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict

from httpauth.auth.scheme import AuthenticationScheme
from httpauth.exceptions import MalformedAuthorizationError
from httpauth.headers import WWW_AUTHENTICATE, as_headers


class WwwAuthenticate(BaseModel):
    """Define the authentication method that should be used to access a resource.

    Serialises as ``<Scheme> realm="<realm>", charset="UTF-8"``; the
    ``charset`` parameter tells Basic clients to send UTF-8 credentials
    (:rfc:`7617#section-2.1`). The realm is written as a quoted-string, so
    ``"`` and ``\\`` inside it are backslash-escaped.

    Example::

        challenge = WwwAuthenticate(scheme=AuthenticationScheme.BASIC, realm="admin")
        assert challenge.header_value() == 'Basic realm="admin", charset="UTF-8"'
    """

    model_config = ConfigDict(frozen=True)

    scheme: AuthenticationScheme
    realm: str

    @classmethod
    def from_headers(cls, headers: Any) -> Optional[WwwAuthenticate]:  # noqa: ANN401
        """Parse the ``WWW-Authenticate`` header out of a header collection.

        Only the ``realm`` parameter is read; others are ignored.

        Returns:
            The parsed challenge, or ``None`` when the header is absent.

        Raises:
            MalformedAuthorizationError: If the scheme or realm is missing, or
                a quoted value has no closing quote.
            UnknownSchemeError: If the scheme token is not recognised.
        """
        values = as_headers(headers).get_list(WWW_AUTHENTICATE)
        if not values:
            return None

        scheme_token, sep, params = values[-1].partition(" ")
        if not scheme_token:
            raise MalformedAuthorizationError("Could not find scheme")
        if not sep:
            raise MalformedAuthorizationError("Expected a realm")
        scheme = AuthenticationScheme.parse(scheme_token)

        realm = _parse_params(params).get("realm")
        if realm is None:
            raise MalformedAuthorizationError("Expected a realm")
        return cls(scheme=scheme, realm=realm)

    def header_name(self) -> str:
        return WWW_AUTHENTICATE

    def header_value(self) -> str:
        return f'{self.scheme} realm="{_quote(self.realm)}", charset="UTF-8"'


def _quote(value: str) -> str:
    return value.replace("\\", "\\\\").replace('"', '\\"')


def _parse_params(text: str) -> dict[str, str]:
    """Split ``name=value, name="quoted, value"`` into a dict of lowercased names.

    Quoted values may contain commas and ``\\``-escaped characters. Items
    without ``=`` are skipped; the first occurrence of a name wins.
    """
    params: dict[str, str] = {}
    pos, end = 0, len(text)

    while pos < end:
        while pos < end and text[pos] in " \t,":
            pos += 1
        if pos >= end:
            break

        eq = text.find("=", pos)
        comma = text.find(",", pos)
        if eq == -1 or (comma != -1 and comma < eq):
            pos = end if comma == -1 else comma
            continue

        name = text[pos:eq].strip().lower()
        pos = eq + 1
        while pos < end and text[pos] in " \t":
            pos += 1

        if pos < end and text[pos] == '"':
            value, pos = _read_quoted(text, pos + 1)
            comma = text.find(",", pos)
            pos = end if comma == -1 else comma
        else:
            comma = text.find(",", pos)
            stop = end if comma == -1 else comma
            value = text[pos:stop].strip()
            pos = stop

        params.setdefault(name, value)

    return params


def _read_quoted(text: str, pos: int) -> tuple[str, int]:
    """Read a quoted-string body starting after its opening quote.

    Returns the unescaped value and the index just past the closing quote.
    """
    chars = []
    end = len(text)
    while pos < end:
        ch = text[pos]
        if ch == '"':
            return "".join(chars), pos + 1
        if ch == "\\" and pos + 1 < end:
            pos += 1
            ch = text[pos]
        chars.append(ch)
        pos += 1
    raise MalformedAuthorizationError("Expected a closing quote")

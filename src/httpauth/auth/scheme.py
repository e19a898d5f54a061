"""Authentication scheme tokens (:rfc:`7235`, IANA registry)."""

from __future__ import annotations

from enum import Enum

from httpauth.exceptions import UnknownSchemeError


class AuthenticationScheme(str, Enum):
    """The leading token of an ``Authorization`` or ``WWW-Authenticate`` value.

    ``str(scheme)`` returns the canonical spelling used when serialising.
    :meth:`parse` accepts any letter case, since scheme tokens are
    case-insensitive on the wire.
    """

    BASIC = "Basic"
    BEARER = "Bearer"
    DIGEST = "Digest"
    HOBA = "HOBA"
    MUTUAL = "Mutual"
    NEGOTIATE = "Negotiate"
    OAUTH = "OAuth"
    SCRAM_SHA_1 = "SCRAM-SHA-1"
    SCRAM_SHA_256 = "SCRAM-SHA-256"
    VAPID = "vapid"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, text: str) -> AuthenticationScheme:
        """Parse a scheme token, ignoring case.

        Raises:
            UnknownSchemeError: If *text* is not a registered scheme.
        """
        lowered = text.lower()
        for scheme in cls:
            if scheme.value.lower() == lowered:
                return scheme
        raise UnknownSchemeError(f"`{text}` is not a recognized authentication scheme")

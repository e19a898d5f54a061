"""Byte/text codecs used to (de)serialise credentials.

:class:`~httpauth.auth.basic.BasicAuth` never calls :mod:`base64` directly;
it goes through a :class:`Codec`, so tests (or callers with unusual needs)
can inject their own implementation. Codec methods are pure functions that
signal bad input with :class:`ValueError` (``binascii.Error`` and
``UnicodeDecodeError`` are both subclasses); mapping those onto
:mod:`httpauth.exceptions` is the caller's job.
"""

from __future__ import annotations

import base64
from typing import Protocol


class Codec(Protocol):
    """Base64 and text encoding primitives."""

    def b64encode(self, data: bytes) -> bytes:
        ...

    def b64decode(self, data: bytes) -> bytes:
        """Decode *data*, raising :class:`ValueError` if it is not valid Base64."""
        ...

    def encode_text(self, text: str) -> bytes:
        ...

    def decode_text(self, data: bytes) -> str:
        """Decode *data*, raising :class:`ValueError` if it is not valid text."""
        ...


class StandardCodec:
    """Standard-alphabet Base64 (:rfc:`4648#section-4`) over UTF-8 text.

    Decoding is strict: padding is required, characters outside the
    alphabet (whitespace and line breaks included) are rejected, and so is
    input whose unused trailing bits are not zero, so each credential pair
    has exactly one accepted encoding.
    """

    def b64encode(self, data: bytes) -> bytes:
        return base64.b64encode(data)

    def b64decode(self, data: bytes) -> bytes:
        decoded = base64.b64decode(data, validate=True)
        if base64.b64encode(decoded) != data:
            raise ValueError("Non-canonical base64 encoding")
        return decoded

    def encode_text(self, text: str) -> bytes:
        return text.encode("utf-8")

    def decode_text(self, data: bytes) -> str:
        return data.decode("utf-8")


STANDARD = StandardCodec()
"""The default codec instance."""

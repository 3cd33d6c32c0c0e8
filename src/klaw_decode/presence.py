"""Decoders for values that may be absent: ``maybe`` and ``nullable``.

The two overlap but differ in what they forgive:

    maybe(string).decode_any('foo')     # Ok(Some('foo'))
    maybe(string).decode_any(None)      # Ok(Nothing)
    maybe(string).decode_any(42)        # Ok(Nothing)

    nullable(string).decode_any('foo')  # Ok(Some('foo'))
    nullable(string).decode_any(None)   # Ok(Nothing)
    nullable(string).decode_any(42)     # Err(...)
"""

from __future__ import annotations

from typing import Any

from klaw_decode.core import Decoder
from klaw_decode.types.option import Nothing, Option, Some
from klaw_decode.types.result import Ok, Result

__all__ = ['maybe', 'nullable']


def maybe[A](decoder: Decoder[A]) -> Decoder[Option[A]]:
    """Make any decoder optional; the result never fails.

    Every failure becomes Nothing, whatever its cause, so a malformed value
    is indistinguishable from a missing one. Use ``nullable`` when malformed
    values should still be reported.
    """

    def decode(value: Any) -> Result[Option[A], str]:
        return decoder.decode_any(value).fold(
            lambda v: Ok(Some(v)),
            lambda _: Ok(Nothing),
        )

    return Decoder(decode)


def nullable[A](decoder: Decoder[A]) -> Decoder[Option[A]]:
    """Decode None as Nothing and anything else with ``decoder``."""

    def decode(value: Any) -> Result[Option[A], str]:
        if value is None:
            return Ok(Nothing)
        return decoder.decode_any(value).map(Some)

    return Decoder(decode)

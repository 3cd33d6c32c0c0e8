"""Leaf decoders for scalar JSON values and constants."""

from __future__ import annotations

from typing import Any

from klaw_decode.core import Decoder
from klaw_decode.types.result import Err, Ok, Result
from klaw_decode.utils import safe_stringify

__all__ = [
    'boolean',
    'eql',
    'fail',
    'number',
    'string',
    'string_literal',
    'succeed',
]


def succeed[A](value: A) -> Decoder[A]:
    """Return a decoder that ignores its input and always yields ``value``."""
    return Decoder(lambda _: Ok(value))


def fail(message: str) -> Decoder[Any]:
    """Return a decoder that ignores its input and always fails with ``message``."""
    return Decoder(lambda _: Err(message))


def _decode_string(value: Any) -> Result[str, str]:
    if not isinstance(value, str):
        return Err(f'I expected to find a string but instead I found {safe_stringify(value)}')
    return Ok(value)


def _decode_number(value: Any) -> Result[int | float, str]:
    # bool is a subclass of int but is not a JSON number
    if isinstance(value, bool) or not isinstance(value, int | float):
        return Err(f'I expected to find a number but instead I found {safe_stringify(value)}')
    return Ok(value)


def _decode_boolean(value: Any) -> Result[bool, str]:
    if not isinstance(value, bool):
        return Err(f'I expected to find a boolean but instead found {safe_stringify(value)}')
    return Ok(value)


string: Decoder[str] = Decoder(_decode_string)
"""Decodes a ``str``."""

number: Decoder[int | float] = Decoder(_decode_number)
"""Decodes an ``int`` or ``float`` (never a ``bool``)."""

boolean: Decoder[bool] = Decoder(_decode_boolean)
"""Decodes a ``bool``."""


def eql[T](expected: T) -> Decoder[T]:
    """Return a decoder that succeeds only when the input equals ``expected``.

    Booleans never match numbers, so ``eql(1)`` rejects ``True``. In the
    error message a string ``expected`` is shown bare and anything else as
    JSON.

    Examples:
        >>> eql(3).decode_any(3)
        Ok(value=3)
        >>> eql('user').decode_any('admin')
        Err(error='Expected user but got "admin"')
        >>> eql(None).decode_any(0)
        Err(error='Expected null but got 0')
    """
    shown = expected if isinstance(expected, str) else safe_stringify(expected)

    def decode(value: Any) -> Result[T, str]:
        if value == expected and isinstance(value, bool) == isinstance(expected, bool):
            return Ok(value)
        return Err(f'Expected {shown} but got {safe_stringify(value)}')

    return Decoder(decode)


def string_literal[T: str](expected: T) -> Decoder[T]:
    """Return a decoder that only accepts the string ``expected``."""
    return eql(expected)

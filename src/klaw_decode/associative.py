"""Decoders for objects used as associative arrays (arbitrary keys).

Prefer ``field`` and ``create_decoder_from_structure`` when the keys are known
in advance; these decoders are for lookups keyed by data.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from klaw_decode.core import Decoder
from klaw_decode.types.result import Err, Ok, Result, collect
from klaw_decode.utils import safe_stringify

__all__ = ['dict_', 'key_value_pairs', 'object_of']


def key_value_pairs[A](decoder: Decoder[A]) -> Decoder[list[tuple[str, A]]]:
    """Decode every value of a mapping into ``(key, value)`` pairs.

    Pairs keep the mapping's iteration order. Decoding stops at the first
    value that fails.
    """

    def decode(value: Any) -> Result[list[tuple[str, A]], str]:
        if not isinstance(value, Mapping):
            return Err(f"Expected to find an object and instead found '{safe_stringify(value)}'")
        return collect(
            decoder.decode_any(item)
            .map_err(lambda e, key=key: f"Key '{key}' failed to decode: {e}")
            .map(lambda v, key=key: (key, v))
            for key, item in value.items()
        )

    return Decoder(decode)


def dict_[A](decoder: Decoder[A]) -> Decoder[dict[str, A]]:
    """Decode every value of a mapping into a new dict.

    Same acceptance rules and messages as ``key_value_pairs``; when a key
    occurs twice the last value wins.
    """
    return key_value_pairs(decoder).map(dict)


def object_of[A](decoder: Decoder[A]) -> Decoder[dict[str, A]]:
    """Decode a mapping whose values all share one type.

    Unlike ``dict_`` the failure message names the offending key and its raw
    value but does not include the inner decoder's message.
    """

    def decode(value: Any) -> Result[dict[str, A], str]:
        if not isinstance(value, Mapping):
            return Err(f"I expected to find an object but instead found '{safe_stringify(value)}'")
        decoded: dict[str, A] = {}
        for key, item in value.items():
            result = decoder.decode_any(item)
            if isinstance(result, Err):
                return Err(
                    f'I expected the value for key "{key}" to be a valid value, '
                    f'but found: {safe_stringify(item)}'
                )
            decoded[key] = result.value
        return Ok(decoded)

    return Decoder(decode)

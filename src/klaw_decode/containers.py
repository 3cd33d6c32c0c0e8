"""Decoders that reach into arrays, object fields and nested paths.

These combinators short-circuit: the first failure is reported with the
position where it happened appended to the inner message, so a nested error
reads from the root cause outwards.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from klaw_decode.core import Decoder
from klaw_decode.types.result import Err, Result, collect
from klaw_decode.utils import safe_stringify

__all__ = ['array', 'at', 'field']

_MISSING: Any = object()


def array[A](decoder: Decoder[A]) -> Decoder[list[A]]:
    """Apply ``decoder`` to every element of a list or tuple.

    Stops at the first element that fails; later elements are not decoded.

    Example:
        ```python
        array(number).decode_any([1, 2])  # Ok(value=[1, 2])
        array(number).decode_any([1, "x", 3])  # Err: ...error found in an array at [1]
        ```
    """

    def decode(value: Any) -> Result[list[A], str]:
        if not isinstance(value, list | tuple):
            return Err(f'I expected an array but instead I found {safe_stringify(value)}')
        return collect(
            decoder.decode_any(element).map_err(
                lambda e, idx=idx: f'{e}:\nerror found in an array at [{idx}]'
            )
            for idx, element in enumerate(value)
        )

    return Decoder(decode)


def field[A](name: str, decoder: Decoder[A]) -> Decoder[A]:
    """Decode the value stored under ``name`` in a mapping.

    A missing key and a non-mapping input (including None) are reported with
    the same message.
    """

    def decode(value: Any) -> Result[A, str]:
        if not isinstance(value, Mapping) or name not in value:
            return Err(
                f"I expected to find an object with key '{name}' "
                f'but instead I found {safe_stringify(value)}'
            )
        return decoder.decode_any(value[name]).map_err(
            lambda e: f"{e}:\noccurred in a field named '{name}'"
        )

    return Decoder(decode)


def _step(value: Any, segment: str | int) -> Any:
    """Look up one path segment, returning ``_MISSING`` when it is absent.

    JSON object keys are always strings, so an integer segment that is not a
    key of a mapping is retried as its string form.
    """
    if isinstance(value, Mapping):
        found = value.get(segment, _MISSING)
        if found is _MISSING and isinstance(segment, int) and not isinstance(segment, bool):
            found = value.get(str(segment), _MISSING)
        return found
    if (
        isinstance(segment, int)
        and not isinstance(segment, bool)
        and isinstance(value, Sequence)
        and not isinstance(value, str | bytes)
        and 0 <= segment < len(value)
    ):
        return value[segment]
    return _MISSING


def at[A](path: Sequence[str | int], decoder: Decoder[A]) -> Decoder[A]:
    """Decode the value found by walking ``path`` from the input.

    String segments look up mapping keys, integer segments index lists (or
    look up the matching string key, as in ``{"0": ...}``). An
    explicit None along the way counts as found; descending into it does not.
    Failures of ``decoder`` itself propagate without extra context.

    Example:
        ```python
        at(["foo", 0, "bar"], number).decode_any({"foo": [{"bar": 42}]})  # Ok(value=42)
        ```
    """
    segments = list(path)

    def decode(value: Any) -> Result[A, str]:
        if value is None:
            return Err("I found an error. Could not apply 'at' path to an undefined or null value.")
        current = value
        for idx, segment in enumerate(segments):
            current = _step(current, segment)
            if current is _MISSING:
                return Err(
                    "I found an error in the 'at' path. I could not find path "
                    f"'{safe_stringify(segments[: idx + 1])}' in {safe_stringify(value)}"
                )
        return decoder.decode_any(current)

    return Decoder(decode)

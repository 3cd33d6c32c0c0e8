"""Decoder[A]: a composable, pure conversion from untrusted data to A.

A decoder wraps a single function ``value -> Result[A, str]``. Nothing happens
until ``decode_any`` or ``decode_json`` is called; the composition methods only
build new decoders around the existing one.

Example:
    ```python
    from klaw_decode import field, number, succeed

    point = (
        succeed({})
        .assign('x', field('x', number))
        .assign('y', field('y', number))
    )
    point.decode_json('{"x": 1, "y": 2}')  # Ok(value={'x': 1, 'y': 2})
    point.decode_json('{"x": 1}')  # Err(error="I expected to find an object with key 'y' ...")
    ```
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import msgspec

from klaw_decode.types.result import Err, Ok, Result

__all__ = ['Decoder', 'DecoderFn']

type DecoderFn[A] = Callable[[Any], Result[A, str]]


class Decoder[A](msgspec.Struct, frozen=True):
    """An immutable value that converts untrusted input into an A.

    Decoders are stateless and may be shared freely, including across threads.
    Every method returns a new decoder; the receiver is never modified.

    Attributes:
        fn: The wrapped function, returning Ok(value) or Err(message).
    """

    fn: DecoderFn[A]

    def decode_any(self, value: Any) -> Result[A, str]:
        """Run the decoder against an in-memory value."""
        return self.fn(value)

    def decode_json(self, json: str | bytes) -> Result[A, str]:
        """Parse JSON text and run the decoder on the parsed value.

        Parse errors, including bytes that are not valid UTF-8, are returned
        as an Err carrying the parser's message, exactly like any other
        decoding failure.
        """
        try:
            value = msgspec.json.decode(json)
        except (msgspec.DecodeError, UnicodeDecodeError) as exc:
            return Err(str(exc))
        return self.decode_any(value)

    def to_any_fn(self) -> Callable[[Any], Result[A, str]]:
        """Return a plain callback that runs this decoder over any value."""
        return self.decode_any

    def to_json_fn(self) -> Callable[[str | bytes], Result[A, str]]:
        """Return a plain callback that runs this decoder over JSON text."""
        return self.decode_json

    def map[B](self, f: Callable[[A], B]) -> Decoder[B]:
        """Transform the decoded value with a total function.

        Use ``and_then`` instead when the transformation can fail.
        """
        return Decoder(lambda value: self.fn(value).map(f))

    def and_then[B](self, f: Callable[[A], Decoder[B]]) -> Decoder[B]:
        """Chain a decoder chosen from the value decoded so far.

        The decoder returned by ``f`` runs against the original input, not
        against the decoded value. This is what lets several decoders pull
        different pieces out of the same object, or lets a version field
        pick the decoder for the rest of the payload.

        Args:
            f: Function from the decoded value to the next decoder.

        Returns:
            A decoder that fails with the first error encountered.
        """
        return Decoder(lambda value: self.fn(value).and_then(lambda a: f(a).decode_any(value)))

    def assign[B](
        self,
        key: str,
        other: Decoder[B] | Callable[[A], Decoder[B]],
    ) -> Decoder[dict[str, Any]]:
        """Decode one more value and add it to the scope under ``key``.

        The receiver must decode to a mapping (start a chain with
        ``succeed({})``). Each step produces a shallow copy of the scope with
        the new key added; assigning an existing key overwrites it.

        Args:
            key: Name under which the decoded value is stored.
            other: A decoder run against the original input, or a function
                receiving the scope so far and returning such a decoder.

        Returns:
            A decoder of the extended scope.

        Raises:
            TypeError: If ``other`` is neither a Decoder nor callable.

        Example:
            ```python
            area = (
                succeed({})
                .assign('width', field('w', number))
                .assign('height', field('h', number))
                .assign('area', lambda scope: succeed(scope['width'] * scope['height']))
            )
            ```
        """
        if isinstance(other, Decoder):
            decoder_for: Callable[[A], Decoder[B]] = lambda _scope: other  # noqa: E731
        elif callable(other):
            decoder_for = other
        else:
            msg = f'assign expects a Decoder or a callable returning one, got {type(other).__name__}'
            raise TypeError(msg)

        return self.and_then(
            lambda scope: decoder_for(scope).map(lambda b: {**scope, key: b})  # type: ignore[dict-item]
        )

    def or_else(self, f: Callable[[str], Decoder[A]]) -> Decoder[A]:
        """On failure, run a fallback decoder built from the error message.

        The fallback runs against the original input.
        """
        return Decoder(lambda value: self.fn(value).or_else(lambda e: f(e).decode_any(value)))

    def map_err(self, f: Callable[[str], str]) -> Decoder[A]:
        """Transform the error message; successful values pass through."""
        return Decoder(lambda value: self.fn(value).map_err(f))

    def ap[B](self: Decoder[Callable[[Any], B]], decoder: Decoder[Any]) -> Decoder[B]:
        """Apply a decoded function to the value decoded by ``decoder``.

        Both decoders run against the same input.
        """
        return Decoder(
            lambda value: self.fn(value).and_then(lambda g: decoder.decode_any(value).map(g))
        )

    def do(self, f: Callable[[A], Any]) -> Decoder[A]:
        """Call ``f`` with the decoded value for its side effect.

        The result is returned unchanged. Intended for diagnostics.
        """

        def observe(value: Any) -> Result[A, str]:
            result = self.fn(value)
            if isinstance(result, Ok):
                f(result.value)
            return result

        return Decoder(observe)

    def else_do(self, f: Callable[[str], Any]) -> Decoder[A]:
        """Call ``f`` with the error message for its side effect.

        The result is returned unchanged. Intended for diagnostics.
        """

        def observe(value: Any) -> Result[A, str]:
            result = self.fn(value)
            if isinstance(result, Err):
                f(result.error)
            return result

        return Decoder(observe)

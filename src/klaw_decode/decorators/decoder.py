"""@decoder: build a Decoder from a plain conversion function."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, overload

import wrapt

from klaw_decode.core import Decoder
from klaw_decode.types.result import Err, Ok, Result

__all__ = ['DEFAULT_EXCEPTIONS', 'decoder']

DEFAULT_EXCEPTIONS: tuple[type[Exception], ...] = (ValueError, TypeError, KeyError, IndexError)
"""Exceptions turned into decode failures when no ``exceptions`` are given."""


@overload
def decoder[T](func: Callable[[Any], T | Result[T, str]]) -> Decoder[T]: ...


@overload
def decoder[T](
    func: None = None,
    *,
    exceptions: tuple[type[BaseException], ...] | None = None,
) -> Callable[[Callable[[Any], T | Result[T, str]]], Decoder[T]]: ...


def decoder(
    func: Callable[[Any], Any] | None = None,
    *,
    exceptions: tuple[type[BaseException], ...] | None = None,
) -> Any:
    """Decorator that turns a one-argument function into a Decoder.

    The function receives the raw input. A plain return value becomes
    ``Ok(value)``; a returned ``Ok``/``Err`` is used as-is; one of the listed
    exceptions becomes ``Err(str(exc))``. Other exceptions propagate.

    Can be used with or without arguments:
        @decoder
        def port(value): ...

        @decoder(exceptions=(ValueError,))
        def port(value): ...

    Args:
        func: The function to wrap (when used without parentheses).
        exceptions: Exception types to convert. Defaults to ``DEFAULT_EXCEPTIONS``.

    Returns:
        A Decoder running the function.

    Example:
        ```python
        @decoder
        def port(value):
            number = int(value)
            if not 0 < number < 65536:
                return Err(f'{number} is not a valid port')
            return number

        port.decode_any('8080')  # Ok(value=8080)
        port.decode_any('http')  # Err(error="invalid literal for int() with base 10: 'http'")
        ```
    """
    catch = exceptions if exceptions is not None else DEFAULT_EXCEPTIONS

    @wrapt.decorator
    def wrapper(
        wrapped: Callable[[Any], Any],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Result[Any, str]:
        try:
            result = wrapped(*args, **kwargs)
        except catch as e:
            return Err(str(e))
        if isinstance(result, Ok | Err):
            return result
        return Ok(result)

    def build(target: Callable[[Any], Any]) -> Decoder[Any]:
        return Decoder(wrapper(target))

    if func is not None:
        return build(func)
    return build

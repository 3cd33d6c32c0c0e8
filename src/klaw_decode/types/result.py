"""Result type: Ok[T] | Err[E], the outcome of every decode."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING, NoReturn, TypeIs

import msgspec

if TYPE_CHECKING:
    from klaw_decode.types.option import Option

__all__ = ['Err', 'Ok', 'Result', 'collect']


class Ok[T](msgspec.Struct, frozen=True, gc=False):
    """Success variant of Result containing a decoded value of type T.

    Examples:
        >>> Ok(42).map(lambda x: x * 2)
        Ok(value=84)
        >>> Ok('a').fold(str.upper, len)
        'A'
    """

    value: T

    def is_ok(self) -> TypeIs[Ok[T]]:
        """Return True since this is Ok."""
        return True

    def is_err(self) -> TypeIs[Err[object]]:
        """Return False since this is Ok."""
        return False

    def unwrap(self) -> T:
        """Return the contained value."""
        return self.value

    def unwrap_or(self, default: T) -> T:  # noqa: ARG002
        """Return the contained value, ignoring the default."""
        return self.value

    def unwrap_or_else(self, f: Callable[[], T]) -> T:  # noqa: ARG002
        """Return the contained value, ignoring the fallback function."""
        return self.value

    def expect(self, _msg: str) -> T:
        """Return the contained value, ignoring the message."""
        return self.value

    def map[U](self, f: Callable[[T], U]) -> Ok[U]:
        """Apply a function to the contained value."""
        return Ok(f(self.value))

    def map_err[F](self, _f: Callable[[object], F]) -> Ok[T]:
        """Return self unchanged since this is Ok."""
        return self

    def and_then[U, E](self, f: Callable[[T], Ok[U] | Err[E]]) -> Ok[U] | Err[E]:
        """Apply a function that returns a Result to the contained value.

        Args:
            f: Function that takes T and returns Result[U, E].

        Returns:
            The Result returned by f.
        """
        return f(self.value)

    def or_else[F](self, _f: Callable[[object], Ok[T] | Err[F]]) -> Ok[T]:
        """Return self unchanged since this is Ok."""
        return self

    def fold[U](self, on_ok: Callable[[T], U], on_err: Callable[[object], U]) -> U:  # noqa: ARG002
        """Collapse the Result into a single value by handling both variants.

        Args:
            on_ok: Called with the value when this is Ok.
            on_err: Called with the error when this is Err.

        Returns:
            The return value of on_ok.
        """
        return on_ok(self.value)

    def ok(self) -> Option[T]:
        """Convert to Option, returning Some(value)."""
        from klaw_decode.types.option import Some

        return Some(self.value)

    def err(self) -> Option[object]:
        """Convert to Option, returning Nothing since this is Ok."""
        from klaw_decode.types.option import Nothing

        return Nothing


class Err[E](msgspec.Struct, frozen=True, gc=False):
    """Error variant of Result containing an error of type E.

    Decoders always carry a human-readable message string here.

    Examples:
        >>> Err('boom').unwrap_or(0)
        0
        >>> Err('boom').map_err(str.upper)
        Err(error='BOOM')
    """

    error: E

    def is_ok(self) -> TypeIs[Ok[object]]:
        """Return False since this is Err."""
        return False

    def is_err(self) -> TypeIs[Err[E]]:
        """Return True since this is Err."""
        return True

    def unwrap(self) -> NoReturn:
        """Raise an exception since this is Err.

        Raises:
            RuntimeError: Always, since Err has no value to unwrap.
        """
        raise RuntimeError(f'Called unwrap on Err: {self.error!r}')

    def unwrap_or[T](self, default: T) -> T:
        """Return the default value since this is Err."""
        return default

    def unwrap_or_else[T](self, f: Callable[[], T]) -> T:
        """Compute and return a default value since this is Err."""
        return f()

    def expect(self, msg: str) -> NoReturn:
        """Raise an exception with a custom message.

        Raises:
            RuntimeError: Always, with the custom message and the error.
        """
        raise RuntimeError(f'{msg}: {self.error!r}')

    def map[T, U](self, _f: Callable[[T], U]) -> Err[E]:
        """Return self unchanged since this is Err."""
        return self

    def map_err[F](self, f: Callable[[E], F]) -> Err[F]:
        """Apply a function to the contained error."""
        return Err(f(self.error))

    def and_then[T, U](self, _f: Callable[[T], Ok[U] | Err[E]]) -> Err[E]:
        """Return self unchanged since this is Err."""
        return self

    def or_else[T, F](self, f: Callable[[E], Ok[T] | Err[F]]) -> Ok[T] | Err[F]:
        """Apply a recovery function to the error.

        Args:
            f: Function that takes the error and returns a new Result.

        Returns:
            The Result returned by f.
        """
        return f(self.error)

    def fold[T, U](self, on_ok: Callable[[T], U], on_err: Callable[[E], U]) -> U:  # noqa: ARG002
        """Collapse the Result into a single value by handling both variants."""
        return on_err(self.error)

    def ok(self) -> Option[object]:
        """Convert to Option, returning Nothing since this is Err."""
        from klaw_decode.types.option import Nothing

        return Nothing

    def err(self) -> Option[E]:
        """Convert to Option, returning Some(error)."""
        from klaw_decode.types.option import Some

        return Some(self.error)


type Result[T, E = str] = Ok[T] | Err[E]


def collect[T, E](results: Iterable[Ok[T] | Err[E]]) -> Ok[list[T]] | Err[E]:
    """Collect an iterable of Results into a Result of list.

    Short-circuits on the first Err encountered; when given a generator,
    no further items are pulled after that point.

    Examples:
        >>> collect([Ok(1), Ok(2), Ok(3)])
        Ok(value=[1, 2, 3])
        >>> collect([Ok(1), Err('fail'), Ok(3)])
        Err(error='fail')
    """
    values: list[T] = []
    for result in results:
        if isinstance(result, Err):
            return result
        values.append(result.value)
    return Ok(values)

"""@do decorator for generator-based do-notation over decoders."""

from __future__ import annotations

from collections.abc import Callable, Generator
from typing import Any

import wrapt

from klaw_decode.core import Decoder
from klaw_decode.types.result import Err, Ok, Result

__all__ = ['do']


def do[T](func: Callable[[], Generator[Any, Any, T]]) -> Decoder[T]:
    """Decorator for generator-based do-notation with decoders.

    The decorated generator function yields decoders. Each yielded decoder
    runs against the original input and its decoded value is sent back into
    the generator; the first failure short-circuits and becomes the result.
    The generator's return value is wrapped in Ok. Yielded ``Ok``/``Err``
    values are unwrapped the same way, anything else is sent back as-is.

    This reads like a chain of ``and_then`` calls without the nesting.

    Args:
        func: A generator function taking no arguments.

    Returns:
        A Decoder running the generator against each input.

    Example:
        ```python
        @do
        def user():
            name = yield field('name', string)
            age = yield field('age', number)
            if age < 0:
                yield fail(f'{name} has a negative age')
            return {'name': name, 'age': age}

        user.decode_any({'name': 'Ada', 'age': 36})
        # Ok(value={'name': 'Ada', 'age': 36})
        ```
    """

    @wrapt.decorator
    def wrapper(
        wrapped: Callable[[], Generator[Any, Any, T]],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Result[T, str]:
        (value,) = args
        gen = wrapped()
        try:
            step = next(gen)
            while True:
                outcome = step.decode_any(value) if isinstance(step, Decoder) else step
                if isinstance(outcome, Err):
                    gen.close()
                    return outcome
                sent = outcome.value if isinstance(outcome, Ok) else outcome
                step = gen.send(sent)
        except StopIteration as e:
            return Ok(e.value)

    return Decoder(wrapper(func))

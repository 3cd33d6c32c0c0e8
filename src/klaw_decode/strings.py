"""String pattern decoders."""

from __future__ import annotations

import re
from typing import Any

from klaw_decode.core import Decoder
from klaw_decode.types.result import Err, Ok, Result
from klaw_decode.utils import safe_stringify

__all__ = ['regex']


def regex(pattern: str | re.Pattern[str]) -> Decoder[re.Match[str]]:
    """Return a decoder for strings in which ``pattern`` can be found.

    The pattern is searched for anywhere in the string (anchor it with ``^``
    and ``$`` to require a full match). On success the ``re.Match`` is
    returned so capture groups stay accessible.

    Example:
        ```python
        version = regex(r'^v(\\d+)\\.(\\d+)$').map(lambda m: (int(m[1]), int(m[2])))
        version.decode_any('v1.2')  # Ok(value=(1, 2))
        ```
    """
    compiled = re.compile(pattern)

    def decode(value: Any) -> Result[re.Match[str], str]:
        if not isinstance(value, str):
            return Err(f'Expected a string, but received: {safe_stringify(value)}')
        match = compiled.search(value)
        if match is None:
            return Err(
                f'The string "{value}" does not match the regular expression: {compiled.pattern}'
            )
        return Ok(match)

    return Decoder(decode)

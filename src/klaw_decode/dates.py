"""Date decoders with three levels of strictness.

- ``date`` is permissive: any string ``dateutil`` understands, or a number of
  milliseconds since the Unix epoch.
- ``date_iso`` accepts ISO 8601 strings only, with or without a time.
- ``date_json`` accepts the RFC 3339 timestamps JSON APIs emit; a bare date
  without a time is rejected.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

import msgspec
from dateutil import parser as dateutil_parser

from klaw_decode.base import string
from klaw_decode.core import Decoder
from klaw_decode.types.result import Err, Ok, Result
from klaw_decode.utils import safe_stringify

__all__ = ['date', 'date_iso', 'date_json']


def _decode_date(value: Any) -> Result[datetime, str]:
    message = f'I expected a date but instead I found {safe_stringify(value)}'
    if isinstance(value, str):
        try:
            return Ok(dateutil_parser.parse(value))
        except (ValueError, OverflowError):
            return Err(message)
    if isinstance(value, int | float) and not isinstance(value, bool):
        try:
            return Ok(datetime.fromtimestamp(value / 1000, tz=UTC))
        except (ValueError, OverflowError, OSError):
            return Err(message)
    return Err(message)


def _parse_iso(text: str) -> Result[datetime, str]:
    try:
        return Ok(datetime.fromisoformat(text))
    except ValueError:
        return Err(f'I expected an ISO date but instead I found {safe_stringify(text)}')


def _parse_json_timestamp(text: str) -> Result[datetime, str]:
    try:
        return Ok(msgspec.convert(text, datetime))
    except msgspec.ValidationError:
        return Err(f'I expected an JSON date but instead I found {safe_stringify(text)}')


date: Decoder[datetime] = Decoder(_decode_date)
"""Decodes a permissively parsed date string or an epoch-milliseconds number."""

date_iso: Decoder[datetime] = Decoder(lambda value: string.decode_any(value).and_then(_parse_iso))
"""Decodes an ISO 8601 date or datetime string."""

date_json: Decoder[datetime] = Decoder(
    lambda value: string.decode_any(value).and_then(_parse_json_timestamp)
)
"""Decodes an RFC 3339 timestamp string; fractional seconds are optional."""

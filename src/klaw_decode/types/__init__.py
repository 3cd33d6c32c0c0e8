"""Core types: Result, Ok, Err, Option, Some, Nothing."""

from klaw_decode.types.option import Nothing, NothingType, Option, Some
from klaw_decode.types.result import Err, Ok, Result, collect

__all__ = [
    'Err',
    'Nothing',
    'NothingType',
    'Ok',
    'Option',
    'Result',
    'Some',
    'collect',
]

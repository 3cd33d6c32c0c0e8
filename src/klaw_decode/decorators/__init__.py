"""Decorators: @decoder and @do."""

from klaw_decode.decorators.decoder import DEFAULT_EXCEPTIONS, decoder
from klaw_decode.decorators.do import do

__all__ = [
    'DEFAULT_EXCEPTIONS',
    'decoder',
    'do',
]

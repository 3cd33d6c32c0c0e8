"""klaw-decode: composable, type-safe decoding of untrusted data.

Flat imports (preferred):
    from klaw_decode import Decoder, field, string, number, array, one_of
    from klaw_decode import Result, Ok, Err, Option, Some, Nothing

Submodule imports (for organization):
    from klaw_decode.containers import array, at, field
    from klaw_decode.structures import discriminated_union
    from klaw_decode.types import Result, Option
"""

# Types
from klaw_decode.types import (
    Err,
    Nothing,
    NothingType,
    Ok,
    Option,
    Result,
    Some,
    collect,
)

# Decoder
from klaw_decode.core import Decoder, DecoderFn

# Leaf decoders
from klaw_decode.base import boolean, eql, fail, number, string, string_literal, succeed
from klaw_decode.dates import date, date_iso, date_json
from klaw_decode.strings import regex

# Structural decoders
from klaw_decode.containers import array, at, field
from klaw_decode.associative import dict_, key_value_pairs, object_of
from klaw_decode.presence import maybe, nullable

# Unions and structures
from klaw_decode.structures import (
    Structure,
    create_decoder_from_structure,
    discriminated_union,
    one_of,
)

# Decorators
from klaw_decode.decorators import decoder, do

# Utilities
from klaw_decode.utils import CYCLICAL_REFERENCE, camel_case, identity, safe_stringify, snake_case

# Configuration and diagnostics
from klaw_decode._config import DecodeConfig, get_config, init
from klaw_decode._logging import (
    add_decode_hook,
    clear_decode_hooks,
    configure_logging,
    get_logger,
    remove_decode_hook,
)
from klaw_decode.debug import trace

__all__ = [
    'CYCLICAL_REFERENCE',
    'DecodeConfig',
    'Decoder',
    'DecoderFn',
    'Err',
    'Nothing',
    'NothingType',
    'Ok',
    'Option',
    'Result',
    'Some',
    'Structure',
    'add_decode_hook',
    'array',
    'at',
    'boolean',
    'camel_case',
    'clear_decode_hooks',
    'collect',
    'configure_logging',
    'create_decoder_from_structure',
    'date',
    'date_iso',
    'date_json',
    'decoder',
    'dict_',
    'discriminated_union',
    'do',
    'eql',
    'fail',
    'field',
    'get_config',
    'get_logger',
    'identity',
    'init',
    'key_value_pairs',
    'maybe',
    'nullable',
    'number',
    'object_of',
    'one_of',
    'regex',
    'remove_decode_hook',
    'safe_stringify',
    'snake_case',
    'string',
    'string_literal',
    'succeed',
    'trace',
]

"""Union and record combinators: one_of, discriminated_union, structures.

``one_of`` tries every alternative and reports all their failures together.
``discriminated_union`` reads a tag field first and runs exactly one variant,
which is both cheaper and gives a precise error. ``create_decoder_from_structure``
builds a record decoder from a nested mapping of decoders.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from typing import Any

from klaw_decode.base import string, succeed
from klaw_decode.containers import field
from klaw_decode.core import Decoder
from klaw_decode.types.result import Err, Ok, Result
from klaw_decode.utils import identity, safe_stringify

__all__ = [
    'Structure',
    'create_decoder_from_structure',
    'discriminated_union',
    'one_of',
]

type Structure = Mapping[str, Decoder[Any] | Structure]


def one_of[A](decoders: Sequence[Decoder[A]]) -> Decoder[A]:
    """Try every decoder against the same input.

    All decoders are run, even after one has succeeded, and the first
    success in list order is returned. If none succeeds the error lists
    every failure, one per line.
    """
    alternatives = list(decoders)

    def decode(value: Any) -> Result[A, str]:
        if not alternatives:
            return Err('No decoders specified.')

        results = [decoder.decode_any(value) for decoder in alternatives]
        for result in results:
            if isinstance(result, Ok):
                return result

        problems = '\n'.join(result.error for result in results if isinstance(result, Err))
        return Err(f'I found the following problems:\n{problems}')

    return Decoder(decode)


def create_decoder_from_structure(
    structure: Structure,
    key_to_lookup: Callable[[str], str] = identity,
) -> Decoder[dict[str, Any]]:
    """Build a record decoder from a (possibly nested) mapping of decoders.

    Each key of ``structure`` is read with ``field(key_to_lookup(key), ...)``
    and stored under the original key, so the output always mirrors the
    structure's shape. Nested mappings become nested record decoders using
    the same ``key_to_lookup``.

    Args:
        structure: Mapping whose values are decoders or nested structures.
        key_to_lookup: Maps an output key to the key read from the input.

    Returns:
        A decoder producing a dict with the structure's keys.

    Raises:
        TypeError: If a value in ``structure`` is neither a Decoder nor a mapping.

    Example:
        ```python
        user = create_decoder_from_structure(
            {'firstName': string, 'address': {'zipCode': string}},
            key_to_lookup=snake_case,
        )
        user.decode_any({'first_name': 'Ada', 'address': {'zip_code': '02139'}})
        # Ok(value={'firstName': 'Ada', 'address': {'zipCode': '02139'}})
        ```
    """
    decoder: Decoder[dict[str, Any]] = succeed({})
    for key, entry in structure.items():
        if isinstance(entry, Decoder):
            inner: Decoder[Any] = entry
        elif isinstance(entry, Mapping):
            inner = create_decoder_from_structure(entry, key_to_lookup)
        else:
            msg = f"Structure entry '{key}' must be a Decoder or a mapping, got {type(entry).__name__}"
            raise TypeError(msg)
        decoder = decoder.assign(key, field(key_to_lookup(key), inner))
    return decoder


def discriminated_union[A](
    discriminator_field: str,
    mapping: Mapping[str, Decoder[A]],
) -> Decoder[A]:
    """Decode a tagged union by dispatching on a discriminator field.

    The discriminator is read as a string; the matching variant decoder is
    then run against the whole input, so variants typically re-check the tag
    with ``string_literal``. Only the selected variant ever runs.

    Example:
        ```python
        shape = discriminated_union('kind', {
            'circle': create_decoder_from_structure({'kind': string_literal('circle'), 'r': number}),
            'square': create_decoder_from_structure({'kind': string_literal('square'), 'side': number}),
        })
        shape.decode_any({'kind': 'circle', 'r': 2})  # Ok(value={'kind': 'circle', 'r': 2})
        ```
    """
    variants = dict(mapping)
    discriminator = field(discriminator_field, string)

    def decode(value: Any) -> Result[A, str]:
        tag_result = discriminator.decode_any(value)
        if isinstance(tag_result, Err):
            return Err(
                f"Missing or invalid discriminator field '{discriminator_field}' "
                f'in {safe_stringify(value)}'
            )

        tag = tag_result.value
        selected = variants.get(tag)
        if selected is None:
            known = ', '.join(variants)
            return Err(
                f"Unexpected discriminator value '{tag}' for field '{discriminator_field}'. "
                f'Expected one of: {known}. Found in: {safe_stringify(value)}'
            )

        return selected.decode_any(value).map_err(
            lambda e: f"Error decoding variant with {discriminator_field}='{tag}': {e}"
        )

    return Decoder(decode)

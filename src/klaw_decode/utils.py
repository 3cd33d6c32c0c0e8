"""Helpers for building error messages and mapping structure keys."""

from __future__ import annotations

import dataclasses
import re
from collections.abc import Mapping
from typing import Any

import msgspec
import msgspec.structs

__all__ = [
    'CYCLICAL_REFERENCE',
    'camel_case',
    'identity',
    'safe_stringify',
    'snake_case',
]

CYCLICAL_REFERENCE = '[Cyclical Reference]'
"""Placeholder written in place of a container that contains itself."""

_encoder = msgspec.json.Encoder(enc_hook=str)

_SNAKE_SEGMENT = re.compile(r'(_\w)')
_UPPER_CHAR = re.compile(r'([A-Z])')


def safe_stringify(value: Any) -> str:
    """Render any value as compact JSON text for use in error messages.

    Containers and records (Structs, dataclasses, attrs classes) that refer
    back to one of their ancestors are replaced by
    ``CYCLICAL_REFERENCE`` instead of recursing forever. Values that have no
    JSON form are rendered with ``str()``.

    Examples:
        >>> safe_stringify({'a': 1, 'b': 'hello'})
        '{"a":1,"b":"hello"}'
        >>> node = {'a': 1}
        >>> node['b'] = node
        >>> safe_stringify(node)
        '{"a":1,"b":"[Cyclical Reference]"}'
    """
    return _encoder.encode(_break_cycles(value, set())).decode()


def _record_fields(value: Any) -> dict[str, Any] | None:
    """Return the attributes msgspec would encode for a record-like object.

    Structs, dataclass instances and attrs instances are serialized field by
    field, so they can close a cycle just like a dict can. Anything else
    returns None.
    """
    if isinstance(value, msgspec.Struct):
        return msgspec.structs.asdict(value)
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {f.name: getattr(value, f.name) for f in dataclasses.fields(value)}
    attrs_fields = getattr(type(value), '__attrs_attrs__', None)
    if attrs_fields is not None:
        return {a.name: getattr(value, a.name) for a in attrs_fields}
    return None


def _break_cycles(value: Any, ancestors: set[int]) -> Any:
    """Copy nested containers, substituting the sentinel for back-references.

    ``ancestors`` holds the ids of the containers on the current path and is
    private to a single ``safe_stringify`` call. Records are copied into plain
    dicts so the encoder never walks an object graph by itself.
    """
    if isinstance(value, Mapping | list | tuple | set | frozenset):
        fields = None
    else:
        fields = _record_fields(value)
        if fields is None:
            return value

    marker = id(value)
    if marker in ancestors:
        return CYCLICAL_REFERENCE

    ancestors.add(marker)
    try:
        if fields is not None:
            return {key: _break_cycles(item, ancestors) for key, item in fields.items()}
        if isinstance(value, Mapping):
            return {
                key if isinstance(key, str) else str(key): _break_cycles(item, ancestors)
                for key, item in value.items()
            }
        return [_break_cycles(item, ancestors) for item in value]
    finally:
        ancestors.discard(marker)


def identity[T](value: T) -> T:
    """Return the argument unchanged."""
    return value


def camel_case(text: str) -> str:
    """Convert a snake_case string to camelCase.

    Examples:
        >>> camel_case('first_name')
        'firstName'
    """
    return _SNAKE_SEGMENT.sub(lambda m: m.group(1)[1].upper(), text)


def snake_case(text: str) -> str:
    """Convert a camelCase string to snake_case.

    Examples:
        >>> snake_case('camelCaseString')
        'camel_case_string'
    """
    return _UPPER_CHAR.sub(lambda m: f'_{m.group(1).lower()}', text)

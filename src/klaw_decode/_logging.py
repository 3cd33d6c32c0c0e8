"""Structured logging for decode tracing.

Decoders never log by themselves. The only events come from decoders wrapped
with ``klaw_decode.debug.trace``, named ``decode.succeeded`` and
``decode.failed``. structlog's ProcessorFormatter renders them and any stdlib
records in one format.

Decode events get two extra processing steps before rendering:

    clip     long ``value`` / ``error`` fields are cut to ``max_value_length``
    hooks    every registered decode hook receives a copy of the event

Hooks let an application collect decode failures (for metrics, or to attach
them to a request) without parsing log output.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Any

import structlog

if TYPE_CHECKING:
    from collections.abc import Callable

__all__ = [
    'DECODE_EVENT_PREFIX',
    'DEFAULT_MAX_VALUE_LENGTH',
    'add_decode_hook',
    'clear_decode_hooks',
    'configure_logging',
    'get_logger',
    'remove_decode_hook',
]

DECODE_EVENT_PREFIX = 'decode.'
"""Prefix shared by every event emitted by traced decoders."""

DEFAULT_MAX_VALUE_LENGTH = 200
"""Default limit for rendered values and error messages in decode events."""

_CLIPPED_FIELDS = ('value', 'error')

type DecodeHook = Callable[[dict[str, Any]], None]

_decode_hooks: list[DecodeHook] = []


def _is_decode_event(event_dict: dict[str, Any]) -> bool:
    return str(event_dict.get('event', '')).startswith(DECODE_EVENT_PREFIX)


def _create_clip_processor(max_length: int | None) -> Callable[[Any, str, dict[str, Any]], dict[str, Any]]:
    """Create a processor that shortens long fields of decode events."""

    def clip_processor(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
        if max_length is None or not _is_decode_event(event_dict):
            return event_dict
        for key in _CLIPPED_FIELDS:
            text = event_dict.get(key)
            if isinstance(text, str) and len(text) > max_length:
                event_dict[key] = f'{text[:max_length]}... ({len(text)} chars)'
        return event_dict

    return clip_processor


def _create_hook_processor() -> Callable[[Any, str, dict[str, Any]], dict[str, Any]]:
    """Create a processor that hands decode events to the registered hooks."""

    def hook_processor(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
        if not _is_decode_event(event_dict):
            return event_dict
        for hook in _decode_hooks:
            try:
                hook(event_dict.copy())
            except Exception:  # noqa: BLE001
                # A failing hook must not break logging or the other hooks.
                continue
        return event_dict

    return hook_processor


def _shared_processors(max_value_length: int | None) -> list[Any]:
    """Processors applied to structlog events and stdlib records alike."""
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt='iso'),
        _create_clip_processor(max_value_length),
        _create_hook_processor(),
    ]


def _renderer(json_output: bool) -> Any:
    if json_output:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def configure_logging(
    level: str = 'INFO',
    *,
    json_output: bool = True,
    max_value_length: int | None = DEFAULT_MAX_VALUE_LENGTH,
) -> None:
    """Route structlog and stdlib logging through one stderr handler.

    Args:
        level: Logging level ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL").
            Trace events are logged at debug level.
        json_output: If True, emit JSON lines. If False, use console output.
        max_value_length: Maximum length of the ``value`` and ``error``
            fields of decode events. None disables clipping.
    """
    shared = _shared_processors(max_value_length)
    structlog.configure(
        processors=[
            *shared,
            structlog.processors.StackInfoRenderer(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(json_output),
            ],
        )
    )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(getattr(logging, level.upper(), logging.INFO))


def get_logger(name: str | None = None) -> Any:
    """Get a structlog logger (``klaw_decode`` by default)."""
    return structlog.get_logger(name or 'klaw_decode')


def add_decode_hook(hook: DecodeHook) -> None:
    """Register a hook called with a copy of every decode event.

    Hooks only run once logging has been configured, via ``configure_logging``
    or ``init(log_level=...)``, and only for decoders wrapped with ``trace``
    while tracing is enabled.

    Example:
        ```python
        failures = []
        add_decode_hook(lambda event: failures.append(event) if event['event'] == 'decode.failed' else None)
        init(log_level='DEBUG', trace=True)
        trace(payload, 'payload').decode_json(body)
        ```
    """
    _decode_hooks.append(hook)


def remove_decode_hook(hook: DecodeHook) -> None:
    """Remove a previously registered decode hook."""
    if hook in _decode_hooks:
        _decode_hooks.remove(hook)


def clear_decode_hooks() -> None:
    """Remove all registered decode hooks."""
    _decode_hooks.clear()

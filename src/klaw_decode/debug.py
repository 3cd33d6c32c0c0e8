"""Opt-in diagnostics for decoders.

``trace`` attaches observers with ``Decoder.do`` / ``Decoder.else_do`` that log
each outcome. Events are only emitted while tracing is enabled
(``init(trace=True)`` or ``KLAW_DECODE_TRACE=1``), checked on every decode, so
traced decoders can be defined at import time and switched on later.
"""

from __future__ import annotations

from typing import Any

from klaw_decode._config import current_config
from klaw_decode._logging import get_logger
from klaw_decode.core import Decoder
from klaw_decode.utils import safe_stringify

__all__ = ['trace']


def trace[A](decoder: Decoder[A], label: str, logger: Any = None) -> Decoder[A]:
    """Wrap ``decoder`` so that its successes and failures are logged.

    Logs ``decode.succeeded`` (with the rendered value) and ``decode.failed``
    (with the error message) at debug level, bound with ``decoder=label``.
    Long values are clipped and decode hooks are called by the logging
    configuration (see ``klaw_decode._logging``). The decode result itself
    is never altered.

    Args:
        decoder: The decoder to observe.
        label: Name identifying the decoder in log events.
        logger: A structlog logger; defaults to the ``klaw_decode`` logger.

    Returns:
        A decoder with the same behavior as ``decoder``.
    """

    def log() -> Any:
        return (logger if logger is not None else get_logger()).bind(decoder=label)

    def on_success(value: A) -> None:
        if current_config().trace:
            log().debug('decode.succeeded', value=safe_stringify(value))

    def on_failure(error: str) -> None:
        if current_config().trace:
            log().debug('decode.failed', error=error)

    return decoder.do(on_success).else_do(on_failure)

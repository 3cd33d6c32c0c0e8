"""Library configuration: DecodeConfig and initialization."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from klaw_decode._logging import DEFAULT_MAX_VALUE_LENGTH, configure_logging

__all__ = [
    'DecodeConfig',
    'current_config',
    'get_config',
    'init',
    'reset',
]

_LOG_LEVELS = frozenset({'DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'})
_TRUTHY = frozenset({'1', 'true', 'yes', 'on'})
_FALSY = frozenset({'0', 'false', 'no', 'off'})


@dataclass(frozen=True)
class DecodeConfig:
    """Configuration for klaw-decode.

    Attributes:
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = leave logging alone.
        json_output: Emit JSON log lines (True) or colored console output (False).
        trace: Emit events from decoders wrapped with ``debug.trace``.
        max_value_length: Longest rendered value or error kept in a decode
            event; 0 disables clipping.
    """

    log_level: str | None = None
    json_output: bool = True
    trace: bool = False
    max_value_length: int = DEFAULT_MAX_VALUE_LENGTH


# Global configuration (set by init())
_config: DecodeConfig | None = None


def _detect_log_level() -> str | None:
    """Read KLAW_DECODE_LOG_LEVEL; unknown values are ignored with a warning."""
    env_level = os.environ.get('KLAW_DECODE_LOG_LEVEL', '').upper()
    if not env_level:
        return None
    if env_level not in _LOG_LEVELS:
        logging.warning("Unknown KLAW_DECODE_LOG_LEVEL value '%s', leaving logging unconfigured", env_level)
        return None
    return env_level


def _detect_json_output() -> bool:
    """Read KLAW_DECODE_LOG_FORMAT ("json" or "console"), defaulting to JSON."""
    env_format = os.environ.get('KLAW_DECODE_LOG_FORMAT', '').lower()
    if env_format == 'console':
        return False
    if env_format and env_format != 'json':
        logging.warning("Unknown KLAW_DECODE_LOG_FORMAT value '%s', defaulting to json", env_format)
    return True


def _detect_trace() -> bool:
    """Read KLAW_DECODE_TRACE as a boolean flag, defaulting to off."""
    env_trace = os.environ.get('KLAW_DECODE_TRACE', '').lower()
    if env_trace in _TRUTHY:
        return True
    if env_trace and env_trace not in _FALSY:
        logging.warning("Unknown KLAW_DECODE_TRACE value '%s', tracing disabled", env_trace)
    return False


def _detect_max_value_length() -> int:
    """Read KLAW_DECODE_MAX_VALUE_LENGTH as a non-negative integer."""
    env_length = os.environ.get('KLAW_DECODE_MAX_VALUE_LENGTH', '').strip()
    if not env_length:
        return DEFAULT_MAX_VALUE_LENGTH
    if not env_length.isdecimal():
        logging.warning(
            "Unknown KLAW_DECODE_MAX_VALUE_LENGTH value '%s', using %d", env_length, DEFAULT_MAX_VALUE_LENGTH
        )
        return DEFAULT_MAX_VALUE_LENGTH
    return int(env_length)


def init(
    log_level: str | None = None,
    *,
    json_output: bool | None = None,
    trace: bool | None = None,
    max_value_length: int | None = None,
) -> DecodeConfig:
    """Initialize klaw-decode with the given configuration.

    Values left as None are read from the environment
    (``KLAW_DECODE_LOG_LEVEL``, ``KLAW_DECODE_LOG_FORMAT``, ``KLAW_DECODE_TRACE``,
    ``KLAW_DECODE_MAX_VALUE_LENGTH``).
    Calling ``init`` is optional; decoders work without it.

    Args:
        log_level: Logging level ("DEBUG", "INFO", etc.). None = from environment.
        json_output: JSON (True) or console (False) log output.
        trace: Whether traced decoders emit log events.
        max_value_length: Longest value or error kept in a decode event; 0
            disables clipping.

    Returns:
        The DecodeConfig that was set.

    Raises:
        ValueError: If ``log_level`` is not a known logging level, or
            ``max_value_length`` is negative.

    Example:
        ```python
        from klaw_decode import init

        init(log_level='DEBUG', trace=True)
        ```
    """
    global _config  # noqa: PLW0603

    if log_level is None:
        resolved_level = _detect_log_level()
    elif log_level.upper() in _LOG_LEVELS:
        resolved_level = log_level.upper()
    else:
        msg = f'Unknown log level: {log_level!r}'
        raise ValueError(msg)

    if max_value_length is not None and max_value_length < 0:
        msg = f'max_value_length must be >= 0, got {max_value_length}'
        raise ValueError(msg)

    _config = DecodeConfig(
        log_level=resolved_level,
        json_output=_detect_json_output() if json_output is None else json_output,
        trace=_detect_trace() if trace is None else trace,
        max_value_length=_detect_max_value_length() if max_value_length is None else max_value_length,
    )

    if _config.log_level is not None:
        configure_logging(
            _config.log_level,
            json_output=_config.json_output,
            max_value_length=_config.max_value_length or None,
        )

    return _config


def get_config() -> DecodeConfig:
    """Get the configuration set by ``init()``.

    Raises:
        RuntimeError: If init() has not been called.
    """
    if _config is None:
        msg = 'klaw-decode not initialized. Call klaw_decode.init() first.'
        raise RuntimeError(msg)
    return _config


def current_config() -> DecodeConfig:
    """Get the active configuration, or the defaults if ``init()`` was never called."""
    return _config if _config is not None else DecodeConfig()


def reset() -> None:
    """Forget the configuration set by ``init()``."""
    global _config  # noqa: PLW0603
    _config = None

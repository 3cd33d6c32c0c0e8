"""Tests for decode-event logging: tracing, clipping and decode hooks."""

from __future__ import annotations

from typing import Any

from klaw_decode import (
    Ok,
    add_decode_hook,
    array,
    configure_logging,
    field,
    get_logger,
    init,
    number,
    remove_decode_hook,
    string,
    trace,
)


def capture() -> list[dict[str, Any]]:
    received: list[dict[str, Any]] = []
    add_decode_hook(received.append)
    return received


def events_named(received: list[dict[str, Any]], name: str) -> list[dict[str, Any]]:
    return [e for e in received if e.get('event') == name]


class TestTrace:
    """Tests for debug.trace."""

    def test_logs_success(self) -> None:
        """A successful decode emits decode.succeeded with the rendered value."""
        init(log_level='DEBUG', trace=True)
        received = capture()

        decoder = trace(field('age', number), 'age')
        assert decoder.decode_any({'age': 3}) == Ok(3)

        events = events_named(received, 'decode.succeeded')
        assert len(events) == 1
        assert events[0]['decoder'] == 'age'
        assert events[0]['value'] == '3'

    def test_logs_failure(self) -> None:
        """A failed decode emits decode.failed with the error message."""
        init(log_level='DEBUG', trace=True)
        received = capture()

        result = trace(number, 'count').decode_any('x')
        assert result == number.decode_any('x')

        events = events_named(received, 'decode.failed')
        assert len(events) == 1
        assert events[0]['decoder'] == 'count'
        assert events[0]['error'] == result.error

    def test_silent_when_disabled(self) -> None:
        """No events are emitted while tracing is off."""
        init(log_level='DEBUG', trace=False)
        received = capture()

        trace(number, 'count').decode_any(1)
        assert received == []

    def test_enabled_after_definition(self) -> None:
        """Tracing is checked at decode time, not when the decoder is built."""
        decoder = trace(number, 'late')
        init(log_level='DEBUG', trace=True)
        received = capture()

        decoder.decode_any(1)
        assert [e['decoder'] for e in events_named(received, 'decode.succeeded')] == ['late']

    def test_nested_traces_report_inside_out(self) -> None:
        """Inner traced decoders log before the outer ones."""
        init(log_level='DEBUG', trace=True)
        received = capture()

        decoder = trace(field('name', trace(string, 'name')), 'user')
        decoder.decode_any({'name': 1})
        assert [e['decoder'] for e in events_named(received, 'decode.failed')] == ['name', 'user']


class TestClipping:
    """Tests for clipping long fields of decode events."""

    def test_long_value_is_clipped(self) -> None:
        init(log_level='DEBUG', trace=True, max_value_length=10)
        received = capture()

        trace(array(number), 'numbers').decode_any(list(range(100)))
        (event,) = events_named(received, 'decode.succeeded')
        assert event['value'].startswith('[0,1,2,3,4')
        assert event['value'].endswith('... (291 chars)')

    def test_long_error_is_clipped(self) -> None:
        init(log_level='DEBUG', trace=True, max_value_length=20)
        received = capture()

        trace(string, 's').decode_any(list(range(100)))
        (event,) = events_named(received, 'decode.failed')
        assert event['error'].startswith('I expected to find a')
        assert '...' in event['error']

    def test_short_value_is_untouched(self) -> None:
        init(log_level='DEBUG', trace=True, max_value_length=10)
        received = capture()

        trace(number, 'n').decode_any(5)
        assert events_named(received, 'decode.succeeded')[0]['value'] == '5'

    def test_zero_disables_clipping(self) -> None:
        init(log_level='DEBUG', trace=True, max_value_length=0)
        received = capture()

        trace(string, 's').decode_any('x' * 1000)
        assert events_named(received, 'decode.succeeded')[0]['value'] == '"' + 'x' * 1000 + '"'


class TestDecodeHooks:
    """Tests for decode hook registration."""

    def test_other_events_are_not_passed_to_hooks(self) -> None:
        """Hooks only see decode events."""
        configure_logging(level='DEBUG')
        received = capture()

        get_logger('app').info('request.started', path='/users')
        assert received == []

    def test_remove_hook(self) -> None:
        """remove_decode_hook() stops the hook from being called."""
        init(log_level='DEBUG', trace=True)
        received: list[dict[str, Any]] = []
        add_decode_hook(received.append)
        decoder = trace(number, 'n')

        decoder.decode_any(1)
        assert len(received) == 1

        remove_decode_hook(received.append)
        decoder.decode_any(2)
        assert len(received) == 1

    def test_failing_hook_does_not_break_others(self) -> None:
        """An exception in one hook neither fails decoding nor skips later hooks."""

        def bad_hook(event_dict: dict[str, Any]) -> None:
            raise ValueError('hook failed')

        init(log_level='DEBUG', json_output=False, trace=True)
        add_decode_hook(bad_hook)
        received = capture()

        assert trace(number, 'n').decode_any(1) == Ok(1)
        assert len(received) == 1

    def test_hook_receives_a_copy(self) -> None:
        """Mutating the event in a hook does not affect other hooks."""
        init(log_level='DEBUG', trace=True)
        add_decode_hook(lambda event: event.update(decoder='changed'))
        received = capture()

        trace(number, 'n').decode_any(1)
        assert received[0]['decoder'] == 'n'

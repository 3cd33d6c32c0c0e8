"""Pytest configuration and shared fixtures for klaw-decode tests."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

import pytest

from klaw_decode import Decoder, Ok
from klaw_decode._config import reset
from klaw_decode._logging import clear_decode_hooks


@pytest.fixture(autouse=True)
def clean_state() -> Iterator[None]:
    """Reset global configuration and decode hooks around every test."""
    reset()
    clear_decode_hooks()
    yield
    reset()
    clear_decode_hooks()


class Recorder:
    """Builds decoders that remember every input they were run against."""

    def __init__(self) -> None:
        self.seen: list[tuple[str, Any]] = []

    def accepting(self, name: str) -> Decoder[Any]:
        """A decoder that records its input and succeeds with it."""

        def decode(value: Any) -> Ok[Any]:
            self.seen.append((name, value))
            return Ok(value)

        return Decoder(decode)

    def wrapping(self, name: str, decoder: Decoder[Any]) -> Decoder[Any]:
        """A decoder that records its input, then delegates to ``decoder``."""

        def decode(value: Any) -> Any:
            self.seen.append((name, value))
            return decoder.decode_any(value)

        return Decoder(decode)

    def names(self) -> list[str]:
        return [name for name, _ in self.seen]


@pytest.fixture
def recorder() -> Recorder:
    """A fresh Recorder for observing which decoders ran."""
    return Recorder()


@pytest.fixture
def person() -> dict[str, Any]:
    """Sample decoded-JSON object."""
    return {'name': 'Ada', 'age': 36, 'tags': ['math', 'engines']}

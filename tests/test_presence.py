"""Tests for maybe and nullable."""

from hypothesis import given

from klaw_decode import Err, Nothing, Ok, Some, array, field, maybe, nullable, number, string

from tests.strategies import any_values


class TestMaybe:
    """Tests for maybe."""

    def test_success_is_some(self):
        assert maybe(string).decode_any('foo') == Ok(Some('foo'))

    def test_null_is_nothing(self):
        assert maybe(string).decode_any(None) == Ok(Nothing)

    def test_wrong_type_is_nothing(self):
        assert maybe(string).decode_any(42) == Ok(Nothing)

    @given(any_values)
    def test_never_fails(self, value):
        """maybe turns every failure into Nothing."""
        for inner in (string, number, array(number), field('x', number)):
            assert maybe(inner).decode_any(value).is_ok()


class TestNullable:
    """Tests for nullable."""

    def test_null_is_nothing(self):
        assert nullable(string).decode_any(None) == Ok(Nothing)

    def test_value_is_some(self):
        assert nullable(string).decode_any('foo') == Ok(Some('foo'))

    def test_wrong_type_fails(self):
        assert nullable(string).decode_any(42) == Err('I expected to find a string but instead I found 42')

    def test_inner_not_run_for_null(self, recorder):
        nullable(recorder.accepting('inner')).decode_any(None)
        assert recorder.seen == []

    @given(any_values)
    def test_matches_inner_for_non_null(self, value):
        """For non-null input nullable is the inner decoder wrapped in Some."""
        if value is not None:
            assert nullable(number).decode_any(value) == number.decode_any(value).map(Some)

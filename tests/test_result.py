"""Tests for Result type (Ok and Err)."""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from klaw_decode import Err, Nothing, Ok, Some, collect


class TestOkCreation:
    """Tests for Ok instantiation and basic properties."""

    def test_ok_creation(self):
        """Ok wraps a value."""
        assert Ok(42).value == 42

    def test_ok_with_none(self):
        """Ok can wrap None."""
        assert Ok(None).value is None

    def test_ok_is_frozen(self):
        """Ok instances are immutable."""
        ok = Ok(42)
        with pytest.raises(AttributeError):
            ok.value = 100  # type: ignore[misc]


class TestErrCreation:
    """Tests for Err instantiation and basic properties."""

    def test_err_creation(self):
        """Err wraps an error value."""
        assert Err('error message').error == 'error message'

    def test_err_is_frozen(self):
        """Err instances are immutable."""
        err = Err('error')
        with pytest.raises(AttributeError):
            err.error = 'new error'  # type: ignore[misc]


class TestResultEquality:
    """Tests for Result equality."""

    def test_ok_equality(self):
        """Ok instances with same value are equal."""
        assert Ok([1, 2]) == Ok([1, 2])
        assert Ok(42) != Ok(43)

    def test_err_equality(self):
        """Err instances with same error are equal."""
        assert Err('error') == Err('error')
        assert Err('error1') != Err('error2')

    def test_ok_not_equal_to_err(self):
        """Ok and Err are never equal."""
        assert Ok('x') != Err('x')


class TestResultQueries:
    """Tests for is_ok / is_err."""

    def test_ok_queries(self):
        """Ok reports itself as ok."""
        assert Ok(1).is_ok()
        assert not Ok(1).is_err()

    def test_err_queries(self):
        """Err reports itself as err."""
        assert Err('e').is_err()
        assert not Err('e').is_ok()


class TestResultExtraction:
    """Tests for unwrap and friends."""

    def test_ok_unwrap(self):
        """unwrap returns the Ok value."""
        assert Ok(42).unwrap() == 42

    def test_err_unwrap_raises(self):
        """unwrap on Err raises RuntimeError."""
        with pytest.raises(RuntimeError):
            Err('boom').unwrap()

    def test_unwrap_or(self):
        """unwrap_or picks the default only for Err."""
        assert Ok(1).unwrap_or(0) == 1
        assert Err('e').unwrap_or(0) == 0

    def test_unwrap_or_else(self):
        """unwrap_or_else calls the fallback only for Err."""
        assert Ok(1).unwrap_or_else(lambda: 0) == 1
        assert Err('e').unwrap_or_else(lambda: 0) == 0

    def test_expect(self):
        """expect returns the value or raises with the given message."""
        assert Ok(1).expect('needed') == 1
        with pytest.raises(RuntimeError, match='needed'):
            Err('e').expect('needed')


class TestResultTransformations:
    """Tests for map, map_err, and_then, or_else, fold."""

    def test_map(self):
        """map transforms Ok and leaves Err alone."""
        assert Ok(2).map(lambda x: x * 3) == Ok(6)
        assert Err('e').map(lambda x: x * 3) == Err('e')

    def test_map_err(self):
        """map_err transforms Err and leaves Ok alone."""
        assert Err('e').map_err(str.upper) == Err('E')
        assert Ok(1).map_err(str.upper) == Ok(1)

    def test_and_then(self):
        """and_then chains a fallible step."""
        assert Ok(2).and_then(lambda x: Ok(x + 1)) == Ok(3)
        assert Ok(2).and_then(lambda _: Err('no')) == Err('no')
        assert Err('e').and_then(lambda x: Ok(x + 1)) == Err('e')

    def test_or_else(self):
        """or_else recovers from Err."""
        assert Err('e').or_else(lambda e: Ok(len(e))) == Ok(1)
        assert Ok(5).or_else(lambda e: Ok(len(e))) == Ok(5)

    def test_fold(self):
        """fold collapses both variants."""
        assert Ok(2).fold(lambda v: v * 10, len) == 20
        assert Err('abc').fold(lambda v: v * 10, len) == 3

    def test_ok_and_err_views(self):
        """ok() and err() convert to Option."""
        assert Ok(1).ok() == Some(1)
        assert Ok(1).err() is Nothing
        assert Err('e').ok() is Nothing
        assert Err('e').err() == Some('e')

    @given(st.integers())
    def test_map_identity(self, value):
        """Mapping the identity function leaves an Ok unchanged."""
        assert Ok(value).map(lambda x: x) == Ok(value)


class TestCollect:
    """Tests for collect."""

    def test_collect_all_ok(self):
        """collect gathers every Ok value in order."""
        assert collect([Ok(1), Ok(2), Ok(3)]) == Ok([1, 2, 3])

    def test_collect_empty(self):
        """collect of nothing is an empty list."""
        assert collect([]) == Ok([])

    def test_collect_returns_first_err(self):
        """collect returns the first Err."""
        assert collect([Ok(1), Err('a'), Err('b')]) == Err('a')

    def test_collect_is_lazy(self):
        """collect stops consuming a generator at the first Err."""
        consumed = []

        def results():
            for item in [Ok(1), Err('stop'), Ok(3)]:
                consumed.append(item)
                yield item

        assert collect(results()) == Err('stop')
        assert consumed == [Ok(1), Err('stop')]

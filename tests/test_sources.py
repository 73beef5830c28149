"""Tests for sources module."""

import pytest

from composite_iterator import ExhaustionError, IteratorSource, Source


def test_iterator_source_is_a_source():
    """Test that the adapter satisfies the Source protocol."""
    assert isinstance(IteratorSource([]), Source)


def test_has_next_pulls_at_most_one_item():
    """Test that has_next() buffers a single item only."""
    pulled = []

    def numbers():
        for i in range(3):
            pulled.append(i)
            yield i

    source = IteratorSource(numbers())
    assert pulled == []

    assert source.has_next()
    assert source.has_next()
    assert pulled == [0]

    assert source.next() == 0
    assert source.next() == 1
    assert pulled == [0, 1]


def test_exhaustion():
    """Test that an exhausted adapter keeps raising ExhaustionError."""
    source = IteratorSource(["a"])

    assert source.next() == "a"
    assert source.has_next() is False
    with pytest.raises(ExhaustionError):
        source.next()
    with pytest.raises(ExhaustionError):
        source.next()


def test_underlying_iterator_not_called_after_exhaustion():
    """Test that the wrapped iterator is not pulled again once finished."""

    class Flaky:
        def __init__(self):
            self.calls = 0

        def __iter__(self):
            return self

        def __next__(self):
            self.calls += 1
            if self.calls == 1:
                raise StopIteration
            return "resurrected"

    flaky = Flaky()
    source = IteratorSource(flaky)

    assert source.has_next() is False
    assert source.has_next() is False
    assert flaky.calls == 1


def test_none_items_are_preserved():
    """Test that None is a valid item and not mistaken for end of data."""
    source = IteratorSource([None, None])

    assert list(source) == [None, None]


def test_exhaustion_error_ends_for_loops():
    """Test that ExhaustionError is a StopIteration."""
    assert issubclass(ExhaustionError, StopIteration)
    assert list(IteratorSource(range(3))) == [0, 1, 2]

"""Adapters that give plain Python iterables the Source capability."""

import logging
from typing import Generic, Iterable, Iterator, TypeVar

from .exceptions import ExhaustionError

logger = logging.getLogger(__name__)

T = TypeVar("T")

_EMPTY = object()


class IteratorSource(Generic[T]):
    """
    Wraps a Python iterable so it can answer has_next() without consuming.

    At most one item is held in lookahead, and only after has_next() had to
    pull it to find out whether the underlying iterator was exhausted.
    """

    def __init__(self, iterable: Iterable[T]):
        """
        Initialize adapter.

        Args:
            iterable: Any iterable or iterator. iter() is called once here.
        """
        self._iterator: Iterator[T] = iter(iterable)
        self._lookahead = _EMPTY
        self._exhausted = False

    def has_next(self) -> bool:
        if self._lookahead is not _EMPTY:
            return True
        if self._exhausted:
            return False
        try:
            self._lookahead = next(self._iterator)
        except StopIteration:
            self._exhausted = True
            logger.debug("Underlying %s is exhausted", type(self._iterator).__name__)
            return False
        return True

    def next(self) -> T:
        if not self.has_next():
            raise ExhaustionError("Source has no more items")
        item = self._lookahead
        self._lookahead = _EMPTY
        return item

    def __iter__(self) -> "IteratorSource[T]":
        return self

    def __next__(self) -> T:
        return self.next()

    def __repr__(self) -> str:
        return f"IteratorSource({self._iterator!r}, exhausted={self._exhausted})"

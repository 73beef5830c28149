"""Composite iterator presenting several sources as one ordered sequence."""

import logging
from typing import Any, Generic, Iterable, List, TypeVar

from .exceptions import DuplicateSourceError, ExhaustionError, InvalidStateError
from .models import TraversalState
from .protocols import Source
from .sources import IteratorSource

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _describe(source: Any) -> str:
    # Never repr() a source: it may be a large container.
    return f"{type(source).__name__} at {id(source):#x}"


class CompositeIterator(Generic[T]):
    """Iterate over several sources one after the other.

    Sources are drained strictly in registration order and each source keeps
    its own item order. Nothing is copied: the composite only holds
    references to the registered sources.

    Registration closes on the first call to has_next() or next(), even if
    that call consumes nothing. The same source object cannot be registered
    twice.

    Instances are not thread-safe. Callers must not share one composite
    between threads without their own synchronization.
    """

    def __init__(self, *sources: Any):
        """Initialize the composite.

        Args:
            *sources: Optional initial sources, registered in order
        """
        self._originals: List[Any] = []
        self._sources: List[Source[T]] = []
        self._current_index = 0
        self._started = False
        self.register_all(sources)

    def register(self, source: Any) -> None:
        """Append a source to the end of the traversal order.

        Args:
            source: An object implementing has_next()/next(), or any iterable

        Raises:
            InvalidStateError: If traversal has already started
            DuplicateSourceError: If this exact object is already registered
            TypeError: If the object is neither a source nor iterable
        """
        if self._started:
            logger.debug("Rejected registration of %s: traversal started", _describe(source))
            raise InvalidStateError(
                "Cannot register a source after traversal has started"
            )

        if source is self:
            raise DuplicateSourceError("A composite cannot be registered into itself")

        if any(registered is source for registered in self._originals):
            logger.debug("Rejected registration of %s: already registered", _describe(source))
            raise DuplicateSourceError(f"Source {_describe(source)} is already registered")

        if isinstance(source, Source):
            adapted = source
        else:
            try:
                adapted = IteratorSource(source)
            except TypeError:
                raise TypeError(
                    f"Expected a source or an iterable, got {type(source).__name__}"
                ) from None

        self._originals.append(source)
        self._sources.append(adapted)
        logger.debug("Registered source %d: %s", len(self._sources), _describe(source))

    def register_all(self, sources: Iterable[Any]) -> None:
        """Register each source in order, stopping at the first failure."""
        for source in sources:
            self.register(source)

    def _advance(self) -> bool:
        # Skipped sources stay skipped; the index never moves backwards.
        if not self._started:
            self._started = True
            logger.debug(f"Traversal started over {len(self._sources)} source(s)")

        while self._current_index < len(self._sources):
            if self._sources[self._current_index].has_next():
                return True
            self._current_index += 1
            if self._current_index == len(self._sources):
                logger.debug("All sources exhausted")
        return False

    def has_next(self) -> bool:
        """Return True if any registered source still has an item."""
        return self._advance()

    def next(self) -> T:
        """Return the next item across all sources.

        Raises:
            ExhaustionError: If every source is exhausted
        """
        if not self._advance():
            raise ExhaustionError("No more items in composite iterator")
        return self._sources[self._current_index].next()

    def __iter__(self) -> "CompositeIterator[T]":
        return self

    def __next__(self) -> T:
        return self.next()

    @property
    def source_count(self) -> int:
        """Number of registered sources."""
        return len(self._sources)

    @property
    def started(self) -> bool:
        """Whether traversal has begun and registration is closed."""
        return self._started

    @property
    def state(self) -> TraversalState:
        """Current lifecycle state, derived without touching any source."""
        if not self._started:
            return TraversalState.UNSTARTED
        if self._current_index >= len(self._sources):
            return TraversalState.EXHAUSTED
        return TraversalState.DRAINING

    def __repr__(self) -> str:
        return (
            f"CompositeIterator(sources={len(self._sources)}, "
            f"current_index={self._current_index}, state={self.state.value})"
        )

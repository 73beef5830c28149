"""Protocol definitions for iteration sources."""

from typing import Protocol, TypeVar, runtime_checkable

T_co = TypeVar("T_co", covariant=True)


@runtime_checkable
class Source(Protocol[T_co]):
    """Protocol for anything that can be registered as a source."""

    def has_next(self) -> bool:
        """Return True if at least one more item is available."""
        ...

    def next(self) -> T_co:
        """Return the next item, raising ExhaustionError at the end."""
        ...

"""Composite Iterator - Traverse several sources as one ordered sequence."""

__version__ = "0.1.0"

from .composite import CompositeIterator
from .exceptions import (
    CompositeIteratorError,
    DuplicateSourceError,
    ExhaustionError,
    InvalidStateError,
)
from .models import TraversalState
from .protocols import Source
from .sources import IteratorSource

__all__ = [
    "CompositeIterator",
    "IteratorSource",
    "Source",
    "TraversalState",
    # Exceptions
    "CompositeIteratorError",
    "InvalidStateError",
    "DuplicateSourceError",
    "ExhaustionError",
]

"""State model for composite traversal."""

from enum import Enum


class TraversalState(str, Enum):
    """Lifecycle states of a CompositeIterator."""

    UNSTARTED = "unstarted"
    DRAINING = "draining"
    EXHAUSTED = "exhausted"

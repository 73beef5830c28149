"""Exception types raised by the composite iterator."""


class CompositeIteratorError(Exception):
    """Base class for all composite iterator errors."""


class InvalidStateError(CompositeIteratorError, RuntimeError):
    """Raised when a source is registered after traversal has started."""


class DuplicateSourceError(CompositeIteratorError, ValueError):
    """Raised when the same source object is registered twice."""


class ExhaustionError(CompositeIteratorError, StopIteration):
    """Raised by next() when no items remain.

    Subclasses StopIteration so that for loops and other consumers of the
    iterator protocol end normally.
    """

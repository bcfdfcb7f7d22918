"""
Exceptions raised when intervals are misused

Expected outcomes (an inverted interval, two intervals that cannot be
widened, stepping past the end of a type) are values, not exceptions.
"""


class IntervalError(Exception):
    """
    Base class for all intervalTools errors
    """


class BoundaryError(IntervalError,ValueError):
    """
    A boundary was given a value that does not match its kind
    """


class NotSteppableError(IntervalError,TypeError):
    """
    The element type has no successor/predecessor, so it cannot be iterated
    """


class UnboundedIterationError(IntervalError,ValueError):
    """
    Iteration was asked to start from an unbounded side of a type
    that has no smallest (or largest) value
    """

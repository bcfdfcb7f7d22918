"""
Rewrite an interval's boundaries into canonical form

For a discrete element type every open boundary becomes the closed
boundary at the neighbouring value, eg the integers (1,5] become [2,5].
For a continuous element type the interval is already canonical.
"""
import logging

from intervalTools.boundary import Boundary
from intervalTools.interval import Interval

logger=logging.getLogger(__name__)


def normalize(interval:Interval)->Interval:
    """
    Get the canonical form of an interval.

    Stepping past the end of a bounded type (eg, the int8 interval (127,+inf))
    has no value to land on, so the result is Empty.

    normalize(normalize(x))==normalize(x)
    """
    stepper=interval.stepper
    if interval.collapsed or stepper is None:
        return interval
    lower:Boundary=interval.lower # type:ignore
    upper:Boundary=interval.upper # type:ignore
    if lower.isOpen():
        value=stepper.nextUpper(lower.value)
        if value is None:
            logger.debug('Nothing above lower bound %r, interval is empty',lower.value)
            return Interval(stepper=stepper)
        lower=Boundary.closed(value)
    if upper.isOpen():
        value=stepper.nextLower(upper.value)
        if value is None:
            logger.debug('Nothing below upper bound %r, interval is empty',upper.value)
            return Interval(stepper=stepper)
        upper=Boundary.closed(value)
    if lower is interval.lower and upper is interval.upper:
        return interval
    return Interval(lower,upper,stepper)


def isCanonical(interval:Interval)->bool:
    """
    Is the interval already in canonical form?
    """
    return normalize(interval) is interval

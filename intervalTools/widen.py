"""
Combining intervals: widening (union), intersection, and enclosure

Two intervals can be widened into one only when they are contiguous,
that is, when their canonical forms overlap, touch, or (for discrete
types) have no value between them.  [1,3] and [4,6] are contiguous
integers, but [1,2] and [5,6] are not.
"""
import typing

from intervalTools.interval import Interval
from intervalTools.normalize import normalize
from intervalTools.steppable import Stepper


def _ordered(a:Interval,b:Interval)->typing.Tuple[Interval,Interval]:
    """
    a and b, the one with the lesser lower boundary first
    """
    if a.lower.lowerKey()<=b.lower.lowerKey(): # type:ignore
        return a,b
    return b,a


def _undecided(interval:Interval)->bool:
    """
    True if nothing about the interval says which type it holds
    (Empty, or unbounded on both sides with no stepper given)
    """
    if interval.collapsed:
        return True
    return interval.stepper is None and interval.lowerPoint is None and interval.upperPoint is None


def _stepperOf(a:Interval,b:Interval)->typing.Optional[Stepper]:
    """
    The stepper a and b share

    If they disagree (eg, an int interval and a float one) the result
    is continuous, so None.
    """
    if a.stepper is b.stepper:
        return a.stepper
    if _undecided(a):
        return b.stepper
    if _undecided(b):
        return a.stepper
    return None


def isContiguous(a:Interval,b:Interval)->bool:
    """
    Can a and b be widened into a single interval without
    taking in any value that is in neither?

    Empty is contiguous with everything.
    """
    a=normalize(a)
    b=normalize(b)
    if a.collapsed or b.collapsed:
        return True
    first,second=_ordered(a,b)
    high=first.upper
    low=second.lower
    if high.isUnbounded() or low.isUnbounded(): # type:ignore
        return True
    if high.value>low.value: # type:ignore
        return True
    if high.value==low.value: # type:ignore
        return high.isClosed() or low.isClosed() # type:ignore
    stepper=_stepperOf(first,second)
    if stepper is None:
        # continuous, so there is always something in the gap
        return False
    after=stepper.nextUpper(high.value) # type:ignore
    return after is not None and after>=low.value # type:ignore


def widen(a:Interval,b:Interval)->typing.Optional[Interval]:
    """
    The smallest interval covering both a and b, or None if the two
    are not contiguous.

    None is not an error, it simply means the intervals are separate.

    Empty is absorbing, and the other interval comes back as it was given
    (not normalized):
        widen(Empty,x) is x
        widen(Empty,Empty)==Empty

    Where both intervals end at the same value, the more permissive
    boundary kind wins: UNBOUNDED > CLOSED > OPEN
    """
    canonicalA=normalize(a)
    canonicalB=normalize(b)
    if canonicalA.collapsed and canonicalB.collapsed:
        return canonicalA
    if canonicalA.collapsed:
        return b
    if canonicalB.collapsed:
        return a
    a=canonicalA
    b=canonicalB
    if not isContiguous(a,b):
        return None
    return Interval(
        a.lower.unionOrLeast(b.lower), # type:ignore
        a.upper.unionOrGreatest(b.upper), # type:ignore
        _stepperOf(a,b))


def intersect(a:Interval,b:Interval)->Interval:
    """
    The values in both a and b (Empty if they do not overlap)

    Where both intervals end at the same value, the more restrictive
    boundary kind wins: OPEN > CLOSED
    """
    a=normalize(a)
    b=normalize(b)
    stepper=_stepperOf(a,b)
    if a.collapsed or b.collapsed:
        return Interval(stepper=stepper)
    return normalize(Interval(
        a.lower.intersectOrGreatest(b.lower), # type:ignore
        a.upper.intersectOrLeast(b.upper), # type:ignore
        stepper))


def enclose(intervals:typing.Iterable[Interval])->Interval:
    """
    The smallest interval containing every one of the given intervals,
    gaps and all.

    Empty intervals are skipped.  If there is nothing else, the result is Empty.
    """
    acc:typing.Optional[Interval]=None
    for interval in intervals:
        interval=normalize(interval)
        if interval.collapsed:
            continue
        if acc is None:
            acc=interval
        else:
            acc=Interval(
                acc.lower.unionOrLeast(interval.lower), # type:ignore
                acc.upper.unionOrGreatest(interval.upper), # type:ignore
                _stepperOf(acc,interval))
    if acc is None:
        return Interval()
    return acc

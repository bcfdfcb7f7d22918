"""
Walk the values of a discrete interval in either direction

Both directions share the element type's Stepper.  Continuous intervals
have no stepper and cannot be iterated.
"""
import typing
import operator

from intervalTools.errors import NotSteppableError,UnboundedIterationError
from intervalTools.interval import Interval
from intervalTools.normalize import normalize
from intervalTools.steppable import Stepper


def requireStepper(interval:Interval)->Stepper:
    """
    Get the interval's stepper

    :raises NotSteppableError: if the element type is continuous
    """
    if interval.stepper is None:
        raise NotSteppableError(f'{interval} has a continuous element type and cannot be iterated')
    return interval.stepper


def _walk(
    start:typing.Any,
    stop:typing.Any,
    step:typing.Callable[[typing.Any],typing.Any],
    beyond:typing.Callable[[typing.Any,typing.Any],bool]
    )->typing.Generator[typing.Any,None,None]:
    """
    yield start, step(start), ... up to and including stop

    if stop is None, keep going until step runs out of values

    :beyond: beyond(value,stop) is True once value has gone past stop
        (operator.gt walking up, operator.lt walking down)
    """
    value=start
    while value is not None:
        if stop is not None and beyond(value,stop):
            return
        yield value
        if stop is not None and value==stop:
            return
        value=step(value)


def iterLeft(interval:Interval)->typing.Iterator[typing.Any]:
    """
    Every value of the interval, starting at the lower end and moving up

    Each call returns a new, independent iterator.
    If the upper side is unbounded the iterator never ends
    (unless the type runs out of values), so bound it yourself
    eg, with itertools.islice

    :raises NotSteppableError: if the element type is continuous
    :raises UnboundedIterationError: if the lower side is unbounded and the
        type has no minimum to start from
    """
    canonical=normalize(interval)
    if canonical.collapsed:
        return iter(())
    stepper=requireStepper(canonical)
    lower=canonical.lower
    upper=canonical.upper
    if lower.isUnbounded(): # type:ignore
        if stepper.minimum is None:
            raise UnboundedIterationError(f'Cannot iterate upwards from the unbounded lower side of {interval}')
        start=stepper.minimum
    else:
        start=lower.value # type:ignore
    return _walk(start,upper.value,stepper.nextUpper,operator.gt) # type:ignore


def iterRight(interval:Interval)->typing.Iterator[typing.Any]:
    """
    Every value of the interval, starting at the upper end and moving down

    Each call returns a new, independent iterator.
    If the lower side is unbounded the iterator never ends
    (unless the type runs out of values), so bound it yourself

    :raises NotSteppableError: if the element type is continuous
    :raises UnboundedIterationError: if the upper side is unbounded and the
        type has no maximum to start from
    """
    canonical=normalize(interval)
    if canonical.collapsed:
        return iter(())
    stepper=requireStepper(canonical)
    lower=canonical.lower
    upper=canonical.upper
    if upper.isUnbounded(): # type:ignore
        if stepper.maximum is None:
            raise UnboundedIterationError(f'Cannot iterate downwards from the unbounded upper side of {interval}')
        start=stepper.maximum
    else:
        start=upper.value # type:ignore
    return _walk(start,lower.value,stepper.nextLower,operator.lt) # type:ignore

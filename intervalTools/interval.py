"""
A single range of values over an ordered type
"""
import typing

from intervalTools.boundary import Boundary,BoundKind,ValueT
from intervalTools.config.settings import getSettings
from intervalTools.steppable import Stepper,stepperFor

IntervalCompatible=typing.Any # a point, a (low,high) pair, or an Interval


def asInterval(item:typing.Union["Interval",IntervalCompatible])->"Interval":
    """
    Convert something interval-like to an Interval

    :item: an Interval (returned as-is), a (low,high) tuple (bounded according
        to the configured lowInclusive/highInclusive defaults), or a single
        point (a degenerate closed interval)

    NOTE: any 2-tuple is taken to be a (low,high) pair, so a point whose
    value is itself a 2-tuple must be given as Interval.point(value).
    Lists are always points.
    """
    if isinstance(item,Interval):
        return item
    if isinstance(item,tuple) and len(item)==2:
        settings=getSettings()
        low,high=item
        return Interval(
            Boundary(BoundKind.CLOSED if settings.lowInclusive else BoundKind.OPEN,low),
            Boundary(BoundKind.CLOSED if settings.highInclusive else BoundKind.OPEN,high))
    return Interval.point(item)


def _inverted(lower:Boundary,upper:Boundary)->bool:
    """
    True if no value can lie between lower and upper
    """
    if lower.isUnbounded() or upper.isUnbounded():
        return False
    if lower.value>upper.value:
        return True
    if lower.value==upper.value:
        return not (lower.isClosed() and upper.isClosed())
    return False


def _detectStepper(lower:Boundary,upper:Boundary)->typing.Optional[Stepper]:
    """
    The stepper for the finite boundary values, if they all agree on one

    eg, (0,2.5) mixes an int with a float, so it is continuous
    """
    steppers=[stepperFor(bound.value) for bound in (lower,upper) if not bound.isUnbounded()]
    if not steppers:
        return None
    for stepper in steppers[1:]:
        if stepper is not steppers[0]:
            return None
    return steppers[0]


class Interval(typing.Generic[ValueT]):
    """
    A contiguous range of values, each side of which may be
    open, closed, or unbounded.

    There is also a distinguished Empty interval.  Building an interval
    whose lower side lies above its upper side gives Empty rather than
    an error.

    Intervals are values: nothing here modifies an interval in place,
    every operation returns a new one.

    The stepper decides whether the element type is discrete.  If one
    is not given, it is chosen from the boundary values when the interval
    is built.
    """

    __slots__=('_lower','_upper','_stepper')

    # ---- Object housekeeping ----
    def __init__(self,
        lower:typing.Optional[Boundary[ValueT]]=None,
        upper:typing.Optional[Boundary[ValueT]]=None,
        stepper:typing.Optional[Stepper]=None):
        """
        :lower: the lower boundary (if both boundaries are None, the interval is Empty)
        :upper: the upper boundary (if None, same as lower)
        :stepper: successor/predecessor for the element type
            (if None, looked up from the boundary values)
        """
        if lower is None and upper is None:
            self._lower:typing.Optional[Boundary[ValueT]]=None
            self._upper:typing.Optional[Boundary[ValueT]]=None
            self._stepper:typing.Optional[Stepper]=stepper
            return
        if lower is None:
            lower=upper
        elif upper is None:
            upper=lower
        if stepper is None:
            stepper=_detectStepper(lower,upper) # type:ignore
        self._stepper=stepper
        if _inverted(lower,upper): # type:ignore
            self._lower=None
            self._upper=None
        else:
            self._lower=lower
            self._upper=upper

    @classmethod
    def empty(cls)->"Interval[ValueT]":
        """
        The interval that contains nothing
        """
        return cls()

    @classmethod
    def closed(cls,low:ValueT,high:ValueT,stepper:typing.Optional[Stepper]=None)->"Interval[ValueT]":
        """
        [low,high]
        """
        return cls(Boundary.closed(low),Boundary.closed(high),stepper)

    @classmethod
    def open(cls,low:ValueT,high:ValueT,stepper:typing.Optional[Stepper]=None)->"Interval[ValueT]":
        """
        (low,high)
        """
        return cls(Boundary.open(low),Boundary.open(high),stepper)

    @classmethod
    def leftOpen(cls,low:ValueT,high:ValueT,stepper:typing.Optional[Stepper]=None)->"Interval[ValueT]":
        """
        (low,high]
        """
        return cls(Boundary.open(low),Boundary.closed(high),stepper)

    @classmethod
    def rightOpen(cls,low:ValueT,high:ValueT,stepper:typing.Optional[Stepper]=None)->"Interval[ValueT]":
        """
        [low,high)
        """
        return cls(Boundary.closed(low),Boundary.open(high),stepper)

    @classmethod
    def atLeast(cls,low:ValueT,stepper:typing.Optional[Stepper]=None)->"Interval[ValueT]":
        """
        [low,+inf)
        """
        return cls(Boundary.closed(low),Boundary.unbounded(),stepper)

    @classmethod
    def greaterThan(cls,low:ValueT,stepper:typing.Optional[Stepper]=None)->"Interval[ValueT]":
        """
        (low,+inf)
        """
        return cls(Boundary.open(low),Boundary.unbounded(),stepper)

    @classmethod
    def atMost(cls,high:ValueT,stepper:typing.Optional[Stepper]=None)->"Interval[ValueT]":
        """
        (-inf,high]
        """
        return cls(Boundary.unbounded(),Boundary.closed(high),stepper)

    @classmethod
    def lessThan(cls,high:ValueT,stepper:typing.Optional[Stepper]=None)->"Interval[ValueT]":
        """
        (-inf,high)
        """
        return cls(Boundary.unbounded(),Boundary.open(high),stepper)

    @classmethod
    def unbounded(cls,stepper:typing.Optional[Stepper]=None)->"Interval[ValueT]":
        """
        (-inf,+inf)

        Since there is no value to detect the element type from,
        pass a stepper to make it discrete.
        """
        return cls(Boundary.unbounded(),Boundary.unbounded(),stepper)

    @classmethod
    def point(cls,value:ValueT,stepper:typing.Optional[Stepper]=None)->"Interval[ValueT]":
        """
        [value,value]
        """
        return cls(Boundary.closed(value),Boundary.closed(value),stepper)

    # ---- Values ----
    @property
    def lower(self)->typing.Optional[Boundary[ValueT]]:
        """
        the lower boundary (None for the Empty interval)
        """
        return self._lower

    @property
    def upper(self)->typing.Optional[Boundary[ValueT]]:
        """
        the upper boundary (None for the Empty interval)
        """
        return self._upper

    @property
    def lowerPoint(self)->typing.Optional[ValueT]:
        """
        NOTE: may not be in the interval if the lower side is open
        """
        if self._lower is None:
            return None
        return self._lower.value

    @property
    def upperPoint(self)->typing.Optional[ValueT]:
        """
        NOTE: may not be in the interval if the upper side is open
        """
        if self._upper is None:
            return None
        return self._upper.value

    @property
    def stepper(self)->typing.Optional[Stepper]:
        return self._stepper

    @property
    def collapsed(self)->bool:
        """
        True for the Empty interval itself.

        See also isEmpty(), which also catches intervals such as the
        integers (1,2) that only become Empty once normalized.
        """
        return self._lower is None

    def isDiscrete(self)->bool:
        return self._stepper is not None

    def isEmpty(self)->bool:
        """
        Does this interval contain no values at all?
        """
        return self.normalized().collapsed

    def isDegenerate(self)->bool:
        """
        Does this interval contain exactly one value?
        """
        canonical=self.normalized()
        if canonical.collapsed:
            return False
        return canonical._lower.isClosed() and canonical._upper.isClosed() \
            and canonical._lower.value==canonical._upper.value # type:ignore

    def isBounded(self)->bool:
        """
        Is this a non-empty interval with a value on both sides?
        """
        if self.collapsed:
            return False
        return not (self._lower.isUnbounded() or self._upper.isUnbounded()) # type:ignore

    @property
    def width(self)->typing.Any:
        """
        this is exactly the same as self.upperPoint-self.lowerPoint

        None if the interval is empty or unbounded
        """
        if not self.isBounded():
            return None
        return self._upper.value-self._lower.value # type:ignore

    # ---- Canonical form, iteration, combination ----
    def normalized(self)->"Interval[ValueT]":
        """
        This interval in canonical form (see intervalTools.normalize)
        """
        from intervalTools.normalize import normalize
        return normalize(self)

    def iterLeft(self)->typing.Iterator[ValueT]:
        """
        Every value from the lower end upwards
        """
        from intervalTools.iteration import iterLeft
        return iterLeft(self)

    def iterRight(self)->typing.Iterator[ValueT]:
        """
        Every value from the upper end downwards
        """
        from intervalTools.iteration import iterRight
        return iterRight(self)

    def __iter__(self)->typing.Iterator[ValueT]:
        return self.iterLeft()

    def widen(self,other:"Interval[ValueT]")->typing.Optional["Interval[ValueT]"]:
        """
        The union of this and another interval,
        or None if there would be a gap between them
        """
        from intervalTools.widen import widen
        return widen(self,other)
    union=widen

    def intersect(self,other:"Interval[ValueT]")->"Interval[ValueT]":
        """
        The values in both this and another interval
        """
        from intervalTools.widen import intersect
        return intersect(self,other)
    intersection=intersect

    def overlaps(self,other:"Interval[ValueT]")->bool:
        """
        Do we share any value with another interval?
        """
        return not self.intersect(other).collapsed
    intersects=overlaps

    def contains(self,item:typing.Union[ValueT,"Interval[ValueT]"])->bool:
        """
        determine if this contains a value or entirely contains another interval

        Examples:
            Interval.rightOpen(0.0,2.0).contains(1.0) -> True
            Interval.rightOpen(0.0,2.0).contains(2.0) -> False
            Interval.closed(1,10).contains(Interval.open(0,5)) -> True
        """
        if isinstance(item,Interval):
            other=item.normalized()
            if other.collapsed:
                return True
            canonical=self.normalized()
            if canonical.collapsed:
                return False
            return canonical._lower.lowerKey()<=other._lower.lowerKey() \
                and other._upper.upperKey()<=canonical._upper.upperKey() # type:ignore
        if self.collapsed:
            return False
        lower=self._lower
        if lower.isClosed() and item<lower.value: # type:ignore
            return False
        if lower.isOpen() and item<=lower.value: # type:ignore
            return False
        upper=self._upper
        if upper.isClosed() and item>upper.value: # type:ignore
            return False
        if upper.isOpen() and item>=upper.value: # type:ignore
            return False
        return True

    def __contains__(self,item:typing.Any)->bool:
        return self.contains(item)

    def containedBy(self,other:"Interval[ValueT]")->bool:
        """
        determine if this is contained by another interval
        """
        return other.contains(self)

    # ---- Moving the boundaries ----
    def _moved(self,lowDelta:typing.Any,highDelta:typing.Any)->"Interval[ValueT]":
        """
        Utility to build a copy with the finite boundary values offset
        """
        if self.collapsed:
            return self
        lower=self._lower
        upper=self._upper
        if lowDelta is not None and not lower.isUnbounded(): # type:ignore
            lower=lower.withValue(lower.value+lowDelta) # type:ignore
        if highDelta is not None and not upper.isUnbounded(): # type:ignore
            upper=upper.withValue(upper.value+highDelta) # type:ignore
        stepper=self._stepper
        if _detectStepper(self._lower,self._upper) is not None \
            and _detectStepper(lower,upper) is None: # type:ignore
            # moved onto a continuous type, eg [1,3] shifted by 0.5
            stepper=None
        return self.__class__(lower,upper,stepper)

    def shifted(self,amount:typing.Any)->"Interval[ValueT]":
        """
        Shift the entire interval relative to its current position

        Interval.closed(5,7).shifted(-3)=Interval.closed(2,4)
        """
        return self._moved(amount,amount)

    def leftExtended(self,amount:typing.Any)->"Interval[ValueT]":
        """
        Move the lower side down by amount
        """
        return self._moved(-amount,None)

    def rightExtended(self,amount:typing.Any)->"Interval[ValueT]":
        """
        Move the upper side up by amount
        """
        return self._moved(None,amount)

    def leftCropped(self,amount:typing.Any)->"Interval[ValueT]":
        """
        Move the lower side up by amount

        Cropping past the upper side gives Empty
        """
        return self._moved(amount,None)

    def rightCropped(self,amount:typing.Any)->"Interval[ValueT]":
        """
        Move the upper side down by amount

        Cropping past the lower side gives Empty
        """
        return self._moved(None,-amount)

    # ---- Comparison ----
    def __eq__(self,other:typing.Any)->bool:
        if not isinstance(other,Interval):
            return NotImplemented
        return self._lower==other._lower and self._upper==other._upper

    def __hash__(self)->int:
        return hash((self._lower,self._upper))

    # ---- Stringification ----
    def __str__(self)->str:
        """
        Interval notation, eg "[1, 5)" or "(-inf, 3]"
        """
        if self.collapsed:
            return '{}'
        lower=self._lower
        upper=self._upper
        if lower.isUnbounded(): # type:ignore
            low='(-inf'
        else:
            low=('[' if lower.isClosed() else '(')+str(lower.value) # type:ignore
        if upper.isUnbounded(): # type:ignore
            high='+inf)'
        else:
            high=str(upper.value)+(']' if upper.isClosed() else ')') # type:ignore
        return f'{low}, {high}'

    def __repr__(self)->str:
        if self.collapsed:
            return 'Interval.empty()'
        return f'Interval({self._lower!r},{self._upper!r})'

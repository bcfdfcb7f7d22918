"""
A set of disconnected intervals
"""
import typing
import bisect
import itertools
import logging

from intervalTools.interval import Interval,IntervalCompatible,asInterval
from intervalTools.iteration import iterLeft,requireStepper
from intervalTools.normalize import normalize
from intervalTools.widen import widen

logger=logging.getLogger(__name__)

SelectionItems=typing.Union[Interval,typing.Iterable[typing.Union[Interval,IntervalCompatible]]]


def _lowerKey(interval:Interval)->typing.Tuple[typing.Any,...]:
    return interval.lower.lowerKey() # type:ignore


class Selection:
    """
    A set of disconnected intervals

    The intervals are kept in canonical form, sorted by their lower
    boundaries, and never overlap or touch; anything that would is
    widened into a single interval as it is inserted.  The order things
    are inserted in makes no difference to the result.

    Iterating gives every value in every interval (discrete types only).
    Use intervalIter() to get the intervals themselves.

    NOTE: insert() and extend() modify the selection in place.  If a
    selection is shared between threads, guard it yourself.
    """
    def __init__(self,items:typing.Optional[SelectionItems]=None):
        """
        :items: an Interval, or any mix of Intervals and points
            (each point becomes a single-value interval)
        """
        self._intervals:typing.List[Interval]=[]
        if items is not None:
            self.extend(items)

    @classmethod
    def fromIterable(cls,items:SelectionItems)->"Selection":
        """
        Collect points and/or intervals into a selection
        """
        return cls(items)

    def copy(self)->"Selection":
        """
        Create a new copy of this selection
        """
        ret=self.__class__()
        ret._intervals=list(self._intervals) # pylint: disable=protected-access
        return ret

    # ---- Building ----
    def insert(self,item:typing.Union[Interval,IntervalCompatible])->None:
        """
        Add an interval (or a point), merging it with anything it touches

        eg
            inserting [4,6] into {[1,3], [8,9]}
            gives {[1,6], [8,9]}
        """
        merged=normalize(asInterval(item))
        if merged.collapsed:
            return
        kept:typing.List[Interval]=[]
        absorbed=0
        for existing in self._intervals:
            widened=widen(merged,existing)
            if widened is None:
                kept.append(existing)
            else:
                merged=widened
                absorbed+=1
        bisect.insort(kept,merged,key=_lowerKey)
        self._intervals=kept
        if absorbed:
            logger.debug('Inserted %s, merging %d existing interval(s)',merged,absorbed)

    def extend(self,items:SelectionItems)->None:
        """
        Add one or more intervals and/or points.

        NOTE: will reorder and compress where possible eg
            Selection().extend([Interval.closed(5,9),Interval.closed(3,5),Interval.closed(1,1)])
            will contain
            [1,1], [3,9]
        """
        if isinstance(items,Interval):
            items=[items]
        for item in items:
            self.insert(item)

    # ---- Values ----
    @property
    def intervals(self)->typing.Tuple[Interval,...]:
        """
        the disjoint intervals, lowest first
        """
        return tuple(self._intervals)

    @property
    def minimum(self)->typing.Any:
        """
        return the lower point of the lowest interval
        (None if it is unbounded)
        """
        if not self._intervals:
            raise IndexError("Selection has no members")
        return self._intervals[0].lowerPoint

    @property
    def maximum(self)->typing.Any:
        """
        return the upper point of the highest interval
        (None if it is unbounded)
        """
        if not self._intervals:
            raise IndexError("Selection has no members")
        return self._intervals[-1].upperPoint

    def contains(self,item:typing.Union[Interval,typing.Any])->bool:
        """
        This is the same as
            getInterval(item) is not None
        """
        return self.getInterval(item) is not None

    def __contains__(self,item:typing.Any)->bool:
        return self.contains(item)

    def getInterval(self,
        item:typing.Union[Interval,typing.Any]
        )->typing.Optional[Interval]:
        """
        Get the interval in the selection that contains the given item.
        If not in any of the intervals, returns None.
        """
        for interval in self._intervals:
            if interval.contains(item):
                return interval
        return None

    # ---- Iteration and access -----
    def intervalIter(self)->typing.Iterator[Interval]:
        """
        The disjoint intervals themselves, lowest first
        """
        return iter(tuple(self._intervals))

    def __iter__(self)->typing.Iterator[typing.Any]:
        """
        Every value in the selection, in ascending order

        :raises NotSteppableError: if the element type is continuous
        """
        for interval in self._intervals:
            requireStepper(interval)
        return itertools.chain.from_iterable(
            [iterLeft(interval) for interval in self._intervals])

    def __len__(self)->int:
        """
        The number of disjoint intervals (not the number of values)
        """
        return len(self._intervals)

    def __bool__(self)->bool:
        return bool(self._intervals)

    def __eq__(self,other:typing.Any)->bool:
        if not isinstance(other,Selection):
            return NotImplemented
        return self._intervals==other._intervals

    __hash__=None # type:ignore

    # ---- Stringification ----
    def __str__(self)->str:
        return '{'+', '.join(str(interval) for interval in self._intervals)+'}'

    def __repr__(self)->str:
        return f'Selection({self._intervals!r})'

"""
One side of an interval: a value paired with how it is bounded
"""
import typing
import enum

from intervalTools.errors import BoundaryError


class BoundKind(enum.Enum):
    """
    How a boundary treats its value
    """
    OPEN="open" # excludes the value
    CLOSED="closed" # includes the value
    UNBOUNDED="unbounded" # no value, extends forever


ValueT=typing.TypeVar("ValueT") # the ordered element type of a boundary


class Boundary(typing.Generic[ValueT]):
    """
    A value of an ordered type paired with a BoundKind.

    UNBOUNDED boundaries carry no value.
    Boundaries are immutable and hashable.
    """

    __slots__=('_kind','_value')

    def __init__(self,kind:BoundKind,value:typing.Optional[ValueT]=None):
        """
        :kind: OPEN, CLOSED, or UNBOUNDED
        :value: the boundary point (must be None when UNBOUNDED)
        """
        if kind is BoundKind.UNBOUNDED:
            if value is not None:
                raise BoundaryError(f'An unbounded boundary cannot carry a value ({value!r})')
        elif value is None:
            raise BoundaryError(f'A {kind.value} boundary requires a value')
        self._kind:BoundKind=kind
        self._value:typing.Optional[ValueT]=value

    @classmethod
    def open(cls,value:ValueT)->"Boundary[ValueT]":
        """
        A boundary that excludes value
        """
        return cls(BoundKind.OPEN,value)

    @classmethod
    def closed(cls,value:ValueT)->"Boundary[ValueT]":
        """
        A boundary that includes value
        """
        return cls(BoundKind.CLOSED,value)

    @classmethod
    def unbounded(cls)->"Boundary[ValueT]":
        """
        A boundary that extends forever
        """
        return cls(BoundKind.UNBOUNDED)

    # ---- Values ----
    @property
    def kind(self)->BoundKind:
        return self._kind

    @property
    def value(self)->typing.Optional[ValueT]:
        return self._value

    def isOpen(self)->bool:
        return self._kind is BoundKind.OPEN

    def isClosed(self)->bool:
        return self._kind is BoundKind.CLOSED

    def isUnbounded(self)->bool:
        return self._kind is BoundKind.UNBOUNDED

    def withValue(self,value:ValueT)->"Boundary[ValueT]":
        """
        Same kind of boundary at a different value

        Unbounded boundaries are returned unchanged
        """
        if self.isUnbounded():
            return self
        return self.__class__(self._kind,value)

    # ---- Lower/upper comparison keys ----
    def lowerKey(self)->typing.Tuple[typing.Any,...]:
        """
        Sort key for this boundary used as the lower side of an interval.

        Unbounded sorts first, and at the same value CLOSED sorts before OPEN
        since it admits more points.
        """
        if self.isUnbounded():
            return (0,)
        return (1,self._value,0 if self.isClosed() else 1)

    def upperKey(self)->typing.Tuple[typing.Any,...]:
        """
        Sort key for this boundary used as the upper side of an interval.

        Unbounded sorts last, and at the same value CLOSED sorts after OPEN.
        """
        if self.isUnbounded():
            return (2,)
        return (1,self._value,1 if self.isClosed() else 0)

    # ---- Combination ----
    def unionOrLeast(self,other:"Boundary[ValueT]")->"Boundary[ValueT]":
        """
        The more permissive of two lower boundaries.

        Precedence at a shared value: UNBOUNDED > CLOSED > OPEN
        """
        if self.lowerKey()<=other.lowerKey():
            return self
        return other

    def unionOrGreatest(self,other:"Boundary[ValueT]")->"Boundary[ValueT]":
        """
        The more permissive of two upper boundaries.

        Precedence at a shared value: UNBOUNDED > CLOSED > OPEN
        """
        if self.upperKey()>=other.upperKey():
            return self
        return other

    def intersectOrGreatest(self,other:"Boundary[ValueT]")->"Boundary[ValueT]":
        """
        The more restrictive of two lower boundaries.

        Precedence at a shared value: OPEN > CLOSED
        """
        if self.lowerKey()>=other.lowerKey():
            return self
        return other

    def intersectOrLeast(self,other:"Boundary[ValueT]")->"Boundary[ValueT]":
        """
        The more restrictive of two upper boundaries.

        Precedence at a shared value: OPEN > CLOSED
        """
        if self.upperKey()<=other.upperKey():
            return self
        return other

    # ---- Object housekeeping ----
    def __eq__(self,other:typing.Any)->bool:
        if not isinstance(other,Boundary):
            return NotImplemented
        return self._kind is other._kind and self._value==other._value

    def __hash__(self)->int:
        return hash((self._kind,self._value))

    def __repr__(self)->str:
        if self.isUnbounded():
            return 'Boundary.unbounded()'
        return f'Boundary.{self._kind.value}({self._value!r})'

"""
Successor/predecessor capability for discrete ordered types

A Stepper is the single switch that tells the rest of the library whether
an element type is discrete (integers, characters, dates, enumerations)
or continuous (floats and everything else without a stepper).
"""
import typing
import datetime
import enum

from intervalTools.errors import NotSteppableError

ValueT=typing.TypeVar("ValueT")


class Stepper(typing.Protocol[ValueT]):
    """
    Supplies the adjacent values of a discrete ordered type
    """
    minimum:typing.Optional[ValueT] # smallest value of the type, None if there is none
    maximum:typing.Optional[ValueT] # largest value of the type, None if there is none
    def nextUpper(self,value:ValueT)->typing.Optional[ValueT]: ... # noqa: E704
    def nextLower(self,value:ValueT)->typing.Optional[ValueT]: ... # noqa: E704


@typing.runtime_checkable
class Steppable(typing.Protocol):
    """
    A value that knows its own neighbours
    """
    def nextUpper(self)->typing.Optional["Steppable"]: ... # noqa: E704
    def nextLower(self)->typing.Optional["Steppable"]: ... # noqa: E704


class IntStepper:
    """
    Steps integers by one.

    Python ints are unbounded, but a minimum and/or maximum can be given
    to model fixed-width integer types.
    """
    def __init__(self,
        minimum:typing.Optional[int]=None,
        maximum:typing.Optional[int]=None):
        """ """
        self.minimum:typing.Optional[int]=minimum
        self.maximum:typing.Optional[int]=maximum

    def nextUpper(self,value:int)->typing.Optional[int]:
        if self.maximum is not None and value>=self.maximum:
            return None
        return value+1

    def nextLower(self,value:int)->typing.Optional[int]:
        if self.minimum is not None and value<=self.minimum:
            return None
        return value-1

    def __repr__(self)->str:
        return f'IntStepper({self.minimum},{self.maximum})'


INTEGER=IntStepper()
INT8=IntStepper(-2**7,2**7-1)
UINT8=IntStepper(0,2**8-1)
INT16=IntStepper(-2**15,2**15-1)
UINT16=IntStepper(0,2**16-1)
INT32=IntStepper(-2**31,2**31-1)
UINT32=IntStepper(0,2**32-1)
INT64=IntStepper(-2**63,2**63-1)
UINT64=IntStepper(0,2**64-1)


class BoolStepper:
    """
    False<True
    """
    minimum=False
    maximum=True

    def nextUpper(self,value:bool)->typing.Optional[bool]:
        if value:
            return None
        return True

    def nextLower(self,value:bool)->typing.Optional[bool]:
        if not value:
            return None
        return False


BOOL=BoolStepper()


class CharStepper:
    """
    Steps single-character strings through the unicode scalar values,
    skipping over the surrogate block
    """
    SURROGATE_LOW=0xD800
    SURROGATE_HIGH=0xDFFF
    minimum='\u0000'
    maximum='\U0010FFFF'

    def nextUpper(self,value:str)->typing.Optional[str]:
        codepoint=ord(value)
        if codepoint>=0x10FFFF:
            return None
        if codepoint==self.SURROGATE_LOW-1:
            return chr(self.SURROGATE_HIGH+1)
        return chr(codepoint+1)

    def nextLower(self,value:str)->typing.Optional[str]:
        codepoint=ord(value)
        if codepoint<=0:
            return None
        if codepoint==self.SURROGATE_HIGH+1:
            return chr(self.SURROGATE_LOW-1)
        return chr(codepoint-1)


CHAR=CharStepper()


class DateStepper:
    """
    Steps calendar dates one day at a time
    """
    minimum=datetime.date.min
    maximum=datetime.date.max
    ONE_DAY=datetime.timedelta(days=1)

    def nextUpper(self,value:datetime.date)->typing.Optional[datetime.date]:
        if value>=self.maximum:
            return None
        return value+self.ONE_DAY

    def nextLower(self,value:datetime.date)->typing.Optional[datetime.date]:
        if value<=self.minimum:
            return None
        return value-self.ONE_DAY


DATE=DateStepper()


def isOrderedEnum(enumType:typing.Type[enum.Enum])->bool:
    """
    Can the members of enumType be compared with < and <=?

    True of an IntEnum, or an Enum that defines the comparisons itself.
    A plain Enum cannot be ordered, so it cannot bound an interval.
    """
    members=list(enumType)
    if not members:
        return False
    try:
        members[0]<=members[-1] # pylint: disable=pointless-statement
    except TypeError:
        return False
    return True


class EnumStepper:
    """
    Steps through the members of an ordered enumeration

    (eg, an IntEnum)
    """
    def __init__(self,enumType:typing.Type[enum.Enum]):
        """
        :raises NotSteppableError: if the members cannot be ordered
        """
        if not isOrderedEnum(enumType):
            raise NotSteppableError(f'{enumType.__name__} members cannot be ordered')
        self.enumType:typing.Type[enum.Enum]=enumType
        self._members:typing.List[enum.Enum]=sorted(enumType) # type:ignore
        self._index:typing.Dict[enum.Enum,int]={
            member:i for i,member in enumerate(self._members)}
        self.minimum:typing.Optional[enum.Enum]=self._members[0] if self._members else None
        self.maximum:typing.Optional[enum.Enum]=self._members[-1] if self._members else None

    def nextUpper(self,value:enum.Enum)->typing.Optional[enum.Enum]:
        i=self._index[value]+1
        if i>=len(self._members):
            return None
        return self._members[i]

    def nextLower(self,value:enum.Enum)->typing.Optional[enum.Enum]:
        i=self._index[value]-1
        if i<0:
            return None
        return self._members[i]

    def __repr__(self)->str:
        return f'EnumStepper({self.enumType.__name__})'


class SelfStepper:
    """
    Delegates to values that implement the Steppable protocol themselves
    """
    minimum=None
    maximum=None

    def nextUpper(self,value:Steppable)->typing.Optional[Steppable]:
        return value.nextUpper()

    def nextLower(self,value:Steppable)->typing.Optional[Steppable]:
        return value.nextLower()


SELF=SelfStepper()


# registered element types.  A value of None marks a type as continuous,
# even if one of its base classes has a stepper.
_steppers:typing.Dict[type,typing.Optional[Stepper]]={
    bool:BOOL,
    int:INTEGER,
    str:CHAR,
    datetime.datetime:None,
    datetime.date:DATE,
    }
_enumSteppers:typing.Dict[typing.Type[enum.Enum],typing.Optional[EnumStepper]]={}


def registerStepper(valueType:type,stepper:typing.Optional[Stepper])->None:
    """
    Declare how values of valueType step.

    Passing None marks the type as continuous.
    """
    _steppers[valueType]=stepper


def stepperFor(value:typing.Any)->typing.Optional[Stepper]:
    """
    Find the stepper for a value's type, or None if the type is continuous
    """
    if value is None:
        return None
    if isinstance(value,enum.Enum):
        enumType=type(value)
        if enumType not in _enumSteppers:
            # a plain Enum has no order, and so no neighbours
            _enumSteppers[enumType]=EnumStepper(enumType) if isOrderedEnum(enumType) else None
        return _enumSteppers[enumType]
    for cls in type(value).__mro__:
        if cls in _steppers:
            if cls is str and len(value)!=1:
                # only single characters have neighbours
                return None
            return _steppers[cls]
    if isinstance(value,Steppable):
        return SELF
    return None

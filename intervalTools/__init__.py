"""
Intervals over ordered types, and disjoint sets of them

    from intervalTools import Interval,Selection
    Selection([1,2,3,5,6]).intervals -> ([1, 3], [5, 6])
"""
from intervalTools.errors import IntervalError,BoundaryError,NotSteppableError,UnboundedIterationError
from intervalTools.boundary import BoundKind,Boundary
from intervalTools.steppable import (
    Stepper,Steppable,IntStepper,BoolStepper,CharStepper,DateStepper,EnumStepper,SelfStepper,
    INTEGER,INT8,UINT8,INT16,UINT16,INT32,UINT32,INT64,UINT64,BOOL,CHAR,DATE,
    isOrderedEnum,registerStepper,stepperFor)
from intervalTools.interval import Interval,asInterval
from intervalTools.normalize import normalize,isCanonical
from intervalTools.iteration import iterLeft,iterRight,requireStepper
from intervalTools.widen import widen,isContiguous,intersect,enclose
from intervalTools.selection import Selection

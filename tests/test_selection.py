"""
Tests for Selection, the set of disjoint intervals
"""
import itertools
import logging

import pytest
from hypothesis import given,strategies as st

from intervalTools import Interval,NotSteppableError,Selection
from tests.conftest import boundedIntIntervals,floatIntervals,intIntervals


def assertDisjoint(selection:Selection)->None:
    """
    sorted ascending, and no two members overlap or touch
    """
    members=selection.intervals
    for a,b in zip(members,members[1:]):
        assert a.lower.lowerKey()<b.lower.lowerKey()
        assert a.widen(b) is None
    for member in members:
        assert member==member.normalized()
        assert not member.collapsed


class TestInsert:

    def test_empty(self)->None:
        selection=Selection()
        assert len(selection)==0
        assert not selection
        assert list(selection)==[]
        assert list(selection.intervalIter())==[]

    def test_order_independence(self)->None:
        a=Selection()
        a.insert(Interval.closed(4,6))
        a.insert(Interval.closed(1,3))
        b=Selection()
        b.insert(Interval.closed(1,3))
        b.insert(Interval.closed(4,6))
        assert a==b
        assert a.intervals==(Interval.closed(1,6),)

    def test_keeps_ascending_order(self)->None:
        selection=Selection([Interval.closed(20,25),Interval.closed(1,3),Interval.closed(10,12)])
        assert selection.intervals==(
            Interval.closed(1,3),Interval.closed(10,12),Interval.closed(20,25))

    def test_bridging_insert_merges_several(self)->None:
        selection=Selection([Interval.closed(1,3),Interval.closed(6,8),Interval.closed(12,14)])
        selection.insert(Interval.closed(4,12))
        assert selection.intervals==(Interval.closed(1,14),)

    def test_inserts_are_normalized(self)->None:
        selection=Selection([Interval.open(0,4)])
        assert selection.intervals==(Interval.closed(1,3),)

    def test_empty_insert_is_ignored(self)->None:
        selection=Selection([Interval.closed(1,3)])
        selection.insert(Interval.empty())
        selection.insert(Interval.open(7,8))
        assert selection.intervals==(Interval.closed(1,3),)

    def test_unbounded_swallows_everything_after(self)->None:
        selection=Selection([Interval.closed(1,3),Interval.closed(10,12)])
        selection.insert(Interval.atLeast(4))
        assert selection.intervals==(Interval.atLeast(1),)

    def test_continuous(self)->None:
        selection=Selection([
            Interval.rightOpen(1.0,2.0),
            Interval.closed(2.0,3.0),
            Interval.open(5.0,6.0),
            Interval.open(6.0,7.0),
            ])
        assert selection.intervals==(
            Interval.closed(1.0,3.0),Interval.open(5.0,6.0),Interval.open(6.0,7.0))

    def test_int_and_float_members_keep_their_gap(self)->None:
        selection=Selection([Interval.closed(0,1),Interval.closed(1.5,3.0)])
        assert len(selection)==2
        assert 1.25 not in selection

    def test_extend_single_interval(self)->None:
        selection=Selection()
        selection.extend(Interval.closed(1,2))
        assert selection.intervals==(Interval.closed(1,2),)

    def test_reorders_and_compresses(self)->None:
        selection=Selection()
        selection.extend([Interval.closed(5,9),Interval.closed(3,5),Interval.closed(1,1)])
        assert selection.intervals==(Interval.closed(1,1),Interval.closed(3,9))

    def test_logs_merges(self,caplog:pytest.LogCaptureFixture)->None:
        with caplog.at_level(logging.DEBUG,logger="intervalTools"):
            Selection([Interval.closed(1,3),Interval.closed(4,6)])
        assert any("merging 1 existing" in record.getMessage() for record in caplog.records)


class TestPoints:

    def test_round_trip(self)->None:
        selection=Selection.fromIterable([1,2,3,5,6])
        assert selection.intervals==(Interval.closed(1,3),Interval.closed(5,6))
        assert list(selection)==[1,2,3,5,6]

    def test_point_order_irrelevant(self)->None:
        assert Selection([6,3,1,5,2])==Selection([1,2,3,5,6])

    def test_duplicates(self)->None:
        assert Selection([1,1,1]).intervals==(Interval.point(1),)

    def test_mixed_points_and_intervals(self)->None:
        selection=Selection([Interval.closed(1,3),4,Interval.closed(10,11),9])
        assert selection.intervals==(Interval.closed(1,4),Interval.closed(9,11))

    def test_chars(self)->None:
        selection=Selection("hello world")
        assert ''.join(selection)==' dehlorw'

    def test_pairs_follow_settings(self)->None:
        selection=Selection([(1,4),(4,6)])
        assert selection.intervals==(Interval.closed(1,5),)

    def test_tuple_valued_points(self)->None:
        selection=Selection([Interval.point((1,2)),Interval.point((3,4))])
        assert selection.intervals==(Interval.point((1,2)),Interval.point((3,4)))
        assert (1,2) in selection

    def test_unbounded_iteration(self)->None:
        selection=Selection([Interval.closed(1,2),Interval.atLeast(5)])
        assert list(itertools.islice(selection,5))==[1,2,5,6,7]

    def test_iteration_is_a_snapshot(self)->None:
        selection=Selection([1,2])
        points=iter(selection)
        selection.insert(3)
        assert list(points)==[1,2]
        assert list(selection)==[1,2,3]


class TestContinuousIteration:

    def test_points_rejected(self)->None:
        selection=Selection([Interval.closed(1.0,2.0)])
        with pytest.raises(NotSteppableError):
            iter(selection)

    def test_intervals_available(self)->None:
        selection=Selection([Interval.closed(1.0,2.0),Interval.closed(3.0,4.0)])
        assert list(selection.intervalIter())==[Interval.closed(1.0,2.0),Interval.closed(3.0,4.0)]


class TestAccess:

    def test_intervals_is_a_copy(self)->None:
        selection=Selection([1])
        members=selection.intervals
        selection.insert(5)
        assert members==(Interval.point(1),)
        assert len(selection)==2

    def test_minimum_maximum(self)->None:
        selection=Selection([Interval.closed(3,4),Interval.closed(8,9)])
        assert selection.minimum==3
        assert selection.maximum==9
        assert Selection([Interval.atMost(3)]).minimum is None

    def test_minimum_of_nothing(self)->None:
        with pytest.raises(IndexError):
            Selection().minimum
        with pytest.raises(IndexError):
            Selection().maximum

    def test_contains(self)->None:
        selection=Selection([Interval.closed(1,3),Interval.closed(8,9)])
        assert 2 in selection
        assert 5 not in selection
        assert selection.contains(Interval.closed(8,9))
        assert not selection.contains(Interval.closed(2,8))

    def test_get_interval(self)->None:
        selection=Selection([Interval.closed(1,3),Interval.closed(8,9)])
        assert selection.getInterval(8)==Interval.closed(8,9)
        assert selection.getInterval(5) is None

    def test_copy_is_independent(self)->None:
        selection=Selection([1])
        other=selection.copy()
        other.insert(10)
        assert len(selection)==1
        assert len(other)==2

    def test_str(self)->None:
        assert str(Selection([1,2,3,5,6]))=='{[1, 3], [5, 6]}'
        assert str(Selection())=='{}'


class TestSelectionProperties:

    @given(st.lists(intIntervals,max_size=8))
    def test_invariant_holds(self,items:list)->None:
        assertDisjoint(Selection(items))

    @given(st.lists(floatIntervals,max_size=8))
    def test_continuous_invariant_holds(self,items:list)->None:
        assertDisjoint(Selection(items))

    @given(st.lists(intIntervals,max_size=8),st.randoms())
    def test_insertion_order_irrelevant(self,items:list,random)->None:
        shuffled=list(items)
        random.shuffle(shuffled)
        assert Selection(items)==Selection(shuffled)

    @given(st.sets(st.integers(-30,30)))
    def test_points_round_trip(self,points:set)->None:
        assert list(Selection(points))==sorted(points)

    @given(st.lists(boundedIntIntervals,max_size=6))
    def test_same_points_as_members(self,items:list)->None:
        expected=set()
        for item in items:
            expected.update(item)
        assert list(Selection(items))==sorted(expected)

"""
Tests for Boundary construction, ordering keys, and combination
"""
import pytest

from intervalTools import Boundary,BoundKind,BoundaryError


class TestBoundaryConstruction:
    """Each kind carries (or refuses) a value."""

    def test_closed(self)->None:
        b=Boundary.closed(3)
        assert b.kind is BoundKind.CLOSED
        assert b.value==3
        assert b.isClosed() and not b.isOpen() and not b.isUnbounded()

    def test_open(self)->None:
        b=Boundary.open(3)
        assert b.kind is BoundKind.OPEN
        assert b.isOpen()

    def test_unbounded_has_no_value(self)->None:
        b=Boundary.unbounded()
        assert b.value is None
        assert b.isUnbounded()

    def test_unbounded_with_value_rejected(self)->None:
        with pytest.raises(BoundaryError):
            Boundary(BoundKind.UNBOUNDED,3)

    def test_closed_without_value_rejected(self)->None:
        with pytest.raises(ValueError):
            Boundary(BoundKind.CLOSED)

    def test_zero_is_a_value(self)->None:
        assert Boundary.open(0).value==0

    def test_equality_and_hash(self)->None:
        assert Boundary.closed(1)==Boundary.closed(1)
        assert Boundary.closed(1)!=Boundary.open(1)
        assert len({Boundary.closed(1),Boundary.closed(1),Boundary.unbounded()})==2

    def test_with_value(self)->None:
        assert Boundary.open(1).withValue(5)==Boundary.open(5)
        assert Boundary.unbounded().withValue(5)==Boundary.unbounded()

    def test_repr(self)->None:
        assert repr(Boundary.closed(1))=='Boundary.closed(1)'
        assert repr(Boundary.unbounded())=='Boundary.unbounded()'


class TestBoundaryCombination:
    """Precedence UNBOUNDED > CLOSED > OPEN for unions, OPEN > CLOSED for intersections."""

    def test_union_lower_prefers_closed_at_same_value(self)->None:
        assert Boundary.open(0).unionOrLeast(Boundary.closed(0))==Boundary.closed(0)
        assert Boundary.closed(0).unionOrLeast(Boundary.open(0))==Boundary.closed(0)

    def test_union_upper_prefers_closed_at_same_value(self)->None:
        assert Boundary.open(0).unionOrGreatest(Boundary.closed(0))==Boundary.closed(0)

    def test_union_prefers_unbounded(self)->None:
        assert Boundary.closed(0).unionOrLeast(Boundary.unbounded())==Boundary.unbounded()
        assert Boundary.unbounded().unionOrGreatest(Boundary.closed(0))==Boundary.unbounded()

    def test_union_picks_extreme_value(self)->None:
        assert Boundary.open(1).unionOrLeast(Boundary.closed(2))==Boundary.open(1)
        assert Boundary.open(1).unionOrGreatest(Boundary.closed(2))==Boundary.closed(2)

    def test_intersect_prefers_open_at_same_value(self)->None:
        assert Boundary.closed(0).intersectOrGreatest(Boundary.open(0))==Boundary.open(0)
        assert Boundary.closed(0).intersectOrLeast(Boundary.open(0))==Boundary.open(0)

    def test_intersect_picks_inner_value(self)->None:
        assert Boundary.unbounded().intersectOrGreatest(Boundary.closed(2))==Boundary.closed(2)
        assert Boundary.closed(1).intersectOrLeast(Boundary.closed(2))==Boundary.closed(1)

    def test_lower_key_order(self)->None:
        keys=[Boundary.unbounded().lowerKey(),Boundary.closed(1).lowerKey(),Boundary.open(1).lowerKey()]
        assert keys==sorted(keys)

    def test_upper_key_order(self)->None:
        keys=[Boundary.open(1).upperKey(),Boundary.closed(1).upperKey(),Boundary.unbounded().upperKey()]
        assert keys==sorted(keys)

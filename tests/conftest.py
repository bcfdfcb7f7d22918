"""
Shared pytest fixtures and hypothesis strategies for intervalTools tests
"""
import typing

import pytest
from hypothesis import strategies as st

from intervalTools import Boundary,Interval
from intervalTools.config.settings import resetSettings


@pytest.fixture(autouse=True)
def _freshSettings(monkeypatch:pytest.MonkeyPatch)->typing.Iterator[None]:
    """
    Every test starts from settings read from a clean environment
    """
    for name in ("LOWINCLUSIVE","HIGHINCLUSIVE","VERBOSE","LOGJSON"):
        monkeypatch.delenv(f"INTERVALTOOLS_{name}",raising=False)
    resetSettings()
    yield
    resetSettings()


def boundaries(values:st.SearchStrategy)->st.SearchStrategy:
    """
    Boundaries of any kind over the given values
    """
    return st.one_of(
        st.just(Boundary.unbounded()),
        values.map(Boundary.open),
        values.map(Boundary.closed))


def intervals(values:st.SearchStrategy)->st.SearchStrategy:
    """
    Intervals of any shape over the given values (including inverted ones,
    which collapse to Empty)
    """
    return st.builds(Interval,boundaries(values),boundaries(values))


smallInts=st.integers(-20,20)
intIntervals=intervals(smallInts)
boundedIntIntervals=st.builds(
    Interval,smallInts.map(Boundary.closed),smallInts.map(Boundary.closed))
floatIntervals=intervals(st.floats(-20.0,20.0,allow_nan=False))

"""
Shared test fixtures: reference material vectors and a fresh screener session.
"""

import pytest

from mof_screener import InputVector, ScreenerSession


@pytest.fixture
def default_inputs() -> InputVector:
    return InputVector()


@pytest.fixture
def low_porosity_inputs() -> InputVector:
    """A dense, low-surface-area framework; both predictions come out negative."""
    return InputVector(gsa=500, vsa=200, vf=0.2, pv=0.3, density=0.3, lcd=5, pld=3)


@pytest.fixture
def session() -> ScreenerSession:
    return ScreenerSession()

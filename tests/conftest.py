import numpy as np
import pytest
from core.cached_matrix import CachedMatrix
from utils.linops import invert

@pytest.fixture
def rotation():
    # Scaled rotation by 45 degrees; inverse is [[0.5, -0.5], [0.5, 0.5]]
    return np.array([[1.0, 1.0], [-1.0, 1.0]])

@pytest.fixture
def cached(rotation):
    return CachedMatrix(rotation)

class CountingInvert:
    """Inversion primitive that records every matrix it is asked to invert."""
    def __init__(self):
        self.calls = []

    def __call__(self, matrix):
        self.calls.append(np.array(matrix, copy=True))
        return invert(matrix)

    @property
    def count(self):
        return len(self.calls)

@pytest.fixture
def counting_invert():
    return CountingInvert()

@pytest.fixture
def dummy_logger(caplog):
    caplog.set_level("DEBUG")
    return caplog

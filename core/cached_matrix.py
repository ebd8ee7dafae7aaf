# core/cached_matrix.py
"""
Mutable holder for a square matrix and the inverse computed for it.

The container never computes anything itself; ``core.solve.cache_solve`` is
the only intended writer of the cached inverse. Both fields are private
copies: arrays are stored read-only, anything else is copied on the way in
and on the way out, so callers can never edit the container's state.
"""
import copy
from typing import Any, Optional

import numpy as np


def _owned(value: Any) -> Any:
    """Deep copy of *value*; ndarrays are additionally made read-only."""
    value = copy.deepcopy(value)
    if isinstance(value, np.ndarray):
        value.flags.writeable = False
    return value


class CachedMatrix:
    """
    A matrix together with an optional cached inverse.

    Replacing the matrix always drops the cached inverse, so a stored inverse
    belongs to the current matrix.
    """
    __slots__ = ("_matrix", "_inverse")

    def __init__(self, matrix: Any):
        self._matrix = _owned(matrix)     # assumed square and invertible, not checked
        self._inverse = None

    def get_matrix(self) -> Any:
        if isinstance(self._matrix, np.ndarray):
            return self._matrix
        return copy.deepcopy(self._matrix)

    def set_matrix(self, new_matrix: Any) -> None:
        """Replace the matrix and invalidate the cached inverse."""
        self._matrix = _owned(new_matrix)
        self._inverse = None

    def get_cached_inverse(self) -> Optional[np.ndarray]:
        return self._inverse

    def set_cached_inverse(self, inverse: np.ndarray) -> None:
        """Store a read-only copy of *inverse*; the caller vouches that it matches the matrix."""
        inverse = np.array(inverse, copy=True)
        inverse.flags.writeable = False
        self._inverse = inverse

    def has_cached_inverse(self) -> bool:
        return self._inverse is not None

    def __repr__(self):
        shape = np.shape(self._matrix)
        state = "cached" if self.has_cached_inverse() else "empty"
        return f"<CachedMatrix shape={shape}, inverse={state}>"

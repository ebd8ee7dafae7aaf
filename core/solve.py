# core/solve.py
"""
Read-through cache of size one for matrix inverses.
"""
from typing import Callable

import numpy as np

from core.cached_matrix import CachedMatrix
from core.exceptions import ContainerError, MatrixInversionError
from utils.linops import invert as _default_invert
from utils.logging_config import get_logger

logger = get_logger(__name__)

InvertFn = Callable[[object], np.ndarray]


def cache_solve(container: CachedMatrix, invert: InvertFn = _default_invert) -> np.ndarray:
    """
    Return the inverse of the matrix held by *container*.

    The cached inverse is returned when present. Otherwise *invert* is applied
    to the current matrix and the result is stored back into the container.

    Args:
        container: The CachedMatrix to serve.
        invert: Square-matrix inversion primitive; defaults to
            ``utils.linops.invert``.

    Returns:
        The inverse matrix as a read-only array. Consecutive calls on an
        unchanged container return the same object.

    Raises:
        ContainerError: If *container* is not a CachedMatrix.
        MatrixInversionError: If the inversion primitive rejects the matrix.
            Nothing is cached in that case.
    """
    if not isinstance(container, CachedMatrix):
        raise ContainerError(
            f"Expected a CachedMatrix, got {type(container).__name__}"
        )

    inverse = container.get_cached_inverse()
    if inverse is not None:
        logger.debug("Returning cached inverse.")
        return inverse

    matrix = container.get_matrix()
    logger.debug("Cache miss: inverting matrix of shape %s.", np.shape(matrix))
    try:
        inverse = invert(matrix)
    except (np.linalg.LinAlgError, ValueError, TypeError) as exc:
        raise MatrixInversionError(f"Cannot invert matrix: {exc}") from exc

    container.set_cached_inverse(inverse)
    return container.get_cached_inverse()

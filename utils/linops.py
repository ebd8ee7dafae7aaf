# utils/linops.py
from __future__ import annotations
import numpy as np
import scipy.linalg as la


def invert(A: "np.ndarray|list") -> np.ndarray:
    """
    Dense inverse of a square matrix via LAPACK LU (getrf/getri).

    Raises numpy.linalg.LinAlgError for singular input, ValueError for
    non-square or non-2-D input and TypeError for non-numeric entries.
    """
    A = np.asarray(A)
    if A.dtype.kind not in "iufc":
        raise TypeError(f"expected a numeric matrix, got dtype {A.dtype}")
    if A.ndim != 2:
        raise ValueError(f"expected a 2-D matrix, got {A.ndim}-D input")
    return la.inv(A)

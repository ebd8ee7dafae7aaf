# core/exceptions.py

class CacheMatrixError(Exception):
    """Base exception for cached-inverse errors."""
    pass

class MatrixInversionError(CacheMatrixError):
    """Raised when the stored matrix cannot be inverted (singular, non-square, non-numeric)."""
    pass

class ContainerError(CacheMatrixError):
    """Raised when an inverse is requested from something that is not a CachedMatrix."""
    pass

class MatrixConfigError(CacheMatrixError):
    """Raised when a matrix file is missing, malformed or fails schema validation."""
    pass

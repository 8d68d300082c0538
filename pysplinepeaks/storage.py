import numpy as np

from .util import SplinePreconditionError




class GrowableStorage:
    """Backing storage for a spline that resizes to fit every build.

    Arrays are only reallocated when a build needs more breaks than the
    current allocation (or a different dtype), so rebuilding with fewer
    points reuses memory.
    """

    def __init__(self):
        self._breaks = np.zeros(0)
        self._coeffs = np.zeros((0, 4))

    @property
    def capacity(self):
        """Number of breaks that fit without reallocating."""
        return self._breaks.size

    def reserve(self, n, dtype=np.float64):
        """Returns (breaks, coeffs) arrays with room for n breaks."""
        if self._breaks.size < n or self._breaks.dtype != dtype:
            self._breaks = np.zeros(n, dtype=dtype)
            self._coeffs = np.zeros((n - 1, 4), dtype=dtype)
        return self._breaks, self._coeffs

    def copy(self):
        new = GrowableStorage()
        new._breaks = self._breaks.copy()
        new._coeffs = self._coeffs.copy()
        return new



class FixedStorage:
    """Backing storage preallocated for at most `capacity` breaks.

    Builds that need more breaks raise SplinePreconditionError instead of
    reallocating. Samples are cast to the storage dtype.
    """

    def __init__(self, capacity, dtype=np.float64):
        if capacity < 2:
            raise SplinePreconditionError("FixedStorage needs room for at least 2 breaks.")
        self._breaks = np.zeros(capacity, dtype=dtype)
        self._coeffs = np.zeros((capacity - 1, 4), dtype=dtype)

    @property
    def capacity(self):
        return self._breaks.size

    @property
    def dtype(self):
        return self._breaks.dtype

    def reserve(self, n, dtype=None):
        if n > self._breaks.size:
            raise SplinePreconditionError(
                f"Spline storage holds {self._breaks.size} breaks but {n} interpolation points were given; "
                "use GrowableStorage for inputs of unknown size."
            )
        return self._breaks, self._coeffs

    def copy(self):
        new = FixedStorage(self.capacity, dtype=self.dtype)
        new._breaks[:] = self._breaks
        new._coeffs[:] = self._coeffs
        return new

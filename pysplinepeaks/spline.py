import logging

import numpy as np
from scipy.interpolate import PPoly

from .storage import GrowableStorage
from .util import check_samples, SplinePreconditionError, SplineNotBuiltError
from .maxima import find_top_maxima


logger = logging.getLogger(__name__)




def _solve_symmetric_tridiagonal(diag, off, rhs):
    """Solves a symmetric positive definite tridiagonal system in place (Thomas algorithm).

    Parameters
    ----------
    diag : ndarray, shape (m,)
        Main diagonal. Overwritten with the eliminated pivots.
    off : ndarray, shape (m-1,)
        Sub/super-diagonal. Read only.
    rhs : ndarray, shape (m,)
        Right-hand side. Overwritten with the solution.

    Returns
    -------
    rhs : ndarray, shape (m,)
    """
    m = diag.size

    # forward elimination
    for i in range(1, m):
        w = off[i-1] / diag[i-1]
        diag[i] -= w * off[i-1]
        rhs[i] -= w * rhs[i-1]

    # back substitution
    rhs[m-1] /= diag[m-1]
    for i in range(m-2, -1, -1):
        rhs[i] = (rhs[i] - off[i] * rhs[i+1]) / diag[i]

    return rhs



def _cubic_coefficients(x, y):
    """Computes the (n-1, 4) coefficient table of the interpolating cubic spline.

    Row i holds (a, b, c, d) of a*h^3 + b*h^2 + c*h + d with h = x - x[i].
    The unknowns b at the two outer breaks are fixed at zero, so only the
    n-2 interior ones enter the tridiagonal system.
    """
    n = x.size
    dx = np.diff(x)
    slopes = np.diff(y) / dx
    coeffs = np.zeros((n - 1, 4), dtype=x.dtype)

    if n == 2:
        coeffs[0, 2] = slopes[0]
        coeffs[0, 3] = y[0]
        return coeffs

    # tridiagonal system for interior b's
    diag = 2.0 * (x[2:] - x[:-2])
    off = dx[1:-1].copy()
    rhs = 3.0 * (slopes[1:] - slopes[:-1])
    b = np.zeros(n, dtype=x.dtype)
    b[1:-1] = _solve_symmetric_tridiagonal(diag, off, rhs)

    coeffs[:, 0] = (b[1:] - b[:-1]) / (3.0 * dx)
    coeffs[:, 1] = b[:-1]
    coeffs[:, 2] = slopes - (2.0 * b[:-1] + b[1:]) * dx / 3.0
    coeffs[:, 3] = y[:-1]
    return coeffs




class Spline:
    """Piecewise cubic interpolant through ordered samples (x, y).

    Can be created empty and populated later with `set`, or built directly
    with `Spline(x, y)`. The breaks and coefficient table live in a storage
    strategy (GrowableStorage by default, FixedStorage for a preallocated
    upper bound on the number of samples).
    """

    def __init__(self, x=None, y=None, storage=None):

        if storage is None:
            self._storage = GrowableStorage()
        else:
            self._storage = storage
        self._num_breaks = 0
        self._breaks = None
        self._coeffs = None

        if (x is None) != (y is None):
            raise SplinePreconditionError("Both x and y must be given to build a spline.")
        if x is not None:
            self.set(x, y)



    def set(self, x, y):
        """(Re)builds the spline from samples. On failure the spline is left unchanged.
        """
        x, y = check_samples(x, y)
        n = x.size
        coeffs = _cubic_coefficients(x, y)

        breaks_store, coeffs_store = self._storage.reserve(n, x.dtype)
        breaks_store[:n] = x
        coeffs_store[:n-1, :] = coeffs
        self._breaks = breaks_store[:n]
        self._coeffs = coeffs_store[:n-1, :]
        self._num_breaks = n

        logger.debug("Built cubic spline with %d breaks on [%g, %g].", n, x[0], x[-1])
        return self


    @property
    def is_built(self):
        return self._num_breaks > 0

    @property
    def num_breaks(self):
        return self._num_breaks

    @property
    def num_segments(self):
        return max(self._num_breaks - 1, 0)

    @property
    def breaks(self):
        """Read-only view of the breaks.

        The view shares memory with the spline storage; a later `set` that fits
        the current allocation overwrites it. Copy it to keep the values.
        """
        self._assert_built()
        view = self._breaks.view()
        view.flags.writeable = False
        return view

    @property
    def coeffs(self):
        """Read-only view of the (num_breaks-1, 4) coefficient table.

        Shares memory with the spline storage like `breaks`.
        """
        self._assert_built()
        view = self._coeffs.view()
        view.flags.writeable = False
        return view


    def _assert_built(self):
        if not self.is_built:
            raise SplineNotBuiltError("Spline must be created first with interpolation points.")


    def segment_index(self, x):
        """Index of the segment containing x, clamped to the first/last segment.
        """
        self._assert_built()
        idx = np.searchsorted(self._breaks, x, side="right") - 1
        return np.clip(idx, 0, self._num_breaks - 2)


    def evaluate(self, x, segment=None):
        """Evaluates the spline at x.

        If segment is given, the cubic of that segment is used without
        searching; otherwise the containing segment is located. Queries outside
        the breaks extrapolate with the nearest boundary segment.
        """
        self._assert_built()
        scalar = np.ndim(x) == 0
        x = np.asarray(x, dtype=self._breaks.dtype)
        if segment is None:
            segment = self.segment_index(x)
        h = x - self._breaks[segment]
        a, b, c, d = (self._coeffs[segment, k] for k in range(4))
        result = ((a*h + b)*h + c)*h + d
        if scalar:
            return float(result)
        return result

    __call__ = evaluate


    def derivative(self, x, order=1, segment=None):
        """Evaluates the order-th derivative (0 to 3) of the spline at x.
        """
        self._assert_built()
        if order not in (0, 1, 2, 3):
            raise SplinePreconditionError(f"Derivative order must be 0, 1, 2 or 3, got {order}.")
        if order == 0:
            return self.evaluate(x, segment=segment)

        scalar = np.ndim(x) == 0
        x = np.asarray(x, dtype=self._breaks.dtype)
        if segment is None:
            segment = self.segment_index(x)
        h = x - self._breaks[segment]
        a, b, c = (self._coeffs[segment, k] for k in range(3))
        if order == 1:
            result = (3.0*a*h + 2.0*b)*h + c
        elif order == 2:
            result = 6.0*a*h + 2.0*b
        else:
            result = 6.0*a + 0.0*h
        if scalar:
            return float(result)
        return result


    def maxima(self, capacity=None, peaks=None):
        """Returns the BoundedPeakSet of the `capacity` highest local maxima.
        """
        return find_top_maxima(self, capacity=capacity, peaks=peaks)


    def to_ppoly(self):
        """Returns an equivalent scipy.interpolate.PPoly (extrapolating like this spline).
        """
        self._assert_built()
        return PPoly(self._coeffs.T.copy(), self._breaks.copy(), extrapolate=True)


    def copy(self):
        new = Spline.__new__(Spline)
        new._storage = self._storage.copy()
        new._num_breaks = self._num_breaks
        if self.is_built:
            breaks_store, coeffs_store = new._storage.reserve(self._num_breaks, self._breaks.dtype)
            new._breaks = breaks_store[:self._num_breaks]
            new._coeffs = coeffs_store[:self._num_breaks-1, :]
        else:
            new._breaks = None
            new._coeffs = None
        return new

    def __copy__(self):
        return self.copy()

    def __deepcopy__(self, memo):
        return self.copy()


    def __repr__(self):
        if not self.is_built:
            return "Spline(unbuilt)"
        return f"Spline(num_breaks={self._num_breaks}, domain=[{self._breaks[0]:g}, {self._breaks[-1]:g}])"




def build_spline(x, y, storage=None):
    """Builds a Spline from samples (x, y)."""
    return Spline(x, y, storage=storage)



def evaluate_spline(spline, x):
    """Evaluates a built spline at x."""
    return spline.evaluate(x)

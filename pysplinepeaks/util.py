import numpy as np




class SplinePreconditionError(ValueError):
    """Raised when samples or arguments violate a precondition of the spline engine."""
    pass


class SplineNotBuiltError(RuntimeError):
    """Raised when a spline is used before it has been built from samples."""
    pass




def check_samples(x, y):
    """Validates interpolation samples and returns them as 1D floating arrays.

    Parameters
    ----------
    x, y : array_like, shape (n,)
        Sample abscissas (finite, strictly increasing) and ordinates, n >= 2.

    Returns
    -------
    x, y : ndarray, shape (n,)
        Copies of the inputs with a common floating dtype.

    Raises
    ------
    SplinePreconditionError
        If the shapes mismatch, fewer than 2 samples are given, or x is not
        finite and strictly increasing.
    """
    x = np.array(x, copy=True)
    y = np.array(y, copy=True)
    if x.ndim != 1 or y.ndim != 1:
        raise SplinePreconditionError("x and y must be 1D arrays.")
    if x.size != y.size:
        raise SplinePreconditionError("x and y-coordinates of interpolation points must have same size.")
    if x.size < 2:
        raise SplinePreconditionError("Number of interpolation points is less than 2.")

    dtype = np.result_type(x.dtype, y.dtype)
    if not np.issubdtype(dtype, np.floating):
        dtype = np.float64
    x = x.astype(dtype, copy=False)
    y = y.astype(dtype, copy=False)

    if not np.all(np.isfinite(x)):
        raise SplinePreconditionError("Break points must be finite.")
    if np.any(np.diff(x) <= 0):
        raise SplinePreconditionError("Break points must be in ascending order.")
    return x, y



def check_capacity(capacity):
    """Returns capacity as an int, raising if it is not a positive integer."""
    if isinstance(capacity, (bool, np.bool_)) or not isinstance(capacity, (int, np.integer)):
        raise SplinePreconditionError(f"capacity must be a positive integer, got {capacity!r}.")
    if capacity < 1:
        raise SplinePreconditionError(f"capacity must be a positive integer, got {capacity}.")
    return int(capacity)






def oscillating_test_problem(n=100, periods=3.0, a=0.0, b=1.0):
    """Generates samples of a sine with slowly growing amplitude on [a, b].

    The i-th crest is slightly taller than the previous one, so the ranking of
    the maxima is unambiguous.
    """
    x = np.linspace(a, b, n)
    t = (x - a) / (b - a)
    y = (1.0 + 0.25 * t) * np.sin(2.0 * np.pi * periods * t)
    return x, y

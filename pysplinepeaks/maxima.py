import logging
import math
from collections import namedtuple

from .config import SPLINE_CONFIG as cfg
from .peaks import BoundedPeakSet
from .util import check_capacity, SplinePreconditionError, SplineNotBuiltError


logger = logging.getLogger(__name__)


CriticalPoint = namedtuple("CriticalPoint", ["found", "h"])
NO_CRITICAL_POINT = CriticalPoint(False, None)




def cubic_maximum(a, b, c, width):
    """
    Local maximum of the cubic a*h^3 + b*h^2 + c*h + d on [0, width).

    The derivative 3a*h^2 + 2b*h + c has discriminant D = b^2 - 3ac. For a != 0
    the root with negative curvature is h = -(b + sqrt(D)) / (3a); for b < 0
    it is evaluated in the conjugate form h = c / (sqrt(D) - b), which has no
    cancellation. When a == 0 the segment is a parabola and has a maximum only
    if it is concave (b < 0); c >= 0 keeps the vertex at h >= 0.

    The upper end is open so a maximum sitting on a break is only reported by
    the segment that starts there.

    Parameters
    ----------
    a, b, c : float
        Leading coefficients of the segment's cubic.
    width : float
        Length of the segment.

    Returns
    -------
    CriticalPoint
        (True, h) for a maximum at local coordinate h, else (False, None).
    """
    if a != 0.0:
        disc = b*b - 3.0*a*c
        if disc <= 0.0:
            return NO_CRITICAL_POINT
        sqrt_disc = math.sqrt(disc)
        if b >= 0.0:
            h = -(b + sqrt_disc) / (3.0*a)
        else:
            h = c / (sqrt_disc - b)
    elif b < 0.0 and c >= 0.0:
        h = -0.5 * c / b
    else:
        return NO_CRITICAL_POINT

    if 0.0 <= h < width:
        return CriticalPoint(True, h)
    return NO_CRITICAL_POINT




def find_top_maxima(spline, capacity=None, peaks=None):
    """
    Collects the `capacity` highest local maxima of a built cubic spline.

    Every segment is searched for an interior maximum. The two outer breaks
    are also candidates: the first one when the curve descends away from it,
    the last one when the curve is still rising into it.

    Parameters
    ----------
    spline : Spline
        A built spline.
    capacity : int, optional
        Number of maxima to keep. Defaults to SPLINE_CONFIG.maxima.default_capacity.
    peaks : BoundedPeakSet, optional
        Set to fill (it is reset first). If given, capacity is taken from it.

    Returns
    -------
    BoundedPeakSet
        The kept maxima, sorted descending by y.
    """
    if not spline.is_built:
        raise SplineNotBuiltError("To obtain spline maxima it must be created first with interpolation points.")

    if peaks is None:
        if capacity is None:
            capacity = cfg.maxima.default_capacity
        peaks = BoundedPeakSet(check_capacity(capacity))
    else:
        if capacity is not None and check_capacity(capacity) != peaks.capacity:
            raise SplinePreconditionError("capacity does not match the capacity of the given peak set.")
        peaks.reset()

    breaks = spline.breaks
    coeffs = spline.coeffs
    num_segments = spline.num_segments

    for i in range(num_segments):
        a, b, c = float(coeffs[i, 0]), float(coeffs[i, 1]), float(coeffs[i, 2])
        crit = cubic_maximum(a, b, c, float(breaks[i+1] - breaks[i]))
        if crit.found:
            x = float(breaks[i]) + crit.h
            peaks.offer(x, spline.evaluate(x, i))

    # boundaries
    if coeffs[0, 2] < 0.0:
        peaks.offer(float(breaks[0]), float(coeffs[0, 3]))

    last = num_segments - 1
    if spline.derivative(breaks[-1], order=1, segment=last) > 0.0:
        peaks.offer(float(breaks[-1]), spline.evaluate(breaks[-1], last))

    logger.debug("Kept %d of at most %d maxima over %d segments.", peaks.size, peaks.capacity, num_segments)
    return peaks

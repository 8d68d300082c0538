import logging

import numpy as np
from scipy.interpolate import CubicSpline
from scipy.signal import find_peaks

from .config import SPLINE_CONFIG as cfg
from .spline import Spline
from .util import SplinePreconditionError


logger = logging.getLogger(__name__)




def compare_with_scipy(x, y, grid_n=None):
    """Builds a Spline and a natural scipy CubicSpline on the same samples and compares them.
    """
    if grid_n is None:
        grid_n = cfg.comparison.grid_n

    spline = Spline(x, y)
    ref = CubicSpline(spline.breaks, np.asarray(y, dtype=spline.breaks.dtype), bc_type="natural")

    coeff_diff = np.amax(np.abs(spline.coeffs - ref.c.T))
    grid = np.linspace(spline.breaks[0], spline.breaks[-1], grid_n)
    value_diff = np.amax(np.abs(spline(grid) - ref(grid)))

    agree = bool((coeff_diff <= cfg.comparison.coeff_atol) and (value_diff <= cfg.comparison.value_atol))
    if not agree:
        logger.warning("Spline disagrees with scipy CubicSpline: coeffs %.3e, values %.3e.", coeff_diff, value_diff)

    data = {
        "spline": spline,
        "scipy_spline": ref,
        "max_coeff_diff": float(coeff_diff),
        "max_value_diff": float(value_diff),
        "agree": agree,
    }

    return data



def compare_maxima_with_grid(spline, capacity=None, grid_n=None):
    """Compares the analytic maxima of a spline with peaks found on a dense grid.

    Grid peaks come from scipy.signal.find_peaks on the spline sampled over its
    domain; the two outer grid points are added when they are one-sided maxima.
    Each analytic maximum is matched with the nearest of the top grid peaks.
    """
    if grid_n is None:
        grid_n = cfg.comparison.grid_n
    if grid_n < 3:
        raise SplinePreconditionError("grid_n must be at least 3 to locate peaks on a grid.")

    peaks = spline.maxima(capacity)
    breaks = spline.breaks
    grid = np.linspace(breaks[0], breaks[-1], grid_n)
    vals = spline(grid)

    idx, _ = find_peaks(vals)
    idx = list(idx)
    if vals[0] > vals[1]:
        idx.append(0)
    if vals[-1] > vals[-2]:
        idx.append(grid_n - 1)
    idx = np.asarray(idx, dtype=int)
    order = np.argsort(-vals[idx], kind="stable")[:peaks.capacity]
    grid_x = grid[idx[order]]
    grid_y = vals[idx[order]]

    spacing = grid[1] - grid[0]
    if peaks.size > 0 and grid_x.size > 0:
        dist = np.abs(peaks.xs[:, None] - grid_x[None, :])
        nearest = np.amin(dist, axis=1)
        max_x_diff = float(np.amax(nearest))
    else:
        max_x_diff = 0.0 if peaks.size == grid_x.size else np.inf

    agree = bool(peaks.size == grid_x.size and max_x_diff <= cfg.comparison.grid_match_spacings * spacing)
    if not agree:
        logger.warning("Analytic maxima and grid peaks disagree (%d vs %d, max distance %.3e).",
                       peaks.size, grid_x.size, max_x_diff)

    data = {
        "peaks": peaks,
        "grid_x": grid_x,
        "grid_y": grid_y,
        "grid_spacing": spacing,
        "max_x_diff": max_x_diff,
        "agree": agree,
    }

    return data

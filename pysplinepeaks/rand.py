import logging

import numpy as np

from .config import SPLINE_CONFIG as cfg
from .spline import Spline
from .peaks import BoundedPeakSet
from .util import check_capacity


logger = logging.getLogger(__name__)




def rand_maxima(x, ytrue, noise_var, capacity=None, n_samples=None, rseed=None):
    """Given noise-free ordinates, draws noisy samples and records the top maxima of each spline.

    Rows of the returned arrays are padded with NaN when fewer than `capacity`
    maxima are found.

    Returns
    -------
    sample_maxima_abscissas : ndarray, shape (n_samples, capacity)
    sample_maxima_ordinates : ndarray, shape (n_samples, capacity)
    """
    if capacity is None:
        capacity = cfg.maxima.default_capacity
    capacity = check_capacity(capacity)
    if n_samples is None:
        n_samples = cfg.rand.n_samples
    if rseed is None:
        rseed = cfg.rand.rseed
    assert noise_var >= 0, "noise_var must be nonnegative."

    ytrue = np.asarray(ytrue, dtype=float)
    rng = np.random.default_rng(rseed)

    # reuse storage across draws
    spline = Spline()
    peaks = BoundedPeakSet(capacity)

    sample_maxima_abscissas = np.full((n_samples, capacity), np.nan)
    sample_maxima_ordinates = np.full((n_samples, capacity), np.nan)
    for j in range(n_samples):

        ysample = ytrue + np.sqrt(noise_var)*rng.standard_normal(ytrue.size)
        spline.set(x, ysample)
        spline.maxima(peaks=peaks)

        sample_maxima_abscissas[j, :peaks.size] = peaks.xs
        sample_maxima_ordinates[j, :peaks.size] = peaks.ys

    logger.debug("Drew %d noisy splines (noise_var=%g).", n_samples, noise_var)
    return sample_maxima_abscissas, sample_maxima_ordinates

import matplotlib.pyplot as plt
import numpy as np

from .config import SPLINE_CONFIG as cfg



def plot_spline_maxima(spline, peaks=None, samples=None, plot_path=None):
    """Plots a spline over its domain with its ranked maxima.

    samples: optional (x, y) pair drawn as points.
    """

    if peaks is None:
        peaks = spline.maxima()

    breaks = spline.breaks
    grid = np.linspace(breaks[0], breaks[-1], cfg.plot.grid_n)

    fig, axs = plt.subplots(figsize=cfg.plot.figsize)
    axs.plot(grid, spline(grid), color="blue", label="spline")
    if samples is not None:
        axs.scatter(samples[0], samples[1], color="black", s=15, zorder=5, label="samples")
    axs.scatter(peaks.xs, peaks.ys, color="red", marker="x", s=100, zorder=10, label=f"top {peaks.size} maxima")
    for rank, (x, y) in enumerate(peaks, start=1):
        axs.annotate(str(rank), (x, y), textcoords="offset points", xytext=(0, 8), ha="center")
    axs.set_title("Spline maxima")
    axs.set_xlabel("$x$")
    axs.legend()

    if plot_path is not None:
        fig.savefig(plot_path, dpi=cfg.plot.dpi)
        plt.close()
        return None
    else:
        plt.show()
        return None



def plot_rand_maxima(sample_maxima_abscissas, sample_maxima_ordinates, plot_path=None):
    """Scatter of the maxima found across randomized draws, colored by rank.
    """

    fig, axs = plt.subplots(figsize=cfg.plot.figsize)
    n_ranks = sample_maxima_abscissas.shape[1]
    for k in range(n_ranks):
        axs.scatter(sample_maxima_abscissas[:, k], sample_maxima_ordinates[:, k], s=10, alpha=0.5, label=f"rank {k+1}")
    axs.set_title("Maxima over noisy redraws")
    axs.set_xlabel("$x$")
    axs.set_ylabel("$y$")
    if n_ranks <= 10:
        axs.legend()

    if plot_path is not None:
        fig.savefig(plot_path, dpi=cfg.plot.dpi)
        plt.close()
        return None
    else:
        plt.show()
        return None

"""
Spline Configuration

Centralized defaults for the spline engine and its helpers.

Usage:
    from pysplinepeaks.config import SPLINE_CONFIG as cfg

    peaks = find_top_maxima(spline, cfg.maxima.default_capacity)
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class MaximaConfig:
    """Configuration for maxima extraction."""

    # Number of maxima kept when no capacity is given
    default_capacity: int = 10


@dataclass(frozen=True)
class ComparisonConfig:
    """Configuration for cross-checks against SciPy."""

    # Points in the dense evaluation grid
    grid_n: int = 20001

    # Agreement tolerances
    coeff_atol: float = 1e-8
    value_atol: float = 1e-8

    # Maxima located on the grid must lie within this many grid spacings
    grid_match_spacings: float = 2.0


@dataclass(frozen=True)
class RandConfig:
    """Configuration for randomized maxima studies."""

    n_samples: int = 100
    rseed: int = 0


@dataclass(frozen=True)
class PlotConfig:
    """Configuration for plotting helpers."""

    grid_n: int = 2001
    dpi: int = 250
    figsize: tuple = (8, 5)


@dataclass(frozen=True)
class SplineConfig:
    """Master configuration."""

    maxima: MaximaConfig = field(default_factory=MaximaConfig)
    comparison: ComparisonConfig = field(default_factory=ComparisonConfig)
    rand: RandConfig = field(default_factory=RandConfig)
    plot: PlotConfig = field(default_factory=PlotConfig)


SPLINE_CONFIG = SplineConfig()

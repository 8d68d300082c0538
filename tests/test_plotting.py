# tests/test_plotting.py
import matplotlib
matplotlib.use("Agg")

from pysplinepeaks import Spline, rand_maxima
from pysplinepeaks.plotting import plot_spline_maxima, plot_rand_maxima
from pysplinepeaks.util import oscillating_test_problem



def test_plots_are_saved(tmp_path):
    x, y = oscillating_test_problem(n=40, periods=2.0)
    spl = Spline(x, y)

    path = tmp_path / "maxima.png"
    plot_spline_maxima(spl, samples=(x, y), plot_path=path)
    assert path.exists()

    xs, ys = rand_maxima(x, y, noise_var=1e-3, capacity=3, n_samples=5)
    path = tmp_path / "rand.png"
    plot_rand_maxima(xs, ys, plot_path=path)
    assert path.exists()

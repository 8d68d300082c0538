from .spline import Spline, build_spline, evaluate_spline
from .peaks import BoundedPeakSet
from .maxima import cubic_maximum, find_top_maxima, CriticalPoint
from .storage import FixedStorage, GrowableStorage
from .util import SplinePreconditionError, SplineNotBuiltError
from .comparisons import compare_with_scipy, compare_maxima_with_grid
from .rand import rand_maxima

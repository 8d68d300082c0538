# tests/test_storage.py
import numpy as np
import pytest

from pysplinepeaks import Spline, FixedStorage, GrowableStorage, SplinePreconditionError



def test_fixed_and_growable_storage_build_the_same_spline():
    x = np.linspace(0.0, 2.0, 9)
    y = np.cos(3.0 * x)

    grow = Spline(x, y, storage=GrowableStorage())
    fixed = Spline(x, y, storage=FixedStorage(20))

    np.testing.assert_array_equal(grow.breaks, fixed.breaks)
    np.testing.assert_allclose(grow.coeffs, fixed.coeffs, atol=0.0)
    assert fixed.num_breaks == 9
    assert fixed.coeffs.shape == (8, 4)



def test_fixed_storage_rejects_too_many_points():
    spl = Spline([0.0, 1.0, 2.0], [1.0, 2.0, 1.0], storage=FixedStorage(3))
    before = spl.coeffs.copy()

    with pytest.raises(SplinePreconditionError):
        spl.set([0.0, 1.0, 2.0, 3.0], [0.0, 0.0, 0.0, 0.0])

    # unchanged after the failed build
    assert spl.num_breaks == 3
    np.testing.assert_array_equal(spl.coeffs, before)

    with pytest.raises(SplinePreconditionError):
        FixedStorage(1)



def test_fixed_storage_casts_to_its_dtype():
    spl = Spline([0.0, 1.0, 2.0], [0.0, 1.0, 0.0], storage=FixedStorage(4, dtype=np.float32))
    assert spl.breaks.dtype == np.float32
    assert spl.coeffs.dtype == np.float32
    assert spl(1.0) == pytest.approx(1.0)



def test_growable_storage_reuses_memory_when_shrinking():
    storage = GrowableStorage()
    spl = Spline(np.arange(10.0), np.zeros(10), storage=storage)
    assert storage.capacity == 10

    spl.set(np.arange(4.0), np.arange(4.0))
    assert storage.capacity == 10
    assert spl.num_breaks == 4
    np.testing.assert_allclose(spl(np.arange(4.0)), np.arange(4.0), atol=1e-12)

    spl.set(np.arange(12.0), np.zeros(12))
    assert storage.capacity == 12



def test_breaks_view_shares_storage_until_copied():
    storage = GrowableStorage()
    spl = Spline([0.0, 1.0, 2.0], [0.0, 1.0, 0.0], storage=storage)
    view = spl.breaks
    kept = spl.breaks.copy()

    spl.set([5.0, 6.0], [1.0, 2.0])

    # the rebuild fit the allocation, so the old view sees the new breaks
    assert view[0] == 5.0
    np.testing.assert_array_equal(kept, [0.0, 1.0, 2.0])

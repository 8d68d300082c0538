# tests/test_peaks.py
import numpy as np
import pytest

from pysplinepeaks import BoundedPeakSet, SplinePreconditionError



def test_keeps_descending_order_and_capacity_randomized():
    rng = np.random.default_rng(42)
    repeats = 50

    for _ in range(repeats):
        capacity = int(rng.integers(1, 8))
        ys = rng.standard_normal(int(rng.integers(0, 30)))
        peaks = BoundedPeakSet(capacity)

        for k, y in enumerate(ys):
            peaks.offer(float(k), y)
            assert peaks.size <= capacity
            assert np.all(np.diff(peaks.ys) <= 0.0)

        expected = np.sort(ys)[::-1][:capacity]
        np.testing.assert_array_equal(peaks.ys, expected)
        # abscissas travel with their ordinates
        np.testing.assert_array_equal(ys[peaks.xs.astype(int)], peaks.ys)



def test_capacity_plus_one_increasing_offers():
    peaks = BoundedPeakSet(3)
    for k in range(4):
        assert peaks.offer(10.0 + k, float(k))

    assert peaks.full
    assert peaks.to_list() == [(13.0, 3.0), (12.0, 2.0), (11.0, 1.0)]



def test_offer_below_minimum_is_a_noop_when_full():
    peaks = BoundedPeakSet(2)
    peaks.offer(0.0, 5.0)
    peaks.offer(1.0, 3.0)
    before = peaks.to_list()

    assert not peaks.offer(2.0, 1.0)
    assert not peaks.offer(3.0, 3.0)  # equal to the minimum
    assert peaks.to_list() == before

    assert peaks.offer(4.0, 4.0)
    assert peaks.to_list() == [(0.0, 5.0), (4.0, 4.0)]



def test_ties_keep_first_seen_first():
    peaks = BoundedPeakSet(4)
    peaks.offer(0.0, 1.0)
    peaks.offer(1.0, 2.0)
    peaks.offer(2.0, 1.0)
    peaks.offer(3.0, 2.0)

    assert [x for x, _ in peaks] == [1.0, 3.0, 0.0, 2.0]

    # full set: an equal candidate does not displace the first-seen one
    assert not peaks.offer(4.0, 1.0)
    assert peaks.offer(5.0, 2.0)
    assert [x for x, _ in peaks] == [1.0, 3.0, 5.0, 0.0]



def test_accessors_reset_and_str():
    peaks = BoundedPeakSet(3)
    assert len(peaks) == 0 and not peaks.full
    assert str(peaks) == ""

    peaks.offer(0.5, 1.5)
    peaks.offer(2.0, 3.0)

    assert peaks.capacity == 3
    assert len(peaks) == 2
    assert peaks.x(0) == 2.0 and peaks.y(0) == 3.0
    assert peaks.x(1) == 0.5 and peaks.y(1) == 1.5
    assert str(peaks) == "2 3\n0.5 1.5"
    with pytest.raises(IndexError):
        peaks.x(2)
    with pytest.raises(ValueError):
        peaks.ys[0] = 0.0

    peaks.reset()
    assert peaks.size == 0
    assert peaks.xs.size == 0
    assert peaks.capacity == 3



def test_invalid_capacity_and_nan():
    for capacity in [0, -1, 2.5, True, None]:
        with pytest.raises(SplinePreconditionError):
            BoundedPeakSet(capacity)

    peaks = BoundedPeakSet(1)
    with pytest.raises(SplinePreconditionError):
        peaks.offer(0.0, np.nan)

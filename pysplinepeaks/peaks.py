import numpy as np

from .util import check_capacity, SplinePreconditionError




class BoundedPeakSet:
    """Keeps the `capacity` largest-by-y points (x, y) offered so far, sorted descending by y.

    Storage is two fixed-size arrays owned by the set; entries are copied in
    by value. An offer costs O(capacity) in the worst case (search plus a
    shift of the lower-ranked tail).

    Ties: a candidate whose y equals kept entries is placed after them
    (first seen ranks first), and when the set is full a candidate equal to
    the current minimum is rejected.
    """

    def __init__(self, capacity, dtype=np.float64):
        self._capacity = check_capacity(capacity)
        self._x = np.zeros(self._capacity, dtype=dtype)
        self._y = np.zeros(self._capacity, dtype=dtype)
        self._size = 0


    @property
    def capacity(self):
        return self._capacity

    @property
    def size(self):
        return self._size

    @property
    def full(self):
        return self._size == self._capacity

    def __len__(self):
        return self._size


    def x(self, i):
        """Abscissa of the i-th highest kept point."""
        return float(self._x[self._check_index(i)])

    def y(self, i):
        """Ordinate of the i-th highest kept point."""
        return float(self._y[self._check_index(i)])

    def _check_index(self, i):
        if not 0 <= i < self._size:
            raise IndexError(f"index {i} out of range for BoundedPeakSet of size {self._size}")
        return i

    @property
    def xs(self):
        view = self._x[:self._size]
        view.flags.writeable = False
        return view

    @property
    def ys(self):
        view = self._y[:self._size]
        view.flags.writeable = False
        return view


    def reset(self):
        """Empties the set, keeping its storage."""
        self._x[:] = 0.0
        self._y[:] = 0.0
        self._size = 0


    def offer(self, x, y):
        """Offers candidate (x, y). Returns True if it was kept.
        """
        if np.isnan(y):
            raise SplinePreconditionError("Cannot rank a candidate with NaN ordinate.")

        n = self._size
        if n == self._capacity:
            if not y > self._y[n-1]:
                return False
            # evict the minimum
            n -= 1

        # descending order: insert after every entry with y >= candidate
        pos = int(np.searchsorted(-self._y[:n], -y, side="right"))
        self._x[pos+1:n+1] = self._x[pos:n]
        self._y[pos+1:n+1] = self._y[pos:n]
        self._x[pos] = x
        self._y[pos] = y
        self._size = n + 1
        return True


    def __iter__(self):
        for i in range(self._size):
            yield float(self._x[i]), float(self._y[i])

    def to_list(self):
        return list(self)

    def __str__(self):
        return "\n".join(f"{x:g} {y:g}" for x, y in self)

    def __repr__(self):
        return f"BoundedPeakSet(capacity={self._capacity}, peaks={self.to_list()})"

"""Dense rank-2/rank-3 grid of float64 values.

This module exposes the `Grid` class, a bounds-checked façade over a NumPy
array, plus the rank-fixed `Grid2D` and `Grid3D` conveniences.

Notes
-----
- Storage is a C-ordered ``float64`` array owned by the grid; `toarray`
  hands out copies.
- Indices are never wrapped: negative coordinates are out of bounds.
- Every mutating operation validates its input before writing, so a failed
  call leaves the grid unchanged.

Contents
--------
- `Grid`: construction, element access, uniform/sequence/constant fills,
  minimum search.
- `Grid2D`, `Grid3D`: rank-fixed constructors.
"""

import logging
import operator

import numpy as np

from .._runtime import get_fill_range, get_seed
from ..errors import OutOfBounds, RankMismatch, ShapeMismatch
from .base import GridBase

logger = logging.getLogger(__name__)


class Grid(GridBase):
    """Dense grid of rank 2 or 3.

    Parameters
    ----------
    shape : tuple[int, ...]
        Grid shape of length 2 or 3; every dimension must be positive.

    Attributes
    ----------
    shape : tuple[int, ...]
        Grid dimensions, fixed at construction.
    ndim : int
        Number of dimensions (``len(shape)``).
    size : int
        Number of cells.

    Raises
    ------
    InvalidShape
        If the shape is not rank 2 or 3 or has a non-positive dimension.

    Examples
    --------
    Fill a small grid and search it::

        >>> from gridlab import Grid
        >>> g = Grid((2, 2))
        >>> g.fill_from_sequence([5, 3, 8, 1])
        >>> g.get((1, 0))
        8.0
        >>> r = g.find_minimum()
        >>> r.value, r.coordinates
        (1.0, (1, 1))
        >>> r.describe()
        '1.00 (coordinates: [1, 1])'
    """

    def __init__(self, shape):
        super().__init__(shape, dtype=np.float64)
        self._data = np.zeros(self.shape, dtype=self.dtype)

    @staticmethod
    def create(shape):
        """Allocate a zero-filled :class:`Grid` of the given shape.

        Always returns a plain ``Grid``, also when called on ``Grid2D`` or
        ``Grid3D``.
        """
        return Grid(shape)

    def _check_index(self, index):
        if isinstance(index, (int, np.integer)):
            index = (index,)
        index = tuple(index)
        if len(index) != self.ndim:
            raise RankMismatch(index, self.ndim)
        try:
            idx = tuple(operator.index(i) for i in index)
        except TypeError:
            raise TypeError(f"grid indices must be integers, got {index!r}") from None
        for i, n in zip(idx, self.shape):
            if not 0 <= i < n:
                raise OutOfBounds(idx, self.shape)
        return idx

    def get(self, index):
        """Return the value at ``index`` as a Python float.

        Raises
        ------
        RankMismatch
            If ``len(index)`` differs from ``ndim``.
        OutOfBounds
            If any coordinate lies outside ``[0, shape[d])``.
        """
        return float(self._data[self._check_index(index)])

    def set(self, index, value):
        """Write ``value`` at ``index``. Raises like :meth:`get`."""
        idx = self._check_index(index)
        self._data[idx] = float(value)

    __getitem__ = get
    __setitem__ = set

    def indices(self):
        """Iterate over all index tuples in row-major order."""
        return np.ndindex(*self.shape)

    def fill_uniform_random(self, low=None, high=None, rng=None):
        """Overwrite every cell with a uniform draw from ``[low, high)``.

        Parameters
        ----------
        low, high : float, optional
            Bounds of the draw; default to :func:`gridlab.get_fill_range`.
        rng : numpy.random.Generator, optional
            Source of uniform doubles in ``[0, 1)``. When omitted, a new
            generator seeded with :func:`gridlab.get_seed` is created for
            this call.

        Raises
        ------
        ValueError
            If ``low >= high``.
        """
        default_low, default_high = get_fill_range()
        low = default_low if low is None else float(low)
        high = default_high if high is None else float(high)
        if not low < high:
            raise ValueError("fill_uniform_random requires low < high")
        if rng is None:
            rng = np.random.default_rng(get_seed())
        u = np.asarray(rng.random(self.shape), dtype=np.float64)
        values = low + u * (high - low)
        # rounding in low + u*(high-low) can land on high
        np.minimum(values, np.nextafter(high, low), out=values)
        self._data[...] = values
        logger.debug("filled %s uniformly from [%r, %r)", self.dimensions_label(), low, high)

    def fill_from_sequence(self, values):
        """Fill cells from ``values`` given in row-major order.

        Raises
        ------
        ShapeMismatch
            If the number of values differs from ``size``.
        """
        arr = np.asarray(values, dtype=np.float64).reshape(-1)
        if arr.size != self.size:
            raise ShapeMismatch(
                f"expected {self.size} values for shape {self.shape}, got {arr.size}"
            )
        self._data[...] = arr.reshape(self.shape)
        logger.debug("filled %s from sequence", self.dimensions_label())

    def fill_constant(self, value):
        """Set every cell to ``value``."""
        self._data.fill(float(value))

    def find_minimum(self):
        """Smallest value and its first row-major coordinates.

        See :func:`gridlab.searching.find_minimum`.
        """
        from ..searching import find_minimum

        return find_minimum(self)

    def toarray(self):
        """Return a copy of the cells as a NumPy ``ndarray``."""
        return self._data.copy()


class Grid2D(Grid):
    """Two-dimensional grid, ``rows x cols`` (3x3 by default)."""

    def __init__(self, rows=3, cols=3):
        super().__init__((rows, cols))


class Grid3D(Grid):
    """Three-dimensional grid, ``rows x cols x depth`` (3x3x3 by default)."""

    def __init__(self, rows=3, cols=3, depth=3):
        super().__init__((rows, cols, depth))

"""Base class for dense grids.

Holds the shape/rank bookkeeping shared by the concrete grid types in
`gridlab.grid`, including shape validation and the dimension label.
"""

import operator

from ..errors import InvalidShape
from ..formatting import dimensions_label

SUPPORTED_RANKS = (2, 3)


def _normalize_shape(shape):
    try:
        dims = tuple(operator.index(d) for d in shape)
    except TypeError:
        raise InvalidShape(f"shape must be a sequence of integers, got {shape!r}") from None
    if len(dims) not in SUPPORTED_RANKS:
        raise InvalidShape(f"grid rank must be 2 or 3, got shape {dims}")
    if any(d <= 0 for d in dims):
        raise InvalidShape(f"all dimensions must be positive, got shape {dims}")
    return dims


class GridBase:
    """Abstract base class for rank-2 and rank-3 dense grids.

    Parameters
    ----------
    shape : tuple[int, ...]
        Grid shape of length 2 or 3. Stored as a tuple.
    dtype : Any, optional
        Element dtype metadata (informational for base class).

    Attributes
    ----------
    shape : tuple[int, ...]
        Grid shape, read-only.
    ndim : int
        Number of dimensions, equal to ``len(shape)``.
    size : int
        Total number of cells.
    dtype : Any
        Element type metadata.

    Raises
    ------
    InvalidShape
        If the rank is not 2 or 3 or any dimension is not a positive integer.
    """

    def __init__(self, shape, dtype=None):
        self._shape = _normalize_shape(shape)
        self.dtype = dtype

    @property
    def shape(self):
        return self._shape

    @property
    def ndim(self):
        return len(self._shape)

    @property
    def size(self):
        n = 1
        for d in self._shape:
            n *= d
        return n

    def dimensions_label(self):
        """Human-readable rank and extents, e.g. ``"3D (3x3x3)"``."""
        return dimensions_label(self._shape)

    def __repr__(self):
        return f"{type(self).__name__}(shape={self._shape})"

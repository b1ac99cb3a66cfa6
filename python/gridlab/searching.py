"""Minimum search over dense grids."""

import logging

import numpy as np

from .errors import EmptyGrid
from .grid.dense import Grid
from .result import MinResult

logger = logging.getLogger(__name__)


def _as_array(x):
    if isinstance(x, Grid):
        return x._data
    return np.asarray(x, dtype=np.float64)


def find_minimum(x):
    """Find the smallest value and the coordinates of its first occurrence.

    Cells are visited in row-major order (last axis fastest) and compared with
    strict ``<``, so among equal minima the earliest cell wins. NaN cells never
    win; a grid holding only NaN reports its first cell.

    Parameters
    ----------
    x : Grid or array_like
        Grid to search.

    Returns
    -------
    MinResult
        Value and coordinates. The coordinates tuple has one entry per axis.

    Raises
    ------
    EmptyGrid
        If ``x`` holds no cells.
    """
    data = _as_array(x)
    if data.size == 0:
        raise EmptyGrid(f"cannot search an empty grid of shape {data.shape}")
    flat = data.ravel(order="C")
    nan = np.isnan(flat)
    if nan.all():
        pos = 0
    elif nan.any():
        valid = np.flatnonzero(~nan)
        pos = int(valid[np.argmin(flat[valid])])
    else:
        pos = int(np.argmin(flat))
    coords = tuple(int(i) for i in np.unravel_index(pos, data.shape))
    result = MinResult(value=float(flat[pos]), coordinates=coords)
    logger.debug("minimum of shape %s: %r at %s", data.shape, result.value, coords)
    return result
